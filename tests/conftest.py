#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for PyNDL tests

Provides synthetic ACE-like records for testing table decoding, models,
readers and HDF5 export without requiring real ACE data files.  Table
stand-ins mimic ``endf.ace.Table``: ``nxs``, ``jxs`` and ``xss`` carry a
leading zero so that indices follow the 1-based ACE numbering.
"""

from __future__ import annotations

from types import SimpleNamespace

import numpy as np
import pytest
from endf.ace import TableType

from pyndl.models.tabulated import MultiRegion1D, Region1D
from pyndl.readers.ace import ACEAccessor


def _tab1(x, y, nbt=(), ints=()) -> list[float]:
    """Flatten a tabulated function into NR, NBT, INT, NE, x, y."""
    return [len(nbt), *nbt, *ints, len(x), *x, *y]


def _law5(x, theta, bins, nbt=(), ints=()) -> list[float]:
    """Flatten a law-5 block: temperature table, NX, bin bounds."""
    return _tab1(x, theta, nbt, ints) + [len(bins), *bins]


def _neutron_table(reactions) -> SimpleNamespace:
    """Assemble MTR / LDLW / DLW blocks for ``[(mt, [(law, data), ...]), ...]``."""
    xss: list[float] = [0.0]
    nr = len(reactions)
    mtr = len(xss)
    xss += [mt for mt, _ in reactions]
    ldlw = len(xss)
    xss += [0] * nr
    dlw = len(xss)

    for i, (_, laws) in enumerate(reactions):
        xss[ldlw + i] = len(xss) - dlw + 1
        for j, (law, data) in enumerate(laws):
            k = len(xss)
            xss += [0, law, 0]
            xss += _tab1([1.0e-11, 20.0], [1.0, 1.0])
            xss[k + 2] = len(xss) - dlw + 1
            xss += data
            if j < len(laws) - 1:
                xss[k] = len(xss) - dlw + 1

    nxs = np.zeros(17, dtype=int)
    nxs[4] = nr
    nxs[5] = nr
    jxs = np.zeros(33, dtype=int)
    jxs[3] = mtr
    jxs[10] = ldlw
    jxs[11] = dlw
    return SimpleNamespace(
        name="26056.80c",
        data_type=TableType.NEUTRON_CONTINUOUS,
        atomic_weight_ratio=55.454,
        kT=2.5301e-8,
        nxs=nxs,
        jxs=jxs,
        xss=np.array(xss, dtype="f8"),
    )


def _write_ascii_ace(path, table) -> None:
    """Write a table stand-in as a legacy-header ASCII ACE file.

    The leading zero of ``nxs``, ``jxs`` and ``xss`` is dropped on
    writing; ``endf`` restores it when reading.  ``NXS(1)`` is set to
    the XSS length.
    """
    nxs = np.array(table.nxs, dtype=int)
    nxs[1] = table.xss.size - 1
    lines = [
        f"{table.name:<10s}{table.atomic_weight_ratio:12.6f} {table.kT:11.4e} 10/18/26",
        f"{'synthetic test table':<70s}{'mat9999':>10s}",
    ]
    lines += ["".join(f"{0:7d}{0.0:11.0f}" for _ in range(4)) for _ in range(4)]
    lines += ["".join(f"{v:9d}" for v in nxs[1 + 8 * i:9 + 8 * i]) for i in range(2)]
    lines += ["".join(f"{v:9d}" for v in table.jxs[1 + 8 * i:9 + 8 * i]) for i in range(4)]
    xss = table.xss[1:]
    lines += [
        "".join(f"{v:20.11E}" for v in xss[i:i + 4]) for i in range(0, xss.size, 4)
    ]
    path.write_text("\n".join(lines) + "\n")


@pytest.fixture
def ace_file(tmp_path):
    """Builder that writes a table stand-in to ``tmp_path`` as ASCII ACE"""

    def _write(table):
        path = tmp_path / table.name
        _write_ascii_ace(path, table)
        return path

    return _write


@pytest.fixture
def tab1_record():
    """Builder for flat tabulated-function records"""
    return _tab1


@pytest.fixture
def law5_record():
    """Builder for flat general-evaporation records"""
    return _law5


@pytest.fixture
def lin_lin_table() -> Region1D:
    """Four-point lin-lin table"""
    return Region1D([1.0, 2.0, 4.0, 8.0], [10.0, 20.0, 15.0, 5.0], 2)


@pytest.fixture
def two_region_table() -> MultiRegion1D:
    """NBT=[3, 5], INT=[lin-lin, log-log] over five points"""
    return MultiRegion1D(
        [3, 5],
        [2, 5],
        [1.0, 2.0, 4.0, 8.0, 16.0],
        [1.0, 3.0, 5.0, 20.0, 40.0],
    )


@pytest.fixture
def thermal_table() -> SimpleNamespace:
    """Thermal table with three Bragg edges (MeV) in coherent mode"""
    edges = [1.0e-9, 4.0e-9, 9.0e-9]
    sums = [2.0e-9, 5.0e-9, 6.0e-9]
    nxs = np.zeros(17, dtype=int)
    nxs[5] = 4
    jxs = np.zeros(33, dtype=int)
    jxs[4] = 1
    return SimpleNamespace(
        name="grph.20t",
        data_type=TableType.THERMAL_SCATTERING,
        atomic_weight_ratio=11.898,
        kT=2.5301e-8,
        nxs=nxs,
        jxs=jxs,
        xss=np.array([0.0, len(edges), *edges, *sums], dtype="f8"),
    )


@pytest.fixture
def thermal_ace(thermal_table) -> ACEAccessor:
    return ACEAccessor(thermal_table)


@pytest.fixture
def neutron_table() -> SimpleNamespace:
    """Neutron table with two law-5 reactions

    * MT=91: one law-5 block, NR=0, constant 1 MeV temperature,
      bins [0, 1, 3].
    * MT=16: a law-9 block followed by a law-5 block with one explicit
      lin-lin region, temperature 1 → 2 MeV, bins [0.5, 2].
    """
    return _neutron_table(
        [
            (91, [(5, _law5([1.0e-11, 20.0], [1.0, 1.0], [0.0, 1.0, 3.0]))]),
            (
                16,
                [
                    (9, _tab1([1.0, 20.0], [0.5, 0.7]) + [0.0]),
                    (5, _law5([1.0, 10.0, 20.0], [1.0, 1.5, 2.0], [0.5, 2.0], [3], [2])),
                ],
            ),
        ]
    )


@pytest.fixture
def neutron_ace(neutron_table) -> ACEAccessor:
    return ACEAccessor(neutron_table)
