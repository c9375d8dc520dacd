#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
ACE table reader

Loads ACE tables with the ``endf`` package and exposes them through the
:class:`~pyndl.readers.base.RecordAccessor` interface, so that models can
be decoded directly from the ``XSS`` array.

Indexing
--------
``endf`` pads the ``NXS``, ``JXS`` and ``XSS`` arrays with a leading
zero, so their indices match the 1-based numbering of the ACE manual.
:class:`ACEAccessor` keeps that convention: ``JXS`` locators are valid
``XSS`` offsets without any shift.

Energy Distributions
--------------------
:func:`energy_law_locations` walks the DLW block of a continuous-energy
neutron table.  For reaction ``i`` (1-based, among the ``NXS(5)``
reactions with secondary neutrons)::

    LOCC = XSS[JXS(10) + i - 1]
    k    = JXS(11) + LOCC - 1           first law of the chain
    LNW, LAW, IDAT = XSS[k], XSS[k+1], XSS[k+2]
    law data at JXS(11) + IDAT - 1
    next law at JXS(11) + LNW - 1       (LNW == 0 ends the chain)

References
----------
.. [1] A Compact ENDF (ACE) Format Specification, LA-UR-19-29016.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

try:
    from endf.ace import Table, TableType, get_table
except ImportError as _exc:  # pragma: no cover
    raise ImportError(
        "The 'endf' package is required by ACEReader.  "
        "Install it with: pip install endf"
    ) from _exc

from pyndl.exceptions import DataFormatError, FileFormatError
from pyndl.models.evaporation import GeneralEvaporation
from pyndl.readers.base import RecordAccessor
from pyndl.utils.constants import (
    EV_PER_MEV,
    JXS_DLW,
    JXS_LDLW,
    JXS_MTR,
    LAW_GENERAL_EVAPORATION,
    NXS_NR,
)

logger = logging.getLogger(__name__)


class ACEAccessor(RecordAccessor):
    """Record accessor over the ``XSS`` array of an ACE table

    Parameters
    ----------
    table : endf.ace.Table
        Loaded ACE table.  Any object with ``name``, ``nxs``, ``jxs``,
        ``xss``, ``atomic_weight_ratio`` and ``kT`` attributes works.
    """

    def __init__(self, table: Table) -> None:
        xss = np.array(table.xss, dtype="f8").ravel()
        xss.flags.writeable = False
        self._table = table
        self._xss = xss

    def _data(self) -> np.ndarray:
        return self._xss

    @property
    def name(self) -> str:
        """ZAID-style table name, e.g. ``"grph.20t"``."""
        return str(self._table.name)

    @property
    def is_thermal(self) -> bool:
        """``True`` for thermal scattering tables."""
        return self._table.data_type is TableType.THERMAL_SCATTERING

    @property
    def atomic_weight_ratio(self) -> float:
        return float(self._table.atomic_weight_ratio)

    @property
    def temperature(self) -> float:
        """Table temperature kT in eV."""
        return float(self._table.kT) * EV_PER_MEV

    def nxs(self, i: int) -> int:
        """Return ``NXS(i)`` (1-based)."""
        return self._header_entry(self._table.nxs, i, "NXS")

    def jxs(self, i: int) -> int:
        """Return ``JXS(i)`` (1-based)."""
        return self._header_entry(self._table.jxs, i, "JXS")

    def _header_entry(self, array, i: int, label: str) -> int:
        if not 1 <= i < len(array):
            raise DataFormatError(f"{label}({i}) is outside the header of table {self.name}.")
        return int(array[i])

    def __repr__(self) -> str:
        return f"ACEAccessor(name={self.name!r}, len={len(self)})"


class ACEReader:
    """Reader for ACE-format files

    Examples
    --------
    >>> ace = ACEReader().read("tsl/grph.20t")
    >>> ace.name
    'grph.20t'
    """

    def read(self, path: Path | str, name: str | None = None) -> ACEAccessor:
        """Load one table from an ACE file

        Parameters
        ----------
        path : Path | str
            Path to the ACE file.
        name : str, optional
            Table to load when the file holds several; the first table
            is used by default.

        Raises
        ------
        FileFormatError
            If the file is missing or ``endf`` cannot load it.
        """
        filepath = Path(path)
        logger.debug("Opening ACE file: %s", filepath)

        if not filepath.is_file():
            raise FileFormatError(f"ACE file not found: {filepath}")

        try:
            table = get_table(str(filepath), name)
        except Exception as exc:
            raise FileFormatError(
                f"Failed to open {filepath} with endf library: {exc}"
            ) from exc

        accessor = ACEAccessor(table)
        logger.debug("Loaded ACE table %s (%d XSS entries)", accessor.name, len(accessor))
        return accessor


# ---------------------------------------------------------------------------
# Energy distributions
# ---------------------------------------------------------------------------

def energy_law_locations(ace: ACEAccessor) -> dict[int, list[tuple[int, int]]]:
    """Locate every secondary-neutron energy law of a neutron table

    Returns
    -------
    dict[int, list[tuple[int, int]]]
        For each MT number, the chain of ``(law, offset)`` pairs, where
        *offset* is the ``XSS`` position of the law data.

    Raises
    ------
    DataFormatError
        If a law chain points backwards or runs past the record.
    """
    nr = ace.nxs(NXS_NR)
    ldlw = ace.jxs(JXS_LDLW)
    dlw = ace.jxs(JXS_DLW)
    if nr == 0 or ldlw == 0:
        return {}

    mts = ace.sequence(ace.jxs(JXS_MTR), nr, dtype=int)
    locators = ace.sequence(ldlw, nr, dtype=int)

    locations: dict[int, list[tuple[int, int]]] = {}
    for mt, locc in zip(mts.tolist(), locators.tolist()):
        chain: list[tuple[int, int]] = []
        k = dlw + locc - 1
        while True:
            lnw = ace.integer(k)
            law = ace.integer(k + 1)
            idat = ace.integer(k + 2)
            chain.append((law, dlw + idat - 1))
            if lnw == 0:
                break
            next_k = dlw + lnw - 1
            if next_k <= k:
                raise DataFormatError(
                    f"MT={mt}: next energy law at {next_k} does not follow {k}."
                )
            k = next_k
        locations[mt] = chain
        logger.debug("MT=%d energy laws: %s", mt, [law for law, _ in chain])

    return locations


def read_general_evaporations(ace: ACEAccessor) -> dict[int, GeneralEvaporation]:
    """Build every general evaporation spectrum (law 5) of a neutron table

    Reactions whose chain holds several law-5 entries keep the first.
    """
    spectra: dict[int, GeneralEvaporation] = {}
    for mt, chain in energy_law_locations(ace).items():
        for law, offset in chain:
            if law == LAW_GENERAL_EVAPORATION:
                spectra[mt] = GeneralEvaporation.from_record(ace, offset)
                break
    logger.debug("Found %d general evaporation spectra in %s", len(spectra), ace.name)
    return spectra
