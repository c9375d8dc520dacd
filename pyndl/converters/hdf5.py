#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 export of PyNDL tables and models

Writes the decoded data of an ACE table in a self-describing HDF5 file.
Energies are stored in eV and every tabulated function keeps its
breakpoints and interpolation codes, so the file can be read back into
identical models with the ``read_*_group`` functions.

HDF5 Layout
-----------
::

    /metadata/
        name, AWR, kT

    /coherent_elastic/                 (thermal tables)
        bragg_edges, structure_factor_sum

    /evaporation/MT_{mt:03d}/          (neutron tables, law 5)
        temperature/
            x, y, breakpoints, interpolation
        bin_bounds
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

try:
    import h5py
except ImportError as _exc:
    raise ImportError(
        "The 'h5py' package is required.  Install with: pip install h5py"
    ) from _exc

from pyndl.exceptions import ConversionError, PyNDLError
from pyndl.models.coherent_elastic import STCoherentElastic
from pyndl.models.evaporation import GeneralEvaporation
from pyndl.models.tabulated import MultiRegion1D, Region1D, Tabulated1D
from pyndl.readers.ace import ACEAccessor, ACEReader, read_general_evaporations

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Tabulated functions
# ---------------------------------------------------------------------------

def write_tabulated(grp: h5py.Group, table: Tabulated1D, *, y_units: str | None = None) -> None:
    """Write a tabulated function with its breakpoint/interpolation info."""
    ds_x = grp.create_dataset("x", data=table.x)
    ds_x.attrs["units"] = "eV"
    ds_y = grp.create_dataset("y", data=table.y)
    if y_units is not None:
        ds_y.attrs["units"] = y_units
    grp.create_dataset("breakpoints", data=np.asarray(table.breakpoints, dtype="i8"))
    grp.create_dataset(
        "interpolation",
        data=np.array([int(law) for law in table.interpolation], dtype="i4"),
    )


def read_tabulated_group(grp: h5py.Group) -> Tabulated1D:
    """Rebuild a tabulated function written by :func:`write_tabulated`."""
    x = grp["x"][()]
    y = grp["y"][()]
    breakpoints = grp["breakpoints"][()]
    laws = grp["interpolation"][()]
    if breakpoints.size == 1:
        return Region1D(x, y, int(laws[0]))
    return MultiRegion1D(breakpoints, laws, x, y)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

def write_general_evaporation(grp: h5py.Group, law: GeneralEvaporation) -> None:
    """Write a general evaporation spectrum."""
    write_tabulated(grp.create_group("temperature"), law.temperature, y_units="eV")
    grp.create_dataset("bin_bounds", data=law.bin_bounds)


def read_general_evaporation_group(grp: h5py.Group) -> GeneralEvaporation:
    """Rebuild a spectrum written by :func:`write_general_evaporation`."""
    return GeneralEvaporation(read_tabulated_group(grp["temperature"]), grp["bin_bounds"][()])


def write_coherent_elastic(grp: h5py.Group, model: STCoherentElastic) -> None:
    """Write Bragg edges and structure-factor sums."""
    ds_e = grp.create_dataset("bragg_edges", data=model.bragg_edges)
    ds_e.attrs["units"] = "eV"
    ds_s = grp.create_dataset("structure_factor_sum", data=model.structure_factor_sum)
    ds_s.attrs["units"] = "b*eV"


def read_coherent_elastic_group(grp: h5py.Group) -> STCoherentElastic:
    """Rebuild a model written by :func:`write_coherent_elastic`."""
    return STCoherentElastic(grp["bragg_edges"][()], grp["structure_factor_sum"][()])


def _write_metadata(h5f: h5py.File, ace: ACEAccessor) -> None:
    """Write ``/metadata`` group."""
    meta = h5f.create_group("metadata")
    meta.create_dataset("name", data=ace.name)
    meta.create_dataset("AWR", data=np.float64(ace.atomic_weight_ratio))
    ds_t = meta.create_dataset("kT", data=np.float64(ace.temperature))
    ds_t.attrs["units"] = "eV"


def write_ace_models(h5f: h5py.File, ace: ACEAccessor) -> None:
    """Decode the supported models of *ace* and write them to *h5f*

    Thermal tables contribute ``/coherent_elastic`` when they carry Bragg
    edges; neutron tables contribute one ``/evaporation/MT_xxx`` group
    per law-5 spectrum.
    """
    _write_metadata(h5f, ace)

    if ace.is_thermal:
        model = STCoherentElastic.from_ace(ace)
        if model.bragg_edges.size:
            write_coherent_elastic(h5f.create_group("coherent_elastic"), model)
        logger.debug("Wrote %d Bragg edges for %s", model.bragg_edges.size, ace.name)
        return

    spectra = read_general_evaporations(ace)
    if spectra:
        eg = h5f.create_group("evaporation")
        for mt, law in sorted(spectra.items()):
            write_general_evaporation(eg.create_group(f"MT_{mt:03d}"), law)
    logger.debug("Wrote %d evaporation spectra for %s", len(spectra), ace.name)


def create_hdf5(
    source_path: Path | str,
    output_path: Path | str,
    *,
    name: str | None = None,
    overwrite: bool = False,
) -> Path:
    """Read an ACE file and write its decoded models to HDF5

    Parameters
    ----------
    source_path : Path | str
        Path to the ACE file.
    output_path : Path | str
        Path for the output HDF5 file.
    name : str, optional
        Table to convert when the file holds several.
    overwrite : bool, optional
        Overwrite existing file.  Default ``False``.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    FileFormatError
        If the ACE file cannot be loaded.
    DataFormatError
        If a model cannot be decoded.
    ConversionError
        If the output exists and *overwrite* is ``False``, or if writing
        fails.

    Examples
    --------
    >>> create_hdf5("tsl/grph.20t", "h5/grph.h5")
    PosixPath('h5/grph.h5')
    """
    out = Path(output_path)
    if out.exists() and not overwrite:
        raise ConversionError(f"Output file {out} already exists and overwrite=False.")

    ace = ACEReader().read(source_path, name)

    out.parent.mkdir(parents=True, exist_ok=True)
    try:
        mode = "w" if overwrite else "w-"
        with h5py.File(str(out), mode) as h5f:
            write_ace_models(h5f, ace)
    except PyNDLError:
        out.unlink(missing_ok=True)
        raise
    except Exception as exc:
        out.unlink(missing_ok=True)
        raise ConversionError(f"Failed to write HDF5 {out}: {exc}") from exc

    logger.info("Wrote %s HDF5: %s", ace.name, out)
    return out
