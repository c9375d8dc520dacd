#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyNDL - Python library for tabulated nuclear reaction data

Decode ACE-format records into interpolation tables and sample
secondary distributions inside Monte Carlo transport codes.

Components
----------
1. **Tabulated functions** with the five ENDF interpolation laws,
   single- or multi-region (:class:`Region1D`, :class:`MultiRegion1D`).
2. **General evaporation spectrum** (ACE law 5) with exact
   inverse-CDF sampling (:class:`GeneralEvaporation`).
3. **Coherent elastic scattering** off Bragg edges for crystalline
   moderators (:class:`STCoherentElastic`).

Modules
-------
models
    Tables and physical models.
readers
    Record accessors and the ACE reader (``endf`` package).
converters
    HDF5 export.
utils
    Constants and construction-time validation.

Examples
--------
>>> from pyndl import ACEReader, STCoherentElastic
>>> ace = ACEReader().read("tsl/grph.20t")
>>> graphite = STCoherentElastic.from_ace(ace)
>>> graphite.xs(0.01)
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pyndl.models import (
    Interpolation,
    Tabulated1D,
    Region1D,
    MultiRegion1D,
    build_tabulated,
    read_tabulated,
    AngleEnergy,
    AngleEnergyPacket,
    EnergyLaw,
    GeneralEvaporation,
    STCoherentElastic,
)
from pyndl.readers import ArrayAccessor, ACEAccessor, ACEReader, RecordAccessor
from pyndl.converters.hdf5 import create_hdf5
from pyndl.exceptions import (
    PyNDLError,
    DataFormatError,
    FileFormatError,
    ConversionError,
)

__all__ = [
    # Version
    "__version__",
    # Tables
    "Interpolation",
    "Tabulated1D",
    "Region1D",
    "MultiRegion1D",
    "build_tabulated",
    "read_tabulated",
    # Models
    "AngleEnergy",
    "AngleEnergyPacket",
    "EnergyLaw",
    "GeneralEvaporation",
    "STCoherentElastic",
    # Readers
    "RecordAccessor",
    "ArrayAccessor",
    "ACEAccessor",
    "ACEReader",
    # Converter
    "create_hdf5",
    # Exceptions
    "PyNDLError",
    "DataFormatError",
    "FileFormatError",
    "ConversionError",
]
