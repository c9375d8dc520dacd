#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tabulated functions and secondary-distribution models

All objects are immutable once constructed and can be shared between
threads without locking.
"""

from __future__ import annotations

from pyndl.models.interpolation import Interpolation, interpolate
from pyndl.models.tabulated import (
    Tabulated1D,
    Region1D,
    MultiRegion1D,
    read_tabulated,
    build_tabulated,
)
from pyndl.models.angle_energy import AngleEnergy, AngleEnergyPacket, EnergyLaw
from pyndl.models.evaporation import GeneralEvaporation
from pyndl.models.coherent_elastic import STCoherentElastic

__all__ = [
    "Interpolation",
    "interpolate",
    "Tabulated1D",
    "Region1D",
    "MultiRegion1D",
    "read_tabulated",
    "build_tabulated",
    "AngleEnergy",
    "AngleEnergyPacket",
    "EnergyLaw",
    "GeneralEvaporation",
    "STCoherentElastic",
]
