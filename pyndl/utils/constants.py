#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Unit conversions and ACE layout constants used across PyNDL

ACE positions are given with the Fortran (1-based) numbering of the
format manual, which is also how :class:`~pyndl.readers.ace.ACEAccessor`
addresses the ``NXS``, ``JXS`` and ``XSS`` arrays.

References
----------
.. [1] J. L. Conlin and P. Romano, "A Compact ENDF (ACE) Format
   Specification", LA-UR-19-29016 (2019).
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

EV_PER_MEV: float = 1.0e6
"""Conversion factor from MeV (ACE native energy unit) to eV."""


# ---------------------------------------------------------------------------
# Continuous-energy neutron tables
# ---------------------------------------------------------------------------

NXS_NR: int = 5
"""NXS position holding the number of reactions with secondary neutrons."""

JXS_MTR: int = 3
"""JXS position of the MT-number block."""

JXS_LDLW: int = 10
"""JXS position of the energy-distribution locator block."""

JXS_DLW: int = 11
"""JXS position of the energy-distribution data block."""

LAW_GENERAL_EVAPORATION: int = 5
"""ACE energy law number of the general evaporation spectrum."""


# ---------------------------------------------------------------------------
# Thermal scattering tables
# ---------------------------------------------------------------------------

NXS_IDPNI: int = 5
"""NXS position holding the elastic scattering mode of a thermal table."""

JXS_ITCE: int = 4
"""JXS position of the elastic (Bragg edge) data block."""

ELASTIC_MODE_COHERENT: int = 4
"""``NXS(5)`` value of a purely coherent elastic thermal table."""

ELASTIC_MODE_MIXED: int = 5
"""``NXS(5)`` value of a table with both coherent and incoherent elastic data."""
