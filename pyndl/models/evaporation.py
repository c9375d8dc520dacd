#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
General evaporation spectrum (ACE energy law 5)

The outgoing energy is ``E' = χ · θ(E)``, where ``θ(E)`` is a tabulated
nuclear temperature and ``χ`` follows a piecewise-uniform density with
equal probability ``1/(NX-1)`` in each of the ``NX-1`` bins delimited by
the ``NX`` tabulated bounds.

Record Layout
-------------
::

    i                      NR, NBT, INT, NE, E[NE], θ[NE]   temperature table
    i+2+2*NR+2*NE          NX                              number of bin bounds
    i+3+2*NR+2*NE          X[NX]                           bin bounds

References
----------
.. [1] ENDF-6 Formats Manual, §5.1.1.4 — General Evaporation Spectrum (LF=5).
.. [2] A Compact ENDF (ACE) Format Specification, LA-UR-19-29016, Table 33.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from pyndl.models.angle_energy import RNG, EnergyLaw
from pyndl.models.tabulated import Tabulated1D, read_tabulated
from pyndl.utils.constants import EV_PER_MEV
from pyndl.utils.validation import validate_min_points, validate_strictly_increasing

if TYPE_CHECKING:
    from pyndl.readers.base import RecordAccessor

logger = logging.getLogger(__name__)


class GeneralEvaporation(EnergyLaw):
    """Evaporation spectrum with tabulated temperature and χ bins

    Parameters
    ----------
    temperature : Tabulated1D
        Nuclear temperature θ (eV) as a function of incident energy (eV).
        The table may be shared with other holders; it is never modified.
    bin_bounds : array_like
        Strictly increasing bounds of the χ bins, at least two.

    Raises
    ------
    DataFormatError
        If *bin_bounds* has fewer than two entries or is not strictly
        increasing.

    Examples
    --------
    >>> from pyndl.models.tabulated import Region1D
    >>> T = Region1D([1.0, 2.0e7], [2.0, 2.0], 2)
    >>> law = GeneralEvaporation(T, [0.0, 1.0, 3.0])
    >>> draws = iter([0.75, 0.5])
    >>> law.sample_energy(1.0e6, lambda: next(draws))
    4.0
    """

    def __init__(self, temperature: Tabulated1D, bin_bounds) -> None:
        bounds = np.array(bin_bounds, dtype="f8").ravel()
        validate_min_points(bounds.size, label="bin_bounds")
        validate_strictly_increasing(bounds, label="bin_bounds")
        bounds.flags.writeable = False

        self._temperature = temperature
        self._bin_bounds = bounds
        logger.debug("Built GeneralEvaporation with %d bins", bounds.size - 1)

    @classmethod
    def from_record(cls, accessor: RecordAccessor, offset: int) -> GeneralEvaporation:
        """Decode the law-5 data block starting at *offset*

        Both the incident-energy grid and the temperatures are converted
        from MeV to eV.  Bin bounds are dimensionless.
        """
        temperature, nx_offset = read_tabulated(
            accessor, offset, x_scale=EV_PER_MEV, y_scale=EV_PER_MEV
        )
        nx = accessor.integer(nx_offset)
        validate_min_points(nx, label=f"bin_bounds at offset {nx_offset}")
        return cls(temperature, accessor.sequence(nx_offset + 1, nx))

    def sample_energy(self, E_in: float, rng: RNG) -> float:
        T = self._temperature(E_in)
        bounds = self._bin_bounds
        b = int(math.floor((bounds.size - 1) * rng()))
        chi = bounds[b] + rng() * (bounds[b + 1] - bounds[b])
        return float(chi * T)

    def pdf(self, E_in: float, E_out: float) -> float:
        T = self._temperature(E_in)
        if T <= 0.0:
            return 0.0
        bounds = self._bin_bounds
        chi = E_out / T
        if chi < bounds[0] or chi > bounds[-1]:
            return 0.0
        b = min(int(np.searchsorted(bounds, chi, side="right")) - 1, bounds.size - 2)
        return float(1.0 / ((bounds.size - 1) * (bounds[b + 1] - bounds[b]) * T))

    @property
    def temperature(self) -> Tabulated1D:
        """Nuclear temperature table (eV vs. eV)."""
        return self._temperature

    @property
    def bin_bounds(self) -> np.ndarray:
        """Dimensionless χ bin bounds (read-only)."""
        return self._bin_bounds

    def __repr__(self) -> str:
        return f"GeneralEvaporation(temperature={self._temperature!r}, n_bins={self._bin_bounds.size - 1})"
