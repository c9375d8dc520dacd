#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Sampling interfaces shared by secondary-distribution models

Random numbers are always supplied by the caller as a zero-argument
callable returning a float in ``[0, 1)``.  Models never store it, so a
single model can be sampled concurrently with one generator per thread.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, NamedTuple, Optional

RNG = Callable[[], float]
"""Uniform variate source: ``rng() -> float`` in ``[0, 1)``."""


class AngleEnergyPacket(NamedTuple):
    """Outcome of an angle-energy sample"""

    cosine_angle: float
    energy: float


class EnergyLaw(ABC):
    """Secondary-energy distribution conditioned on the incident energy"""

    @abstractmethod
    def sample_energy(self, E_in: float, rng: RNG) -> float:
        """Sample an outgoing energy (eV) for incident energy *E_in* (eV)."""
        ...

    @abstractmethod
    def pdf(self, E_in: float, E_out: float) -> Optional[float]:
        """Probability density of *E_out*, or ``None`` if not available."""
        ...


class AngleEnergy(ABC):
    """Joint scattering-cosine / outgoing-energy distribution"""

    @abstractmethod
    def sample_angle_energy(self, E_in: float, rng: RNG) -> AngleEnergyPacket:
        ...

    @abstractmethod
    def angle_pdf(self, E_in: float, mu: float) -> Optional[float]:
        """Marginal density of the cosine *mu*, or ``None`` if not available."""
        ...

    @abstractmethod
    def pdf(self, E_in: float, mu: float, E_out: float) -> Optional[float]:
        """Joint density of ``(mu, E_out)``, or ``None`` if not available."""
        ...
