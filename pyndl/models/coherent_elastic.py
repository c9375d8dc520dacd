#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Coherent elastic thermal scattering (Bragg diffraction)

For a crystalline moderator the coherent elastic cross section is a
right-continuous step function divided by energy:

.. math::

    \\sigma(E) = \\frac{1}{E} \\sum_{E_i \\le E} s_i

where the ``E_i`` are the Bragg edges and the running sums of the
structure factors ``s_i`` are tabulated.  A neutron scattering at ``E``
reflects off the plane of the last activated edge ``E_i`` with

.. math::

    \\mu = 1 - 2 E_i / E

and keeps its energy.  Because ``E_i <= E``, ``mu`` always lies in
``[-1, 1]``.

The angular distribution is a sum of delta functions, so no density is
available: :meth:`STCoherentElastic.angle_pdf` and
:meth:`STCoherentElastic.pdf` return ``None``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

from pyndl.models.angle_energy import RNG, AngleEnergy, AngleEnergyPacket
from pyndl.utils.constants import (
    ELASTIC_MODE_COHERENT,
    ELASTIC_MODE_MIXED,
    EV_PER_MEV,
    JXS_ITCE,
    NXS_IDPNI,
)
from pyndl.utils.validation import (
    validate_positive,
    validate_same_length,
    validate_strictly_increasing,
)

if TYPE_CHECKING:
    from pyndl.readers.ace import ACEAccessor

logger = logging.getLogger(__name__)


class STCoherentElastic(AngleEnergy):
    """Coherent elastic scattering data of one nuclide at one temperature

    Parameters
    ----------
    bragg_edges : array_like
        Strictly increasing Bragg edge energies (eV).  May be empty.
    structure_factor_sum : array_like
        Cumulative structure-factor sums (b·eV), one per edge.

    Raises
    ------
    DataFormatError
        If the arrays differ in length or the edges are not strictly
        increasing.

    Examples
    --------
    >>> ce = STCoherentElastic([1.0e-3, 4.0e-3], [2.0e-3, 6.0e-3])
    >>> ce.xs(2.0e-3)
    1.0
    >>> ce.sample_angle_energy(2.0e-3, lambda: 0.5)
    AngleEnergyPacket(cosine_angle=0.0, energy=0.002)
    """

    def __init__(self, bragg_edges=(), structure_factor_sum=()) -> None:
        edges = np.array(bragg_edges, dtype="f8").ravel()
        sums = np.array(structure_factor_sum, dtype="f8").ravel()
        validate_same_length(edges, sums, label="STCoherentElastic")
        validate_strictly_increasing(edges, label="bragg_edges")
        validate_positive(edges, label="bragg_edges")
        edges.flags.writeable = False
        sums.flags.writeable = False

        self._bragg_edges = edges
        self._structure_factor_sum = sums
        logger.debug("Built STCoherentElastic with %d Bragg edges", edges.size)

    @classmethod
    def from_ace(cls, ace: ACEAccessor) -> STCoherentElastic:
        """Read the Bragg edges of a thermal scattering ACE table

        Data are read when ``NXS(5)`` flags coherent (4) or mixed (5)
        elastic scattering and ``JXS(4)`` is non-zero; otherwise an
        empty model is returned.  Edges and structure-factor sums are
        both converted from MeV to eV.
        """
        mode = ace.nxs(NXS_IDPNI)
        loc = ace.jxs(JXS_ITCE)
        if mode not in (ELASTIC_MODE_COHERENT, ELASTIC_MODE_MIXED) or loc == 0:
            logger.debug("No coherent elastic data in %s (NXS(5)=%d)", ace.name, mode)
            return cls()

        ne = ace.integer(loc)
        edges = ace.sequence(loc + 1, ne) * EV_PER_MEV
        sums = ace.sequence(loc + 1 + ne, ne) * EV_PER_MEV
        return cls(edges, sums)

    def _edge_index(self, E: float) -> int:
        """Index of the greatest edge ``<= E``, or -1 below the first edge."""
        return int(np.searchsorted(self._bragg_edges, E, side="right")) - 1

    def xs(self, E: float) -> float:
        """Coherent elastic cross section (b) at energy *E* (eV)"""
        i = self._edge_index(E)
        if i < 0:
            return 0.0
        return float(self._structure_factor_sum[i] / E)

    def sample_angle_energy(self, E_in: float, rng: RNG) -> AngleEnergyPacket:
        i = self._edge_index(E_in)
        if i < 0:
            return AngleEnergyPacket(1.0, E_in)
        mu = 1.0 - 2.0 * float(self._bragg_edges[i]) / E_in
        return AngleEnergyPacket(mu, E_in)

    def angle_pdf(self, E_in: float, mu: float) -> Optional[float]:
        return None

    def pdf(self, E_in: float, mu: float, E_out: float) -> Optional[float]:
        return None

    @property
    def bragg_edges(self) -> np.ndarray:
        """Bragg edge energies in eV (read-only)."""
        return self._bragg_edges

    @property
    def structure_factor_sum(self) -> np.ndarray:
        """Cumulative structure-factor sums in b·eV (read-only)."""
        return self._structure_factor_sum

    def __repr__(self) -> str:
        return f"STCoherentElastic(n_edges={self._bragg_edges.size})"
