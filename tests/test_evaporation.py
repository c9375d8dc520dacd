#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the general evaporation spectrum

Covers record decoding, bin selection, sampling bounds, the
piecewise-uniform density and the convergence of sampled histograms.
"""

from __future__ import annotations

import numpy as np
import pytest

from pyndl.exceptions import DataFormatError
from pyndl.models.evaporation import GeneralEvaporation
from pyndl.models.tabulated import MultiRegion1D, Region1D
from pyndl.readers.base import ArrayAccessor
from pyndl.utils.constants import EV_PER_MEV


def _draws(*values: float):
    it = iter(values)
    return lambda: next(it)


@pytest.fixture
def evaporation() -> GeneralEvaporation:
    """Temperature 1 → 3 eV over [1, 3] eV, bins [0, 1, 2, 4]"""
    T = Region1D([1.0, 3.0], [1.0, 3.0], 2)
    return GeneralEvaporation(T, [0.0, 1.0, 2.0, 4.0])


class TestGeneralEvaporationSampling:
    """Tests for sample_energy"""

    def test_bin_selection_uses_bin_count(self, evaporation: GeneralEvaporation) -> None:
        # 3 bins: xi1 in [0, 1/3) -> bin 0, [1/3, 2/3) -> bin 1, [2/3, 1) -> bin 2
        assert evaporation.sample_energy(1.0, _draws(0.0, 0.5)) == pytest.approx(0.5)
        assert evaporation.sample_energy(1.0, _draws(0.4, 0.5)) == pytest.approx(1.5)
        assert evaporation.sample_energy(1.0, _draws(0.9, 0.5)) == pytest.approx(3.0)

    def test_last_bin_upper_draw(self, evaporation: GeneralEvaporation) -> None:
        u = np.nextafter(1.0, 0.0)
        E = evaporation.sample_energy(1.0, _draws(u, u))
        assert E <= 4.0

    def test_scaled_by_temperature(self, evaporation: GeneralEvaporation) -> None:
        assert evaporation.sample_energy(2.0, _draws(0.4, 0.25)) == pytest.approx(2.0 * 1.25)

    def test_temperature_clamped(self, evaporation: GeneralEvaporation) -> None:
        assert evaporation.sample_energy(100.0, _draws(0.0, 1.0 - 1e-12)) == pytest.approx(3.0)

    def test_two_draws_per_sample(self, evaporation: GeneralEvaporation) -> None:
        calls = []

        def rng() -> float:
            calls.append(1)
            return 0.5

        evaporation.sample_energy(1.5, rng)
        assert len(calls) == 2

    def test_samples_within_bounds(self, evaporation: GeneralEvaporation) -> None:
        rng = np.random.default_rng(42)
        T = evaporation.temperature(2.5)
        samples = [evaporation.sample_energy(2.5, rng.random) for _ in range(2000)]
        assert min(samples) >= 0.0
        assert max(samples) <= 4.0 * T

    def test_histogram_converges(self, evaporation: GeneralEvaporation) -> None:
        rng = np.random.default_rng(7)
        n = 30000
        chi = np.array([evaporation.sample_energy(1.0, rng.random) for _ in range(n)])
        counts, _ = np.histogram(chi, bins=[0.0, 1.0, 2.0, 4.0])
        np.testing.assert_allclose(counts / n, [1 / 3, 1 / 3, 1 / 3], atol=0.015)
        # uniform inside the wide bin
        upper = chi[chi >= 2.0]
        assert np.mean(upper < 3.0) == pytest.approx(0.5, abs=0.03)


class TestGeneralEvaporationPdf:
    """Tests for the supplemented pdf"""

    def test_density_values(self, evaporation: GeneralEvaporation) -> None:
        # T = 2 at E_in = 2: bins in E' are [0, 2], [2, 4], [4, 8]
        assert evaporation.pdf(2.0, 1.0) == pytest.approx(1.0 / (3 * 1.0 * 2.0))
        assert evaporation.pdf(2.0, 5.0) == pytest.approx(1.0 / (3 * 2.0 * 2.0))

    def test_zero_outside_support(self, evaporation: GeneralEvaporation) -> None:
        assert evaporation.pdf(2.0, -0.1) == 0.0
        assert evaporation.pdf(2.0, 8.1) == 0.0

    def test_upper_edge_in_last_bin(self, evaporation: GeneralEvaporation) -> None:
        assert evaporation.pdf(2.0, 8.0) == pytest.approx(1.0 / (3 * 2.0 * 2.0))

    def test_integrates_to_one(self, evaporation: GeneralEvaporation) -> None:
        E = np.linspace(0.0, 8.0, 16001)
        p = np.array([evaporation.pdf(2.0, e) for e in E])
        assert np.sum(p[:-1] * np.diff(E)) == pytest.approx(1.0, abs=1e-3)


class TestGeneralEvaporationConstruction:
    """Tests for construction and record decoding"""

    def test_accessors(self, evaporation: GeneralEvaporation) -> None:
        assert evaporation.bin_bounds.tolist() == [0.0, 1.0, 2.0, 4.0]
        assert isinstance(evaporation.temperature, Region1D)

    def test_shared_temperature_table(self) -> None:
        T = Region1D([1.0, 3.0], [1.0, 3.0], 2)
        a = GeneralEvaporation(T, [0.0, 1.0])
        b = GeneralEvaporation(T, [0.0, 2.0])
        assert a.temperature is b.temperature

    def test_single_bound_raises(self) -> None:
        T = Region1D([1.0, 3.0], [1.0, 3.0], 2)
        with pytest.raises(DataFormatError):
            GeneralEvaporation(T, [1.0])

    def test_non_increasing_bounds_raise(self) -> None:
        T = Region1D([1.0, 3.0], [1.0, 3.0], 2)
        with pytest.raises(DataFormatError):
            GeneralEvaporation(T, [0.0, 2.0, 2.0])

    def test_from_record(self, law5_record) -> None:
        acc = ArrayAccessor([-1.0] + law5_record([1.0, 20.0], [0.5, 1.5], [0.0, 0.5, 2.0]))
        law = GeneralEvaporation.from_record(acc, 1)
        assert law.bin_bounds.tolist() == [0.0, 0.5, 2.0]
        assert law.temperature.x.tolist() == [1.0 * EV_PER_MEV, 20.0 * EV_PER_MEV]
        assert law.temperature.y.tolist() == [0.5 * EV_PER_MEV, 1.5 * EV_PER_MEV]

    def test_from_record_multi_region(self, law5_record) -> None:
        acc = ArrayAccessor(
            law5_record([1.0, 2.0, 4.0], [1.0, 2.0, 3.0], [0.0, 1.0], [2, 3], [1, 2])
        )
        law = GeneralEvaporation.from_record(acc, 0)
        assert isinstance(law.temperature, MultiRegion1D)

    def test_from_record_empty_bins_raise(self, law5_record) -> None:
        acc = ArrayAccessor(law5_record([1.0, 20.0], [0.5, 1.5], []))
        with pytest.raises(DataFormatError):
            GeneralEvaporation.from_record(acc, 0)

    def test_from_record_truncated_bins_raise(self, law5_record) -> None:
        acc = ArrayAccessor(law5_record([1.0, 20.0], [0.5, 1.5], [0.0, 1.0, 2.0])[:-1])
        with pytest.raises(DataFormatError):
            GeneralEvaporation.from_record(acc, 0)
