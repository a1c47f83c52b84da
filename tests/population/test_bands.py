"""Tests for percentile banding."""

import math

import numpy as np
import pytest

from salarysim.core.errors import InvalidParameterError
from salarysim.population.bands import build_bands

EDGES = [0, 0.25, 0.5, 0.75, 0.9, 1.0]


class TestBuildBands:
    """Tests for build_bands."""

    def test_payroll_bands(self, payroll_params):
        bands = build_bands(payroll_params, EDGES, 70, 461000.0)

        assert len(bands) == 5
        for band in bands:
            assert band.lower_salary < band.upper_salary
            assert band.employee_count >= 0
            assert 0.0 <= band.budget_share <= 1.0

        # Bands are contiguous and ordered
        for prev, nxt in zip(bands, bands[1:]):
            assert prev.upper_quantile == nxt.lower_quantile
            assert prev.upper_salary == nxt.lower_salary
            assert prev.lower_salary < nxt.lower_salary

    def test_open_ends(self, payroll_params):
        """The 0th percentile is zero and the 100th is unbounded."""
        bands = build_bands(payroll_params, EDGES, 70, 461000.0)

        assert bands[0].lower_salary == 0.0
        assert math.isinf(bands[-1].upper_salary)
        assert bands[-1].is_open_ended
        assert not bands[0].is_open_ended
        # Tail band share is still finite
        assert 0.0 < bands[-1].budget_share < 1.0

    def test_counts_round_per_band(self, payroll_params):
        """Each band rounds on its own; totals may drift from the headcount."""
        bands = build_bands(payroll_params, EDGES, 70, 461000.0)

        # 70 * 0.25 = 17.5 rounds half to even
        assert [b.employee_count for b in bands[:3]] == [18, 18, 18]
        total = sum(b.employee_count for b in bands)
        assert abs(total - 70) <= len(bands)

    def test_budget_share_uses_midpoint(self, payroll_params):
        bands = build_bands(payroll_params, [0.25, 0.5], 100, 500000.0)
        band = bands[0]

        midpoint = (band.lower_salary + band.upper_salary) / 2
        assert band.budget_share == pytest.approx(midpoint * 25 / 500000.0)

    def test_shares_roughly_cover_budget(self, payroll_params):
        """Midpoint shares are approximate but should land near 1."""
        bands = build_bands(payroll_params, EDGES, 70, 461000.0)
        total_share = sum(b.budget_share for b in bands)
        assert 0.8 < total_share < 1.2

    def test_quantile_cdf_round_trip(self, payroll_params):
        """cdf(quantile(q)) == q on the routines backing the bands."""
        qs = np.linspace(0.001, 0.999, 101)
        assert np.allclose(payroll_params.cdf(payroll_params.quantile(qs)), qs, atol=1e-9)

    def test_band_salaries_match_quantiles(self, payroll_params):
        bands = build_bands(payroll_params, [0.1, 0.5, 0.9], 10, 50000.0)

        assert bands[0].lower_salary == pytest.approx(payroll_params.quantile(0.1))
        assert bands[0].upper_salary == pytest.approx(payroll_params.median)
        assert bands[1].upper_salary == pytest.approx(payroll_params.quantile(0.9))

    def test_label(self, payroll_params):
        bands = build_bands(payroll_params, [0, 0.25, 1.0], 10, 50000.0)
        assert bands[0].label == "P0-P25"
        assert bands[1].label == "P25-P100"

    def test_zero_headcount(self, payroll_params):
        bands = build_bands(payroll_params, EDGES, 0, 461000.0)
        assert all(b.employee_count == 0 for b in bands)
        assert all(b.budget_share == 0.0 for b in bands)

    def test_share_capped_when_budget_too_small(self, payroll_params, caplog):
        bands = build_bands(payroll_params, [0.0, 1.0], 70, 1000.0)
        assert bands[0].budget_share == 1.0
        assert "capping" in caplog.text

    @pytest.mark.parametrize(
        "edges",
        [
            [0.5, 0.25],
            [0.0, 0.5, 0.5, 1.0],
            [-0.1, 0.5],
            [0.5, 1.1],
            [0.5],
            [],
        ],
    )
    def test_invalid_edges(self, payroll_params, edges):
        with pytest.raises(InvalidParameterError):
            build_bands(payroll_params, edges, 70, 461000.0)

    def test_invalid_budget(self, payroll_params):
        with pytest.raises(InvalidParameterError, match="total_budget"):
            build_bands(payroll_params, EDGES, 70, 0)

    def test_invalid_headcount(self, payroll_params):
        with pytest.raises(InvalidParameterError, match="total_headcount"):
            build_bands(payroll_params, EDGES, -1, 461000.0)
