"""Tests for the salary sampler."""

from unittest.mock import MagicMock

import numpy as np
import pytest

from salarysim.core.errors import DegenerateSampleError, InvalidParameterError
from salarysim.population.sampler.core import simulate_salaries


class TestSimulateSalaries:
    """Tests for the main sampling call."""

    def test_simulate_basic(self, payroll_params):
        """Test sampling a valid population."""
        result = simulate_salaries(payroll_params, 70, 461000.0, seed=123)

        assert result.headcount == 70
        assert [e.id for e in result.employees] == list(range(1, 71))
        assert all(e.monthly_salary > 0 for e in result.employees)
        assert result.seed == 123

    @pytest.mark.parametrize("seed", [0, 1, 42, 123, 2**32 + 5, None])
    @pytest.mark.parametrize("headcount, budget", [(1, 5000.0), (70, 461000.0), (5000, 1.5e7)])
    def test_salaries_sum_to_budget(self, payroll_params, seed, headcount, budget):
        result = simulate_salaries(payroll_params, headcount, budget, seed=seed)

        assert len(result.employees) == headcount
        assert result.salaries.sum() == pytest.approx(budget, rel=1e-9)

    def test_sample_consistency(self, payroll_params):
        """Test reproducibility with fixed seed."""
        result1 = simulate_salaries(payroll_params, 50, 300000.0, seed=123)
        result2 = simulate_salaries(payroll_params, 50, 300000.0, seed=123)

        assert result1.employees == result2.employees
        assert result1.adjustment_factor == result2.adjustment_factor

    def test_different_seeds_differ(self, payroll_params):
        result1 = simulate_salaries(payroll_params, 50, 300000.0, seed=1)
        result2 = simulate_salaries(payroll_params, 50, 300000.0, seed=2)

        assert result1.employees != result2.employees

    def test_caller_owned_generator(self, payroll_params):
        """A caller-supplied generator matches seeding the same way."""
        from_seed = simulate_salaries(payroll_params, 20, 100000.0, seed=7)
        from_rng = simulate_salaries(
            payroll_params, 20, 100000.0, rng=np.random.default_rng(7)
        )

        assert from_seed.employees == from_rng.employees
        assert from_rng.seed is None

    def test_shared_generator_advances(self, payroll_params):
        """Consecutive calls on one generator draw different populations."""
        rng = np.random.default_rng(99)
        first = simulate_salaries(payroll_params, 20, 100000.0, rng=rng)
        second = simulate_salaries(payroll_params, 20, 100000.0, rng=rng)

        assert first.employees != second.employees

    def test_seed_and_rng_conflict(self, payroll_params):
        with pytest.raises(InvalidParameterError, match="not both"):
            simulate_salaries(
                payroll_params, 10, 1000.0, seed=1, rng=np.random.default_rng(1)
            )

    def test_adjustment_factor_applied(self, payroll_params):
        """Every salary is the raw draw times one common factor."""
        rng = np.random.default_rng(5)
        raw = payroll_params.quantile(rng.random(30))

        result = simulate_salaries(payroll_params, 30, 200000.0, seed=5)

        assert result.adjustment_factor == pytest.approx(200000.0 / raw.sum())
        assert np.allclose(result.salaries, raw * result.adjustment_factor)

    def test_summary_statistics(self, payroll_params):
        result = simulate_salaries(payroll_params, 70, 461000.0, seed=123)
        summary = result.summary()

        assert summary.count == 70
        assert summary.total == pytest.approx(461000.0, rel=1e-9)
        assert summary.mean == pytest.approx(461000.0 / 70)
        assert summary.min <= summary.p10 <= summary.p25 <= summary.median
        assert summary.median <= summary.p75 <= summary.p90 <= summary.max
        assert summary.std > 0

    @pytest.mark.parametrize("headcount", [0, -5, 2.5, True])
    def test_invalid_headcount(self, payroll_params, headcount):
        with pytest.raises(InvalidParameterError, match="headcount"):
            simulate_salaries(payroll_params, headcount, 1000.0, seed=1)

    @pytest.mark.parametrize("budget", [0, -1.0, float("inf")])
    def test_invalid_budget(self, payroll_params, budget):
        with pytest.raises(InvalidParameterError, match="total_budget"):
            simulate_salaries(payroll_params, 10, budget, seed=1)

    @pytest.mark.parametrize("seed", [-1, -2**40])
    def test_negative_seed(self, payroll_params, seed):
        """Negative seeds are rejected before a generator is built."""
        with pytest.raises(InvalidParameterError, match="seed"):
            simulate_salaries(payroll_params, 10, 1000.0, seed=seed)

    def test_non_integer_seed(self, payroll_params):
        with pytest.raises(InvalidParameterError, match="seed"):
            simulate_salaries(payroll_params, 10, 1000.0, seed=1.5)

    def test_nan_draw_is_degenerate(self, payroll_params):
        """NaN draws are counted and reported as non-finite."""
        rng = MagicMock(spec=np.random.Generator)
        rng.random.return_value = np.array([0.5, np.nan, np.nan])

        with pytest.raises(DegenerateSampleError, match="2 of 3 raw salary draws"):
            simulate_salaries(payroll_params, 3, 1000.0, rng=rng)

    def test_zero_draw_is_degenerate(self, payroll_params):
        """A uniform of exactly 0 maps to a zero salary and is rejected."""
        rng = MagicMock(spec=np.random.Generator)
        rng.random.return_value = np.array([0.5, 0.0, 0.3])

        with pytest.raises(DegenerateSampleError, match="non-positive or non-finite"):
            simulate_salaries(payroll_params, 3, 1000.0, rng=rng)
