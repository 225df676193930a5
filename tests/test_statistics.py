"""Tests for sample mean and standard deviation."""

from __future__ import annotations

import math

import pytest

from weather_unusualness.analysis.statistics import SummaryStatistics, compute_mean_and_stddev


class TestComputeMeanAndStddev:
    """Tests for compute_mean_and_stddev."""

    def test_one_two_three(self) -> None:
        """Sample standard deviation of [1, 2, 3] is exactly 1."""
        stats = compute_mean_and_stddev([1, 2, 3])
        assert stats.mean == pytest.approx(2.0)
        assert stats.std_dev == pytest.approx(1.0)

    @pytest.mark.parametrize(("value", "n"), [(72.5, 2), (0.0, 5), (-12.0, 30)])
    def test_identical_values(self, value: float, n: int) -> None:
        stats = compute_mean_and_stddev([value] * n)
        assert stats.mean == pytest.approx(value)
        assert stats.std_dev == 0.0

    def test_single_value_has_zero_spread(self) -> None:
        stats = compute_mean_and_stddev([42.0])
        assert stats == SummaryStatistics(mean=42.0, std_dev=0.0)

    def test_uses_sample_not_population_formula(self) -> None:
        """[2, 4, 4, 4, 5, 5, 7, 9]: population σ is 2, sample σ is larger."""
        values = [2, 4, 4, 4, 5, 5, 7, 9]
        stats = compute_mean_and_stddev(values)
        assert stats.mean == pytest.approx(5.0)
        assert stats.std_dev == pytest.approx(math.sqrt(32 / 7))

    def test_order_independent(self) -> None:
        values = [70.1, 65.3, 80.9, 77.7, 59.2]
        forward = compute_mean_and_stddev(values)
        backward = compute_mean_and_stddev(list(reversed(values)))
        assert forward == backward

    def test_returns_floats(self) -> None:
        stats = compute_mean_and_stddev([1, 2, 3])
        assert isinstance(stats.mean, float)
        assert isinstance(stats.std_dev, float)

    def test_empty_is_nan(self) -> None:
        stats = compute_mean_and_stddev([])
        assert math.isnan(stats.mean)
        assert math.isnan(stats.std_dev)
        assert stats.is_valid is False


class TestSummaryStatisticsIsValid:
    """Tests for the z-score guard."""

    def test_positive_spread_is_valid(self) -> None:
        assert SummaryStatistics(mean=50.0, std_dev=3.2).is_valid is True

    def test_zero_spread_is_invalid(self) -> None:
        assert SummaryStatistics(mean=50.0, std_dev=0.0).is_valid is False

    def test_nan_spread_is_invalid(self) -> None:
        assert SummaryStatistics(mean=50.0, std_dev=math.nan).is_valid is False
