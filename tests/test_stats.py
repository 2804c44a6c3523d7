"""
Tests for running sample summaries.
"""

import math

import pytest

from pyvariate.stats import Mean, Variance


class TestMean:
    """Tests for Mean."""

    def test_values(self) -> None:
        """Count, sum, mean, min and max track the inputs."""
        mean = Mean()
        for v in [10, 20, 30, 40, 50]:
            mean += v
        assert mean.number_of_samples == 5
        assert mean.sum == 150
        assert mean.mean == 30
        assert mean.min == 10
        assert mean.max == 50

    def test_empty(self) -> None:
        """Min and max are undefined before the first value."""
        mean = Mean()
        assert mean.number_of_samples == 0
        assert math.isnan(mean.min)
        assert math.isnan(mean.max)

    def test_reset(self) -> None:
        """reset() clears everything."""
        mean = Mean()
        mean += 3.0
        mean.reset()
        assert mean.number_of_samples == 0
        assert mean.sum == 0.0

    def test_str(self) -> None:
        """String form lists each statistic."""
        mean = Mean()
        mean += 1.0
        text = str(mean)
        assert "Number of samples : 1" in text
        assert "Mean" in text


class TestVariance:
    """Tests for Variance."""

    def test_sample_variance(self) -> None:
        """Uses the n-1 denominator."""
        var = Variance()
        for v in [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]:
            var += v
        assert var.mean == 5.0
        assert var.variance == pytest.approx(32.0 / 7.0)
        assert var.std_dev == pytest.approx(math.sqrt(32.0 / 7.0))
        assert var.cov == pytest.approx(math.sqrt(32.0 / 7.0) / 5.0)

    def test_single_value(self) -> None:
        """Fewer than two samples give zero variance."""
        var = Variance()
        var += 3.0
        assert var.variance == 0.0

    def test_constant_values(self) -> None:
        """Rounding never yields a negative variance."""
        var = Variance()
        for _ in range(1000):
            var += 0.1
        assert var.variance >= 0.0
        assert var.std_dev == pytest.approx(0.0, abs=1e-6)

    def test_zero_mean_cov(self) -> None:
        """CoV is undefined for a zero mean."""
        var = Variance()
        var += 1.0
        var += -1.0
        assert math.isnan(var.cov)

    def test_str(self) -> None:
        """String form includes variance and mean sections."""
        var = Variance()
        var += 1.0
        var += 2.0
        text = str(var)
        assert "Variance" in text
        assert "CoV" in text
        assert "Number of samples : 2" in text
