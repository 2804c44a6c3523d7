"""
Running variance over a sample sequence.
"""

from __future__ import annotations

import math

from pyvariate.stats.mean import Mean


class Variance(Mean):
    """
    Running variance calculation.

    Extends Mean with variance, standard deviation and coefficient of
    variation, the moment Morse's method is fitted to.
    """

    def __init__(self) -> None:
        super().__init__()
        self._sum_sq: float = 0.0

    def reset(self) -> None:
        """Reset all statistics."""
        super().reset()
        self._sum_sq = 0.0

    def set_value(self, value: float) -> None:
        """Add a sample value."""
        super().set_value(value)
        self._sum_sq += value * value

    @property
    def variance(self) -> float:
        """
        Sample variance.

        Uses n-1 denominator (Bessel's correction).
        """
        if self._number < 2:
            return 0.0
        return max(0.0, (self._sum_sq - (self._sum * self._sum) / self._number) / (self._number - 1))

    @property
    def std_dev(self) -> float:
        """Sample standard deviation."""
        return math.sqrt(self.variance)

    @property
    def cov(self) -> float:
        """Coefficient of variation, std_dev / mean. NaN for a zero mean."""
        if self._mean == 0.0:
            return math.nan
        return self.std_dev / self._mean

    def __str__(self) -> str:
        lines = [
            f"Variance          : {self.variance}",
            f"Standard Deviation: {self.std_dev}",
            f"CoV               : {self.cov}",
        ]
        lines.append(super().__str__())
        return "\n".join(lines)
