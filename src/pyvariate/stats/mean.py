"""
Running mean over a sample sequence.
"""

from __future__ import annotations

import math


class Mean:
    """
    Running count, sum, mean, minimum and maximum.

    Minimum and maximum are NaN until the first value arrives.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Reset all statistics."""
        self._max: float = math.nan
        self._min: float = math.nan
        self._sum: float = 0.0
        self._mean: float = 0.0
        self._number: int = 0

    def set_value(self, value: float) -> None:
        """Add a sample value."""
        if self._number == 0:
            self._max = self._min = value
        else:
            if value > self._max:
                self._max = value
            if value < self._min:
                self._min = value
        self._sum += value
        self._number += 1
        self._mean = self._sum / self._number

    def __iadd__(self, value: float) -> Mean:
        """Operator += equivalent."""
        self.set_value(value)
        return self

    @property
    def number_of_samples(self) -> int:
        """Number of samples collected."""
        return self._number

    @property
    def min(self) -> float:
        """Minimum value seen."""
        return self._min

    @property
    def max(self) -> float:
        """Maximum value seen."""
        return self._max

    @property
    def sum(self) -> float:
        """Sum of all values."""
        return self._sum

    @property
    def mean(self) -> float:
        """Current mean value."""
        return self._mean

    def __str__(self) -> str:
        lines = [
            f"Number of samples : {self.number_of_samples}",
            f"Minimum           : {self.min}",
            f"Maximum           : {self.max}",
            f"Sum               : {self.sum}",
            f"Mean              : {self.mean}",
        ]
        return "\n".join(lines)
