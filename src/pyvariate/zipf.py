"""
Zipf (power law) sampling.

Implements p(i) = C / i^alpha for i = 1..N, where C normalizes the sum of
p(i) to 1. The cumulative table costs O(N) to build and is built at most
once per (alpha, N); each sample is a binary search, O(log N).
"""

from __future__ import annotations

import logging
import math
from enum import Enum, auto

from pyvariate.errors import AllocationFailure, InternalInvariantViolation
from pyvariate.params import ZipfParams
from pyvariate.random import LehmerSource, VariateStream, open_uniform

logger = logging.getLogger(__name__)


class TableState(Enum):
    """Lifecycle of the cumulative table."""

    UNBUILT = auto()
    BUILT = auto()


def build_cdf(alpha: float, n: int) -> tuple[float, ...]:
    """
    Cumulative Zipf probabilities S[0..n] with S[0] = 0.

    Raises AllocationFailure if the table does not fit in memory.
    """
    try:
        sum_probs = [0.0] * (n + 1)
    except (MemoryError, OverflowError) as exc:
        raise AllocationFailure(f"Cannot allocate Zipf table for N={n}") from exc

    c = 0.0
    for i in range(1, n + 1):
        c = c + (1.0 / _power(i, alpha))
    c = 1.0 / c

    for i in range(1, n + 1):
        sum_probs[i] = sum_probs[i - 1] + c / _power(i, alpha)
    return tuple(sum_probs)


def _power(i: int, alpha: float) -> float:
    """i ** alpha, saturating to inf so its reciprocal terms become 0."""
    try:
        return math.pow(i, alpha)
    except OverflowError:
        return math.inf


class ZipfSampler(VariateStream):
    """
    Zipf distribution over the integers 1..n.

    The table starts UNBUILT. build() makes it BUILT and is a no-op while
    the parameters are unchanged; calling build() with a different alpha or
    n discards the old table. A sample request on an UNBUILT sampler builds
    the table first.
    """

    def __init__(self, alpha: float, n: int, source: LehmerSource | None = None) -> None:
        super().__init__(source)
        self.params = ZipfParams(alpha, n)
        self._sum_probs: tuple[float, ...] | None = None

    @property
    def state(self) -> TableState:
        """Whether the cumulative table has been built."""
        return TableState.UNBUILT if self._sum_probs is None else TableState.BUILT

    @property
    def table(self) -> tuple[float, ...] | None:
        """Cumulative table S[0..n], or None while UNBUILT."""
        return self._sum_probs

    def build(self, alpha: float | None = None, n: int | None = None) -> None:
        """
        Build the cumulative table for (alpha, n).

        Omitted arguments keep their current values.
        """
        params = ZipfParams(
            self.params.alpha if alpha is None else alpha,
            self.params.n if n is None else n,
        )
        if params != self.params:
            self.params = params
            self._sum_probs = None

        if self._sum_probs is None:
            logger.debug("Building Zipf table alpha=%s N=%d", params.alpha, params.n)
            self._sum_probs = build_cdf(params.alpha, params.n)

    def __call__(self) -> int:
        if self._sum_probs is None:
            self.build()
        z = open_uniform(self._source)
        return self._search(z)

    def _search(self, z: float) -> int:
        """
        Smallest i in [1, n] with S[i] >= z and S[i-1] < z.

        Raises InternalInvariantViolation if no such index exists.
        """
        sum_probs = self._sum_probs
        assert sum_probs is not None
        n = self.params.n

        low, high = 1, n
        while low <= high:
            mid = (low + high) // 2
            if sum_probs[mid] >= z and sum_probs[mid - 1] < z:
                return mid
            if sum_probs[mid] >= z:
                high = mid - 1
            else:
                low = mid + 1

        raise InternalInvariantViolation(
            f"Zipf search for z={z!r} left [1, {n}] (S[N]={sum_probs[n]!r})"
        )
