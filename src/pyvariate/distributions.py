"""
Inversion-method variate streams.

Each stream draws from a shared LehmerSource and applies a closed-form
inverse CDF. Transforms that take a logarithm or a reciprocal power reject
draws of exactly 0.0 or 1.0 and redraw, so ln(0) is never computed.

Draw order per value is part of the reproducibility contract and follows the
historical generators exactly.
"""

from __future__ import annotations

import math
from dataclasses import asdict
from typing import Any

from pyvariate.empirical import EmpiricalTable
from pyvariate.params import (
    DeterministicParams,
    EmpiricalParams,
    ErlangParams,
    ExponentialParams,
    HyperExponentialParams,
    InterruptedPoissonParams,
    MorseHyperExponentialParams,
    ParetoParams,
    UniformParams,
    ZipfParams,
)
from pyvariate.random import LehmerSource, VariateStream, open_uniform
from pyvariate.zipf import ZipfSampler


def exponential(source: LehmerSource, mean: float) -> float:
    """One exponential variate with the given mean, by inversion."""
    return -mean * math.log(open_uniform(source))


class ExponentialStream(VariateStream):
    """Exponential distribution with given rate."""

    def __init__(self, rate: float, source: LehmerSource | None = None) -> None:
        super().__init__(source)
        self.params = ExponentialParams(rate)
        self._mean = 1.0 / rate

    def __call__(self) -> float:
        return exponential(self._source, self._mean)


class ErlangStream(VariateStream):
    """
    Erlang distribution: sum of `stages` exponentials with a common rate.

    Each stage consumes its own open-interval draw.
    """

    def __init__(self, stages: int, rate: float, source: LehmerSource | None = None) -> None:
        super().__init__(source)
        self.params = ErlangParams(stages, rate)
        self._mean = 1.0 / rate

    def __call__(self) -> float:
        total = 0.0
        for _ in range(self.params.stages):
            total += exponential(self._source, self._mean)
        return total


class HyperExponentialStream(VariateStream):
    """
    Two-state hyperexponential distribution.

    A raw draw u selects the branch: rate1 when u <= p1, rate2 otherwise.
    """

    def __init__(
        self,
        rate1: float,
        rate2: float,
        p1: float,
        source: LehmerSource | None = None,
    ) -> None:
        super().__init__(source)
        self.params = HyperExponentialParams(rate1, rate2, p1)
        self._mean1 = 1.0 / rate1
        self._mean2 = 1.0 / rate2

    def __call__(self) -> float:
        if self._source() <= self.params.p1:
            return exponential(self._source, self._mean1)
        return exponential(self._source, self._mean2)


class MorseHyperExponentialStream(VariateStream):
    """
    Hyperexponential distribution with given rate and coefficient of variation.

    Uses Morse's method (MacDougall 1987, SMPL). Requires CoV > 1.
    """

    def __init__(self, rate: float, cov: float, source: LehmerSource | None = None) -> None:
        super().__init__(source)
        self.params = MorseHyperExponentialParams(rate, cov)
        self._p = self.params.p
        mean = 1.0 / rate
        self._scale_a = mean / (1.0 - self._p)
        self._scale_b = mean / self._p

    def __call__(self) -> float:
        z1 = open_uniform(self._source)
        z2 = open_uniform(self._source)
        scale = self._scale_a if z1 > self._p else self._scale_b
        return -0.5 * scale * math.log(z2)


class InterruptedPoissonStream(VariateStream):
    """
    Interarrival times of an interrupted Poisson process.

    Sampled through the equivalent H2 distribution; the branch is taken
    when a raw draw is strictly below pi1.
    """

    def __init__(
        self,
        rate: float,
        on_off: float,
        off_on: float,
        source: LehmerSource | None = None,
    ) -> None:
        super().__init__(source)
        self.params = InterruptedPoissonParams(rate, on_off, off_on)
        rate1, rate2, self._pi1 = self.params.as_hyperexponential()
        self._mean1 = 1.0 / rate1
        self._mean2 = 1.0 / rate2

    def __call__(self) -> float:
        if self._source() < self._pi1:
            return exponential(self._source, self._mean1)
        return exponential(self._source, self._mean2)


class DeterministicStream(VariateStream):
    """Constant interarrival time 1/rate. Consumes no draws."""

    def __init__(self, rate: float, source: LehmerSource | None = None) -> None:
        super().__init__(source)
        self.params = DeterministicParams(rate)
        self._value = 1.0 / rate

    def __call__(self) -> float:
        return self._value


class ParetoStream(VariateStream):
    """
    Pareto distribution with shape alpha and minimum k.

    Every value is >= k.
    """

    def __init__(self, alpha: float, k: float, source: LehmerSource | None = None) -> None:
        super().__init__(source)
        self.params = ParetoParams(alpha, k)
        self._inv_alpha = 1.0 / alpha

    def __call__(self) -> float:
        z = open_uniform(self._source)
        denom = math.pow(z, self._inv_alpha)
        if denom == 0.0:
            # z ** (1/alpha) underflows for small alpha
            return math.inf
        return self.params.k / denom


class UniformStream(VariateStream):
    """Continuous uniform distribution on (lo, hi)."""

    def __init__(self, lo: float, hi: float, source: LehmerSource | None = None) -> None:
        super().__init__(source)
        self.params = UniformParams(lo, hi)
        self._range = hi - lo

    def __call__(self) -> float:
        return self._source() * self._range + self.params.lo


STREAM_TYPES: dict[type, type[VariateStream]] = {
    ExponentialParams: ExponentialStream,
    ErlangParams: ErlangStream,
    HyperExponentialParams: HyperExponentialStream,
    MorseHyperExponentialParams: MorseHyperExponentialStream,
    InterruptedPoissonParams: InterruptedPoissonStream,
    DeterministicParams: DeterministicStream,
    ParetoParams: ParetoStream,
    UniformParams: UniformStream,
    EmpiricalParams: EmpiricalTable,
    ZipfParams: ZipfSampler,
}


def create_stream(params: Any, source: LehmerSource | None = None) -> VariateStream:
    """
    Build the stream for a parameter record.

    The record has already been validated; the stream re-derives its record
    from the same fields.
    """
    try:
        stream_type = STREAM_TYPES[type(params)]
    except KeyError:
        raise TypeError(f"No stream registered for {type(params).__name__}") from None
    return stream_type(**asdict(params), source=source)
