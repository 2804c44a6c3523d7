"""
Immutable parameter records, one per distribution.

Each record validates itself on construction and raises InvalidParameter
(or MalformedDistribution for empirical tables) before any sampling starts.
Field names match the keyword arguments of the corresponding stream class.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pyvariate.errors import InvalidParameter, MalformedDistribution

# Tolerance on the sum of empirical probabilities
CDF_TOLERANCE = 1e-6


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidParameter(f"{name} must be finite (got {value})")


def _require_positive(name: str, value: float) -> None:
    _require_finite(name, value)
    if value <= 0.0:
        raise InvalidParameter(f"{name} must be > 0 (got {value})")


def _require_probability(name: str, value: float) -> None:
    _require_finite(name, value)
    if value < 0.0 or value > 1.0:
        raise InvalidParameter(f"{name} must be in [0, 1] (got {value})")


def _require_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(f"{name} must be an integer (got {value!r})")
    if value < 1:
        raise InvalidParameter(f"{name} must be >= 1 (got {value})")


@dataclass(frozen=True)
class ExponentialParams:
    rate: float

    def __post_init__(self) -> None:
        _require_positive("rate", self.rate)


@dataclass(frozen=True)
class ErlangParams:
    stages: int
    rate: float

    def __post_init__(self) -> None:
        _require_count("stages", self.stages)
        _require_positive("rate", self.rate)


@dataclass(frozen=True)
class HyperExponentialParams:
    """Two-state mixture: rate1 with probability p1, rate2 otherwise."""

    rate1: float
    rate2: float
    p1: float

    def __post_init__(self) -> None:
        _require_positive("rate1", self.rate1)
        _require_positive("rate2", self.rate2)
        _require_probability("p1", self.p1)


@dataclass(frozen=True)
class MorseHyperExponentialParams:
    """Hyperexponential fitted to a mean rate and coefficient of variation."""

    rate: float
    cov: float

    def __post_init__(self) -> None:
        _require_positive("rate", self.rate)
        _require_finite("cov", self.cov)
        if self.cov <= 1.0:
            raise InvalidParameter(
                f"Morse's method requires CoV > 1 (got {self.cov:.4f}). "
                "Use an exponential stream for CoV=1 or Erlang for CoV<1."
            )
        if self.p <= 0.0:
            raise InvalidParameter(f"CoV {self.cov} is too large for Morse's method")

    @property
    def p(self) -> float:
        """
        Branch probability from Morse's method.

        0.5 * (1 - sqrt((c^2 - 1) / (c^2 + 1))), rewritten with
        x = 2 / (c^2 + 1) so it does not cancel to 0 for large c.
        """
        x = 2.0 / (self.cov * self.cov + 1.0)
        return 0.5 * x / (1.0 + math.sqrt(1.0 - x))


@dataclass(frozen=True)
class InterruptedPoissonParams:
    """
    Interrupted Poisson process.

    Args:
        rate: Generation rate while on
        on_off: Transition rate from on to off
        off_on: Transition rate from off to on
    """

    rate: float
    on_off: float
    off_on: float

    def __post_init__(self) -> None:
        _require_positive("rate", self.rate)
        _require_positive("on_off", self.on_off)
        _require_positive("off_on", self.off_on)

    def as_hyperexponential(self) -> tuple[float, float, float]:
        """
        Equivalent two-phase hyperexponential (rate1, rate2, pi1).

        Interarrival times of an IPP are H2 distributed with these rates.
        """
        t = self.rate + self.on_off + self.off_on
        t1 = 4.0 * self.rate * self.off_on
        root = math.sqrt(t * t - t1)
        rate1 = 0.5 * (t + root)
        rate2 = 0.5 * (t - root)
        pi1 = (self.rate - rate2) / (rate1 - rate2)
        return rate1, rate2, pi1


@dataclass(frozen=True)
class DeterministicParams:
    rate: float

    def __post_init__(self) -> None:
        _require_positive("rate", self.rate)


@dataclass(frozen=True)
class ParetoParams:
    alpha: float
    k: float

    def __post_init__(self) -> None:
        _require_positive("alpha", self.alpha)
        _require_positive("k", self.k)


@dataclass(frozen=True)
class UniformParams:
    lo: float
    hi: float

    def __post_init__(self) -> None:
        _require_finite("lo", self.lo)
        _require_finite("hi", self.hi)
        if self.lo >= self.hi:
            raise InvalidParameter(f"Uniform requires lo < hi (got {self.lo}, {self.hi})")


@dataclass(frozen=True)
class ZipfParams:
    alpha: float
    n: int

    def __post_init__(self) -> None:
        _require_positive("alpha", self.alpha)
        _require_count("n", self.n)


@dataclass(frozen=True)
class EmpiricalParams:
    """
    Discrete distribution as (probability, value) pairs in input order.

    The probabilities must be non-negative and sum to 1.0 within
    CDF_TOLERANCE.
    """

    entries: tuple[tuple[float, float], ...]

    def __post_init__(self) -> None:
        try:
            entries = tuple((float(prob), float(value)) for prob, value in self.entries)
        except (TypeError, ValueError) as exc:
            raise MalformedDistribution(f"Entries must be (probability, value) pairs: {exc}") from exc
        object.__setattr__(self, "entries", entries)

        if not self.entries:
            raise MalformedDistribution("Empirical distribution has no entries")

        total = 0.0
        for i, (prob, value) in enumerate(self.entries):
            if not math.isfinite(prob) or not math.isfinite(value):
                raise MalformedDistribution(f"Entry {i} is not finite: ({prob}, {value})")
            if prob < 0.0:
                raise MalformedDistribution(f"Entry {i} has negative probability {prob}")
            total += prob

        if abs(total - 1.0) > CDF_TOLERANCE:
            raise MalformedDistribution(f"Sum of probabilities is {total:f} (must be 1.0)")
