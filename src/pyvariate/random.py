"""
Uniform random source - Park-Miller minimal standard generator.

CRITICAL: Every variate in the package is derived from this generator, so its
sequence must stay bit-identical to the reference LCG:

    x[n+1] = 7^5 * x[n] mod (2^31 - 1)

computed with Schrage's decomposition so no intermediate value leaves the
signed 32-bit range. Seeding with 1 and drawing 10,000 times must leave the
state at 1043618065 (Jain 1991, p. 443, Figure 26.2).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pyvariate.errors import InvalidSeed

# Generator constants
MULTIPLIER = 16807  # 7**5
MODULUS = 2147483647  # 2**31 - 1
QUOTIENT = MODULUS // MULTIPLIER  # 127773
REMAINDER = MODULUS % MULTIPLIER  # 2836

DEFAULT_SEED = 1

# State after 10,000 draws from seed 1
CALIBRATION_STATE = 1043618065


class LehmerSource:
    """
    Multiplicative LCG producing uniforms in (0, 1).

    Each instance owns its state register. Independent runs need independent
    instances; a single instance is not safe to share between threads.
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._x = 0
        self.seed(seed)

    def seed(self, s: int) -> None:
        """
        Reset the state register to s.

        Produces no value. Raises InvalidSeed unless 1 <= s <= m-1.
        """
        if isinstance(s, bool) or not isinstance(s, int):
            raise InvalidSeed(f"Seed must be an integer (got {s!r})")
        if s <= 0 or s >= MODULUS:
            raise InvalidSeed(f"Seed must be in [1, {MODULUS - 1}] (got {s})")
        self._x = s

    @property
    def state(self) -> int:
        """Current value of the state register."""
        return self._x

    def _step(self) -> int:
        x_div_q = self._x // QUOTIENT
        x_mod_q = self._x % QUOTIENT
        x_new = MULTIPLIER * x_mod_q - REMAINDER * x_div_q
        if x_new <= 0:
            x_new += MODULUS
        self._x = x_new
        return x_new

    def next(self) -> float:
        """Advance the state and return it scaled into (0, 1)."""
        return self._step() / MODULUS

    __call__ = next

    def next_int(self) -> int:
        """Advance the state and return it as an integer in [1, m-1]."""
        return self._step()

    def error(self) -> float:
        """
        Chi-square error measure on uniform distribution.

        Draws 10,000 values into 100 cells and returns 1 - chi/r. The
        chi-square statistic should sit near r - 1, so a good generator gives
        a value near 0. Advances the state.
        """
        r = 100
        n = 100 * r
        f = [0] * r

        for _ in range(n):
            f[int(self.next() * r)] += 1

        t = sum(x * x for x in f)
        rt = r * t
        rtn = rt / n - n
        return 1.0 - (rtn / r)


def open_uniform(source: LehmerSource) -> float:
    """
    Draw from source until the value lies strictly inside (0, 1).

    Used by every transform that takes a logarithm or a reciprocal power of
    the draw.
    """
    while True:
        z = source()
        if z != 0.0 and z != 1.0:
            return z


class VariateStream(ABC):
    """
    Abstract base class for variate streams.

    A stream maps draws from a shared LehmerSource to one target
    distribution. Parameters are validated at construction, before any draw.
    """

    def __init__(self, source: LehmerSource | None = None) -> None:
        self._source = source if source is not None else LehmerSource()

    @property
    def source(self) -> LehmerSource:
        """The uniform source this stream draws from."""
        return self._source

    @abstractmethod
    def __call__(self) -> float:
        """Generate next random value from the distribution."""
        ...
