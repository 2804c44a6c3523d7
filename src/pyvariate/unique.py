"""
Unique random integers.

A 31-bit feedback recurrence (credited to Roy Hann) yields distinct values;
a shuffle driven by an owned LehmerSource then permutes them reproducibly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum

from pyvariate.errors import AllocationFailure, InvalidParameter
from pyvariate.random import DEFAULT_SEED, LehmerSource

logger = logging.getLogger(__name__)

# Outputs before the recurrence repeats
PERIOD = 2**31 - 1

RECURRENCE_START = 1


class ShuffleMode(Enum):
    """How the distinct values are permuted."""

    FISHER_YATES = "fisher-yates"
    # Swap each slot with a uniformly chosen slot from the whole array.
    # Slightly biased; kept for byte-compatible output.
    LEGACY = "legacy"


def bit_stream(start: int = RECURRENCE_START) -> Iterator[int]:
    """
    Infinite stream of the 31-bit recurrence.

    n' = (n >> 1) | (((n ^ (n >> 3)) & 1) << 30)

    The first PERIOD outputs are pairwise distinct.
    """
    n = start
    while True:
        n = (n >> 1) | (((n ^ (n >> 3)) & 1) << 30)
        yield n


class UniqueIntegerGenerator:
    """
    Generate a shuffled array of distinct integers.

    Args:
        seed: Seed for the shuffle's integer generator
        mode: Shuffle variant, unbiased Fisher-Yates by default
    """

    def __init__(self, seed: int = DEFAULT_SEED, mode: ShuffleMode = ShuffleMode.FISHER_YATES) -> None:
        self._mode = mode
        self._rng = LehmerSource(seed)
        if mode is ShuffleMode.LEGACY:
            # Legacy seeding also advances the generator once
            self._rng.next_int()

    @property
    def mode(self) -> ShuffleMode:
        return self._mode

    def distinct(self, num: int) -> list[int]:
        """First num outputs of the recurrence, unshuffled."""
        if isinstance(num, bool) or not isinstance(num, int):
            raise InvalidParameter(f"num must be an integer (got {num!r})")
        if num <= 0:
            raise InvalidParameter(f"num must be > 0 (got {num})")
        if num > PERIOD:
            raise InvalidParameter(f"num must not exceed the recurrence period {PERIOD} (got {num})")

        try:
            values = [0] * num
        except MemoryError as exc:
            raise AllocationFailure(f"Cannot allocate {num} values") from exc

        stream = bit_stream()
        for i in range(num):
            values[i] = next(stream)
        return values

    def shuffle(self, values: list[int]) -> None:
        """Permute values in place."""
        num = len(values)
        if self._mode is ShuffleMode.LEGACY:
            for i in range(num):
                j = self._rng.next_int() % num
                values[i], values[j] = values[j], values[i]
        else:
            for i in range(num - 1, 0, -1):
                j = self._rng.next_int() % (i + 1)
                values[i], values[j] = values[j], values[i]

    def generate(self, num: int) -> list[int]:
        """num distinct integers in shuffled order."""
        values = self.distinct(num)
        self.shuffle(values)
        logger.debug("Generated %d unique values (%s shuffle)", num, self._mode.value)
        return values
