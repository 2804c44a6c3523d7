"""
Finite sample sequences.

Both helpers are lazy generators: values are drawn only as they are
consumed, and a sequence cannot be restarted.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator

from pyvariate.errors import InvalidParameter


def take(stream: Callable[[], float], count: int) -> Iterator[float]:
    """Yield exactly count values from stream."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidParameter(f"count must be an integer (got {count!r})")
    if count < 0:
        raise InvalidParameter(f"count must be >= 0 (got {count})")
    return _take(stream, count)


def _take(stream: Callable[[], float], count: int) -> Iterator[float]:
    for _ in range(count):
        yield stream()


def until_total(stream: Callable[[], float], threshold: float) -> Iterator[float]:
    """
    Yield values until their running sum reaches threshold.

    The value that crosses the threshold is yielded too, so the sequence
    always holds at least one value.
    """
    if not math.isfinite(threshold) or threshold <= 0.0:
        raise InvalidParameter(f"threshold must be finite and > 0 (got {threshold})")
    return _until_total(stream, threshold)


def _until_total(stream: Callable[[], float], threshold: float) -> Iterator[float]:
    total = 0.0
    while True:
        value = stream()
        if value < 0.0:
            raise InvalidParameter(
                f"Cumulative stopping needs non-negative values (got {value})"
            )
        yield value
        total = total + value
        if total >= threshold:
            return
