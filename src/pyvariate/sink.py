"""
Output sinks.

The core never opens files; callers hand it an object with a write(value)
method. TextSink writes the classic generator file format: floats as %f,
integers in decimal, each followed by " \\n".
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TextIO


class Sink(Protocol):
    """Anything that accepts one value at a time."""

    def write(self, value: float) -> None: ...


class TextSink:
    """Write one value per line to an already-open text stream."""

    def __init__(self, fp: TextIO) -> None:
        self._fp = fp
        self._count = 0

    @property
    def count(self) -> int:
        """Number of values written so far."""
        return self._count

    @staticmethod
    def format(value: float) -> str:
        if isinstance(value, int):
            return f"{value} \n"
        return f"{value:f} \n"

    def write(self, value: float) -> None:
        self._fp.write(self.format(value))
        self._count += 1


class ListSink:
    """Collect values in memory."""

    def __init__(self) -> None:
        self.values: list[float] = []

    def write(self, value: float) -> None:
        self.values.append(value)


def write_all(values: Iterable[float], sink: Sink) -> int:
    """Drain values into sink and return how many were written."""
    n = 0
    for value in values:
        sink.write(value)
        n += 1
    return n
