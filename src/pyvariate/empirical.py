"""
Empirical distribution sampling.

A discrete distribution given as (probability, value) pairs is turned into a
cumulative table once; each sample is a linear scan of that table.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pyvariate.errors import MalformedDistribution
from pyvariate.params import EmpiricalParams
from pyvariate.random import LehmerSource, VariateStream

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CdfEntry:
    """A single row of the cumulative table."""

    cumulative: float
    value: float


def parse_distribution(lines: Iterable[str]) -> EmpiricalParams:
    """
    Parse `probability value` pairs, one per line.

    Blank lines are skipped. Any other line must hold exactly two float
    tokens. The resulting record is validated like any other.
    """
    entries: list[tuple[float, float]] = []
    for lineno, line in enumerate(lines, start=1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) != 2:
            raise MalformedDistribution(
                f"Line {lineno}: expected 'probability value', got {line.strip()!r}"
            )
        try:
            entries.append((float(parts[0]), float(parts[1])))
        except ValueError as exc:
            raise MalformedDistribution(f"Line {lineno}: {exc}") from exc
    return EmpiricalParams(tuple(entries))


class EmpiricalTable(VariateStream):
    """
    Sampler for a user-supplied discrete distribution.

    Entries keep their input order; they are not sorted by value. Sampling
    takes a raw draw z and returns the value of the first entry whose
    cumulative probability is >= z.
    """

    def __init__(
        self,
        entries: Sequence[tuple[float, float]],
        source: LehmerSource | None = None,
    ) -> None:
        super().__init__(source)
        self.params = EmpiricalParams(tuple(entries))

        table: list[CdfEntry] = []
        cumulative = 0.0
        for prob, value in self.params.entries:
            cumulative = prob + cumulative
            table.append(CdfEntry(cumulative, value))
        self._table = tuple(table)

        logger.debug(
            "Built empirical CDF with %d entries (final cumulative %.9f)",
            len(self._table),
            cumulative,
        )

    @property
    def table(self) -> tuple[CdfEntry, ...]:
        """The cumulative table, in input order."""
        return self._table

    def __call__(self) -> float:
        z = self._source()
        for entry in self._table:
            if z <= entry.cumulative:
                return entry.value
        # Final cumulative may sit a rounding error below z
        return self._table[-1].value
