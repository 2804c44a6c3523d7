"""
Pytest configuration and fixtures for pyvariate.
"""

from collections.abc import Callable, Iterable

import pytest
import simpy


class ScriptedSource:
    """
    Uniform source replaying fixed draws.

    Lets tests feed boundary values (exactly 0.0 or 1.0) that the real
    generator never produces from a valid state.
    """

    def __init__(self, draws: Iterable[float]) -> None:
        self._draws = list(draws)
        self.calls = 0

    def __call__(self) -> float:
        value = self._draws[self.calls]
        self.calls += 1
        return value

    next = __call__


@pytest.fixture
def scripted() -> Callable[[Iterable[float]], ScriptedSource]:
    """Build a ScriptedSource from a list of draws."""

    def _make(draws: Iterable[float]) -> ScriptedSource:
        return ScriptedSource(draws)

    return _make


@pytest.fixture
def env() -> simpy.Environment:
    """Create a fresh SimPy environment."""
    return simpy.Environment()


@pytest.fixture
def example_distribution() -> list[tuple[float, float]]:
    """The reference empirical distribution."""
    return [(0.25, 5.0), (0.45, 2.0), (0.15, 1.0), (0.10, 0.5), (0.05, 0.25)]
