"""
Arrival process driven by a variate stream, with SimPy as the engine.

ArrivalSource holds for each interarrival time drawn from its stream and
records the simulated arrival instants. It stops under the same rule as
sequence.until_total: after the arrival whose cumulative time reaches the
period. Several sources can share one environment, but each must own its
own LehmerSource.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Generator

import simpy

from pyvariate.sequence import until_total
from pyvariate.sink import Sink

if TYPE_CHECKING:
    from simpy import Environment


class ArrivalSource:
    """
    SimPy process generating arrivals.

    Args:
        env: SimPy environment to run in
        interarrival: Callable returning the next interarrival time
        period: Simulated time budget for the arrival sequence
        sink: Optional sink receiving each interarrival time
        on_arrival: Optional callback invoked with the arrival time
    """

    def __init__(
        self,
        env: Environment,
        interarrival: Callable[[], float],
        period: float,
        sink: Sink | None = None,
        on_arrival: Callable[[float], None] | None = None,
    ) -> None:
        self._env = env
        self._gaps = until_total(interarrival, period)
        self._sink = sink
        self._on_arrival = on_arrival
        self.arrivals: list[float] = []
        self._process: simpy.Process = env.process(self._run())

    @property
    def env(self) -> Environment:
        """Get the SimPy environment."""
        return self._env

    @property
    def process(self) -> simpy.Process:
        """The underlying SimPy process; yield it to wait for completion."""
        return self._process

    @property
    def done(self) -> bool:
        return not self._process.is_alive

    def _run(self) -> Generator[simpy.Event, None, None]:
        for gap in self._gaps:
            yield self._env.timeout(gap)
            if self._sink is not None:
                self._sink.write(gap)
            self.arrivals.append(self._env.now)
            if self._on_arrival is not None:
                self._on_arrival(self._env.now)


def run_arrivals(
    interarrival: Callable[[], float],
    period: float,
    env: Environment | None = None,
) -> list[float]:
    """Run an ArrivalSource to completion and return its arrival times."""
    if env is None:
        env = simpy.Environment()
    source = ArrivalSource(env, interarrival, period)
    env.run(until=source.process)
    return source.arrivals
