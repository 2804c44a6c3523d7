"""
Single-server queue fed by bursty arrivals.

Demonstrates:
- ArrivalSource driving customers into a SimPy Resource
- Exponential vs Morse hyperexponential arrivals at the same rate
- Variance summaries of interarrival gaps and waiting times
- Independent LehmerSource instances for arrivals and service

A higher CoV at the same arrival rate produces longer waits.
"""

from __future__ import annotations

import simpy

from pyvariate import (
    ArrivalSource,
    ExponentialStream,
    LehmerSource,
    ListSink,
    MorseHyperExponentialStream,
    Variance,
)

ARRIVAL_RATE = 0.8
SERVICE_RATE = 1.0
PERIOD = 10000.0


def customer(env: simpy.Environment, server: simpy.Resource, service, waits: Variance):
    arrived = env.now
    with server.request() as req:
        yield req
        waits += env.now - arrived
        yield env.timeout(service())


def run(label: str, interarrival) -> None:
    env = simpy.Environment()
    server = simpy.Resource(env, capacity=1)
    service = ExponentialStream(SERVICE_RATE, LehmerSource(4711))
    waits = Variance()
    gaps = ListSink()

    source = ArrivalSource(
        env,
        interarrival,
        PERIOD,
        sink=gaps,
        on_arrival=lambda now: env.process(customer(env, server, service, waits)),
    )
    env.run(until=source.process)

    spacing = Variance()
    for gap in gaps.values:
        spacing += gap

    print(f"{label}")
    print(f"  Arrivals        : {len(source.arrivals)}")
    print(f"  Mean gap        : {spacing.mean:.4f}")
    print(f"  Gap CoV         : {spacing.cov:.4f}")
    print(f"  Customers served: {waits.number_of_samples}")
    print(f"  Mean wait       : {waits.mean:.4f}")
    print()


def main() -> None:
    run("Exponential arrivals", ExponentialStream(ARRIVAL_RATE, LehmerSource(1)))
    run("Hyperexponential arrivals (CoV 3)", MorseHyperExponentialStream(ARRIVAL_RATE, 3.0, LehmerSource(1)))


if __name__ == "__main__":
    main()
