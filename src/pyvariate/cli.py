"""
Command-line interface for pyvariate.

Writes one variate per line to a file or stdout, either a fixed number of
values or, for interarrival-time distributions, enough values to cover a
time period.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from contextlib import nullcontext
from typing import Any, TextIO

from pyvariate.distributions import create_stream
from pyvariate.empirical import parse_distribution
from pyvariate.errors import VariateError
from pyvariate.params import (
    DeterministicParams,
    ErlangParams,
    ExponentialParams,
    HyperExponentialParams,
    InterruptedPoissonParams,
    MorseHyperExponentialParams,
    ParetoParams,
    UniformParams,
    ZipfParams,
)
from pyvariate.random import DEFAULT_SEED, LehmerSource
from pyvariate.sequence import take, until_total
from pyvariate.sink import TextSink, write_all
from pyvariate.stats import Variance
from pyvariate.unique import ShuffleMode, UniqueIntegerGenerator
from pyvariate.zipf import ZipfSampler

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _add_common(parser: argparse.ArgumentParser, period: bool = False) -> None:
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Random number seed, greater than 0 (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="-",
        help="Output file name, '-' for stdout (default: -)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Log count, mean, standard deviation and CoV of the output",
    )
    if period:
        group = parser.add_mutually_exclusive_group(required=True)
        group.add_argument("-n", "--count", type=int, help="Number of values to generate")
        group.add_argument(
            "--period",
            type=float,
            help="Generate interarrival times until their sum reaches this period",
        )
    else:
        parser.add_argument(
            "-n", "--count", type=int, required=True, help="Number of values to generate"
        )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pyvariate",
        description="Reproducible random variate generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 1000 exponential interarrival times, rate 2.0
  pyvariate exp --rate 2.0 --count 1000 -o arrivals.dat

  # Hyperexponential (Morse's method) covering 20 seconds
  pyvariate morse --rate 1.0 --cov 2.0 --period 20

  # Zipf values with alpha 1.0 over 1..1000
  pyvariate zipf --alpha 1.0 -N 1000 --count 5 --seed 1
        """,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Distribution")

    p = subparsers.add_parser("exp", help="Exponential interarrival times")
    p.add_argument("--rate", type=float, required=True, help="Arrival rate (lambda)")
    _add_common(p, period=True)

    p = subparsers.add_parser("erlang", help="Erlang variates")
    p.add_argument("--stages", type=int, required=True, help="Number of stages")
    p.add_argument("--rate", type=float, required=True, help="Rate for each stage")
    _add_common(p, period=True)

    p = subparsers.add_parser("hyper", help="Two-state hyperexponential interarrival times")
    p.add_argument("--rate1", type=float, required=True, help="Arrival rate for state 1")
    p.add_argument("--rate2", type=float, required=True, help="Arrival rate for state 2")
    p.add_argument("--p1", type=float, required=True, help="Probability of state 1")
    _add_common(p, period=True)

    p = subparsers.add_parser("morse", help="Hyperexponential fitted to rate and CoV")
    p.add_argument("--rate", type=float, required=True, help="Arrival rate (lambda)")
    p.add_argument("--cov", type=float, required=True, help="Coefficient of variation (> 1)")
    _add_common(p, period=True)

    p = subparsers.add_parser("ipp", help="Interrupted Poisson process interarrival times")
    p.add_argument("--rate", type=float, required=True, help="Generation rate when on")
    p.add_argument("--on-off", type=float, required=True, help="On-to-off rate")
    p.add_argument("--off-on", type=float, required=True, help="Off-to-on rate")
    _add_common(p, period=True)

    p = subparsers.add_parser("det", help="Deterministic interarrival times")
    p.add_argument("--rate", type=float, required=True, help="Arrival rate (lambda)")
    _add_common(p, period=True)

    p = subparsers.add_parser("pareto", help="Pareto variates")
    p.add_argument("--alpha", type=float, required=True, help="Shape parameter")
    p.add_argument("--k", type=float, required=True, help="Minimum value")
    _add_common(p, period=True)

    p = subparsers.add_parser("uniform", help="Continuous uniform variates")
    p.add_argument("--min", dest="lo", type=float, required=True, help="Minimum value")
    p.add_argument("--max", dest="hi", type=float, required=True, help="Maximum value")
    _add_common(p)

    p = subparsers.add_parser("emp", help="Variates from an empirical distribution file")
    p.add_argument(
        "--dist",
        type=str,
        required=True,
        help="Distribution file of 'probability value' lines",
    )
    _add_common(p)

    p = subparsers.add_parser("zipf", help="Zipf (power law) integers")
    p.add_argument("--alpha", type=float, required=True, help="Alpha value")
    p.add_argument("-N", dest="n", type=int, required=True, help="Largest value")
    _add_common(p)

    p = subparsers.add_parser("uniq", help="Shuffled unique integers")
    p.add_argument(
        "--legacy-shuffle",
        action="store_true",
        help="Use the legacy full-range swap shuffle for byte-compatible output",
    )
    _add_common(p)

    return parser


def _build_params(args: argparse.Namespace) -> Any:
    match args.command:
        case "exp":
            return ExponentialParams(args.rate)
        case "erlang":
            return ErlangParams(args.stages, args.rate)
        case "hyper":
            return HyperExponentialParams(args.rate1, args.rate2, args.p1)
        case "morse":
            return MorseHyperExponentialParams(args.rate, args.cov)
        case "ipp":
            return InterruptedPoissonParams(args.rate, args.on_off, args.off_on)
        case "det":
            return DeterministicParams(args.rate)
        case "pareto":
            return ParetoParams(args.alpha, args.k)
        case "uniform":
            return UniformParams(args.lo, args.hi)
        case "zipf":
            return ZipfParams(args.alpha, args.n)
        case "emp":
            with open(args.dist, encoding="utf-8") as f:
                return parse_distribution(f)
    raise ValueError(f"Unknown command {args.command!r}")


def _values(args: argparse.Namespace) -> Iterable[float]:
    """Validate everything, then return the lazy output sequence."""
    if args.command == "uniq":
        mode = ShuffleMode.LEGACY if args.legacy_shuffle else ShuffleMode.FISHER_YATES
        return UniqueIntegerGenerator(args.seed, mode).generate(args.count)

    source = LehmerSource(args.seed)
    stream = create_stream(_build_params(args), source)
    if isinstance(stream, ZipfSampler):
        # Allocate the table before the output file is opened
        stream.build()
    if getattr(args, "period", None) is not None:
        return until_total(stream, args.period)
    return take(stream, args.count)


def _summarized(values: Iterable[float], summary: Variance) -> Iterable[float]:
    for value in values:
        summary.set_value(value)
        yield value


def _open_output(path: str) -> Any:
    if path == "-":
        return nullcontext(sys.stdout)
    return open(path, "w", encoding="utf-8")


def run(args: argparse.Namespace) -> int:
    """Generate the requested values and write them out."""
    values = _values(args)
    summary = Variance()
    if args.summary:
        values = _summarized(values, summary)

    fp: TextIO
    with _open_output(args.output) as fp:
        written = write_all(values, TextSink(fp))

    logger.info("Wrote %d values to %s", written, args.output)
    if args.summary:
        logger.info(
            "n=%d mean=%f std_dev=%f cov=%f min=%f max=%f",
            summary.number_of_samples,
            summary.mean,
            summary.std_dev,
            summary.cov,
            summary.min,
            summary.max,
        )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1 or args.summary:
        level = logging.INFO
    if args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)

    try:
        return run(args)
    except (VariateError, OSError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
