"""
pyvariate - reproducible random variates for simulation and traffic generation.

Every stream draws from an explicitly owned Park-Miller generator, so a given
seed and parameter set always yields the same sequence.
"""

from pyvariate.errors import (
    AllocationFailure,
    InternalInvariantViolation,
    InvalidParameter,
    InvalidSeed,
    MalformedDistribution,
    VariateError,
)
from pyvariate.random import LehmerSource, VariateStream, open_uniform
from pyvariate.params import (
    DeterministicParams,
    EmpiricalParams,
    ErlangParams,
    ExponentialParams,
    HyperExponentialParams,
    InterruptedPoissonParams,
    MorseHyperExponentialParams,
    ParetoParams,
    UniformParams,
    ZipfParams,
)
from pyvariate.distributions import (
    DeterministicStream,
    ErlangStream,
    ExponentialStream,
    HyperExponentialStream,
    InterruptedPoissonStream,
    MorseHyperExponentialStream,
    ParetoStream,
    UniformStream,
    create_stream,
)
from pyvariate.empirical import EmpiricalTable, parse_distribution
from pyvariate.zipf import TableState, ZipfSampler
from pyvariate.unique import ShuffleMode, UniqueIntegerGenerator, bit_stream
from pyvariate.sequence import take, until_total
from pyvariate.sink import ListSink, Sink, TextSink, write_all
from pyvariate.process import ArrivalSource, run_arrivals
from pyvariate.stats import Mean, Variance

__version__ = "0.1.0"
__all__ = [
    # Errors
    "VariateError",
    "InvalidSeed",
    "InvalidParameter",
    "MalformedDistribution",
    "AllocationFailure",
    "InternalInvariantViolation",
    # Uniform source
    "LehmerSource",
    "VariateStream",
    "open_uniform",
    # Parameters
    "DeterministicParams",
    "EmpiricalParams",
    "ErlangParams",
    "ExponentialParams",
    "HyperExponentialParams",
    "InterruptedPoissonParams",
    "MorseHyperExponentialParams",
    "ParetoParams",
    "UniformParams",
    "ZipfParams",
    # Streams
    "DeterministicStream",
    "ErlangStream",
    "ExponentialStream",
    "HyperExponentialStream",
    "InterruptedPoissonStream",
    "MorseHyperExponentialStream",
    "ParetoStream",
    "UniformStream",
    "EmpiricalTable",
    "ZipfSampler",
    "TableState",
    "create_stream",
    "parse_distribution",
    # Unique integers
    "ShuffleMode",
    "UniqueIntegerGenerator",
    "bit_stream",
    # Sequences and sinks
    "take",
    "until_total",
    "Sink",
    "TextSink",
    "ListSink",
    "write_all",
    # Simulation
    "ArrivalSource",
    "run_arrivals",
    # Statistics
    "Mean",
    "Variance",
]
