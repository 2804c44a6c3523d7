"""
Error hierarchy for variate generation.

Parameter problems are detected when a stream or table is constructed, so a
run either starts with valid inputs or never starts at all.
"""

from __future__ import annotations


class VariateError(Exception):
    """Base class for all pyvariate errors."""


class InvalidSeed(VariateError, ValueError):
    """Seed outside the generator's valid range [1, m-1]."""


class InvalidParameter(VariateError, ValueError):
    """Distribution parameter outside its domain."""


class MalformedDistribution(VariateError, ValueError):
    """Empirical distribution that does not form a valid CDF."""


class AllocationFailure(VariateError, MemoryError):
    """Requested table or sample size could not be allocated."""


class InternalInvariantViolation(VariateError, RuntimeError):
    """
    A sampler produced a result outside its guaranteed range.

    Indicates table corruption or a floating-point edge case. Never caught
    inside the library.
    """
