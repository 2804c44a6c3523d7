"""
Tests for Zipf sampling.
"""

import math

import pytest

from pyvariate.errors import AllocationFailure, InternalInvariantViolation, InvalidParameter
from pyvariate.random import LehmerSource
from pyvariate.sequence import take
from pyvariate.zipf import TableState, ZipfSampler, build_cdf


class TestBuildCdf:
    """Tests for the cumulative table."""

    def test_shape(self) -> None:
        """S[0] is 0, S is increasing and S[N] is 1."""
        s = build_cdf(1.0, 100)
        assert len(s) == 101
        assert s[0] == 0.0
        assert all(a < b for a, b in zip(s, s[1:]))
        assert s[-1] == pytest.approx(1.0, abs=1e-12)

    def test_probabilities(self) -> None:
        """S[i] - S[i-1] is proportional to 1/i^alpha."""
        s = build_cdf(2.0, 3)
        c = 1.0 / (1.0 + 0.25 + 1.0 / 9.0)
        assert s[1] == pytest.approx(c)
        assert s[2] - s[1] == pytest.approx(c / 4.0)
        assert s[3] - s[2] == pytest.approx(c / 9.0)

    def test_single_value(self) -> None:
        """N = 1 puts all mass on 1."""
        assert build_cdf(1.5, 1) == (0.0, 1.0)


class TestZipfSampler:
    """Tests for ZipfSampler."""

    def test_golden_sequence(self) -> None:
        """alpha=1.0, N=1000, seed 1."""
        sampler = ZipfSampler(1.0, 1000, LehmerSource(1))
        assert list(take(sampler, 5)) == [1, 1, 161, 17, 30]

    def test_range(self) -> None:
        """Values lie in [1, N]."""
        sampler = ZipfSampler(1.0, 1000, LehmerSource(3))
        for _ in range(20000):
            v = sampler()
            assert isinstance(v, int)
            assert 1 <= v <= 1000

    def test_concentration_increases_with_alpha(self) -> None:
        """The share of 1 grows as alpha grows."""
        shares = []
        for alpha in [0.5, 1.0, 1.5, 2.0, 3.0]:
            sampler = ZipfSampler(alpha, 100, LehmerSource(1))
            n = 10000
            shares.append(sum(1 for v in take(sampler, n) if v == 1) / n)
        assert shares == sorted(shares)
        assert len(set(shares)) == len(shares)

    def test_frequency_of_one(self) -> None:
        """P(1) = C for the normalization constant C."""
        sampler = ZipfSampler(1.0, 10, LehmerSource(5))
        c = 1.0 / sum(1.0 / i for i in range(1, 11))
        n = 20000
        share = sum(1 for v in take(sampler, n) if v == 1) / n
        assert abs(share - c) < 0.015

    def test_lazy_build(self) -> None:
        """The table is built on the first sample request."""
        sampler = ZipfSampler(1.0, 50, LehmerSource(1))
        assert sampler.state is TableState.UNBUILT
        assert sampler.table is None
        sampler()
        assert sampler.state is TableState.BUILT
        assert len(sampler.table) == 51

    def test_explicit_build(self) -> None:
        """build() without changes keeps the same table."""
        sampler = ZipfSampler(1.0, 50)
        sampler.build()
        table = sampler.table
        sampler.build(1.0, 50)
        assert sampler.table is table

    def test_rebuild_on_change(self) -> None:
        """Changing alpha or N discards and rebuilds the table."""
        sampler = ZipfSampler(1.0, 50)
        sampler.build()
        old = sampler.table
        sampler.build(n=20)
        assert sampler.params.n == 20
        assert len(sampler.table) == 21
        sampler.build(alpha=2.0)
        assert sampler.params.alpha == 2.0
        assert sampler.table != old
        assert sampler.table == build_cdf(2.0, 20)

    def test_rebuild_validates(self) -> None:
        """Invalid parameters on rebuild keep the old table."""
        sampler = ZipfSampler(1.0, 50)
        sampler.build()
        table = sampler.table
        with pytest.raises(InvalidParameter):
            sampler.build(alpha=0.0)
        assert sampler.table is table
        assert sampler.params.alpha == 1.0

    def test_rejects_boundary_draws(self, scripted) -> None:
        """0.0 and 1.0 are redrawn."""
        source = scripted([0.0, 1.0, 0.01])
        sampler = ZipfSampler(1.0, 10, source)
        assert sampler() == 1
        assert source.calls == 3

    def test_search_boundary(self, scripted) -> None:
        """z exactly equal to S[i] maps to i."""
        s = build_cdf(1.0, 10)
        source = scripted([s[3], s[3] + 1e-12])
        sampler = ZipfSampler(1.0, 10, source)
        assert sampler() == 3
        assert sampler() == 4

    def test_search_failure_is_fatal(self, scripted) -> None:
        """A draw beyond S[N] raises instead of returning out of range."""
        sampler = ZipfSampler(1.0, 10, scripted([0.5]))
        sampler.build()
        with pytest.raises(InternalInvariantViolation):
            sampler._search(1.5)

    @pytest.mark.parametrize("alpha,n", [(0.0, 10), (-1.0, 10), (1.0, 0), (1.0, -5), (math.nan, 10)])
    def test_invalid_parameters(self, alpha: float, n: int) -> None:
        """alpha > 0 and N >= 1 are required."""
        with pytest.raises(InvalidParameter):
            ZipfSampler(alpha, n)

    def test_allocation_failure(self) -> None:
        """A table too large to allocate raises AllocationFailure."""
        with pytest.raises(AllocationFailure):
            build_cdf(1.0, 2**63)

    def test_large_alpha(self) -> None:
        """i ** alpha overflowing leaves all mass on 1."""
        s = build_cdf(1000.0, 10)
        assert s[1] == 1.0
        assert s[10] == 1.0
        sampler = ZipfSampler(1000.0, 10, LehmerSource(1))
        assert [sampler() for _ in range(20)] == [1] * 20
