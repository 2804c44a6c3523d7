"""
Tests for sample sequences and sinks.
"""

import io
import math

import pytest

from pyvariate.distributions import ExponentialStream, UniformStream
from pyvariate.errors import InvalidParameter
from pyvariate.random import LehmerSource
from pyvariate.sequence import take, until_total
from pyvariate.sink import ListSink, TextSink, write_all
from pyvariate.zipf import ZipfSampler


class TestTake:
    """Tests for fixed-count sequences."""

    def test_count(self) -> None:
        """Exactly count values are produced."""
        stream = ExponentialStream(1.0, LehmerSource(1))
        assert len(list(take(stream, 17))) == 17

    def test_zero(self) -> None:
        """count = 0 yields nothing and draws nothing."""
        source = LehmerSource(1)
        assert list(take(ExponentialStream(1.0, source), 0)) == []
        assert source.state == 1

    def test_lazy(self) -> None:
        """Values are drawn only as they are consumed."""
        source = LehmerSource(1)
        seq = take(UniformStream(0.0, 1.0, source), 10)
        assert source.state == 1
        next(seq)
        assert source.state == 16807

    def test_not_restartable(self) -> None:
        """A consumed sequence stays empty."""
        seq = take(UniformStream(0.0, 1.0), 3)
        assert len(list(seq)) == 3
        assert list(seq) == []

    @pytest.mark.parametrize("count", [-1, 1.5, None])
    def test_invalid_count(self, count) -> None:
        """Negative or non-integer counts fail before any draw."""
        with pytest.raises(InvalidParameter):
            take(UniformStream(0.0, 1.0), count)


class TestUntilTotal:
    """Tests for cumulative stopping."""

    def test_includes_crossing_value(self) -> None:
        """The value that reaches the threshold is the last one yielded."""
        values = list(until_total(ExponentialStream(1.0, LehmerSource(1)), 30.0))
        assert sum(values) >= 30.0
        assert sum(values[:-1]) < 30.0

    def test_at_least_one_value(self) -> None:
        """A first value beyond the threshold is still yielded."""
        values = list(until_total(ExponentialStream(2.0, LehmerSource(1)), 5.0))
        assert len(values) == 1
        assert f"{values[0]:f}" == "5.879006"

    @pytest.mark.parametrize("threshold", [0.0, -1.0, math.inf, math.nan])
    def test_invalid_threshold(self, threshold: float) -> None:
        """The threshold must be positive and finite."""
        with pytest.raises(InvalidParameter):
            until_total(ExponentialStream(1.0), threshold)

    def test_negative_value(self) -> None:
        """A negative variate aborts the sequence."""
        seq = until_total(UniformStream(-2.0, -1.0), 10.0)
        with pytest.raises(InvalidParameter):
            next(seq)


class TestTextSink:
    """Tests for the text output format."""

    def test_float_format(self) -> None:
        """Floats are written with six decimals and a trailing space."""
        fp = io.StringIO()
        sink = TextSink(fp)
        sink.write(2536.8401953)
        sink.write(0.25)
        assert fp.getvalue() == "2536.840195 \n0.250000 \n"
        assert sink.count == 2

    def test_int_format(self) -> None:
        """Integers are written in decimal."""
        fp = io.StringIO()
        n = write_all(take(ZipfSampler(1.0, 1000, LehmerSource(1)), 5), TextSink(fp))
        assert n == 5
        assert fp.getvalue() == "1 \n1 \n161 \n17 \n30 \n"

    def test_write_all(self) -> None:
        """write_all drains the sequence and counts values."""
        sink = ListSink()
        assert write_all(take(UniformStream(1.0, 2.0, LehmerSource(1)), 3), sink) == 3
        assert [f"{v:f}" for v in sink.values] == ["1.000008", "1.131538", "1.755605"]
