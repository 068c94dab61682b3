from __future__ import annotations

import math
from collections import Counter

import pytest

from fyodor import rdg
from fyodor.generators import BooleanGenerator, DoubleGenerator, IntegerGenerator, LongGenerator
from fyodor.range import INT_MAX, INT_MIN, LONG_MAX, LONG_MIN, LONG_RANGE, Range
from fyodor.utils.errors import InvalidRangeError


@pytest.mark.parametrize(
    ("lo", "hi"),
    [(-5, 5), (0, 0), (1, 2), (INT_MIN, INT_MAX), (INT_MAX - 3, INT_MAX), (INT_MIN, INT_MIN + 1)],
)
def test_integer_range_inclusivity(lo: int, hi: int) -> None:
    gen = IntegerGenerator(Range.closed(lo, hi))
    values = gen.take(10_000)
    assert all(lo <= v <= hi for v in values)
    if lo == hi:
        assert set(values) == {lo}
    if hi - lo < 10:
        assert set(values) == set(range(lo, hi + 1))


def test_integer_default_domain_is_32_bit() -> None:
    assert IntegerGenerator().range == Range.closed(INT_MIN, INT_MAX)
    with pytest.raises(InvalidRangeError):
        IntegerGenerator(Range.closed(0, INT_MAX + 1))


def test_integer_bare_upper_bound() -> None:
    assert all(0 <= v <= 10 for v in rdg.integer(10).take(1000))
    with pytest.raises(InvalidRangeError):
        rdg.integer(-1)


def test_integer_is_roughly_uniform() -> None:
    counts = Counter(rdg.integer(Range.closed(0, 9)).take(10_000))
    assert set(counts) == set(range(10))
    assert all(800 < c < 1200 for c in counts.values())


def test_long_spans_full_domain() -> None:
    values = LongGenerator(LONG_RANGE).take(2000)
    assert all(LONG_MIN <= v <= LONG_MAX for v in values)
    assert any(v < INT_MIN for v in values)
    assert any(v > INT_MAX for v in values)
    assert LongGenerator(Range.fixed(LONG_MAX)).next() == LONG_MAX
    assert LongGenerator(Range.fixed(LONG_MIN)).next() == LONG_MIN
    with pytest.raises(InvalidRangeError):
        LongGenerator(Range.closed(0, LONG_MAX + 1))


def test_double_within_bounds() -> None:
    values = DoubleGenerator(Range.closed(-2.5, 2.5)).take(5000)
    assert all(-2.5 <= v <= 2.5 for v in values)
    assert DoubleGenerator(Range.fixed(1.5)).next() == 1.5
    assert all(0.0 <= v <= 3.0 for v in rdg.double(3.0).take(100))


def test_double_full_float_domain_does_not_overflow() -> None:
    big = 1.7976931348623157e308
    values = DoubleGenerator(Range.closed(-big, big)).take(1000)
    assert all(math.isfinite(v) and -big <= v <= big for v in values)


def test_double_rejects_non_finite_bounds() -> None:
    with pytest.raises(InvalidRangeError):
        DoubleGenerator(Range.closed(0.0, math.inf))


def test_boolean_produces_both_values() -> None:
    counts = Counter(BooleanGenerator().take(2000))
    assert set(counts) == {True, False}
    assert 800 < counts[True] < 1200


def test_integer_rejects_float_bounds_at_construction() -> None:
    with pytest.raises(InvalidRangeError):
        IntegerGenerator(Range.closed(0.5, 3.5))
    with pytest.raises(InvalidRangeError):
        LongGenerator(Range.closed(0, 2.0))


def test_double_rejects_bounds_too_large_for_float() -> None:
    with pytest.raises(InvalidRangeError, match="float"):
        DoubleGenerator(Range.closed(0, 10**400))
    with pytest.raises(InvalidRangeError):
        DoubleGenerator(10**400)
