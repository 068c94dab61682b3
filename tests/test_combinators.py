from __future__ import annotations

import itertools
from typing import Any

import pytest

from fyodor import rdg
from fyodor.generators import Generator, combine, constant, from_callable
from fyodor.generators.numbers import IntegerGenerator
from fyodor.range import Range
from fyodor.seed import RandomSource, use_source
from fyodor.utils.errors import GenerationExhaustedError, InvalidRangeError


def _composition() -> Generator[list[Any]]:
    word = rdg.string(Range.closed(0, 6), "abc")
    pair = rdg.integer(Range.closed(-50, 50)).zip(word, lambda n, w: f"{n}:{w}")
    return rdg.one_of(pair, rdg.values("x", "y")).sized(Range.closed(0, 4))


@pytest.mark.parametrize("seed", [0, 1, -1, 2**63 - 1, 2**64 - 1, 123456789])
def test_identical_seeds_replay_identical_compositions(seed: int) -> None:
    with use_source(RandomSource(seed)):
        first = _composition().take(200)
    with use_source(RandomSource(seed)):
        second = _composition().take(200)
    assert first == second


def test_map_does_not_change_draws() -> None:
    raw = IntegerGenerator(Range.closed(0, 1000), source=RandomSource(7)).take(100)
    mapped = (
        IntegerGenerator(Range.closed(0, 1000), source=RandomSource(7))
        .map(lambda v: v * 3 + 1)
        .take(100)
    )
    assert mapped == [v * 3 + 1 for v in raw]


def test_filter_keeps_only_accepted_values() -> None:
    evens = rdg.integer(Range.closed(0, 100)).filter(lambda v: v % 2 == 0)
    assert all(v % 2 == 0 for v in evens.take(1000))


def test_filter_exhaustion_is_bounded() -> None:
    calls = itertools.count()

    def reject_ones(value: int) -> bool:
        next(calls)
        return value != 1

    gen = rdg.integer(Range.closed(1, 1)).filter(reject_ones, max_attempts=10)
    with pytest.raises(GenerationExhaustedError) as exc_info:
        gen.next()
    assert exc_info.value.attempts == 10
    assert next(calls) == 10
    assert "10 attempts" in str(exc_info.value)


def test_filter_requires_positive_attempts() -> None:
    with pytest.raises(ValueError):
        rdg.integer(5).filter(bool, max_attempts=0)


def test_zip_draws_left_then_right() -> None:
    with use_source(99):
        pairs = rdg.integer(Range.closed(0, 9)).zip(rdg.string(5), lambda a, b: (a, b)).take(50)
    with use_source(99):
        left, right = rdg.integer(Range.closed(0, 9)), rdg.string(5)
        manual = [(left.next(), right.next()) for _ in range(50)]
    assert pairs == manual


def test_combine_defaults_to_tuples() -> None:
    with use_source(4):
        triples = combine(rdg.boolean(), rdg.integer(3), constant("k")).take(20)
    assert all(len(t) == 3 and t[2] == "k" for t in triples)
    assert all(isinstance(t[0], bool) and 0 <= t[1] <= 3 for t in triples)


def test_combine_requires_generators() -> None:
    with pytest.raises(ValueError):
        combine()


def test_sized_sequence_bounds() -> None:
    gen = rdg.integer(Range.closed(0, 9)).sized(Range.closed(0, 5))
    lengths = set()
    for _ in range(10_000):
        values = gen.next()
        assert isinstance(values, list)
        assert 0 <= len(values) <= 5
        assert all(0 <= v <= 9 for v in values)
        lengths.add(len(values))
    assert lengths == {0, 1, 2, 3, 4, 5}


def test_sized_accepts_bare_upper_bound_and_keeps_duplicates() -> None:
    values = rdg.fixed("a").sized(Range.closed(3, 3)).next()
    assert values == ["a", "a", "a"]
    assert all(len(v) <= 2 for v in rdg.boolean().sized(2).take(100))


def test_sized_rejects_negative_counts() -> None:
    with pytest.raises(InvalidRangeError):
        rdg.boolean().sized(Range.closed(-1, 2))


def test_sized_with_explicit_source_draws_count_from_it() -> None:
    elements = IntegerGenerator(Range.closed(0, 9), source=RandomSource(5))
    first = elements.sized(4).take(10)
    elements = IntegerGenerator(Range.closed(0, 9), source=RandomSource(5))
    with use_source(12345):
        assert elements.sized(4).take(10) == first


def test_from_callable_uses_the_bound_source() -> None:
    gen = from_callable(lambda source: source.next_int_between(1, 6))
    with use_source(3):
        rolls = gen.take(30)
    with use_source(3) as source:
        assert rolls == [source.next_int_between(1, 6) for _ in range(30)]


def test_iteration_and_take() -> None:
    gen = rdg.integer(Range.closed(1, 2))
    assert len(list(itertools.islice(gen, 25))) == 25
    assert gen.take(0) == []
    with pytest.raises(ValueError):
        gen.take(-1)


def test_sized_rejects_float_count_bounds() -> None:
    with pytest.raises(InvalidRangeError):
        rdg.boolean().sized(Range.closed(0, 2.0))
