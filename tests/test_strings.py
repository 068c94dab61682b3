from __future__ import annotations

import pytest

from fyodor import rdg
from fyodor.generators import CharacterSetGenerator, StringGenerator
from fyodor.generators.characters import DIGITS
from fyodor.range import Range
from fyodor.utils.errors import EmptyCharsetError, InvalidRangeError


def test_length_and_charset_respected() -> None:
    gen = StringGenerator(3, "xy")
    lengths = set()
    for value in gen.take(5000):
        assert len(value) <= 3
        assert set(value) <= {"x", "y"}
        lengths.add(len(value))
    assert lengths == {0, 1, 2, 3}


def test_empty_string_is_a_normal_result() -> None:
    assert StringGenerator(0).take(10) == [""] * 10
    assert "" in StringGenerator(1, "a").take(200)


def test_length_range() -> None:
    values = rdg.string(Range.closed(4, 6)).take(1000)
    assert all(4 <= len(v) <= 6 for v in values)
    assert all(v.isalnum() and v.isascii() for v in values)


def test_charset_from_character_set_generator() -> None:
    digits = CharacterSetGenerator(Range.closed(0, 127), DIGITS)
    assert all(v.isdigit() for v in StringGenerator(Range.closed(1, 8), digits).take(500))


def test_invalid_construction_fails_fast() -> None:
    with pytest.raises(InvalidRangeError):
        StringGenerator(Range.closed(-1, 3))
    with pytest.raises(EmptyCharsetError):
        StringGenerator(5, "")


def test_default_maximum_length() -> None:
    assert all(len(v) <= 30 for v in rdg.string().take(500))


def test_float_length_bounds_rejected() -> None:
    with pytest.raises(InvalidRangeError):
        StringGenerator(Range.closed(0, 2.5))
