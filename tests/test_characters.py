from __future__ import annotations

import pytest

from fyodor.generators.characters import (
    ALLOW_ALL,
    DIGITS,
    LETTERS,
    PRINTABLE,
    CharacterGenerator,
    CharacterSetGenerator,
    allow_only,
    default_charset,
    normalize_charset,
)
from fyodor.range import Range
from fyodor.utils.errors import EmptyCharsetError, InvalidRangeError


class VowelFilter:
    def include_character(self, codepoint: int) -> bool:
        return chr(codepoint) in "aeiou"


def test_allow_all_keeps_every_code_point() -> None:
    gen = CharacterSetGenerator(Range.closed(50, 1000), ALLOW_ALL)
    assert len(gen.charset) == 1000 - 50 + 1
    assert len(gen) == 951


def test_charset_size_matches_admitted_count_and_covers_it() -> None:
    span = Range.closed(0x41, 0x7A)  # "A".."z", with six punctuation marks between
    gen = CharacterSetGenerator(span, LETTERS)
    assert len(gen.charset) == 52
    seen = set()
    for _ in range(1_000_000):
        seen.add(gen.next())
    assert seen == set(gen.charset)


def test_protocol_and_callable_filters() -> None:
    vowels = CharacterSetGenerator(Range.closed(ord("a"), ord("z")), VowelFilter())
    assert vowels.charset == tuple("aeiou")
    odd = CharacterSetGenerator(Range.closed(0x30, 0x39), lambda cp: cp % 2 == 1)
    assert odd.charset == tuple("13579")
    assert set(odd.take(500)) == set("13579")


def test_stock_filters() -> None:
    assert CharacterSetGenerator(Range.closed(0, 127), DIGITS).charset == tuple("0123456789")
    only = CharacterSetGenerator(Range.closed(0, 127), allow_only("xyz"))
    assert only.charset == ("x", "y", "z")
    printable = CharacterSetGenerator(Range.closed(0, 0x7F), PRINTABLE)
    assert len(printable.charset) == 95


def test_empty_charset_fails_at_construction() -> None:
    span = Range.closed(0x30, 0x39)
    with pytest.raises(EmptyCharsetError) as exc_info:
        CharacterSetGenerator(span, LETTERS)
    assert exc_info.value.span == span
    assert "[48, 57]" in str(exc_info.value)


def test_code_points_outside_unicode_rejected() -> None:
    with pytest.raises(InvalidRangeError):
        CharacterSetGenerator(Range.closed(0x10FFF0, 0x110000))
    with pytest.raises(InvalidRangeError):
        CharacterSetGenerator(Range.closed(-1, 10))


def test_character_generator_deduplicates() -> None:
    gen = CharacterGenerator("aabbb")
    assert gen.charset == ("a", "b")
    assert set(gen.take(200)) == {"a", "b"}


def test_normalize_charset() -> None:
    assert normalize_charset(["ab", "c", "a"]) == ("a", "b", "c")
    gen = CharacterSetGenerator(Range.closed(ord("p"), ord("r")))
    assert normalize_charset(gen) == ("p", "q", "r")
    with pytest.raises(EmptyCharsetError):
        normalize_charset("")


def test_default_charset_is_shared() -> None:
    assert default_charset() is default_charset()
    assert len(default_charset()) == 62
