"""Character generators and code point filters.

:class:`CharacterSetGenerator` scans a span of code points once, at
construction, and keeps those accepted by a filter.  The retained set is
exposed as :attr:`CharacterSetGenerator.charset`; its size is exactly the
number of accepted code points, and draws are uniform over it.

A filter is any object with an ``include_character(codepoint) -> bool``
method, or a plain callable taking a code point.  Stock filters cover the
common cases.
"""

from __future__ import annotations

import string
import unicodedata
from collections.abc import Callable, Iterable
from functools import cache
from typing import Protocol, Union, runtime_checkable

from ..range import Range, RangeLike, as_range, check_within
from ..seed import RandomSource
from ..utils.errors import EmptyCharsetError
from .base import Generator

MAX_CODE_POINT = 0x10FFFF
CODE_POINTS: Range[int] = Range(0, MAX_CODE_POINT)
ASCII_PRINTABLE: Range[int] = Range(0x20, 0x7E)


@runtime_checkable
class CharacterFilter(Protocol):
    def include_character(self, codepoint: int) -> bool: ...


FilterLike = Union[CharacterFilter, Callable[[int], bool]]


class _PredicateFilter:
    def __init__(self, name: str, predicate: Callable[[int], bool]) -> None:
        self.name = name
        self._predicate = predicate

    def include_character(self, codepoint: int) -> bool:
        return self._predicate(codepoint)

    def __repr__(self) -> str:
        return f"<CharacterFilter {self.name}>"


def _not_surrogate(cp: int) -> bool:
    return not 0xD800 <= cp <= 0xDFFF


ALLOW_ALL: CharacterFilter = _PredicateFilter("all", lambda cp: True)
LETTERS: CharacterFilter = _PredicateFilter("letters", lambda cp: chr(cp).isalpha())
DIGITS: CharacterFilter = _PredicateFilter("digits", lambda cp: chr(cp).isdigit())
ALPHANUMERIC: CharacterFilter = _PredicateFilter("alphanumeric", lambda cp: chr(cp).isalnum())
PRINTABLE: CharacterFilter = _PredicateFilter(
    "printable",
    lambda cp: _not_surrogate(cp)
    and chr(cp).isprintable()
    and unicodedata.category(chr(cp)) != "Cn",
)


def allow_only(chars: Iterable[str]) -> CharacterFilter:
    """Filter admitting exactly the characters in ``chars``."""

    allowed = frozenset(ord(c) for c in chars)
    return _PredicateFilter("allow_only", allowed.__contains__)


def _include(flt: FilterLike, codepoint: int) -> bool:
    if isinstance(flt, CharacterFilter):
        return bool(flt.include_character(codepoint))
    return bool(flt(codepoint))


def _scan(span: Range[int], flt: FilterLike) -> tuple[str, ...]:
    return tuple(
        chr(cp) for cp in range(span.lower_bound, span.upper_bound + 1) if _include(flt, cp)
    )


class CharacterSetGenerator(Generator[str]):
    """Uniform characters from the filtered code points of ``range``."""

    def __init__(
        self,
        range: RangeLike = ASCII_PRINTABLE,
        filter: FilterLike = ALLOW_ALL,
        source: RandomSource | None = None,
    ) -> None:
        super().__init__(source)
        self.range: Range[int] = check_within(as_range(range), CODE_POINTS, "code point range")
        self.filter = filter
        self._charset = _scan(self.range, filter)
        if not self._charset:
            raise EmptyCharsetError(self.range)

    @property
    def charset(self) -> tuple[str, ...]:
        return self._charset

    def __len__(self) -> int:
        return len(self._charset)

    def next(self) -> str:
        return self._charset[self.source.next_below(len(self._charset))]


class CharacterGenerator(Generator[str]):
    """Uniform characters from a literal charset; duplicates are collapsed."""

    def __init__(self, charset: Iterable[str], source: RandomSource | None = None) -> None:
        super().__init__(source)
        self._charset = normalize_charset(charset)

    @property
    def charset(self) -> tuple[str, ...]:
        return self._charset

    def next(self) -> str:
        return self._charset[self.source.next_below(len(self._charset))]


def normalize_charset(charset: Iterable[str] | CharacterSetGenerator) -> tuple[str, ...]:
    """Return ``charset`` as a de-duplicated tuple of single characters."""

    if isinstance(charset, (CharacterSetGenerator, CharacterGenerator)):
        return charset.charset
    chars: list[str] = []
    for item in charset:
        chars.extend(item)
    result = tuple(dict.fromkeys(chars))
    if not result:
        raise EmptyCharsetError()
    return result


@cache
def default_charset() -> tuple[str, ...]:
    """ASCII letters and digits; built once per process."""

    return tuple(string.ascii_letters + string.digits)


__all__ = [
    "ALLOW_ALL",
    "ALPHANUMERIC",
    "ASCII_PRINTABLE",
    "CODE_POINTS",
    "CharacterFilter",
    "CharacterGenerator",
    "CharacterSetGenerator",
    "DIGITS",
    "LETTERS",
    "MAX_CODE_POINT",
    "PRINTABLE",
    "allow_only",
    "default_charset",
    "normalize_charset",
]
