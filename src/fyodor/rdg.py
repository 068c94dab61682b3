"""Random data generator factories.

Free functions returning ready-to-use generators, meant to be imported as a
namespace::

    from fyodor import rdg

    ages = rdg.integer(Range.closed(18, 65))
    names = rdg.string(10, charset=string.ascii_letters)
    tags = rdg.list_of(rdg.values("a", "b", "c"), 3)

Every function builds a new generator; nothing here holds mutable state.
Numeric and length arguments accept a :class:`~fyodor.range.Range` or a bare
upper bound, in which case the lower bound is zero.
"""

from __future__ import annotations

import datetime as _dt
from collections.abc import Hashable, Iterable
from enum import Enum
from typing import Any, TypeVar

from .generators import base as _base
from .generators import choice as _choice
from .generators import collections as _collections
from .generators import composites as _composites
from .generators import dates as _dates
from .generators.base import DEFAULT_MAX_ATTEMPTS, Generator
from .generators.characters import (
    ALLOW_ALL,
    ASCII_PRINTABLE,
    CharacterGenerator,
    CharacterSetGenerator,
    FilterLike,
    default_charset,
)
from .generators.enums import EnumGenerator
from .generators.locales import Iso3CountryGenerator, Locale, LocaleGenerator
from .generators.numbers import BooleanGenerator, DoubleGenerator, IntegerGenerator, LongGenerator
from .generators.strings import StringGenerator
from .range import Range, RangeLike

T = TypeVar("T")
E = TypeVar("E", bound=Enum)
H = TypeVar("H", bound=Hashable)

DEFAULT_STRING_LENGTH = 30
DEFAULT_COLLECTION_SIZE = 10

# -- Numbers ----------------------------------------------------------------


def integer(range: RangeLike | None = None) -> Generator[int]:
    """Integers over ``range``; the whole signed 32-bit domain by default."""

    return IntegerGenerator(range)


def long(range: RangeLike | None = None) -> Generator[int]:
    """Integers over ``range``; the whole signed 64-bit domain by default."""

    return LongGenerator(range)


def double(range: Range[float] | float | None = None) -> Generator[float]:
    return DoubleGenerator(range)


def boolean() -> Generator[bool]:
    return BooleanGenerator()


# -- Characters and strings -------------------------------------------------


def character(charset: Iterable[str] | None = None) -> Generator[str]:
    return CharacterGenerator(default_charset() if charset is None else charset)


def character_set(
    range: RangeLike = ASCII_PRINTABLE, filter: FilterLike = ALLOW_ALL
) -> CharacterSetGenerator:
    return CharacterSetGenerator(range, filter)


def string(
    length: RangeLike = DEFAULT_STRING_LENGTH,
    charset: Iterable[str] | CharacterSetGenerator | None = None,
) -> Generator[str]:
    """Strings of up to ``length`` characters (or a length range)."""

    return StringGenerator(length, charset)


# -- Dates and enums --------------------------------------------------------


def date(range: Range[_dt.date] | None = None) -> Generator[_dt.date]:
    return _dates.DateGenerator(range)


def past_date(days: int = 365) -> Generator[_dt.date]:
    return _dates.past_dates(days)


def future_date(days: int = 365) -> Generator[_dt.date]:
    return _dates.future_dates(days)


def enum(enum_cls: type[E]) -> Generator[E]:
    return EnumGenerator(enum_cls)


# -- Choice -----------------------------------------------------------------


def fixed(value: T) -> Generator[T]:
    return _base.constant(value)


def values(*items: T) -> _choice.ValuesGenerator[T]:
    return _choice.values(*items)


def one_of(*options: Any) -> Generator[Any]:
    return _choice.one_of(*options)


def weighted(*options: tuple[Any, float]) -> Generator[Any]:
    return _choice.weighted(*options)


# -- Collections ------------------------------------------------------------


def list_of(
    element: Generator[T], count: RangeLike = DEFAULT_COLLECTION_SIZE
) -> Generator[list[T]]:
    return _collections.list_of(element, count)


def set_of(
    element: Generator[H],
    count: RangeLike = DEFAULT_COLLECTION_SIZE,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Generator[set[H]]:
    return _collections.set_of(element, count, max_attempts)


# -- Locales and formatted strings ------------------------------------------


def locale() -> Generator[Locale]:
    return LocaleGenerator()


def iso3_country(max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> Generator[str]:
    return Iso3CountryGenerator(max_attempts=max_attempts)


def suffix() -> _choice.ValuesGenerator[str]:
    return _composites.suffixes()


def domain() -> Generator[str]:
    return _composites.domains()


def email() -> Generator[str]:
    return _composites.email_addresses()


def postcode() -> Generator[str]:
    return _composites.uk_postcodes()


__all__ = [
    "boolean",
    "character",
    "character_set",
    "date",
    "domain",
    "double",
    "email",
    "enum",
    "fixed",
    "future_date",
    "integer",
    "iso3_country",
    "list_of",
    "locale",
    "long",
    "one_of",
    "past_date",
    "postcode",
    "set_of",
    "string",
    "suffix",
    "values",
    "weighted",
]
