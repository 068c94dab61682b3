"""Formatted string generators assembled from primitives.

Nothing here subclasses a generator.  Each helper combines smaller generators
with :func:`~fyodor.generators.base.combine`, ``map`` and the choice helpers,
then maps the parts to the final representation.  The values are shaped like
real data but are not checked against any registry.
"""

from __future__ import annotations

import string

from ..range import Range
from .base import Generator, combine
from .characters import CharacterGenerator
from .choice import ValuesGenerator, one_of, values
from .strings import StringGenerator

SUFFIXES: tuple[str, ...] = (
    "Jr", "Sr", "II", "III", "IV", "V", "PhD", "MD", "DDS", "Esq", "CPA", "RN",
)  # fmt: skip

TOP_LEVEL_DOMAINS: tuple[str, ...] = (
    "com", "org", "net", "info", "biz", "io", "co.uk", "org.uk", "de", "fr", "eu",
)  # fmt: skip

_LOWER = string.ascii_lowercase
_UPPER = string.ascii_uppercase
_DIGITS = string.digits
# letters that never appear in the inward part of a UK postcode
_INWARD_LETTERS = "ABDEFGHJLNPQRSTUWXYZ"


def suffixes() -> ValuesGenerator[str]:
    """Personal name suffixes; the full list is available as ``.values``."""

    return values(*SUFFIXES)


def domains(max_label_length: int = 15) -> Generator[str]:
    """Lowercase ``label.tld`` domain names with labels of 1 to ``max_label_length``."""

    label = StringGenerator(Range(1, max_label_length), _LOWER + _DIGITS)
    return label.zip(values(*TOP_LEVEL_DOMAINS), lambda name, tld: f"{name}.{tld}")


def email_addresses(max_local_length: int = 20) -> Generator[str]:
    """``local@domain`` addresses; the local part may contain one dot."""

    word = StringGenerator(Range(1, max_local_length), _LOWER + _DIGITS)
    local = one_of(word, word.zip(word, lambda a, b: f"{a}.{b}"))
    return local.zip(domains(), lambda user, host: f"{user}@{host}")


def uk_postcodes() -> Generator[str]:
    """Strings shaped like UK postcodes: ``A9 9AA``, ``A99 9AA``, ``AA9 9AA``, ``AA99 9AA``."""

    area = StringGenerator(Range(1, 2), _UPPER)
    district = StringGenerator(Range(1, 2), _DIGITS)
    sector = CharacterGenerator(_DIGITS)
    unit = StringGenerator(Range(2, 2), _INWARD_LETTERS)
    return combine(
        area, district, sector, unit, combiner=lambda a, d, s, u: f"{a}{d} {s}{u}"
    )


__all__ = [
    "SUFFIXES",
    "TOP_LEVEL_DOMAINS",
    "domains",
    "email_addresses",
    "suffixes",
    "uk_postcodes",
]
