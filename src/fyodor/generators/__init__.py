"""Generators and combinators for reproducible test data."""

from .base import DEFAULT_MAX_ATTEMPTS, Generator, combine, constant, from_callable
from .characters import CharacterFilter, CharacterGenerator, CharacterSetGenerator
from .choice import ValuesGenerator, one_of, values, weighted
from .collections import dict_of, list_of, set_of
from .dates import DateGenerator
from .enums import EnumGenerator
from .locales import Iso3CountryGenerator, Locale, LocaleGenerator
from .numbers import BooleanGenerator, DoubleGenerator, IntegerGenerator, LongGenerator
from .strings import StringGenerator

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "BooleanGenerator",
    "CharacterFilter",
    "CharacterGenerator",
    "CharacterSetGenerator",
    "DateGenerator",
    "DoubleGenerator",
    "EnumGenerator",
    "Generator",
    "IntegerGenerator",
    "Iso3CountryGenerator",
    "Locale",
    "LocaleGenerator",
    "LongGenerator",
    "StringGenerator",
    "ValuesGenerator",
    "combine",
    "constant",
    "dict_of",
    "from_callable",
    "list_of",
    "one_of",
    "set_of",
    "values",
    "weighted",
]
