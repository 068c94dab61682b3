"""Enumeration member generators."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from ..seed import RandomSource
from ..utils.errors import InvalidWeightError
from .base import Generator

E = TypeVar("E", bound=Enum)


class EnumGenerator(Generator[E]):
    """Members of ``enum_cls`` in definition order, chosen uniformly.

    Aliases are not drawn separately; iteration over an enum skips them.
    """

    def __init__(self, enum_cls: type[E], source: RandomSource | None = None) -> None:
        super().__init__(source)
        self.enum_cls = enum_cls
        self.members: tuple[E, ...] = tuple(enum_cls)
        if not self.members:
            raise InvalidWeightError((), f"{enum_cls.__name__} has no members to choose from")

    def next(self) -> E:
        return self.members[self.source.next_below(len(self.members))]


__all__ = ["EnumGenerator"]
