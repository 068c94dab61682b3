"""String generators built from a length range and a charset."""

from __future__ import annotations

from collections.abc import Iterable

from ..range import Range, RangeLike, as_range
from ..seed import RandomSource
from ..utils.errors import InvalidRangeError
from .base import Generator
from .characters import (
    CharacterGenerator,
    CharacterSetGenerator,
    default_charset,
    normalize_charset,
)


class StringGenerator(Generator[str]):
    """Strings whose length is uniform over ``length`` and characters over ``charset``.

    ``length`` may be a :class:`~fyodor.range.Range` or a bare maximum, in
    which case the minimum is zero and the empty string is a normal result.
    The length is drawn first, then each character in order.
    """

    def __init__(
        self,
        length: RangeLike = 30,
        charset: Iterable[str] | CharacterSetGenerator | CharacterGenerator | None = None,
        source: RandomSource | None = None,
    ) -> None:
        super().__init__(source)
        self.length: Range[int] = as_range(length)
        if self.length.lower_bound < 0:
            raise InvalidRangeError(
                self.length.lower_bound, self.length.upper_bound, "lengths must be non-negative"
            )
        self.charset = default_charset() if charset is None else normalize_charset(charset)

    def next(self) -> str:
        source = self.source
        n = source.next_int_between(self.length.lower_bound, self.length.upper_bound)
        chars = self.charset
        size = len(chars)
        return "".join(chars[source.next_below(size)] for _ in range(n))


__all__ = ["StringGenerator"]
