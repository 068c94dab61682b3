"""Numeric and boolean primitive generators.

Python has a single unbounded ``int`` type, so "integer" and "long" differ only
in the domain they validate against and default to: signed 32-bit and signed
64-bit respectively.  Both sample uniformly over the inclusive range using a
single rejection-sampled draw, so the full domain (``2**64`` values for longs)
is handled without overflow or modulo bias.
"""

from __future__ import annotations

import math

from ..range import INT_RANGE, LONG_RANGE, Range, RangeLike, as_range, check_within
from ..seed import RandomSource
from ..utils.errors import InvalidRangeError
from .base import Generator


class IntegerGenerator(Generator[int]):
    """Uniform integers over an inclusive range within the 32-bit domain."""

    domain: Range[int] = INT_RANGE

    def __init__(self, range: RangeLike | None = None, source: RandomSource | None = None) -> None:
        super().__init__(source)
        rng = self.domain if range is None else as_range(range)
        self.range: Range[int] = check_within(rng, self.domain)

    def next(self) -> int:
        return self.source.next_int_between(self.range.lower_bound, self.range.upper_bound)


class LongGenerator(IntegerGenerator):
    """Uniform integers over an inclusive range within the 64-bit domain."""

    domain = LONG_RANGE


class DoubleGenerator(Generator[float]):
    """Uniform floats in ``[lower, upper]``."""

    def __init__(
        self, range: Range[float] | float | None = None, source: RandomSource | None = None
    ) -> None:
        super().__init__(source)
        if range is None:
            range = Range(0.0, 1.0)
        elif not isinstance(range, Range):
            range = Range(0.0, range)
        try:
            lower, upper = float(range.lower_bound), float(range.upper_bound)
        except OverflowError as exc:
            raise InvalidRangeError(
                range.lower_bound, range.upper_bound, "bounds do not fit in a float"
            ) from exc
        if not (math.isfinite(lower) and math.isfinite(upper)):
            raise InvalidRangeError(lower, upper, "bounds must be finite")
        self.range: Range[float] = Range(lower, upper)

    def next(self) -> float:
        lower, upper = self.range.lower_bound, self.range.upper_bound
        u = self.source.next_double()
        # interpolate without computing upper - lower, which overflows for
        # spans wider than the float domain
        value = lower * (1.0 - u) + upper * u
        return min(max(value, lower), upper)


class BooleanGenerator(Generator[bool]):
    """Fair coin flips, one raw bit per draw."""

    def next(self) -> bool:
        return self.source.next_boolean()


__all__ = ["BooleanGenerator", "DoubleGenerator", "IntegerGenerator", "LongGenerator"]
