"""Closed (inclusive-inclusive) intervals over ordered values.

A :class:`Range` bounds every numeric, length and date generator in the
package.  Ranges are immutable and validated on construction, so a range that
exists is always well formed: ``lower_bound <= upper_bound``.  Single-value
ranges are allowed.

Integer spans are computed with Python's arbitrary precision integers, so a
range covering the full signed 64-bit domain reports a span of ``2**64``
instead of overflowing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Generic, TypeVar, Union

from .utils.errors import InvalidRangeError

T = TypeVar("T")

INT_MIN: Final = -(2**31)
INT_MAX: Final = 2**31 - 1
LONG_MIN: Final = -(2**63)
LONG_MAX: Final = 2**63 - 1


@dataclass(frozen=True)
class Range(Generic[T]):
    """An inclusive ``[lower_bound, upper_bound]`` interval."""

    lower_bound: T
    upper_bound: T

    def __post_init__(self) -> None:
        if self.lower_bound is None or self.upper_bound is None:
            raise InvalidRangeError(self.lower_bound, self.upper_bound, "bounds must not be None")
        try:
            ordered = self.lower_bound <= self.upper_bound  # type: ignore[operator]
        except TypeError as exc:
            raise InvalidRangeError(
                self.lower_bound, self.upper_bound, "bounds are not comparable"
            ) from exc
        if not ordered:
            raise InvalidRangeError(self.lower_bound, self.upper_bound)

    # -- Construction -------------------------------------------------------

    @classmethod
    def closed(cls, lower: T, upper: T) -> Range[T]:
        """Return the range ``[lower, upper]``."""

        return cls(lower, upper)

    @classmethod
    def fixed(cls, value: T) -> Range[T]:
        """Return a single-value range."""

        return cls(value, value)

    @classmethod
    def at_most(cls, upper: Any, lower: Any = 0) -> Range[Any]:
        """Return ``[lower, upper]`` where ``lower`` defaults to zero."""

        return cls(lower, upper)

    # -- Queries ------------------------------------------------------------

    def contains(self, value: T) -> bool:
        """Return ``True`` if ``value`` lies within the bounds, inclusively."""

        return self.lower_bound <= value <= self.upper_bound  # type: ignore[operator]

    def __contains__(self, value: object) -> bool:
        try:
            return self.contains(value)  # type: ignore[arg-type]
        except TypeError:
            return False

    def is_single_value(self) -> bool:
        return self.lower_bound == self.upper_bound

    def span(self) -> int:
        """Number of integers in the range; only defined for integer bounds."""

        lower, upper = _integer_bounds(self)
        return upper - lower + 1

    def midpoint(self) -> int:
        lower, upper = _integer_bounds(self)
        return lower + (upper - lower) // 2

    def __str__(self) -> str:
        return f"[{self.lower_bound}, {self.upper_bound}]"


def _integer_bounds(rng: Range[Any]) -> tuple[int, int]:
    lower, upper = rng.lower_bound, rng.upper_bound
    if not _is_int(lower) or not _is_int(upper):
        raise TypeError(f"span is only defined for integer ranges, got {rng}")
    return int(lower), int(upper)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


RangeLike = Union[Range[Any], int]


def as_range(value: RangeLike, *, default_lower: int = 0) -> Range[Any]:
    """Coerce ``value`` into an integer :class:`Range`.

    A bare integer is read as an upper bound with ``default_lower`` as the
    lower bound, so ``as_range(10)`` is ``[0, 10]``.  A range whose bounds are
    not both integers raises :class:`InvalidRangeError`.
    """

    if isinstance(value, Range):
        if not (_is_int(value.lower_bound) and _is_int(value.upper_bound)):
            raise InvalidRangeError(
                value.lower_bound, value.upper_bound, "bounds must be integers"
            )
        return value
    if _is_int(value):
        return Range(default_lower, value)
    raise TypeError(f"expected a Range or an integer upper bound, got {value!r}")


def check_within(rng: Range[Any], domain: Range[Any], what: str = "range") -> Range[Any]:
    """Raise :class:`InvalidRangeError` unless ``rng`` lies inside ``domain``."""

    if not (domain.contains(rng.lower_bound) and domain.contains(rng.upper_bound)):
        raise InvalidRangeError(
            rng.lower_bound, rng.upper_bound, f"{what} must lie within {domain}"
        )
    return rng


INT_RANGE: Final[Range[int]] = Range(INT_MIN, INT_MAX)
LONG_RANGE: Final[Range[int]] = Range(LONG_MIN, LONG_MAX)

__all__ = [
    "INT_MAX",
    "INT_MIN",
    "INT_RANGE",
    "LONG_MAX",
    "LONG_MIN",
    "LONG_RANGE",
    "Range",
    "RangeLike",
    "as_range",
    "check_within",
]
