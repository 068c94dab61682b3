"""Calendar date generators."""

from __future__ import annotations

from datetime import date, timedelta

from ..range import Range
from ..seed import RandomSource
from ..utils.errors import InvalidRangeError
from .base import Generator


class DateGenerator(Generator[date]):
    """Dates uniformly distributed over an inclusive range of days."""

    def __init__(
        self, range: Range[date] | None = None, source: RandomSource | None = None
    ) -> None:
        super().__init__(source)
        if range is None:
            range = Range(date.min, date.max)
        if not (isinstance(range.lower_bound, date) and isinstance(range.upper_bound, date)):
            raise InvalidRangeError(range.lower_bound, range.upper_bound, "bounds must be dates")
        self.range: Range[date] = range
        self._ordinals = (range.lower_bound.toordinal(), range.upper_bound.toordinal())

    def next(self) -> date:
        lower, upper = self._ordinals
        return date.fromordinal(self.source.next_int_between(lower, upper))


def _window(reference: date | None, days: int, minimum: int) -> date:
    if days < minimum:
        raise InvalidRangeError(minimum, days, f"window must be at least {minimum} days")
    return reference or date.today()


def past_dates(days: int = 365, *, reference: date | None = None) -> DateGenerator:
    """Dates in ``[reference - days, reference - 1]``; ``reference`` defaults to today.

    ``days`` must be at least one.  The reference day is fixed when the
    generator is built, not on every draw.
    """

    ref = _window(reference, days, 1)
    return DateGenerator(Range(ref - timedelta(days=days), ref - timedelta(days=1)))


def future_dates(days: int = 365, *, reference: date | None = None) -> DateGenerator:
    """Dates in ``[reference + 1, reference + days]``; ``reference`` defaults to today."""

    ref = _window(reference, days, 1)
    return DateGenerator(Range(ref + timedelta(days=1), ref + timedelta(days=days)))


def dates_around(days: int, *, reference: date | None = None) -> DateGenerator:
    """Dates within ``days`` either side of ``reference``, inclusive."""

    ref = _window(reference, days, 0)
    return DateGenerator(Range(ref - timedelta(days=days), ref + timedelta(days=days)))


__all__ = ["DateGenerator", "dates_around", "future_dates", "past_dates"]
