"""Weighted and uniform choice among generators and literal values.

Options may be generators or plain values.  Each call makes exactly one
selection draw from the source; if the selected option is a generator, one
value is then drawn from it.  Integer weights are selected exactly with
:meth:`~fyodor.seed.RandomSource.next_below`; any float weight switches the
selection to a single :meth:`~fyodor.seed.RandomSource.next_double` draw.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from numbers import Real
from typing import Any, TypeVar, Union

from ..seed import RandomSource
from ..utils.errors import InvalidWeightError
from .base import Generator

T = TypeVar("T")

Option = Union[Generator[T], T]


def _validate_weights(weights: Sequence[Any]) -> None:
    if not weights:
        raise InvalidWeightError(weights, "at least one option is required")
    for w in weights:
        if isinstance(w, bool) or not isinstance(w, Real):
            raise InvalidWeightError(weights, f"weight {w!r} is not a number")
        if not math.isfinite(w) or w <= 0:
            raise InvalidWeightError(weights, f"weight {w!r} must be positive and finite")


class WeightedChoiceGenerator(Generator[T]):
    """Pick an option with probability proportional to its weight."""

    def __init__(
        self,
        options: Sequence[tuple[Option[T], float]],
        source: RandomSource | None = None,
    ) -> None:
        super().__init__(source)
        pairs = list(options)
        self.options: tuple[Option[T], ...] = tuple(opt for opt, _ in pairs)
        self.weights: tuple[float, ...] = tuple(w for _, w in pairs)
        _validate_weights(self.weights)
        self._exact = all(isinstance(w, int) for w in self.weights)
        self._total = sum(self.weights)
        cumulative = []
        running: float = 0
        for w in self.weights:
            running += w
            cumulative.append(running)
        self._cumulative = tuple(cumulative)

    def _select(self) -> Option[T]:
        if self._exact:
            point: float = self.source.next_below(int(self._total))
        else:
            point = self.source.next_double() * self._total
        for option, bound in zip(self.options, self._cumulative):
            if point < bound:
                return option
        return self.options[-1]

    def next(self) -> T:
        option = self._select()
        if isinstance(option, Generator):
            return option.next()
        return option


class ValuesGenerator(WeightedChoiceGenerator[T]):
    """Uniform choice over literal values, exposed as :attr:`values`."""

    def __init__(self, values: Sequence[T], source: RandomSource | None = None) -> None:
        super().__init__([(v, 1) for v in values], source)

    @property
    def values(self) -> tuple[T, ...]:
        return self.options  # type: ignore[return-value]

    def next(self) -> T:
        return self._select()  # type: ignore[return-value]


def weighted(*options: tuple[Option[T], float]) -> Generator[T]:
    """Choose among ``(option, weight)`` pairs proportionally to weight."""

    return WeightedChoiceGenerator(options)


def one_of(*options: Option[T]) -> Generator[T]:
    """Choose uniformly among generators and/or literal values."""

    return WeightedChoiceGenerator([(opt, 1) for opt in options])


def values(*items: T) -> ValuesGenerator[T]:
    """Choose uniformly among literal values, never treating them as generators."""

    return ValuesGenerator(items)


__all__ = [
    "Option",
    "ValuesGenerator",
    "WeightedChoiceGenerator",
    "one_of",
    "values",
    "weighted",
]
