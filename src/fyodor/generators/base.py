"""The generator abstraction and its core combinators.

A :class:`Generator` produces an unbounded sequence of values on demand via
:meth:`Generator.next`.  Generators hold no memory of earlier output; each call
depends only on the state of the :class:`~fyodor.seed.RandomSource` it draws
from.  A generator constructed with an explicit ``source`` always draws from
it; otherwise the source bound to the current context is looked up on every
draw, so reseeding or rebinding the context immediately affects every
generator built without one.

Complex generators are built by composition rather than subclassing:

    point = rdg.integer(10).zip(rdg.integer(10), lambda x, y: (x, y))
    evens = rdg.integer(100).map(lambda n: n * 2)
    words = rdg.string(8).filter(bool).sized(Range.closed(1, 3))

Draw order is part of the reproducibility contract: combinators always draw
from their operands left to right, once per operand per value, except for
:meth:`Generator.filter` which redraws until its predicate holds.
"""

from __future__ import annotations

import abc
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from ..range import RangeLike, as_range
from ..seed import RandomSource, current_source
from ..utils.errors import GenerationExhaustedError, InvalidRangeError
from ..utils.logging import get_logger

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

DEFAULT_MAX_ATTEMPTS = 100

log = get_logger(__name__)


class Generator(abc.ABC, Generic[T]):
    """Lazy, seed-controlled source of values of one type."""

    def __init__(self, source: RandomSource | None = None) -> None:
        self._source = source

    @property
    def source(self) -> RandomSource:
        """The source the next draw will use."""

        return self._source if self._source is not None else current_source()

    @abc.abstractmethod
    def next(self) -> T:
        """Return the next value."""

    # -- Iteration ----------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        while True:
            yield self.next()

    def take(self, n: int) -> list[T]:
        """Return the next ``n`` values as a list."""

        if n < 0:
            raise ValueError("n must be non-negative")
        return [self.next() for _ in range(n)]

    # -- Combinators --------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> Generator[U]:
        """Transform each value with ``fn`` without changing draws."""

        return MappedGenerator(self, fn)

    def filter(
        self, predicate: Callable[[T], bool], max_attempts: int = DEFAULT_MAX_ATTEMPTS
    ) -> Generator[T]:
        """Redraw until ``predicate`` holds, at most ``max_attempts`` times."""

        return FilteredGenerator(self, predicate, max_attempts)

    def zip(self, other: Generator[U], combiner: Callable[[T, U], R]) -> Generator[R]:
        """Draw from ``self`` then ``other`` and combine the pair."""

        return CombinedGenerator((self, other), combiner)

    def sized(self, count: RangeLike) -> Generator[list[T]]:
        """Produce lists whose length is drawn from ``count``."""

        return SizedGenerator(self, count)


# ---------------------------------------------------------------------------
# Adapters
# ---------------------------------------------------------------------------


class ConstantGenerator(Generator[T]):
    """Always return the same value; consumes no randomness."""

    def __init__(self, value: T) -> None:
        super().__init__()
        self.value = value

    def next(self) -> T:
        return self.value


class CallableGenerator(Generator[T]):
    """Adapt a function of a :class:`RandomSource` into a generator."""

    def __init__(
        self, fn: Callable[[RandomSource], T], source: RandomSource | None = None
    ) -> None:
        super().__init__(source)
        self._fn = fn

    def next(self) -> T:
        return self._fn(self.source)


def constant(value: T) -> Generator[T]:
    return ConstantGenerator(value)


def from_callable(
    fn: Callable[[RandomSource], T], source: RandomSource | None = None
) -> Generator[T]:
    return CallableGenerator(fn, source)


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class MappedGenerator(Generator[U]):
    def __init__(self, inner: Generator[T], fn: Callable[[T], U]) -> None:
        super().__init__(inner._source)
        self.inner = inner
        self.fn = fn

    def next(self) -> U:
        return self.fn(self.inner.next())


class FilteredGenerator(Generator[T]):
    """Bounded reject-and-resample.

    Raises :class:`~fyodor.utils.errors.GenerationExhaustedError` once
    ``max_attempts`` consecutive draws have been rejected.
    """

    def __init__(
        self, inner: Generator[T], predicate: Callable[[T], bool], max_attempts: int
    ) -> None:
        super().__init__(inner._source)
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.inner = inner
        self.predicate = predicate
        self.max_attempts = max_attempts

    def next(self) -> T:
        for _ in range(self.max_attempts):
            value = self.inner.next()
            if self.predicate(value):
                return value
        log.debug("filter rejected %d draws in a row", self.max_attempts)
        raise GenerationExhaustedError(self.max_attempts)


class CombinedGenerator(Generator[R]):
    """Draw once from each operand, in order, and combine the results."""

    def __init__(
        self, generators: tuple[Generator[Any], ...], combiner: Callable[..., R]
    ) -> None:
        super().__init__()
        if not generators:
            raise ValueError("at least one generator is required")
        self._source = generators[0]._source
        self.generators = generators
        self.combiner = combiner

    def next(self) -> R:
        return self.combiner(*[g.next() for g in self.generators])


def combine(
    *generators: Generator[Any], combiner: Callable[..., Any] = lambda *v: v
) -> Generator[Any]:
    """N-ary :meth:`Generator.zip`; the default combiner builds a tuple."""

    return CombinedGenerator(tuple(generators), combiner)


class SizedGenerator(Generator[list[T]]):
    """Lists of ``element`` values with a length drawn from ``count``."""

    def __init__(
        self,
        element: Generator[T],
        count: RangeLike,
        source: RandomSource | None = None,
    ) -> None:
        super().__init__(source if source is not None else element._source)
        self.element = element
        self.count = as_range(count)
        if self.count.lower_bound < 0:
            raise InvalidRangeError(
                self.count.lower_bound, self.count.upper_bound, "sizes must be non-negative"
            )

    def next(self) -> list[T]:
        n = self.source.next_int_between(self.count.lower_bound, self.count.upper_bound)
        return [self.element.next() for _ in range(n)]


__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "CallableGenerator",
    "CombinedGenerator",
    "ConstantGenerator",
    "FilteredGenerator",
    "Generator",
    "MappedGenerator",
    "SizedGenerator",
    "combine",
    "constant",
    "from_callable",
]
