"""Collection-valued generators: lists, sets and dicts of generated elements."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, TypeVar

from ..range import RangeLike
from ..seed import RandomSource
from ..utils.errors import GenerationExhaustedError
from ..utils.logging import get_logger
from .base import DEFAULT_MAX_ATTEMPTS, Generator, SizedGenerator

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)
V = TypeVar("V")

log = get_logger(__name__)


def list_of(element: Generator[T], count: RangeLike) -> Generator[list[T]]:
    """Lists with a length drawn from ``count``; duplicates are kept."""

    return SizedGenerator(element, count)


class SetGenerator(SizedGenerator[Any]):
    """Sets of distinct elements with a size drawn from ``count``.

    Elements are drawn until the set reaches the drawn size.  Each draw that
    repeats an existing element counts against ``max_attempts``; when the
    budget runs out :class:`~fyodor.utils.errors.GenerationExhaustedError` is
    raised rather than returning a smaller set.
    """

    def __init__(
        self,
        element: Generator[H],
        count: RangeLike,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        source: RandomSource | None = None,
    ) -> None:
        super().__init__(element, count, source)
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts

    def next(self) -> set[Any]:
        n = self.source.next_int_between(self.count.lower_bound, self.count.upper_bound)
        result: set[Any] = set()
        duplicates = 0
        while len(result) < n:
            value = self.element.next()
            if value in result:
                duplicates += 1
                if duplicates >= self.max_attempts:
                    log.debug("set of %d stalled at %d distinct elements", n, len(result))
                    raise GenerationExhaustedError(
                        self.max_attempts, f"set of {n} distinct elements"
                    )
                continue
            result.add(value)
        return result


def set_of(
    element: Generator[H], count: RangeLike, max_attempts: int = DEFAULT_MAX_ATTEMPTS
) -> Generator[set[H]]:
    return SetGenerator(element, count, max_attempts)


def dict_of(
    keys: Generator[H],
    values: Generator[V],
    count: RangeLike,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Generator[dict[H, V]]:
    """Dicts with distinct keys; values are drawn after all keys, in key order."""

    def build(key_set: set[H]) -> dict[H, V]:
        return {k: values.next() for k in sorted(key_set, key=repr)}

    return SetGenerator(keys, count, max_attempts).map(build)


__all__ = ["SetGenerator", "dict_of", "list_of", "set_of"]
