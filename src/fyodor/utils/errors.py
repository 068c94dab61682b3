"""Typed exceptions for range validation, weighted choice and sampling."""

from __future__ import annotations

from typing import Any, Sequence


class FyodorError(ValueError):
    """Base class for generator configuration and sampling errors."""


class InvalidRangeError(FyodorError):
    """Raised when a range's lower bound exceeds its upper bound."""

    def __init__(self, lower: Any, upper: Any, reason: str | None = None) -> None:
        self.lower = lower
        self.upper = upper
        detail = reason or "lower bound must not exceed upper bound"
        super().__init__(f"invalid range [{lower!r}, {upper!r}]: {detail}")


class InvalidWeightError(FyodorError):
    """Raised when a weighted choice is given non-positive weights."""

    def __init__(self, weights: Sequence[Any], reason: str | None = None) -> None:
        self.weights = tuple(weights)
        detail = reason or "weights must be positive finite numbers"
        super().__init__(f"invalid weights {list(self.weights)!r}: {detail}")


class GenerationExhaustedError(FyodorError):
    """Raised when bounded resampling fails to produce an acceptable value."""

    def __init__(self, attempts: int, what: str = "value") -> None:
        self.attempts = attempts
        super().__init__(
            f"no acceptable {what} after {attempts} attempts; "
            "the constraint is too restrictive for the underlying generator"
        )


class EmptyCharsetError(FyodorError):
    """Raised when a character set generator would have nothing to draw from."""

    def __init__(self, span: Any = None) -> None:
        self.span = span
        if span is None:
            msg = "character set is empty"
        else:
            msg = f"filter rejected every code point in {span}"
        super().__init__(msg)


__all__ = [
    "FyodorError",
    "InvalidRangeError",
    "InvalidWeightError",
    "GenerationExhaustedError",
    "EmptyCharsetError",
]
