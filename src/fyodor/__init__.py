"""Reproducible random data generators for test fixtures."""

from . import rdg
from .generators import Generator
from .range import Range
from .seed import RandomSource, current_source, set_current_source, use_source
from .utils.errors import (
    EmptyCharsetError,
    FyodorError,
    GenerationExhaustedError,
    InvalidRangeError,
    InvalidWeightError,
)

__version__ = "0.1.0"

__all__ = [
    "EmptyCharsetError",
    "FyodorError",
    "GenerationExhaustedError",
    "Generator",
    "InvalidRangeError",
    "InvalidWeightError",
    "RandomSource",
    "Range",
    "__version__",
    "current_source",
    "rdg",
    "set_current_source",
    "use_source",
]
