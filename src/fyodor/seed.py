"""Seeded random sources and their per-context lifecycle.

Every generator in the package draws its randomness from a
:class:`RandomSource`.  A source holds a 64-bit seed and a ``random.Random``
bit generator derived from it; two sources created with the same seed and
asked for the same sequence of draws return identical values.

Sources are scoped to the current execution context through
:mod:`contextvars` rather than held in module-level mutable state.  The first
call to :func:`current_source` in a context creates a randomly seeded source and
logs its seed so that a failing run can be replayed.  :func:`use_source` binds
a specific source for the duration of a block, which is how tests and
reproduction runs pin the sequence:

    with use_source(RandomSource(seed=1234)):
        values = rdg.integer(10).take(5)

Threads start with an empty context and therefore get their own source.
asyncio tasks copy the context of their creator and share its source object
unless they bind another one.

Seeds
-----
Seeds are integers in the signed or unsigned 64-bit domain.  Negative seeds
are folded to their unsigned two's-complement value before seeding the bit
generator because ``random.Random`` seeds from ``abs(seed)``; without the fold
``-1`` and ``1`` would replay the same sequence.  The signed and unsigned
spellings of the same 64-bit pattern (``-1`` and ``2**64 - 1``) are the same
seed.
"""

from __future__ import annotations

import contextvars
import random
import secrets
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Final

from .utils.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover
    from .config import ConfigModel

log = get_logger(__name__)

_MASK_64: Final = (1 << 64) - 1
SEED_MIN: Final = -(1 << 63)
SEED_MAX: Final = _MASK_64

# ---------------------------------------------------------------------------
# Seed helpers
# ---------------------------------------------------------------------------


def _check_seed(seed: int) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError(f"seed must be an integer, got {seed!r}")
    if not SEED_MIN <= seed <= SEED_MAX:
        raise ValueError(f"seed {seed} is outside the 64-bit domain")
    return seed


def parse_seed(text: str) -> int:
    """Parse a seed printed by a previous run.

    Decimal (optionally signed) and ``0x``-prefixed hexadecimal forms are
    accepted; surrounding whitespace and ``_`` separators are ignored.
    """

    cleaned = text.strip().replace("_", "")
    if not cleaned:
        raise ValueError("seed text is empty")
    try:
        value = int(cleaned, 0) if cleaned.lower().lstrip("+-").startswith("0x") else int(cleaned)
    except ValueError as exc:
        raise ValueError(f"cannot parse seed from {text!r}") from exc
    return _check_seed(value)


def random_seed() -> int:
    """Return a fresh 64-bit seed from the operating system's entropy pool."""

    return secrets.randbits(64)


# ---------------------------------------------------------------------------
# Random source
# ---------------------------------------------------------------------------


class RandomSource:
    """Seeded origin of all randomness consumed by generators."""

    def __init__(self, seed: int | None = None) -> None:
        """Create a source from ``seed`` or, when omitted, a random seed."""

        self._rng = random.Random()
        self._seed = 0
        if seed is None:
            self.reseed_randomly()
        else:
            self.reseed(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def current_seed(self) -> int:
        """Return the seed in effect."""

        return self._seed

    def reseed(self, seed: int) -> None:
        """Reset the bit generator so later draws depend only on ``seed``."""

        self._seed = _check_seed(seed)
        self._rng.seed(seed & _MASK_64)
        log.debug("random source reseeded with %d", seed)

    def reseed_randomly(self) -> int:
        """Reseed from OS entropy and return the chosen seed."""

        seed = random_seed()
        self.reseed(seed)
        return seed

    # -- Raw draws ----------------------------------------------------------

    def next_raw_bits(self, num_bits: int) -> int:
        """Return a uniform non-negative integer of ``num_bits`` random bits."""

        if num_bits < 0:
            raise ValueError("num_bits must be non-negative")
        if num_bits == 0:
            return 0
        return self._rng.getrandbits(num_bits)

    def next_double(self) -> float:
        """Return a uniform float in ``[0.0, 1.0)``."""

        return self._rng.random()

    def next_long(self) -> int:
        """Return a uniform integer over the signed 64-bit domain."""

        bits = self.next_raw_bits(64)
        return bits - (1 << 64) if bits >= (1 << 63) else bits

    def next_boolean(self) -> bool:
        return self.next_raw_bits(1) == 1

    def next_below(self, bound: int) -> int:
        """Return a uniform integer in ``[0, bound)`` by rejection sampling."""

        if bound <= 0:
            raise ValueError("bound must be positive")
        if bound == 1:
            return 0
        k = (bound - 1).bit_length()
        r = self.next_raw_bits(k)
        while r >= bound:
            r = self.next_raw_bits(k)
        return r

    def next_int_between(self, lower: int, upper: int) -> int:
        """Return a uniform integer in ``[lower, upper]``, inclusively.

        The span is computed with arbitrary precision so full 64-bit (or
        wider) ranges are handled without overflow.
        """

        if lower > upper:
            raise ValueError(f"lower {lower} exceeds upper {upper}")
        return lower + self.next_below(upper - lower + 1)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed})"


# ---------------------------------------------------------------------------
# Context scoping
# ---------------------------------------------------------------------------

_current: contextvars.ContextVar[RandomSource] = contextvars.ContextVar("fyodor_random_source")


def current_source() -> RandomSource:
    """Return the source bound to this context, creating one on first use."""

    try:
        return _current.get()
    except LookupError:
        source = RandomSource()
        _current.set(source)
        log.info("created random source with seed %d", source.seed)
        return source


def set_current_source(source: RandomSource) -> None:
    """Bind ``source`` to the current context until replaced."""

    _current.set(source)


@contextmanager
def use_source(source: RandomSource | int | None = None) -> Iterator[RandomSource]:
    """Bind a source for the duration of the ``with`` block.

    ``source`` may be a :class:`RandomSource`, a seed, or ``None`` for a fresh
    randomly seeded source.  The previous binding is restored on exit.
    """

    if not isinstance(source, RandomSource):
        source = RandomSource(seed=source)
    token = _current.set(source)
    try:
        yield source
    finally:
        _current.reset(token)


def source_from_config(cfg: ConfigModel) -> RandomSource:
    """Create a source from the configured seed, or a random one if unset."""

    source = RandomSource(seed=cfg.seed.value)
    if cfg.seed.value is None:
        log.info("using random seed %d (set %s to replay)", source.seed, cfg.seed.env)
    else:
        log.info("using configured seed %d", source.seed)
    return source


__all__ = [
    "RandomSource",
    "SEED_MAX",
    "SEED_MIN",
    "current_source",
    "parse_seed",
    "random_seed",
    "set_current_source",
    "source_from_config",
    "use_source",
]
