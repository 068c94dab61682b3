"""Typer-based command line interface for sampling generators.

The ``sample`` command prints values from one of the stock generators so a
seed reported by a failing test can be replayed and inspected by hand.  The
seed in effect is always written to stderr as ``seed: <n>``.

Exit codes
----------
0 success
4 configuration error (bad YAML, unparsable seed, invalid range)
5 generation error (bounded resampling exhausted)
"""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from . import rdg
from .config import ConfigModel, load_config
from .generators.base import Generator
from .range import Range
from .seed import parse_seed, random_seed, source_from_config, use_source
from .utils.errors import GenerationExhaustedError, InvalidRangeError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="fyodor",
    help="Reproducible random test data. Use 'fyodor sample KIND' to print values.",
)


class Collection(str, Enum):
    list = "list"
    set = "set"


class Kind(str, Enum):
    integer = "integer"
    long = "long"
    double = "double"
    boolean = "boolean"
    character = "character"
    string = "string"
    date = "date"
    locale = "locale"
    iso3_country = "iso3-country"
    suffix = "suffix"
    domain = "domain"
    email = "email"
    postcode = "postcode"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _bounds(lower: int | None, upper: int | None, default: Range[int]) -> Range[int]:
    return Range.closed(
        default.lower_bound if lower is None else lower,
        default.upper_bound if upper is None else upper,
    )


def _build_generator(
    kind: Kind,
    cfg: ConfigModel,
    *,
    lower: int | None,
    upper: int | None,
    max_length: int | None,
) -> Generator[Any]:
    """Return the generator for ``kind`` configured from options and ``cfg``."""

    attempts = cfg.generation.max_attempts
    length = cfg.generation.string_max_length if max_length is None else max_length
    builders: dict[Kind, Callable[[], Generator[Any]]] = {
        Kind.integer: lambda: rdg.integer(
            None if lower is None and upper is None else _bounds(lower, upper, Range(0, 100))
        ),
        Kind.long: lambda: rdg.long(
            None if lower is None and upper is None else _bounds(lower, upper, Range(0, 100))
        ),
        Kind.double: lambda: rdg.double(
            Range.closed(0 if lower is None else lower, 1 if upper is None else upper)
        ),
        Kind.boolean: rdg.boolean,
        Kind.character: rdg.character,
        Kind.string: lambda: rdg.string(length),
        Kind.date: rdg.date,
        Kind.locale: lambda: rdg.locale().map(str),
        Kind.iso3_country: lambda: rdg.iso3_country(attempts),
        Kind.suffix: rdg.suffix,
        Kind.domain: rdg.domain,
        Kind.email: rdg.email,
        Kind.postcode: rdg.postcode,
    }
    return builders[kind]()


def _collect(
    element: Generator[Any],
    collection: Collection,
    cfg: ConfigModel,
    max_size: int | None,
) -> Generator[Any]:
    """Wrap ``element`` so each value is a list or set of up to ``max_size`` items."""

    size = cfg.generation.collection_max_size if max_size is None else max_size
    if collection is Collection.set:
        return rdg.set_of(element, size, cfg.generation.max_attempts).map(
            lambda items: sorted(items, key=repr)
        )
    return rdg.list_of(element, size)


def _render(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, list):
        return [_render(v) for v in value]
    return str(value)


@app.callback()
def main() -> None:
    """Entry point for the fyodor command group."""
    pass


@app.command()
def sample(  # noqa: PLR0913
    kind: Kind = typer.Argument(..., help="Generator to sample from"),  # noqa: B008
    count: int = typer.Option(10, "--count", "-n", min=0, help="Number of values"),  # noqa: B008
    seed: Optional[str] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed to replay (decimal or 0x hex); overrides config"
    ),
    lower: Optional[int] = typer.Option(  # noqa: B008
        None, "--lower", help="Inclusive lower bound for numeric kinds"
    ),
    upper: Optional[int] = typer.Option(  # noqa: B008
        None, "--upper", help="Inclusive upper bound for numeric kinds"
    ),
    max_length: Optional[int] = typer.Option(  # noqa: B008
        None, "--max-length", min=0, help="Maximum length for strings"
    ),
    collection: Optional[Collection] = typer.Option(  # noqa: B008
        None, "--collection", help="Emit each value as a list or set of KIND values"
    ),
    max_size: Optional[int] = typer.Option(  # noqa: B008
        None, "--max-size", min=0, help="Maximum size for --collection values"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    as_json: bool = typer.Option(  # noqa: B008
        False, "--json", help="Emit the values as a JSON object"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log seed handling to stderr"
    ),
) -> None:
    """Print ``count`` values drawn from the ``kind`` generator."""

    try:
        cfg = load_config(config_path)
        if seed is not None:
            cfg.seed.value = parse_seed(seed)
    except (OSError, ValidationError, ValueError, yaml.YAMLError) as exc:
        _safe_exit(4, f"Configuration error: {exc}")

    configure_logging("INFO" if verbose else cfg.logging.level)
    source = source_from_config(cfg)
    typer.echo(f"seed: {source.seed}", err=True)

    with use_source(source):
        try:
            generator = _build_generator(
                kind, cfg, lower=lower, upper=upper, max_length=max_length
            )
            if collection is not None:
                generator = _collect(generator, collection, cfg, max_size)
        except InvalidRangeError as exc:
            _safe_exit(4, f"Configuration error: {exc}")
        try:
            produced = [_render(v) for v in generator.take(count)]
        except GenerationExhaustedError as exc:
            _safe_exit(5, f"Generation error: {exc}")

    if as_json:
        typer.echo(json.dumps({"seed": source.seed, "kind": kind.value, "values": produced}))
    else:
        for value in produced:
            typer.echo(json.dumps(value) if isinstance(value, list) else value)


@app.command("seed")
def new_seed() -> None:
    """Print a fresh random seed."""

    typer.echo(str(random_seed()))


__all__ = ["app"]
