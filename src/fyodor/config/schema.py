"""Typed configuration schema and loader for the fyodor package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator

from fyodor.seed import parse_seed

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SeedSettings(BaseModel):
    """Where the session seed comes from."""

    env: str
    value: int | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("value", mode="before")
    @classmethod
    def _parse_value(cls, value: Any) -> Any:
        if isinstance(value, (str, int)):
            return parse_seed(str(value))
        return value


class GenerationSettings(BaseModel):
    """Defaults applied by factory helpers and the CLI."""

    max_attempts: conint(ge=1)  # type: ignore[valid-type]
    string_max_length: conint(ge=0)  # type: ignore[valid-type]
    collection_max_size: conint(ge=0)  # type: ignore[valid-type]

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Package logger verbosity."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)  # type: ignore[valid-type]
    seed: SeedSettings
    generation: GenerationSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``seed.env``.  A seed in the environment
    that cannot be parsed raises ``ValueError``.
    """

    with (
        importlib_resources.files("fyodor.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.seed.env
    raw = environ.get(seed_env, "").strip()
    if raw:
        cfg.seed.value = parse_seed(raw)

    return cfg


__all__ = [
    "ConfigModel",
    "SeedSettings",
    "GenerationSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]
