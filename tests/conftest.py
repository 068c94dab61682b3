from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any

import pytest

from fyodor.seed import RandomSource, parse_seed, use_source


@pytest.fixture(autouse=True)
def random_source(request: pytest.FixtureRequest) -> Iterator[RandomSource]:
    """Bind a fresh source per test; ``FYODOR_SEED`` replays a reported seed."""

    raw = os.environ.get("FYODOR_SEED", "").strip()
    source = RandomSource(parse_seed(raw) if raw else None)
    request.node.fyodor_seed = source.seed
    with use_source(source):
        yield source


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: Any) -> Iterator[None]:
    outcome = yield
    report = outcome.get_result()
    seed = getattr(item, "fyodor_seed", None)
    if report.failed and seed is not None:
        report.sections.append(("fyodor", f"seed: {seed} (rerun with FYODOR_SEED={seed})"))
