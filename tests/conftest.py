"""Shared test fixtures and data loading for calendar-boundaries.

All scenario data lives in data/fixtures/scenarios/ as JSON files.  This
module loads that data and exposes helper functions + pytest fixtures for
the tests.

Reference week: Mon 2011-01-17 through Sun 2011-01-23.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def dt(iso: str | None) -> datetime | None:
    """Naive datetime from an ISO string; None passes through.

    >>> dt("2011-01-22T10:11:12")
    datetime(2011, 1, 22, 10, 11, 12)
    """
    return datetime.fromisoformat(iso) if iso is not None else None


def categories(names: list[str]):
    """["string", "bigint"] -> [ArgumentCategory.STRING, ArgumentCategory.BIGINT]."""
    from calendar_boundaries.types import ArgumentCategory

    return [ArgumentCategory(name) for name in names]


def deferred(values: list):
    """Wrap plain values in DeferredArgument objects."""
    from calendar_boundaries.arguments import DeferredArgument

    return [DeferredArgument(value) for value in values]


def make_function(boundary: str):
    """Fresh DayOfUnitFunction for "first" or "last"."""
    from calendar_boundaries.functions import DayOfUnitFunction
    from calendar_boundaries.types import Boundary

    return DayOfUnitFunction(Boundary(boundary))


def make_initialized(boundary: str, names: list[str]):
    """DayOfUnitFunction already initialized with the named categories."""
    fn = make_function(boundary)
    fn.initialize(categories(names))
    return fn


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def first_fn():
    return make_function("first")


@pytest.fixture
def last_fn():
    return make_function("last")


@pytest.fixture
def reference_saturday() -> datetime:
    """Sat 2011-01-22, the date most scenarios are built around."""
    return datetime(2011, 1, 22)
