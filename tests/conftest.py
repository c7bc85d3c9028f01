"""Pytest fixtures shared across the chart test suite."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from analysis.dto import Observation, Padding, Series, Surface


@pytest.fixture
def surface() -> Surface:
    """Return the default 600x300 drawing surface."""

    return Surface(width=600, height=300)


@pytest.fixture
def padding() -> Padding:
    """Return the default chart padding (x=40, y=20)."""

    return Padding(x=40, y=20)


@pytest.fixture
def quarter_history() -> Series:
    """Return three months of observed values."""

    return (
        Observation("Jan", 10),
        Observation("Feb", 20),
        Observation("Mar", 15),
    )


@pytest.fixture
def two_month_forecast() -> Series:
    """Return a two-month forecast continuing after `quarter_history`."""

    return (
        Observation("Apr", 18),
        Observation("May", 22),
    )


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests with no Django request handling.
    - `integration`: tests touching Django views, templates, or settings.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
