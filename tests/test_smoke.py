"""Minimal smoke tests for project scaffolding."""

from __future__ import annotations

import pytest


@pytest.mark.unit
def test_geometry_engine_imports() -> None:
    """Import the engine and verify the public entry point exists."""

    from analysis import build_line_chart_geometry

    assert callable(build_line_chart_geometry)


@pytest.mark.integration
def test_django_project_loads() -> None:
    """Import and initialize Django to verify settings are valid."""

    import os

    import django
    from django.conf import settings

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "forecastchart.settings")
    django.setup()
    assert "core.apps.CoreConfig" in settings.INSTALLED_APPS
    assert settings.MAX_CHART_POINTS > 0
    assert settings.CHART_PADDING_FACTOR > 0
