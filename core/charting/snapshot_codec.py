"""Snapshot encoding helpers for LineChartGeometry payloads."""

from __future__ import annotations

from typing import Any

from analysis.dto import LineChartGeometry, PathDescription

GEOMETRY_VERSION = "line_chart_geometry_v1"


def encode_geometry(geometry: LineChartGeometry) -> dict[str, Any]:
    """Encode a LineChartGeometry into a JSON-serializable dictionary.

    Args:
        geometry: Geometry produced by `build_line_chart_geometry`.

    Returns:
        Dict payload safe for `JsonResponse`.
    """

    return {
        "version": GEOMETRY_VERSION,
        "surface": {"width": geometry.surface.width, "height": geometry.surface.height},
        "padding": {"x": geometry.padding.x, "y": geometry.padding.y},
        "domain": {"min": geometry.domain.min, "max": geometry.domain.max},
        "valueTicks": [{"value": tick.value, "y": tick.y} for tick in geometry.value_ticks],
        "categoryLabels": [{"text": label.text, "x": label.x} for label in geometry.category_labels],
        "historicalPath": _encode_path(geometry.historical_path),
        "forecastPath": _encode_path(geometry.forecast_path),
    }


def _encode_path(path: PathDescription | None) -> dict[str, Any] | None:
    """Encode a path as its point list plus SVG path data."""

    if path is None:
        return None
    return {
        "d": path.d,
        "points": [{"x": point.x, "y": point.y} for point in path.points],
    }

