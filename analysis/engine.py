"""Line chart geometry engine.

This module wires the scale, projection, path and axis helpers into a single
entry point. It is pure: no Django imports, no I/O, no state between calls.
"""

from __future__ import annotations

from collections.abc import Iterable

from .axes import category_axis_labels, value_axis_ticks
from .dto import LineChartGeometry, Observation, Padding, Surface
from .paths import build_forecast_path, build_path
from .projection import Projector
from .scale import DEFAULT_PADDING_FACTOR, compute_domain


def build_line_chart_geometry(
    historical: Iterable[Observation],
    forecast: Iterable[Observation] = (),
    *,
    surface: Surface | None = None,
    padding: Padding | None = None,
    padding_factor: float = DEFAULT_PADDING_FACTOR,
) -> LineChartGeometry | None:
    """Compute render-ready geometry for a historical series and its forecast.

    Both series are projected against one domain and one index space:
    forecast indices continue from `len(historical)`.

    Args:
        historical: Observed points, oldest first. May be empty.
        forecast: Predicted points continuing after the last historical point.
        surface: Drawing surface dimensions (defaults to 600x300).
        padding: Surface padding (defaults to x=40, y=20).
        padding_factor: Headroom multiplier applied to the observed maximum.

    Returns:
        LineChartGeometry, or None when both series are empty.
    """

    historical_points = tuple(historical)
    forecast_points = tuple(forecast)
    combined = historical_points + forecast_points
    if not combined:
        return None

    surface = surface or Surface()
    padding = padding or Padding()
    domain = compute_domain(combined, padding_factor)
    projector = Projector(
        total_point_count=len(combined),
        domain=domain,
        surface=surface,
        padding=padding,
    )

    historical_coordinates = [
        projector.point(index, observation.value) for index, observation in enumerate(historical_points)
    ]
    offset = len(historical_points)
    forecast_coordinates = [
        projector.point(offset + index, observation.value) for index, observation in enumerate(forecast_points)
    ]

    historical_path = build_path(historical_coordinates)
    junction = historical_path.end if historical_path is not None else None

    return LineChartGeometry(
        surface=surface,
        padding=padding,
        domain=domain,
        value_ticks=value_axis_ticks(domain, projector),
        category_labels=category_axis_labels(combined, projector),
        historical_path=historical_path,
        forecast_path=build_forecast_path(junction, forecast_coordinates),
    )
