"""Polyline construction for historical and forecast series."""

from __future__ import annotations

from collections.abc import Sequence

from .dto import Coordinate, PathDescription


def build_path(points: Sequence[Coordinate]) -> PathDescription | None:
    """Build a polyline through `points` in input order.

    Args:
        points: Projected coordinates.

    Returns:
        PathDescription, or None when there are no points to draw.
    """

    if not points:
        return None
    return PathDescription(points=tuple(points))


def build_forecast_path(
    last_historical_point: Coordinate | None,
    forecast_points: Sequence[Coordinate],
) -> PathDescription | None:
    """Build the forecast continuation anchored at the junction point.

    The forecast path starts at the last historical coordinate so the two
    polylines meet. Without an anchor, or without forecast points, no path
    is produced.

    Args:
        last_historical_point: Final coordinate of the historical path, if any.
        forecast_points: Projected forecast coordinates.

    Returns:
        PathDescription, or None when either side of the junction is missing.
    """

    if last_historical_point is None or not forecast_points:
        return None
    return PathDescription(points=(last_historical_point, *forecast_points))
