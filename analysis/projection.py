"""Projection of (index, value) pairs onto a padded drawing surface.

Historical and forecast points share one horizontal index space and one value
domain. A `Projector` binds both once per render so every projection uses the
same scale, which keeps the two polylines continuous at the junction point.
"""

from __future__ import annotations

from dataclasses import dataclass

from .dto import Coordinate, Domain, Padding, Surface


def project_x(index: int, total_point_count: int, surface: Surface, padding: Padding) -> float:
    """Return the evenly spaced horizontal position for a category index.

    Args:
        index: Zero-based position in the combined series.
        total_point_count: Number of historical + forecast points.
        surface: Drawing surface dimensions.
        padding: Surface padding.

    Returns:
        The x coordinate. A lone point sits on the left padding line.
    """

    if total_point_count <= 1:
        return float(padding.x)
    span = surface.width - 2 * padding.x
    return padding.x + (index / (total_point_count - 1)) * span


def project_y(value: float, domain: Domain, surface: Surface, padding: Padding) -> float:
    """Return the vertical position for a value (screen y grows downward).

    Values outside `[0, domain.max]` are not clamped.
    """

    span = surface.height - 2 * padding.y
    return surface.height - padding.y - (value / domain.max) * span


def project(
    index: int,
    value: float,
    total_point_count: int,
    domain: Domain,
    surface: Surface,
    padding: Padding,
) -> Coordinate:
    """Map a (series index, value) pair to surface coordinates."""

    return Coordinate(
        x=project_x(index, total_point_count, surface, padding),
        y=project_y(value, domain, surface, padding),
    )


@dataclass(frozen=True, slots=True)
class Projector:
    """Projection bound to one render's shared scale.

    Attributes:
        total_point_count: Number of points across both series.
        domain: Shared value domain.
        surface: Drawing surface dimensions.
        padding: Surface padding.
    """

    total_point_count: int
    domain: Domain
    surface: Surface
    padding: Padding

    def x(self, index: int) -> float:
        """Return the x coordinate for a combined-series index."""

        return project_x(index, self.total_point_count, self.surface, self.padding)

    def y(self, value: float) -> float:
        """Return the y coordinate for a value."""

        return project_y(value, self.domain, self.surface, self.padding)

    def point(self, index: int, value: float) -> Coordinate:
        """Return the coordinate for a combined-series index and value."""

        return project(index, value, self.total_point_count, self.domain, self.surface, self.padding)
