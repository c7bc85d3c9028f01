"""DTO types used by the line chart geometry engine.

DTOs are plain, frozen data containers. They intentionally avoid any
Django dependencies so the engine can be exercised with in-memory inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Observation:
    """One labeled point on the category axis.

    Attributes:
        label: Display text for the category axis (not required to be unique).
        value: Observed or predicted value. May be zero or negative.
    """

    label: str
    value: float


Series: TypeAlias = tuple[Observation, ...]


@dataclass(frozen=True, slots=True)
class Domain:
    """Value-axis range used to scale observations vertically.

    Attributes:
        min: Lower bound of the value axis (always 0 for line charts).
        max: Upper bound of the value axis; strictly positive.
    """

    min: float
    max: float


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A point in surface space (y grows downward)."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Surface:
    """Drawing surface dimensions in user units."""

    width: float = 600
    height: float = 300


@dataclass(frozen=True, slots=True)
class Padding:
    """Inset between the surface edge and the plotted band."""

    x: float = 40
    y: float = 20


@dataclass(frozen=True, slots=True)
class ValueTick:
    """A value-axis tick and its projected vertical position."""

    value: float
    y: float


@dataclass(frozen=True, slots=True)
class CategoryLabel:
    """A category-axis label and its projected horizontal position."""

    text: str
    x: float


@dataclass(frozen=True, slots=True)
class PathDescription:
    """An ordered polyline: move to the first point, line to the rest."""

    points: tuple[Coordinate, ...]

    @property
    def start(self) -> Coordinate:
        """Return the first point of the path."""

        return self.points[0]

    @property
    def end(self) -> Coordinate:
        """Return the last point of the path."""

        return self.points[-1]

    @property
    def d(self) -> str:
        """Return the SVG path data string for this polyline."""

        return " ".join(
            f"{'M' if index == 0 else 'L'}{format_coordinate(point.x)},{format_coordinate(point.y)}"
            for index, point in enumerate(self.points)
        )


@dataclass(frozen=True, slots=True)
class LineChartGeometry:
    """Render-ready geometry snapshot for one line chart.

    Attributes:
        surface: Surface the geometry was projected onto.
        padding: Padding used by the projection.
        domain: Shared value domain for both series.
        value_ticks: Exactly three value-axis ticks (0, max/2, max).
        category_labels: One label per combined point, historical then forecast.
        historical_path: Solid polyline, or None when there is no history.
        forecast_path: Dashed continuation starting at the junction point, or None.
    """

    surface: Surface
    padding: Padding
    domain: Domain
    value_ticks: tuple[ValueTick, ...]
    category_labels: tuple[CategoryLabel, ...]
    historical_path: PathDescription | None
    forecast_path: PathDescription | None


def format_coordinate(value: float) -> str:
    """Format a coordinate without a trailing `.0` for whole numbers."""

    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")
