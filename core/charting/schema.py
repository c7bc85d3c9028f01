"""Schema types for line chart rendering options.

Options are cosmetic: they size the drawing surface and style the strokes,
but never change how points are scaled relative to each other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from analysis.dto import Padding, Surface

DEFAULT_HEIGHT: Final[int] = 300
DEFAULT_WIDTH: Final[int] = 600
DEFAULT_LINE_COLOR: Final[str] = "#06b6d4"
DEFAULT_FORECAST_LINE_COLOR: Final[str] = "#a855f7"

GRID_LINE_COLOR: Final[str] = "#374151"
LABEL_COLOR: Final[str] = "#9ca3af"
STROKE_WIDTH: Final[float] = 2.5
FORECAST_DASH_PATTERN: Final[str] = "5,5"

CHART_PADDING: Final[Padding] = Padding(x=40, y=20)


@dataclass(frozen=True, slots=True)
class LineChartOptions:
    """Presentation options for a historical + forecast line chart.

    Args:
        height: Surface height in user units.
        width: Surface width in user units.
        y_axis_label: Optional value-axis title.
        x_axis_label: Optional category-axis title.
        line_color: Stroke colour for the historical series.
        forecast_line_color: Stroke colour for the dashed forecast series.
    """

    height: int = DEFAULT_HEIGHT
    width: int = DEFAULT_WIDTH
    y_axis_label: str | None = None
    x_axis_label: str | None = None
    line_color: str = DEFAULT_LINE_COLOR
    forecast_line_color: str = DEFAULT_FORECAST_LINE_COLOR

    @property
    def surface(self) -> Surface:
        """Return the drawing surface implied by these options."""

        return Surface(width=self.width, height=self.height)
