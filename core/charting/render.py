"""SVG rendering for line chart geometry.

The drawing layer owns styling (colours, stroke widths, dash pattern) and text
placement offsets. Geometry itself is computed by `analysis.engine`.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.template.loader import render_to_string

from analysis.axes import format_tick_value
from analysis.dto import LineChartGeometry, Observation, format_coordinate
from analysis.engine import build_line_chart_geometry

from .schema import (
    CHART_PADDING,
    FORECAST_DASH_PATTERN,
    GRID_LINE_COLOR,
    LABEL_COLOR,
    STROKE_WIDTH,
    LineChartOptions,
)

TEMPLATE_NAME = "core/charts/line_chart.svg"

TICK_LABEL_OFFSET_X = 10
TICK_LABEL_OFFSET_Y = 4
CATEGORY_LABEL_OFFSET_Y = 15
FONT_SIZE = 10


@dataclass(frozen=True, slots=True)
class RenderedLineChart:
    """A rendered chart panel.

    Attributes:
        geometry: Geometry snapshot, or None when there was nothing to draw.
        svg: SVG markup; empty when `geometry` is None.
    """

    geometry: LineChartGeometry | None
    svg: str


def render_line_chart(
    historical: tuple[Observation, ...],
    forecast: tuple[Observation, ...],
    *,
    options: LineChartOptions,
    padding_factor: float,
) -> RenderedLineChart:
    """Compute geometry for the series and render it to SVG."""

    geometry = build_line_chart_geometry(
        historical,
        forecast,
        surface=options.surface,
        padding=CHART_PADDING,
        padding_factor=padding_factor,
    )
    return RenderedLineChart(geometry=geometry, svg=render_line_chart_svg(geometry, options))


def render_line_chart_svg(geometry: LineChartGeometry | None, options: LineChartOptions) -> str:
    """Render geometry to an SVG document.

    Args:
        geometry: Geometry snapshot, or None for an empty chart.
        options: Presentation options (colours, axis titles).

    Returns:
        SVG markup, or an empty string when there is nothing to draw.
    """

    if geometry is None:
        return ""
    return render_to_string(TEMPLATE_NAME, build_svg_context(geometry, options))


def build_svg_context(geometry: LineChartGeometry, options: LineChartOptions) -> dict[str, object]:
    """Precompute every attribute the SVG template draws."""

    surface = geometry.surface
    padding = geometry.padding
    grid_lines = [
        {
            "y": format_coordinate(tick.y),
            "x1": format_coordinate(padding.x),
            "x2": format_coordinate(surface.width - padding.x),
            "text_x": format_coordinate(padding.x - TICK_LABEL_OFFSET_X),
            "text_y": format_coordinate(tick.y + TICK_LABEL_OFFSET_Y),
            "text": format_tick_value(tick.value),
        }
        for tick in geometry.value_ticks
    ]
    category_labels = [
        {
            "x": format_coordinate(label.x),
            "y": format_coordinate(surface.height - padding.y + CATEGORY_LABEL_OFFSET_Y),
            "text": label.text,
        }
        for label in geometry.category_labels
    ]
    return {
        "width": format_coordinate(surface.width),
        "height": format_coordinate(surface.height),
        "grid_lines": grid_lines,
        "category_labels": category_labels,
        "historical_d": geometry.historical_path.d if geometry.historical_path is not None else None,
        "forecast_d": geometry.forecast_path.d if geometry.forecast_path is not None else None,
        "line_color": options.line_color,
        "forecast_line_color": options.forecast_line_color,
        "grid_line_color": GRID_LINE_COLOR,
        "label_color": LABEL_COLOR,
        "stroke_width": format_coordinate(STROKE_WIDTH),
        "dash_pattern": FORECAST_DASH_PATTERN,
        "font_size": FONT_SIZE,
        "y_axis_label": options.y_axis_label,
        "y_axis_label_x": FONT_SIZE,
        "y_axis_label_y": format_coordinate(surface.height / 2),
        "x_axis_label": options.x_axis_label,
        "x_axis_label_x": format_coordinate(surface.width / 2),
        "x_axis_label_y": format_coordinate(surface.height - 2),
    }
