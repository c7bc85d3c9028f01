"""Tests for SVG rendering of line chart geometry."""

from __future__ import annotations

import pytest

from analysis import build_line_chart_geometry
from analysis.dto import Observation
from core.charting.render import render_line_chart, render_line_chart_svg
from core.charting.schema import LineChartOptions

pytestmark = pytest.mark.integration


def test_render_svg_draws_grid_ticks_labels_and_both_paths(quarter_history, two_month_forecast) -> None:
    """The SVG contains three grid lines, five category labels and two paths."""

    options = LineChartOptions()
    geometry = build_line_chart_geometry(quarter_history, two_month_forecast, surface=options.surface)
    svg = render_line_chart_svg(geometry, options)

    assert svg.startswith("<svg")
    assert 'viewBox="0 0 600 300"' in svg
    assert svg.count('class="value-tick"') == 3
    assert svg.count('class="category-label"') == 5
    for text in (">0<", ">13<", ">26<", ">Jan<", ">May<"):
        assert text in svg
    assert 'class="historical"' in svg
    assert 'stroke="#06b6d4"' in svg
    assert 'stroke="#a855f7"' in svg
    assert 'stroke-dasharray="5,5"' in svg


def test_render_svg_places_tick_and_category_text(quarter_history) -> None:
    """Tick text sits left of the band; category text sits below it."""

    options = LineChartOptions()
    geometry = build_line_chart_geometry(quarter_history, (), surface=options.surface)
    svg = render_line_chart_svg(geometry, options)

    assert '<text x="30" y="284" text-anchor="end"' in svg
    assert 'x="40" y="295" text-anchor="middle"' in svg
    assert 'class="forecast"' not in svg


def test_render_svg_uses_exact_path_data() -> None:
    """Path data is emitted verbatim from the geometry."""

    options = LineChartOptions(line_color="#111111", forecast_line_color="#222222")
    geometry = build_line_chart_geometry(
        (Observation("A", 0), Observation("B", 100)),
        (Observation("C", 50),),
        padding_factor=1.0,
    )
    svg = render_line_chart_svg(geometry, options)

    assert 'd="M40,280 L300,20" stroke="#111111"' in svg
    assert 'd="M300,20 L560,150" stroke="#222222"' in svg


def test_render_svg_escapes_label_text() -> None:
    """Category labels and axis titles are escaped."""

    options = LineChartOptions(y_axis_label="<Units>", x_axis_label="Month & Year")
    geometry = build_line_chart_geometry((Observation("<script>", 1),))
    svg = render_line_chart_svg(geometry, options)

    assert "<script>" not in svg
    assert "&lt;script&gt;" in svg
    assert "&lt;Units&gt;" in svg
    assert "Month &amp; Year" in svg


def test_render_svg_is_empty_without_geometry() -> None:
    """No geometry means no drawable output."""

    assert render_line_chart_svg(None, LineChartOptions()) == ""


def test_render_line_chart_uses_option_surface() -> None:
    """The surface comes from the options, not the engine defaults."""

    rendered = render_line_chart(
        (Observation("A", 1),),
        (),
        options=LineChartOptions(width=800, height=400),
        padding_factor=1.2,
    )
    assert rendered.geometry is not None
    assert rendered.geometry.surface.width == 800
    assert 'viewBox="0 0 800 400"' in rendered.svg


def test_render_line_chart_handles_empty_series() -> None:
    """Empty input renders nothing."""

    rendered = render_line_chart((), (), options=LineChartOptions(), padding_factor=1.2)
    assert rendered.geometry is None
    assert rendered.svg == ""
