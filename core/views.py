"""Views for line chart rendering.

The JSON and SVG endpoints share the same payload decoding. Both are
stateless: every request is rendered from its own inputs.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.utils import timezone
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from analysis.dto import LineChartGeometry
from analysis.engine import build_line_chart_geometry
from core.charting.payload import (
    ChartPayloadError,
    LineChartRequest,
    decode_line_chart_request,
    options_from_form,
)
from core.charting.render import RenderedLineChart, render_line_chart
from core.charting.schema import CHART_PADDING
from core.charting.snapshot_codec import encode_geometry
from core.demo import demo_series
from core.forms import LineChartOptionsForm

logger = logging.getLogger(__name__)


def _build_geometry(chart_request: LineChartRequest) -> LineChartGeometry | None:
    """Compute geometry for a decoded chart request without drawing it."""

    geometry = build_line_chart_geometry(
        chart_request.historical,
        chart_request.forecast,
        surface=chart_request.options.surface,
        padding=CHART_PADDING,
        padding_factor=settings.CHART_PADDING_FACTOR,
    )
    logger.debug(
        "Built line chart geometry: historical=%d forecast=%d empty=%s",
        len(chart_request.historical),
        len(chart_request.forecast),
        geometry is None,
    )
    return geometry


def _render_request(chart_request: LineChartRequest) -> RenderedLineChart:
    """Render a decoded chart request to SVG with the configured padding factor."""

    rendered = render_line_chart(
        chart_request.historical,
        chart_request.forecast,
        options=chart_request.options,
        padding_factor=settings.CHART_PADDING_FACTOR,
    )
    logger.debug(
        "Rendered line chart: historical=%d forecast=%d empty=%s",
        len(chart_request.historical),
        len(chart_request.forecast),
        rendered.geometry is None,
    )
    return rendered


def _bad_request(exc: ChartPayloadError) -> JsonResponse:
    """Return a 400 response listing payload errors."""

    logger.warning("Rejected line chart payload: %s", exc)
    return JsonResponse({"errors": list(exc.errors)}, status=400)


@csrf_exempt
@require_POST
def line_chart_geometry_api(request: HttpRequest) -> JsonResponse:
    """Return line chart geometry as JSON.

    An empty combined series yields `{"geometry": null}`.
    """

    try:
        chart_request = decode_line_chart_request(request.body, max_points=settings.MAX_CHART_POINTS)
    except ChartPayloadError as exc:
        return _bad_request(exc)

    geometry = _build_geometry(chart_request)
    return JsonResponse({"geometry": encode_geometry(geometry) if geometry is not None else None})


@csrf_exempt
@require_POST
def line_chart_svg(request: HttpRequest) -> HttpResponse:
    """Return the line chart as an SVG document (204 when there is nothing to draw)."""

    try:
        chart_request = decode_line_chart_request(request.body, max_points=settings.MAX_CHART_POINTS)
    except ChartPayloadError as exc:
        return _bad_request(exc)

    rendered = _render_request(chart_request)
    if rendered.geometry is None:
        return HttpResponse(status=204)
    return HttpResponse(rendered.svg, content_type="image/svg+xml")


@require_GET
def demo_chart(request: HttpRequest) -> HttpResponse:
    """Render the demo page: monthly sales history plus a forecast continuation.

    Chart options may be overridden with query parameters (`height`, `width`,
    `y_axis_label`, `x_axis_label`, `line_color`, `forecast_line_color`).
    """

    form = LineChartOptionsForm(data=request.GET or {})
    errors: list[str] = []
    options = options_from_form(form, errors=errors)
    if options is None:
        logger.warning("Rejected demo chart options: %s", "; ".join(errors))
        options = LineChartOptionsForm(data={}).to_options()

    historical, forecast = demo_series(timezone.localdate())
    rendered = render_line_chart(
        historical,
        forecast,
        options=options,
        padding_factor=settings.CHART_PADDING_FACTOR,
    )
    return render(
        request,
        "core/charts/demo.html",
        {
            "form": form,
            "errors": errors,
            "chart_svg": rendered.svg,
            "options": options,
            "historical": historical,
            "forecast": forecast,
        },
    )
