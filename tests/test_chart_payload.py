"""Unit tests for line chart payload decoding and option validation."""

from __future__ import annotations

import json

import pytest

from analysis.dto import Observation
from core.charting.payload import (
    ChartPayloadError,
    decode_line_chart_payload,
    decode_line_chart_request,
)
from core.charting.schema import LineChartOptions
from core.forms import LineChartOptionsForm

pytestmark = pytest.mark.unit


def test_decode_request_builds_series_and_default_options() -> None:
    """A minimal payload decodes with default presentation options."""

    body = json.dumps(
        {
            "data": [{"label": "Jan", "value": 10}, {"label": "Feb", "value": 20.5}],
            "forecastData": [{"label": "Mar", "value": 18}],
        }
    )

    chart_request = decode_line_chart_request(body, max_points=400)

    assert chart_request.historical == (Observation("Jan", 10.0), Observation("Feb", 20.5))
    assert chart_request.forecast == (Observation("Mar", 18.0),)
    assert chart_request.options == LineChartOptions()


def test_decode_request_maps_camel_case_options() -> None:
    """Options use the camelCase keys accepted by the chart component."""

    chart_request = decode_line_chart_payload(
        {
            "data": [],
            "options": {
                "height": 320,
                "width": 640,
                "yAxisLabel": "Units",
                "xAxisLabel": "Month",
                "lineColor": "#0f0",
                "forecastLineColor": "#123abc",
            },
        },
        max_points=400,
    )

    assert chart_request.options == LineChartOptions(
        height=320,
        width=640,
        y_axis_label="Units",
        x_axis_label="Month",
        line_color="#0f0",
        forecast_line_color="#123abc",
    )


def test_decode_request_forecast_is_optional() -> None:
    """A missing forecast decodes to an empty series."""

    chart_request = decode_line_chart_payload({"data": [{"label": "Jan", "value": 1}]}, max_points=400)
    assert chart_request.forecast == ()


def test_decode_request_rejects_invalid_json() -> None:
    """Malformed bodies raise ChartPayloadError."""

    with pytest.raises(ChartPayloadError) as excinfo:
        decode_line_chart_request(b"{not json", max_points=400)
    assert "not valid JSON" in excinfo.value.errors[0]


def test_decode_request_rejects_non_object_body() -> None:
    """The body must be a JSON object."""

    with pytest.raises(ChartPayloadError):
        decode_line_chart_request("[1, 2, 3]", max_points=400)


def test_decode_request_collects_every_point_error() -> None:
    """Point-level problems are all reported, with their positions."""

    payload = {
        "data": [
            {"label": "Jan", "value": "ten"},
            {"label": 5, "value": 1},
            "Feb",
            {"label": "Mar", "value": True},
        ],
        "forecastData": {"label": "Apr"},
    }

    with pytest.raises(ChartPayloadError) as excinfo:
        decode_line_chart_payload(payload, max_points=400)

    assert excinfo.value.errors == (
        "data[0].value must be a number.",
        "data[1].label must be a string.",
        "data[2] must be an object with label and value.",
        "data[3].value must be a number.",
        "forecastData must be a list.",
    )


def test_decode_request_requires_historical_data() -> None:
    """`data` is required even when it is empty."""

    with pytest.raises(ChartPayloadError) as excinfo:
        decode_line_chart_payload({"forecastData": []}, max_points=400)
    assert excinfo.value.errors == ("data is required.",)


def test_decode_request_rejects_non_finite_values() -> None:
    """NaN and infinity cannot be projected."""

    with pytest.raises(ChartPayloadError) as excinfo:
        decode_line_chart_payload({"data": [{"label": "Jan", "value": float("inf")}]}, max_points=400)
    assert excinfo.value.errors == ("data[0].value must be finite.",)


def test_decode_request_enforces_point_limit() -> None:
    """Historical + forecast points together are capped."""

    payload = {
        "data": [{"label": str(i), "value": i} for i in range(3)],
        "forecastData": [{"label": "f", "value": 1}],
    }
    with pytest.raises(ChartPayloadError) as excinfo:
        decode_line_chart_payload(payload, max_points=3)
    assert "exceeds the limit of 3" in excinfo.value.errors[0]


def test_decode_request_reports_option_errors_by_payload_key() -> None:
    """Option errors reference the camelCase payload key."""

    with pytest.raises(ChartPayloadError) as excinfo:
        decode_line_chart_payload(
            {"data": [], "options": {"lineColor": "cyan", "width": 60, "dashes": "5,5"}},
            max_points=400,
        )

    errors = excinfo.value.errors
    assert "Unknown options: dashes." in errors
    assert any(error.startswith("options.lineColor:") for error in errors)
    assert any(error.startswith("options.width:") for error in errors)


def test_options_form_applies_defaults() -> None:
    """An empty bound form produces the default options."""

    form = LineChartOptionsForm(data={})
    assert form.is_valid()
    assert form.to_options() == LineChartOptions(height=300, width=600)


def test_options_form_requires_room_for_padding() -> None:
    """The surface must be larger than the padded band on both axes."""

    form = LineChartOptionsForm(data={"width": "80", "height": "40"})
    assert not form.is_valid()
    assert "width" in form.errors
    assert "height" in form.errors


def test_options_form_blank_axis_labels_become_none() -> None:
    """Whitespace-only axis titles are treated as absent."""

    form = LineChartOptionsForm(data={"y_axis_label": "   "})
    assert form.is_valid()
    assert form.to_options().y_axis_label is None


def test_options_form_to_options_requires_valid_form() -> None:
    """Building options from an invalid form is a programming error."""

    form = LineChartOptionsForm(data={"line_color": "red"})
    with pytest.raises(ValueError):
        form.to_options()
