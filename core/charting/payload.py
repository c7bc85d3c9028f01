"""Decoding of line chart request payloads.

Payload shape (JSON object):

    {
        "data": [{"label": "Jan", "value": 10}, ...],
        "forecastData": [{"label": "Apr", "value": 18}, ...],
        "options": {"height": 300, "width": 600, "lineColor": "#06b6d4", ...}
    }

`forecastData` and `options` are optional. Validation is strict and collects
every problem before failing, so callers can report all errors at once.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any

from analysis.dto import Observation, Series
from core.forms import LineChartOptionsForm

from .schema import LineChartOptions

OPTION_FIELD_NAMES: dict[str, str] = {
    "height": "height",
    "width": "width",
    "yAxisLabel": "y_axis_label",
    "xAxisLabel": "x_axis_label",
    "lineColor": "line_color",
    "forecastLineColor": "forecast_line_color",
}


class ChartPayloadError(ValueError):
    """Raised when a chart payload cannot be decoded.

    Attributes:
        errors: Human-readable validation messages.
    """

    def __init__(self, errors: list[str] | tuple[str, ...]) -> None:
        self.errors = tuple(errors)
        super().__init__("; ".join(self.errors))


@dataclass(frozen=True, slots=True)
class LineChartRequest:
    """Validated inputs for one line chart render."""

    historical: Series
    forecast: Series
    options: LineChartOptions


def decode_line_chart_request(body: bytes | str, *, max_points: int) -> LineChartRequest:
    """Decode and validate a JSON request body.

    Args:
        body: Raw request body.
        max_points: Upper bound on historical + forecast points.

    Returns:
        LineChartRequest with typed series and options.

    Raises:
        ChartPayloadError: When the body is not valid JSON or fails validation.
    """

    try:
        payload = json.loads(body or b"{}")
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ChartPayloadError([f"Request body is not valid JSON: {exc}"]) from exc
    if not isinstance(payload, dict):
        raise ChartPayloadError(["Request body must be a JSON object."])
    return decode_line_chart_payload(payload, max_points=max_points)


def decode_line_chart_payload(payload: dict[str, Any], *, max_points: int) -> LineChartRequest:
    """Validate an already-parsed payload dictionary.

    Raises:
        ChartPayloadError: When any field fails validation.
    """

    errors: list[str] = []
    historical = decode_series(payload.get("data"), field="data", errors=errors, required=True)
    forecast = decode_series(payload.get("forecastData"), field="forecastData", errors=errors, required=False)
    options = decode_options(payload.get("options"), errors=errors)

    if len(historical) + len(forecast) > max_points:
        errors.append(f"Too many points: {len(historical) + len(forecast)} exceeds the limit of {max_points}.")

    if errors or options is None:
        raise ChartPayloadError(errors)
    return LineChartRequest(historical=historical, forecast=forecast, options=options)


def decode_series(raw: object, *, field: str, errors: list[str], required: bool) -> Series:
    """Decode a list of `{label, value}` objects into observations.

    Args:
        raw: Parsed JSON value for the series.
        field: Payload key, used in error messages.
        errors: Error accumulator; messages are appended in place.
        required: Whether a missing series is an error.

    Returns:
        Decoded observations (possibly partial when errors were appended).
    """

    if raw is None:
        if required:
            errors.append(f"{field} is required.")
        return ()
    if not isinstance(raw, list):
        errors.append(f"{field} must be a list.")
        return ()

    observations: list[Observation] = []
    for index, item in enumerate(raw):
        where = f"{field}[{index}]"
        if not isinstance(item, dict):
            errors.append(f"{where} must be an object with label and value.")
            continue
        label = item.get("label")
        value = item.get("value")
        if not isinstance(label, str):
            errors.append(f"{where}.label must be a string.")
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"{where}.value must be a number.")
            continue
        if not math.isfinite(value):
            errors.append(f"{where}.value must be finite.")
            continue
        observations.append(Observation(label=label, value=float(value)))
    return tuple(observations)


def decode_options(raw: object, *, errors: list[str]) -> LineChartOptions | None:
    """Validate chart options through `LineChartOptionsForm`.

    Args:
        raw: Parsed JSON value for `options` (camelCase keys), or None.
        errors: Error accumulator; messages are appended in place.

    Returns:
        LineChartOptions, or None when validation failed.
    """

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        errors.append("options must be an object.")
        return None

    unknown = sorted(set(raw) - set(OPTION_FIELD_NAMES))
    if unknown:
        errors.append(f"Unknown options: {', '.join(unknown)}.")

    form = LineChartOptionsForm(
        data={OPTION_FIELD_NAMES[key]: value for key, value in raw.items() if key in OPTION_FIELD_NAMES}
    )
    return options_from_form(form, errors=errors)


def options_from_form(form: LineChartOptionsForm, *, errors: list[str]) -> LineChartOptions | None:
    """Return options from a bound form, appending its errors on failure."""

    if form.is_valid():
        return form.to_options()
    for name, messages in form.errors.items():
        for message in messages:
            errors.append(message if name == "__all__" else f"options.{_camel_name(name)}: {message}")
    return None


def _camel_name(field_name: str) -> str:
    """Map a form field name back to its payload key."""

    for camel, snake in OPTION_FIELD_NAMES.items():
        if snake == field_name:
            return camel
    return field_name
