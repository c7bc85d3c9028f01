"""Forms for line chart requests.

Chart options arrive either as query parameters or inside a JSON payload.
Both paths are validated by `LineChartOptionsForm` so the geometry engine only
ever sees a well-formed surface.
"""

from __future__ import annotations

from django import forms

from core.charting.schema import (
    CHART_PADDING,
    DEFAULT_FORECAST_LINE_COLOR,
    DEFAULT_HEIGHT,
    DEFAULT_LINE_COLOR,
    DEFAULT_WIDTH,
    LineChartOptions,
)

_HEX_COLOR_RE = r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"
_MAX_DIMENSION = 4000


class LineChartOptionsForm(forms.Form):
    """Validate cosmetic options for a historical + forecast line chart."""

    height = forms.IntegerField(
        required=False,
        min_value=1,
        max_value=_MAX_DIMENSION,
        label="Height",
    )
    width = forms.IntegerField(
        required=False,
        min_value=1,
        max_value=_MAX_DIMENSION,
        label="Width",
    )
    y_axis_label = forms.CharField(
        required=False,
        max_length=80,
        label="Value axis label",
    )
    x_axis_label = forms.CharField(
        required=False,
        max_length=80,
        label="Category axis label",
    )
    line_color = forms.RegexField(
        required=False,
        regex=_HEX_COLOR_RE,
        label="Line colour",
        error_messages={"invalid": "Enter a hex colour such as #06b6d4."},
    )
    forecast_line_color = forms.RegexField(
        required=False,
        regex=_HEX_COLOR_RE,
        label="Forecast line colour",
        error_messages={"invalid": "Enter a hex colour such as #a855f7."},
    )

    def clean(self) -> dict[str, object]:
        """Apply defaults and require room for the padded drawing band."""

        cleaned = super().clean()
        if not cleaned.get("height"):
            cleaned["height"] = DEFAULT_HEIGHT
        if not cleaned.get("width"):
            cleaned["width"] = DEFAULT_WIDTH
        if not cleaned.get("line_color"):
            cleaned["line_color"] = DEFAULT_LINE_COLOR
        if not cleaned.get("forecast_line_color"):
            cleaned["forecast_line_color"] = DEFAULT_FORECAST_LINE_COLOR

        if "width" not in self.errors and cleaned["width"] <= 2 * CHART_PADDING.x:
            self.add_error("width", f"Width must exceed {2 * CHART_PADDING.x:g}.")
        if "height" not in self.errors and cleaned["height"] <= 2 * CHART_PADDING.y:
            self.add_error("height", f"Height must exceed {2 * CHART_PADDING.y:g}.")
        return cleaned

    def to_options(self) -> LineChartOptions:
        """Return LineChartOptions from validated data.

        Raises:
            ValueError: When called on an invalid form.
        """

        if not self.is_valid():
            raise ValueError("LineChartOptionsForm must be valid before building options.")
        data = self.cleaned_data
        return LineChartOptions(
            height=int(data["height"]),
            width=int(data["width"]),
            y_axis_label=(data.get("y_axis_label") or "").strip() or None,
            x_axis_label=(data.get("x_axis_label") or "").strip() or None,
            line_color=str(data["line_color"]),
            forecast_line_color=str(data["forecast_line_color"]),
        )
