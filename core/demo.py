"""Demo dataset for the line chart page.

The demo seeds a small, deterministic set of sales for one product and a
fixed three-month forecast so the chart can be explored without any
collaborator services.
"""

from __future__ import annotations

from datetime import date
from typing import Final

from analysis.aggregations import SaleLine, SaleRecord, month_label, monthly_quantity_series, trailing_months
from analysis.dto import Observation, Series

DEMO_PRODUCT_ID: Final[str] = "demo-widget"
DEMO_MONTHLY_QUANTITIES: Final[tuple[float, ...]] = (12, 18, 9, 22, 17, 25)
DEMO_FORECAST_QUANTITIES: Final[tuple[float, ...]] = (24, 27, 30)


def demo_sales(today: date) -> tuple[SaleRecord, ...]:
    """Return demo sales spread over the trailing months ending at `today`.

    Each month gets two sales for the demo product (splitting the monthly
    quantity) and one unrelated sale that the aggregation must ignore.
    """

    sales: list[SaleRecord] = []
    buckets = trailing_months(today, months=len(DEMO_MONTHLY_QUANTITIES))
    for (year, month), quantity in zip(buckets, DEMO_MONTHLY_QUANTITIES):
        first = quantity // 2
        sales.append(SaleRecord(sold_on=date(year, month, 3), lines=(SaleLine(DEMO_PRODUCT_ID, first),)))
        sales.append(
            SaleRecord(
                sold_on=date(year, month, 17),
                lines=(SaleLine(DEMO_PRODUCT_ID, quantity - first), SaleLine("demo-gadget", 4)),
            )
        )
    return tuple(sales)


def demo_series(today: date) -> tuple[Series, Series]:
    """Return `(historical, forecast)` demo series for the month of `today`."""

    historical = monthly_quantity_series(
        demo_sales(today),
        product_id=DEMO_PRODUCT_ID,
        today=today,
        months=len(DEMO_MONTHLY_QUANTITIES),
    )
    forecast: list[Observation] = []
    absolute = today.year * 12 + (today.month - 1)
    for offset, quantity in enumerate(DEMO_FORECAST_QUANTITIES, start=1):
        year, month_index = divmod(absolute + offset, 12)
        forecast.append(Observation(label=month_label(year, month_index + 1), value=quantity))
    return historical, tuple(forecast)
