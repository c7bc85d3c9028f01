"""Aggregation helpers that produce historical series for charts.

This module turns sales records into per-month quantity totals without
introducing Django dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from .dto import Observation, Series

_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


@dataclass(frozen=True, slots=True)
class SaleLine:
    """A single product line on a sale.

    Attributes:
        product_id: Identifier of the sold product.
        quantity: Units sold on this line.
    """

    product_id: str
    quantity: float


@dataclass(frozen=True, slots=True)
class SaleRecord:
    """A sale with its date and line items."""

    sold_on: date | datetime
    lines: tuple[SaleLine, ...] = ()


def month_label(year: int, month: int) -> str:
    """Return a short month label such as `Jan 25`."""

    return f"{_MONTH_ABBREVIATIONS[month - 1]} {year % 100:02d}"


def trailing_months(today: date, *, months: int) -> tuple[tuple[int, int], ...]:
    """Return `(year, month)` pairs for the trailing window, oldest first.

    Args:
        today: Reference date; its month is the last bucket.
        months: Number of calendar months in the window.

    Returns:
        A tuple of `months` (year, month) pairs.
    """

    buckets: list[tuple[int, int]] = []
    for offset in range(months - 1, -1, -1):
        absolute = today.year * 12 + (today.month - 1) - offset
        buckets.append((absolute // 12, absolute % 12 + 1))
    return tuple(buckets)


def monthly_quantity_series(
    sales: Iterable[SaleRecord],
    *,
    product_id: str,
    today: date,
    months: int = 6,
) -> Series:
    """Aggregate sold quantities for one product into monthly observations.

    Every month in the trailing window is present, zero-filled when no sales
    match. Sales dated outside the window are ignored.

    Args:
        sales: Sales records in any order.
        product_id: Product whose line quantities are summed.
        today: Reference date; its month is the most recent bucket.
        months: Number of months to include.

    Returns:
        Observations ordered oldest to newest, or an empty series when no
        product is selected.
    """

    if not product_id or months <= 0:
        return ()

    totals: dict[tuple[int, int], float] = {bucket: 0.0 for bucket in trailing_months(today, months=months)}
    for sale in sales:
        bucket = (sale.sold_on.year, sale.sold_on.month)
        if bucket not in totals:
            continue
        for line in sale.lines:
            if line.product_id == product_id:
                totals[bucket] += line.quantity

    return tuple(Observation(label=month_label(year, month), value=value) for (year, month), value in totals.items())
