"""Axis tick and label placement."""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from .dto import CategoryLabel, Domain, Observation, ValueTick
from .projection import Projector


def value_axis_ticks(domain: Domain, projector: Projector) -> tuple[ValueTick, ...]:
    """Return the three value-axis ticks: 0, max/2 and max.

    Args:
        domain: Shared value domain.
        projector: Projector bound to the same domain.

    Returns:
        Ticks ordered bottom to top.
    """

    values = (0.0, domain.max / 2, domain.max)
    return tuple(ValueTick(value=value, y=projector.y(value)) for value in values)


def category_axis_labels(combined: Iterable[Observation], projector: Projector) -> tuple[CategoryLabel, ...]:
    """Return one category label per combined point.

    Forecast points carry their own labels; overlapping text is not thinned.

    Args:
        combined: Historical observations followed by forecast observations.
        projector: Projector bound to the combined point count.

    Returns:
        Labels in combined-series order.
    """

    return tuple(
        CategoryLabel(text=observation.label, x=projector.x(index))
        for index, observation in enumerate(combined)
    )


def format_tick_value(value: float) -> str:
    """Format a tick value as a whole number (halves round away from zero).

    Non-finite values are shown as-is; precision grows with the magnitude so
    very large ticks keep every integer digit.
    """

    if not math.isfinite(value):
        return f"{value:.0f}"
    try:
        number = Decimal(str(value))
        with localcontext() as context:
            context.prec = max(context.prec, number.adjusted() + 2)
            rounded = number.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return f"{value:.0f}"
    if rounded == 0:
        return "0"
    return str(rounded)
