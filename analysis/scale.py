"""Value-domain calculation for line charts."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .dto import Domain, Observation

DEFAULT_PADDING_FACTOR = 1.2


def compute_domain(
    combined: Iterable[Observation],
    padding_factor: float = DEFAULT_PADDING_FACTOR,
) -> Domain:
    """Derive the value domain from a combined historical+forecast series.

    The chart is zero-based: `min` is always 0 and the observed maximum
    (floored at 0) is inflated by `padding_factor` to leave headroom.

    Args:
        combined: Historical observations followed by forecast observations.
        padding_factor: Multiplier applied to the observed maximum.

    Returns:
        Domain whose `max` is strictly positive. Empty or all-zero input
        falls back to `max=1`, as does a non-positive padding factor. When the
        padded maximum overflows, the unpadded maximum is used instead.
    """

    raw_max = max((observation.value for observation in combined), default=0.0)
    raw_max = max(raw_max, 0.0)
    padded = raw_max * padding_factor
    if not math.isfinite(padded):
        padded = raw_max if math.isfinite(raw_max) else 1.0
    if not padded > 0:
        padded = 1.0
    return Domain(min=0.0, max=padded)
