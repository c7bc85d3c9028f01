"""Pure chart geometry package for forecastchart.

This package contains deterministic, testable computations that operate on
in-memory inputs and return DTOs. It must not import Django or perform any
I/O.
"""

from .engine import build_line_chart_geometry

__all__ = ["build_line_chart_geometry"]
