"""
Projection engine — monthly bill math, waterfall allocation, and the runner.
"""

from .rows import MonthRow
from .runner import project, run_projection
from .waterfall import (
    DEFAULT_RATES,
    QuarterAccumulator,
    WaterfallRates,
    WaterfallResult,
    allocate,
)

__all__ = [
    "MonthRow",
    "project",
    "run_projection",
    "DEFAULT_RATES",
    "QuarterAccumulator",
    "WaterfallRates",
    "WaterfallResult",
    "allocate",
]
