"""
Analytics Module
Series normalization and descriptive statistics.

Structure:
    analytics/
    ├── models.py      → Output types (frozen dataclasses)
    ├── errors.py      → Typed failures
    ├── normalize.py   → Fit a series to a target length
    └── descriptive.py → The ten descriptive measures

Usage:
    from btc_stats.analytics import normalize, compute

    outcome = normalize(prices, target=2160)
    stats = compute(outcome.series)

Design Principles:
    ✓ ALL functions are PURE (inputs → computation → outputs)
    ✓ NO logging, NO I/O
    ✓ Failures are raised as StatisticsError subclasses
"""

from .descriptive import compute, median, mode, coefficient_of_variation
from .normalize import normalize, hourly_target
from .errors import (
    StatisticsError,
    EmptyDataset,
    InsufficientSampleSize,
    InvalidTarget,
    DegenerateMean,
)
from .models import (
    NO_MODE,
    Outcome,
    NormalizationOutcome,
    StatisticsResult,
    Analysis,
)

__all__ = [
    # Functions
    "compute",
    "median",
    "mode",
    "coefficient_of_variation",
    "normalize",
    "hourly_target",
    # Errors
    "StatisticsError",
    "EmptyDataset",
    "InsufficientSampleSize",
    "InvalidTarget",
    "DegenerateMean",
    # Types
    "NO_MODE",
    "Outcome",
    "NormalizationOutcome",
    "StatisticsResult",
    "Analysis",
]
