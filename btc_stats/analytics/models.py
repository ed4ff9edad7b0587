"""
Analytics Output Types
Immutable dataclasses for normalization and statistics results.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from .errors import InsufficientSampleSize


NO_MODE = "no mode"

ModeValue = Union[float, str]


# =============================================================================
# NORMALIZATION OUTPUT TYPES
# =============================================================================

class Outcome(str, Enum):
    """Which case normalize() hit"""
    EXACT = "exact"
    TRIMMED = "trimmed"
    DEFICIENT = "deficient"


@dataclass(frozen=True)
class NormalizationOutcome:
    """
    A series adjusted to a target length.

    Trimming keeps the most recent samples (the tail).
    A deficit is reported, never padded.
    """
    series: Tuple[float, ...]
    original_count: int
    final_count: int
    target: int
    outcome: Outcome

    @property
    def dropped(self) -> int:
        """Oldest samples removed by trimming"""
        return self.original_count - self.final_count

    @property
    def missing(self) -> int:
        """Samples short of the target (0 unless deficient)"""
        return max(0, self.target - self.final_count)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original_count": self.original_count,
            "final_count": self.final_count,
            "target": self.target,
            "outcome": self.outcome.value,
            "dropped": self.dropped,
            "missing": self.missing,
        }


# =============================================================================
# STATISTICS OUTPUT TYPES
# =============================================================================

@dataclass(frozen=True)
class StatisticsResult:
    """
    Descriptive statistics of a price series.

    Population measures are plain fields. Sample measures (divisor n - 1)
    are properties that raise InsufficientSampleSize when count < 2.
    A coefficient of variation of None means "undefined" (mean == 0).
    """
    count: int
    min: float
    max: float
    amplitude: float
    mean: float
    median: float
    mode: ModeValue
    variance_population: float
    std_dev_population: float
    cv_population: Optional[float]
    sum_squared_deviations: float

    @property
    def has_mode(self) -> bool:
        return self.mode != NO_MODE

    @property
    def variance_sample(self) -> float:
        if self.count < 2:
            raise InsufficientSampleSize(self.count)
        return self.sum_squared_deviations / (self.count - 1)

    @property
    def std_dev_sample(self) -> float:
        return math.sqrt(self.variance_sample)

    @property
    def cv_sample(self) -> Optional[float]:
        std = self.std_dev_sample
        if self.mean == 0:
            return None
        return std / self.mean * 100

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-ready mapping of all ten measures.

        Raises InsufficientSampleSize for single-sample results since
        the sample measures cannot be produced.
        """
        return {
            "count": self.count,
            "min": self.min,
            "max": self.max,
            "amplitude": self.amplitude,
            "mean": self.mean,
            "median": self.median,
            "mode": self.mode,
            "variance_population": self.variance_population,
            "variance_sample": self.variance_sample,
            "std_dev_population": self.std_dev_population,
            "std_dev_sample": self.std_dev_sample,
            "cv_population": self.cv_population,
            "cv_sample": self.cv_sample,
        }


@dataclass(frozen=True)
class Analysis:
    """A normalization step followed by the statistics of its series"""
    normalization: NormalizationOutcome
    statistics: StatisticsResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "normalization": self.normalization.to_dict(),
            "statistics": self.statistics.to_dict(),
        }
