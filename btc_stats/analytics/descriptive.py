"""
Descriptive Statistics
The ten summary measures of a price series.

Measures:
    central tendency → mean, median, mode
    dispersion       → amplitude, variance (population / sample)
    variability      → std dev, coefficient of variation

All functions are PURE: the input sequence is never mutated,
nothing is logged and no state survives between calls.
"""

import math
from typing import Dict, Optional, Sequence

import numpy as np

from .errors import DegenerateMean, EmptyDataset, StatisticsError
from .models import NO_MODE, ModeValue, StatisticsResult


MODE_DECIMALS = 2


def compute(samples: Sequence[float], strict: bool = False) -> StatisticsResult:
    """
    Compute descriptive statistics for a series.

    Args:
        samples: Price samples in any order (chronological in practice)
        strict: Raise DegenerateMean instead of returning an undefined
                (None) coefficient of variation when the mean is zero

    Returns:
        StatisticsResult. Sample measures raise InsufficientSampleSize
        on access when fewer than two samples were given.

    Raises:
        EmptyDataset: no samples
        StatisticsError: a sample is NaN or infinite, or the sums overflow
        DegenerateMean: strict and mean == 0
    """
    values = np.array(samples, dtype=float)
    n = values.size

    if n == 0:
        raise EmptyDataset()
    if not np.all(np.isfinite(values)):
        raise StatisticsError("Samples must be finite numbers")

    ordered = np.sort(values)
    min_price = float(ordered[0])
    max_price = float(ordered[-1])

    with np.errstate(over="ignore", invalid="ignore"):
        total = float(np.sum(values))
    if not math.isfinite(total):
        raise StatisticsError("Sum of samples overflows a float")

    # Summation error can push the mean of a flat series past its extrema
    mean = total / n
    mean = min(max(mean, min_price), max_price)

    with np.errstate(over="ignore", invalid="ignore"):
        ssd = float(np.sum((values - mean) ** 2))
    if not math.isfinite(ssd):
        raise StatisticsError("Squared deviations overflow a float")
    variance_population = ssd / n
    std_dev_population = math.sqrt(variance_population)

    if mean == 0 and strict:
        raise DegenerateMean()

    return StatisticsResult(
        count=n,
        min=min_price,
        max=max_price,
        amplitude=max_price - min_price,
        mean=mean,
        median=median(ordered),
        mode=mode(values.tolist()),
        variance_population=variance_population,
        std_dev_population=std_dev_population,
        cv_population=coefficient_of_variation(std_dev_population, mean),
        sum_squared_deviations=ssd,
    )


def median(ordered: Sequence[float]) -> float:
    """
    Middle value of an already sorted series.

    Even length → mean of the two middle values.
    """
    n = len(ordered)
    if n == 0:
        raise EmptyDataset()
    mid = n // 2
    if n % 2 == 0:
        return (float(ordered[mid - 1]) + float(ordered[mid])) / 2
    return float(ordered[mid])


def mode(samples: Sequence[float], decimals: int = MODE_DECIMALS) -> ModeValue:
    """
    Most frequent value after rounding to `decimals` places.

    Prices from the feed carry float noise (67012.34 vs 67012.340000001),
    so values are rounded before counting. Rounding is half-up on the
    scaled value.

    Ties keep the value that reached the highest frequency first.

    Returns:
        The rounded mode, or NO_MODE when every rounded value is unique.
    """
    scale = 10 ** decimals
    rounded = np.floor(np.asarray(samples, dtype=float) * scale + 0.5) / scale

    frequency: Dict[float, int] = {}
    max_freq = 0
    candidate: Optional[float] = None

    for value in rounded.tolist():
        frequency[value] = frequency.get(value, 0) + 1
        if frequency[value] > max_freq:
            max_freq = frequency[value]
            candidate = value

    if max_freq <= 1:
        return NO_MODE
    return candidate


def coefficient_of_variation(std_dev: float, mean: float) -> Optional[float]:
    """std / mean as a percentage; None when the mean is zero"""
    if mean == 0:
        return None
    return std_dev / mean * 100
