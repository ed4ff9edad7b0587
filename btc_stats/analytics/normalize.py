"""
Series Normalization
Adjust a chronological price series to an expected length.

Upstream feeds rarely return exactly the number of samples asked for:
a 90-day hourly request can come back with a few extra points at the
edges, or fewer when history is short. normalize() keeps the most
recent samples and reports which case occurred.
"""

import numbers
from typing import Sequence

from .errors import InvalidTarget
from .models import NormalizationOutcome, Outcome


HOURS_PER_DAY = 24


def normalize(samples: Sequence[float], target: int) -> NormalizationOutcome:
    """
    Adjust a series to `target` samples.

    Args:
        samples: Chronological samples (oldest first). May be empty.
        target: Expected length, >= 1

    Returns:
        NormalizationOutcome with the last `target` samples when trimmed,
        or the input unchanged when exact or deficient.

    Raises:
        InvalidTarget: target is not an integer >= 1
    """
    if isinstance(target, bool) or not isinstance(target, numbers.Integral) or target < 1:
        raise InvalidTarget(target)
    target = int(target)

    series = tuple(float(x) for x in samples)
    original_count = len(series)

    if original_count > target:
        series = series[-target:]
        outcome = Outcome.TRIMMED
    elif original_count == target:
        outcome = Outcome.EXACT
    else:
        outcome = Outcome.DEFICIENT

    return NormalizationOutcome(
        series=series,
        original_count=original_count,
        final_count=len(series),
        target=target,
        outcome=outcome,
    )


def hourly_target(days: int) -> int:
    """Expected sample count for `days` of hourly data"""
    if isinstance(days, bool) or not isinstance(days, numbers.Integral) or days < 1:
        raise InvalidTarget(days)
    return int(days) * HOURS_PER_DAY
