"""
Text Report
Plain-text rendering of an Analysis, for terminals and downloads.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from .analytics import Analysis, InsufficientSampleSize, Outcome


WIDTH = 50
HOURS_PER_DAY = 24


def _money(value: float) -> str:
    return f"${value:,.2f}"


def _number(value: float) -> str:
    return f"{value:,.2f}"


def _percent(value: Optional[float]) -> str:
    if value is None:
        return "undefined (mean is zero)"
    return f"{value:.6f}%"


def _sample_measure(getter: Callable[[], Optional[float]], fmt: Callable) -> str:
    try:
        return fmt(getter())
    except InsufficientSampleSize:
        return "n/a (needs at least 2 samples)"


def format_report(
    analysis: Analysis,
    symbol: str = "BTC",
    currency: str = "USD",
    interval: str = "1 hour",
    generated_at: Optional[datetime] = None
) -> str:
    """
    Render the ten measures and the normalization outcome.

    Coverage in days assumes hourly samples when interval is "1 hour",
    daily samples otherwise.
    """
    stats = analysis.statistics
    norm = analysis.normalization
    generated_at = generated_at or datetime.now(timezone.utc)

    per_day = HOURS_PER_DAY if interval == "1 hour" else 1
    coverage_days = round(stats.count / per_day)
    mode = _money(stats.mode) if stats.has_mode else "no mode (all values are unique)"

    if norm.outcome is Outcome.TRIMMED:
        norm_line = f"trimmed to {norm.final_count} (dropped {norm.dropped} oldest)"
    elif norm.outcome is Outcome.DEFICIENT:
        norm_line = f"deficient: {norm.final_count} of {norm.target} expected"
    else:
        norm_line = f"exact: {norm.final_count} samples"

    lines = [
        f"STATISTICAL ANALYSIS - {symbol.upper()} ({currency.upper()})",
        "=" * WIDTH,
        "",
        "BASIC DATA:",
        f"  Samples: {stats.count:,}",
        f"  Sampling interval: {interval}",
        f"  Coverage: {coverage_days} days",
        f"  Minimum: {_money(stats.min)}",
        f"  Maximum: {_money(stats.max)}",
        f"  Normalization: {norm_line}",
        "",
        "CENTRAL TENDENCY:",
        f"  Mean: {_money(stats.mean)}",
        f"  Median: {_money(stats.median)}",
        f"  Mode: {mode}",
        "",
        "DISPERSION:",
        f"  Amplitude: {_money(stats.amplitude)}",
        f"  Population variance: {_number(stats.variance_population)}",
        f"  Sample variance: {_sample_measure(lambda: stats.variance_sample, _number)}",
        f"  Population std dev: {_money(stats.std_dev_population)}",
        f"  Sample std dev: {_sample_measure(lambda: stats.std_dev_sample, _money)}",
        "",
        "COEFFICIENT OF VARIATION:",
        f"  Population CV: {_percent(stats.cv_population)}",
        f"  Sample CV: {_sample_measure(lambda: stats.cv_sample, _percent)}",
        "",
        "=" * WIDTH,
        f"Generated at {generated_at.isoformat(timespec='seconds')}",
    ]
    return "\n".join(lines) + "\n"
