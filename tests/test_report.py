from datetime import datetime, timezone

from btc_stats.analytics import Analysis, compute, normalize
from btc_stats.report import format_report


def _analysis(prices, target):
    outcome = normalize(prices, target)
    return Analysis(normalization=outcome, statistics=compute(outcome.series))


def test_report_lists_all_measures() -> None:
    prices = [29000.0] + [30000.0 + i for i in range(46)] + [30001.0, 30001.0]
    report = format_report(
        _analysis(prices, 48),
        generated_at=datetime(2024, 1, 1, tzinfo=timezone.utc)
    )

    assert "STATISTICAL ANALYSIS - BTC (USD)" in report
    assert "Samples: 48" in report
    assert "Coverage: 2 days" in report
    assert "Normalization: trimmed to 48 (dropped 1 oldest)" in report
    assert "Mode: $30,001.00" in report
    for label in ("Mean:", "Median:", "Amplitude:", "Population variance:", "Sample variance:",
                  "Population std dev:", "Sample std dev:", "Population CV:", "Sample CV:"):
        assert label in report
    assert "Generated at 2024-01-01T00:00:00+00:00" in report


def test_report_no_mode_and_deficit() -> None:
    report = format_report(_analysis([1.0, 2.0, 3.0], 24))

    assert "Mode: no mode" in report
    assert "Normalization: deficient: 3 of 24 expected" in report


def test_report_single_sample_marks_sample_measures() -> None:
    report = format_report(_analysis([5.0], 1), interval="1 day")

    assert "Sample variance: n/a" in report
    assert "Sample CV: n/a" in report
    assert "Coverage: 1 days" in report


def test_report_zero_mean_cv_undefined() -> None:
    report = format_report(_analysis([-1.0, 1.0], 2))
    assert "Population CV: undefined" in report
