"""
Bitcoin Statistics Analyzer
Descriptive statistics over price-index series.

Usage:
    from btc_stats.analytics import normalize, compute
"""

__version__ = "1.0.0"
