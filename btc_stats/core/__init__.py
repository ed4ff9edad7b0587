"""
Core Module
Price history and the analysis engine.

Exports:
    Models: PriceSample, CurrentPrice
    Engine: get_engine, AnalyzerEngine
    Buffer: PriceBuffer
    Converters: to_price_sample
"""

from .models import (
    PriceSample,
    CurrentPrice,
    to_price_sample,
)

from .engine import get_engine, AnalyzerEngine
from .buffer import PriceBuffer

__all__ = [
    # Models
    "PriceSample",
    "CurrentPrice",
    "to_price_sample",
    # Engine
    "get_engine",
    "AnalyzerEngine",
    # Buffer
    "PriceBuffer",
]
