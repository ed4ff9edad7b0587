"""
In-Memory Price Buffer
Bounded, symbol-keyed history of fetched price samples.

Purpose:
- Keep the last fetched series around for repeated analysis
- No disk I/O here

This is READ-OPTIMIZED, NOT DURABLE.
"""

from collections import deque
from typing import Deque, Dict, List, Optional

from .models import PriceSample


class PriceBuffer:
    """
    In-memory buffer for price samples.

    - Per-symbol deques with automatic eviction of the oldest samples
    - O(1) append

    Usage:
        buffer = PriceBuffer(maxlen=10000)
        buffer.extend("BTC", samples)
        prices = buffer.get_prices("BTC", limit=2160)
    """

    def __init__(self, maxlen: int = 10000):
        if maxlen < 1:
            raise ValueError(f"maxlen must be >= 1, got {maxlen}")
        self.maxlen = maxlen
        self._data: Dict[str, Deque[PriceSample]] = {}
        self._count: int = 0

    def append(self, symbol: str, sample: PriceSample) -> None:
        """Add single sample to buffer"""
        symbol = symbol.upper()

        if symbol not in self._data:
            self._data[symbol] = deque(maxlen=self.maxlen)

        self._data[symbol].append(sample)
        self._count += 1

    def extend(self, symbol: str, samples: List[PriceSample]) -> int:
        """Add multiple samples. Returns count added."""
        for sample in samples:
            self.append(symbol, sample)
        return len(samples)

    def replace(self, symbol: str, samples: List[PriceSample]) -> int:
        """Drop the symbol's history and store `samples` instead"""
        self._data.pop(symbol.upper(), None)
        return self.extend(symbol, samples)

    def get(self, symbol: str, limit: Optional[int] = None) -> List[PriceSample]:
        """Get samples for symbol (most recent last)"""
        symbol = symbol.upper()
        if symbol not in self._data:
            return []

        data = list(self._data[symbol])
        if limit:
            return data[-limit:]
        return data

    def get_prices(self, symbol: str, limit: Optional[int] = None) -> List[float]:
        """Get price list for analytics"""
        return [s.price for s in self.get(symbol, limit)]

    def symbols(self) -> List[str]:
        """List all symbols in buffer"""
        return list(self._data.keys())

    def clear(self, symbol: Optional[str] = None) -> None:
        """Clear buffer"""
        if symbol:
            self._data.pop(symbol.upper(), None)
        else:
            self._data.clear()
            self._count = 0

    def stats(self) -> dict:
        """Buffer statistics"""
        return {
            "total_ingested": self._count,
            "symbols": len(self._data),
            "per_symbol": {sym: len(d) for sym, d in self._data.items()}
        }
