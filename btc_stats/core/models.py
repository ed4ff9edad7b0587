"""
Domain Models
Internal representation of price data.

After conversion, the engine only sees these types.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional, Sequence
from datetime import datetime, timezone


# =============================================================================
# PriceSample: The Core Data Contract
# =============================================================================

class PriceSample(BaseModel):
    """
    A single price observation.

    Fields:
        ts: Observation time (UTC)
        price: Price in the quote currency
    """
    ts: datetime
    price: float = Field(..., gt=0, allow_inf_nan=False)

    @field_validator('ts', mode='before')
    @classmethod
    def parse_timestamp(cls, v):
        """Handle ISO strings and unix seconds or milliseconds"""
        if isinstance(v, datetime):
            return v
        if isinstance(v, str):
            return datetime.fromisoformat(v.replace('Z', '+00:00'))
        if isinstance(v, (int, float)):
            if v > 1e12:
                return datetime.fromtimestamp(v / 1000, tz=timezone.utc)
            return datetime.fromtimestamp(v, tz=timezone.utc)
        return v

    @property
    def date(self) -> str:
        """Calendar day of the observation (YYYY-MM-DD)"""
        return self.ts.date().isoformat()

    @property
    def timestamp_ms(self) -> int:
        return int(self.ts.timestamp() * 1000)


class CurrentPrice(BaseModel):
    """Latest spot price with its 24h change (percent)"""
    price: float
    change_24h: Optional[float] = None


# =============================================================================
# Converters: External → Internal
# =============================================================================

def to_price_sample(point: Sequence[Any]) -> PriceSample:
    """
    Convert a `[timestamp_ms, price]` pair to a PriceSample.

    This is the shape of every entry in a market_chart `prices` array.
    """
    if len(point) < 2:
        raise ValueError(f"Expected [timestamp, price], got {point!r}")
    ts, price = point[0], point[1]
    return PriceSample(ts=ts, price=float(price))
