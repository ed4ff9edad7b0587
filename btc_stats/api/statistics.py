"""
Statistics API
Descriptive statistics over caller-supplied or buffered price series.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from typing import List, Optional

from ..core import AnalyzerEngine, get_engine


router = APIRouter(prefix="/statistics", tags=["Statistics"])


class StatisticsRequest(BaseModel):
    """Prices oldest first; target trims to the most recent N"""
    prices: List[float]
    target: Optional[int] = None
    strict: bool = False


@router.post("")
def compute_statistics(
    request: StatisticsRequest,
    engine: AnalyzerEngine = Depends(get_engine)
):
    """
    Normalize (when a target is given) and compute the ten measures.

    Empty or single-sample series are rejected with 422.
    """
    analysis = engine.analyze_prices(request.prices, request.target, strict=request.strict)
    return analysis.to_dict()


@router.get("/{symbol}")
def get_symbol_statistics(
    symbol: str,
    target: Optional[int] = Query(default=None),
    engine: AnalyzerEngine = Depends(get_engine)
):
    """Statistics over the series last stored for `symbol`"""
    if not engine.get_prices(symbol):
        raise HTTPException(404, f"No price data for {symbol.upper()}")

    analysis = engine.analyze(symbol, target)
    return {
        "symbol": symbol.upper(),
        **analysis.to_dict()
    }
