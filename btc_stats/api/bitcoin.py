"""
Bitcoin API
History, spot price and statistics backed by the CoinGecko feed.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse
from typing import Optional, Tuple

from ..analytics import Analysis, hourly_target
from ..config import get_settings
from ..core import AnalyzerEngine, get_engine
from ..report import format_report
from ..services import CoinGeckoClient, get_price_client


router = APIRouter(prefix="/bitcoin", tags=["Bitcoin"])

SYMBOL = "BTC"
COIN_ID = "bitcoin"
VS_CURRENCY = "usd"
# CoinGecko returns hourly points up to this many days, daily beyond
HOURLY_MAX_DAYS = 90
MAX_HISTORY_DAYS = 3650


def _parse_history_days(days: str) -> int:
    if days == "max":
        return MAX_HISTORY_DAYS
    try:
        value = int(days)
    except ValueError:
        raise HTTPException(400, f"days must be a positive integer or 'max', got {days!r}") from None
    if value < 1:
        raise HTTPException(400, f"days must be a positive integer or 'max', got {days!r}")
    return value


def run_analysis(
    days: int,
    client: CoinGeckoClient,
    engine: AnalyzerEngine
) -> Tuple[Analysis, str]:
    """Fetch outside the engine lock, then store and analyze as one step"""
    samples = client.market_chart(COIN_ID, VS_CURRENCY, days=days)

    if days <= HOURLY_MAX_DAYS:
        target, interval = hourly_target(days), "hourly"
    else:
        target, interval = days, "daily"

    return engine.ingest_and_analyze(SYMBOL, samples, target), interval


def interval_label(interval: str) -> str:
    return "1 hour" if interval == "hourly" else "1 day"


@router.get("/history")
def get_history(
    days: str = Query(default="365"),
    client: CoinGeckoClient = Depends(get_price_client)
):
    """Daily closing prices; days='max' requests the full history"""
    n_days = _parse_history_days(days)
    df = client.history_frame(COIN_ID, VS_CURRENCY, days=n_days, interval="daily")

    return {
        "success": True,
        "data": df.to_dict(orient="records"),
        "totalDays": len(df)
    }


@router.get("/current")
def get_current_price(client: CoinGeckoClient = Depends(get_price_client)):
    quote = client.current_price(COIN_ID, VS_CURRENCY)
    return {
        "success": True,
        "data": {
            "price": quote.price,
            "change24h": quote.change_24h
        }
    }


@router.get("/statistics")
def get_statistics(
    days: Optional[int] = Query(default=None, ge=1, le=MAX_HISTORY_DAYS),
    client: CoinGeckoClient = Depends(get_price_client),
    engine: AnalyzerEngine = Depends(get_engine)
):
    """
    Fetch the last `days` of prices and compute the ten measures.

    Hourly series are normalized to exactly days * 24 samples.
    """
    days = days or get_settings().default_days
    analysis, interval = run_analysis(days, client, engine)

    return {
        "success": True,
        **analysis.to_dict(),
        "totalDataPoints": analysis.statistics.count,
        "period": f"{days} days",
        "interval": interval
    }


@router.get("/report", response_class=PlainTextResponse)
def get_report(
    days: Optional[int] = Query(default=None, ge=1, le=MAX_HISTORY_DAYS),
    client: CoinGeckoClient = Depends(get_price_client),
    engine: AnalyzerEngine = Depends(get_engine)
):
    """Plain-text statistics report"""
    days = days or get_settings().default_days
    analysis, interval = run_analysis(days, client, engine)
    return format_report(analysis, symbol=SYMBOL, currency=VS_CURRENCY, interval=interval_label(interval))
