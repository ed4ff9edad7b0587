"""
CoinGecko Client
Fetches price history and spot prices from the CoinGecko REST API.

Usage:
    from btc_stats.services import get_price_client

    client = get_price_client()
    samples = client.market_chart("bitcoin", days=90)   # hourly for <= 90 days
    prices = [s.price for s in samples]
"""

import logging
from typing import Any, Dict, List, Optional, Union

import pandas as pd
import requests

from ..config import get_settings
from ..core import CurrentPrice, PriceSample, to_price_sample
from .errors import PriceFeedError

logger = logging.getLogger(__name__)

Days = Union[int, str]


class CoinGeckoClient:
    """Thin wrapper over the CoinGecko v3 endpoints this service needs"""

    def __init__(
        self,
        base_url: str = "https://api.coingecko.com/api/v3",
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if api_key:
            self.session.headers.update({"x-cg-demo-api-key": api_key})

    def _get(self, endpoint: str, params: dict = None) -> Any:
        """GET an endpoint and return decoded JSON, raising PriceFeedError on failure"""
        url = f"{self.base_url}{endpoint}"
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error("Request to %s failed: %s", url, e)
            raise PriceFeedError(f"Request to {endpoint} failed: {e}") from e

        if not resp.ok:
            logger.error("%s returned HTTP %s", url, resp.status_code)
            raise PriceFeedError(
                f"API request failed: {resp.status_code}",
                status_code=resp.status_code
            )

        try:
            return resp.json()
        except ValueError as e:
            raise PriceFeedError(f"Invalid JSON from {endpoint}") from e

    # =========================================================================
    # Endpoints
    # =========================================================================

    def ping(self) -> bool:
        """Check the API is reachable"""
        try:
            self._get("/ping")
            return True
        except PriceFeedError as e:
            logger.warning("CoinGecko ping failed: %s", e)
            return False

    def market_chart(
        self,
        coin: str = "bitcoin",
        vs_currency: str = "usd",
        days: Days = 90,
        interval: Optional[str] = None
    ) -> List[PriceSample]:
        """
        Historical prices, oldest first.

        CoinGecko picks the granularity from `days` unless `interval`
        is given: hourly up to 90 days, daily beyond.

        Args:
            coin: CoinGecko coin id
            vs_currency: Quote currency
            days: Number of days back, or "max"
            interval: Optional "daily"

        Returns:
            List of PriceSample
        """
        params: Dict[str, Any] = {"vs_currency": vs_currency, "days": days}
        if interval:
            params["interval"] = interval

        data = self._get(f"/coins/{coin}/market_chart", params=params)

        try:
            points = data["prices"]
            samples = [to_price_sample(p) for p in points]
        except (KeyError, TypeError, ValueError) as e:
            raise PriceFeedError(f"Malformed market_chart payload: {e}") from e

        logger.info("Fetched %d %s/%s samples over %s days", len(samples), coin, vs_currency, days)
        return samples

    def history_frame(
        self,
        coin: str = "bitcoin",
        vs_currency: str = "usd",
        days: Days = 365,
        interval: Optional[str] = "daily"
    ) -> pd.DataFrame:
        """Price history as a DataFrame with timestamp (ms), date and price columns"""
        samples = self.market_chart(coin, vs_currency, days, interval)
        df = pd.DataFrame({
            "timestamp": [s.timestamp_ms for s in samples],
            "price": [s.price for s in samples],
        })
        df["date"] = pd.to_datetime(df["timestamp"], unit="ms", utc=True).dt.strftime("%Y-%m-%d")
        return df[["date", "price", "timestamp"]]

    def current_price(self, coin: str = "bitcoin", vs_currency: str = "usd") -> CurrentPrice:
        """Spot price with 24h change"""
        data = self._get(
            "/simple/price",
            params={"ids": coin, "vs_currencies": vs_currency, "include_24hr_change": "true"}
        )
        try:
            quote = data[coin]
            return CurrentPrice(
                price=float(quote[vs_currency]),
                change_24h=quote.get(f"{vs_currency}_24h_change")
            )
        except (KeyError, TypeError, ValueError) as e:
            raise PriceFeedError(f"Malformed simple/price payload: {e}") from e


# Singleton
_client: Optional[CoinGeckoClient] = None


def get_price_client() -> CoinGeckoClient:
    """Get or create the CoinGecko client singleton"""
    global _client
    if _client is None:
        settings = get_settings()
        _client = CoinGeckoClient(
            base_url=settings.coingecko_url,
            api_key=settings.coingecko_api_key,
            timeout=settings.http_timeout
        )
    return _client
