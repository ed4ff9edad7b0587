from typing import Any, Dict, List, Optional

import pytest
import requests

from btc_stats.core import AnalyzerEngine
from btc_stats.services import CoinGeckoClient

HOUR_MS = 3_600_000
START_MS = 1_700_000_000_000


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, invalid_json: bool = False):
        self._payload = payload
        self.status_code = status_code
        self._invalid_json = invalid_json

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("not json")
        return self._payload


class FakeSession:
    """Stands in for requests.Session: routes by URL suffix, records calls"""

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        self.routes = routes or {}
        self.headers: Dict[str, str] = {}
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params: dict = None, timeout: float = None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        for suffix, response in self.routes.items():
            if url.endswith(suffix):
                if isinstance(response, Exception):
                    raise response
                return response
        raise requests.exceptions.ConnectionError(f"no route for {url}")


def market_chart_payload(prices: List[float], start_ms: int = START_MS, step_ms: int = HOUR_MS) -> dict:
    return {
        "prices": [[start_ms + i * step_ms, p] for i, p in enumerate(prices)],
        "market_caps": [],
        "total_volumes": [],
    }


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client_factory():
    def _make(routes: Dict[str, Any], api_key: Optional[str] = None) -> CoinGeckoClient:
        session = FakeSession(routes)
        return CoinGeckoClient(base_url="https://api.test/v3", api_key=api_key, timeout=5, session=session)
    return _make


@pytest.fixture
def engine() -> AnalyzerEngine:
    return AnalyzerEngine(buffer_size=10000)
