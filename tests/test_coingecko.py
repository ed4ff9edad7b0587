import pytest
import requests

from btc_stats.services import PriceFeedError

from conftest import FakeResponse, market_chart_payload


def test_market_chart_returns_samples_oldest_first(client_factory) -> None:
    client = client_factory({"/coins/bitcoin/market_chart": FakeResponse(market_chart_payload([1.0, 2.0, 3.0]))})

    samples = client.market_chart("bitcoin", "usd", days=90)

    assert [s.price for s in samples] == [1.0, 2.0, 3.0]
    assert samples[0].ts < samples[-1].ts
    call = client.session.calls[0]
    assert call["url"] == "https://api.test/v3/coins/bitcoin/market_chart"
    assert call["params"] == {"vs_currency": "usd", "days": 90}
    assert call["timeout"] == 5


def test_market_chart_passes_interval(client_factory) -> None:
    client = client_factory({"/market_chart": FakeResponse(market_chart_payload([1.0]))})
    client.market_chart(days="max", interval="daily")

    assert client.session.calls[0]["params"] == {"vs_currency": "usd", "days": "max", "interval": "daily"}


def test_api_key_sent_as_header(client_factory) -> None:
    client = client_factory({}, api_key="demo-key")
    assert client.session.headers["x-cg-demo-api-key"] == "demo-key"
    assert client.session.headers["Accept"] == "application/json"


def test_http_error_raises_price_feed_error(client_factory) -> None:
    client = client_factory({"/market_chart": FakeResponse({}, status_code=429)})

    with pytest.raises(PriceFeedError) as exc:
        client.market_chart()
    assert exc.value.status_code == 429


def test_connection_error_raises_price_feed_error(client_factory) -> None:
    client = client_factory({"/market_chart": requests.exceptions.Timeout("slow")})

    with pytest.raises(PriceFeedError):
        client.market_chart()


@pytest.mark.parametrize("payload", [{}, {"prices": None}, {"prices": [[1_700_000_000_000]]}])
def test_malformed_payload_raises_price_feed_error(client_factory, payload) -> None:
    client = client_factory({"/market_chart": FakeResponse(payload)})

    with pytest.raises(PriceFeedError):
        client.market_chart()


def test_invalid_json_raises_price_feed_error(client_factory) -> None:
    client = client_factory({"/market_chart": FakeResponse(invalid_json=True)})

    with pytest.raises(PriceFeedError):
        client.market_chart()


def test_current_price(client_factory) -> None:
    payload = {"bitcoin": {"usd": 67000.5, "usd_24h_change": -1.25}}
    client = client_factory({"/simple/price": FakeResponse(payload)})

    quote = client.current_price()

    assert quote.price == 67000.5
    assert quote.change_24h == -1.25
    assert client.session.calls[0]["params"]["include_24hr_change"] == "true"


def test_history_frame_formats_dates(client_factory) -> None:
    payload = market_chart_payload([100.0, 110.0], start_ms=1_704_067_200_000, step_ms=86_400_000)
    client = client_factory({"/market_chart": FakeResponse(payload)})

    df = client.history_frame(days=2)

    assert list(df.columns) == ["date", "price", "timestamp"]
    assert df["date"].tolist() == ["2024-01-01", "2024-01-02"]
    assert df["timestamp"].tolist() == [1_704_067_200_000, 1_704_153_600_000]


def test_ping(client_factory) -> None:
    assert client_factory({"/ping": FakeResponse({"gecko_says": "(V3) To the Moon!"})}).ping() is True
    assert client_factory({}).ping() is False
