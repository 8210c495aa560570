"""
Tests for the bounded price history and the exchange ticker client.
"""
import httpx
import pytest

from quickdigest.core.exceptions import PriceFetchError
from quickdigest.models.ticker import PriceSample
from quickdigest.services.price import PriceClient, PriceHistory

TICKER_BODY = {
    "symbol": "BTCUSDT",
    "priceChange": "-512.10000000",
    "priceChangePercent": "-0.791",
    "lastPrice": "64215.99000000",
}


def sample(i: int) -> PriceSample:
    return PriceSample(price=float(i), timestamp_label=f"12:00:{i:02d}")


# --- PriceHistory ---

def test_history_appends_in_order():
    history = PriceHistory(capacity=5)
    for i in range(3):
        history.append(sample(i))

    snapshot = history.snapshot()
    assert snapshot.prices == (0.0, 1.0, 2.0)
    assert snapshot.labels == ("12:00:00", "12:00:01", "12:00:02")


def test_history_evicts_oldest_after_capacity():
    history = PriceHistory(capacity=50)
    for i in range(51):
        history.append(sample(i))

    snapshot = history.snapshot()
    assert len(history) == 50
    assert 0.0 not in snapshot.prices
    assert "12:00:00" not in snapshot.labels
    assert snapshot.prices[0] == 1.0
    assert snapshot.prices[-1] == 50.0
    assert len(snapshot.prices) == len(snapshot.labels)


def test_history_never_exceeds_capacity():
    history = PriceHistory(capacity=3)
    for i in range(100):
        history.append(sample(i))
        snapshot = history.snapshot()
        assert len(history) <= 3
        assert len(snapshot.prices) == len(snapshot.labels)


def test_snapshot_is_detached_from_buffer():
    history = PriceHistory(capacity=3)
    history.append(sample(1))
    snapshot = history.snapshot()

    history.append(sample(2))
    assert snapshot.prices == (1.0,)


def test_history_clear():
    history = PriceHistory(capacity=3)
    history.append(sample(1))
    history.clear()
    assert len(history) == 0
    assert history.snapshot().prices == ()


def test_history_rejects_zero_capacity():
    with pytest.raises(ValueError):
        PriceHistory(capacity=0)


# --- PriceClient ---

@pytest.mark.asyncio
async def test_fetch_quote(make_client):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=TICKER_BODY)

    client = PriceClient(make_client(handler), symbol="BTCUSDT")
    quote = await client.fetch_quote()

    assert quote.last_price == pytest.approx(64215.99)
    assert quote.price_change_percent == pytest.approx(-0.791)
    assert seen[0].url.params["symbol"] == "BTCUSDT"


@pytest.mark.parametrize(
    "handler",
    [
        lambda request: httpx.Response(429, json={"code": -1003}),
        lambda request: httpx.Response(200, text="oops"),
        lambda request: httpx.Response(200, json={"symbol": "BTCUSDT"}),
    ],
    ids=["http-error", "not-json", "missing-fields"],
)
@pytest.mark.asyncio
async def test_fetch_quote_failures_raise_price_fetch_error(make_client, handler):
    client = PriceClient(make_client(handler))
    with pytest.raises(PriceFetchError):
        await client.fetch_quote()


@pytest.mark.asyncio
async def test_fetch_quote_timeout_raises_price_fetch_error(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = PriceClient(make_client(handler))
    with pytest.raises(PriceFetchError) as exc_info:
        await client.fetch_quote()
    assert "timed out" in exc_info.value.detail
