"""
Price history buffer and exchange ticker client.
"""
from collections import deque
from typing import Deque

import httpx
from loguru import logger
from pydantic import ValidationError

from quickdigest.core.config import settings
from quickdigest.core.exceptions import PriceFetchError
from quickdigest.models.ticker import HistorySnapshot, PriceQuote, PriceSample


class PriceHistory:
    """
    Bounded FIFO of price samples.

    Appending beyond ``capacity`` evicts the oldest samples first. Only
    immutable snapshots leave the buffer, so prices and labels always have
    the same length.
    """

    def __init__(self, capacity: int = settings.PRICE_HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._samples: Deque[PriceSample] = deque()

    def __len__(self) -> int:
        return len(self._samples)

    def append(self, sample: PriceSample) -> None:
        self._samples.append(sample)
        while len(self._samples) > self.capacity:
            self._samples.popleft()

    def clear(self) -> None:
        self._samples.clear()

    def snapshot(self) -> HistorySnapshot:
        return HistorySnapshot(
            prices=tuple(sample.price for sample in self._samples),
            labels=tuple(sample.timestamp_label for sample in self._samples),
        )


class PriceClient:
    """Fetches the latest price and 24h change for one trading pair."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        symbol: str = settings.PRICE_SYMBOL,
        ticker_url: str = settings.PRICE_TICKER_URL,
    ):
        self.client = client
        self.symbol = symbol
        self.ticker_url = ticker_url

    async def fetch_quote(self) -> PriceQuote:
        """
        Fetch the current quote.

        Returns:
            PriceQuote: Last price and 24h change percentage.

        Raises:
            PriceFetchError: On transport failure, timeout, non-2xx status or
                a body without ``lastPrice``/``priceChangePercent``.
        """
        try:
            response = await self.client.get(self.ticker_url, params={"symbol": self.symbol})
            response.raise_for_status()
            quote = PriceQuote.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            raise PriceFetchError(f"Failed to fetch price (HTTP {e.response.status_code})") from e
        except httpx.HTTPError as e:
            raise PriceFetchError(f"Failed to fetch price: {e}") from e
        except (ValueError, ValidationError) as e:
            raise PriceFetchError("Failed to fetch price: malformed ticker response") from e

        logger.debug(f"{self.symbol}: {quote.last_price} ({quote.price_change_percent:+.2f}%)")
        return quote
