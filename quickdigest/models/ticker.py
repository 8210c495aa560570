"""
Pydantic models for the price ticker.
"""
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class PriceQuote(BaseModel):
    """Subset of the exchange 24hr ticker body. Numbers arrive as strings."""

    last_price: float = Field(alias="lastPrice")
    price_change_percent: float = Field(alias="priceChangePercent")

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class PriceSample(BaseModel):
    price: float
    timestamp_label: str

    model_config = ConfigDict(frozen=True)


class HistorySnapshot(BaseModel):
    """Immutable copy of the price history, oldest first."""

    prices: Tuple[float, ...] = ()
    labels: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)
