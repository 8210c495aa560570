"""
Pydantic models for API request/response schemas.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from quickdigest.models.ticker import HistorySnapshot
from quickdigest.models.youtube import VideoInfo


class SummarizeRequest(BaseModel):
    """Request model for transcript summarization."""

    url: str

    model_config = ConfigDict(extra="forbid")


class SummaryDisplay(BaseModel):
    """Display payload for a summarized video."""

    video_info: VideoInfo
    summary: str
    key_points: List[str] = Field(default_factory=list)
    word_count: int
    transcript: str

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class TickerDisplay(BaseModel):
    """Display payload for the live price ticker."""

    symbol: str
    price: Optional[float] = None
    change_percent: Optional[float] = None
    history: HistorySnapshot = Field(default_factory=HistorySnapshot)
    error: Optional[str] = None

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )
