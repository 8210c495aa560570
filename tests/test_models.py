"""
Unit tests for Pydantic models.
"""
import pytest
from pydantic import ValidationError

from quickdigest.models import (
    HistorySnapshot,
    PriceQuote,
    SummaryDisplay,
    SummaryResult,
    TickerDisplay,
    VideoInfo,
    VideoReference,
)


def test_video_reference_accepts_eleven_char_id():
    assert VideoReference(video_id="dQw4w9WgXcQ").video_id == "dQw4w9WgXcQ"


@pytest.mark.parametrize("bad_id", ["short", "dQw4w9WgXcQQ", "dQw4w9WgXc!"])
def test_video_reference_rejects_bad_ids(bad_id):
    with pytest.raises(ValidationError):
        VideoReference(video_id=bad_id)


def test_video_info_fallback():
    info = VideoInfo.fallback()
    assert info.title == "Video"
    assert info.author == "Unknown"
    assert info.thumbnail is None


def test_summary_result_immutable():
    result = SummaryResult(summary="s.", key_points=["alpha"], word_count=3)
    with pytest.raises(ValidationError):
        result.summary = "changed"


def test_price_quote_parses_string_numbers():
    quote = PriceQuote.model_validate(
        {"symbol": "BTCUSDT", "lastPrice": "64250.12000000", "priceChangePercent": "-1.234"}
    )
    assert quote.last_price == pytest.approx(64250.12)
    assert quote.price_change_percent == pytest.approx(-1.234)


def test_summary_display_serializes_camel_case():
    display = SummaryDisplay(
        video_info=VideoInfo.fallback(),
        summary="Hello.",
        key_points=["hello"],
        word_count=1,
        transcript="Hello",
    )
    data = display.model_dump(by_alias=True)
    assert set(data) == {"videoInfo", "summary", "keyPoints", "wordCount", "transcript"}


def test_ticker_display_defaults():
    display = TickerDisplay(symbol="BTCUSDT")
    assert display.price is None
    assert display.change_percent is None
    assert display.history == HistorySnapshot()
    assert display.model_dump(by_alias=True)["changePercent"] is None
