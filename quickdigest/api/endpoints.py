"""
API endpoints for transcript summarization and the price ticker.
"""
import time

from fastapi import APIRouter, Depends
from loguru import logger

from quickdigest.models.api import SummarizeRequest, SummaryDisplay, TickerDisplay
from quickdigest.services.summary import TranscriptSummaryService
from quickdigest.core.config import settings
from quickdigest.services.rendering import SnapshotRenderer
from quickdigest.api.dependencies import get_summary_service, get_ticker_renderer


router = APIRouter()


@router.post("/summarize", response_model=SummaryDisplay)
async def summarize_video(
    payload: SummarizeRequest,
    summary_service: TranscriptSummaryService = Depends(get_summary_service),
):
    """
    Fetches a YouTube transcript and returns an extractive summary.

    Args:
        payload: The request body containing the video URL.
        summary_service: The summary pipeline.

    Returns:
        SummaryDisplay: Video info, summary, key points, word count and transcript.
    """
    logger.info(f"Incoming summarize request for URL: {payload.url}")

    start_time = time.perf_counter()
    result = await summary_service.summarize_url(payload.url)
    duration = time.perf_counter() - start_time
    logger.info(f"Summarization completed in {duration:.2f}s")
    return result


@router.get("/ticker", response_model=TickerDisplay)
async def get_ticker(renderer: SnapshotRenderer = Depends(get_ticker_renderer)):
    """
    Returns the latest price, 24h change and the bounded price history.

    Serves whatever the price poller last rendered; an empty ticker before
    the first tick.

    Returns:
        TickerDisplay: Current ticker payload.
    """
    if renderer.payload is None:
        return TickerDisplay(symbol=settings.PRICE_SYMBOL)
    return renderer.payload
