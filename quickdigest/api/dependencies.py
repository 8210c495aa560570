"""
Dependency injection factories for FastAPI.

This module provides factory functions for creating service instances.
Long-lived objects (HTTP client, poller, caches) are process singletons.
"""
from functools import lru_cache

import httpx
from fastapi import Depends

from quickdigest.core.config import settings
from quickdigest.services.extractive import ExtractiveSummarizer
from quickdigest.services.metadata import VideoMetadataService
from quickdigest.services.price import PriceClient, PriceHistory
from quickdigest.services.price_poller import PricePoller
from quickdigest.services.rendering import SnapshotRenderer
from quickdigest.services.summary import TranscriptSummaryService
from quickdigest.services.transcript import TranscriptFetcher, default_strategies


@lru_cache
def get_http_client() -> httpx.AsyncClient:
    """Shared outbound client. Every request is bounded by HTTP_TIMEOUT_SECONDS."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.HTTP_TIMEOUT_SECONDS),
        follow_redirects=True,
        headers={"User-Agent": f"{settings.PROJECT_NAME}/0.1"},
    )


# =============================================================================
# TRANSCRIPT PIPELINE
# =============================================================================

@lru_cache
def get_transcript_fetcher() -> TranscriptFetcher:
    """Direct timed-text call, then the relay proxies."""
    return TranscriptFetcher(default_strategies(get_http_client()))


@lru_cache
def get_metadata_service() -> VideoMetadataService:
    return VideoMetadataService(get_http_client())


@lru_cache
def get_summarizer() -> ExtractiveSummarizer:
    return ExtractiveSummarizer()


def get_summary_service(
    metadata_service: VideoMetadataService = Depends(get_metadata_service),
    transcript_fetcher: TranscriptFetcher = Depends(get_transcript_fetcher),
    summarizer: ExtractiveSummarizer = Depends(get_summarizer),
) -> TranscriptSummaryService:
    """
    Get the summary pipeline for one request.

    The HTTP response is the display, so no renderer is attached here.
    """
    return TranscriptSummaryService(
        metadata_service=metadata_service,
        transcript_fetcher=transcript_fetcher,
        summarizer=summarizer,
    )


# =============================================================================
# PRICE PIPELINE
# =============================================================================

@lru_cache
def get_price_poller() -> PricePoller:
    """Process-wide poller; its history lives for the lifetime of the process."""
    return PricePoller(
        client=PriceClient(get_http_client(), symbol=settings.PRICE_SYMBOL),
        history=PriceHistory(capacity=settings.PRICE_HISTORY_CAPACITY),
        renderer=SnapshotRenderer(),
        interval=settings.PRICE_POLL_INTERVAL_SECONDS,
    )


def get_ticker_renderer(
    poller: PricePoller = Depends(get_price_poller),
) -> SnapshotRenderer:
    """Display surface the poller renders into; the ticker endpoint reads it."""
    return poller.renderer
