"""
Summary pipeline: URL → video id → metadata → transcript → extractive summary.

This module ties together:
- URL classification and video id extraction
- VideoMetadataService for best-effort title/author lookup
- TranscriptFetcher for the fallback transcript chain
- ExtractiveSummarizer for the summary itself
"""
from typing import Optional

from loguru import logger

from quickdigest.core.constants import StatusMessages, SummaryConfig
from quickdigest.core.exceptions import (
    AppException,
    InvalidURLError,
    PodcastFeedNotSupportedError,
    TranscriptUnavailableError,
)
from quickdigest.models.api import SummaryDisplay
from quickdigest.models.enums import UrlKind
from quickdigest.models.youtube import VideoReference
from quickdigest.services.extractive import ExtractiveSummarizer
from quickdigest.services.metadata import VideoMetadataService
from quickdigest.services.rendering import NullRenderer, Renderer
from quickdigest.services.transcript import TranscriptFetcher
from quickdigest.services.url_parser import classify_url, extract_video_id


class TranscriptSummaryService:
    """
    Orchestrates one summarization request from raw URL to display payload.

    Steps run strictly in sequence. Progress is reported on the renderer and
    the status is cleared whatever the outcome.
    """

    def __init__(
        self,
        metadata_service: VideoMetadataService,
        transcript_fetcher: TranscriptFetcher,
        summarizer: ExtractiveSummarizer,
        renderer: Optional[Renderer] = None,
    ):
        """
        Initialize the TranscriptSummaryService.

        Args:
            metadata_service: Best-effort oEmbed lookup.
            transcript_fetcher: Fallback chain for transcript retrieval.
            summarizer: Extractive summarizer.
            renderer: Display surface for status, errors and results.
        """
        self.metadata_service = metadata_service
        self.transcript_fetcher = transcript_fetcher
        self.summarizer = summarizer
        self.renderer = renderer if renderer is not None else NullRenderer()

    async def summarize_url(self, url: str) -> SummaryDisplay:
        """
        Summarize the video behind a URL.

        Args:
            url: The user-submitted URL.

        Returns:
            SummaryDisplay: The payload that was rendered.

        Raises:
            InvalidURLError: Empty input, or neither YouTube nor a podcast feed.
            PodcastFeedNotSupportedError: The URL looks like a podcast feed.
            InvalidFormatError: No video id could be extracted.
            TranscriptUnavailableError: No transcript could be fetched.
            TranscriptTooShortError: The transcript is too short to summarize.
        """
        url = (url or "").strip()
        if not url:
            self.renderer.show_error(StatusMessages.EMPTY_URL)
            raise InvalidURLError(StatusMessages.EMPTY_URL)

        self.renderer.show_status(StatusMessages.EXTRACTING)
        try:
            payload = await self._run(url)
        except AppException as e:
            logger.warning(f"Summarization failed for {url}: {e.detail}")
            self.renderer.show_error(f"Error: {e.detail}")
            raise
        finally:
            self.renderer.clear_status()

        self.renderer.render(payload)
        return payload

    async def _run(self, url: str) -> SummaryDisplay:
        kind = classify_url(url)

        if kind == UrlKind.PODCAST_FEED:
            self.renderer.show_status(StatusMessages.PROCESSING_PODCAST)
            raise PodcastFeedNotSupportedError()
        if kind != UrlKind.YOUTUBE:
            raise InvalidURLError()

        video_id = VideoReference(video_id=extract_video_id(url)).video_id
        logger.info(f"Summarizing video {video_id}")

        video_info = await self.metadata_service.get_video_info(video_id)

        self.renderer.show_status(StatusMessages.FETCHING_TRANSCRIPT)
        transcript = await self.transcript_fetcher.fetch(video_id)

        if not transcript or len(transcript) < SummaryConfig.MIN_TEXT_LENGTH:
            raise TranscriptUnavailableError(StatusMessages.NO_CAPTIONS)

        self.renderer.show_status(StatusMessages.GENERATING)
        result = self.summarizer.summarize(transcript)

        logger.info(
            f"Video {video_id}: {result.word_count} words, key points {result.key_points}"
        )
        return SummaryDisplay(
            video_info=video_info,
            summary=result.summary,
            key_points=result.key_points,
            word_count=result.word_count,
            transcript=transcript,
        )
