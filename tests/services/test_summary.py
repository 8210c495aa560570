"""
Tests for the end-to-end summary pipeline with mocked collaborators.
"""
from unittest.mock import AsyncMock, MagicMock, call

import pytest

from quickdigest.core.exceptions import (
    InvalidFormatError,
    InvalidURLError,
    PodcastFeedNotSupportedError,
    TranscriptTooShortError,
    TranscriptUnavailableError,
)
from quickdigest.models.enums import UrlKind
from quickdigest.models.youtube import VideoInfo
from quickdigest.services.extractive import ExtractiveSummarizer
from quickdigest.services.metadata import VideoMetadataService
from quickdigest.services.rendering import Renderer
from quickdigest.services.summary import TranscriptSummaryService
from quickdigest.services.transcript import TranscriptFetcher

WATCH_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


@pytest.fixture
def mock_metadata_service():
    service = MagicMock(spec=VideoMetadataService)
    service.get_video_info = AsyncMock(
        return_value=VideoInfo(title="Gardening 101", author="Green Thumb", thumbnail=None)
    )
    return service


@pytest.fixture
def mock_transcript_fetcher(transcript_text):
    fetcher = MagicMock(spec=TranscriptFetcher)
    fetcher.fetch = AsyncMock(return_value=transcript_text)
    return fetcher


@pytest.fixture
def mock_renderer():
    return MagicMock(spec=Renderer)


@pytest.fixture
def summary_service(mock_metadata_service, mock_transcript_fetcher, mock_renderer):
    return TranscriptSummaryService(
        metadata_service=mock_metadata_service,
        transcript_fetcher=mock_transcript_fetcher,
        summarizer=ExtractiveSummarizer(),
        renderer=mock_renderer,
    )


@pytest.mark.asyncio
async def test_summarize_url_success(summary_service, mock_renderer, mock_transcript_fetcher, transcript_text):
    display = await summary_service.summarize_url(f"  {WATCH_URL}  ")

    assert display.video_info.title == "Gardening 101"
    assert display.transcript == transcript_text
    assert display.word_count == len(transcript_text.split())
    assert display.summary.endswith(".")
    assert "gardening" in display.key_points

    mock_transcript_fetcher.fetch.assert_awaited_once_with("dQw4w9WgXcQ")
    mock_renderer.render.assert_called_once_with(display)
    mock_renderer.show_error.assert_not_called()
    assert mock_renderer.show_status.call_args_list == [
        call("Extracting YouTube video information..."),
        call("Fetching transcript..."),
        call("Generating summary..."),
    ]
    mock_renderer.clear_status.assert_called_once()


@pytest.mark.asyncio
async def test_metadata_fallback_does_not_abort(summary_service, mock_metadata_service):
    mock_metadata_service.get_video_info.return_value = VideoInfo.fallback()

    display = await summary_service.summarize_url(WATCH_URL)

    assert display.video_info == VideoInfo.fallback()


@pytest.mark.asyncio
async def test_empty_url(summary_service, mock_renderer, mock_metadata_service):
    with pytest.raises(InvalidURLError) as exc_info:
        await summary_service.summarize_url("   ")

    assert exc_info.value.detail == "Please enter a URL"
    mock_renderer.show_error.assert_called_once_with("Please enter a URL")
    mock_metadata_service.get_video_info.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_url(summary_service, mock_renderer, mock_transcript_fetcher):
    with pytest.raises(InvalidURLError):
        await summary_service.summarize_url("https://example.com/article")

    mock_renderer.show_error.assert_called_once_with(
        "Error: Invalid URL. Please enter a valid YouTube URL."
    )
    mock_renderer.clear_status.assert_called_once()
    mock_transcript_fetcher.fetch.assert_not_called()


@pytest.mark.asyncio
async def test_podcast_feed_is_detected_then_rejected(summary_service, mock_renderer):
    with pytest.raises(PodcastFeedNotSupportedError):
        await summary_service.summarize_url("https://example.com/podcast/feed.rss")

    mock_renderer.show_status.assert_any_call("Processing podcast feed...")
    mock_renderer.clear_status.assert_called_once()
    mock_renderer.render.assert_not_called()


@pytest.mark.asyncio
async def test_youtube_url_without_extractable_id(summary_service, monkeypatch):
    # Classified as YouTube but the extractor patterns disagree
    monkeypatch.setattr("quickdigest.services.summary.classify_url", lambda url: UrlKind.YOUTUBE)
    with pytest.raises(InvalidFormatError):
        await summary_service.summarize_url("https://www.youtube.com/shorts/abc")


@pytest.mark.asyncio
async def test_transcript_unavailable_propagates(summary_service, mock_transcript_fetcher, mock_renderer):
    mock_transcript_fetcher.fetch.side_effect = TranscriptUnavailableError(attempts=["direct: blocked"])

    with pytest.raises(TranscriptUnavailableError):
        await summary_service.summarize_url(WATCH_URL)

    mock_renderer.clear_status.assert_called_once()
    mock_renderer.render.assert_not_called()
    assert "CORS restrictions" in mock_renderer.show_error.call_args.args[0]


@pytest.mark.asyncio
async def test_short_transcript_from_fetcher_reports_no_captions(summary_service, mock_transcript_fetcher):
    mock_transcript_fetcher.fetch.return_value = "tiny"

    with pytest.raises(TranscriptUnavailableError) as exc_info:
        await summary_service.summarize_url(WATCH_URL)

    assert "captions" in exc_info.value.detail


@pytest.mark.asyncio
async def test_summarizer_errors_clear_status(mock_metadata_service, mock_transcript_fetcher, mock_renderer):
    summarizer = MagicMock(spec=ExtractiveSummarizer)
    summarizer.summarize.side_effect = TranscriptTooShortError()
    service = TranscriptSummaryService(
        mock_metadata_service, mock_transcript_fetcher, summarizer, mock_renderer
    )

    with pytest.raises(TranscriptTooShortError):
        await service.summarize_url(WATCH_URL)

    mock_renderer.clear_status.assert_called_once()
