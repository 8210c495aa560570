"""
URL classification and YouTube video id extraction.
"""
import re

from quickdigest.core.exceptions import InvalidFormatError
from quickdigest.models.enums import UrlKind

YOUTUBE_URL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^https?://(www\.)?(youtube\.com/watch\?v=|youtu\.be/)([a-zA-Z0-9_-]{11})"),
    re.compile(r"^https?://(www\.)?youtube\.com/embed/([a-zA-Z0-9_-]{11})"),
)

PODCAST_URL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^https?://.+\.(rss|xml|feed)", re.IGNORECASE),
    re.compile(r"feed", re.IGNORECASE),
    re.compile(r"podcast", re.IGNORECASE),
)

# Order matters: the first capture wins
VIDEO_ID_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"[?&]v=([a-zA-Z0-9_-]{11})"),
    re.compile(r"youtu\.be/([a-zA-Z0-9_-]{11})"),
    re.compile(r"embed/([a-zA-Z0-9_-]{11})"),
)


def is_youtube_url(url: str) -> bool:
    return any(pattern.search(url) for pattern in YOUTUBE_URL_PATTERNS)


def is_podcast_url(url: str) -> bool:
    """Heuristic only: a match says nothing about the body being a valid feed."""
    return any(pattern.search(url) for pattern in PODCAST_URL_PATTERNS)


def classify_url(url: str) -> UrlKind:
    """
    Classify a raw URL string.

    YouTube patterns are checked before the podcast heuristics, so a YouTube
    URL that happens to contain "feed" is still treated as a video.

    Args:
        url: The user-submitted URL.

    Returns:
        UrlKind: YOUTUBE, PODCAST_FEED or INVALID.
    """
    if is_youtube_url(url):
        return UrlKind.YOUTUBE
    if is_podcast_url(url):
        return UrlKind.PODCAST_FEED
    return UrlKind.INVALID


def extract_video_id(url: str) -> str:
    """
    Extract the 11-character video id from a YouTube URL.

    Supports the watch (``?v=``), short-link (``youtu.be/``) and embed forms.

    Args:
        url: A URL previously classified as YouTube.

    Returns:
        The video id.

    Raises:
        InvalidFormatError: If no pattern captures an id.
    """
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    raise InvalidFormatError()
