"""
Enums for type-safe values across the application.
"""
from enum import Enum


class UrlKind(str, Enum):
    """Classification of a user-submitted URL."""
    YOUTUBE = "youtube"
    PODCAST_FEED = "podcast_feed"
    INVALID = "invalid"


class RelayMode(str, Enum):
    """How a relay proxy expects the target URL to be passed."""
    QUERY = "query"  # URL-encoded into a query parameter
    PATH = "path"  # Appended verbatim after the relay base URL
