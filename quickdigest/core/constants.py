"""
Application-wide constants and thresholds.

Grouped into static classes for namespace management and discoverability.
"""


class TranscriptConfig:
    """Acceptance rules for fetched transcripts."""
    MIN_ACCEPTED_LENGTH = 50  # Characters; a fetched transcript must exceed this


class SummaryConfig:
    """Configuration for the extractive summarizer."""
    MIN_TEXT_LENGTH = 50  # Characters; shorter input cannot be summarized
    MIN_SENTENCE_LENGTH = 20  # Fragments at or below this are discarded
    SENTENCE_RATIO = 0.2  # Share of sentences kept in the summary
    MAX_SUMMARY_SENTENCES = 5
    KEY_POINT_COUNT = 5
    MIN_KEYWORD_LENGTH = 4  # Tokens at or below this are ignored

    STOP_WORDS: frozenset[str] = frozenset({
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "is", "are", "was", "were", "be", "been", "have",
        "has", "had", "do", "does", "did", "will", "would", "could", "should",
        "may", "might", "must", "can", "this", "that", "these", "those", "i",
        "you", "he", "she", "it", "we", "they",
    })


class VideoInfoConfig:
    """Placeholder metadata used when the oEmbed lookup fails."""
    FALLBACK_TITLE = "Video"
    FALLBACK_AUTHOR = "Unknown"
    CACHE_MAXSIZE = 256


class TickerConfig:
    """Configuration for the price ticker."""
    LABEL_FORMAT = "%H:%M:%S"


class StatusMessages:
    """User-facing progress and error messages for the summary pipeline."""
    EXTRACTING = "Extracting YouTube video information..."
    FETCHING_TRANSCRIPT = "Fetching transcript..."
    PROCESSING_PODCAST = "Processing podcast feed..."
    GENERATING = "Generating summary..."

    EMPTY_URL = "Please enter a URL"
    INVALID_URL = "Invalid URL. Please enter a valid YouTube URL."
    INVALID_FORMAT = "Invalid YouTube URL format"
    PODCAST_UNSUPPORTED = (
        "Podcast RSS feed processing requires backend setup. "
        "Please use YouTube videos for now."
    )
    TRANSCRIPT_UNAVAILABLE = (
        "Unable to fetch transcript due to CORS restrictions. "
        "Please set up a backend service or use a browser extension that disables CORS. "
        "Alternatively, ensure the video has captions enabled."
    )
    NO_CAPTIONS = (
        "No transcript available for this video. "
        "The video may not have captions enabled."
    )
    TOO_SHORT = "Transcript too short to generate summary"
