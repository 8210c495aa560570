"""
Transcript retrieval through an ordered chain of fallback strategies.

The timed-text endpoint is often unreachable from a given origin, so the same
request is attempted directly and then through public relay proxies. The
first strategy that yields an acceptable transcript wins; the rest are never
called.
"""
import warnings
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import httpx
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning
from loguru import logger

from quickdigest.core.config import settings
from quickdigest.core.constants import TranscriptConfig
from quickdigest.core.exceptions import TranscriptUnavailableError
from quickdigest.models.proxy import RelayProxy
from quickdigest.services.proxy import DEFAULT_RELAYS, ProxyService


def parse_transcript_xml(xml_text: str) -> str:
    """
    Flatten a timed-text document into plain text.

    Every ``<text>`` element is taken in document order, trimmed, and joined
    with single spaces. Entity references are decoded once.

    Args:
        xml_text: Raw response body.

    Returns:
        The transcript text, or an empty string when no caption elements exist.
    """
    if not xml_text:
        return ""

    # Timed-text bodies go through the lenient HTML parser
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
        soup = BeautifulSoup(xml_text, "html.parser")
    fragments = (element.get_text().strip() for element in soup.find_all("text"))
    return " ".join(fragment for fragment in fragments if fragment).strip()


def build_timedtext_url(video_id: str, language: Optional[str] = None) -> str:
    """Build the timed-text endpoint URL for a video."""
    lang = language or settings.TRANSCRIPT_LANGUAGE
    return f"{settings.YOUTUBE_TIMEDTEXT_URL}?lang={lang}&v={video_id}"


def is_acceptable_transcript(text: str) -> bool:
    """A transcript counts only if it is longer than the minimum length."""
    return bool(text) and len(text) > TranscriptConfig.MIN_ACCEPTED_LENGTH


class TranscriptStrategy(ABC):
    """A single way of retrieving the timed-text document for a video."""

    name: str = "strategy"

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    @abstractmethod
    def build_url(self, video_id: str) -> str:
        """Return the URL this strategy requests for the given video."""
        pass

    async def fetch(self, video_id: str) -> str:
        """
        Issue the GET request and parse the body.

        Raises:
            httpx.HTTPError: On transport failure, timeout or non-2xx status.
        """
        response = await self.client.get(self.build_url(video_id))
        response.raise_for_status()
        return parse_transcript_xml(response.text)


class DirectTimedTextStrategy(TranscriptStrategy):
    """Calls the timed-text endpoint directly."""

    name = "direct"

    def build_url(self, video_id: str) -> str:
        return build_timedtext_url(video_id)


class RelayTimedTextStrategy(TranscriptStrategy):
    """Calls the timed-text endpoint through a relay proxy."""

    def __init__(self, client: httpx.AsyncClient, relay: RelayProxy):
        super().__init__(client)
        self.relay = relay
        self.name = relay.name

    def build_url(self, video_id: str) -> str:
        return ProxyService.build_relay_url(self.relay, build_timedtext_url(video_id))


def default_strategies(client: httpx.AsyncClient) -> List[TranscriptStrategy]:
    """Direct call first, then each relay in declaration order."""
    strategies: List[TranscriptStrategy] = [DirectTimedTextStrategy(client)]
    strategies.extend(RelayTimedTextStrategy(client, relay) for relay in DEFAULT_RELAYS)
    return strategies


class TranscriptFetcher:
    """
    Runs transcript strategies sequentially until one is accepted.

    A strategy result is accepted only when the request succeeded and the
    parsed text is longer than ``TranscriptConfig.MIN_ACCEPTED_LENGTH``.
    Intermediate failures are logged, never raised; the caller sees a single
    ``TranscriptUnavailableError`` once every strategy has been exhausted.
    """

    def __init__(self, strategies: Sequence[TranscriptStrategy]):
        """
        Initialize the TranscriptFetcher.

        Args:
            strategies: Strategies in the order they should be attempted.
        """
        self.strategies = list(strategies)

    async def fetch(self, video_id: str) -> str:
        """
        Fetch the transcript text for a video.

        Args:
            video_id: The 11-character YouTube video id.

        Returns:
            The accepted transcript text.

        Raises:
            TranscriptUnavailableError: If no strategy produced an acceptable transcript.
        """
        attempts: List[str] = []

        for strategy in self.strategies:
            try:
                text = await strategy.fetch(video_id)
            except Exception as e:
                logger.warning(f"Transcript strategy '{strategy.name}' failed for {video_id}: {e}")
                attempts.append(f"{strategy.name}: {e}")
                continue

            if is_acceptable_transcript(text):
                logger.info(
                    f"Fetched transcript for {video_id} via '{strategy.name}' ({len(text)} chars)"
                )
                return text

            logger.warning(
                f"Transcript strategy '{strategy.name}' returned {len(text)} chars for {video_id}, trying next"
            )
            attempts.append(f"{strategy.name}: transcript too short ({len(text)} chars)")

        logger.error(f"All {len(self.strategies)} transcript strategies failed for {video_id}")
        raise TranscriptUnavailableError(attempts=attempts)
