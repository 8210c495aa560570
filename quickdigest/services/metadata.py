"""
Best-effort video metadata lookup via the YouTube oEmbed endpoint.
"""
import httpx
from cachetools import TTLCache
from loguru import logger
from pydantic import ValidationError

from quickdigest.core.config import settings
from quickdigest.core.constants import VideoInfoConfig
from quickdigest.core.exceptions import MetadataFetchError
from quickdigest.models.youtube import OEmbedResponse, VideoInfo


class VideoMetadataService:
    """
    Looks up title, author and thumbnail for a video.

    Failures never propagate: callers always receive a ``VideoInfo``, the
    placeholder one when the lookup fails. Successful lookups are cached for
    ``METADATA_CACHE_TTL_SECONDS``.
    """

    def __init__(self, client: httpx.AsyncClient, cache_ttl: int = settings.METADATA_CACHE_TTL_SECONDS):
        self.client = client
        self._cache: TTLCache[str, VideoInfo] = TTLCache(
            maxsize=VideoInfoConfig.CACHE_MAXSIZE, ttl=cache_ttl
        )

    async def _fetch_oembed(self, video_id: str) -> VideoInfo:
        params = {
            "url": f"{settings.YOUTUBE_WATCH_URL}?v={video_id}",
            "format": "json",
        }
        try:
            response = await self.client.get(settings.YOUTUBE_OEMBED_URL, params=params)
            response.raise_for_status()
            data = OEmbedResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            raise MetadataFetchError(f"Failed to fetch video info: {e}") from e

        return VideoInfo(
            title=data.title,
            author=data.author_name,
            thumbnail=data.thumbnail_url,
        )

    async def get_video_info(self, video_id: str) -> VideoInfo:
        """
        Return metadata for a video, or the placeholder record on any failure.

        Args:
            video_id: The 11-character YouTube video id.

        Returns:
            VideoInfo: Real metadata, or ``VideoInfo.fallback()``.
        """
        cached = self._cache.get(video_id)
        if cached is not None:
            return cached

        try:
            info = await self._fetch_oembed(video_id)
        except MetadataFetchError as e:
            logger.error(f"Error fetching video info for {video_id}: {e.detail}")
            return VideoInfo.fallback()

        self._cache[video_id] = info
        return info
