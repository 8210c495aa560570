from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from quickdigest.core.constants import VideoInfoConfig

# --- Internal Parsing Models (oEmbed) ---

class OEmbedResponse(BaseModel):
    title: str
    author_name: str
    thumbnail_url: Optional[str] = None

    model_config = ConfigDict(extra='ignore')

# --- Core Data Models ---

class VideoReference(BaseModel):
    video_id: str = Field(pattern=r"^[A-Za-z0-9_-]{11}$")

    model_config = ConfigDict(frozen=True)

class VideoInfo(BaseModel):
    title: str
    author: str
    thumbnail: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def fallback(cls) -> "VideoInfo":
        """Placeholder used whenever metadata cannot be fetched."""
        return cls(
            title=VideoInfoConfig.FALLBACK_TITLE,
            author=VideoInfoConfig.FALLBACK_AUTHOR,
            thumbnail=None,
        )

class SummaryResult(BaseModel):
    summary: str
    key_points: List[str] = Field(default_factory=list, max_length=5)
    word_count: int

    model_config = ConfigDict(frozen=True)
