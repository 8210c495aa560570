"""
Custom exception classes and RFC 7807 error handling.
"""
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict
from fastapi import Request
from fastapi.responses import JSONResponse

from quickdigest.core.constants import StatusMessages


class ErrorResponse(BaseModel):
    """RFC 7807 Problem Details response model."""
    type: str
    title: str
    status: int
    detail: str
    instance: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        status_code: int,
        error_type: str,
        title: str,
        detail: str,
    ):
        self.status_code = status_code
        self.error_type = error_type
        self.title = title
        self.detail = detail
        super().__init__(detail)


class InvalidURLError(AppException):
    """The submitted URL is neither a YouTube URL nor a podcast feed."""

    def __init__(self, detail: str = StatusMessages.INVALID_URL):
        super().__init__(
            status_code=400,
            error_type="https://problems.example.com/invalid-url",
            title="Invalid URL",
            detail=detail,
        )


class InvalidFormatError(AppException):
    """A YouTube URL from which no video id could be extracted."""

    def __init__(self, detail: str = StatusMessages.INVALID_FORMAT):
        super().__init__(
            status_code=400,
            error_type="https://problems.example.com/invalid-format",
            title="Invalid Format",
            detail=detail,
        )


class PodcastFeedNotSupportedError(AppException):
    """Podcast feeds are recognised but cannot be processed."""

    def __init__(self, detail: str = StatusMessages.PODCAST_UNSUPPORTED):
        super().__init__(
            status_code=501,
            error_type="https://problems.example.com/not-implemented",
            title="Not Implemented",
            detail=detail,
        )


class TranscriptUnavailableError(AppException):
    """Every transcript retrieval strategy failed."""

    def __init__(
        self,
        detail: str = StatusMessages.TRANSCRIPT_UNAVAILABLE,
        attempts: Sequence[str] = (),
    ):
        super().__init__(
            status_code=404,
            error_type="https://problems.example.com/transcript-unavailable",
            title="Transcript Unavailable",
            detail=detail,
        )
        self.attempts = list(attempts)


class TranscriptTooShortError(AppException):
    """The transcript is below the length needed for a summary."""

    def __init__(self, detail: str = StatusMessages.TOO_SHORT):
        super().__init__(
            status_code=422,
            error_type="https://problems.example.com/transcript-too-short",
            title="Transcript Too Short",
            detail=detail,
        )


class MetadataFetchError(AppException):
    """oEmbed lookup failed. Never leaves the metadata service."""

    def __init__(self, detail: str = "Failed to fetch video info"):
        super().__init__(
            status_code=502,
            error_type="https://problems.example.com/metadata-fetch-failed",
            title="Bad Gateway",
            detail=detail,
        )


class PriceFetchError(AppException):
    """A single ticker poll failed. Never leaves the poller."""

    def __init__(self, detail: str = "Failed to fetch price"):
        super().__init__(
            status_code=502,
            error_type="https://problems.example.com/price-fetch-failed",
            title="Bad Gateway",
            detail=detail,
        )


def create_error_response(
    request: Request,
    status_code: int,
    error_type: str,
    title: str,
    detail: str,
) -> JSONResponse:
    """Create a RFC 7807 compliant JSON error response."""
    error = ErrorResponse(
        type=error_type,
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
    )
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(),
        media_type="application/problem+json",
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return RFC 7807 response."""
    return create_error_response(
        request=request,
        status_code=exc.status_code,
        error_type=exc.error_type,
        title=exc.title,
        detail=exc.detail,
    )
