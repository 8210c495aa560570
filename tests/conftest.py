"""
Shared pytest fixtures and configuration.
"""
import httpx
import pytest

VIDEO_ID = "dQw4w9WgXcQ"

TRANSCRIPT_XML = """<?xml version="1.0" encoding="utf-8" ?>
<transcript>
  <text start="0.0" dur="4.2">  Welcome back to the channel, today we talk about gardening.  </text>
  <text start="4.2" dur="3.1">Tomatoes need plenty of sunlight and regular watering.</text>
  <text start="7.3" dur="2.0"></text>
  <text start="9.3" dur="5.5">Gardening is easier when the soil is rich &amp; well drained!</text>
</transcript>
"""

TRANSCRIPT_TEXT = (
    "Welcome back to the channel, today we talk about gardening. "
    "Tomatoes need plenty of sunlight and regular watering. "
    "Gardening is easier when the soil is rich & well drained!"
)



@pytest.fixture
def video_id() -> str:
    return VIDEO_ID


@pytest.fixture
def transcript_xml() -> str:
    return TRANSCRIPT_XML


@pytest.fixture
def transcript_text() -> str:
    return TRANSCRIPT_TEXT


@pytest.fixture
def make_client():
    """Build an AsyncClient whose requests are answered by ``handler``."""
    def factory(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
