"""Pytest configuration and fixtures for the extraction pipeline tests."""

import json
import os
import sys

import pytest

# Add the src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

# Set test environment variables before importing the package
os.environ["PROXY_BASE_URL"] = "https://proxy.test/raw"
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from zestd.models import CaptionTrack, TranscriptItem
from mocks.mock_proxy import FakeProxyClient


VIDEO_ID = "dQw4w9WgXcQ"


@pytest.fixture
def video_id():
    return VIDEO_ID


@pytest.fixture
def player_response_page():
    """Watch page body with an embedded ytInitialPlayerResponse."""
    return (
        '<html><script>var ytInitialPlayerResponse = '
        '{"captions":{"playerCaptionsTracklistRenderer":{"captionTracks":'
        '[{"languageCode":"en","baseUrl":"https://x/track"}]}}};'
        'var meta = document.createElement("meta");</script></html>'
    )


@pytest.fixture
def caption_array_page():
    """Watch page body with only a bare captionTracks array."""
    return (
        '<html><script>window.data = {"foo": 1, "captionTracks":'
        '[{"languageCode":"de","kind":"asr","baseUrl":"https://x/de-asr"}], "bar": 2};'
        '</script></html>'
    )


@pytest.fixture
def empty_page():
    return "<html><head><title>Video</title></head><body>No captions here</body></html>"


@pytest.fixture
def json3_payload():
    """Timed-text document as returned by the provider."""
    return {
        "events": [
            {"tStartMs": 0, "dDurationMs": 1000},
            {"tStartMs": 1500, "segs": [{"utf8": "Hello"}, {"utf8": " &amp; world"}]},
            {"tStartMs": 3000, "segs": [{"utf8": "\n"}]},
            {"tStartMs": 4200, "segs": [{"utf8": "it&#39;s\nfine"}]},
        ]
    }


@pytest.fixture
def json3_body(json3_payload):
    return json.dumps(json3_payload)


@pytest.fixture
def sample_tracks():
    return [
        CaptionTrack(languageCode="de", baseUrl="https://x/de"),
        CaptionTrack(languageCode="en", kind="asr", baseUrl="https://x/en-asr"),
        CaptionTrack(languageCode="en", baseUrl="https://x/en"),
    ]


@pytest.fixture
def sample_transcript():
    return [
        TranscriptItem(start_time=0.0, text="Welcome back"),
        TranscriptItem(start_time=65.4, text="Today we cover caching"),
        TranscriptItem(start_time=3725.0, text="Thanks for watching"),
    ]


@pytest.fixture
def fake_client():
    return FakeProxyClient()
