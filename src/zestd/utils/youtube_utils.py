"""Utility functions for working with YouTube identifiers and URLs."""

import re
from typing import Optional
from urllib.parse import urlencode

YOUTUBE = "https://www.youtube.com"
TIMEDTEXT_ENDPOINT = f"{YOUTUBE}/api/timedtext"

VIDEO_ID_RE = re.compile(r"[a-zA-Z0-9_-]{11}")

# Checked in order; the first match wins
VIDEO_URL_PATTERNS = [
    re.compile(r'(?:https?://)?(?:www\.)?youtube\.com/watch\?v=([a-zA-Z0-9_-]{11})'),
    re.compile(r'(?:https?://)?(?:www\.)?youtu\.be/([a-zA-Z0-9_-]{11})(?:\?.*)?'),
    re.compile(r'(?:https?://)?(?:www\.)?youtube\.com/embed/([a-zA-Z0-9_-]{11})'),
    re.compile(r'(?:https?://)?(?:www\.)?youtube\.com/v/([a-zA-Z0-9_-]{11})'),
    re.compile(r'(?:https?://)?(?:www\.)?youtube\.com/shorts/([a-zA-Z0-9_-]{11})'),
    re.compile(r'(?:https?://)?(?:www\.)?youtube\.com/live/([a-zA-Z0-9_-]{11})'),
]


def extract_video_id(url: Optional[str]) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL.

    Accepts watch, youtu.be, embed, /v/, shorts and live URLs, or a bare
    11-character video ID.

    Args:
        url: YouTube URL or video ID

    Returns:
        Video ID or None if nothing matched
    """
    if not url or not isinstance(url, str):
        return None

    for pattern in VIDEO_URL_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)

    if VIDEO_ID_RE.fullmatch(url):
        return url

    return None


def build_watch_url(video_id: str) -> str:
    """Canonical watch page URL for a video."""
    return f"{YOUTUBE}/watch?v={video_id}"


def build_timedtext_url(video_id: str, language: str, auto_generated: bool = False) -> str:
    """Timedtext endpoint URL for a language, manual or ASR, in json3 format."""
    params = [("v", video_id), ("lang", language)]
    if auto_generated:
        params.append(("kind", "asr"))
    params.append(("fmt", "json3"))
    return f"{TIMEDTEXT_ENDPOINT}?{urlencode(params)}"


def ensure_json3_format(base_url: str) -> str:
    """Append the json3 format selector to a caption base URL unless present."""
    if "fmt=json3" in base_url:
        return base_url
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}fmt=json3"
