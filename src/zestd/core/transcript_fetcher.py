"""
Fetch timed-text caption data through the read-through proxy.

Two paths lead to a transcript:

- the page path: locate the tracks listed on the watch page, select one,
  fetch its json3 payload and normalize it
- the direct path: probe the public timedtext endpoint over a fixed matrix
  of languages, manual captions before ASR, until one returns cues
"""

import json
from typing import Any, Dict, List, Optional, Sequence

from .caption_locator import locate_caption_tracks, select_track
from .config import config
from .exceptions import MalformedPayloadError, TranscriptError, TranscriptUnavailableError
from .proxy_client import ProxyClient
from .timedtext import normalize
from ..models import CaptionTrack, TranscriptItem
from ..utils.logging import get_logger
from ..utils.youtube_utils import build_timedtext_url, ensure_json3_format

logger = get_logger("transcript_fetcher")

FALLBACK_LANGUAGES = ['en', 'en-US', 'en-GB', 'de', 'es', 'fr']


async def fetch_track(client: ProxyClient, track: CaptionTrack) -> Dict[str, Any]:
    """
    Fetch the json3 payload of a caption track.

    Raises:
        MalformedPayloadError: if the track has no base URL or the body is not JSON
        ProxyRequestError: on transport failure or a non-success status
    """
    if not track.base_url:
        raise MalformedPayloadError("Caption track found but baseUrl is missing.")

    body = await client.fetch_text(ensure_json3_format(track.base_url))
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise MalformedPayloadError("Failed to fetch caption data from YouTube.") from e


async def fetch_from_page(client: ProxyClient, video_id: str) -> List[TranscriptItem]:
    """
    Page path: locate, select, fetch and normalize.

    Returns an empty list when the page lists no caption tracks.
    """
    tracks = await locate_caption_tracks(client, video_id)
    if not tracks:
        return []

    track = select_track(tracks)
    logger.info(
        f"Selected track: lang={track.language_code or '?'} "
        f"{'ASR' if track.is_auto_generated else 'manual'}"
    )
    return normalize(await fetch_track(client, track))


async def _try_timedtext(client: ProxyClient, url: str) -> List[TranscriptItem]:
    body = await client.fetch_text(url)
    if not body or not body.strip().startswith("{"):
        # HTML error pages and empty bodies are common here
        return []
    return normalize(json.loads(body))


async def fetch_direct(
    client: ProxyClient,
    video_id: str,
    languages: Optional[Sequence[str]] = None
) -> List[TranscriptItem]:
    """
    Direct path: probe the timedtext endpoint language by language.

    For each language the manual-caption endpoint is tried before the ASR
    one. The first attempt that normalizes to a non-empty list wins.
    Individual attempt failures are logged and skipped.

    Raises:
        TranscriptUnavailableError: if every language/kind combination fails
    """
    languages = languages or config.extraction.fallback_languages or FALLBACK_LANGUAGES

    for lang in languages:
        for auto_generated in (False, True):
            url = build_timedtext_url(video_id, lang, auto_generated=auto_generated)
            label = f"{lang}{'-asr' if auto_generated else ''}"
            try:
                items = await _try_timedtext(client, url)
            except (TranscriptError, ValueError) as e:
                logger.debug(f"Direct timedtext {label} failed for {video_id}: {e}")
                continue
            if items:
                logger.info(f"Direct timedtext {label} returned {len(items)} cues for {video_id}")
                return items
            logger.debug(f"Direct timedtext {label} returned no cues for {video_id}")

    raise TranscriptUnavailableError()
