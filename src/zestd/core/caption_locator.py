"""
Locate the caption tracks listed on a video's watch page and pick one.

The watch page format is undocumented and changes without notice, so two
independent extraction strategies are tried against the raw HTML:

1. the embedded `ytInitialPlayerResponse` object literal
2. a bare `"captionTracks":[...]` array literal

A strategy that matches nothing, fails to parse, or finds an empty list
produces no tracks; it never raises.
"""

import json
import re
from typing import Any, List, Sequence

from pydantic import ValidationError

from .proxy_client import ProxyClient
from ..models import CaptionTrack
from ..utils.logging import get_logger
from ..utils.youtube_utils import build_watch_url

logger = get_logger("caption_locator")

PLAYER_RESPONSE_RE = re.compile(r'ytInitialPlayerResponse\s*=\s*({.+?})\s*;\s*(?:var\s+meta|</script)')
CAPTION_TRACKS_RE = re.compile(r'"captionTracks":\s*(\[.*?\])')


def _parse_tracks(entries: Any) -> List[CaptionTrack]:
    """Validate raw track dicts, skipping entries that are not usable tracks."""
    if not isinstance(entries, list):
        return []
    tracks = []
    for entry in entries:
        try:
            tracks.append(CaptionTrack.model_validate(entry))
        except ValidationError:
            logger.debug(f"Skipping malformed caption track entry: {entry!r}")
    return tracks


def extract_tracks_from_player_response(html: str) -> List[CaptionTrack]:
    """Strategy 1: descend into the embedded initial player response."""
    match = PLAYER_RESPONSE_RE.search(html)
    if not match:
        logger.debug("ytInitialPlayerResponse not found in page")
        return []

    try:
        player_response = json.loads(match.group(1))
    except json.JSONDecodeError:
        logger.warning("Failed to parse ytInitialPlayerResponse JSON")
        return []

    node = player_response
    for key in ("captions", "playerCaptionsTracklistRenderer"):
        if not isinstance(node, dict):
            return []
        node = node.get(key)
    if not isinstance(node, dict):
        return []
    return _parse_tracks(node.get("captionTracks"))


def extract_tracks_from_caption_array(html: str) -> List[CaptionTrack]:
    """Strategy 2: parse a `"captionTracks":[...]` literal found anywhere in the page."""
    match = CAPTION_TRACKS_RE.search(html)
    if not match:
        logger.debug("captionTracks array not found in page")
        return []

    try:
        entries = json.loads(match.group(1))
    except json.JSONDecodeError:
        logger.warning("Failed to parse captionTracks JSON")
        return []

    return _parse_tracks(entries)


EXTRACTION_STRATEGIES = [
    extract_tracks_from_player_response,
    extract_tracks_from_caption_array,
]


def find_caption_tracks(html: str) -> List[CaptionTrack]:
    """Run the extraction strategies in order; return the first non-empty result."""
    for strategy in EXTRACTION_STRATEGIES:
        tracks = strategy(html)
        if tracks:
            logger.debug(f"{strategy.__name__} found {len(tracks)} track(s)")
            return tracks
    return []


async def locate_caption_tracks(client: ProxyClient, video_id: str) -> List[CaptionTrack]:
    """
    Fetch the watch page through the proxy and list its caption tracks.

    Returns an empty list when no strategy finds any tracks. Transport
    failures are not retried here.

    Raises:
        ProxyRequestError: if the watch page could not be fetched
    """
    html = await client.fetch_text(build_watch_url(video_id))
    tracks = find_caption_tracks(html)
    if tracks:
        summary = ", ".join(
            f"{t.language_code or '?'}{'-asr' if t.is_auto_generated else ''}" for t in tracks
        )
        logger.info(f"Tracks for {video_id}: [{summary}]")
    else:
        logger.warning(f"No caption tracks found in page metadata for {video_id}")
    return tracks


def select_track(tracks: Sequence[CaptionTrack]) -> CaptionTrack:
    """
    Choose one track: manual English, else any manual track, else the first.

    Raises:
        ValueError: if `tracks` is empty
    """
    if not tracks:
        raise ValueError("No caption tracks to select from.")

    for track in tracks:
        if track.language_code == "en" and not track.is_auto_generated:
            return track
    for track in tracks:
        if not track.is_auto_generated:
            return track
    return tracks[0]
