"""Formatting helpers for displaying and exporting transcripts."""

import math
from datetime import datetime
from typing import List, Optional, Sequence

from ..models import TranscriptItem


def format_timestamp(seconds: float) -> str:
    """Format seconds as MM:SS. Minutes keep counting past the hour."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def format_transcript_lines(items: Sequence[TranscriptItem]) -> str:
    """Render cues as `[MM:SS] text` lines, as copied to the clipboard."""
    return "\n".join(f"[{format_timestamp(item.start_time)}] {item.text}" for item in items)


def build_export_text(
    video_id: str,
    items: Sequence[TranscriptItem],
    generated_at: Optional[datetime] = None
) -> str:
    """
    Build the plain-text export of a transcript.

    Args:
        video_id: YouTube video ID
        items: Transcript cues
        generated_at: Export time, defaults to now

    Returns:
        Header block followed by one `[MM:SS] text` line per cue
    """
    generated_at = generated_at or datetime.now()
    header = (
        "YouTube Video Transcript\n"
        f"Video ID: {video_id}\n"
        f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}\n\n"
    )
    return header + format_transcript_lines(items)


def export_filename(video_id: str) -> str:
    return f"transcript_{video_id}.txt"


def reveal_batches(items: Sequence[TranscriptItem], steps: int = 15) -> List[List[TranscriptItem]]:
    """Split cues into roughly `steps` batches for the typewriter reveal."""
    if not items:
        return []
    batch_size = max(1, math.ceil(len(items) / max(steps, 1)))
    return [list(items[i:i + batch_size]) for i in range(0, len(items), batch_size)]


def transcript_text(items: Sequence[TranscriptItem], limit: Optional[int] = None) -> str:
    """Join cue texts with spaces, truncated to `limit` characters if given."""
    text = " ".join(item.text for item in items)
    if limit is not None:
        text = text[:limit]
    return text
