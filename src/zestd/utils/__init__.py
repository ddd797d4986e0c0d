"""Utility modules for Zestd."""

from .logging import get_logger, setup_logger
from .youtube_utils import (
    extract_video_id,
    build_watch_url,
    build_timedtext_url,
    ensure_json3_format,
)
from .transcript_format import (
    format_timestamp,
    format_transcript_lines,
    build_export_text,
    export_filename,
    reveal_batches,
    transcript_text,
)

__all__ = [
    "get_logger",
    "setup_logger",
    "extract_video_id",
    "build_watch_url",
    "build_timedtext_url",
    "ensure_json3_format",
    "format_timestamp",
    "format_transcript_lines",
    "build_export_text",
    "export_filename",
    "reveal_batches",
    "transcript_text",
]
