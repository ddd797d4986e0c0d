"""Data models for Zestd."""

from .transcript import TranscriptItem, CaptionTrack, Json3Transcript, Json3Event, Json3Segment
from .extraction_state import ExtractionState, ExtractionStatus

__all__ = [
    "TranscriptItem",
    "CaptionTrack",
    "Json3Transcript",
    "Json3Event",
    "Json3Segment",
    "ExtractionState",
    "ExtractionStatus",
]
