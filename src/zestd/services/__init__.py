"""Service layer for Zestd."""

from .transcript_service import TranscriptService, extract_transcript
from .summary_service import SummaryService, EMPTY_SUMMARY, FAILED_SUMMARY

__all__ = [
    "TranscriptService",
    "extract_transcript",
    "SummaryService",
    "EMPTY_SUMMARY",
    "FAILED_SUMMARY",
]
