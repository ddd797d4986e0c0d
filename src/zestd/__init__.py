"""
Zestd

Instant YouTube transcripts: caption extraction through a read-through
proxy, with export helpers and an AI synopsis.
"""

__version__ = "0.1.0"

from .utils.logging import get_logger
from .utils.youtube_utils import extract_video_id
from .models import TranscriptItem
from .core.exceptions import (
    TranscriptError,
    InvalidVideoInputError,
    ProxyRequestError,
    MalformedPayloadError,
    TranscriptUnavailableError,
)
from .services.transcript_service import TranscriptService, extract_transcript

__all__ = [
    'get_logger',
    'extract_video_id',
    'extract_transcript',
    'TranscriptService',
    'TranscriptItem',
    'TranscriptError',
    'InvalidVideoInputError',
    'ProxyRequestError',
    'MalformedPayloadError',
    'TranscriptUnavailableError',
]

# Set up package-level logger
logger = get_logger(__name__)
