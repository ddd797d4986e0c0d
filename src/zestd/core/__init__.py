"""Core modules for caption extraction."""

from .config import config, Config
from .exceptions import (
    TranscriptError,
    InvalidVideoInputError,
    ProxyRequestError,
    MalformedPayloadError,
    TranscriptUnavailableError,
)
from .proxy_client import ProxyClient
from .caption_locator import locate_caption_tracks, select_track, find_caption_tracks
from .timedtext import normalize, decode_entities
from .transcript_fetcher import fetch_track, fetch_from_page, fetch_direct, FALLBACK_LANGUAGES
from .fallback import Attempt, AttemptResult, AttemptStatus, run_attempts
from .llm_manager import LLMManager, LLMSettings

__all__ = [
    'config',
    'Config',
    'TranscriptError',
    'InvalidVideoInputError',
    'ProxyRequestError',
    'MalformedPayloadError',
    'TranscriptUnavailableError',
    'ProxyClient',
    'locate_caption_tracks',
    'select_track',
    'find_caption_tracks',
    'normalize',
    'decode_entities',
    'fetch_track',
    'fetch_from_page',
    'fetch_direct',
    'FALLBACK_LANGUAGES',
    'Attempt',
    'AttemptResult',
    'AttemptStatus',
    'run_attempts',
    'LLMManager',
    'LLMSettings',
]
