"""Exceptions raised by the caption extraction pipeline."""

from typing import Optional


UNAVAILABLE_MESSAGE = (
    "Transcripts are completely unavailable for this video. "
    "It might be private, age-restricted, or captions are disabled."
)


class TranscriptError(Exception):
    """Base class for transcript-related errors."""
    pass


class InvalidVideoInputError(TranscriptError):
    """No video identifier could be extracted from the input."""

    def __init__(self, detail: str = "Please provide a valid YouTube URL."):
        super().__init__(detail)


class ProxyRequestError(TranscriptError):
    """The proxy or the target could not be reached, or answered with a non-success status."""

    def __init__(self, detail: str, status: Optional[int] = None, url: Optional[str] = None):
        self.status = status
        self.url = url
        super().__init__(detail)


class MalformedPayloadError(TranscriptError):
    """An external payload did not have the expected structure."""
    pass


class TranscriptUnavailableError(TranscriptError):
    """Every extraction path was exhausted; the video has no reachable captions."""

    def __init__(self, detail: str = UNAVAILABLE_MESSAGE):
        super().__init__(detail)
