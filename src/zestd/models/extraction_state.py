"""Data model for the front-end extraction session."""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum

from .transcript import TranscriptItem


class ExtractionStatus(Enum):
    """Extraction status enumeration."""
    IDLE = "idle"
    LOADING = "loading"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass
class ExtractionState:
    """State of one extraction as shown to the user."""
    status: ExtractionStatus = ExtractionStatus.IDLE
    video_id: Optional[str] = None
    logs: List[str] = field(default_factory=list)
    transcript: List[TranscriptItem] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_busy(self) -> bool:
        return self.status in (ExtractionStatus.LOADING, ExtractionStatus.PROCESSING)

    @property
    def is_completed(self) -> bool:
        return self.status == ExtractionStatus.COMPLETED and len(self.transcript) > 0

    def log(self, message: str) -> None:
        self.logs.append(message)

    def start(self, video_id: str) -> None:
        """Reset for a new extraction of video_id."""
        self.status = ExtractionStatus.LOADING
        self.video_id = video_id
        self.logs = []
        self.transcript = []
        self.error = None

    def fail(self, message: str) -> None:
        self.status = ExtractionStatus.ERROR
        self.error = message
