"""Data models for caption tracks and transcript cues."""

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class TranscriptItem:
    """A single timed cue of transcript text."""
    start_time: float  # seconds from the start of the video
    text: str

    @property
    def timestamp(self) -> str:
        """Get formatted MM:SS timestamp string."""
        minutes, seconds = divmod(int(self.start_time), 60)
        return f"{minutes:02d}:{seconds:02d}"

    def to_dict(self) -> dict:
        return {"startTime": self.start_time, "text": self.text}


class CaptionTrack(BaseModel):
    """A caption track entry as listed in the watch page's player response."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    language_code: str = Field(default="", alias="languageCode")
    kind: Optional[str] = None
    base_url: Optional[str] = Field(default=None, alias="baseUrl")

    @property
    def is_auto_generated(self) -> bool:
        """ASR tracks are machine generated."""
        return self.kind == "asr"


class Json3Segment(BaseModel):
    model_config = ConfigDict(extra="ignore")

    utf8: str = ""


class Json3Event(BaseModel):
    model_config = ConfigDict(extra="ignore")

    t_start_ms: float = Field(default=0, alias="tStartMs", ge=0)
    segs: Optional[List[Json3Segment]] = None


class Json3Transcript(BaseModel):
    """The provider's json3 timed-text document."""
    model_config = ConfigDict(extra="ignore")

    events: List[Json3Event] = Field(default_factory=list)
