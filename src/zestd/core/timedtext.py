"""Normalization of the provider's json3 timed-text format into transcript cues."""

from typing import Any, List

from pydantic import ValidationError

from .exceptions import MalformedPayloadError
from ..models import TranscriptItem, Json3Transcript

# Applied in this order. `&amp;lt;` therefore decodes all the way to `<`.
HTML_ENTITIES = [
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
]


def decode_entities(text: str) -> str:
    """Decode the five HTML entities that appear in caption text."""
    for entity, char in HTML_ENTITIES:
        text = text.replace(entity, char)
    return text


def normalize(raw: Any) -> List[TranscriptItem]:
    """
    Convert a json3 document into an ordered list of transcript cues.

    A missing or non-mapping payload, or one without an `events` key, yields
    an empty list. Events without segments and events whose text is empty
    after cleanup are dropped. Source order is preserved.

    Raises:
        MalformedPayloadError: if `events` is present but has the wrong shape
    """
    if not isinstance(raw, dict) or not raw.get("events"):
        return []

    try:
        document = Json3Transcript.model_validate(raw)
    except ValidationError as e:
        raise MalformedPayloadError(f"Unexpected timed-text structure: {e.error_count()} invalid field(s)") from e

    items = []
    for event in document.events:
        if event.segs is None:
            continue
        text = "".join(seg.utf8 for seg in event.segs)
        text = decode_entities(text.replace("\n", " ")).strip()
        if not text:
            continue
        items.append(TranscriptItem(start_time=event.t_start_ms / 1000, text=text))

    return items
