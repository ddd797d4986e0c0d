"""Service for the three-bullet AI synopsis of a transcript."""

from typing import Any, Optional, Sequence

from langchain_core.messages import HumanMessage

from ..core.config import config
from ..models import TranscriptItem
from ..utils.logging import get_logger
from ..utils.transcript_format import transcript_text

logger = get_logger("summary_service")

SUMMARY_PROMPT = """You are a technical analyst. Summarize the following YouTube video transcript into exactly 3 professional, information-dense bullet points. Use a clear, technical tone. Focus on the core value proposition and key technical takeaways. Avoid fluff.

Transcript Data:
{transcript}"""

EMPTY_SUMMARY = "Summary analysis concluded with no results."
FAILED_SUMMARY = "Technical failure in AI processing unit. Unable to generate synopsis."


def _message_text(content: Any) -> str:
    """Flatten a chat message content that may be a list of parts."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return ""


class SummaryService:
    """Summarizes transcripts with a single stateless model call."""

    def __init__(self, llm: Any, max_chars: Optional[int] = None):
        self.llm = llm
        self.max_chars = max_chars or config.extraction.summary_max_chars

    def build_prompt(self, items: Sequence[TranscriptItem]) -> str:
        return SUMMARY_PROMPT.format(transcript=transcript_text(items, limit=self.max_chars))

    async def summarize(self, items: Sequence[TranscriptItem]) -> str:
        """
        Summarize a transcript into three bullet points.

        Never raises: model failures are logged and a fixed fallback
        message is returned instead.
        """
        try:
            response = await self.llm.ainvoke([HumanMessage(content=self.build_prompt(items))])
            summary = _message_text(getattr(response, "content", "")).strip()
        except Exception as e:
            logger.error(f"Summary model error: {e}")
            return FAILED_SUMMARY

        if not summary:
            logger.warning("Summary model returned empty content")
            return EMPTY_SUMMARY
        return summary
