"""Unit tests for the AI synopsis service."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import HumanMessage

from zestd.models import TranscriptItem
from zestd.services.summary_service import EMPTY_SUMMARY, FAILED_SUMMARY, SummaryService


def _llm_returning(content):
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=MagicMock(content=content))
    return llm


class TestBuildPrompt:

    def test_contains_instructions_and_text(self, sample_transcript):
        prompt = SummaryService(MagicMock(), max_chars=30000).build_prompt(sample_transcript)
        assert "exactly 3 professional, information-dense bullet points" in prompt
        assert prompt.endswith("Transcript Data:\nWelcome back Today we cover caching Thanks for watching")

    def test_transcript_capped(self):
        items = [TranscriptItem(start_time=0, text="#" * 40000)]
        prompt = SummaryService(MagicMock(), max_chars=30000).build_prompt(items)
        assert prompt.count("#") == 30000


class TestSummarize:

    @pytest.mark.asyncio
    async def test_returns_model_text(self, sample_transcript):
        llm = _llm_returning("- one\n- two\n- three\n")

        summary = await SummaryService(llm).summarize(sample_transcript)

        assert summary == "- one\n- two\n- three"
        messages = llm.ainvoke.call_args[0][0]
        assert len(messages) == 1
        assert isinstance(messages[0], HumanMessage)

    @pytest.mark.asyncio
    async def test_content_parts_flattened(self, sample_transcript):
        llm = _llm_returning([{"type": "text", "text": "- a"}, {"type": "text", "text": "\n- b"}])
        assert await SummaryService(llm).summarize(sample_transcript) == "- a\n- b"

    @pytest.mark.asyncio
    async def test_empty_content(self, sample_transcript):
        llm = _llm_returning("   ")
        assert await SummaryService(llm).summarize(sample_transcript) == EMPTY_SUMMARY

    @pytest.mark.asyncio
    async def test_model_failure(self, sample_transcript):
        llm = MagicMock()
        llm.ainvoke = AsyncMock(side_effect=RuntimeError("quota exceeded"))
        assert await SummaryService(llm).summarize(sample_transcript) == FAILED_SUMMARY
