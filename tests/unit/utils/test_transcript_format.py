"""Unit tests for transcript display and export formatting."""

from datetime import datetime

import pytest

from zestd.models import TranscriptItem
from zestd.utils.transcript_format import (
    format_timestamp,
    format_transcript_lines,
    build_export_text,
    export_filename,
    reveal_batches,
    transcript_text,
)


class TestFormatTimestamp:

    @pytest.mark.parametrize("seconds,expected", [
        (0, "00:00"),
        (1.5, "00:01"),
        (59.999, "00:59"),
        (65.4, "01:05"),
        (600, "10:00"),
        (3725, "62:05"),
    ])
    def test_mm_ss(self, seconds, expected):
        assert format_timestamp(seconds) == expected

    def test_matches_item_timestamp(self):
        item = TranscriptItem(start_time=125.2, text="x")
        assert item.timestamp == format_timestamp(item.start_time) == "02:05"


class TestExport:

    def test_lines(self, sample_transcript):
        assert format_transcript_lines(sample_transcript) == (
            "[00:00] Welcome back\n"
            "[01:05] Today we cover caching\n"
            "[62:05] Thanks for watching"
        )

    def test_lines_empty(self):
        assert format_transcript_lines([]) == ""

    def test_export_text_header(self, sample_transcript):
        text = build_export_text("abc123def45", sample_transcript, generated_at=datetime(2024, 3, 9, 14, 5, 7))
        assert text.startswith(
            "YouTube Video Transcript\n"
            "Video ID: abc123def45\n"
            "Generated: 2024-03-09 14:05:07\n\n"
            "[00:00] Welcome back\n"
        )
        assert text.endswith("[62:05] Thanks for watching")

    def test_export_filename(self):
        assert export_filename("dQw4w9WgXcQ") == "transcript_dQw4w9WgXcQ.txt"


class TestRevealBatches:

    def test_empty(self):
        assert reveal_batches([]) == []

    def test_fewer_items_than_steps(self, sample_transcript):
        batches = reveal_batches(sample_transcript, steps=15)
        assert batches == [[item] for item in sample_transcript]

    def test_batches_cover_all_items_in_order(self):
        items = [TranscriptItem(start_time=i, text=str(i)) for i in range(100)]
        batches = reveal_batches(items, steps=15)
        assert len(batches) <= 15
        assert [item for batch in batches for item in batch] == items
        assert len(batches[0]) == 7


class TestTranscriptText:

    def test_joins_with_spaces(self, sample_transcript):
        assert transcript_text(sample_transcript) == "Welcome back Today we cover caching Thanks for watching"

    def test_truncates_to_limit(self):
        items = [TranscriptItem(start_time=0, text="a" * 20000), TranscriptItem(start_time=1, text="b" * 20000)]
        text = transcript_text(items, limit=30000)
        assert len(text) == 30000
        assert text.startswith("a" * 20000 + " b")
