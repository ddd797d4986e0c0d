"""Streamlit rendering components for the extraction page."""

import time
from typing import List, Optional

import streamlit as st

from ..core.config import config
from ..models import ExtractionState, ExtractionStatus, TranscriptItem
from ..utils.transcript_format import (
    build_export_text,
    export_filename,
    format_transcript_lines,
    reveal_batches,
)

STATUS_LABELS = {
    ExtractionStatus.IDLE: "Idle",
    ExtractionStatus.LOADING: "Fetching",
    ExtractionStatus.PROCESSING: "Parsing",
    ExtractionStatus.COMPLETED: "Completed",
    ExtractionStatus.ERROR: "Error",
}


def reveal_transcript(placeholder, items: List[TranscriptItem]) -> None:
    """Typewriter-style reveal: render the transcript batch by batch."""
    shown: List[TranscriptItem] = []
    for batch in reveal_batches(items, steps=config.ui.reveal_steps):
        shown.extend(batch)
        placeholder.code(format_transcript_lines(shown), language=None)
        time.sleep(config.ui.reveal_delay)


def display_terminal_panel(state: ExtractionState, placeholder=None) -> None:
    """Render the transcript panel with status, logs and export actions."""
    header_cols = st.columns([3, 1])
    with header_cols[0]:
        st.markdown("**Transcript Output**")
    with header_cols[1]:
        if state.video_id:
            st.caption(f"ID: {state.video_id} | {STATUS_LABELS[state.status]}")

    if state.logs:
        with st.expander("Extraction log", expanded=state.status == ExtractionStatus.ERROR):
            for line in state.logs:
                st.text(line)

    if state.status == ExtractionStatus.ERROR and state.error:
        st.error(state.error)
        return

    target = placeholder or st.empty()
    if state.transcript:
        target.code(format_transcript_lines(state.transcript), language=None)

    if state.is_completed:
        st.download_button(
            "Download .txt",
            data=build_export_text(state.video_id, state.transcript),
            file_name=export_filename(state.video_id),
            mime="text/plain",
        )


def display_summary_panel(summary: Optional[str], is_summarizing: bool) -> None:
    """Render the AI synopsis panel."""
    if not summary and not is_summarizing:
        return
    st.subheader("AI Content Synopsis")
    if is_summarizing:
        st.info("Generating synopsis...")
    else:
        st.markdown(summary)
