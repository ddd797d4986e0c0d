#!/usr/bin/env python3
"""
Zestd Streamlit App - paste a YouTube link, get its transcript and a short AI synopsis.

Run with:
    streamlit run zestd_streamlit.py
"""

import asyncio
import os
import sys

import streamlit as st

# Add the src directory to the path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), 'src')))

from zestd.core.config import config, validate_config
from zestd.core.exceptions import TranscriptError
from zestd.core.llm_manager import LLMManager
from zestd.models import ExtractionStatus
from zestd.services import FAILED_SUMMARY, SummaryService, TranscriptService
from zestd.ui import (
    StreamlitSessionManager,
    display_summary_panel,
    display_terminal_panel,
    reveal_transcript,
)
from zestd.utils.logging import setup_logger
from zestd.utils.youtube_utils import extract_video_id

logger = setup_logger("streamlit_app", log_level=config.logging.level)

NO_TRANSCRIPT_MESSAGE = "No transcript data found. This video may not have captions."

st.set_page_config(
    page_title=config.ui.page_title,
    page_icon=config.ui.page_icon,
    layout=config.ui.layout,
)


def run_summary(state) -> None:
    """Generate the synopsis for a completed transcript."""
    is_valid, missing = validate_config()
    if not is_valid:
        logger.warning(f"Skipping summary, missing configuration: {', '.join(missing)}")
        return

    st.session_state["is_summarizing"] = True
    with st.spinner("Generating synopsis..."):
        try:
            llm = LLMManager.from_config().get_langchain_llm()
        except Exception as e:
            logger.error(f"Could not create summary model: {e}")
            StreamlitSessionManager.set_summary(FAILED_SUMMARY)
            return
        summary = asyncio.run(SummaryService(llm).summarize(state.transcript))
    StreamlitSessionManager.set_summary(summary)


def handle_extract(url: str, placeholder) -> None:
    state = StreamlitSessionManager.get_state()
    video_id = extract_video_id(url)
    if not video_id:
        st.warning("Please provide a valid YouTube URL.")
        return

    StreamlitSessionManager.reset_summary()
    state.start(video_id)
    state.log(f"Resolved video ID {video_id}")

    try:
        with st.spinner("Extracting transcript..."):
            transcript = asyncio.run(TranscriptService().extract_transcript(video_id))
        if not transcript:
            raise TranscriptError(NO_TRANSCRIPT_MESSAGE)

        state.status = ExtractionStatus.PROCESSING
        state.log(f"Received {len(transcript)} cues")
        reveal_transcript(placeholder, transcript)

        state.transcript = transcript
        state.status = ExtractionStatus.COMPLETED
    except TranscriptError as e:
        logger.error(f"Extraction failed for {video_id}: {e}")
        state.log(str(e))
        state.fail(str(e) or "Failed to extract transcript.")
        return

    run_summary(state)


def main():
    StreamlitSessionManager.initialize_all()

    st.title("Instant YouTube Transcripts")
    st.caption("Supported: Youtube / Shorts / Live / Embeds")

    with st.form("extract_form"):
        url = st.text_input("Video link", placeholder="Insert video link...")
        submitted = st.form_submit_button(
            "Extract",
            disabled=StreamlitSessionManager.get_state().is_busy,
        )

    placeholder = st.empty()
    if submitted:
        handle_extract(url, placeholder)

    display_terminal_panel(StreamlitSessionManager.get_state(), placeholder)
    display_summary_panel(
        st.session_state.get("ai_summary"),
        st.session_state.get("is_summarizing", False),
    )


if __name__ == "__main__":
    main()
