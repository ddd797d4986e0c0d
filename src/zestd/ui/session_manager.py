"""
Streamlit session state management for the extraction page.
"""

import streamlit as st

from ..models import ExtractionState
from ..utils.logging import get_logger

logger = get_logger("session_manager")


class StreamlitSessionManager:
    """Keeps one ExtractionState and the summary panel state per browser session."""

    @staticmethod
    def initialize_all():
        """Initialize all session state variables."""
        defaults = {
            "extraction_state": ExtractionState(),
            "ai_summary": None,
            "is_summarizing": False,
        }
        for key, default_value in defaults.items():
            if key not in st.session_state:
                st.session_state[key] = default_value

    @staticmethod
    def get_state() -> ExtractionState:
        if "extraction_state" not in st.session_state:
            st.session_state["extraction_state"] = ExtractionState()
        return st.session_state["extraction_state"]

    @staticmethod
    def reset_summary():
        st.session_state["ai_summary"] = None
        st.session_state["is_summarizing"] = False

    @staticmethod
    def set_summary(summary: str):
        st.session_state["ai_summary"] = summary
        st.session_state["is_summarizing"] = False
