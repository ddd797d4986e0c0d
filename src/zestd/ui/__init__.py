"""Streamlit UI components for Zestd."""

from .session_manager import StreamlitSessionManager
from .components import display_terminal_panel, display_summary_panel, reveal_transcript

__all__ = [
    "StreamlitSessionManager",
    "display_terminal_panel",
    "display_summary_panel",
    "reveal_transcript",
]
