"""Unit tests for Streamlit session state handling."""

from unittest.mock import MagicMock, patch

from zestd.models import ExtractionState
from zestd.ui.session_manager import StreamlitSessionManager


@patch("zestd.ui.session_manager.st")
def test_initialize_all_sets_defaults(mock_st):
    mock_st.session_state = {}

    StreamlitSessionManager.initialize_all()

    assert set(mock_st.session_state) == {"extraction_state", "ai_summary", "is_summarizing"}
    assert isinstance(mock_st.session_state["extraction_state"], ExtractionState)


@patch("zestd.ui.session_manager.st")
def test_initialize_all_keeps_existing_state(mock_st):
    state = ExtractionState(video_id="dQw4w9WgXcQ")
    mock_st.session_state = {"extraction_state": state, "ai_summary": "- done"}

    StreamlitSessionManager.initialize_all()

    assert StreamlitSessionManager.get_state() is state
    assert mock_st.session_state["ai_summary"] == "- done"


@patch("zestd.ui.session_manager.st")
def test_set_summary_clears_busy_flag(mock_st):
    mock_st.session_state = {"is_summarizing": True}
    StreamlitSessionManager.set_summary("- a")
    assert mock_st.session_state == {"ai_summary": "- a", "is_summarizing": False}
