"""Unit tests for summary model construction."""

from unittest.mock import patch

import pytest

from zestd.core.config import Config
from zestd.core.llm_manager import LLMManager, LLMSettings


class TestGetLangchainLLM:

    @patch("zestd.core.llm_manager.ChatGoogleGenerativeAI")
    def test_gemini_model(self, mock_gemini):
        manager = LLMManager(LLMSettings(model="gemini-3-flash-preview", api_key="key-123"))

        llm = manager.get_langchain_llm()

        assert llm is mock_gemini.return_value
        mock_gemini.assert_called_once_with(
            model="gemini-3-flash-preview",
            temperature=0.2,
            timeout=60,
            google_api_key="key-123"
        )

    @patch("zestd.core.llm_manager.ChatOpenAI")
    def test_openai_model(self, mock_openai):
        manager = LLMManager(LLMSettings(model="gpt-4o-mini", api_key="sk-test", temperature=0.5))

        manager.get_langchain_llm()

        kwargs = mock_openai.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["api_key"] == "sk-test"
        assert kwargs["temperature"] == 0.5

    @patch("zestd.core.llm_manager.ChatGoogleGenerativeAI")
    def test_memoized(self, mock_gemini):
        manager = LLMManager(LLMSettings(model="gemini-2.0-flash", api_key="k"))
        assert manager.get_langchain_llm() is manager.get_langchain_llm()
        assert mock_gemini.call_count == 1

    def test_missing_key(self):
        with pytest.raises(ValueError, match="No API key"):
            LLMManager(LLMSettings(model="gemini-2.0-flash")).get_langchain_llm()

    def test_unsupported_model(self):
        with pytest.raises(ValueError, match="Unsupported"):
            LLMManager(LLMSettings(model="llama-3", api_key="k")).get_langchain_llm()


class TestFromConfig:

    def test_uses_gemini_key_for_gemini_model(self):
        cfg = Config()
        cfg.llm.default_model = "gemini-3-flash-preview"
        cfg.api.gemini_api_key = "g-key"
        cfg.api.openai_api_key = "o-key"

        manager = LLMManager.from_config(cfg)

        assert manager.settings.api_key == "g-key"
        assert manager.settings.model == "gemini-3-flash-preview"

    def test_uses_openai_key_for_gpt_model(self):
        cfg = Config()
        cfg.llm.default_model = "gpt-4o-mini"
        cfg.api.openai_api_key = "o-key"
        assert LLMManager.from_config(cfg).settings.api_key == "o-key"
