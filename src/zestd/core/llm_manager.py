"""LLM construction for the summary collaborator."""

from typing import Any, Dict, Optional
from dataclasses import dataclass

from langchain_openai import ChatOpenAI
from langchain_google_genai import ChatGoogleGenerativeAI

from ..utils.logging import get_logger
from .config import Config, config as default_config, get_summary_api_key

logger = get_logger("llm_manager")


@dataclass
class LLMSettings:
    """Settings for one chat model instance."""
    model: str
    api_key: Optional[str] = None
    temperature: float = 0.2
    timeout: int = 60


class LLMManager:
    """
    Builds LangChain chat models from explicit settings.

    The credential is a constructor argument; nothing is read from the
    process environment here.
    """

    def __init__(self, settings: LLMSettings):
        self.settings = settings
        self._llm_cache: Dict[str, Any] = {}

    @classmethod
    def from_config(cls, cfg: Optional[Config] = None) -> "LLMManager":
        cfg = cfg or default_config
        return cls(LLMSettings(
            model=cfg.llm.default_model,
            api_key=get_summary_api_key(cfg),
            temperature=cfg.llm.default_temperature,
            timeout=cfg.llm.default_timeout
        ))

    def _get_cache_key(self) -> str:
        return f"{self.settings.model}_{self.settings.temperature}"

    def get_langchain_llm(self) -> Any:
        """Get (and memoize) the chat model for the configured model name."""
        cache_key = self._get_cache_key()
        if cache_key in self._llm_cache:
            return self._llm_cache[cache_key]

        settings = self.settings
        if not settings.api_key:
            raise ValueError(f"No API key configured for summary model {settings.model}")

        logger.info(f"Creating LangChain LLM: {settings.model} (temp: {settings.temperature})")

        if settings.model.startswith("gemini"):
            llm = ChatGoogleGenerativeAI(
                model=settings.model,
                temperature=settings.temperature,
                timeout=settings.timeout,
                google_api_key=settings.api_key
            )
        elif settings.model.startswith("gpt"):
            llm = ChatOpenAI(
                model=settings.model,
                temperature=settings.temperature,
                timeout=settings.timeout,
                api_key=settings.api_key
            )
        else:
            raise ValueError(f"Unsupported summary model: {settings.model}")

        self._llm_cache[cache_key] = llm
        return llm
