"""
Configuration for the Zestd transcript extractor.
All tunable values are centralized here and can be overridden via environment variables.
"""

import os
import json
from pathlib import Path
from typing import Dict, List, Any, Tuple, Optional
from dataclasses import dataclass, field
from dotenv import load_dotenv
import logging

# Load environment variables from .env file
env_path = Path('.env')
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def _parse_list_env(env_var: str, default: List[str]) -> List[str]:
    """Parse a comma-separated environment variable into a list."""
    value = os.getenv(env_var)
    if value:
        return [item.strip() for item in value.split(',') if item.strip()]
    return default

def _parse_json_env(env_var: str, default: Dict[str, Any]) -> Dict[str, Any]:
    """Parse a JSON environment variable into a dictionary."""
    value = os.getenv(env_var)
    if value:
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            logging.warning(f"Invalid JSON in environment variable {env_var}, using default")
    return default

# =============================================================================
# CORE APPLICATION SETTINGS
# =============================================================================

@dataclass
class AppConfig:
    """Core application configuration."""
    version: str = field(default_factory=lambda: os.getenv('APP_VERSION', '0.1.0'))
    debug: bool = field(default_factory=lambda: os.getenv('DEBUG', 'false').lower() == 'true')
    environment: str = field(default_factory=lambda: os.getenv('ENVIRONMENT', 'development'))

@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO'))
    format: str = field(default_factory=lambda: os.getenv('LOG_FORMAT', '%(asctime)s [%(name)s] %(levelname)s: %(message)s'))
    date_format: str = field(default_factory=lambda: os.getenv('LOG_DATE_FORMAT', '%Y-%m-%d %H:%M:%S'))

# =============================================================================
# NETWORK CONFIGURATION
# =============================================================================

@dataclass
class NetworkConfig:
    """Proxy and timeout configuration."""
    # Read-through proxy used for every outbound fetch
    proxy_base_url: str = field(default_factory=lambda: os.getenv('PROXY_BASE_URL', 'https://api.allorigins.win/raw'))

    # HTTP timeouts (seconds, per fetch)
    http_timeout_total: int = field(default_factory=lambda: int(os.getenv('HTTP_TIMEOUT_TOTAL', '20')))
    http_timeout_connect: int = field(default_factory=lambda: int(os.getenv('HTTP_TIMEOUT_CONNECT', '10')))

    user_agent: str = field(default_factory=lambda: os.getenv(
        'HTTP_USER_AGENT',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124 Safari/537.36'
    ))

# =============================================================================
# EXTRACTION CONFIGURATION
# =============================================================================

@dataclass
class ExtractionConfig:
    """Caption extraction settings."""
    # Languages probed, in order, by the direct timedtext fallback
    fallback_languages: List[str] = field(default_factory=lambda: _parse_list_env('FALLBACK_LANGUAGES', [
        'en', 'en-US', 'en-GB', 'de', 'es', 'fr'
    ]))

    # Transcript characters sent to the summary model
    summary_max_chars: int = field(default_factory=lambda: int(os.getenv('SUMMARY_MAX_CHARS', '30000')))

# =============================================================================
# LLM CONFIGURATION
# =============================================================================

@dataclass
class LLMConfig:
    """Summary model settings."""
    default_model: str = field(default_factory=lambda: os.getenv('SUMMARY_MODEL', 'gemini-3-flash-preview'))
    default_temperature: float = field(default_factory=lambda: float(os.getenv('SUMMARY_TEMPERATURE', '0.2')))
    default_timeout: int = field(default_factory=lambda: int(os.getenv('SUMMARY_TIMEOUT', '60')))

    model_descriptions: Dict[str, str] = field(default_factory=lambda: _parse_json_env('SUMMARY_MODEL_DESCRIPTIONS', {
        'gemini-3-flash-preview': 'Fast technical synopsis',
        'gemini-2.0-flash': 'Balanced performance and quality',
        'gpt-4o-mini': 'Fast, cost-effective for most summaries',
    }))

# =============================================================================
# API CONFIGURATION
# =============================================================================

@dataclass
class APIConfig:
    """External API credentials."""
    gemini_api_key: Optional[str] = field(
        default_factory=lambda: os.getenv('GEMINI_API_KEY') or os.getenv('GOOGLE_API_KEY') or os.getenv('API_KEY')
    )
    openai_api_key: Optional[str] = field(default_factory=lambda: os.getenv('OPENAI_API_KEY'))

# =============================================================================
# UI CONFIGURATION
# =============================================================================

@dataclass
class UIConfig:
    """User interface configuration."""
    page_title: str = field(default_factory=lambda: os.getenv('UI_PAGE_TITLE', 'Zestd | Instant YouTube Transcripts'))
    page_icon: str = field(default_factory=lambda: os.getenv('UI_PAGE_ICON', ':material/terminal:'))
    layout: str = field(default_factory=lambda: os.getenv('UI_LAYOUT', 'centered'))

    # Typewriter reveal
    reveal_steps: int = field(default_factory=lambda: int(os.getenv('UI_REVEAL_STEPS', '15')))
    reveal_delay: float = field(default_factory=lambda: float(os.getenv('UI_REVEAL_DELAY', '0.08')))

# =============================================================================
# MAIN CONFIGURATION CLASS
# =============================================================================

@dataclass
class Config:
    """Main configuration class that aggregates all configuration sections."""
    app: AppConfig = field(default_factory=AppConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    llm: LLMConfig = field(default_factory=LLMConfig)
    api: APIConfig = field(default_factory=APIConfig)
    ui: UIConfig = field(default_factory=UIConfig)

# =============================================================================
# GLOBAL CONFIGURATION INSTANCE
# =============================================================================

config = Config()

# =============================================================================
# CONFIGURATION VALIDATION
# =============================================================================

def get_summary_api_key(cfg: Optional[Config] = None) -> Optional[str]:
    """Return the credential matching the configured summary model."""
    cfg = cfg or config
    if cfg.llm.default_model.startswith("gpt"):
        return cfg.api.openai_api_key
    return cfg.api.gemini_api_key

def validate_config(cfg: Optional[Config] = None) -> Tuple[bool, List[str]]:
    """
    Validate that required configuration variables are set.

    Only the AI summary needs a credential; transcript extraction is
    unauthenticated.

    Returns:
        Tuple of (is_valid, missing_vars)
    """
    cfg = cfg or config
    missing_vars = []

    if not cfg.network.proxy_base_url:
        missing_vars.append('PROXY_BASE_URL')

    if not get_summary_api_key(cfg):
        if cfg.llm.default_model.startswith("gpt"):
            missing_vars.append('OPENAI_API_KEY')
        else:
            missing_vars.append('GEMINI_API_KEY (or GOOGLE_API_KEY / API_KEY)')

    return len(missing_vars) == 0, missing_vars

def get_model_description(model_name: str) -> str:
    """Get the description for a model."""
    return config.llm.model_descriptions.get(model_name, "AI Language Model")
