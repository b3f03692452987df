"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when an environment value cannot be parsed."""


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    gemini_timeout: float = 10.0
    port: int = 8080
    log_level: str = "INFO"


def _parse_number(name: str, default: str, cast):
    raw = os.getenv(name) or default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be numeric, got {raw!r}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    gemini_api_key = os.getenv("GEMINI_API_KEY", "").strip()
    gemini_model = os.getenv("GEMINI_MODEL") or "gemini-2.0-flash"
    gemini_timeout = _parse_number("GEMINI_TIMEOUT", "10", float)
    port = _parse_number("PORT", "8080", int)
    log_level = (os.getenv("LOG_LEVEL") or "INFO").upper()

    if not gemini_api_key:
        logger.warning("GEMINI_API_KEY is not configured; summaries will use the built-in fallback.")

    return Settings(
        gemini_api_key=gemini_api_key,
        gemini_model=gemini_model,
        gemini_timeout=gemini_timeout,
        port=port,
        log_level=log_level,
    )
