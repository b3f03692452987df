"""Client utilities for the Gemini generateContent REST API."""

import logging
from typing import Any, Dict

import requests

from neptune_search.search.summary import SummaryServiceUnavailable

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


class GeminiError(SummaryServiceUnavailable):
    """Raised when Gemini cannot return usable text."""


def _extract_text(payload: Dict[str, Any]) -> str:
    candidates = payload.get("candidates") or []
    if not candidates:
        raise GeminiError("Gemini returned no candidates")
    parts = (candidates[0].get("content") or {}).get("parts") or []
    if not parts:
        raise GeminiError("Gemini returned no content parts")
    text = parts[0].get("text")
    if not isinstance(text, str):
        raise GeminiError("Gemini returned a non-text part")
    return text


class GeminiTextGenerator:
    """TextGenerator backed by Gemini. One attempt per call, no retries."""

    def __init__(self, api_key: str, model: str = "gemini-2.0-flash", timeout: float = 10.0) -> None:
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise GeminiError("Gemini API key not configured")

        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": 0.4, "maxOutputTokens": 400},
        }
        try:
            response = _SESSION.post(
                f"{_BASE_URL}/{self.model}:generateContent",
                params={"key": self.api_key},
                json=body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            logger.error("Gemini request failed: %s", exc)
            raise GeminiError(str(exc)) from exc
        except ValueError as exc:
            logger.error("Gemini returned invalid JSON: %s", exc)
            raise GeminiError("Gemini returned invalid JSON") from exc

        return _extract_text(payload)
