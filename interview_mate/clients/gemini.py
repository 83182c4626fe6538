"""Gemini API client for interview summaries."""

from __future__ import annotations

from typing import Any

import aiohttp
from structlog import get_logger

from interview_mate.core.config import settings

logger = get_logger()


class GeminiClient:
    """HTTP client for the Gemini generateContent endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout_seconds: int | None = None,
    ) -> None:
        """Initialize Gemini client, defaulting to values from settings."""
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.model = model or settings.gemini_model
        self.base_url = "https://generativelanguage.googleapis.com/v1beta"
        self.timeout = aiohttp.ClientTimeout(
            total=timeout_seconds or settings.gemini_timeout_seconds
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str) -> str:
        """
        Generate text for a single prompt.

        Args:
            prompt: Full prompt text

        Returns:
            Concatenated text of the first candidate (may be empty)

        Raises:
            aiohttp.ClientError: On request failure
        """
        url = f"{self.base_url}/models/{self.model}:generateContent"
        headers = {
            "x-goog-api-key": self.api_key or "",
            "Content-Type": "application/json",
        }
        body = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

        logger.info("gemini_api_request", model=self.model, prompt_chars=len(prompt))

        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            async with session.post(url, json=body, headers=headers) as response:
                response.raise_for_status()
                result: dict[str, Any] = await response.json()

        return extract_text(result)


def extract_text(result: dict[str, Any]) -> str:
    """Join the text parts of the first candidate in a generateContent response."""
    candidates = result.get("candidates") or []
    if not candidates:
        logger.warning(
            "gemini_no_candidates",
            block_reason=(result.get("promptFeedback") or {}).get("blockReason"),
        )
        return ""

    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(part.get("text", "") for part in parts)


# Module-level singleton
gemini_client = GeminiClient()
