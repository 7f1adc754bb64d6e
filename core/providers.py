"""Text generation provider interface and implementations."""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod

from core.config import DEFAULT_MODEL

logger = logging.getLogger(__name__)


class UpstreamError(RuntimeError):
    """The external model service failed to produce a response."""


def resolve_api_key(explicit: str | None, *env_names: str) -> str:
    """Return the explicit key if set, else the first non-empty env variable."""
    if explicit and explicit.strip():
        return explicit.strip()
    for name in env_names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


class TextGenerator(ABC):
    """Base interface for text generation providers."""

    provider_name: str = "base"

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Return the model's text for ``prompt``; raise UpstreamError on failure."""
        ...


class GeminiTextGenerator(TextGenerator):
    """Google Gemini provider backed by the google-genai async client."""

    provider_name = "gemini"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float = 0.9,
        max_output_tokens: int = 8192,
    ) -> None:
        self.api_key = resolve_api_key(api_key, "GEMINI_API_KEY", "GOOGLE_API_KEY")
        self.model = model or DEFAULT_MODEL
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self._client = None
        if not self.api_key:
            raise ValueError(
                "Gemini API key is required. Set GEMINI_API_KEY or GOOGLE_API_KEY."
            )

    def _get_client(self):
        if self._client is None:
            from google import genai
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str) -> str:
        logger.info("Generating text via Gemini model=%s", self.model)

        try:
            client = self._get_client()
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config={
                    "temperature": self.temperature,
                    "max_output_tokens": self.max_output_tokens,
                },
            )
        except Exception as e:
            raise UpstreamError(f"Gemini request failed: {e}") from e

        # .text is None when the candidate was blocked or carried no text parts
        return response.text or ""


def get_generator(name: str = "gemini", **kwargs) -> TextGenerator:
    """Factory function to get a text generator by name."""
    generators: dict[str, type[TextGenerator]] = {
        "gemini": GeminiTextGenerator,
    }
    if name not in generators:
        raise ValueError(f"Unknown provider: {name}. Available: {list(generators.keys())}")
    return generators[name](**kwargs)
