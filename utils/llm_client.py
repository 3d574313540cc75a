"""
Gemini LLM client that writes brand kits as JSON.
"""
from __future__ import annotations

from typing import Any, Dict

import google.generativeai as genai

from config.settings import settings
from utils.logger import get_logger

logger = get_logger(__name__)


class LLMClient:
    """Wrapper around a single Gemini model configured for JSON-only replies."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
        system_instruction: str | None = None,
    ):
        self.api_key = api_key or settings.GEMINI_API_KEY
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY is not set; cannot initialize LLM client.")

        genai.configure(api_key=self.api_key)

        self.model_name = model or settings.GEMINI_MODEL
        self.temperature = settings.GENERATION_TEMPERATURE if temperature is None else temperature
        self.timeout = settings.GENERATION_TIMEOUT if timeout is None else timeout
        self.generation_config: Dict[str, Any] = {
            "temperature": self.temperature,
            "response_mime_type": "application/json",
        }
        self.model = genai.GenerativeModel(
            model_name=self.model_name,
            system_instruction=system_instruction,
            generation_config=genai.types.GenerationConfig(**self.generation_config),
        )

    def generate(self, prompt: str) -> str:
        """Send one prompt and return the raw response text ("" when empty)."""
        logger.debug(
            "Calling %s (temperature=%s, timeout=%ss)", self.model_name, self.temperature, self.timeout
        )
        response = self.model.generate_content(
            prompt,
            request_options={"timeout": self.timeout},
        )
        return getattr(response, "text", "") or ""
