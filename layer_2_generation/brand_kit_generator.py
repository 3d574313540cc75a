"""
Brand kit generation: one AI attempt, validated, with a deterministic fallback

The policy for when to fall back lives in BrandKitGenerator.generate and
nowhere else:
- no API key configured  -> fallback, no network access at all
- backend error/timeout  -> fallback
- unparseable JSON       -> fallback
- fails the kit gate     -> fallback
There is no retry.
"""
import json
import math
import re
from typing import Any, Optional

from config.settings import Settings, settings as default_settings
from layer_2_generation.fallback import fallback_brand_kit
from layer_2_generation.kit_validator import is_valid_brand_kit
from layer_2_generation.prompt_builder import SYSTEM_PROMPT, build_brand_kit_prompt
from models.brand_kit import BrandKit
from models.intake import Intake
from utils.llm_client import LLMClient
from utils.logger import get_logger

logger = get_logger(__name__)

SOURCE_AI = "ai"
SOURCE_FALLBACK = "fallback"

_FENCED_JSON = re.compile(r'```(?:json)?\s*(.*?)\s*```', re.DOTALL)


def _reject_constant(name: str):
    # NaN/Infinity cannot be sent back to the caller as JSON
    raise ValueError(f"Non-finite number in brand kit JSON: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"Out of range number in brand kit JSON: {text}")
    return value


def parse_generation_response(raw_response: Optional[str]) -> Optional[Any]:
    """
    Parse the model's reply as JSON

    Markdown code fences are stripped first. An empty reply parses as an
    empty object (which the kit gate then rejects).

    Args:
        raw_response: Raw text returned by the model

    Returns:
        The parsed value, or None if the text is not valid JSON, nests too
        deeply, or holds NaN/Infinity/out-of-range numbers
    """
    cleaned = (raw_response or "").strip()

    if "```" in cleaned:
        fenced = _FENCED_JSON.search(cleaned)
        if fenced:
            cleaned = fenced.group(1).strip()

    if not cleaned:
        cleaned = "{}"

    try:
        return json.loads(cleaned, parse_constant=_reject_constant, parse_float=_finite_float)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Failed to parse brand kit JSON: {e}")
        return None


class BrandKitGenerator:
    """Produce a brand kit for an intake, always returning a valid one"""

    def __init__(self, settings: Optional[Settings] = None, llm_client: Optional[LLMClient] = None):
        """
        Initialize brand kit generator

        Args:
            settings: Configuration (uses the global settings if not provided)
            llm_client: LLM client instance (created on first AI attempt if not provided)
        """
        self.settings = settings or default_settings
        self.llm_client = llm_client
        self.last_source: Optional[str] = None

    def _get_client(self) -> LLMClient:
        if self.llm_client is None:
            self.llm_client = LLMClient(
                api_key=self.settings.GEMINI_API_KEY,
                model=self.settings.GEMINI_MODEL,
                temperature=self.settings.GENERATION_TEMPERATURE,
                timeout=self.settings.GENERATION_TIMEOUT,
                system_instruction=SYSTEM_PROMPT,
            )
        return self.llm_client

    def attempt_generation(self, intake: Intake) -> Optional[Any]:
        """
        Ask the model for a brand kit, once

        Args:
            intake: Normalized intake

        Returns:
            Parsed JSON from the model, or None if the call or parsing failed
        """
        prompt = build_brand_kit_prompt(intake)

        try:
            raw_response = self._get_client().generate(prompt)
        except Exception as e:
            logger.warning(f"Brand kit generation failed, using fallback: {e}", exc_info=True)
            return None

        return parse_generation_response(raw_response)

    def generate(self, intake: Intake) -> BrandKit:
        """
        Generate the brand kit for an intake

        Args:
            intake: Normalized intake

        Returns:
            A brand kit that passes is_valid_brand_kit
        """
        if not self.settings.has_generation_credential:
            logger.info("No GEMINI_API_KEY configured; using fallback brand kit")
            return self._fallback(intake)

        logger.info(f"Generating brand kit with {self.settings.GEMINI_MODEL}")
        candidate = self.attempt_generation(intake)

        if not is_valid_brand_kit(candidate):
            if candidate is not None:
                logger.warning("Generated brand kit failed validation (needs 5+ taglines); using fallback")
            return self._fallback(intake)

        self.last_source = SOURCE_AI
        logger.info("Using AI-generated brand kit")
        return dict(candidate)

    def _fallback(self, intake: Intake) -> BrandKit:
        self.last_source = SOURCE_FALLBACK
        return fallback_brand_kit(intake)
