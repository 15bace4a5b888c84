"""
Gemini LLM client used by the optional content provider.
"""
from __future__ import annotations

import json
import re
from typing import Any, Dict

import google.generativeai as genai

from config.settings import settings
from utils.logger import get_logger

logger = get_logger(__name__)


class LLMClient:
    """Thin wrapper around Gemini text generation."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        generation_config: Dict[str, Any] | None = None,
        request_timeout: float | None = None,
    ):
        self.api_key = api_key or settings.GEMINI_API_KEY
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY is not set; cannot initialize LLM client.")

        genai.configure(api_key=self.api_key)

        self.model_name = model or settings.GEMINI_MODEL
        self.generation_config = generation_config or {
            "temperature": settings.LLM_TEMPERATURE,
            "top_p": 0.9,
            "top_k": 40,
            "response_mime_type": "application/json",
        }
        self.request_timeout = request_timeout or settings.PROVIDER_TIMEOUT_SECONDS
        self.model = genai.GenerativeModel(
            model_name=self.model_name,
            generation_config=genai.types.GenerationConfig(**self.generation_config),
        )

    def generate(self, prompt: str) -> str:
        """Generate raw text from the Gemini model."""
        response = self.model.generate_content(
            prompt,
            request_options={"timeout": self.request_timeout},
        )
        return getattr(response, "text", "") or ""

    def generate_json(self, prompt: str) -> Dict[str, Any]:
        """Generate text and parse it as a JSON object."""
        return safe_json_object(self.generate(prompt))


def safe_json_object(text: str) -> Dict[str, Any]:
    """
    Best-effort JSON parsing that ignores Markdown fences

    Args:
        text: Raw model output

    Returns:
        Parsed JSON object

    Raises:
        ValueError: If no JSON object can be parsed from the text
    """
    cleaned = text.strip()

    # Remove markdown code blocks if present
    if "```" in cleaned:
        json_match = re.search(r'```(?:json)?\s*(\{.*\})\s*```', cleaned, re.DOTALL)
        if json_match:
            cleaned = json_match.group(1)
        else:
            json_match = re.search(r'(\{.*\})', cleaned, re.DOTALL)
            if json_match:
                cleaned = json_match.group(1)

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.debug(f"Failed to parse JSON payload of {len(cleaned)} chars")
        raise ValueError(f"Model response is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data
