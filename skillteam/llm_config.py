"""Text-generation client for team analysis.

Wraps crewAI's ``LLM`` (LiteLLM underneath) so the analyzer only sees a
``generate_text`` call. Gemini is the default provider.
"""

from __future__ import annotations

import logging

from crewai import LLM

from skillteam.settings import AppSettings


logger = logging.getLogger(__name__)


class CrewAITextGenerator:
    """Calls a crewAI ``LLM`` built with the requested sampling parameters."""

    def __init__(self, model: str, api_key: str) -> None:
        if not api_key:
            raise ValueError("api_key is required")
        self.model = model
        self._api_key = api_key

    def generate_text(self, prompt: str, *, temperature: float, max_output_tokens: int) -> str:
        llm = LLM(
            model=self.model,
            api_key=self._api_key,
            temperature=temperature,
            max_tokens=max_output_tokens,
        )
        result = llm.call(prompt)
        if result is None:
            return ""
        return result if isinstance(result, str) else str(result)


def _normalize_gemini_model(model_name: str) -> str:
    return model_name if model_name.startswith("gemini/") else f"gemini/{model_name}"


def create_text_generator(settings: AppSettings) -> CrewAITextGenerator | None:
    """Create the analysis client if GEMINI_API_KEY is configured.

    Returns:
        CrewAITextGenerator or None if the credential is missing.
    """
    if not settings.gemini_api_key:
        logger.info("Analysis LLM not configured (missing GEMINI_API_KEY)")
        return None

    model = _normalize_gemini_model(settings.gemini_model_name)
    logger.info("Analysis LLM: model=%s", model)
    return CrewAITextGenerator(model=model, api_key=settings.gemini_api_key)
