"""
LiteLLM-backed TextGenerator.

LiteLLM routes the request by the model string's provider prefix
("gemini/...", "openai/...", "anthropic/..."), so switching providers is a
configuration change only.
"""

from __future__ import annotations

from litellm import acompletion

from linguatutor.config.logging import get_logger
from linguatutor.config.settings import LLMSettings
from linguatutor.llm.base import TextGenerator
from linguatutor.llm.models import ConfigurationError

logger = get_logger(__name__)


class LiteLLMGenerator(TextGenerator):
    """
    Send single-prompt completions through LiteLLM.

    Args:
        settings: LLM configuration (api_key, temperature, max_tokens, timeout)

    Raises:
        ConfigurationError: If no API key is configured
    """

    def __init__(self, settings: LLMSettings):
        if not settings.api_key:
            logger.error("LLM API key is not configured")
            raise ConfigurationError(
                "API key not configured. Set GEMINI_API_KEY (or LLM_API_KEY) in your environment."
            )
        self._settings = settings
        logger.info("LiteLLM client initialized successfully")

    async def generate(self, model: str, prompt: str) -> str:
        response = await acompletion(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self._settings.temperature,
            max_tokens=self._settings.max_tokens,
            api_key=self._settings.api_key,
            timeout=self._settings.timeout,
        )
        return response.choices[0].message.content or ""
