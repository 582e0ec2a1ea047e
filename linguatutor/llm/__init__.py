"""
LLM access layer.

Wraps the model provider behind a single "generate text" capability and
adds rate-limit fallback across an ordered list of models:

    prompt → CompletionGateway.generate()
                  ↓  (one model at a time, starting at the shared cursor)
             TextGenerator.generate(model, prompt)  ←  LiteLLM acompletion()
                  ↓
              raw text → tutor normalizer
"""

from linguatutor.llm.base import TextGenerator
from linguatutor.llm.gateway import CompletionGateway, ModelCursor, is_rate_limit_error
from linguatutor.llm.models import AllModelsRateLimitedError, ConfigurationError, LLMError
from linguatutor.llm.providers import LiteLLMGenerator

__all__ = [
    "AllModelsRateLimitedError",
    "CompletionGateway",
    "ConfigurationError",
    "LiteLLMGenerator",
    "LLMError",
    "ModelCursor",
    "TextGenerator",
    "is_rate_limit_error",
]
