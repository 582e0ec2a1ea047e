"""
Exception types for the LLM layer.

The gateway only ever raises two kinds of error of its own:
ConfigurationError at construction time and AllModelsRateLimitedError when
every candidate model refused the request. Any other provider error is
propagated unchanged so the caller sees the exact failure.
"""

from __future__ import annotations


class LLMError(Exception):
    """Base class for errors raised by the LLM layer."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class ConfigurationError(LLMError):
    """Provider credentials or model list are missing. Fatal at startup."""


class AllModelsRateLimitedError(LLMError):
    """
    Every candidate model failed with a rate-limit error.

    Attributes:
        models: The model identifiers that were tried, in attempt order
        last_error: The rate-limit error from the final attempt
    """

    def __init__(self, models: list[str], last_error: BaseException | None):
        detail = f": {last_error}" if last_error is not None else ""
        super().__init__(f"All models are rate limited ({', '.join(models)}){detail}", cause=last_error)
        self.models = models
        self.last_error = last_error
