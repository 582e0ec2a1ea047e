"""
Base class for text generators.

A TextGenerator is the only thing the gateway knows about a provider:
given a model identifier and a prompt, produce text or raise.
"""

from abc import ABC, abstractmethod


class TextGenerator(ABC):
    """
    Abstract "generate text from prompt" capability.

    Implementations wrap a concrete provider SDK. Errors are raised as-is;
    classifying them (rate limit or not) is the gateway's job.
    """

    @abstractmethod
    async def generate(self, model: str, prompt: str) -> str:
        """
        Generate a completion for a single prompt.

        Args:
            model: Provider model identifier, e.g. "gemini/gemini-2.5-flash"
            prompt: Full prompt text

        Returns:
            The raw text produced by the model

        Raises:
            Exception: Any provider error, unmodified
        """
        pass
