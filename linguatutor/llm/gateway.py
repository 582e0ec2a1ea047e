"""
Resilient completion gateway with model fallback.

Given a prompt, the gateway tries a fixed, ordered list of models one at a
time. Rate-limited models are skipped in favour of the next one; any other
error aborts the request immediately. The index of the last model that
succeeded is remembered process-wide so the next request starts there
instead of re-trying models already known to be exhausted.

    start = cursor
    for i in 0..n-1:
        idx = (start + i) % n
        try model[idx]
            success      -> cursor = idx, return text
            rate limited -> remember, continue
            other error  -> raise it
    raise AllModelsRateLimitedError(last rate-limit error)

Attempts are strictly sequential. The cursor is a hint for which model to
try first, so a stale write from a concurrent request is harmless.
"""

from __future__ import annotations

import asyncio
from typing import Sequence

from litellm import RateLimitError

from linguatutor.config.logging import get_logger
from linguatutor.llm.base import TextGenerator
from linguatutor.llm.models import AllModelsRateLimitedError

logger = get_logger(__name__)

_RATE_LIMIT_MARKERS = (
    "429",
    "too many requests",
    "resource exhausted",
    "quota",
    "rate limit",
)


def is_rate_limit_error(error: BaseException) -> bool:
    """
    Decide whether a provider error means "this model is out of quota".

    LiteLLM maps most providers' 429 responses to RateLimitError; the
    message check covers providers and wrappers that don't.
    """
    if isinstance(error, RateLimitError):
        return True
    message = str(error).lower()
    return any(marker in message for marker in _RATE_LIMIT_MARKERS)


class ModelCursor:
    """Process-wide index of the model to try first. Starts at 0, never reset."""

    def __init__(self, size: int, start: int = 0):
        if size <= 0:
            raise ValueError("ModelCursor needs at least one model")
        if not 0 <= start < size:
            raise ValueError(f"Cursor start {start} out of range for {size} models")
        self._size = size
        self._index = start
        self._lock = asyncio.Lock()

    @property
    def size(self) -> int:
        return self._size

    async def get(self) -> int:
        async with self._lock:
            return self._index

    async def set(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise ValueError(f"Cursor index {index} out of range for {self._size} models")
        async with self._lock:
            self._index = index


class CompletionGateway:
    """
    Obtain raw model text for a prompt, rotating models on rate limits.

    Args:
        generator: Provider capability used for every attempt
        models: Ordered, non-empty list of model identifiers
        cursor: Shared cursor; a fresh one starting at 0 is created if omitted
    """

    def __init__(
        self,
        generator: TextGenerator,
        models: Sequence[str],
        cursor: ModelCursor | None = None,
    ):
        if not models:
            raise ValueError("CompletionGateway needs at least one model")
        self._generator = generator
        self._models = tuple(models)
        self._cursor = cursor or ModelCursor(len(self._models))
        if self._cursor.size != len(self._models):
            raise ValueError("Cursor size does not match the number of models")

    @property
    def models(self) -> tuple[str, ...]:
        return self._models

    @property
    def cursor(self) -> ModelCursor:
        return self._cursor

    async def generate(self, prompt: str) -> str:
        """
        Run the fallback loop for one prompt.

        Returns:
            Raw text from the first model that answered

        Raises:
            AllModelsRateLimitedError: Every model was rate limited
            Exception: The first non-rate-limit provider error, unchanged
        """
        count = len(self._models)
        start = await self._cursor.get()
        last_error: BaseException | None = None
        attempted: list[str] = []

        for offset in range(count):
            index = (start + offset) % count
            model = self._models[index]
            attempted.append(model)

            logger.info(f"Trying model: {model}")
            try:
                text = await self._generator.generate(model, prompt)
            except Exception as e:
                logger.warning(f"Model {model} failed: {e}")
                if not is_rate_limit_error(e):
                    raise
                last_error = e
                logger.info(f"Rate limit hit on {model}, trying next model...")
                continue

            await self._cursor.set(index)
            logger.info(f"Successfully got response from model: {model}")
            return text

        logger.error("All models exhausted")
        raise AllModelsRateLimitedError(attempted, last_error)
