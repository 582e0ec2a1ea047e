"""
Tutor service: one learner utterance in, one structured answer out.

Data flow:
    message + history + language → build_prompt()
                                         ↓
                          CompletionGateway.generate()  (model fallback)
                                         ↓
                          normalize_response() → ChatResponse

Provider errors are caught here and re-classified into TutorServiceError
with a stable message, an HTTP-style status code and a retryable flag.
Stack traces go to the log, never to the caller.
"""

from __future__ import annotations

from typing import Sequence

from linguatutor.config.logging import get_logger
from linguatutor.config.settings import LLMSettings
from linguatutor.llm.gateway import CompletionGateway, is_rate_limit_error
from linguatutor.llm.models import AllModelsRateLimitedError
from linguatutor.llm.providers import LiteLLMGenerator
from linguatutor.tutor.languages import DEFAULT_LANGUAGE, SupportedLanguage
from linguatutor.tutor.models import ChatResponse, ConversationTurn
from linguatutor.tutor.normalizer import normalize_response
from linguatutor.tutor.prompts import build_prompt

logger = get_logger(__name__)

RATE_LIMITED_MESSAGE = "All AI models are currently rate limited. Please try again later."
INVALID_API_KEY_MESSAGE = "Invalid API key configuration"


class TutorServiceError(Exception):
    """
    User-facing failure of a tutor request.

    Attributes:
        message: Stable, human-readable description
        status_code: HTTP status the API layer should answer with
        retryable: True when retrying later may succeed (rate limiting)
    """

    def __init__(self, message: str, status_code: int = 500, retryable: bool = False):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.retryable = retryable

    def to_dict(self) -> dict:
        return {
            "statusCode": self.status_code,
            "message": self.message,
            "retryable": self.retryable,
        }


def classify_error(error: BaseException) -> TutorServiceError:
    """Map a provider or gateway exception onto the user-facing taxonomy."""
    message = str(error) or "Unknown error"
    if "API_KEY" in message:
        return TutorServiceError(INVALID_API_KEY_MESSAGE, status_code=500)
    if isinstance(error, AllModelsRateLimitedError) or is_rate_limit_error(error):
        return TutorServiceError(RATE_LIMITED_MESSAGE, status_code=429, retryable=True)
    return TutorServiceError(f"Failed to get AI response: {message}", status_code=500)


class TutorService:
    """
    Answers learner utterances through a CompletionGateway.

    Stateless per call: the caller sends the full history every time.

    Args:
        gateway: Gateway used for every model call
    """

    def __init__(self, gateway: CompletionGateway):
        self._gateway = gateway

    @classmethod
    def from_settings(cls, settings: LLMSettings) -> TutorService:
        """
        Build a service backed by LiteLLM.

        Raises:
            ConfigurationError: If the API key is missing
        """
        generator = LiteLLMGenerator(settings)
        return cls(CompletionGateway(generator, settings.models))

    @property
    def gateway(self) -> CompletionGateway:
        return self._gateway

    async def send_message(
        self,
        message: str,
        chat_history: Sequence[ConversationTurn] | None = None,
        target_language: SupportedLanguage | str = DEFAULT_LANGUAGE,
    ) -> ChatResponse:
        """
        Get a structured tutor response for one utterance.

        Args:
            message: The learner's utterance
            chat_history: Earlier turns, oldest first (only the last 10 are used)
            target_language: Language being practised; defaults to English

        Returns:
            ChatResponse, parsed from the model or degraded to a plain reply

        Raises:
            TutorServiceError: When no model produced an answer
        """
        prompt = build_prompt(target_language, chat_history or [], message)
        logger.debug(f"Sending message to model: {message[:50]}...")

        try:
            text = await self._gateway.generate(prompt)
        except Exception as e:
            logger.error(f"Error calling model provider: {e}", exc_info=True)
            raise classify_error(e) from e

        return normalize_response(text, message)
