"""
Tutor domain: language profiles, prompt building, response normalization
and the service that ties them to the LLM gateway.
"""

from linguatutor.tutor.languages import (
    DEFAULT_LANGUAGE,
    LANGUAGE_PROFILES,
    LanguageProfile,
    SupportedLanguage,
    get_profile,
    list_supported_languages,
)
from linguatutor.tutor.models import (
    ChatResponse,
    ConversationTurn,
    SendMessageRequest,
    TurnData,
    TutorResponse,
)
from linguatutor.tutor.service import TutorService, TutorServiceError

__all__ = [
    "ChatResponse",
    "ConversationTurn",
    "DEFAULT_LANGUAGE",
    "LANGUAGE_PROFILES",
    "LanguageProfile",
    "SendMessageRequest",
    "SupportedLanguage",
    "TurnData",
    "TutorResponse",
    "TutorService",
    "TutorServiceError",
    "get_profile",
    "list_supported_languages",
]
