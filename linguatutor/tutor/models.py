"""
Request and response models for the tutor API.

Field names are snake_case in Python and camelCase on the wire
(``correctionPronunciation``, ``chatHistory``, ``targetLanguage``).
Dump with ``by_alias=True`` when serializing for clients.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from linguatutor.tutor.languages import DEFAULT_LANGUAGE, SupportedLanguage

_WIRE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TurnData(BaseModel):
    """Structured payload of an earlier assistant turn, as echoed back by the client."""

    original: str | None = None
    correction: str | None = None
    correction_pronunciation: str | None = None
    explanation: str | None = None
    reply: str | None = None
    pronunciation: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ConversationTurn(BaseModel):
    """One turn of the conversation history. Read-only input, never stored."""

    role: Literal["user", "assistant"]
    content: str
    data: TurnData | None = None

    model_config = _WIRE_CONFIG


class TutorResponse(BaseModel):
    """
    Normalized tutor answer.

    Every field is a plain string. Missing or null values from the model
    become ``""``; other scalars are stringified.
    """

    original: str = ""
    correction: str = ""
    correction_pronunciation: str = ""
    explanation: str = ""
    reply: str = ""
    pronunciation: str = ""

    model_config = _WIRE_CONFIG

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_to_string(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return str(value)


class ChatResponse(BaseModel):
    """Envelope returned to callers on every recoverable path."""

    success: bool = True
    data: TutorResponse

    model_config = _WIRE_CONFIG


class SendMessageRequest(BaseModel):
    """Inbound body of ``POST /api/chat/send``. Unknown fields are rejected."""

    message: str = Field(min_length=1, description="The learner's utterance")
    chat_history: list[ConversationTurn] = Field(default_factory=list)
    target_language: SupportedLanguage = DEFAULT_LANGUAGE

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")
