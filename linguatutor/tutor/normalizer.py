"""
Turn raw model text into a ChatResponse.

The model is asked for a single JSON object but is not guaranteed to
produce one. Code fences are stripped before parsing; anything that still
isn't a JSON object degrades to a response whose reply is the raw text.
Malformed output is never an error.
"""

from __future__ import annotations

import json
import re

from pydantic import ValidationError

from linguatutor.config.logging import get_logger
from linguatutor.tutor.models import ChatResponse, TutorResponse

logger = get_logger(__name__)

_JSON_FENCE_RE = re.compile(r"```json\n?")
_FENCE_RE = re.compile(r"```\n?")


def strip_code_fences(text: str) -> str:
    """Remove ```json and ``` fence markers and surrounding whitespace."""
    return _FENCE_RE.sub("", _JSON_FENCE_RE.sub("", text)).strip()


def fallback_response(raw_text: str, user_message: str) -> TutorResponse:
    """Response used when the model output can't be parsed."""
    return TutorResponse(
        original=user_message,
        correction=user_message,
        correction_pronunciation="",
        explanation="",
        reply=raw_text,
        pronunciation="",
    )


def normalize_response(raw_text: str, user_message: str) -> ChatResponse:
    """
    Parse model output into the guaranteed response shape.

    Args:
        raw_text: Text exactly as returned by the model
        user_message: The learner's utterance, used by the fallback

    Returns:
        ChatResponse with success=True, parsed or degraded
    """
    try:
        parsed = json.loads(strip_code_fences(raw_text))
        if not isinstance(parsed, dict):
            raise ValueError(f"expected a JSON object, got {type(parsed).__name__}")
        data = TutorResponse.model_validate(parsed)
    except (ValueError, ValidationError, RecursionError) as e:
        # json.JSONDecodeError is a ValueError; deeply nested input overflows the decoder
        logger.warning(f"Failed to parse JSON response, using fallback: {e}")
        return ChatResponse(success=True, data=fallback_response(raw_text, user_message))

    logger.debug("Successfully parsed model response")
    return ChatResponse(success=True, data=data)
