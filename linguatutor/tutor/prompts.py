"""
Prompt construction for the tutor.

The full prompt sent to the model is:

    system prompt (persona, output fields, rules, worked example)
    Conversation History: last HISTORY_WINDOW turns
    Student: <new utterance>
    closing JSON-only instruction

Everything here is a pure function of its inputs.
"""

from __future__ import annotations

from typing import Sequence

from linguatutor.tutor.languages import SupportedLanguage, get_profile
from linguatutor.tutor.models import ConversationTurn

HISTORY_WINDOW = 10
START_OF_CONVERSATION = "This is the start of the conversation."

# Numbering of language-specific rules continues after the fixed rules
_FIXED_RULE_COUNT = 7


def _json_string(value: str) -> str:
    """Quote a value the way it appears inside the example JSON object."""
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def build_system_prompt(language: SupportedLanguage | str) -> str:
    """
    Render the instruction block for a target language.

    Args:
        language: Target language (enum member or its string value)

    Returns:
        Persona, required output fields, numbered rules and a worked example
    """
    profile = get_profile(language)
    name = profile.name
    notation = profile.pronunciation_system

    special_rules = "\n".join(
        f"{index}. {rule}"
        for index, rule in enumerate(profile.special_rules, start=_FIXED_RULE_COUNT + 1)
    )

    example = "\n".join([
        "{",
        f'  "original": {_json_string(profile.example_original)},',
        f'  "correction": {_json_string(profile.example_correction)},',
        f'  "correctionPronunciation": {_json_string(profile.example_correction_pronunciation)},',
        f'  "explanation": {_json_string(profile.example_explanation)},',
        f'  "reply": {_json_string(profile.example_reply)},',
        f'  "pronunciation": {_json_string(profile.example_pronunciation)}',
        "}",
    ])

    return (
        f"You are {profile.tutor_description}. Your role is to help students improve their "
        f"{name} ({profile.native_name}) speaking skills.\n"
        "\n"
        "When a student speaks, you must respond in a structured JSON format with the following fields:\n"
        "- original: The original text the student said (exactly as they said it)\n"
        "- correction: The corrected version if there are any grammar, pronunciation, or vocabulary mistakes\n"
        f"- correctionPronunciation: {notation} transcription of the CORRECTED sentence "
        "(this helps students practice the correct pronunciation)\n"
        "- explanation: A brief, friendly explanation of the correction "
        f"(if any mistakes were found) - respond in {name}\n"
        f"- reply: Your natural, conversational reply as a tutor in {name} "
        "(encourage the student, ask follow-up questions, or provide feedback)\n"
        f"- pronunciation: {notation} transcription of your reply\n"
        "\n"
        "IMPORTANT RULES:\n"
        "1. Always return valid JSON only, no additional text before or after\n"
        f"2. If the student's {name} is perfect, set \"correction\" to the same as \"original\" "
        "and \"correctionPronunciation\" to the pronunciation of the original\n"
        f"3. Be encouraging and friendly in your \"reply\" - always respond in {name}\n"
        f"4. Focus on natural conversation flow in {name}\n"
        "5. If the student makes multiple mistakes, correct the most important ones\n"
        f"6. For pronunciation fields, always use {notation}\n"
        "7. The \"correctionPronunciation\" field is REQUIRED - it helps students practice "
        "saying the sentence correctly\n"
        f"{special_rules}\n"
        "\n"
        "Example response format:\n"
        f"{example}"
    )


def render_history(history: Sequence[ConversationTurn] | None) -> str:
    """
    Render the last HISTORY_WINDOW turns as Student/Tutor lines.

    Assistant turns without a reply contribute nothing. An empty window
    renders as the start-of-conversation marker.
    """
    recent = list(history or [])[-HISTORY_WINDOW:]
    if not recent:
        return START_OF_CONVERSATION

    lines = []
    for turn in recent:
        if turn.role == "user":
            lines.append(f"Student: {turn.content}")
        elif turn.data is not None and turn.data.reply:
            lines.append(f"Tutor: {turn.data.reply}")
    return "\n".join(lines)


def build_prompt(
    language: SupportedLanguage | str,
    history: Sequence[ConversationTurn] | None,
    message: str,
) -> str:
    """Compose the complete prompt for one learner utterance."""
    return (
        f"{build_system_prompt(language)}\n"
        "\n"
        "Conversation History:\n"
        f"{render_history(history)}\n"
        "\n"
        f"Student: {message}\n"
        "\n"
        "Tutor (respond with a single JSON object only, no text before or after it):"
    )
