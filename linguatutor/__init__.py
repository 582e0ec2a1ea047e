"""
linguatutor - LLM-backed language tutor gateway.

Turns a learner's utterance plus recent conversation into a structured
correction, explanation, reply and pronunciation in one of seven target
languages, falling back across several models when one is rate limited.
"""

__version__ = "0.1.0"
