"""Shared test fixtures."""

import pytest


@pytest.fixture(autouse=True)
def _no_provider_credentials(monkeypatch):
    """Keep a developer's real API keys out of settings built in tests."""
    monkeypatch.delenv("LLM_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
