"""
Tests for settings loading from the environment.
"""

import pytest
from pydantic import ValidationError

from linguatutor.config.settings import (
    DEFAULT_MODELS,
    LLMSettings,
    ServerSettings,
    Settings,
    load_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "LLM_API_KEY", "GEMINI_API_KEY", "LLM_MODELS", "LLM_TEMPERATURE",
        "SERVER_PORT", "SERVER_CORS_ORIGIN", "LOG_LEVEL", "ENVIRONMENT",
        "PORT", "CORS_ORIGIN", "NODE_ENV",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLLMSettings:

    def test_defaults(self):
        settings = LLMSettings()
        assert settings.api_key == ""
        assert settings.models == DEFAULT_MODELS
        assert settings.timeout > 0

    def test_gemini_api_key_env(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "gemini-key")
        assert LLMSettings().api_key == "gemini-key"

    def test_llm_api_key_env(self, monkeypatch):
        monkeypatch.setenv("LLM_API_KEY", "llm-key")
        assert LLMSettings().api_key == "llm-key"

    def test_models_from_json_env(self, monkeypatch):
        monkeypatch.setenv("LLM_MODELS", '["openai/gpt-4o-mini", "openai/gpt-4o"]')
        assert LLMSettings().models == ["openai/gpt-4o-mini", "openai/gpt-4o"]

    def test_empty_model_list_rejected(self):
        with pytest.raises(ValidationError):
            LLMSettings(models=[])

    def test_blank_model_names_dropped(self):
        assert LLMSettings(models=[" a ", "", "b"]).models == ["a", "b"]

    def test_default_model_list_not_shared(self):
        first = LLMSettings()
        first.models.append("extra")
        assert LLMSettings().models == DEFAULT_MODELS


class TestServerSettings:

    def test_default_port(self):
        assert ServerSettings().port == 3001

    def test_cors_origins_split(self, monkeypatch):
        monkeypatch.setenv("SERVER_CORS_ORIGIN", "http://a.test, http://b.test")
        assert ServerSettings().cors_origins == ["http://a.test", "http://b.test"]


class TestSettings:

    def test_nested_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.llm.models == DEFAULT_MODELS

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=DEBUG\nENVIRONMENT=production\n")
        settings = Settings(_env_file=env_file)
        assert settings.log_level == "DEBUG"
        assert settings.environment == "production"

    def test_node_env_accepted(self, monkeypatch):
        monkeypatch.setenv("NODE_ENV", "production")
        assert Settings(_env_file=None).environment == "production"


class TestDeploymentEnvNames:

    def test_port_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert ServerSettings().port == 8080

    def test_server_port_wins_over_port(self, monkeypatch):
        monkeypatch.setenv("SERVER_PORT", "9000")
        monkeypatch.setenv("PORT", "8080")
        assert ServerSettings().port == 9000

    def test_cors_origin_env(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGIN", "https://tutor.example")
        assert ServerSettings().cors_origins == ["https://tutor.example"]

    def test_field_names_still_accepted(self):
        server = ServerSettings(port=5000, cors_origin="http://x.test")
        assert server.port == 5000
        assert server.cors_origin == "http://x.test"


class TestLoadSettings:

    def test_custom_env_file_reaches_nested_settings(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text(
            "GEMINI_API_KEY=abc123\n"
            "LLM_TEMPERATURE=0.1\n"
            "SERVER_PORT=4000\n"
            "LOG_LEVEL=WARNING\n"
        )

        settings = load_settings(env_file)

        assert settings.llm.api_key == "abc123"
        assert settings.llm.temperature == 0.1
        assert settings.server.port == 4000
        assert settings.log_level == "WARNING"

    def test_custom_env_file_deployment_names(self, tmp_path):
        env_file = tmp_path / "prod.env"
        env_file.write_text("PORT=7000\nCORS_ORIGIN=https://a.test\nNODE_ENV=production\n")

        settings = load_settings(env_file)

        assert settings.server.port == 7000
        assert settings.server.cors_origins == ["https://a.test"]
        assert settings.environment == "production"
