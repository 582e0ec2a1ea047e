"""
Tests for the linguatutor CLI.

Parser-level tests plus command execution with TutorService patched.
"""

from argparse import Namespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from linguatutor.__main__ import cmd_chat, cmd_config, cmd_languages, create_parser
from linguatutor.config.settings import LLMSettings, Settings
from linguatutor.llm.models import ConfigurationError
from linguatutor.tutor.models import ChatResponse, TutorResponse
from linguatutor.tutor.service import RATE_LIMITED_MESSAGE, TutorServiceError


@pytest.fixture
def settings():
    return Settings(_env_file=None, llm=LLMSettings(api_key="test-api-key"))


class TestParser:

    def test_chat_subcommand(self):
        args = create_parser().parse_args(["chat", "I go to school yesterday"])
        assert args.command == "chat"
        assert args.message == "I go to school yesterday"
        assert args.language == "english"

    def test_chat_language_flag(self):
        args = create_parser().parse_args(["chat", "Bonjour", "--language", "french"])
        assert args.language == "french"

    def test_chat_rejects_unknown_language(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["chat", "hi", "--language", "klingon"])

    def test_serve_defaults_to_config(self):
        args = create_parser().parse_args(["serve"])
        assert args.host is None
        assert args.port is None

    def test_serve_port_override(self):
        args = create_parser().parse_args(["serve", "--port", "8080"])
        assert args.port == 8080

    def test_global_log_level(self):
        args = create_parser().parse_args(["--log-level", "DEBUG", "languages"])
        assert args.log_level == "DEBUG"
        assert args.command == "languages"


class TestCommands:

    def test_languages_prints_all(self, capsys):
        assert cmd_languages() == 0
        out = capsys.readouterr().out
        assert "japanese" in out
        assert "日本語" in out
        assert len(out.strip().splitlines()) == 7

    def test_config_returns_zero(self, settings):
        assert cmd_config(settings) == 0

    @pytest.mark.asyncio
    async def test_chat_prints_response(self, settings, capsys):
        service = MagicMock()
        service.send_message = AsyncMock(return_value=ChatResponse(
            data=TutorResponse(
                original="I go to school yesterday",
                correction="I went to school yesterday",
                reply="Great effort!",
            ),
        ))

        with patch("linguatutor.tutor.service.TutorService.from_settings", return_value=service):
            code = await cmd_chat(Namespace(message="I go to school yesterday", language="english"), settings)

        assert code == 0
        out = capsys.readouterr().out
        assert "I went to school yesterday" in out
        assert "Great effort!" in out
        service.send_message.assert_awaited_once_with("I go to school yesterday", [], "english")

    @pytest.mark.asyncio
    async def test_chat_service_error_returns_one(self, settings, capsys):
        service = MagicMock()
        service.send_message = AsyncMock(side_effect=TutorServiceError(
            RATE_LIMITED_MESSAGE, status_code=429, retryable=True
        ))

        with patch("linguatutor.tutor.service.TutorService.from_settings", return_value=service):
            code = await cmd_chat(Namespace(message="hi", language="english"), settings)

        assert code == 1
        assert RATE_LIMITED_MESSAGE in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_chat_without_api_key_returns_one(self):
        settings = Settings(_env_file=None, llm=LLMSettings(api_key=""))
        code = await cmd_chat(Namespace(message="hi", language="english"), settings)
        assert code == 1

    @pytest.mark.asyncio
    async def test_chat_configuration_error_from_factory(self, settings):
        with patch(
            "linguatutor.tutor.service.TutorService.from_settings",
            side_effect=ConfigurationError("no key"),
        ):
            code = await cmd_chat(Namespace(message="hi", language="english"), settings)
        assert code == 1
