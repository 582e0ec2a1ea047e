"""
Tests for logging setup.
"""

import logging

from linguatutor.config.logging import NOISY_LOGGERS, ColoredFormatter, get_logger, setup_logging
from linguatutor.config.settings import Settings


class TestGetLogger:

    def test_module_name_kept(self):
        assert get_logger("linguatutor.llm.gateway").name == "linguatutor.llm.gateway"

    def test_foreign_name_nested(self):
        assert get_logger("scripts").name == "linguatutor.scripts"


class TestColoredFormatter:

    def test_does_not_mutate_record(self):
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "msg", None, None)
        output = ColoredFormatter("%(levelname)s %(message)s").format(record)
        assert "\033[33m" in output
        assert record.levelname == "WARNING"


class TestSetupLogging:

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "tutor.log"
        settings = Settings(_env_file=None, log_level="DEBUG", log_file=log_file)

        setup_logging(settings)
        logger = logging.getLogger("linguatutor")
        try:
            assert logger.level == logging.DEBUG
            assert logger.propagate is False
            assert len(logger.handlers) == 2
            get_logger("linguatutor.test").warning("hello file")
            for handler in logger.handlers:
                handler.flush()
            assert "hello file" in log_file.read_text()
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.propagate = True

    def test_provider_loggers_quieted(self):
        setup_logging(Settings(_env_file=None, log_level="INFO"))
        logger = logging.getLogger("linguatutor")
        try:
            for name in NOISY_LOGGERS:
                assert logging.getLogger(name).level == logging.WARNING
            assert len(logger.handlers) == 1
        finally:
            logger.handlers.clear()
            logger.propagate = True
            for name in NOISY_LOGGERS:
                logging.getLogger(name).setLevel(logging.NOTSET)

    def test_provider_loggers_verbose_at_debug(self):
        setup_logging(Settings(_env_file=None, log_level="DEBUG"))
        logger = logging.getLogger("linguatutor")
        try:
            assert logging.getLogger("LiteLLM").level == logging.DEBUG
        finally:
            logger.handlers.clear()
            logger.propagate = True
            for name in NOISY_LOGGERS:
                logging.getLogger(name).setLevel(logging.NOTSET)
