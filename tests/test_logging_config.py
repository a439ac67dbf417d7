"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

from logging_config import setup_logging


class TestSetupLogging:
    """Test cases for setup_logging."""

    def teardown_method(self):
        logger = logging.getLogger("modexp_test_service")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    def test_console_only_by_default(self):
        logger = setup_logging("modexp_test_service")

        assert logger.name == "modexp_test_service"
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], RotatingFileHandler)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging("modexp_test_service")
        logger = setup_logging("modexp_test_service", level="DEBUG")

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_file_handler_with_log_dir(self, tmp_path):
        log_dir = tmp_path / "logs"
        logger = setup_logging("modexp_test_service", log_dir=log_dir)

        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        log_file = log_dir / "modexp_test_service.log"
        assert log_file.exists()
        assert "modexp_test_service - INFO - hello" in log_file.read_text(encoding="utf-8")
