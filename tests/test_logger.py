"""
Unit Tests für Logger
"""
import logging

import pytest

from utils.logger import AppLogger, get_logger


@pytest.mark.unit
class TestLogger:
    """Tests für das Logger-System"""

    def test_logger_singleton(self):
        """Teste ob Logger ein Singleton ist"""
        assert AppLogger() is AppLogger()

    def test_get_logger(self):
        assert isinstance(get_logger(), AppLogger)

    def test_handlers_configured_once(self):
        AppLogger()
        AppLogger()
        handlers = get_logger().get_logger().handlers
        assert len(handlers) == 2

    def test_log_font_lifecycle(self, caplog):
        logger = get_logger()
        with caplog.at_level(logging.DEBUG, logger="DownloadableFonts"):
            logger.log_font_request("name=Roboto&width=100")
            logger.log_font_resolved("name=Roboto&width=100", 1024)
            logger.log_font_resolved("Lato")
            logger.log_font_failed("name=Roboto&width=100", 1)

        messages = [record.getMessage() for record in caplog.records]
        assert "Requesting a font. Query: name=Roboto&width=100" in messages
        assert "Font resolved (1024 bytes). Query: name=Roboto&width=100" in messages
        assert "Font resolved. Query: Lato" in messages
        assert any("reason 1" in message for message in messages)

    def test_percent_style_arguments(self, caplog):
        with caplog.at_level(logging.INFO, logger="DownloadableFonts"):
            get_logger().info("Loaded %d family names", 52)
        assert "Loaded 52 family names" in caplog.text

    def test_log_performance(self):
        """Sollte keinen Error werfen"""
        get_logger().log_performance("font download", 0.25)
