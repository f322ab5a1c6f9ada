"""
Logging-System mit File Rotation und farbiger Konsolen-Ausgabe
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

import colorlog

from config import LOG_FILE, LOG_MAX_BYTES, LOG_BACKUP_COUNT, LOG_LEVEL


class AppLogger:
    """Singleton Logger für die gesamte Anwendung"""

    _instance: Optional['AppLogger'] = None
    _logger: Optional[logging.Logger] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._logger is not None:
            return

        self._logger = logging.getLogger('DownloadableFonts')
        self._logger.setLevel(getattr(logging, LOG_LEVEL))

        # Verhindere doppelte Handler
        if self._logger.handlers:
            return

        self._setup_file_handler()
        self._setup_console_handler()

    def _setup_file_handler(self):
        """Erstelle rotating file handler für detaillierte Logs"""
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            LOG_FILE,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)

        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(threadName)s - '
            '%(filename)s:%(lineno)d - %(funcName)s() - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        self._logger.addHandler(file_handler)

    def _setup_console_handler(self):
        """Erstelle farbigen console handler"""
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)

        console_formatter = colorlog.ColoredFormatter(
            '%(log_color)s%(levelname)-8s%(reset)s %(blue)s%(message)s',
            datefmt='%H:%M:%S',
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            }
        )

        console_handler.setFormatter(console_formatter)
        self._logger.addHandler(console_handler)

    def get_logger(self) -> logging.Logger:
        """Gibt den konfigurierten Logger zurück"""
        return self._logger

    def debug(self, message: str, *args, **kwargs):
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args, exc_info=False, **kwargs):
        self._logger.error(message, *args, exc_info=exc_info, **kwargs)

    def critical(self, message: str, *args, exc_info=True, **kwargs):
        self._logger.critical(message, *args, exc_info=exc_info, **kwargs)

    def log_font_request(self, query: str):
        """Logging für ausgehende Font-Anfragen"""
        self.debug(f"Requesting a font. Query: {query}")

    def log_font_resolved(self, query: str, size_bytes: Optional[int] = None):
        """Logging für erfolgreich aufgelöste Fonts"""
        size = f" ({size_bytes} bytes)" if size_bytes is not None else ""
        self.info(f"Font resolved{size}. Query: {query}")

    def log_font_failed(self, query: str, reason: int):
        """Logging für fehlgeschlagene Font-Anfragen"""
        self.warning(f"Font request failed with reason {reason}. Query: {query}")

    def log_performance(self, operation: str, duration_seconds: float):
        """Performance Logging"""
        self.debug(f"Performance: {operation} took {duration_seconds:.2f}s")


# Singleton Instance
logger = AppLogger()


def get_logger() -> AppLogger:
    """Helper function to get logger instance"""
    return logger
