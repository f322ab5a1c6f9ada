"""
App context utilities for the GUI layer.
"""
from __future__ import annotations

from pathlib import Path

from config import LOG_FILE
from core.family_names import FamilyNameRegistry, get_family_name_registry
from core.font_provider import FontProvider, GoogleFontsProvider
from ui.settings_manager import SettingsManager, get_settings_manager
from utils.error_handler import ErrorHandler, error_handler
from utils.i18n import available_languages, get_language, set_language, t
from utils.logger import AppLogger, get_logger


class AppContext:
    """
    PURPOSE: Provide a single access point for backend singletons required by the GUI.
    CONTEXT: Widgets share one family name registry, one settings store and one font
             provider instead of constructing their own.
    """

    def __init__(self, provider: FontProvider | None = None) -> None:
        self._logger = get_logger()
        self._provider = provider
        self._log_file = LOG_FILE

    def logger(self) -> AppLogger:
        return self._logger

    def family_names(self) -> FamilyNameRegistry:
        """
        PURPOSE: Provide the known family names.
        CONTEXT: Feeds the autocomplete list; validation goes through is_valid_family_name.
        """

        return get_family_name_registry()

    def font_provider(self) -> FontProvider:
        """
        PURPOSE: Provide the font provider used by the request workflow.
        CONTEXT: Created lazily so the HTTP session honours the configured timeout.
        """

        if self._provider is None:
            timeout = self.settings_manager().get_provider_timeout()
            self._provider = GoogleFontsProvider(timeout=timeout)
        return self._provider

    def settings_manager(self) -> SettingsManager:
        return get_settings_manager()

    def error_handler(self) -> ErrorHandler:
        return error_handler

    def translate(self, key: str, fallback: str | None = None, **kwargs) -> str:
        """
        PURPOSE: Translate UI strings using the existing i18n infrastructure.
        CONTEXT: Keeps GUI text consistent with `resources/translations`.
        """

        return t(key, fallback=fallback, **kwargs)

    def set_language(self, language: str) -> None:
        set_language(language)
        self._logger.info("UI language switched to %s", language)

    def get_language(self) -> str:
        return get_language()

    def available_languages(self) -> list[str]:
        return available_languages()

    def log_file(self) -> Path:
        return self._log_file


_APP_CONTEXT: AppContext | None = None


def get_app_context() -> AppContext:
    """
    PURPOSE: Return the singleton app context.
    CONTEXT: GUI modules import this helper to keep backend access consistent.
    """

    global _APP_CONTEXT
    if _APP_CONTEXT is None:
        _APP_CONTEXT = AppContext()
    return _APP_CONTEXT
