"""
Settings Manager - Runtime configuration management

PURPOSE: Manage user preferences without mutating config.py.
CONTEXT: Provides in-memory settings that can be persisted to the user settings file.
"""

from pathlib import Path
from typing import Optional, Dict, Any
import json

from config import (
    BEST_EFFORT_DEFAULT,
    DEFAULT_LANGUAGE,
    FONT_PROVIDER_TIMEOUT_SECONDS,
    SETTINGS_FILE,
)
from utils.logger import get_logger

logger = get_logger()


class SettingsManager:
    """
    Manages runtime user settings

    WHY: Separates mutable user preferences from immutable system defaults in config.py
    """

    def __init__(self, settings_file: Optional[Path] = None):
        self.settings_file = settings_file or SETTINGS_FILE
        self.settings: Dict[str, Any] = {}
        self._load_defaults()
        self._load_from_file()

        logger.info("SettingsManager initialized")

    def _load_defaults(self):
        self.settings = {
            "language": DEFAULT_LANGUAGE,
            "best_effort": BEST_EFFORT_DEFAULT,
            "last_family_name": "",
            "provider_timeout_seconds": FONT_PROVIDER_TIMEOUT_SECONDS,
        }

    def _load_from_file(self):
        """Load settings from user config file if it exists"""
        if not self.settings_file.exists():
            logger.debug("No user settings file found, using defaults")
            return

        try:
            with open(self.settings_file, "r", encoding="utf-8") as f:
                user_settings = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading user settings: {e}", exc_info=True)
            return

        if not isinstance(user_settings, dict):
            logger.warning(f"Ignoring user settings file without a JSON object: {self.settings_file}")
            return

        self.settings.update(user_settings)
        logger.info(f"Loaded user settings from {self.settings_file}")

    def save(self) -> bool:
        """
        Save settings to file

        WHY: Persists user preferences across application restarts
        """
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.settings_file, "w", encoding="utf-8") as f:
                json.dump(self.settings, f, indent=2)
        except OSError as e:
            logger.error(f"Error saving user settings: {e}", exc_info=True)
            return False

        logger.info(f"Saved user settings to {self.settings_file}")
        return True

    def get_language(self) -> str:
        return self.settings.get("language", DEFAULT_LANGUAGE)

    def set_language(self, language: str):
        self.settings["language"] = language

    def get_best_effort(self) -> bool:
        """Initial state of the best effort checkbox"""
        return bool(self.settings.get("best_effort", BEST_EFFORT_DEFAULT))

    def set_best_effort(self, best_effort: bool):
        self.settings["best_effort"] = bool(best_effort)

    def get_last_family_name(self) -> str:
        """Family name of the last successfully resolved font"""
        return self.settings.get("last_family_name", "")

    def set_last_family_name(self, family_name: str):
        self.settings["last_family_name"] = family_name

    def get_provider_timeout(self) -> float:
        return float(self.settings.get("provider_timeout_seconds", FONT_PROVIDER_TIMEOUT_SECONDS))


# Global instance
_settings_manager: Optional[SettingsManager] = None


def get_settings_manager() -> SettingsManager:
    """Get global settings manager instance"""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager
