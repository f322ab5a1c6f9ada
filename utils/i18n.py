"""
Übersetzungen für alle sichtbaren Texte (Deutsch/Englisch)

Each language is one flat JSON object in resources/translations/<lang>.json.
Keys missing in the current language fall back to English, then to the caller's
fallback text. Values may contain str.format placeholders such as {reason}.
"""

import json
from typing import Dict, List, Optional

from config import AVAILABLE_LANGUAGES, DEFAULT_LANGUAGE, TRANSLATIONS_DIR
from utils.logger import get_logger

logger = get_logger()

FALLBACK_LANGUAGE = "en"


def _load_table(language: str) -> Dict[str, str]:
    translation_file = TRANSLATIONS_DIR / f"{language}.json"
    if not translation_file.exists():
        logger.warning(f"Translation file not found: {translation_file}")
        return {}

    try:
        with open(translation_file, "r", encoding="utf-8") as f:
            table = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading translations for {language}: {e}")
        return {}

    if not isinstance(table, dict):
        logger.error(f"Translation file for {language} is not a JSON object")
        return {}

    logger.debug(f"Loaded {len(table)} strings for language: {language}")
    return table


class I18n:
    """Singleton für Übersetzungen"""

    _instance: Optional["I18n"] = None
    _translations: Dict[str, Dict[str, str]] = {}
    _current_language: str = DEFAULT_LANGUAGE

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._translations:
            self.reload()

    def reload(self):
        """Lädt alle Übersetzungsdateien neu"""
        self._translations = {language: _load_table(language) for language in AVAILABLE_LANGUAGES}

    def available_languages(self) -> List[str]:
        """Languages with a usable translation table, in configured order"""
        return [language for language in AVAILABLE_LANGUAGES if self._translations.get(language)]

    def set_language(self, language: str):
        if language not in self.available_languages():
            logger.warning(f"Language '{language}' not available. Keeping '{self._current_language}'.")
            return

        self._current_language = language
        logger.info(f"Language set to: {language}")

    def get_language(self) -> str:
        return self._current_language

    def translate(self, key: str, fallback: Optional[str] = None, **kwargs) -> str:
        """
        Übersetzt einen Key in die aktuelle Sprache

        Args:
            key: Translation key, e.g. 'font.request_failed'
            fallback: Text used when no table has the key (defaults to the key itself)
            **kwargs: Values for the placeholders in the translated text
        """
        text = self._translations.get(self._current_language, {}).get(key)
        if text is None:
            text = self._translations.get(FALLBACK_LANGUAGE, {}).get(key)
        if text is None:
            logger.debug(f"Translation missing for key: {key}")
            text = fallback or key

        if not kwargs:
            return text

        try:
            return text.format(**kwargs)
        except (KeyError, IndexError) as e:
            logger.warning(f"Missing variable in translation '{key}': {e}")
            return text


_i18n = I18n()


def set_language(language: str):
    _i18n.set_language(language)


def get_language() -> str:
    return _i18n.get_language()


def available_languages() -> List[str]:
    return _i18n.available_languages()


def t(key: str, fallback: Optional[str] = None, **kwargs) -> str:
    """Übersetzt einen Text in die aktuelle Sprache"""
    return _i18n.translate(key, fallback, **kwargs)
