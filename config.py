"""
Zentrale Konfiguration für Downloadable Fonts
"""

import os
import sys
from pathlib import Path


def get_base_dir():
    """
    Get the base directory for the application.

    When running from PyInstaller bundle, resources are in sys._MEIPASS.
    When running from source, resources are relative to this file.
    """
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS)
    else:
        return Path(__file__).parent


def get_user_dir():
    """
    Get the user data directory for writable files (logs, settings).

    In bundled app, we can't write to the app bundle, so use user's home directory.
    """
    if getattr(sys, "frozen", False):
        if sys.platform == "darwin":  # macOS
            user_dir = Path.home() / "Library" / "Application Support" / "DownloadableFonts"
        elif sys.platform == "win32":  # Windows
            user_dir = Path(os.environ.get("APPDATA", Path.home())) / "DownloadableFonts"
        else:  # Linux
            user_dir = Path.home() / ".downloadablefonts"

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir
    else:
        # Running from source - use project directory
        return Path(__file__).parent


# Basis-Pfade
BASE_DIR = get_base_dir()
USER_DIR = get_user_dir()

# Resources (read-only, bundled with app)
RESOURCES_DIR = BASE_DIR / "resources"
TRANSLATIONS_DIR = RESOURCES_DIR / "translations"
FAMILY_NAMES_FILE = RESOURCES_DIR / "family_names.json"

# User data (writable)
LOGS_DIR = USER_DIR / "logs"
SETTINGS_FILE = USER_DIR / "user_settings.json"

LOGS_DIR.mkdir(parents=True, exist_ok=True)

# Font-Variationen
# Slider liefern immer Werte von 0 bis 100 (inklusive)
PROGRESS_MAX = 100
WIDTH_DEFAULT = 100
WIDTH_MAX = 500
WEIGHT_DEFAULT = 400
WEIGHT_MAX = 1000  # Gewicht liegt im offenen Intervall (0, WEIGHT_MAX)
ITALIC_DEFAULT = 0.0
BEST_EFFORT_DEFAULT = True

# Font-Provider (Google Fonts CSS2 API)
FONT_PROVIDER_NAME = "Google Fonts"
FONT_PROVIDER_CSS_URL = "https://fonts.googleapis.com/css2"
FONT_PROVIDER_TIMEOUT_SECONDS = 30
# Ohne Browser-User-Agent liefert die API TrueType statt WOFF2
FONT_PROVIDER_USER_AGENT = "downloadable-fonts/1.0.0"
FONT_THREAD_NAME = "fonts"

# Logging
LOG_FILE = LOGS_DIR / "app.log"
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
LOG_BACKUP_COUNT = 3
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR

# UI-Konfiguration
DEFAULT_LANGUAGE = "en"  # de oder en
AVAILABLE_LANGUAGES = ["de", "en"]
PREVIEW_TEXT = "The quick brown fox jumps over the lazy dog"
PREVIEW_POINT_SIZE = 28

# App-Metadaten
APP_NAME = "Downloadable Fonts"
APP_VERSION = "1.0.0"
