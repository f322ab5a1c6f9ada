#!/usr/bin/env python3

"""
Downloadable Fonts - Main Entry Point

Variable Fonts per Schieberegler auswählen und vom Font-Provider laden
"""
import sys
from pathlib import Path

# Füge Projekt-Root zum Python Path hinzu
sys.path.insert(0, str(Path(__file__).parent))

from utils.logger import get_logger
from utils.i18n import set_language
from config import APP_NAME, APP_VERSION, LOG_FILE

logger = get_logger()


def initialize_app():
    """
    Initialisiert die Anwendung

    Loads user settings, applies the language and loads the known family names
    once so the first keystroke does not hit the disk.
    """
    from core.family_names import get_family_name_registry
    from ui.settings_manager import get_settings_manager

    logger.info("=" * 60)
    logger.info(f"Starting {APP_NAME} v{APP_VERSION}")
    logger.info("=" * 60)

    settings = get_settings_manager()
    set_language(settings.get_language())

    registry = get_family_name_registry()
    logger.info(f"{len(registry)} font families available")


def main():
    """Main Entry Point"""
    app = None

    try:
        from PySide6.QtWidgets import QApplication

        app = QApplication(sys.argv)
        app.setApplicationName(APP_NAME)
        app.setApplicationDisplayName(APP_NAME)
        app.setApplicationVersion(APP_VERSION)

        initialize_app()

        from ui.main_window import MainWindow

        window = MainWindow()
        window.show()

        sys.exit(app.exec())

    except KeyboardInterrupt:
        logger.info("\nShutdown requested by user")
        sys.exit(0)
    except Exception as e:  # pragma: no cover - GUI bootstrap failure is fatal
        logger.critical(f"Failed to start GUI: {e}", exc_info=True)

        if app:
            from PySide6.QtWidgets import QMessageBox

            QMessageBox.critical(
                None,
                "Application Error",
                f"Unable to start the GUI.\n\nDetails: {e}\nSee log file: {LOG_FILE}",
            )
        sys.exit(1)


if __name__ == "__main__":
    main()
