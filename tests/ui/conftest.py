"""
Pytest fixtures for UI tests

PURPOSE: Provide shared fixtures for Qt-based GUI testing.
CONTEXT: Handles QApplication lifecycle, singleton resets and main window construction.
"""

import sys

import pytest
from PySide6.QtWidgets import QApplication

from tests.fakes import ScriptedProvider


@pytest.fixture(scope="session")
def qapp():
    """
    Create QApplication instance for entire test session

    WHY: QApplication can only be created once per process
    """
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
    # Don't quit - other tests may need it


@pytest.fixture
def reset_singletons(tmp_path):
    """
    Reset all singleton instances before each test

    WHY: Prevents state leakage between tests and keeps settings out of the user directory
    """
    # Import here to avoid circular imports
    import ui.app_context
    import ui.settings_manager
    from utils.i18n import set_language

    ui.app_context._APP_CONTEXT = None
    ui.settings_manager._settings_manager = ui.settings_manager.SettingsManager(
        settings_file=tmp_path / "user_settings.json"
    )
    set_language("en")

    yield

    ui.app_context._APP_CONTEXT = None
    ui.settings_manager._settings_manager = None
    set_language("en")


@pytest.fixture
def make_window(qapp, qtbot, reset_singletons):
    """
    Build a MainWindow backed by a scripted provider

    WHY: Windows are closed by qtbot at teardown, which joins the font thread
    """
    from ui.app_context import AppContext
    from ui.main_window import MainWindow

    def factory(provider=None):
        window = MainWindow(AppContext(provider=provider or ScriptedProvider()))
        qtbot.addWidget(window)
        return window

    return factory
