"""
Main window for the Downloadable Fonts GUI.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QByteArray, QUrl, Qt, Signal, Slot
from PySide6.QtGui import QAction, QActionGroup, QCloseEvent, QDesktopServices, QFont, QFontDatabase, QKeySequence
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QCompleter,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QSlider,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from config import (
    APP_NAME,
    APP_VERSION,
    FONT_PROVIDER_NAME,
    PREVIEW_POINT_SIZE,
    PREVIEW_TEXT,
    PROGRESS_MAX,
)
from core.family_names import is_valid_family_name, validate_family_name
from core.font_parameters import (
    FontVariationParameters,
    default_italic_progress,
    default_weight_progress,
    default_width_progress,
    italic_from_progress,
    weight_from_progress,
    width_from_progress,
)
from core.font_provider import ResolvedFont
from core.font_resolver import FontResolutionWorkflow
from core.query_builder import build_query, format_number
from ui.app_context import AppContext, get_app_context
from utils.error_handler import FamilyNameValidationError


class MainWindow(QMainWindow):
    """
    PURPOSE: Let the user pick a family and variation values and request the font.
    CONTEXT: Validation, parameter conversion and query building live in core/; this
             window only wires widgets to them and mirrors the workflow's state.
    """

    family_name_validated = Signal(bool)

    def __init__(self, context: Optional[AppContext] = None) -> None:
        super().__init__()
        self._context: AppContext = context or get_app_context()
        self._logger = self._context.logger()
        self._settings = self._context.settings_manager()
        self._workflow = FontResolutionWorkflow(self._context.font_provider(), self)
        self._loaded_font_ids = []

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_translations()

        self._logger.info("Main window initialised")

    @property
    def workflow(self) -> FontResolutionWorkflow:
        return self._workflow

    def _setup_ui(self) -> None:
        self.setWindowTitle(APP_NAME)
        self.resize(720, 560)

        central = QWidget(self)
        layout = QVBoxLayout(central)

        self.preview_label = QLabel(PREVIEW_TEXT)
        self.preview_label.setWordWrap(True)
        self.preview_label.setAlignment(Qt.AlignCenter)
        self.preview_label.setMinimumHeight(140)
        layout.addWidget(self.preview_label)

        self._family_group = QGroupBox()
        family_layout = QVBoxLayout()
        self.family_name_input = QLineEdit()
        self.family_name_input.setClearButtonEnabled(True)
        completer = QCompleter(list(self._context.family_names().names), self.family_name_input)
        completer.setCaseSensitivity(Qt.CaseInsensitive)
        self.family_name_input.setCompleter(completer)
        self.family_name_input.setText(self._settings.get_last_family_name())
        self.family_error_label = QLabel()
        self.family_error_label.setStyleSheet("color: #d32f2f;")
        self.family_error_label.setVisible(False)
        family_layout.addWidget(self.family_name_input)
        family_layout.addWidget(self.family_error_label)
        self._family_group.setLayout(family_layout)
        layout.addWidget(self._family_group)

        form = QFormLayout()
        self.width_slider, self.width_value_label = self._create_slider(default_width_progress())
        self.weight_slider, self.weight_value_label = self._create_slider(default_weight_progress())
        self.italic_slider, self.italic_value_label = self._create_slider(default_italic_progress())
        self._width_label = QLabel()
        self._weight_label = QLabel()
        self._italic_label = QLabel()
        form.addRow(self._width_label, self._slider_row(self.width_slider, self.width_value_label))
        form.addRow(self._weight_label, self._slider_row(self.weight_slider, self.weight_value_label))
        form.addRow(self._italic_label, self._slider_row(self.italic_slider, self.italic_value_label))
        layout.addLayout(form)

        self.best_effort_checkbox = QCheckBox()
        self.best_effort_checkbox.setChecked(self._settings.get_best_effort())
        layout.addWidget(self.best_effort_checkbox)

        buttons_layout = QHBoxLayout()
        self.request_button = QPushButton()
        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 0)  # indeterminate
        self.progress_bar.setVisible(False)
        buttons_layout.addWidget(self.request_button)
        buttons_layout.addWidget(self.progress_bar)
        layout.addLayout(buttons_layout)
        layout.addStretch()

        self.setCentralWidget(central)
        self.setStatusBar(QStatusBar(self))

        self._update_value_labels()

    def _create_slider(self, progress: int):
        slider = QSlider(Qt.Horizontal)
        slider.setRange(0, PROGRESS_MAX)
        slider.setValue(progress)
        value_label = QLabel()
        value_label.setMinimumWidth(48)
        return slider, value_label

    def _slider_row(self, slider: QSlider, value_label: QLabel) -> QWidget:
        row = QWidget()
        row_layout = QHBoxLayout(row)
        row_layout.setContentsMargins(0, 0, 0, 0)
        row_layout.addWidget(slider)
        row_layout.addWidget(value_label)
        return row

    def _setup_menu(self) -> None:
        menubar = self.menuBar()

        self._file_menu = menubar.addMenu("")  # Populated in _apply_translations.
        self._open_log_action = QAction("", self)
        self._file_menu.addAction(self._open_log_action)
        self._file_menu.addSeparator()
        self._quit_action = QAction("", self)
        self._quit_action.setShortcut(QKeySequence.Quit)
        self._file_menu.addAction(self._quit_action)

        self._language_menu = menubar.addMenu("")
        self._language_group = QActionGroup(self)
        self._language_group.setExclusive(True)
        self._language_actions = {}
        for language in self._context.available_languages():
            action = QAction("", self)
            action.setCheckable(True)
            action.setChecked(language == self._context.get_language())
            action.setData(language)
            self._language_group.addAction(action)
            self._language_menu.addAction(action)
            self._language_actions[language] = action

        self._help_menu = menubar.addMenu("")
        self._about_action = QAction("", self)
        self._help_menu.addAction(self._about_action)

    def _connect_signals(self) -> None:
        self.family_name_input.textChanged.connect(self._on_family_name_changed)
        self.width_slider.valueChanged.connect(self._update_value_labels)
        self.weight_slider.valueChanged.connect(self._update_value_labels)
        self.italic_slider.valueChanged.connect(self._update_value_labels)
        self.request_button.clicked.connect(self._on_request_clicked)

        self._workflow.submit_state_changed.connect(self._on_submit_state_changed)
        self._workflow.font_resolved.connect(self._on_font_resolved)
        self._workflow.font_failed.connect(self._on_font_failed)

        self._open_log_action.triggered.connect(self._open_log_file)
        self._quit_action.triggered.connect(QApplication.instance().quit)
        self._about_action.triggered.connect(self._show_about_dialog)
        self._language_group.triggered.connect(self._on_language_selected)

    def _apply_translations(self) -> None:
        """
        PURPOSE: Refresh all text labels using the translation system.
        CONTEXT: Called during initialisation and whenever the user switches language.
        """

        translator = self._context.translate
        self.setWindowTitle(translator("app.title", fallback=APP_NAME))

        self._family_group.setTitle(translator("label.family_name", fallback="Family name"))
        self.family_error_label.setText(
            translator("error.invalid_family_name", fallback="Not a valid family name")
        )
        self._width_label.setText(translator("label.width", fallback="Width"))
        self._weight_label.setText(translator("label.weight", fallback="Weight"))
        self._italic_label.setText(translator("label.italic", fallback="Italic"))
        self.best_effort_checkbox.setText(translator("label.best_effort", fallback="Best effort"))
        self.request_button.setText(translator("button.request", fallback="Request font"))

        self._file_menu.setTitle(translator("menu.file", fallback="File"))
        self._open_log_action.setText(translator("menu.open_log", fallback="Open log file"))
        self._quit_action.setText(translator("menu.quit", fallback="Quit"))
        self._language_menu.setTitle(translator("menu.language", fallback="Language"))
        for language, action in self._language_actions.items():
            action.setText(translator(f"language.{language}", fallback=language))
        self._help_menu.setTitle(translator("menu.help", fallback="Help"))
        self._about_action.setText(translator("menu.about", fallback="About"))

        self.statusBar().showMessage(translator("status.ready", fallback="Ready"))

    def current_parameters(self) -> FontVariationParameters:
        """Variation values for the current slider and checkbox state"""
        return FontVariationParameters.from_progress(
            self.width_slider.value(),
            self.weight_slider.value(),
            self.italic_slider.value(),
            self.best_effort_checkbox.isChecked(),
        )

    @Slot()
    def _update_value_labels(self) -> None:
        self.width_value_label.setText(format_number(width_from_progress(self.width_slider.value())))
        self.weight_value_label.setText(str(weight_from_progress(self.weight_slider.value())))
        self.italic_value_label.setText(format_number(italic_from_progress(self.italic_slider.value())))

    @Slot(str)
    def _on_family_name_changed(self, text: str) -> None:
        is_valid = is_valid_family_name(text)
        self.family_error_label.setVisible(not is_valid)
        self.family_name_validated.emit(is_valid)

    @Slot()
    def _on_request_clicked(self) -> None:
        try:
            family_name = validate_family_name(self.family_name_input.text())
        except FamilyNameValidationError as e:
            self._logger.debug(f"Request blocked: {e}")
            self.family_error_label.setVisible(True)
            self.family_name_validated.emit(False)
            self.statusBar().showMessage(
                self._context.translate("error.invalid_input", fallback="Invalid input"), 3000
            )
            return

        query = build_query(family_name, self.current_parameters())
        self._workflow.submit(query)
        self.request_button.setEnabled(False)
        self.statusBar().showMessage(
            self._context.translate("status.requesting", fallback="Requesting...", family=family_name)
        )

    @Slot(bool, bool)
    def _on_submit_state_changed(self, enabled: bool, progress_visible: bool) -> None:
        self.request_button.setEnabled(enabled)
        self.progress_bar.setVisible(progress_visible)

    @Slot(object)
    def _on_font_resolved(self, handle: ResolvedFont) -> None:
        font = self._context.error_handler().safe_execute(self._load_font, handle)
        if font is None:
            self.statusBar().showMessage(
                self._context.translate("error.font_load", fallback="The font could not be loaded"), 5000
            )
            return

        self.preview_label.setFont(font)
        self._settings.set_last_family_name(handle.family_name)
        self.statusBar().showMessage(
            self._context.translate("status.resolved", fallback="Loaded", family=handle.family_name), 5000
        )

    def _load_font(self, handle: ResolvedFont) -> Optional[QFont]:
        font_id = QFontDatabase.addApplicationFontFromData(QByteArray(handle.data))
        if font_id == -1:
            self._logger.warning(f"Qt could not load font data for {handle.family_name}")
            return None

        self._loaded_font_ids.append(font_id)
        families = QFontDatabase.applicationFontFamilies(font_id)
        family = families[0] if families else handle.family_name
        return QFont(family, PREVIEW_POINT_SIZE)

    @Slot(str)
    def _on_font_failed(self, message: str) -> None:
        self.statusBar().showMessage(message, 5000)
        QMessageBox.warning(
            self,
            self._context.translate("dialog.request_failed.title", fallback="Font request failed"),
            message,
        )

    @Slot(QAction)
    def _on_language_selected(self, action: QAction) -> None:
        language = action.data()
        if language == self._context.get_language():
            return

        self._context.set_language(language)
        self._settings.set_language(language)
        self._apply_translations()

    @Slot()
    def _open_log_file(self) -> None:
        QDesktopServices.openUrl(QUrl.fromLocalFile(str(self._context.log_file())))

    @Slot()
    def _show_about_dialog(self) -> None:
        info = self._context.translate(
            "dialog.about.text",
            fallback=f"{APP_NAME} {APP_VERSION}",
            app=APP_NAME,
            version=APP_VERSION,
            provider=FONT_PROVIDER_NAME,
        )
        QMessageBox.about(self, self.windowTitle(), info)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 (Qt override)
        """
        PURPOSE: Persist preferences and wait for a running request before closing.
        CONTEXT: Requests cannot be cancelled; the font thread is joined instead.
        """

        self._logger.info("Close event received")
        self._settings.set_best_effort(self.best_effort_checkbox.isChecked())
        self._settings.save()
        self._workflow.shutdown()
        event.accept()
