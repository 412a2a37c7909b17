"""
User interface for Flower Password.

LEGAL NOTICE:
This tool is for personal use only. The derived passwords are shown, copied
and filled on this device only and are never stored.
"""

import logging
from typing import Optional, Callable

from PyQt5.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel, QLineEdit,
    QPushButton, QComboBox, QCheckBox, QApplication
)
from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QFont

from .autofill import PageDocument, fill_password
from .codec import EncodingMode, EncodingError
from .crypto import KeyedHash, CollaboratorUnavailable
from .derivation import PasswordDeriver
from .settings import SettingsStore, PopupSettings
from . import config

logger = logging.getLogger(__name__)


class FlowerPasswordDialog(QDialog):
    """Popup that derives the password for the current site as you type."""

    def __init__(self, settings_store: SettingsStore, hasher: Optional[KeyedHash],
                 site_key: str = "", fill_handler: Optional[Callable[[str], bool]] = None,
                 page_provider: Optional[Callable[[], PageDocument]] = None,
                 parent=None):
        """
        Args:
            settings_store: Where options and a remembered password live
            hasher: Keyed hash, None if unavailable
            site_key: Initial site key, usually taken from the current URL
            fill_handler: Called with the password when Fill is pressed
            page_provider: Returns the current page; used with the built-in
                field heuristic when no fill_handler is given
        """
        super().__init__(parent)
        self.settings_store = settings_store
        self.deriver = PasswordDeriver(hasher)
        if fill_handler is None and page_provider is not None:
            fill_handler = lambda code: fill_password(page_provider(), code)
        self.fill_handler = fill_handler
        self.current_code = ""
        self._loading = False

        self.copy_time_left = 0
        self.copy_timer = QTimer(self)
        self.copy_timer.setInterval(config.COUNTDOWN_TICK_MS)
        self.copy_timer.timeout.connect(self._tick_copy_countdown)

        self.fill_time_left = 0
        self.fill_timer = QTimer(self)
        self.fill_timer.setInterval(config.COUNTDOWN_TICK_MS)
        self.fill_timer.timeout.connect(self._tick_fill_countdown)

        self.init_ui()
        self.load_settings()
        if site_key:
            self.key_input.setText(site_key)
        self.try_generate()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle(config.APP_TITLE_PREFIX)

        layout = QVBoxLayout()
        form = QFormLayout()

        self.password_input = QLineEdit()
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.setPlaceholderText("Memory password")
        self.password_input.textChanged.connect(self._on_password_changed)
        form.addRow("Password:", self.password_input)

        self.key_input = QLineEdit()
        self.key_input.setPlaceholderText("Site key")
        self.key_input.textChanged.connect(self.try_generate)
        form.addRow("Key:", self.key_input)

        self.length_combo = QComboBox()
        for length in config.LENGTH_OPTIONS:
            self.length_combo.addItem(str(length), length)
        self.length_combo.setCurrentIndex(self.length_combo.findData(config.DEFAULT_LENGTH))
        self.length_combo.currentIndexChanged.connect(self._on_option_changed)
        form.addRow("Length:", self.length_combo)

        self.mode_combo = QComboBox()
        self.mode_combo.addItem("Flower (hex)", config.MODE_FLOWER)
        self.mode_combo.addItem("Base64", config.MODE_BASE64)
        self.mode_combo.setCurrentIndex(self.mode_combo.findData(config.DEFAULT_MODE))
        self.mode_combo.currentIndexChanged.connect(self._on_option_changed)
        form.addRow("Mode:", self.mode_combo)

        self.remember_check = QCheckBox("Remember password")
        self.remember_check.toggled.connect(self.save_settings)
        form.addRow("", self.remember_check)

        layout.addLayout(form)

        self.result_label = QLabel()
        self.result_label.setFont(QFont(config.RESULT_FONT_FAMILY, config.RESULT_FONT_SIZE))
        self.result_label.setAlignment(Qt.AlignCenter)
        self.result_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.result_label.hide()
        layout.addWidget(self.result_label)

        button_layout = QHBoxLayout()
        self.fill_button = QPushButton(config.FILL_BUTTON_TEXT)
        self.fill_button.clicked.connect(self.fill_password)
        button_layout.addWidget(self.fill_button)

        self.copy_button = QPushButton(config.COPY_BUTTON_TEXT)
        self.copy_button.clicked.connect(self.copy_password)
        button_layout.addWidget(self.copy_button)
        layout.addLayout(button_layout)

        self.setLayout(layout)

    def current_length(self) -> int:
        return self.length_combo.currentData()

    def current_mode(self) -> EncodingMode:
        return EncodingMode.from_value(self.mode_combo.currentData())

    def load_settings(self):
        """Restore length, mode and (if remembered) the master password."""
        self._loading = True
        try:
            settings = self.settings_store.load()
            if settings.remember and settings.memory_password:
                self.password_input.setText(settings.memory_password)
                self.remember_check.setChecked(True)
            index = self.length_combo.findData(settings.length)
            if index >= 0:
                self.length_combo.setCurrentIndex(index)
            index = self.mode_combo.findData(settings.mode.value)
            if index >= 0:
                self.mode_combo.setCurrentIndex(index)
        finally:
            self._loading = False

    def save_settings(self):
        """Persist the current options. The password is only kept if Remember is ticked."""
        if self._loading:
            return
        remember = self.remember_check.isChecked()
        settings = PopupSettings(
            remember=remember,
            length=self.current_length(),
            mode=self.current_mode(),
            memory_password=self.password_input.text() if remember else ""
        )
        try:
            self.settings_store.save(settings)
        except OSError as e:
            logger.error(f"Could not save settings: {e}")

    def _on_password_changed(self):
        self.save_settings()
        self.try_generate()

    def _on_option_changed(self):
        self.save_settings()
        self.try_generate()

    def try_generate(self):
        """Recompute the password from the current inputs."""
        try:
            code = self.deriver.derive(
                self.password_input.text(),
                self.key_input.text(),
                self.current_mode(),
                self.current_length()
            )
        except CollaboratorUnavailable as e:
            logger.error(f"Keyed hash unavailable: {e}")
            self._show_error(config.RESULT_ERROR_HASH_UNAVAILABLE)
            return
        except EncodingError as e:
            logger.error(f"Digest could not be encoded: {e}")
            self._show_error(config.RESULT_ERROR_ENCODING)
            return

        if code is None:
            self.current_code = ""
            self.result_label.clear()
            self.result_label.hide()
        else:
            self.current_code = code
            self.result_label.setText(code)
            self.result_label.show()
        self._update_button_states()

    def _show_error(self, message: str):
        self.current_code = ""
        self.result_label.setText(message)
        self.result_label.show()
        self._update_button_states()

    def _update_button_states(self):
        has_code = bool(self.current_code)
        self.copy_button.setEnabled(has_code)
        self.fill_button.setEnabled(has_code and self.fill_handler is not None)

    def copy_password(self):
        """Copy the password and clear the clipboard after the countdown."""
        if not self.current_code:
            return
        QApplication.clipboard().setText(self.current_code)

        self.copy_timer.stop()
        self.copy_time_left = config.COUNTDOWN_SECONDS
        self.copy_button.setText(config.COPY_BUTTON_COUNTDOWN_TEXT.format(seconds=self.copy_time_left))
        self.copy_timer.start()

    def _tick_copy_countdown(self):
        self.copy_time_left -= 1
        if self.copy_time_left <= 0:
            self.copy_timer.stop()
            self.clear_clipboard()
            self.copy_button.setText(config.COPY_BUTTON_TEXT)
        else:
            self.copy_button.setText(config.COPY_BUTTON_COUNTDOWN_TEXT.format(seconds=self.copy_time_left))

    def fill_password(self):
        """Hand the password to the fill handler, then close after the countdown."""
        if not self.current_code or self.fill_handler is None:
            return
        try:
            found = self.fill_handler(self.current_code)
        except Exception as e:
            logger.error(f"Fill handler failed: {e}", exc_info=True)
            found = False
        if not found:
            logger.info("Fill handler found no password field")

        self.fill_timer.stop()
        self.fill_time_left = config.COUNTDOWN_SECONDS
        self.fill_button.setText(config.FILL_BUTTON_COUNTDOWN_TEXT.format(seconds=self.fill_time_left))
        self.fill_timer.start()

    def _tick_fill_countdown(self):
        self.fill_time_left -= 1
        if self.fill_time_left <= 0:
            self.fill_timer.stop()
            self.clear_clipboard()
            self.accept()
        else:
            self.fill_button.setText(config.FILL_BUTTON_COUNTDOWN_TEXT.format(seconds=self.fill_time_left))

    def clear_clipboard(self):
        """Clear the clipboard."""
        QApplication.clipboard().clear()

    def done(self, result):
        """Stop the countdowns when the dialog closes."""
        self.copy_timer.stop()
        self.fill_timer.stop()
        super().done(result)
