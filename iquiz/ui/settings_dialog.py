"""Settings dialog for the quiz content source."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import (
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from iquiz.constants.quiz_constants import MAX_REFRESH_INTERVAL_MINUTES
from iquiz.constants.ui_constants import (
    BUTTON_CHECK_NOW,
    SETTINGS_INTERVAL_GROUP,
    SETTINGS_INTERVAL_OFF,
    SETTINGS_URL_GROUP,
    SETTINGS_URL_PLACEHOLDER,
)
from iquiz.core.models import RepositoryConfig


class SettingsDialog(QDialog):
    """Dialog for editing the source URL and refresh interval."""

    def __init__(
        self,
        config: RepositoryConfig,
        on_check_now: Callable[[str], None],
        parent=None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(420)

        self._config = config
        self._on_check_now = on_check_now

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        url_group = QGroupBox(SETTINGS_URL_GROUP)
        url_layout = QVBoxLayout()
        url_group.setLayout(url_layout)

        self.url_edit = QLineEdit(self._config.source_url)
        self.url_edit.setPlaceholderText(SETTINGS_URL_PLACEHOLDER)
        url_layout.addWidget(self.url_edit)

        self.check_now_button = QPushButton(BUTTON_CHECK_NOW)
        self.check_now_button.setToolTip("Download quiz content from this URL right away")
        self.check_now_button.clicked.connect(self._handle_check_now)
        url_layout.addWidget(self.check_now_button)

        layout.addWidget(url_group)

        interval_group = QGroupBox(SETTINGS_INTERVAL_GROUP)
        interval_layout = QHBoxLayout()
        interval_group.setLayout(interval_layout)

        interval_label = QLabel("Refresh every:")
        interval_label.setToolTip("Set to 0 to turn automatic refresh off")
        self.interval_spinbox = QSpinBox()
        self.interval_spinbox.setRange(0, MAX_REFRESH_INTERVAL_MINUTES)
        self.interval_spinbox.setSpecialValueText(SETTINGS_INTERVAL_OFF)
        self.interval_spinbox.setSuffix(" min")
        self.interval_spinbox.setValue(min(self._config.refresh_interval_minutes, MAX_REFRESH_INTERVAL_MINUTES))
        interval_layout.addWidget(interval_label)
        interval_layout.addStretch()
        interval_layout.addWidget(self.interval_spinbox)

        layout.addWidget(interval_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def _handle_check_now(self) -> None:
        self._on_check_now(self.get_source_url())

    def get_source_url(self) -> str:
        """Get the URL typed into the dialog."""
        return self.url_edit.text().strip()

    def get_refresh_interval_minutes(self) -> int:
        """Get the selected refresh interval, 0 meaning off."""
        return self.interval_spinbox.value()
