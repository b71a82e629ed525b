"""Component listing the available quiz topics."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QStyle,
    QVBoxLayout,
    QWidget,
)

from iquiz.constants.quiz_constants import (
    ICON_MARVEL,
    ICON_MATHEMATICS,
    ICON_SCIENCE,
)
from iquiz.constants.ui_constants import (
    BUTTON_ABOUT,
    BUTTON_REFRESH,
    BUTTON_SETTINGS,
    EMPTY_TOPICS_MESSAGE,
    TOPIC_ICON_SIZE,
    TOPIC_LIST_TITLE,
)
from iquiz.core.models import Topic
from iquiz.styling.styles import Styles

# Topic icon identifiers -> freedesktop icon theme names.
_THEME_ICON_NAMES: dict[str, str] = {
    ICON_MATHEMATICS: "accessories-calculator",
    ICON_MARVEL: "face-cool",
    ICON_SCIENCE: "applications-science",
}

_TOPIC_ROLE = Qt.UserRole


class TopicListPanel(QWidget):
    """UI component showing one row per topic with icon, title and description."""

    def __init__(
        self,
        on_topic_selected: Callable[[Topic], None],
        on_refresh: Callable[[], None],
        on_settings: Callable[[], None],
        on_about: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_topic_selected = on_topic_selected
        self.on_refresh = on_refresh
        self.on_settings = on_settings
        self.on_about = on_about

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.title_label = QLabel(TOPIC_LIST_TITLE, self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.title_label)
        header_row.addStretch()

        self.refresh_button = QPushButton(BUTTON_REFRESH, self)
        self.refresh_button.clicked.connect(self.on_refresh)
        header_row.addWidget(self.refresh_button)

        self.settings_button = QPushButton(BUTTON_SETTINGS, self)
        self.settings_button.clicked.connect(self.on_settings)
        header_row.addWidget(self.settings_button)

        self.about_button = QPushButton(BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self.on_about)
        header_row.addWidget(self.about_button)
        layout.addLayout(header_row)

        self.topic_list = QListWidget(self)
        self.topic_list.setIconSize(QSize(TOPIC_ICON_SIZE, TOPIC_ICON_SIZE))
        self.topic_list.setWordWrap(True)
        self.topic_list.itemClicked.connect(self._handle_item_clicked)
        layout.addWidget(self.topic_list, stretch=1)

        self.empty_label = QLabel(EMPTY_TOPICS_MESSAGE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setWordWrap(True)
        layout.addWidget(self.empty_label)

    def set_topics(self, topics: list[Topic]) -> None:
        self.topic_list.clear()
        for topic in topics:
            item = QListWidgetItem(self._icon_for(topic.icon_name), f"{topic.title}\n{topic.description}")
            item.setData(_TOPIC_ROLE, topic)
            item.setToolTip(topic.description)
            self.topic_list.addItem(item)
        self.empty_label.setVisible(not topics)

    def _handle_item_clicked(self, item: QListWidgetItem) -> None:
        topic = item.data(_TOPIC_ROLE)
        if isinstance(topic, Topic):
            self.on_topic_selected(topic)

    def _icon_for(self, icon_name: str) -> QIcon:
        fallback = self.style().standardIcon(QStyle.SP_MessageBoxQuestion)
        theme_name = _THEME_ICON_NAMES.get(icon_name)
        if theme_name is None:
            return fallback
        return QIcon.fromTheme(theme_name, fallback)
