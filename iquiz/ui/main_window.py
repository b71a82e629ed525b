"""Qt main window switching between the topic list and a running quiz."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtWidgets import QMainWindow, QStackedWidget

from iquiz.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from iquiz.constants.ui_constants import NETWORK_ERROR_TITLE, WINDOW_TITLE
from iquiz.core.errors import InvalidConfigurationError
from iquiz.core.models import Topic
from iquiz.core.services.content_repository import ContentRepository
from iquiz.styling.styles import Styles
from iquiz.ui.components.quiz_panel import QuizPanel
from iquiz.ui.components.topic_list_panel import TopicListPanel
from iquiz.ui.dialog_helpers import show_error, show_info
from iquiz.ui.settings_dialog import SettingsDialog


class ScreenMode(Enum):
    """Which page of the window is showing."""

    TOPIC_LIST = auto()
    QUIZ = auto()


class MainWindow(QMainWindow):
    """Main Qt window wiring the content repository to the topic and quiz pages."""

    def __init__(self, repository: ContentRepository) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(480, 720)

        self.repository = repository
        self._mode = ScreenMode.TOPIC_LIST

        self._build_ui()
        self._connect_repository()
        self.setStyleSheet(Styles.get_main_window_style())

    def _build_ui(self) -> None:
        self.mode_stack = QStackedWidget(self)
        self.setCentralWidget(self.mode_stack)

        self.topic_panel = TopicListPanel(
            on_topic_selected=self._handle_topic_selected,
            on_refresh=self.repository.fetch_now,
            on_settings=self._handle_settings,
            on_about=self._handle_about,
            parent=self,
        )
        self.quiz_panel = QuizPanel(on_close=self._handle_quiz_closed, parent=self)

        self.mode_stack.addWidget(self.topic_panel)
        self.mode_stack.addWidget(self.quiz_panel)
        self._set_mode(ScreenMode.TOPIC_LIST)

    def _connect_repository(self) -> None:
        self.repository.topics_changed.connect(self.topic_panel.set_topics)
        self.repository.error_changed.connect(self._handle_error_changed)
        self.topic_panel.set_topics(self.repository.get_topics())

    def _set_mode(self, mode: ScreenMode) -> None:
        self._mode = mode
        index_map = {
            ScreenMode.TOPIC_LIST: 0,
            ScreenMode.QUIZ: 1,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    def _handle_topic_selected(self, topic: Topic) -> None:
        self.quiz_panel.start_session(topic, self.repository.get_questions_for(topic.title))
        self._set_mode(ScreenMode.QUIZ)

    def _handle_quiz_closed(self) -> None:
        self._set_mode(ScreenMode.TOPIC_LIST)

    def _handle_error_changed(self, message: str | None) -> None:
        if message is None:
            return
        show_error(self, NETWORK_ERROR_TITLE, message)
        self.repository.clear_error()

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self.repository.get_config(),
            on_check_now=self._handle_check_now,
            parent=self,
        )
        if dialog.exec():
            self._apply_settings(dialog.get_source_url(), dialog.get_refresh_interval_minutes())

    def _handle_check_now(self, source_url: str) -> None:
        interval = self.repository.get_config().refresh_interval_minutes
        if self._apply_settings(source_url, interval):
            self.repository.fetch_now()

    def _apply_settings(self, source_url: str, interval_minutes: int) -> bool:
        try:
            self.repository.configure(source_url, interval_minutes)
        except InvalidConfigurationError as exc:
            show_error(self, "Invalid settings", str(exc))
            return False
        return True

    def _handle_about(self) -> None:
        config = self.repository.get_config()
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"Quiz source: {config.source_url}"
        )
        show_info(self, f"About {APP_NAME}", details)
