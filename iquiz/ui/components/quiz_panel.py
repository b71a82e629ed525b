"""Component running a quiz session for one topic."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from iquiz.constants.ui_constants import (
    BUTTON_BACK,
    BUTTON_DONE,
    BUTTON_NEXT,
    BUTTON_SUBMIT,
)
from iquiz.core.models import Question, SessionPhase, SessionState, Topic
from iquiz.core.services.quiz_session import QuizSession
from iquiz.styling.styles import Styles
from iquiz.ui.session_renderer import SessionView, render_session


class QuizPanel(QWidget):
    """UI component that forwards user intents to a ``QuizSession`` and draws its state."""

    def __init__(self, on_close: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_close = on_close

        self._session: QuizSession | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self._topic_title: str = ""
        self._rendered_options: tuple[str, ...] | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.back_button = QPushButton(BUTTON_BACK, self)
        self.back_button.clicked.connect(self._handle_close)
        header_row.addWidget(self.back_button)
        self.title_label = QLabel("", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.title_label, stretch=1)
        self.progress_label = QLabel("", self)
        header_row.addWidget(self.progress_label)
        layout.addLayout(header_row)

        self.prompt_label = QLabel("", self)
        self.prompt_label.setTextFormat(Qt.RichText)
        self.prompt_label.setWordWrap(True)
        self.prompt_label.setStyleSheet(Styles.get_prompt_style())
        layout.addWidget(self.prompt_label)

        self.options_container = QWidget(self)
        self.options_layout = QVBoxLayout()
        self.options_container.setLayout(self.options_layout)
        self.option_group = QButtonGroup(self)
        self.option_group.setExclusive(True)
        self.option_group.idClicked.connect(self._handle_option_clicked)
        layout.addWidget(self.options_container)

        self.answer_label = QLabel("", self)
        self.answer_label.setWordWrap(True)
        layout.addWidget(self.answer_label)

        self.feedback_label = QLabel("", self)
        self.feedback_label.setStyleSheet(Styles.get_feedback_style())
        layout.addWidget(self.feedback_label)

        self.result_label = QLabel("", self)
        self.result_label.setAlignment(Qt.AlignCenter)
        self.result_label.setStyleSheet(Styles.get_result_style())
        layout.addWidget(self.result_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        layout.addStretch()

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.submit_button = QPushButton(BUTTON_SUBMIT, self)
        self.submit_button.clicked.connect(self._handle_submit)
        button_row.addWidget(self.submit_button)

        self.next_button = QPushButton(BUTTON_NEXT, self)
        self.next_button.clicked.connect(self._handle_next)
        button_row.addWidget(self.next_button)

        self.done_button = QPushButton(BUTTON_DONE, self)
        self.done_button.clicked.connect(self._handle_close)
        button_row.addWidget(self.done_button)
        layout.addLayout(button_row)

    def start_session(self, topic: Topic, questions: list[Question]) -> None:
        self.stop_session()
        self._topic_title = topic.title
        self._session = QuizSession(questions)
        self._unsubscribe = self._session.subscribe(self._render_state)
        self._rendered_options = None
        self._render_state(self._session.get_state())

    def stop_session(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
        self._unsubscribe = None
        self._session = None

    def get_session(self) -> QuizSession | None:
        return self._session

    # --- User intents ---

    def _handle_option_clicked(self, option_index: int) -> None:
        if self._session is not None:
            self._session.select_option(option_index)

    def _handle_submit(self) -> None:
        if self._session is not None:
            self._session.submit()

    def _handle_next(self) -> None:
        if self._session is not None:
            self._session.advance()

    def _handle_close(self) -> None:
        self.stop_session()
        self.on_close()

    # --- Rendering ---

    def _render_state(self, state: SessionState) -> None:
        if self._session is None:
            return
        view = render_session(state, self._session.get_current_question(), self._topic_title)
        self._apply_view(view)

    def _apply_view(self, view: SessionView) -> None:
        finished = view.phase is SessionPhase.FINISHED
        revealed = view.phase is SessionPhase.REVEALED

        self.title_label.setText(view.title)
        self.progress_label.setText(view.progress_text)
        self.prompt_label.setText(view.prompt_html)
        self.prompt_label.setVisible(not finished)

        if view.options != self._rendered_options:
            self._rebuild_option_buttons(view.options)
        # An exclusive group refuses to uncheck its last checked button.
        self.option_group.setExclusive(False)
        for button in self.option_group.buttons():
            option_index = self.option_group.id(button)
            button.setChecked(option_index == view.selected_option)
            button.setEnabled(view.phase is SessionPhase.PRESENTING)
        self.option_group.setExclusive(True)
        self.options_container.setVisible(not finished)

        self.answer_label.setText(view.answer_text)
        self.answer_label.setVisible(revealed)
        self.feedback_label.setText(view.feedback_text)
        self.feedback_label.setVisible(revealed)

        self.result_label.setText(view.result_text)
        self.result_label.setVisible(finished)
        self.score_label.setText(view.score_text)
        self.score_label.setVisible(finished)

        self.submit_button.setVisible(view.phase is SessionPhase.PRESENTING)
        self.submit_button.setEnabled(view.can_submit)
        self.next_button.setVisible(revealed)
        self.done_button.setVisible(finished)

    def _rebuild_option_buttons(self, options: tuple[str, ...]) -> None:
        for button in self.option_group.buttons():
            self.option_group.removeButton(button)
            self.options_layout.removeWidget(button)
            button.deleteLater()
        for option_index, option_text in enumerate(options):
            button = QPushButton(option_text, self.options_container)
            button.setCheckable(True)
            button.setStyleSheet(Styles.get_option_button_style())
            self.option_group.addButton(button, option_index)
            self.options_layout.addWidget(button)
        self._rendered_options = options
