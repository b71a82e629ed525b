"""Service driving one pass through a topic's questions."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from iquiz.constants.quiz_constants import (
    RESULT_NOT_BAD,
    RESULT_NOT_EVEN_CLOSE,
    RESULT_PERFECT,
)
from iquiz.core.models import Question, SessionPhase, SessionState

logger = logging.getLogger(__name__)

SessionObserver = Callable[[SessionState], None]


def classify_score(score: int, question_count: int) -> str:
    """Return the result label for a finished session."""
    if question_count <= 0:
        return RESULT_NOT_EVEN_CLOSE
    if score == question_count:
        return RESULT_PERFECT
    if question_count // 2 <= score < question_count:
        return RESULT_NOT_BAD
    return RESULT_NOT_EVEN_CLOSE


class QuizSession:
    """Present -> answer -> reveal -> advance over a fixed question sequence.

    The question list is copied at construction, so later content refreshes
    never affect a session in progress. Transitions requested in the wrong
    phase are ignored and return ``False``.
    """

    def __init__(self, questions: Sequence[Question]) -> None:
        self._questions: tuple[Question, ...] = tuple(questions)
        self._current_index: int = 0
        self._selected_option: int | None = None
        self._score: int = 0
        self._last_answer_correct: bool | None = None
        self._phase = SessionPhase.PRESENTING if self._questions else SessionPhase.FINISHED
        self._observers: list[SessionObserver] = []

    # --- Observation ---

    def subscribe(self, observer: SessionObserver) -> Callable[[], None]:
        """Register ``observer`` for state snapshots; returns an unsubscribe callable."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        state = self.get_state()
        for observer in list(self._observers):
            observer(state)

    # --- Transitions ---

    def select_option(self, option_index: int) -> bool:
        if self._phase is not SessionPhase.PRESENTING:
            return False
        options = self._questions[self._current_index].options
        if not 0 <= option_index < len(options):
            raise IndexError(f"Option index {option_index} out of range")
        self._selected_option = option_index
        self._notify()
        return True

    def submit(self) -> bool:
        if self._phase is not SessionPhase.PRESENTING or self._selected_option is None:
            return False
        question = self._questions[self._current_index]
        is_correct = self._selected_option == question.correct_index
        if is_correct:
            self._score += 1
        self._last_answer_correct = is_correct
        self._phase = SessionPhase.REVEALED
        logger.debug(
            "Question %d answered with option %d (correct=%s)",
            self._current_index,
            self._selected_option,
            is_correct,
        )
        self._notify()
        return True

    def advance(self) -> bool:
        if self._phase is not SessionPhase.REVEALED:
            return False
        self._selected_option = None
        self._last_answer_correct = None
        if self._current_index + 1 < len(self._questions):
            self._current_index += 1
            self._phase = SessionPhase.PRESENTING
        else:
            self._phase = SessionPhase.FINISHED
            logger.info("Session finished with %d of %d", self._score, len(self._questions))
        self._notify()
        return True

    # --- Queries ---

    def get_state(self) -> SessionState:
        return SessionState(
            phase=self._phase,
            current_index=self._current_index,
            question_count=len(self._questions),
            score=self._score,
            selected_option=self._selected_option,
            last_answer_correct=self._last_answer_correct,
        )

    def get_phase(self) -> SessionPhase:
        return self._phase

    def is_finished(self) -> bool:
        return self._phase is SessionPhase.FINISHED

    def get_current_index(self) -> int:
        return self._current_index

    def get_selected_option(self) -> int | None:
        return self._selected_option

    def get_score(self) -> int:
        return self._score

    def get_question_count(self) -> int:
        return len(self._questions)

    def get_current_question(self) -> Question | None:
        if self._phase is SessionPhase.FINISHED:
            return None
        return self._questions[self._current_index]

    def get_result_text(self) -> str:
        return classify_score(self._score, len(self._questions))
