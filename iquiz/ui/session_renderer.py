"""Turns a quiz session snapshot into the data a quiz screen displays."""

from __future__ import annotations

from dataclasses import dataclass

from iquiz.constants.ui_constants import (
    ANSWER_TEMPLATE,
    CORRECT_FEEDBACK,
    INCORRECT_FEEDBACK,
    PROGRESS_TEMPLATE,
    SCORE_TEMPLATE,
)
from iquiz.core.models import Question, SessionPhase, SessionState
from iquiz.core.services.quiz_session import classify_score
from iquiz.core.text_renderer import renderer


@dataclass(frozen=True, slots=True)
class SessionView:
    """Everything the quiz panel needs to draw one frame."""

    phase: SessionPhase
    title: str
    prompt_html: str = ""
    options: tuple[str, ...] = ()
    selected_option: int | None = None
    progress_text: str = ""
    answer_text: str = ""
    feedback_text: str = ""
    result_text: str = ""
    score_text: str = ""
    can_submit: bool = False


def render_session(state: SessionState, question: Question | None, topic_title: str) -> SessionView:
    """Build a ``SessionView`` for ``state``.

    ``question`` is the session's current question and is ignored once the
    session has finished.
    """
    if state.phase is SessionPhase.FINISHED or question is None:
        return SessionView(
            phase=SessionPhase.FINISHED,
            title=topic_title,
            result_text=classify_score(state.score, state.question_count),
            score_text=SCORE_TEMPLATE.format(score=state.score, total=state.question_count),
        )

    progress = PROGRESS_TEMPLATE.format(number=state.current_index + 1, total=state.question_count)
    prompt_html = renderer.render_fragment(question.text)

    if state.phase is SessionPhase.PRESENTING:
        return SessionView(
            phase=state.phase,
            title=topic_title,
            prompt_html=prompt_html,
            options=question.options,
            selected_option=state.selected_option,
            progress_text=progress,
            can_submit=state.selected_option is not None,
        )

    correct_option = question.correct_option
    return SessionView(
        phase=state.phase,
        title=topic_title,
        prompt_html=prompt_html,
        options=question.options,
        selected_option=state.selected_option,
        progress_text=progress,
        answer_text=ANSWER_TEMPLATE.format(answer=correct_option if correct_option is not None else "?"),
        feedback_text=CORRECT_FEEDBACK if state.last_answer_correct else INCORRECT_FEEDBACK,
    )
