"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from uuid import uuid4

from iquiz.constants.network_constants import (
    DEFAULT_REFRESH_INTERVAL_MINUTES,
    DEFAULT_SOURCE_URL,
)


def _new_id() -> str:
    return uuid4().hex


@dataclass(frozen=True, slots=True)
class Topic:
    """Named quiz category shown in the topic list."""

    title: str
    description: str
    icon_name: str
    id: str = field(default_factory=_new_id)


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question belonging to a topic.

    ``correct_index`` is expected to point into ``options`` but remotely
    fetched data is not guaranteed to respect that.
    """

    text: str
    options: tuple[str, ...]
    correct_index: int
    id: str = field(default_factory=_new_id)

    @property
    def correct_option(self) -> str | None:
        if 0 <= self.correct_index < len(self.options):
            return self.options[self.correct_index]
        return None


# Topic title -> ordered questions for that topic.
QuestionBank = dict[str, list[Question]]


@dataclass(frozen=True, slots=True)
class RepositoryConfig:
    """Content source preferences persisted between runs."""

    source_url: str = DEFAULT_SOURCE_URL
    refresh_interval_minutes: int = DEFAULT_REFRESH_INTERVAL_MINUTES


class SessionPhase(Enum):
    """Position of a quiz session in its question flow."""

    PRESENTING = auto()
    REVEALED = auto()
    FINISHED = auto()


@dataclass(frozen=True, slots=True)
class SessionState:
    """Immutable snapshot of a quiz session handed to observers."""

    phase: SessionPhase
    current_index: int
    question_count: int
    score: int
    selected_option: int | None = None
    last_answer_correct: bool | None = None
