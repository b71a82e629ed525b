"""Decoding of quiz content downloaded from the configured source URL.

Wire format (a JSON array, one object per topic)::

    [
      {
        "title": "Mathematics",
        "desc": "Did you pass the third grade?",
        "questions": [
          {"text": "What is 2+2?", "answers": ["4", "22", "An irrational number", "Nobody knows"], "answer": "1"}
        ]
      }
    ]

``answer`` is a decimal string index into ``answers``. A string that does not
parse as an integer falls back to option 0 unless ``strict`` is set.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from pydantic import BaseModel, TypeAdapter, ValidationError

from iquiz.core.errors import QuizDecodeError
from iquiz.core.icons import icon_name_for
from iquiz.core.models import Question, QuestionBank, Topic

logger = logging.getLogger(__name__)


class RemoteQuestion(BaseModel):
    """Question record as it appears on the wire."""

    text: str
    answers: list[str]
    answer: str


class RemoteQuiz(BaseModel):
    """Topic record as it appears on the wire."""

    title: str
    desc: str
    questions: list[RemoteQuestion]


QUIZ_LIST_ADAPTER = TypeAdapter(list[RemoteQuiz])


@dataclass(slots=True)
class DecodedContent:
    """Topics and question bank built from one payload."""

    topics: list[Topic]
    question_bank: QuestionBank


def decode_payload(data: bytes | str, *, strict: bool = False) -> DecodedContent:
    """Parse a raw JSON payload into topics and a question bank.

    Raises ``QuizDecodeError`` when the payload is not valid JSON or does not
    have the expected shape. Nothing is returned until the whole payload has
    been converted.
    """
    try:
        remote_quizzes = QUIZ_LIST_ADAPTER.validate_json(data)
    except ValidationError as exc:
        raise QuizDecodeError(_summarize_validation_error(exc)) from exc
    return convert_remote_quizzes(remote_quizzes, strict=strict)


def convert_remote_quizzes(
    remote_quizzes: list[RemoteQuiz], *, strict: bool = False
) -> DecodedContent:
    topics: list[Topic] = []
    question_bank: QuestionBank = {}
    for quiz in remote_quizzes:
        topics.append(
            Topic(
                title=quiz.title,
                description=quiz.desc,
                icon_name=icon_name_for(quiz.title),
            )
        )
        question_bank[quiz.title] = [
            _convert_question(quiz.title, remote, strict=strict)
            for remote in quiz.questions
        ]
    return DecodedContent(topics=topics, question_bank=question_bank)


def parse_answer_index(raw_answer: str) -> int | None:
    """Return the integer value of an answer string, or ``None`` if unparsable."""
    try:
        return int(raw_answer.strip())
    except ValueError:
        return None


def _convert_question(topic_title: str, remote: RemoteQuestion, *, strict: bool) -> Question:
    correct_index = parse_answer_index(remote.answer)
    if correct_index is None:
        if strict:
            raise QuizDecodeError(
                f"Question '{remote.text}' in '{topic_title}' has a non-numeric answer '{remote.answer}'."
            )
        logger.warning(
            "Answer %r for question %r in %r is not a number; using option 0",
            remote.answer,
            remote.text,
            topic_title,
        )
        correct_index = 0
    elif strict and not 0 <= correct_index < len(remote.answers):
        raise QuizDecodeError(
            f"Question '{remote.text}' in '{topic_title}' points at option {correct_index} "
            f"but only has {len(remote.answers)} answers."
        )
    return Question(
        text=remote.text,
        options=tuple(remote.answers),
        correct_index=correct_index,
    )


def _summarize_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "payload"
    return f"Quiz data could not be read ({location}: {first.get('msg', 'invalid value')})."
