"""Utilities for exporting quiz content to the JSON format used for downloads."""

from __future__ import annotations

from pathlib import Path

from iquiz.core.models import Question, QuestionBank, Topic
from iquiz.core.remote_decoder import RemoteQuestion, RemoteQuiz, QUIZ_LIST_ADAPTER


def encode_content(topics: list[Topic], question_bank: QuestionBank) -> list[RemoteQuiz]:
    """Convert topics and their questions into wire records, in topic order."""
    return [
        RemoteQuiz(
            title=topic.title,
            desc=topic.description,
            questions=[_encode_question(q) for q in question_bank.get(topic.title, [])],
        )
        for topic in topics
    ]


def dump_payload(topics: list[Topic], question_bank: QuestionBank) -> bytes:
    return QUIZ_LIST_ADAPTER.dump_json(encode_content(topics, question_bank), indent=2)


def save_content_to_file(file_path: Path, topics: list[Topic], question_bank: QuestionBank) -> None:
    """Persist the provided content to disk as a downloadable quiz file."""

    if not topics:
        raise ValueError("Cannot export without any topics.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_bytes(dump_payload(topics, question_bank) + b"\n")


def _encode_question(question: Question) -> RemoteQuestion:
    return RemoteQuestion(
        text=question.text,
        answers=list(question.options),
        answer=str(question.correct_index),
    )
