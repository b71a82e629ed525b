"""Built-in quiz content shown before the first successful download."""

from __future__ import annotations

from iquiz.core.icons import icon_name_for
from iquiz.core.models import Question, QuestionBank, Topic

_SEED_QUIZZES: list[tuple[str, str, list[tuple[str, list[str], int]]]] = [
    (
        "Mathematics",
        "Did you pass the third grade?",
        [
            ("What is 2 + 2?", ["4", "22", "An irrational number", "Nobody knows"], 0),
            ("What is 7 x 6?", ["36", "42", "48", "76"], 1),
            ("What is the square root of 81?", ["7", "8", "9", "10"], 2),
        ],
    ),
    (
        "Marvel Super Heroes",
        "Avengers, Assemble!",
        [
            ("Who is Iron Man?", ["Tony Stark", "Obadiah Stane", "A rock hit by Megadeth", "Nobody knows"], 0),
            ("Who founded the X-Men?", ["Tony Stark", "Professor X", "The X-Institute", "Erik Lensherr"], 1),
            (
                "How did Spider-Man get his powers?",
                [
                    "He was bitten by a radioactive spider",
                    "He ate a radioactive spider",
                    "He is a radioactive spider",
                    "He looked at a radioactive spider",
                ],
                0,
            ),
        ],
    ),
    (
        "Science",
        "Because SCIENCE!",
        [
            ("What is fire?", ["One of the four classical elements", "A magical reaction given to us by God", "A band that hasn't yet been discovered", "Fire! Fire! Fire! heh-heh"], 0),
            ("What is the chemical symbol for gold?", ["Go", "Gd", "Au", "Ag"], 2),
        ],
    ),
]


def build_seed_content() -> tuple[list[Topic], QuestionBank]:
    """Return fresh topic and question objects for the built-in quizzes."""
    topics: list[Topic] = []
    question_bank: QuestionBank = {}
    for title, description, questions in _SEED_QUIZZES:
        topics.append(Topic(title=title, description=description, icon_name=icon_name_for(title)))
        question_bank[title] = [
            Question(text=text, options=tuple(options), correct_index=correct_index)
            for text, options, correct_index in questions
        ]
    return topics, question_bank
