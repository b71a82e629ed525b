import json
import os
from dataclasses import dataclass

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QSettings, QUrl
from PySide6.QtWidgets import QApplication

from iquiz.core.errors import ContentError
from iquiz.core.preferences import PreferenceStore
from iquiz.core.services.content_repository import ContentRepository


@dataclass
class PendingFetch:
    url: QUrl
    on_success: object
    on_failure: object

    def succeed(self, payload: bytes) -> None:
        self.on_success(payload)

    def fail(self, error: ContentError) -> None:
        self.on_failure(error)


class FakeFetcher:
    """Records requests so a test can finish them in any order."""

    def __init__(self):
        self.pending: list[PendingFetch] = []

    def fetch(self, url, on_success, on_failure):
        self.pending.append(PendingFetch(url, on_success, on_failure))


SAMPLE_PAYLOAD = [
    {
        "title": "Science",
        "desc": "Because SCIENCE!",
        "questions": [
            {
                "text": "What is fire?",
                "answers": ["Oxidation", "A spirit", "A band", "Magic"],
                "answer": "0",
            }
        ],
    },
    {
        "title": "Mathematics",
        "desc": "Did you pass the third grade?",
        "questions": [
            {"text": "What is 2+2?", "answers": ["4", "22", "5"], "answer": "0"},
            {"text": "What is 3*3?", "answers": ["6", "9", "33"], "answer": "1"},
        ],
    },
]


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def settings(tmp_path):
    return QSettings(str(tmp_path / "preferences.ini"), QSettings.IniFormat)


@pytest.fixture
def preferences(settings):
    return PreferenceStore(settings)


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def repository(qapp, fetcher, preferences):
    repo = ContentRepository(fetcher=fetcher, preferences=preferences)
    yield repo
    repo.configure(repo.get_config().source_url, 0)


@pytest.fixture
def sample_payload_bytes():
    return json.dumps(SAMPLE_PAYLOAD).encode("utf-8")

