"""
Tests for the local content server
"""

import json

from fastapi.testclient import TestClient

from iquiz.core.remote_decoder import decode_payload
from iquiz.core.seed_content import build_seed_content
from iquiz.server.content_server import create_content_app, file_content_provider


class TestContentServer:

    def test_serves_seed_content_by_default(self):
        client = TestClient(create_content_app())

        response = client.get("/questions.json")

        assert response.status_code == 200
        decoded = decode_payload(response.content, strict=True)
        seed_topics, _ = build_seed_content()
        assert [t.title for t in decoded.topics] == [t.title for t in seed_topics]

    def test_serves_file_content(self, tmp_path, sample_payload_bytes):
        path = tmp_path / "questions.json"
        path.write_bytes(sample_payload_bytes)
        client = TestClient(create_content_app(file_content_provider(path)))

        body = client.get("/questions.json").json()

        assert [quiz["title"] for quiz in body] == ["Science", "Mathematics"]
        assert body[1]["questions"][1]["answer"] == "1"

    def test_missing_file_is_503(self, tmp_path):
        client = TestClient(create_content_app(file_content_provider(tmp_path / "absent.json")))

        assert client.get("/questions.json").status_code == 503

    def test_invalid_file_is_500(self, tmp_path):
        path = tmp_path / "questions.json"
        path.write_text(json.dumps([{"title": "T"}]), encoding="utf-8")
        client = TestClient(create_content_app(file_content_provider(path)))

        assert client.get("/questions.json").status_code == 500

    def test_health(self):
        client = TestClient(create_content_app())

        assert client.get("/health").json() == {"status": "ok"}
