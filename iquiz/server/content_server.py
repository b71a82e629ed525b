"""FastAPI server that publishes quiz content in the download format.

Point the app's source URL at ``http://127.0.0.1:8000/questions.json`` to
work against local content instead of the public sandbox.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from threading import Thread
from typing import Callable

from fastapi import FastAPI, HTTPException
import uvicorn

from iquiz.constants.network_constants import (
    CONTENT_SERVER_HOST,
    CONTENT_SERVER_PATH,
    CONTENT_SERVER_PORT,
)
from iquiz.core.errors import QuizDecodeError
from iquiz.core.quiz_exporter import encode_content
from iquiz.core.remote_decoder import RemoteQuiz, decode_payload
from iquiz.core.seed_content import build_seed_content
from iquiz.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

ContentProvider = Callable[[], list[RemoteQuiz]]


def seed_content_provider() -> list[RemoteQuiz]:
    topics, question_bank = build_seed_content()
    return encode_content(topics, question_bank)


def file_content_provider(file_path: Path) -> ContentProvider:
    """Serve the quiz file at ``file_path``, re-reading it on every request."""

    def provide() -> list[RemoteQuiz]:
        decoded = decode_payload(file_path.read_bytes(), strict=True)
        return encode_content(decoded.topics, decoded.question_bank)

    return provide


def create_content_app(provider: ContentProvider = seed_content_provider) -> FastAPI:
    """Create a FastAPI application serving the content returned by ``provider``."""
    app = FastAPI(title="iQuiz Content Server", version="0.1.0")

    @app.get(CONTENT_SERVER_PATH, response_model=list[RemoteQuiz])
    def get_questions() -> list[RemoteQuiz]:
        try:
            return provider()
        except OSError as exc:
            logger.error("Quiz content unavailable: %s", exc)
            raise HTTPException(status_code=503, detail="Quiz content unavailable.") from exc
        except QuizDecodeError as exc:
            logger.error("Quiz content is invalid: %s", exc)
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


def start_content_server(
    provider: ContentProvider = seed_content_provider,
    host: str = CONTENT_SERVER_HOST,
    port: int = CONTENT_SERVER_PORT,
) -> tuple[uvicorn.Server, Thread]:
    """Start the FastAPI server in a background daemon thread.

    Set ``should_exit`` on the returned server to stop it.
    """
    app = create_content_app(provider)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuizContentServer", daemon=True)
    thread.start()
    return server, thread


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Serve iQuiz content over HTTP.")
    parser.add_argument("path", nargs="?", type=Path, help="quiz JSON file (defaults to the built-in quizzes)")
    parser.add_argument("--host", default=CONTENT_SERVER_HOST)
    parser.add_argument("--port", type=int, default=CONTENT_SERVER_PORT)
    args = parser.parse_args(argv)

    configure_logging()
    provider = file_content_provider(args.path) if args.path else seed_content_provider
    logger.info("Serving quiz content at http://%s:%d%s", args.host, args.port, CONTENT_SERVER_PATH)
    uvicorn.run(create_content_app(provider), host=args.host, port=args.port, log_level="info")


if __name__ == "__main__":
    main()
