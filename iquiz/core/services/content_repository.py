"""Service owning the topic list and question bank shown by the app."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, QUrl, Signal

from iquiz.constants.network_constants import ALLOWED_URL_SCHEMES
from iquiz.constants.quiz_constants import MAX_TIMER_INTERVAL_MS, SECONDS_PER_MINUTE
from iquiz.core.errors import ContentError, InvalidConfigurationError
from iquiz.core.models import Question, QuestionBank, RepositoryConfig, Topic
from iquiz.core.preferences import PreferenceStore
from iquiz.core.remote_decoder import decode_payload
from iquiz.core.services.content_fetcher import ContentFetcher, NetworkFetcher

logger = logging.getLogger(__name__)


class ContentRepository(QObject):
    """Keeps quiz content in sync with the configured source URL.

    Topics and question bank are only ever replaced together. Fetches are not
    cancelled or de-duplicated: when several overlap, whichever finishes last
    wins. Failures never propagate to the caller; they land in a single error
    slot that the UI reads through ``error_changed``.
    """

    topics_changed = Signal(object)
    question_bank_changed = Signal(object)
    error_changed = Signal(object)
    config_changed = Signal(object)

    def __init__(
        self,
        fetcher: ContentFetcher | None = None,
        preferences: PreferenceStore | None = None,
        parent: QObject | None = None,
        *,
        strict_decoding: bool = False,
    ) -> None:
        super().__init__(parent)
        self._fetcher = fetcher if fetcher is not None else NetworkFetcher(self)
        self._preferences = preferences if preferences is not None else PreferenceStore()
        self._strict_decoding = strict_decoding

        self._config: RepositoryConfig = self._preferences.load()
        self._topics: list[Topic] = []
        self._question_bank: QuestionBank = {}
        self._error: ContentError | None = None
        self._refresh_timer: QTimer | None = None
        self._request_counter: int = 0

        self._schedule_refresh()

    # --- Configuration ---

    def configure(self, url: str, interval_minutes: int) -> None:
        """Store new source settings and re-arm the periodic refresh."""
        interval_minutes = self._validate_interval(interval_minutes)
        self._config = RepositoryConfig(source_url=url.strip(), refresh_interval_minutes=interval_minutes)
        self._preferences.save(self._config)
        logger.info("Content source set to %s (refresh every %d min)", self._config.source_url, interval_minutes)
        self.config_changed.emit(self._config)
        self._schedule_refresh()

    def get_config(self) -> RepositoryConfig:
        return self._config

    def is_refresh_scheduled(self) -> bool:
        return self._refresh_timer is not None and self._refresh_timer.isActive()

    def get_refresh_interval_ms(self) -> int | None:
        if not self.is_refresh_scheduled():
            return None
        return self._refresh_timer.interval()

    # --- Fetching ---

    def fetch_now(self) -> bool:
        """Start one download of the configured URL.

        Returns ``False`` when no request was issued because the URL is
        invalid; the error slot is set in that case.
        """
        try:
            url = self._parse_source_url(self._config.source_url)
        except InvalidConfigurationError as exc:
            self._set_error(exc)
            return False

        self._request_counter += 1
        request_id = self._request_counter
        logger.info("Fetching quiz content (request %d) from %s", request_id, url.toString())
        self._fetcher.fetch(
            url,
            lambda payload: self._handle_payload(request_id, payload),
            lambda error: self._handle_failure(request_id, error),
        )
        return True

    def _handle_payload(self, request_id: int, payload: bytes) -> None:
        try:
            decoded = decode_payload(payload, strict=self._strict_decoding)
        except ContentError as exc:
            self._handle_failure(request_id, exc)
            return
        logger.info(
            "Request %d loaded %d topics", request_id, len(decoded.topics)
        )
        self.replace_content(decoded.topics, decoded.question_bank)
        self._set_error(None)

    def _handle_failure(self, request_id: int, error: ContentError) -> None:
        logger.warning("Request %d failed: %s", request_id, error)
        self._set_error(error)

    # --- Content ---

    def replace_content(self, topics: list[Topic], question_bank: QuestionBank) -> None:
        """Swap in a new topic list and question bank together."""
        self._topics = list(topics)
        self._question_bank = {title: list(questions) for title, questions in question_bank.items()}
        self.topics_changed.emit(self.get_topics())
        self.question_bank_changed.emit(self.get_question_bank())

    def get_topics(self) -> list[Topic]:
        return list(self._topics)

    def get_question_bank(self) -> QuestionBank:
        return {title: list(questions) for title, questions in self._question_bank.items()}

    def get_questions_for(self, title: str) -> list[Question]:
        return list(self._question_bank.get(title, []))

    # --- Errors ---

    def get_error(self) -> ContentError | None:
        return self._error

    def get_error_message(self) -> str | None:
        return str(self._error) if self._error is not None else None

    def clear_error(self) -> None:
        self._set_error(None)

    def _set_error(self, error: ContentError | None) -> None:
        if error is None and self._error is None:
            return
        self._error = error
        self.error_changed.emit(self.get_error_message())

    # --- Internals ---

    def _schedule_refresh(self) -> None:
        self._cancel_refresh()
        minutes = self._config.refresh_interval_minutes
        if minutes <= 0:
            return
        timer = QTimer(self)
        timer.setInterval(minutes * SECONDS_PER_MINUTE * 1000)
        timer.timeout.connect(self.fetch_now)
        timer.start()
        self._refresh_timer = timer
        logger.info("Periodic refresh armed every %d min", minutes)

    def _cancel_refresh(self) -> None:
        if self._refresh_timer is None:
            return
        self._refresh_timer.stop()
        self._refresh_timer.deleteLater()
        self._refresh_timer = None
        logger.info("Periodic refresh cancelled")

    @staticmethod
    def _validate_interval(interval_minutes: int) -> int:
        if isinstance(interval_minutes, bool) or not isinstance(interval_minutes, int):
            raise InvalidConfigurationError("Refresh interval must be a whole number of minutes.")
        if interval_minutes < 0:
            raise InvalidConfigurationError("Refresh interval cannot be negative.")
        if interval_minutes * SECONDS_PER_MINUTE * 1000 > MAX_TIMER_INTERVAL_MS:
            raise InvalidConfigurationError("Refresh interval is too long.")
        return interval_minutes

    @staticmethod
    def _parse_source_url(source_url: str) -> QUrl:
        url = QUrl(source_url.strip(), QUrl.ParsingMode.StrictMode)
        if (
            not source_url.strip()
            or not url.isValid()
            or url.scheme().lower() not in ALLOWED_URL_SCHEMES
            or not url.host()
        ):
            raise InvalidConfigurationError(f"Invalid URL: {source_url}")
        return url
