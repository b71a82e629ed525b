"""Persistent storage for the content source preferences."""

from __future__ import annotations

import logging

from PySide6.QtCore import QSettings

from iquiz.constants.about import APP_NAME, APP_ORGANIZATION
from iquiz.constants.quiz_constants import MAX_TIMER_INTERVAL_MS, SECONDS_PER_MINUTE
from iquiz.core.models import RepositoryConfig

logger = logging.getLogger(__name__)

SOURCE_URL_KEY = "quizSourceURL"
REFRESH_INTERVAL_KEY = "refreshInterval"


class PreferenceStore:
    """Reads and writes ``RepositoryConfig`` through ``QSettings``."""

    def __init__(self, settings: QSettings | None = None) -> None:
        self._settings = settings if settings is not None else QSettings(APP_ORGANIZATION, APP_NAME)

    def load(self) -> RepositoryConfig:
        defaults = RepositoryConfig()
        source_url = self._settings.value(SOURCE_URL_KEY, defaults.source_url, type=str)
        raw_interval = self._settings.value(
            REFRESH_INTERVAL_KEY, defaults.refresh_interval_minutes
        )
        try:
            interval = int(raw_interval)
        except (TypeError, ValueError):
            logger.warning("Ignoring stored refresh interval %r", raw_interval)
            interval = defaults.refresh_interval_minutes
        if interval < 0 or interval * SECONDS_PER_MINUTE * 1000 > MAX_TIMER_INTERVAL_MS:
            logger.warning("Ignoring out-of-range refresh interval %d", interval)
            interval = defaults.refresh_interval_minutes
        return RepositoryConfig(source_url=source_url or defaults.source_url, refresh_interval_minutes=interval)

    def save(self, config: RepositoryConfig) -> None:
        self._settings.setValue(SOURCE_URL_KEY, config.source_url)
        self._settings.setValue(REFRESH_INTERVAL_KEY, config.refresh_interval_minutes)
        self._settings.sync()
