"""
Tests for PreferenceStore - persisted source URL and refresh interval
"""

from PySide6.QtCore import QSettings

from iquiz.constants.network_constants import (
    DEFAULT_REFRESH_INTERVAL_MINUTES,
    DEFAULT_SOURCE_URL,
)
from iquiz.core.models import RepositoryConfig
from iquiz.core.preferences import REFRESH_INTERVAL_KEY, SOURCE_URL_KEY, PreferenceStore


class TestPreferenceStore:

    def test_defaults_when_nothing_stored(self, preferences):
        config = preferences.load()

        assert config.source_url == DEFAULT_SOURCE_URL
        assert config.refresh_interval_minutes == DEFAULT_REFRESH_INTERVAL_MINUTES

    def test_values_survive_a_new_store(self, tmp_path):
        path = str(tmp_path / "prefs.ini")
        PreferenceStore(QSettings(path, QSettings.IniFormat)).save(
            RepositoryConfig("https://example.test/q.json", 45)
        )

        reloaded = PreferenceStore(QSettings(path, QSettings.IniFormat)).load()

        assert reloaded == RepositoryConfig("https://example.test/q.json", 45)

    def test_garbage_interval_falls_back_to_default(self, settings, preferences):
        settings.setValue(REFRESH_INTERVAL_KEY, "soon")

        assert preferences.load().refresh_interval_minutes == DEFAULT_REFRESH_INTERVAL_MINUTES

    def test_negative_interval_falls_back_to_default(self, settings, preferences):
        settings.setValue(REFRESH_INTERVAL_KEY, -5)

        assert preferences.load().refresh_interval_minutes == DEFAULT_REFRESH_INTERVAL_MINUTES

    def test_empty_url_falls_back_to_default(self, settings, preferences):
        settings.setValue(SOURCE_URL_KEY, "")

        assert preferences.load().source_url == DEFAULT_SOURCE_URL

    def test_interval_beyond_timer_range_falls_back_to_default(self, settings, preferences):
        settings.setValue(REFRESH_INTERVAL_KEY, 100_000)

        config = preferences.load()

        assert config.refresh_interval_minutes == DEFAULT_REFRESH_INTERVAL_MINUTES

    def test_largest_timer_interval_is_kept(self, settings, preferences):
        settings.setValue(REFRESH_INTERVAL_KEY, 35_791)

        assert preferences.load().refresh_interval_minutes == 35_791
