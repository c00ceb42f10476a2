"""Tests for centralized configuration."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError


class TestSchedulingSettings:
    """Test scheduling limits and defaults."""

    def test_default_values(self):
        """Test scheduling settings have sensible defaults."""
        from peerreview.config import SchedulingSettings

        with patch.dict(os.environ, {}, clear=True):
            settings = SchedulingSettings()
            assert settings.default_min_days == 5
            assert settings.max_team_size == 20
            assert settings.max_period_days == 366
            assert settings.summary_workers == 4
            assert settings.max_recurrence_occurrences == 100

    def test_from_environment(self):
        """Test scheduling settings are loaded from SCHEDULING_ variables."""
        from peerreview.config import SchedulingSettings

        env = {
            "SCHEDULING_DEFAULT_MIN_DAYS": "3",
            "SCHEDULING_MAX_TEAM_SIZE": "8",
            "SCHEDULING_MAX_PERIOD_DAYS": "90",
            "SCHEDULING_SUMMARY_WORKERS": "0",
            "SCHEDULING_MAX_RECURRENCE_OCCURRENCES": "12",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = SchedulingSettings()
            assert settings.default_min_days == 3
            assert settings.max_team_size == 8
            assert settings.max_period_days == 90
            assert settings.summary_workers == 0
            assert settings.max_recurrence_occurrences == 12

    def test_rejects_non_positive_min_days(self):
        """Test that a zero minimum window length is rejected."""
        from peerreview.config import SchedulingSettings

        with patch.dict(os.environ, {"SCHEDULING_DEFAULT_MIN_DAYS": "0"}, clear=True):
            with pytest.raises(ValidationError):
                SchedulingSettings()


class TestCorsSettings:
    """Test CORS configuration settings."""

    def test_cors_default_values(self):
        """Test CORS settings have sensible defaults."""
        from peerreview.config import CorsSettings

        with patch.dict(os.environ, {}, clear=True):
            settings = CorsSettings()
            assert "http://localhost:3000" in settings.origins
            assert settings.allow_credentials is True

    def test_cors_origins_are_split(self):
        """Test comma-separated origins are split and blanks dropped."""
        from peerreview.config import CorsSettings

        env = {"CORS_ORIGINS": "https://a.example, https://b.example,"}
        with patch.dict(os.environ, env, clear=True):
            assert CorsSettings().origins == ["https://a.example", "https://b.example"]

    def test_cors_wildcard_disables_credentials(self):
        """Test that wildcard origin disables credentials."""
        from peerreview.config import CorsSettings

        with patch.dict(os.environ, {"CORS_ORIGINS": "*"}, clear=True):
            settings = CorsSettings()
            assert settings.origins == ["*"]
            assert settings.allow_credentials is False


class TestSettings:
    """Test main Settings class that combines all settings."""

    def test_settings_singleton_pattern(self):
        """Test that get_settings returns the same instance."""
        from peerreview.config import get_settings

        assert get_settings() is get_settings()

    def test_clear_settings_cache(self):
        """Test that clearing the cache builds a fresh instance."""
        from peerreview.config import clear_settings_cache, get_settings

        s1 = get_settings()
        clear_settings_cache()
        assert get_settings() is not s1

    def test_settings_has_all_subsections(self):
        """Test that Settings contains all configuration sections."""
        from peerreview.config import Settings

        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
            assert hasattr(settings, "scheduling")
            assert hasattr(settings, "cors")
            assert hasattr(settings, "debug")
            assert hasattr(settings, "logging")

    def test_debug_settings(self):
        """Test the REQUEST_DEBUG flag parsing."""
        from peerreview.config import Settings

        with patch.dict(os.environ, {"REQUEST_DEBUG": "1"}, clear=True):
            assert Settings().debug.request is True
        with patch.dict(os.environ, {"REQUEST_DEBUG": "no"}, clear=True):
            assert Settings().debug.request is False

    def test_log_level_is_normalized(self):
        """Test LOG_LEVEL default and upper-casing."""
        from peerreview.config import Settings

        with patch.dict(os.environ, {}, clear=True):
            assert Settings().logging.level == "INFO"
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            assert Settings().logging.level == "DEBUG"
