"""Tests for dependency injection."""

import os
from unittest.mock import patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from peerreview.config import SchedulingSettings, clear_settings_cache
from peerreview.dependencies import SchedulingConfig, get_scheduling_settings


class TestGetSchedulingSettings:
    """Test get_scheduling_settings dependency."""

    def test_returns_cached_section(self):
        """Test that the dependency returns the cached scheduling section."""
        assert get_scheduling_settings() is get_scheduling_settings()

    def test_reads_environment(self):
        """Test that the dependency reflects environment overrides."""
        with patch.dict(os.environ, {"SCHEDULING_MAX_TEAM_SIZE": "3"}, clear=True):
            clear_settings_cache()
            assert get_scheduling_settings().max_team_size == 3

    def test_injected_and_overridable(self):
        """Test injection into a route and override through dependency_overrides."""
        app = FastAPI()

        @app.get("/limits")
        def limits(config: SchedulingConfig):
            return {"max_team_size": config.max_team_size}

        app.dependency_overrides[get_scheduling_settings] = lambda: SchedulingSettings(max_team_size=7)
        client = TestClient(app)
        assert client.get("/limits").json() == {"max_team_size": 7}
