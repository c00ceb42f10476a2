import os
import sys
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

import pytest
from fastapi.testclient import TestClient

from peerreview.config import SchedulingSettings, clear_settings_cache
from peerreview.dependencies import get_scheduling_settings
import peerreview.main as main


@pytest.fixture
def scheduling_settings():
    return SchedulingSettings(
        default_min_days=5,
        max_team_size=5,
        max_period_days=120,
        summary_workers=2,
        max_recurrence_occurrences=10,
    )


@pytest.fixture
def client(scheduling_settings):
    main.app.dependency_overrides[get_scheduling_settings] = lambda: scheduling_settings
    with TestClient(main.app) as c:
        yield c
    main.app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _fresh_settings():
    clear_settings_cache()
    yield
    clear_settings_cache()
