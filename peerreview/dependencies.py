"""Dependency injection for FastAPI endpoints.

Controllers receive their limits through these dependencies instead of
reading settings directly, so tests can override them with
``app.dependency_overrides``.

Usage in controllers:
    from peerreview.dependencies import SchedulingConfig

    @router.post("/example")
    def example(config: SchedulingConfig):
        return {"min_days": config.default_min_days}
"""

from typing import Annotated

from fastapi import Depends

from peerreview.config import SchedulingSettings, get_settings


def get_scheduling_settings() -> SchedulingSettings:
    """Get the scheduling section of the cached settings."""
    return get_settings().scheduling


SchedulingConfig = Annotated[SchedulingSettings, Depends(get_scheduling_settings)]
