"""Hypothesis profiles and pytest fixtures for secid."""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from support import RecordingObserver

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# FIXTURES
# ===================================================================


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()
