"""Shared test fixtures for the JSON autovalidator.

Provides a watched file in a temp directory, a cooldown state, and settings
with every delay set to zero.
"""

import pytest

from models import WatchSettings, WatchTarget
from state import CooldownState


@pytest.fixture
def settings() -> WatchSettings:
    """Default budgets, no waiting."""
    return WatchSettings(
        debounce_seconds=5.0,
        settle_seconds=0.0,
        retry_delay_seconds=0.0,
        max_retries=5,
        max_edits=64,
    )


@pytest.fixture
def json_path(tmp_path):
    path = tmp_path / "data.json"
    path.write_text('{\n  "a": 1,\n  "b": [1, 2, 3]\n}\n', encoding="utf-8")
    return path


@pytest.fixture
def target(json_path) -> WatchTarget:
    return WatchTarget(path=json_path.resolve())


@pytest.fixture
def cooldown() -> CooldownState:
    return CooldownState()


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
