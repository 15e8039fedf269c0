# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets environment variables before the app is imported and provides
# deterministic collaborators (random source, clock) for all tests.
# =============================================================================

import datetime as dt
import os
from collections import deque

os.environ.setdefault("ENV", "development")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("APP_NAME", "VK API")

import pytest
from fastapi.testclient import TestClient

TODAY = dt.date(2025, 6, 15)


class ScriptedRandom:
    """RandomSource that replays queued values and records every draw."""

    def __init__(self, ints=(), picks=()):
        self.ints = deque(ints)
        self.picks = deque(picks)
        self.int_calls = []
        self.choice_calls = []

    def next_int(self, low, high):
        self.int_calls.append((low, high))
        return self.ints.popleft() if self.ints else low

    def choice(self, options):
        self.choice_calls.append(tuple(options))
        index = self.picks.popleft() if self.picks else 0
        return options[index]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def service(rng, today):
    from vkapi.services.forecast_service import WeatherForecastService

    return WeatherForecastService(rng=rng, today=lambda: today)


@pytest.fixture
def client(rng, today):
    from vkapi.api.deps import get_clock, get_random_source
    from vkapi.main import app

    app.dependency_overrides[get_random_source] = lambda: rng
    app.dependency_overrides[get_clock] = lambda: (lambda: today)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
