"""Shared pytest fixtures for scorecard tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from scorecard.app import app
from scorecard.config import reset_settings_cache
from scorecard.games import events, store
from scorecard.telemetry.games import set_games_telemetry_emitter


@pytest.fixture(autouse=True)
def _reset_games_state():
    store._reset_state()
    events._reset_state()
    yield
    store._reset_state()
    events._reset_state()
    set_games_telemetry_emitter(None)
    reset_settings_cache()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
