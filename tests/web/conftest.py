"""Shared fixtures for web API tests."""

import pytest
from fastapi.testclient import TestClient

from mood.storage import MoodStore
from web.deps import get_bucketing_tz, get_store, get_week_start


@pytest.fixture
def web_store(tmp_path):
    return MoodStore(tmp_path / "web-moods.db")


@pytest.fixture
def auth_headers():
    return {"X-User-Id": "user-123"}


@pytest.fixture
def auth_headers_b():
    """Second user for isolation tests."""
    return {"X-User-Id": "user-456"}


@pytest.fixture
def client(web_store, tmp_path, monkeypatch):
    """Test client backed by a fresh store, Sunday weeks and host-local bucketing."""
    monkeypatch.setenv("MOODBOARD_HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)

    from web.app import app

    app.dependency_overrides[get_store] = lambda: web_store
    app.dependency_overrides[get_week_start] = lambda: "sunday"
    app.dependency_overrides[get_bucketing_tz] = lambda: None

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
