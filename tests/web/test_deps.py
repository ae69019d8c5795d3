"""Tests for FastAPI dependency providers."""

import pytest

from web.deps import get_config, get_store


@pytest.fixture
def fresh_deps(tmp_path, monkeypatch):
    monkeypatch.setenv("MOODBOARD_HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    get_config.cache_clear()
    get_store.cache_clear()
    yield tmp_path
    get_config.cache_clear()
    get_store.cache_clear()


def test_store_is_shared_across_requests(fresh_deps):
    store = get_store()
    assert get_store() is store
    assert store.db_path == fresh_deps / "moods.db"
