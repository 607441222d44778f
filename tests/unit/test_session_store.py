from __future__ import annotations

from app.schemas.common import User
from storage.session.store import STORAGE_KEY, SessionStore

EMILY = User(normalized_name="emily kwan", full_name="Emily Kwan")


def test_create_load_delete():
    store = SessionStore()
    token = store.create(EMILY)
    assert store.load(token) == EMILY
    assert store.load(None) is None
    store.delete(token)
    assert store.load(token) is None


def test_snapshot_survives_restart(tmp_path):
    path = tmp_path / "sessions.json"
    token = SessionStore(path).create(EMILY)
    assert STORAGE_KEY in path.read_text(encoding="utf-8")
    assert SessionStore(path).load(token) == EMILY


def test_corrupt_snapshot_starts_empty(tmp_path):
    path = tmp_path / "sessions.json"
    path.write_text("{not json", encoding="utf-8")
    store = SessionStore(path)
    assert store.sessions == {}
    token = store.create(EMILY)
    assert SessionStore(path).load(token) == EMILY
