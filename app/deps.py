from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, List

import yaml
from dotenv import load_dotenv

from app.schemas.guest import Event, Guest
from storage.kv.redis_client import KVClient, build_kv_client
from storage.session.store import SessionStore

ROOT = Path(__file__).resolve().parent.parent


def offline_mode_enabled() -> bool:
    """Whether guest records live in an in-memory store rather than Redis.

    WED_OFFLINE=1 forces the memory store and WED_OFFLINE=0 forces Redis. Left unset,
    the memory store is used only while pytest is running.
    """
    flag = os.getenv("WED_OFFLINE", "").strip().lower()
    if flag in ("1", "true", "yes"):
        return True
    if flag in ("0", "false", "no"):
        return False
    return "PYTEST_CURRENT_TEST" in os.environ


def _load_yaml(path: Path) -> Dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


@dataclass
class AppState:
    kv: KVClient
    sessions: SessionStore
    user_mapping: Dict[str, str]
    guests: Dict[str, Guest]
    events: Dict[str, Event]
    offline: bool


@lru_cache(maxsize=1)
def get_app_state() -> AppState:
    load_dotenv(ROOT / ".env")
    user_mapping = {str(name): str(key) for name, key in _load_yaml(ROOT / "config" / "users.yaml").items()}
    guests = {slug: Guest(**data) for slug, data in _load_yaml(ROOT / "config" / "guests.yaml").items()}
    events = {slug: Event(**data) for slug, data in _load_yaml(ROOT / "config" / "events.yaml").items()}

    offline = offline_mode_enabled()
    kv = build_kv_client(
        os.getenv("REDIS_REST_URL"),
        os.getenv("REDIS_REST_TOKEN"),
        redis_url=os.getenv("REDIS_URL"),
        offline=offline,
    )
    session_path = os.getenv("WED_SESSION_PATH")
    sessions = SessionStore(Path(session_path) if session_path and not offline else None)
    return AppState(
        kv=kv,
        sessions=sessions,
        user_mapping=user_mapping,
        guests=guests,
        events=events,
        offline=offline,
    )


def get_kv() -> KVClient:
    return get_app_state().kv


def get_sessions() -> SessionStore:
    return get_app_state().sessions


def get_user_mapping() -> Dict[str, str]:
    return get_app_state().user_mapping


def get_all_display_names() -> List[str]:
    return list(get_user_mapping().keys())


def get_redis_key_for_display_name(display_name: str) -> str | None:
    return get_user_mapping().get(display_name)
