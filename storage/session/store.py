"""Session persistence for signed-in guests with optional JSON snapshots."""

from __future__ import annotations

import json
import logging
import secrets
from pathlib import Path
from typing import Dict, Optional

from app.schemas.common import User

# Cookie name and snapshot key for the signed-in guest.
STORAGE_KEY = "wed_user"
logger = logging.getLogger(__name__)


class SessionStore:
    """Maps opaque session tokens to the guest who signed in with them."""

    def __init__(self, persist_path: Optional[Path] = None):
        self.sessions: Dict[str, User] = {}
        self.persist_path = persist_path
        if self.persist_path:
            self._load_from_disk()

    def create(self, user: User) -> str:
        token = secrets.token_urlsafe(24)
        self.sessions[token] = user
        self._persist()
        return token

    def load(self, token: Optional[str]) -> Optional[User]:
        if not token:
            return None
        return self.sessions.get(token)

    def delete(self, token: Optional[str]) -> None:
        if token and self.sessions.pop(token, None) is not None:
            self._persist()

    def clear(self) -> None:
        self.sessions.clear()
        self._persist()

    def _persist(self) -> None:
        if not self.persist_path:
            return
        snapshot = {STORAGE_KEY: {token: user.model_dump() for token, user in self.sessions.items()}}
        try:
            self.persist_path.parent.mkdir(parents=True, exist_ok=True)
            self.persist_path.write_text(json.dumps(snapshot), encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to save sessions to %s: %s", self.persist_path, exc)

    def _load_from_disk(self) -> None:
        """Restore sessions from the snapshot; a bad snapshot starts empty."""
        if not self.persist_path or not self.persist_path.exists():
            return
        try:
            payload = json.loads(self.persist_path.read_text(encoding="utf-8"))
            stored = payload.get(STORAGE_KEY, {})
            self.sessions = {token: User(**data) for token, data in stored.items()}
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            logger.warning("Failed to load sessions from %s: %s", self.persist_path, exc)
            self.sessions = {}
