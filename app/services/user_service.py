"""User record lookups against the key-value store."""

from __future__ import annotations

import secrets
from typing import Optional

from app.deps import get_kv
from app.schemas.common import User
from storage.kv.keys import (
    USER_PREFIX,
    create_password_key,
    create_user_key,
    normalize_full_name,
    validate_full_name,
)


def find_user_by_full_name(full_name: str) -> Optional[User]:
    if not validate_full_name(full_name):
        return None
    stored_name = get_kv().get(create_user_key(full_name))
    if not stored_name:
        return None
    return User(normalized_name=normalize_full_name(full_name), full_name=stored_name)


def get_user(normalized_name: str) -> Optional[User]:
    full_name = get_kv().get(f"{USER_PREFIX}{normalized_name}")
    if not full_name:
        return None
    return User(normalized_name=normalized_name, full_name=full_name)


def set_user(full_name: str) -> Optional[User]:
    """Create or update the record for ``full_name``, keeping its casing."""
    if not validate_full_name(full_name):
        return None
    if not get_kv().set(create_user_key(full_name), full_name):
        return None
    return User(normalized_name=normalize_full_name(full_name), full_name=full_name)


def set_password(redis_key: str, password: str) -> bool:
    if not password:
        return False
    return get_kv().set(create_password_key(redis_key), password)


def validate_password(redis_key: str, password: str) -> bool:
    """Return True only when a password is stored for the guest and it matches."""
    stored = get_kv().get(create_password_key(redis_key))
    if stored is None:
        return False
    return secrets.compare_digest(stored.encode("utf-8"), password.encode("utf-8"))
