"""Key naming for user records in the key-value store.

``user:{normalized-full-name}`` holds the full name with its original casing and
``user:{redis-key}:password`` holds the guest's shared password.
"""

from __future__ import annotations

from typing import Optional

USER_PREFIX = "user:"


def normalize_full_name(full_name: str) -> str:
    return full_name.strip().lower()


def create_user_key(full_name: str) -> str:
    return f"{USER_PREFIX}{normalize_full_name(full_name)}"


def parse_user_key(key: str) -> Optional[str]:
    """Return the normalised name from a user key, or None for foreign keys."""
    if not key.startswith(USER_PREFIX):
        return None
    return key[len(USER_PREFIX):]


def create_password_key(redis_key: str) -> str:
    return f"{USER_PREFIX}{redis_key}:password"


def validate_full_name(full_name: str) -> bool:
    return isinstance(full_name, str) and len(full_name.strip()) > 0
