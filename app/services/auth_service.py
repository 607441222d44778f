"""Two-step sign-in: resolve the typed name, then check the shared password."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from fastapi import HTTPException, status

from app.deps import get_all_display_names, get_redis_key_for_display_name, get_sessions
from app.schemas.auth import NameLookupResponse
from app.schemas.common import User
from app.services.user_service import validate_password
from app.utils.tracing import traced_span
from core.search.name_search import search_display_name
from storage.kv.keys import normalize_full_name

logger = logging.getLogger(__name__)


def lookup_name(name: str) -> NameLookupResponse:
    if not name.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="NAME_REQUIRED")
    with traced_span("auth.lookup"):
        matches = search_display_name(name.strip(), get_all_display_names())
    if not matches:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="NAME_NOT_FOUND")
    # Ambiguous names resolve to the top-ranked match until there is a picker.
    return NameLookupResponse(matched=matches[0], matches=matches, ambiguous=len(matches) > 1)


def sign_in(display_name: str, password: str) -> Tuple[str, User]:
    if not password.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="PASSWORD_REQUIRED")
    redis_key = get_redis_key_for_display_name(display_name)
    if not redis_key:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="INVALID_USER_CONFIGURATION")
    if not validate_password(redis_key, password.strip()):
        logger.info("Rejected password for %s", redis_key)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="INCORRECT_PASSWORD")

    user = User(normalized_name=normalize_full_name(display_name), full_name=display_name)
    token = get_sessions().create(user)
    logger.info("Signed in %s", redis_key)
    return token, user


def sign_out(token: Optional[str]) -> None:
    get_sessions().delete(token)


def current_user(token: Optional[str]) -> User:
    user = get_sessions().load(token)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="NOT_SIGNED_IN")
    return user
