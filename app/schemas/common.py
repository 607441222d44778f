from __future__ import annotations

from pydantic import BaseModel


class User(BaseModel):
    """Signed-in guest as kept in the session store."""

    normalized_name: str
    full_name: str
