from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from app.schemas.common import User


class NameLookupRequest(BaseModel):
    name: str


class NameLookupResponse(BaseModel):
    matched: str
    matches: List[str]
    ambiguous: bool = False


class SignInRequest(BaseModel):
    display_name: str = Field(..., description="Display name returned by /auth/lookup")
    password: str


class SignInResponse(BaseModel):
    user: User


class SearchResponse(BaseModel):
    query: str
    matches: List[str]


class HomeResponse(BaseModel):
    welcome: str
    user: User
    actions: List[str]
