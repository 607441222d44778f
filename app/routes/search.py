from __future__ import annotations

from fastapi import APIRouter, Query

from app.deps import get_all_display_names
from app.schemas.auth import SearchResponse
from core.search.name_search import search_display_name

router = APIRouter()


@router.get("/search", response_model=SearchResponse)
def search_endpoint(q: str = Query(default="")) -> SearchResponse:
    return SearchResponse(query=q, matches=search_display_name(q, get_all_display_names()))
