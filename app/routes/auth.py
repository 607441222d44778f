from __future__ import annotations

from fastapi import APIRouter, Cookie, Response

from app.schemas.auth import NameLookupRequest, NameLookupResponse, SignInRequest, SignInResponse
from app.services.auth_service import lookup_name, sign_in, sign_out
from storage.session.store import STORAGE_KEY

router = APIRouter(prefix="/auth")


@router.post("/lookup", response_model=NameLookupResponse)
def lookup_endpoint(payload: NameLookupRequest) -> NameLookupResponse:
    return lookup_name(payload.name)


@router.post("/sign-in", response_model=SignInResponse)
def sign_in_endpoint(payload: SignInRequest, response: Response) -> SignInResponse:
    token, user = sign_in(payload.display_name, payload.password)
    response.set_cookie(STORAGE_KEY, token, httponly=True, samesite="lax")
    return SignInResponse(user=user)


@router.post("/sign-out")
def sign_out_endpoint(response: Response, wed_user: str | None = Cookie(default=None)) -> dict:
    sign_out(wed_user)
    response.delete_cookie(STORAGE_KEY)
    return {"status": "ok"}
