from __future__ import annotations

from fastapi import APIRouter, Cookie

from app.schemas.auth import HomeResponse
from app.schemas.guest import ScheduleResponse
from app.services.auth_service import current_user
from app.services.guest_service import events_for_guest, guest_for_user

router = APIRouter()

HOME_ACTIONS = ["RSVP", "Schedule", "Gift"]


@router.get("/home", response_model=HomeResponse)
def home_endpoint(wed_user: str | None = Cookie(default=None)) -> HomeResponse:
    user = current_user(wed_user)
    return HomeResponse(welcome=f"Welcome, {user.full_name}!", user=user, actions=HOME_ACTIONS)


@router.get("/schedule", response_model=ScheduleResponse)
def schedule_endpoint(wed_user: str | None = Cookie(default=None)) -> ScheduleResponse:
    user = current_user(wed_user)
    guest = guest_for_user(user)
    events = events_for_guest(guest) if guest else []
    return ScheduleResponse(guest=user.full_name, events=events)
