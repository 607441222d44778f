from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class Event(BaseModel):
    slug: str
    name: str
    start_time: datetime
    location: str
    description: str
    attire: Optional[str] = None
    rsvpable: bool = True


class Guest(BaseModel):
    slug: str
    first: str
    last: str
    nickname: Optional[str] = None
    party: List[str] = Field(default_factory=list, description="Slugs of guests in the same party")
    events: List[str] = Field(default_factory=list, description="Slugs of events the guest is invited to")

    @property
    def display_name(self) -> str:
        return f"{self.first} {self.last}"


class ScheduleResponse(BaseModel):
    guest: str
    events: List[Event]
