"""Guest and event directory lookups backed by the YAML config."""

from __future__ import annotations

from typing import List, Optional

from app.deps import get_app_state, get_redis_key_for_display_name
from app.schemas.common import User
from app.schemas.guest import Event, Guest


def get_guest(slug: str) -> Optional[Guest]:
    return get_app_state().guests.get(slug)


def guest_for_user(user: User) -> Optional[Guest]:
    slug = get_redis_key_for_display_name(user.full_name)
    return get_guest(slug) if slug else None


def events_for_guest(guest: Guest) -> List[Event]:
    """Return the guest's invited events in start-time order, skipping unknown slugs."""
    events = get_app_state().events
    invited = [events[slug] for slug in guest.events if slug in events]
    return sorted(invited, key=lambda event: event.start_time)


def party_for_guest(guest: Guest) -> List[Guest]:
    guests = get_app_state().guests
    return [guests[slug] for slug in guest.party if slug in guests]
