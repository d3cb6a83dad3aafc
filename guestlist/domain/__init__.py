from guestlist.domain.models import (
    Category,
    Event,
    EventCard,
    FilterState,
    GuestRecord,
    GuestRegistration,
    PreferenceSnapshot,
    ViewState,
)
from guestlist.domain.value_objects import Capacity, EventId, PreferenceSet

__all__ = [
    "Event",
    "GuestRegistration",
    "GuestRecord",
    "PreferenceSnapshot",
    "FilterState",
    "Category",
    "EventCard",
    "ViewState",
    "EventId",
    "PreferenceSet",
    "Capacity",
]
