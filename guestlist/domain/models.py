"""Domain models for the event catalog and the user's relationship to it.

These are pure domain objects with no wire-format rules.
Serialization lives in guestlist/handlers/serializers.py.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from guestlist.domain.value_objects import Capacity


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: str
    title: str
    date: datetime
    description: str | None = None
    location: str | None = None
    registration_deadline: datetime | None = None
    genres: tuple[str, ...] | None = None
    capacity: Capacity | None = None
    note: str | None = None
    image_ref: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class GuestRegistration:
    """A registration as entered by the user, before validation."""

    event_id: str
    full_name: str
    role: str
    company: str
    email: str
    additional_request: str | None = None


@dataclass(frozen=True)
class GuestRecord:
    """A registration as stored by the backend.

    The backend generates ``id`` and ``created_at``.
    """

    event_id: str
    full_name: str
    role: str
    company: str
    email: str
    additional_request: str | None = None
    id: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class PreferenceSnapshot:
    """Immutable copy of the locally persisted identifier sets."""

    applied: frozenset[str] = frozenset()
    wishlisted: frozenset[str] = frozenset()


@dataclass(frozen=True)
class FilterState:
    """User-entered filters applied before categorization."""

    search_text: str = ""
    genres: frozenset[str] = frozenset()

    @property
    def is_active(self) -> bool:
        return bool(self.search_text) or bool(self.genres)


class Category(Enum):
    """Mutually exclusive view-state categories, in priority order."""

    APPLIED = "applied"
    CLOSING_SOON = "closing_soon"
    OTHER = "other"


@dataclass(frozen=True)
class EventCard:
    """Render-ready view model for one event in one composition pass."""

    event: Event
    category: Category
    days_until_deadline: int | None = None
    closing_label: str | None = None
    is_wishlisted: bool = False

    @property
    def event_id(self) -> str:
        return self.event.id


@dataclass(frozen=True)
class ViewState:
    """Output of one composition pass."""

    applied: tuple[EventCard, ...] = ()
    closing_soon: tuple[EventCard, ...] = ()
    other: tuple[EventCard, ...] = ()
    filters: FilterState = field(default_factory=FilterState)

    def cards(self, category: Category) -> tuple[EventCard, ...]:
        return {
            Category.APPLIED: self.applied,
            Category.CLOSING_SOON: self.closing_soon,
            Category.OTHER: self.other,
        }[category]

    def all_cards(self) -> tuple[EventCard, ...]:
        return self.applied + self.closing_soon + self.other

    def category_of(self, event_id: str) -> Category | None:
        """Return the category an event landed in, or None if filtered out."""
        for card in self.all_cards():
            if card.event.id == event_id:
                return card.category
        return None

    @property
    def is_empty(self) -> bool:
        return not (self.applied or self.closing_soon or self.other)
