"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from guestlist.domain import Event, GuestRecord, GuestRegistration
from guestlist.domain.errors import FetchError, SubmissionError
from guestlist.stores.django_store import DjangoCachePreferenceStore
from guestlist.stores.interfaces import EventRepository

NOW = datetime(2025, 6, 10, 12, 0, tzinfo=timezone.utc)


class FakeEventRepository(EventRepository):
    """In-memory stand-in for the remote backend."""

    def __init__(self, events=None):
        self.events = list(events or [])
        self.fetch_error: str | None = None
        self.insert_error: str | None = None
        self.inserted: list[GuestRegistration] = []
        self.fetch_calls = 0

    def fetch_events(self) -> list[Event]:
        self.fetch_calls += 1
        if self.fetch_error is not None:
            raise FetchError(self.fetch_error)
        return list(self.events)

    def insert_guest(self, registration: GuestRegistration) -> GuestRecord:
        if self.insert_error is not None:
            raise SubmissionError(self.insert_error)
        self.inserted.append(registration)
        return GuestRecord(
            event_id=registration.event_id,
            full_name=registration.full_name,
            role=registration.role,
            company=registration.company,
            email=registration.email,
            additional_request=registration.additional_request,
            id=f"guest-{len(self.inserted)}",
            created_at=NOW,
        )


@pytest.fixture(autouse=True)
def preferences_cache(settings):
    """Keep preference writes in memory for every test."""
    from django.core.cache import caches

    settings.CACHES = {
        "default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache"},
        "preferences": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
            "LOCATION": "guestlist-tests",
            "TIMEOUT": None,
        },
    }
    caches["preferences"].clear()
    yield caches["preferences"]
    caches["preferences"].clear()


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def make_event():
    """Build an Event dated after NOW, with overridable fields."""

    def _make_event(event_id="1", title=None, days_out=30, deadline_days=None, **kwargs):
        deadline = kwargs.pop("registration_deadline", None)
        if deadline is None and deadline_days is not None:
            deadline = NOW + timedelta(days=deadline_days)
        return Event(
            id=str(event_id),
            title=title or f"Event {event_id}",
            date=NOW + timedelta(days=days_out),
            registration_deadline=deadline,
            **kwargs,
        )

    return _make_event


@pytest.fixture
def store() -> DjangoCachePreferenceStore:
    return DjangoCachePreferenceStore()


@pytest.fixture
def repository() -> FakeEventRepository:
    return FakeEventRepository()
