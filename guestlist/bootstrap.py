"""Entry point for embedding the library in a presentation layer."""

import os

import django

from guestlist.handlers.forms import RegistrationForm
from guestlist.services.event_service import EventService
from guestlist.services.notifications import NotificationCenter
from guestlist.services.registration_service import RegistrationSubmitter
from guestlist.stores.django_store import DjangoCachePreferenceStore
from guestlist.stores.interfaces import EventRepository, PreferenceStore
from guestlist.stores.supabase_store import SupabaseEventRepository


def setup() -> None:
    """Configure Django with guestlist.settings unless a settings module is set."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "guestlist.settings")
    django.setup()


class Session:
    """Default wiring of one catalog session."""

    def __init__(
        self,
        repository: EventRepository | None = None,
        preferences: PreferenceStore | None = None,
        notifications: NotificationCenter | None = None,
    ) -> None:
        self.repository = repository or SupabaseEventRepository.from_settings()
        self.preferences = preferences or DjangoCachePreferenceStore()
        self.events = EventService(self.repository, self.preferences, notifications)
        self.submitter = RegistrationSubmitter(self.repository, self.preferences)

    def registration_form(self, event_id: str) -> RegistrationForm:
        """Start a blank form for an event in the current collection."""
        event = self.events.get_event(event_id)
        return RegistrationForm(event_id=event.id)


def create_event_service(
    repository: EventRepository | None = None,
    preferences: PreferenceStore | None = None,
    notifications: NotificationCenter | None = None,
) -> EventService:
    """Return the EventService of a default-wired Session."""
    return Session(repository, preferences, notifications).events
