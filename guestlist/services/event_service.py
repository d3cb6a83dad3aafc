"""Event service - session orchestration lives here.

Services:
- Depend only on interfaces (stores)
- Keep the last-known-good event collection and filter state
- Recompose the view state after every input change
- Return domain models or raise domain errors
"""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime

from django.utils import timezone

from guestlist.domain import Event, EventId, FilterState, PreferenceSet, ViewState
from guestlist.domain.errors import EventNotFoundError, InvalidEventIdError
from guestlist.services import composer
from guestlist.services.notifications import NotificationCenter
from guestlist.signals import preferences_changed, view_state_changed
from guestlist.stores.interfaces import EventRepository, PreferenceStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for one catalog session.

    Consumers subscribe to ``view_state_changed`` with this service as sender
    rather than watching individual fields.
    """

    def __init__(
        self,
        repository: EventRepository,
        preferences: PreferenceStore,
        notifications: NotificationCenter | None = None,
        clock: Callable[[], datetime] = timezone.localtime,
    ) -> None:
        self._repository = repository
        self._preferences = preferences
        self._notifications = notifications or NotificationCenter(clock=clock)
        self._clock = clock
        self._events: list[Event] = []
        self._filters = FilterState()
        self._view_state = ViewState()
        preferences_changed.connect(self._on_preferences_changed, sender=preferences)

    @property
    def notifications(self) -> NotificationCenter:
        return self._notifications

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def view_state(self) -> ViewState:
        return self._view_state

    def refresh(self) -> list[Event]:
        """Fetch the collection and recompose.

        Raises:
            FetchError: The previous collection stays in place.
        """
        events = self._repository.fetch_events()
        self._events = list(events)
        self.recompose()
        return self.list_events()

    def list_events(self) -> list[Event]:
        """Return the last fetched collection in source order."""
        return list(self._events)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is blank.
            EventNotFoundError: If the event is not in the collection.
        """
        try:
            key = EventId.from_string(event_id).value
        except ValueError as exc:
            raise InvalidEventIdError() from exc
        for event in self._events:
            if event.id == key:
                return event
        raise EventNotFoundError(key)

    def set_search_text(self, search_text: str) -> ViewState:
        return self._set_filters(FilterState(search_text=search_text, genres=self._filters.genres))

    def set_genres(self, genres: Iterable[str]) -> ViewState:
        return self._set_filters(
            FilterState(search_text=self._filters.search_text, genres=frozenset(genres))
        )

    def clear_filters(self) -> ViewState:
        return self._set_filters(FilterState())

    def available_genres(self) -> list[str]:
        return composer.available_genres(self._events)

    def recompose(self) -> ViewState:
        """Run a composition pass over the current snapshot and publish it."""
        self._view_state = composer.compose_view_state(
            self._events, self._preferences.load(), self._filters, self._clock()
        )
        view_state_changed.send(sender=self, view_state=self._view_state)
        return self._view_state

    def is_applied(self, event_id: str) -> bool:
        return self._preferences.contains(PreferenceSet.APPLIED, event_id)

    def is_wishlisted(self, event_id: str) -> bool:
        return self._preferences.contains(PreferenceSet.WISHLISTED, event_id)

    def toggle_wishlist(self, event_id: str) -> bool:
        """Flip wishlist membership and return whether the event is now wishlisted.

        Raises:
            InvalidEventIdError: If the event_id is blank.
            EventNotFoundError: If the event is not in the collection.
        """
        event = self.get_event(event_id)
        if self.is_wishlisted(event.id):
            self._preferences.remove(PreferenceSet.WISHLISTED, event.id)
            return False
        self._preferences.add(PreferenceSet.WISHLISTED, event.id)
        self._notifications.post(f"'{event.title}' added to wishlist")
        return True

    def remove_from_wishlist(self, event_id: str) -> None:
        """Drop an id from the wishlist, known to the collection or not.

        Raises:
            InvalidEventIdError: If the event_id is blank.
        """
        try:
            key = EventId.from_string(event_id).value
        except ValueError as exc:
            raise InvalidEventIdError() from exc
        self._preferences.remove(PreferenceSet.WISHLISTED, key)

    def wishlist(self) -> list[Event]:
        """Wishlisted events, ignoring the search and genre filters."""
        return composer.wishlist_events(self._events, self._preferences.load().wishlisted)

    def reset_applied(self) -> None:
        self._preferences.reset_applied()

    def reset_wishlist(self) -> None:
        self._preferences.reset_wishlisted()

    def closing_label(self, event: Event) -> str | None:
        return composer.closing_label(event, self._clock())

    def _set_filters(self, filters: FilterState) -> ViewState:
        self._filters = filters
        return self.recompose()

    def _on_preferences_changed(self, sender, **kwargs) -> None:
        self.recompose()
