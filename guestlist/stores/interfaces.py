"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from guestlist.domain import Event, GuestRecord, GuestRegistration, PreferenceSet, PreferenceSnapshot


class EventRepository(ABC):
    """Interface for the remote event backend."""

    @abstractmethod
    def fetch_events(self) -> list[Event]:
        """Return the full event collection ordered by date ascending.

        Raises:
            FetchError: On transport or deserialization failure.
        """
        ...

    @abstractmethod
    def insert_guest(self, registration: GuestRegistration) -> GuestRecord:
        """Store one guest record and return it as the backend saved it.

        Raises:
            SubmissionError: If the backend rejects or fails the insert.
        """
        ...


class PreferenceStore(ABC):
    """Interface for the on-device applied/wishlisted identifier sets.

    Every mutation is durable before it returns.
    """

    @abstractmethod
    def load(self) -> PreferenceSnapshot:
        """Return both sets. Missing data yields empty sets, never an error."""
        ...

    @abstractmethod
    def add(self, preference_set: PreferenceSet, event_id: str) -> None:
        """Add an id to a set. Adding a present id still persists."""
        ...

    @abstractmethod
    def remove(self, preference_set: PreferenceSet, event_id: str) -> None:
        """Remove an id from a set. Removing an absent id still persists."""
        ...

    @abstractmethod
    def reset_applied(self) -> None:
        """Clear the applied set only."""
        ...

    @abstractmethod
    def reset_wishlisted(self) -> None:
        """Clear the wishlisted set only."""
        ...

    def contains(self, preference_set: PreferenceSet, event_id: str) -> bool:
        snapshot = self.load()
        if preference_set is PreferenceSet.APPLIED:
            return event_id in snapshot.applied
        return event_id in snapshot.wishlisted
