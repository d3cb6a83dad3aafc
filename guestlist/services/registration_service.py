"""Guest registration submission.

The applied mark is written only after the backend insert succeeds, so a
registration and its applied mark are never observed out of sync.
"""

import logging
from dataclasses import asdict

from guestlist.domain import GuestRecord, GuestRegistration, PreferenceSet
from guestlist.domain.errors import ValidationError
from guestlist.handlers.serializers import GuestRegistrationSerializer
from guestlist.stores.interfaces import EventRepository, PreferenceStore

logger = logging.getLogger(__name__)


class RegistrationSubmitter:
    """Validates, submits and records guest registrations."""

    def __init__(self, repository: EventRepository, preferences: PreferenceStore) -> None:
        self._repository = repository
        self._preferences = preferences

    def validate(self, request: GuestRegistration) -> GuestRegistration:
        """Return the normalized registration.

        Raises:
            ValidationError: For the first missing required field.
        """
        serializer = GuestRegistrationSerializer(data=asdict(request))
        if not serializer.is_valid():
            field, details = next(iter(serializer.errors.items()))
            raise ValidationError(field=field, message=str(details[0]))
        return serializer.save()

    def submit(self, request: GuestRegistration) -> GuestRecord:
        """Insert a guest record and mark the event as applied.

        Raises:
            ValidationError: Before any network call if a field is missing.
            SubmissionError: If the backend insert fails; preferences untouched.
        """
        registration = self.validate(request)
        record = self._repository.insert_guest(registration)
        self._preferences.add(PreferenceSet.APPLIED, registration.event_id)
        logger.info("Registered for event %s", registration.event_id)
        return record
