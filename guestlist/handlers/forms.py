"""Transient registration form state owned by the presentation layer."""

import logging
from dataclasses import dataclass

from guestlist.domain import GuestRecord, GuestRegistration
from guestlist.domain.errors import SubmissionError, ValidationError
from guestlist.services.registration_service import RegistrationSubmitter
from guestlist.signals import registration_completed

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class RegistrationForm:
    """Field values typed by the user for one event.

    Values are kept on failure so the user can retry, and cleared on success.
    """

    event_id: str
    full_name: str = ""
    role: str = ""
    company: str = ""
    email: str = ""
    additional_request: str = ""
    error_message: str | None = None
    error_field: str | None = None
    confirmation: GuestRecord | None = None

    def to_registration(self) -> GuestRegistration:
        return GuestRegistration(
            event_id=self.event_id,
            full_name=self.full_name,
            role=self.role,
            company=self.company,
            email=self.email,
            additional_request=self.additional_request,
        )

    def clear(self) -> None:
        self.full_name = ""
        self.role = ""
        self.company = ""
        self.email = ""
        self.additional_request = ""
        self.error_message = None
        self.error_field = None

    def submit(self, submitter: RegistrationSubmitter) -> GuestRecord | None:
        """Submit the form, returning the stored record or None on failure.

        Failures are kept on the form for inline display.
        """
        self.error_message = None
        self.error_field = None
        try:
            record = submitter.submit(self.to_registration())
        except ValidationError as exc:
            self.error_field = exc.field
            self.error_message = exc.message
            return None
        except SubmissionError as exc:
            logger.warning("Registration for event %s failed: %s", self.event_id, exc.message)
            self.error_message = exc.message
            return None

        self.clear()
        self.confirmation = record
        registration_completed.send(sender=self, record=record)
        return record
