"""Tests for guest registration submission and the form state around it.

Run with: pytest tests/test_registration.py -v
"""

import pytest

from guestlist.domain import Category, GuestRegistration, PreferenceSet
from guestlist.domain.errors import SubmissionError, ValidationError
from guestlist.handlers.forms import RegistrationForm
from guestlist.services.event_service import EventService
from guestlist.services.registration_service import RegistrationSubmitter
from guestlist.signals import registration_completed


def registration(**overrides) -> GuestRegistration:
    values = {
        "event_id": "1",
        "full_name": "Ada Lovelace",
        "role": "Engineer",
        "company": "Analytical Engines",
        "email": "ada@example.com",
        "additional_request": "",
    }
    values.update(overrides)
    return GuestRegistration(**values)


@pytest.fixture
def submitter(repository, store) -> RegistrationSubmitter:
    return RegistrationSubmitter(repository, store)


class TestRegistrationSubmitter:
    """Tests for RegistrationSubmitter."""

    def test_success_marks_applied(self, submitter, repository, store):
        """A successful insert adds the event to the applied set."""
        record = submitter.submit(registration())
        assert record.id == "guest-1"
        assert store.load().applied == frozenset({"1"})
        assert repository.inserted[0].additional_request is None

    @pytest.mark.parametrize("field", ["full_name", "role", "company", "email"])
    def test_missing_field_fails_before_network(self, submitter, repository, store, field):
        """A blank required field raises ValidationError with no insert attempted."""
        with pytest.raises(ValidationError) as excinfo:
            submitter.submit(registration(**{field: "   "}))
        assert excinfo.value.field == field
        assert repository.inserted == []
        assert store.load().applied == frozenset()

    def test_first_unmet_requirement_reported(self, submitter):
        """With several blanks, the earliest field is named."""
        with pytest.raises(ValidationError) as excinfo:
            submitter.submit(registration(company="", full_name=""))
        assert excinfo.value.field == "full_name"
        assert excinfo.value.message == "Full name is required."

    def test_backend_failure_leaves_applied_untouched(self, submitter, repository, store):
        """A failed insert raises SubmissionError and writes nothing locally."""
        store.add(PreferenceSet.APPLIED, "other")
        repository.insert_error = "duplicate key value violates unique constraint"
        with pytest.raises(SubmissionError) as excinfo:
            submitter.submit(registration())
        assert excinfo.value.message == "duplicate key value violates unique constraint"
        assert store.load().applied == frozenset({"other"})


class TestRegistrationForm:
    """Tests for the transient form state."""

    def fill(self, form: RegistrationForm) -> RegistrationForm:
        form.full_name = "Ada Lovelace"
        form.role = "Engineer"
        form.company = "Analytical Engines"
        form.email = "ada@example.com"
        form.additional_request = "Vegetarian meal"
        return form

    def test_success_clears_fields_and_signals(self, submitter):
        """Success clears the fields, keeps the confirmation and announces it."""
        form = self.fill(RegistrationForm(event_id="1"))
        received = []

        def handler(sender, record, **kwargs):
            received.append(record)

        registration_completed.connect(handler, sender=form)
        try:
            record = form.submit(submitter)
        finally:
            registration_completed.disconnect(handler, sender=form)

        assert record is not None
        assert form.confirmation == record
        assert received == [record]
        assert (form.full_name, form.role, form.company, form.email) == ("", "", "", "")
        assert form.additional_request == ""

    def test_failure_preserves_fields(self, submitter, repository, store):
        """A backend error keeps every value and shows the message verbatim."""
        repository.insert_error = "Service unavailable"
        form = self.fill(RegistrationForm(event_id="1"))
        assert form.submit(submitter) is None
        assert form.error_message == "Service unavailable"
        assert form.full_name == "Ada Lovelace"
        assert form.email == "ada@example.com"
        assert form.additional_request == "Vegetarian meal"
        assert store.load().applied == frozenset()

    def test_validation_error_shown_inline(self, submitter, repository):
        """A missing field is reported on the form without a network call."""
        form = self.fill(RegistrationForm(event_id="1"))
        form.email = ""
        assert form.submit(submitter) is None
        assert form.error_field == "email"
        assert form.error_message == "Email is required."
        assert form.full_name == "Ada Lovelace"
        assert repository.inserted == []

    def test_retry_after_failure(self, submitter, repository):
        """The same form can be resubmitted once the backend recovers."""
        repository.insert_error = "timeout"
        form = self.fill(RegistrationForm(event_id="1"))
        form.submit(submitter)
        repository.insert_error = None
        assert form.submit(submitter) is not None
        assert form.error_message is None


class TestRegistrationRecomposition:
    """Tests for registration feeding back into the view state."""

    def test_closing_soon_event_moves_to_applied(self, repository, store, clock, make_event):
        """After a successful submit the event lands in Applied."""
        repository.events = [make_event("1", deadline_days=2), make_event("2")]
        service = EventService(repository, store, clock=clock)
        service.refresh()
        assert service.view_state.category_of("1") is Category.CLOSING_SOON

        RegistrationSubmitter(repository, store).submit(registration(event_id="1"))

        assert service.view_state.category_of("1") is Category.APPLIED
        assert service.view_state.category_of("2") is Category.OTHER
