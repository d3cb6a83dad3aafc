"""Supabase (PostgREST) implementation of the EventRepository."""

import logging
from typing import Self

import requests
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from guestlist.domain import Event, GuestRecord, GuestRegistration
from guestlist.domain.errors import FetchError, SubmissionError
from guestlist.handlers.serializers import (
    EventSerializer,
    GuestPayloadSerializer,
    GuestRecordSerializer,
)
from guestlist.stores.interfaces import EventRepository

logger = logging.getLogger(__name__)


class SupabaseEventRepository(EventRepository):
    """Reads events and inserts guests through the Supabase REST API.

    No retries and no pagination: a fetch returns the whole collection in one
    call, and retrying is up to the caller.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        events_table: str = "events",
        guests_table: str = "guests",
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url or not api_key:
            raise ImproperlyConfigured("Supabase URL and API key are required")
        self._rest_url = f"{base_url.rstrip('/')}/rest/v1"
        self._api_key = api_key
        self._events_table = events_table
        self._guests_table = guests_table
        self._timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls, session: requests.Session | None = None) -> Self:
        conf = settings.GUESTLIST
        return cls(
            base_url=conf["SUPABASE_URL"],
            api_key=conf["SUPABASE_KEY"],
            events_table=conf["EVENTS_TABLE"],
            guests_table=conf["GUESTS_TABLE"],
            timeout=conf["REQUEST_TIMEOUT"],
            session=session,
        )

    def _get_headers(self) -> dict:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def fetch_events(self) -> list[Event]:
        logger.info("Fetching events from %s", self._events_table)
        try:
            response = self._session.request(
                "GET",
                f"{self._rest_url}/{self._events_table}",
                params={"select": "*", "order": "date.asc"},
                headers=self._get_headers(),
                timeout=self._timeout,
            )
            response.raise_for_status()
            rows = response.json()
        except requests.RequestException as exc:
            logger.error("Fetching events failed: %s", exc)
            raise FetchError(str(exc)) from exc
        except ValueError as exc:
            logger.error("Events response is not JSON: %s", exc)
            raise FetchError("Could not read the events response") from exc

        if not isinstance(rows, list):
            raise FetchError("Unexpected events response shape")

        serializer = EventSerializer(data=rows, many=True)
        if not serializer.is_valid():
            logger.error("Events response failed validation: %s", serializer.errors)
            raise FetchError("Could not read the events response")

        events = _unique_by_id(serializer.save())
        logger.info("Fetched %d events", len(events))
        return events

    def insert_guest(self, registration: GuestRegistration) -> GuestRecord:
        payload = GuestPayloadSerializer(registration).data
        headers = self._get_headers()
        headers["Prefer"] = "return=representation"
        try:
            response = self._session.request(
                "POST",
                f"{self._rest_url}/{self._guests_table}",
                json=dict(payload),
                headers=headers,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.error("Guest insert failed: %s", exc)
            raise SubmissionError(str(exc)) from exc

        if not response.ok:
            message = _error_message(response)
            logger.error("Guest insert rejected (%s): %s", response.status_code, message)
            raise SubmissionError(message)

        record = _record_from_response(response)
        if record is None:
            logger.warning("Guest insert returned no readable row; using submitted values")
            record = GuestRecord(
                event_id=registration.event_id,
                full_name=registration.full_name,
                role=registration.role,
                company=registration.company,
                email=registration.email,
                additional_request=registration.additional_request,
            )
        return record


def _unique_by_id(events: list[Event]) -> list[Event]:
    seen: set[str] = set()
    unique = []
    for event in events:
        if event.id in seen:
            logger.warning("Dropping duplicate event id %s", event.id)
            continue
        seen.add(event.id)
        unique.append(event)
    return unique


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text or f"Request failed with status {response.status_code}"


def _record_from_response(response: requests.Response) -> GuestRecord | None:
    try:
        body = response.json()
    except ValueError:
        return None
    row = body[0] if isinstance(body, list) and body else body
    if not isinstance(row, dict):
        return None
    serializer = GuestRecordSerializer(data=row)
    if not serializer.is_valid():
        logger.debug("Unreadable guest row: %s", serializer.errors)
        return None
    return serializer.save()
