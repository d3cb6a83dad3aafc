"""Serializers between backend rows, user input and domain models.

Optional event fields are lenient: a value that does not parse is treated as
absent instead of failing the whole collection.
"""

import logging
from datetime import datetime, time

from django.utils import timezone
from django.utils.dateparse import parse_date
from rest_framework import serializers
from rest_framework.fields import empty

from guestlist.domain import Capacity, Event, GuestRecord, GuestRegistration

logger = logging.getLogger(__name__)


class LenientFieldMixin:
    """Treat an unparseable optional value as absent."""

    def run_validation(self, data=empty):
        try:
            return super().run_validation(data)
        except serializers.ValidationError as exc:
            logger.debug("Dropping malformed %s value %r: %s", self.field_name, data, exc.detail)
            return None


class LenientDateTimeField(LenientFieldMixin, serializers.DateTimeField):
    """Datetime that also accepts a bare date (midnight, current time zone)."""

    def to_internal_value(self, value):
        if isinstance(value, str) and len(value.strip()) == 10:
            try:
                day = parse_date(value.strip())
            except ValueError:
                day = None
            if day is not None:
                return timezone.make_aware(datetime.combine(day, time.min))
        return super().to_internal_value(value)


class LenientIntegerField(LenientFieldMixin, serializers.IntegerField):
    pass


class LenientListField(LenientFieldMixin, serializers.ListField):
    pass


class EventSerializer(serializers.Serializer):
    """Serializer for one row of the remote events table."""

    id = serializers.CharField()
    title = serializers.CharField(allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    date = serializers.DateTimeField()
    venue = serializers.CharField(
        source="location",
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
    )
    created_at = LenientDateTimeField(required=False, allow_null=True)
    spotify_artist_id = serializers.CharField(
        source="image_ref", required=False, allow_null=True, allow_blank=True
    )
    registration_deadline = LenientDateTimeField(required=False, allow_null=True)
    genres = LenientListField(
        child=serializers.CharField(), required=False, allow_null=True, allow_empty=True
    )
    capacity = LenientIntegerField(required=False, allow_null=True, min_value=0)
    note = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )

    def create(self, validated_data: dict) -> Event:
        genres = validated_data.get("genres")
        capacity = validated_data.get("capacity")
        return Event(
            id=validated_data["id"],
            title=validated_data["title"],
            date=validated_data["date"],
            description=validated_data.get("description"),
            location=validated_data.get("location"),
            registration_deadline=validated_data.get("registration_deadline"),
            genres=tuple(genres) if genres is not None else None,
            capacity=Capacity(capacity) if capacity is not None else None,
            note=validated_data.get("note"),
            image_ref=validated_data.get("image_ref") or None,
            created_at=validated_data.get("created_at"),
        )


def _required_text(label: str, **kwargs) -> serializers.CharField:
    message = f"{label} is required."
    return serializers.CharField(
        error_messages={"required": message, "blank": message, "null": message},
        **kwargs,
    )


class GuestRegistrationSerializer(serializers.Serializer):
    """Validates a registration entered by the user.

    Field order is the order requirements are reported in.
    Whitespace is trimmed; an empty additional request becomes None.
    """

    event_id = _required_text("Event")
    full_name = _required_text("Full name")
    role = _required_text("Role")
    company = _required_text("Company")
    email = _required_text("Email")
    additional_request = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    def validate_additional_request(self, value: str | None) -> str | None:
        return value or None

    def create(self, validated_data: dict) -> GuestRegistration:
        return GuestRegistration(
            event_id=validated_data["event_id"],
            full_name=validated_data["full_name"],
            role=validated_data["role"],
            company=validated_data["company"],
            email=validated_data["email"],
            additional_request=validated_data.get("additional_request"),
        )


class GuestPayloadSerializer(serializers.Serializer):
    """Column mapping for the remote guests table."""

    event_id = serializers.CharField()
    name = serializers.CharField(source="full_name")
    role = serializers.CharField(allow_null=True, allow_blank=True, required=False)
    company = serializers.CharField(allow_null=True, allow_blank=True, required=False)
    email = serializers.CharField()
    request = serializers.CharField(
        source="additional_request", allow_null=True, allow_blank=True, required=False
    )


class GuestRecordSerializer(GuestPayloadSerializer):
    """Serializer for a guests row returned by the backend."""

    id = serializers.CharField(required=False, allow_null=True)
    created_at = LenientDateTimeField(required=False, allow_null=True)

    def create(self, validated_data: dict) -> GuestRecord:
        return GuestRecord(
            event_id=validated_data["event_id"],
            full_name=validated_data["full_name"],
            role=validated_data.get("role") or "",
            company=validated_data.get("company") or "",
            email=validated_data["email"],
            additional_request=validated_data.get("additional_request") or None,
            id=validated_data.get("id"),
            created_at=validated_data.get("created_at"),
        )
