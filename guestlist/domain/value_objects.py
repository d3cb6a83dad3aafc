"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event.

    Identifiers are opaque strings; preference sets store them as-is.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("EventId cannot be blank")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=str(value).strip())

    def __str__(self) -> str:
        return self.value


class PreferenceSet(Enum):
    """The two locally persisted identifier sets."""

    APPLIED = "applied"
    WISHLISTED = "wishlisted"

    @property
    def storage_key(self) -> str:
        return _STORAGE_KEYS[self]


_STORAGE_KEYS = {
    PreferenceSet.APPLIED: "appliedEventIDs",
    PreferenceSet.WISHLISTED: "wishlistEventIDs",
}


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
