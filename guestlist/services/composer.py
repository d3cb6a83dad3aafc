"""View-state composition.

A composition pass is a pure function of (events, preferences, filters, now):

1. search filter (case-insensitive substring of title, description or location)
2. genre filter (any overlap with the selected genres)
3. categorization, first match wins: Applied, ClosingSoon, Other
4. source order preserved inside every category

Nothing here raises; malformed optional fields count as absent.
"""

from collections.abc import Iterable, Sequence
from datetime import date, datetime

from guestlist.domain import (
    Category,
    Event,
    EventCard,
    FilterState,
    PreferenceSnapshot,
    ViewState,
)

CLOSING_SOON_DAYS = 7


def matches_search(event: Event, search_text: str) -> bool:
    if not search_text:
        return True
    needle = search_text.casefold()
    for haystack in (event.title, event.description, event.location):
        if isinstance(haystack, str) and needle in haystack.casefold():
            return True
    return False


def matches_genres(event: Event, genres: frozenset[str] | set[str]) -> bool:
    if not genres:
        return True
    if not event.genres:
        return False
    return not genres.isdisjoint(event.genres)


def days_until(deadline: object, now: datetime) -> int | None:
    """Calendar-day difference from ``now`` to ``deadline``.

    Aware deadlines are read in ``now``'s time zone; naive ones as wall time.
    Returns None for anything that is not a date.
    """
    if isinstance(deadline, datetime):
        if deadline.tzinfo is not None and now.tzinfo is not None:
            deadline = deadline.astimezone(now.tzinfo)
        deadline_day = deadline.date()
    elif isinstance(deadline, date):
        deadline_day = deadline
    else:
        return None
    return (deadline_day - now.date()).days


def closing_label(event: Event, now: datetime) -> str | None:
    """Human label for an open registration window, None once it has passed."""
    return _label_for(days_until(event.registration_deadline, now))


def _label_for(days: int | None) -> str | None:
    if days is None or days < 0:
        return None
    if days == 0:
        return "Closing today"
    if days == 1:
        return "Closing in 1 day"
    return f"Closing in {days} days"


def categorize(event: Event, applied: frozenset[str], now: datetime) -> Category:
    if event.id in applied:
        return Category.APPLIED
    days = days_until(event.registration_deadline, now)
    if days is not None and 0 <= days <= CLOSING_SOON_DAYS:
        return Category.CLOSING_SOON
    return Category.OTHER


def filter_events(events: Iterable[Event], filters: FilterState) -> list[Event]:
    return [
        event
        for event in events
        if matches_search(event, filters.search_text) and matches_genres(event, filters.genres)
    ]


def compose_view_state(
    events: Sequence[Event],
    preferences: PreferenceSnapshot,
    filters: FilterState,
    now: datetime,
) -> ViewState:
    """Run one composition pass."""
    buckets: dict[Category, list[EventCard]] = {category: [] for category in Category}
    for event in filter_events(events, filters):
        category = categorize(event, preferences.applied, now)
        days = days_until(event.registration_deadline, now)
        buckets[category].append(
            EventCard(
                event=event,
                category=category,
                days_until_deadline=days,
                closing_label=_label_for(days),
                is_wishlisted=event.id in preferences.wishlisted,
            )
        )
    return ViewState(
        applied=tuple(buckets[Category.APPLIED]),
        closing_soon=tuple(buckets[Category.CLOSING_SOON]),
        other=tuple(buckets[Category.OTHER]),
        filters=filters,
    )


def available_genres(events: Iterable[Event]) -> list[str]:
    """Sorted unique genres across the collection."""
    return sorted({genre for event in events for genre in (event.genres or ())})


def wishlist_events(events: Iterable[Event], wishlisted: frozenset[str]) -> list[Event]:
    """Wishlisted events from the full, unfiltered collection, in source order."""
    return [event for event in events if event.id in wishlisted]
