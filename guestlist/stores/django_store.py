"""Django cache implementation of the PreferenceStore.

The ``preferences`` cache alias is a file-based cache on the device with no
expiry, so each write survives a process restart.
"""

import logging

from django.core.cache import BaseCache, caches

from guestlist.domain import EventId, PreferenceSet, PreferenceSnapshot
from guestlist.signals import preferences_changed
from guestlist.stores.interfaces import PreferenceStore

logger = logging.getLogger(__name__)

PREFERENCES_CACHE_ALIAS = "preferences"


class DjangoCachePreferenceStore(PreferenceStore):
    """Write-through preference store backed by a Django cache.

    Mutations start from the stored entry, not the in-memory copy, so a write
    from another store over the same cache is never overwritten.
    """

    def __init__(self, cache: BaseCache | None = None) -> None:
        self._cache = cache if cache is not None else caches[PREFERENCES_CACHE_ALIAS]
        self._sets: dict[PreferenceSet, frozenset[str]] | None = None

    def load(self) -> PreferenceSnapshot:
        sets = self._loaded()
        return PreferenceSnapshot(
            applied=sets[PreferenceSet.APPLIED],
            wishlisted=sets[PreferenceSet.WISHLISTED],
        )

    def add(self, preference_set: PreferenceSet, event_id: str) -> None:
        event_id = EventId.from_string(event_id).value
        self._write(preference_set, self._read(preference_set) | {event_id}, event_id)

    def remove(self, preference_set: PreferenceSet, event_id: str) -> None:
        event_id = EventId.from_string(event_id).value
        self._write(preference_set, self._read(preference_set) - {event_id}, event_id)

    def reset_applied(self) -> None:
        self._write(PreferenceSet.APPLIED, frozenset(), None)

    def reset_wishlisted(self) -> None:
        self._write(PreferenceSet.WISHLISTED, frozenset(), None)

    def _loaded(self) -> dict[PreferenceSet, frozenset[str]]:
        if self._sets is None:
            self._sets = {
                preference_set: self._read(preference_set) for preference_set in PreferenceSet
            }
            logger.debug(
                "Loaded preferences: %d applied, %d wishlisted",
                len(self._sets[PreferenceSet.APPLIED]),
                len(self._sets[PreferenceSet.WISHLISTED]),
            )
        return self._sets

    def _read(self, preference_set: PreferenceSet) -> frozenset[str]:
        stored = self._cache.get(preference_set.storage_key)
        if stored is None:
            return frozenset()
        if not isinstance(stored, (list, tuple, set, frozenset)) or not all(
            isinstance(item, str) for item in stored
        ):
            logger.warning(
                "Ignoring malformed stored value for %s", preference_set.storage_key
            )
            return frozenset()
        return frozenset(stored)

    def _write(
        self, preference_set: PreferenceSet, values: frozenset[str], event_id: str | None
    ) -> None:
        # Persist first; memory only changes once the write is durable.
        self._cache.set(preference_set.storage_key, sorted(values), timeout=None)
        self._loaded()[preference_set] = values
        preferences_changed.send(sender=self, preference_set=preference_set, event_id=event_id)
