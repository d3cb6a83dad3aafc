from guestlist.stores.django_store import DjangoCachePreferenceStore
from guestlist.stores.interfaces import EventRepository, PreferenceStore
from guestlist.stores.supabase_store import SupabaseEventRepository

__all__ = [
    "EventRepository",
    "PreferenceStore",
    "DjangoCachePreferenceStore",
    "SupabaseEventRepository",
]
