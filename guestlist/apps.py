from django.apps import AppConfig


class GuestlistConfig(AppConfig):
    name = "guestlist"
    verbose_name = "Guest list"

    def ready(self) -> None:
        from guestlist import signals  # noqa: F401
