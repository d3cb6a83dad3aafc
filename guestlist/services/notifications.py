"""Transient user-facing messages (toasts)."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from django.utils import timezone

from guestlist.signals import notification_posted

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 2.0


@dataclass(frozen=True)
class Notification:
    message: str
    posted_at: datetime
    expires_at: datetime


class NotificationCenter:
    """Posts short-lived messages and keeps the ones still on screen."""

    def __init__(self, clock: Callable[[], datetime] = timezone.localtime) -> None:
        self._clock = clock
        self._active: list[Notification] = []

    def post(self, message: str, duration: float = DEFAULT_DURATION) -> Notification:
        now = self._clock()
        notification = Notification(
            message=message,
            posted_at=now,
            expires_at=now + timedelta(seconds=duration),
        )
        self._active.append(notification)
        logger.debug("Notification posted: %s", message)
        notification_posted.send(sender=self, notification=notification)
        return notification

    def active(self) -> list[Notification]:
        now = self._clock()
        self._active = [n for n in self._active if n.expires_at > now]
        return list(self._active)

    def dismiss_all(self) -> None:
        self._active.clear()
