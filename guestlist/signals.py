"""Django signals connecting state mutations to recomposition.

Senders:
- preferences_changed: the PreferenceStore that wrote the change
- view_state_changed: the EventService that ran the composition pass
- notification_posted: the NotificationCenter
- registration_completed: the RegistrationForm that submitted
"""

import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# kwargs: preference_set, event_id (None for resets)
preferences_changed = Signal()

# kwargs: view_state
view_state_changed = Signal()

# kwargs: notification
notification_posted = Signal()

# kwargs: record
registration_completed = Signal()


@receiver(preferences_changed)
def log_preference_change(sender, preference_set, event_id=None, **kwargs):
    """Trace every durable preference write."""
    if event_id is None:
        logger.info("Preference set %s reset", preference_set.value)
    else:
        logger.debug("Preference set %s written for event %s", preference_set.value, event_id)


@receiver(registration_completed)
def log_registration(sender, record, **kwargs):
    """Trace completed registrations."""
    logger.info("Registration completed for event %s", record.event_id)
