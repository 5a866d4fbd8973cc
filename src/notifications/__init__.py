"""Outbound notifications for run reports and failure alerts."""

from .exceptions import NotificationDeliveryError
from .slack import SlackNotifier

__all__ = [
    "NotificationDeliveryError",
    "SlackNotifier",
]
