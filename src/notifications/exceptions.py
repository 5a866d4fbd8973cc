"""Notification delivery exceptions."""


class NotificationDeliveryError(Exception):
    """Raised internally when a message could not be delivered.

    The notifier logs and swallows it; it never reaches the run controller.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
