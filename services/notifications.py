"""Toast notifications for signup outcomes."""
from flask import flash


class FlashNotificationSink:
    """Surfaces outcomes as flashed messages, rendered as toasts.

    Every notification is also kept in ``messages`` so JSON responses can
    hand them to the client.
    """

    def __init__(self, flash_messages: bool = True):
        self.flash_messages = flash_messages
        self.messages = []

    def _notify(self, category: str, message: str) -> None:
        self.messages.append({'category': category, 'message': message})
        if self.flash_messages:
            flash(message, category)

    def notify_success(self, message: str) -> None:
        self._notify('success', message)

    def notify_failure(self, message: str) -> None:
        self._notify('error', message)
