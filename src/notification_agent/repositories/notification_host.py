"""In-memory implementation of NotificationHost."""

import logging

from notification_agent.entities import Notification

logger = logging.getLogger(__name__)


class InMemoryNotificationHost:
    """Records what the agent asked the host to do.

    Displayed notifications are keyed by tag, so a new notification replaces
    a displayed one of the same class instead of stacking.
    """

    def __init__(self) -> None:
        self._displayed: dict[str, Notification] = {}
        self.opened_windows: list[str] = []

    async def show_notification(self, notification: Notification) -> None:
        replaced = notification.tag in self._displayed
        self._displayed[notification.tag] = notification
        logger.debug(
            "Displayed notification %r (tag=%s, replaced=%s)",
            notification.title,
            notification.tag,
            replaced,
        )

    async def close_notification(self, notification: Notification) -> None:
        if self._displayed.get(notification.tag) == notification:
            del self._displayed[notification.tag]

    async def open_window(self, url: str) -> None:
        self.opened_windows.append(url)

    def get_notifications(self, tag: str | None = None) -> list[Notification]:
        """Return displayed notifications, optionally filtered by tag."""
        if tag is not None:
            notification = self._displayed.get(tag)
            return [notification] if notification is not None else []
        return list(self._displayed.values())
