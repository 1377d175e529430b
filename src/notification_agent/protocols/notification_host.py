"""Notification host protocol.

The host is the runtime the agent lives in: it displays notifications and
opens application windows on the agent's behalf.
"""

from typing import Protocol, runtime_checkable

from notification_agent.entities import Notification


@runtime_checkable
class NotificationHost(Protocol):
    """Protocol for the host's notification and window surface."""

    async def show_notification(self, notification: Notification) -> None:
        """Display a notification.

        A notification with the same tag as one already displayed replaces it.
        """
        ...

    async def close_notification(self, notification: Notification) -> None:
        """Remove a displayed notification."""
        ...

    async def open_window(self, url: str) -> None:
        """Open or focus an application window at ``url``."""
        ...
