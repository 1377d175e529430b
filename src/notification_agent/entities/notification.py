"""Notification domain entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NotificationType(str, Enum):
    """Closed set of push notification classes.

    Any ``data.type`` value outside the known classes maps to ``OTHER``.
    """

    WEEKLY_ANNOUNCEMENT = "weekly_announcement"
    RSVP_REMINDER = "rsvp_reminder"
    FRIEND_ACTIVITY = "friend_activity"
    OTHER = "other"

    @classmethod
    def classify(cls, value: str | None) -> "NotificationType":
        """Map a raw ``data.type`` discriminator to a notification type."""
        if value in (None, cls.OTHER.value):
            return cls.OTHER
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class NotificationProfile:
    """Type-specific presentation parameters.

    Attributes:
        vibrate: Vibration pattern in milliseconds
        require_interaction: Whether the user must dismiss the notification
        tag: Grouping tag; notifications sharing a tag replace each other
        icon: Forced icon, or None to use the payload/default icon
        badge: Forced badge, or None to use the payload/default badge
    """

    vibrate: tuple[int, ...]
    require_interaction: bool
    tag: str
    icon: str | None = None
    badge: str | None = None


@dataclass(frozen=True)
class NotificationAction:
    """An action button offered on a notification."""

    action: str
    title: str


@dataclass(frozen=True)
class NotificationOptions:
    """Everything the host needs to display a notification."""

    body: str | None
    icon: str
    badge: str
    vibrate: tuple[int, ...]
    tag: str
    require_interaction: bool
    timestamp: int
    data: dict[str, Any] = field(default_factory=dict)
    actions: tuple[NotificationAction, ...] = ()


@dataclass(frozen=True)
class Notification:
    """A notification displayed (or about to be displayed) by the host."""

    title: str
    options: NotificationOptions

    @property
    def tag(self) -> str:
        return self.options.tag

    @property
    def data(self) -> dict[str, Any]:
        return self.options.data
