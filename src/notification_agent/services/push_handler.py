"""Push message handler.

Decodes a push payload, resolves the presentation profile for its type and
asks the host to display the notification.
"""

import logging
import time
from collections.abc import Callable

from pydantic import ValidationError

from notification_agent.config import settings
from notification_agent.dto import PushPayload
from notification_agent.entities import (
    Notification,
    NotificationAction,
    NotificationOptions,
    NotificationProfile,
    NotificationType,
)
from notification_agent.protocols import NotificationHost

logger = logging.getLogger(__name__)

BASE_VIBRATION = (100, 50, 100)


def resolve_profile(
    kind: NotificationType,
    tag: str,
    requested_interaction: bool | None,
    default_icon: str,
    default_badge: str,
) -> NotificationProfile:
    """Build the presentation profile for a notification type.

    Args:
        kind: The classified notification type
        tag: Grouping tag for the notification
        requested_interaction: ``requireInteraction`` supplied by the payload
        default_icon: Icon forced for known types
        default_badge: Badge forced for weekly announcements

    Returns:
        The notification profile
    """
    match kind:
        case NotificationType.WEEKLY_ANNOUNCEMENT:
            return NotificationProfile(
                vibrate=(200, 100, 200),
                require_interaction=False,
                tag=tag,
                icon=default_icon,
                badge=default_badge,
            )
        case NotificationType.RSVP_REMINDER:
            return NotificationProfile(
                vibrate=(300, 100, 300, 100, 300),
                require_interaction=True,
                tag=tag,
                icon=default_icon,
            )
        case NotificationType.FRIEND_ACTIVITY:
            return NotificationProfile(
                vibrate=BASE_VIBRATION,
                require_interaction=False,
                tag=tag,
                icon=default_icon,
            )
        case NotificationType.OTHER:
            return NotificationProfile(
                vibrate=BASE_VIBRATION,
                require_interaction=bool(requested_interaction),
                tag=tag,
            )
    raise ValueError(f"Unhandled notification type: {kind!r}")


class PushMessageHandler:
    """Turns push messages into displayed notifications.

    Example:
        ```python
        handler = PushMessageHandler(host=host)
        notification = await handler.handle(b'{"title": "Hi", "data": {"type": "friend_activity"}}')
        ```
    """

    def __init__(
        self,
        host: NotificationHost,
        default_icon: str | None = None,
        default_badge: str | None = None,
        default_tag: str | None = None,
        default_title: str | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the push handler.

        Args:
            host: Host that displays notifications.
            default_icon: Fallback icon path. Defaults to settings.
            default_badge: Fallback badge path. Defaults to settings.
            default_tag: Tag used when the payload has no type. Defaults to settings.
            default_title: Title used when the payload has none. Defaults to settings.app_name.
            clock: Returns the current time in seconds.
        """
        self._host = host
        self._default_icon = default_icon or settings.default_icon
        self._default_badge = default_badge or settings.default_badge
        self._default_tag = default_tag or settings.default_tag
        self._default_title = default_title or settings.app_name
        self._clock = clock

    @staticmethod
    def decode(data: bytes | str) -> PushPayload | None:
        """Decode a raw payload, returning None if it is not a valid push payload."""
        try:
            return PushPayload.model_validate_json(data)
        except ValidationError as e:
            logger.warning("Ignoring malformed push payload: %s", e)
            return None

    def build_notification(self, payload: PushPayload) -> Notification:
        """Build the notification to display for a decoded payload."""
        raw_type = payload.data.type
        tag = raw_type or self._default_tag
        profile = resolve_profile(
            NotificationType.classify(raw_type),
            tag=tag,
            requested_interaction=payload.require_interaction,
            default_icon=self._default_icon,
            default_badge=self._default_badge,
        )

        options = NotificationOptions(
            body=payload.body,
            icon=profile.icon or payload.icon or self._default_icon,
            badge=profile.badge or payload.badge or self._default_badge,
            vibrate=profile.vibrate,
            tag=profile.tag,
            require_interaction=profile.require_interaction,
            timestamp=int(self._clock() * 1000),
            data=payload.data.to_dict(),
            actions=tuple(
                NotificationAction(action=item.action, title=item.title)
                for item in payload.actions
            ),
        )
        return Notification(title=payload.title or self._default_title, options=options)

    async def handle(self, data: bytes | str | None) -> Notification | None:
        """Handle one push event.

        Args:
            data: Raw payload, or None when the push carried no data

        Returns:
            The displayed notification, or None if nothing was displayed
        """
        if not data:
            logger.info("Push event but no data")
            return None

        payload = self.decode(data)
        if payload is None:
            return None

        notification = self.build_notification(payload)
        logger.info("Push notification received: %r (tag=%s)", notification.title, notification.tag)
        await self._host.show_notification(notification)
        return notification
