"""Interaction router.

Maps notification clicks to navigation targets and reports clicks and
dismissals to the notifications API.
"""

import asyncio
import logging
import time
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote

from notification_agent.config import settings
from notification_agent.dto import ClickAnalyticsRequest, DismissAnalyticsRequest
from notification_agent.entities import Notification
from notification_agent.protocols import NotificationHost
from notification_agent.repositories import NotificationsApiClient

logger = logging.getLogger(__name__)

DEFAULT_ACTION = "default"

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: Any) -> str:
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


def resolve_action_route(
    action: str | None,
    data: Mapping[str, Any],
    map_search_url: str | None = None,
) -> str:
    """Resolve the URL to open for a notification click.

    Rules are evaluated top to bottom; the first match wins. A missing
    ``restaurantId`` renders as an empty segment; it never changes which rule
    matches.

    Args:
        action: Chosen action id, or None when the body was clicked
        data: The notification's attached data (camelCase keys)
        map_search_url: Prefix of the external map search URL

    Returns:
        An internal path or the map search URL
    """
    map_search_url = map_search_url or settings.map_search_url
    restaurant_id = data.get("restaurantId")
    restaurant = "" if restaurant_id is None else encode_uri_component(restaurant_id)
    address = data.get("address")
    rsvp_id = data.get("rsvpId")

    if action in ("rsvp", "details") or data.get("action") == "view_restaurant":
        return f"/restaurant/{restaurant}"
    if action == "directions" and address:
        return f"{map_search_url}{encode_uri_component(address)}"
    if action == "cancel" and rsvp_id is not None:
        return f"/profile?cancel_rsvp={encode_uri_component(rsvp_id)}"
    if action == "verify":
        return f"/verify-visit?restaurant={restaurant}"
    if data.get("type") == "friend_activity":
        return "/friends"
    if data.get("type") == "weekly_announcement":
        return "/"
    return "/"


class InteractionRouter:
    """Routes notification clicks and dismissals.

    Example:
        ```python
        router = InteractionRouter(host=host, api=NotificationsApiClient.create())
        url = await router.handle_click(notification, action="directions")
        ```
    """

    def __init__(
        self,
        host: NotificationHost,
        api: NotificationsApiClient,
        map_search_url: str | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._host = host
        self._api = api
        self._map_search_url = map_search_url or settings.map_search_url
        self._clock = clock

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    async def handle_click(self, notification: Notification, action: str | None = None) -> str:
        """Close the notification, open its target and report the click.

        Opening the window and reporting the click run concurrently; a failed
        report is logged and does not affect the window.

        Args:
            notification: The clicked notification
            action: Chosen action id, or None when the body was clicked

        Returns:
            The URL the host was asked to open
        """
        logger.info("Notification clicked: tag=%s action=%s", notification.tag, action)
        await self._host.close_notification(notification)

        url = resolve_action_route(action, notification.data, self._map_search_url)
        event = ClickAnalyticsRequest(
            notification_id=notification.data.get("notificationId"),
            action=action or DEFAULT_ACTION,
            timestamp=self._now_ms(),
        )
        await asyncio.gather(
            self._host.open_window(url),
            self._api.record_click(event),
        )
        return url

    async def handle_close(self, notification: Notification) -> bool:
        """Report a dismissal without click.

        Returns:
            True if the API accepted the report, False otherwise
        """
        logger.info("Notification closed: %s", notification.tag)
        event = DismissAnalyticsRequest(tag=notification.tag, timestamp=self._now_ms())
        return await self._api.record_dismiss(event)
