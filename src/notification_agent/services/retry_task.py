"""Background retry task for failed notification sends."""

import logging

from notification_agent.config import settings
from notification_agent.repositories import NotificationsApiClient

logger = logging.getLogger(__name__)


class BackgroundRetryTask:
    """Asks the API to retry failed sends when the host's retry trigger fires.

    Only the configured sync tag is acted on. Backoff and repetition are left
    to the host scheduler and the server.
    """

    def __init__(self, api: NotificationsApiClient, sync_tag: str | None = None) -> None:
        self._api = api
        self._sync_tag = sync_tag or settings.sync_tag

    @property
    def sync_tag(self) -> str:
        return self._sync_tag

    async def handle(self, tag: str) -> bool:
        """Handle a retry trigger.

        Args:
            tag: The tag carried by the host's trigger

        Returns:
            True if a retry request was issued and accepted, False otherwise
        """
        if tag != self._sync_tag:
            logger.debug("Ignoring sync trigger with tag %r", tag)
            return False

        logger.info("Background sync triggered")
        return await self._api.retry_failed()
