"""Client for the notifications analytics API.

Every call is fire-and-forget: failures are logged and reported through the
return value, never raised.
"""

import logging

import httpx

from notification_agent.config import settings
from notification_agent.dto import ClickAnalyticsRequest, DismissAnalyticsRequest

logger = logging.getLogger(__name__)


class NotificationsApiClient:
    """httpx client for ``/api/notifications/*`` endpoints.

    Example:
        ```python
        api = NotificationsApiClient.create()
        await api.record_click(ClickAnalyticsRequest(notification_id="n1", action="rsvp", timestamp=0))
        ```
    """

    CLICK_PATH = "/api/notifications/click"
    DISMISS_PATH = "/api/notifications/dismiss"
    RETRY_FAILED_PATH = "/api/notifications/retry-failed"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: API origin. Defaults to settings.api_base_url.
            timeout: Request timeout in seconds. Defaults to settings.http_timeout.
            client: Preconfigured client (e.g. with a mock transport).
        """
        self._base_url = base_url or settings.api_base_url
        self._timeout = timeout or settings.http_timeout
        self._client = client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> "NotificationsApiClient":
        """Factory method to create NotificationsApiClient with defaults."""
        return cls(base_url=base_url, timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return self._client

    async def _post(self, path: str, payload: dict | None, description: str) -> bool:
        try:
            response = await self.client.post(path, json=payload)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Failed to %s: %s", description, e)
            return False
        return True

    async def record_click(self, event: ClickAnalyticsRequest) -> bool:
        """POST a click event.

        Returns:
            True if the API accepted the event, False otherwise
        """
        return await self._post(
            self.CLICK_PATH, event.model_dump(by_alias=True), "log click"
        )

    async def record_dismiss(self, event: DismissAnalyticsRequest) -> bool:
        """POST a dismissal event.

        Returns:
            True if the API accepted the event, False otherwise
        """
        return await self._post(
            self.DISMISS_PATH, event.model_dump(by_alias=True), "log dismissal"
        )

    async def retry_failed(self) -> bool:
        """Ask the API to retry notification sends that previously failed.

        No body is sent; the server decides which sends are eligible.
        """
        return await self._post(self.RETRY_FAILED_PATH, None, "retry failed notifications")

    async def close(self) -> None:
        """Close the async HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
