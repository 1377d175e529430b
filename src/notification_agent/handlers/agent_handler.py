"""HTTP handlers for the host bridge.

Handlers convert between DTOs (API contracts) and agent events.
They handle HTTP concerns like status codes, validation, and error handling.
"""

import logging

import httpx
from fastapi import HTTPException, status

from notification_agent.agent import LifetimeHandle, NotificationAgent
from notification_agent.dto import (
    ActivateResponse,
    ClickResponse,
    FetchResponse,
    HealthCheckResponse,
    InstallResponse,
    LifecycleResponse,
    NotificationClickRequest,
    NotificationCloseRequest,
    NotificationResponse,
    PushResponse,
    SyncRequest,
)
from notification_agent.entities import (
    ActivateEvent,
    AgentEvent,
    FetchEvent,
    InstallEvent,
    Notification,
    NotificationClickEvent,
    NotificationCloseEvent,
    PushEvent,
    ResourceRequest,
    SyncEvent,
)
from notification_agent.exceptions import AgentNotActiveError, InstallError, LifecycleError
from notification_agent.protocols import CacheStore
from notification_agent.repositories import InMemoryNotificationHost

logger = logging.getLogger(__name__)


class AgentHandler:
    """HTTP handlers for host events.

    This handler dispatches events into the NotificationAgent, awaits
    their lifetime handles and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Setting appropriate status codes
    - Error handling and responses
    """

    def __init__(
        self,
        agent: NotificationAgent,
        host: InMemoryNotificationHost,
        store: CacheStore,
    ) -> None:
        """Initialize the agent handler.

        Args:
            agent: The agent receiving host events (required).
            host: The host surface holding displayed notifications (required).
            store: The agent's cache store, for health checks (required).
        """
        self._agent = agent
        self._host = host
        self._store = store

    def _dispatch(self, event: AgentEvent) -> LifetimeHandle:
        try:
            return self._agent.dispatch(event)
        except AgentNotActiveError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    def _displayed(self, tag: str) -> Notification:
        notifications = self._host.get_notifications(tag)
        if not notifications:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No displayed notification with tag '{tag}'",
            )
        return notifications[0]

    def _lifecycle(self) -> LifecycleResponse:
        return LifecycleResponse(
            state=self._agent.state.value,
            namespace=self._agent.lifecycle.namespace,
        )

    async def get_lifecycle(self) -> LifecycleResponse:
        """Handle GET /lifecycle requests."""
        return self._lifecycle()

    async def install(self) -> InstallResponse:
        """Handle POST /lifecycle/install requests.

        Raises:
            HTTPException: 409 on an illegal transition, 502 if an asset could not be fetched
        """
        try:
            count = await self._dispatch(InstallEvent())
        except LifecycleError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
        except InstallError as e:
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

        return InstallResponse(**self._lifecycle().model_dump(), cached_entries=count)

    async def activate(self) -> ActivateResponse:
        """Handle POST /lifecycle/activate requests."""
        try:
            deleted = await self._dispatch(ActivateEvent())
        except LifecycleError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

        return ActivateResponse(**self._lifecycle().model_dump(), deleted_namespaces=deleted)

    async def fetch(self, url: str) -> FetchResponse:
        """Handle GET /fetch requests.

        Raises:
            HTTPException: 502 if the request missed the cache and the network failed
        """
        try:
            response = await self._dispatch(FetchEvent(request=ResourceRequest(url=url)))
        except httpx.HTTPError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Failed to fetch {url}: {e}",
            ) from e

        return FetchResponse(
            url=response.url,
            status=response.status,
            headers=response.headers,
            body=response.body.decode("utf-8", errors="replace"),
        )

    async def push(self, data: bytes) -> PushResponse:
        """Handle POST /events/push requests; the raw body is the push payload."""
        notification = await self._dispatch(PushEvent(data=data or None))
        if notification is None:
            return PushResponse(displayed=False)
        return PushResponse(
            displayed=True,
            notification=NotificationResponse.from_entity(notification),
        )

    async def click(self, request: NotificationClickRequest) -> ClickResponse:
        """Handle POST /events/notification-click requests."""
        notification = self._displayed(request.tag)
        url = await self._dispatch(
            NotificationClickEvent(notification=notification, action=request.action)
        )
        return ClickResponse(url=url)

    async def close(self, request: NotificationCloseRequest) -> dict:
        """Handle POST /events/notification-close requests.

        The notification is removed from the display only once the agent
        has accepted the dismissal event.
        """
        notification = self._displayed(request.tag)
        handle = self._dispatch(NotificationCloseEvent(notification=notification))
        await self._host.close_notification(notification)
        reported = await handle
        return {"closed": True, "reported": reported}

    async def sync(self, request: SyncRequest) -> dict:
        """Handle POST /events/sync requests."""
        retried = await self._dispatch(SyncEvent(tag=request.tag))
        return {"tag": request.tag, "retried": retried}

    def list_notifications(self) -> list[NotificationResponse]:
        """Handle GET /notifications requests."""
        return [NotificationResponse.from_entity(n) for n in self._host.get_notifications()]

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Raises:
            HTTPException: 503 if the cache store is unreachable
        """
        cache_healthy = await self._store.health_check()
        if not cache_healthy:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Cache store unreachable",
            )

        return HealthCheckResponse(
            status="healthy",
            cache_healthy=cache_healthy,
            state=self._agent.state.value,
        )
