"""Notification & offline cache agent.

The agent composes the lifecycle manager, request interceptor, push handler,
interaction router and retry task, and dispatches host events to them.

Every dispatched event runs as its own asyncio task and is wrapped in a
``LifetimeHandle``. The host must keep the agent alive until every handle it
holds has settled; ``drain()`` waits for all of them.

Usage:
    ```python
    agent = NotificationAgent.create(store=store, network=network, host=host, api=api)
    await agent.dispatch(InstallEvent())
    await agent.dispatch(ActivateEvent())

    handle = agent.dispatch(PushEvent(data=b'{"title": "Hi"}'))
    notification = await handle
    ```
"""

import asyncio
import logging
from collections.abc import Generator
from typing import Any

from notification_agent.entities import (
    ActivateEvent,
    AgentEvent,
    FetchEvent,
    InstallEvent,
    NotificationClickEvent,
    NotificationCloseEvent,
    PushEvent,
    SyncEvent,
)
from notification_agent.exceptions import AgentNotActiveError
from notification_agent.protocols import CacheStore, Network, NotificationHost
from notification_agent.repositories import NotificationsApiClient
from notification_agent.services import (
    BackgroundRetryTask,
    InteractionRouter,
    LifecycleManager,
    LifecycleState,
    PushMessageHandler,
    RequestInterceptor,
)

logger = logging.getLogger(__name__)


class LifetimeHandle:
    """Keeps one event's work alive until it settles.

    Awaiting the handle returns the handler's result or raises its error.
    """

    def __init__(self, event: AgentEvent, task: asyncio.Task) -> None:
        self._event = event
        self._task = task

    @property
    def event(self) -> AgentEvent:
        return self._event

    @property
    def settled(self) -> bool:
        return self._task.done()

    def __await__(self) -> Generator[Any, None, Any]:
        return self._task.__await__()

    def __repr__(self) -> str:
        state = "settled" if self.settled else "pending"
        return f"<LifetimeHandle {type(self._event).__name__} {state}>"


class NotificationAgent:
    """Dispatches host events to the agent's components.

    Install and activate are always accepted (the lifecycle manager rejects
    illegal transitions). Every other event is rejected with
    ``AgentNotActiveError`` until activation has completed.
    """

    def __init__(
        self,
        lifecycle: LifecycleManager,
        interceptor: RequestInterceptor,
        push_handler: PushMessageHandler,
        router: InteractionRouter,
        retry_task: BackgroundRetryTask,
    ) -> None:
        self._lifecycle = lifecycle
        self._interceptor = interceptor
        self._push_handler = push_handler
        self._router = router
        self._retry_task = retry_task
        self._pending: set[LifetimeHandle] = set()

    @classmethod
    def create(
        cls,
        store: CacheStore,
        network: Network,
        host: NotificationHost,
        api: NotificationsApiClient,
        namespace: str | None = None,
        manifest: tuple[str, ...] | list[str] | None = None,
    ) -> "NotificationAgent":
        """Factory method wiring every component with defaults from settings.

        Args:
            store: Cache store backend (required).
            network: Network for manifest and pass-through fetches (required).
            host: Host that displays notifications and opens windows (required).
            api: Notifications API client (required).
            namespace: Current cache namespace. If None, uses settings.
            manifest: Precache manifest. If None, uses settings.

        Returns:
            Configured NotificationAgent
        """
        return cls(
            lifecycle=LifecycleManager.create(
                store=store, network=network, namespace=namespace, manifest=manifest
            ),
            interceptor=RequestInterceptor(store=store, network=network),
            push_handler=PushMessageHandler(host=host),
            router=InteractionRouter(host=host, api=api),
            retry_task=BackgroundRetryTask(api=api),
        )

    @property
    def lifecycle(self) -> LifecycleManager:
        return self._lifecycle

    @property
    def state(self) -> LifecycleState:
        return self._lifecycle.state

    @property
    def pending(self) -> list[LifetimeHandle]:
        """Handles that have not settled yet."""
        return list(self._pending)

    @property
    def can_terminate(self) -> bool:
        """Whether the host may reclaim the agent without cutting work short."""
        return not self._pending

    def dispatch(self, event: AgentEvent) -> LifetimeHandle:
        """Schedule the handler for ``event`` and return its lifetime handle.

        Must be called from a running event loop.

        Raises:
            AgentNotActiveError: If a runtime event arrives before activation.
        """
        if not isinstance(event, (InstallEvent, ActivateEvent)) and not self._lifecycle.is_active:
            raise AgentNotActiveError(
                f"Cannot handle {type(event).__name__} while {self._lifecycle.state.value}"
            )

        task = asyncio.create_task(self._handle(event))
        handle = LifetimeHandle(event, task)
        self._pending.add(handle)
        task.add_done_callback(lambda _: self._pending.discard(handle))
        return handle

    async def _handle(self, event: AgentEvent) -> Any:
        match event:
            case InstallEvent():
                return await self._lifecycle.install()
            case ActivateEvent():
                return await self._lifecycle.activate()
            case FetchEvent(request=request):
                return await self._interceptor.handle(request)
            case PushEvent(data=data):
                return await self._push_handler.handle(data)
            case NotificationClickEvent(notification=notification, action=action):
                return await self._router.handle_click(notification, action)
            case NotificationCloseEvent(notification=notification):
                return await self._router.handle_close(notification)
            case SyncEvent(tag=tag):
                return await self._retry_task.handle(tag)
        raise TypeError(f"Unsupported event: {event!r}")

    async def drain(self) -> None:
        """Wait until every outstanding handle has settled.

        Errors are not raised here; they belong to whoever awaits the handle.
        """
        while self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
