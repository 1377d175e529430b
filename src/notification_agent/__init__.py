"""Notification Agent - push notifications and offline caching for the dining club app.

This package provides a layered architecture for the client-side agent:

Layers:
    - protocols: Interface contracts (CacheStore, Network, NotificationHost)
    - repositories: Data access implementations
    - services: Lifecycle, request interception, push handling, routing, retry
    - agent: Event dispatch and lifetime handles
    - handlers: HTTP endpoint handlers for the host bridge
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from notification_agent import NotificationAgent
    from notification_agent.repositories import (
        HttpNetwork,
        InMemoryNotificationHost,
        NotificationsApiClient,
        RedisCacheRepository,
    )

    agent = NotificationAgent.create(
        store=RedisCacheRepository.create(),
        network=HttpNetwork.create(),
        host=InMemoryNotificationHost(),
        api=NotificationsApiClient.create(),
    )
    ```

For HTTP API:
    ```python
    from notification_agent.api.app import app
    ```
"""

from notification_agent.agent import LifetimeHandle, NotificationAgent
from notification_agent.config import get_redis_client, settings
from notification_agent.dto import PushPayload
from notification_agent.entities import (
    ActivateEvent,
    FetchEvent,
    InstallEvent,
    Notification,
    NotificationClickEvent,
    NotificationCloseEvent,
    NotificationProfile,
    NotificationType,
    PushEvent,
    ResourceRequest,
    ResourceResponse,
    SyncEvent,
)
from notification_agent.exceptions import (
    AgentError,
    AgentNotActiveError,
    InstallError,
    LifecycleError,
)
from notification_agent.protocols import CacheStore, Network, NotificationHost
from notification_agent.repositories import (
    HttpNetwork,
    InMemoryCacheRepository,
    InMemoryNotificationHost,
    NotificationsApiClient,
    RedisCacheRepository,
)
from notification_agent.services import (
    BackgroundRetryTask,
    InteractionRouter,
    LifecycleManager,
    LifecycleState,
    PushMessageHandler,
    RequestInterceptor,
    resolve_action_route,
    resolve_profile,
)

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Agent
    "NotificationAgent",
    "LifetimeHandle",
    # Protocols (interfaces)
    "CacheStore",
    "Network",
    "NotificationHost",
    # Services
    "BackgroundRetryTask",
    "InteractionRouter",
    "LifecycleManager",
    "LifecycleState",
    "PushMessageHandler",
    "RequestInterceptor",
    "resolve_action_route",
    "resolve_profile",
    # Repositories
    "HttpNetwork",
    "InMemoryCacheRepository",
    "InMemoryNotificationHost",
    "NotificationsApiClient",
    "RedisCacheRepository",
    # Entities and events
    "Notification",
    "NotificationProfile",
    "NotificationType",
    "ResourceRequest",
    "ResourceResponse",
    "InstallEvent",
    "ActivateEvent",
    "FetchEvent",
    "PushEvent",
    "NotificationClickEvent",
    "NotificationCloseEvent",
    "SyncEvent",
    # DTOs
    "PushPayload",
    # Errors
    "AgentError",
    "AgentNotActiveError",
    "InstallError",
    "LifecycleError",
]
