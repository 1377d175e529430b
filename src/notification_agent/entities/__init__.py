"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .cache_entry import CacheEntryEntity
from .events import (
    ActivateEvent,
    AgentEvent,
    FetchEvent,
    InstallEvent,
    NotificationClickEvent,
    NotificationCloseEvent,
    PushEvent,
    SyncEvent,
)
from .notification import (
    Notification,
    NotificationAction,
    NotificationOptions,
    NotificationProfile,
    NotificationType,
)
from .resource import ResourceRequest, ResourceResponse

__all__ = [
    "CacheEntryEntity",
    "ResourceRequest",
    "ResourceResponse",
    "Notification",
    "NotificationAction",
    "NotificationOptions",
    "NotificationProfile",
    "NotificationType",
    "AgentEvent",
    "InstallEvent",
    "ActivateEvent",
    "FetchEvent",
    "PushEvent",
    "NotificationClickEvent",
    "NotificationCloseEvent",
    "SyncEvent",
]
