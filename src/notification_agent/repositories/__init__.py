"""Repository layer for data access.

This layer abstracts external dependencies (Redis, the network, the
notifications API, the host runtime) behind protocol-based interfaces.

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from notification_agent.protocols import CacheStore, Network, NotificationHost

from .http_network import HttpNetwork
from .memory_repository import InMemoryCacheRepository
from .notification_host import InMemoryNotificationHost
from .notifications_api import NotificationsApiClient
from .redis_repository import RedisCacheRepository

__all__ = [
    "CacheStore",
    "Network",
    "NotificationHost",
    "HttpNetwork",
    "InMemoryCacheRepository",
    "InMemoryNotificationHost",
    "NotificationsApiClient",
    "RedisCacheRepository",
]
