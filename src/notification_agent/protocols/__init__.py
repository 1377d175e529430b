"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → in-memory, httpx → mock transport)
- Unit testing with in-process implementations
- Clear separation of concerns
"""

from .cache_store import CacheStore
from .network import Network
from .notification_host import NotificationHost

__all__ = [
    "CacheStore",
    "Network",
    "NotificationHost",
]
