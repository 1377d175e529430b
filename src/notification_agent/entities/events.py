"""Host events dispatched into the agent."""

from dataclasses import dataclass

from .notification import Notification
from .resource import ResourceRequest


@dataclass(frozen=True)
class InstallEvent:
    """Host asks the agent to install (precache the manifest)."""


@dataclass(frozen=True)
class ActivateEvent:
    """Host asks the agent to activate (drop stale namespaces)."""


@dataclass(frozen=True)
class FetchEvent:
    request: ResourceRequest


@dataclass(frozen=True)
class PushEvent:
    """Inbound push message; ``data`` is None when the push carried no payload."""

    data: bytes | None = None


@dataclass(frozen=True)
class NotificationClickEvent:
    """User clicked a notification; ``action`` is None when the body was clicked."""

    notification: Notification
    action: str | None = None


@dataclass(frozen=True)
class NotificationCloseEvent:
    """User dismissed a notification without clicking it."""

    notification: Notification


@dataclass(frozen=True)
class SyncEvent:
    tag: str


AgentEvent = (
    InstallEvent
    | ActivateEvent
    | FetchEvent
    | PushEvent
    | NotificationClickEvent
    | NotificationCloseEvent
    | SyncEvent
)
