"""Data Transfer Objects for API contracts.

These Pydantic models define the external contracts: the inbound push
payload, the analytics API bodies, and the host bridge requests/responses.

Internal domain logic should use entities from the entities package.
"""

from .push import PushActionItem, PushData, PushPayload
from .requests import (
    ClickAnalyticsRequest,
    DismissAnalyticsRequest,
    NotificationClickRequest,
    NotificationCloseRequest,
    SyncRequest,
)
from .responses import (
    ActivateResponse,
    ClickResponse,
    FetchResponse,
    HealthCheckResponse,
    InstallResponse,
    LifecycleResponse,
    NotificationResponse,
    PushResponse,
)

__all__ = [
    "PushPayload",
    "PushData",
    "PushActionItem",
    "ClickAnalyticsRequest",
    "DismissAnalyticsRequest",
    "NotificationClickRequest",
    "NotificationCloseRequest",
    "SyncRequest",
    "NotificationResponse",
    "PushResponse",
    "ClickResponse",
    "LifecycleResponse",
    "InstallResponse",
    "ActivateResponse",
    "FetchResponse",
    "HealthCheckResponse",
]
