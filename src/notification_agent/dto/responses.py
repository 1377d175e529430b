"""Response DTOs for the host bridge."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from notification_agent.entities import Notification


class NotificationResponse(BaseModel):
    """A displayed notification as the host sees it."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    body: str | None = None
    icon: str
    badge: str
    vibrate: list[int]
    tag: str
    require_interaction: bool = Field(..., alias="requireInteraction")
    timestamp: int
    data: dict[str, Any] = Field(default_factory=dict)
    actions: list[dict[str, str]] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationResponse":
        options = notification.options
        return cls(
            title=notification.title,
            body=options.body,
            icon=options.icon,
            badge=options.badge,
            vibrate=list(options.vibrate),
            tag=options.tag,
            require_interaction=options.require_interaction,
            timestamp=options.timestamp,
            data=dict(options.data),
            actions=[{"action": a.action, "title": a.title} for a in options.actions],
        )


class PushResponse(BaseModel):
    """Result of a push event."""

    displayed: bool = Field(..., description="Whether a notification was displayed")
    notification: NotificationResponse | None = None


class ClickResponse(BaseModel):
    """Result of a notification click."""

    url: str = Field(..., description="The URL the host was asked to open")


class LifecycleResponse(BaseModel):
    """Lifecycle state of the agent."""

    state: str
    namespace: str


class InstallResponse(LifecycleResponse):
    cached_entries: int = Field(..., ge=0)


class ActivateResponse(LifecycleResponse):
    deleted_namespaces: list[str] = Field(default_factory=list)


class FetchResponse(BaseModel):
    """A response served through the request interceptor."""

    url: str
    status: int
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = Field(..., description="Response body decoded as UTF-8 (invalid bytes replaced)")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
    state: str = Field(..., description="Lifecycle state of the agent")
