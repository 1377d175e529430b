"""Request DTOs for the notifications API and the host bridge."""

from pydantic import BaseModel, ConfigDict, Field


class ClickAnalyticsRequest(BaseModel):
    """Body of ``POST /api/notifications/click``."""

    model_config = ConfigDict(populate_by_name=True)

    notification_id: str | int | None = Field(None, alias="notificationId")
    action: str = Field(..., description="Action id, or 'default' when the body was clicked")
    timestamp: int = Field(..., description="Epoch milliseconds")


class DismissAnalyticsRequest(BaseModel):
    """Body of ``POST /api/notifications/dismiss``."""

    tag: str
    timestamp: int = Field(..., description="Epoch milliseconds")


class NotificationClickRequest(BaseModel):
    """Host bridge: the user clicked the displayed notification with ``tag``."""

    tag: str = Field(..., min_length=1)
    action: str | None = Field(None, description="Chosen action id; null when the body was clicked")


class NotificationCloseRequest(BaseModel):
    """Host bridge: the user dismissed the displayed notification with ``tag``."""

    tag: str = Field(..., min_length=1)


class SyncRequest(BaseModel):
    """Host bridge: the host's retry scheduler fired."""

    tag: str = Field(..., min_length=1)
