"""Inbound push payload DTOs.

The payload arrives as JSON from the notifications API:

    { title, body, icon?, badge?, requireInteraction?,
      data?: { type?, restaurantId?, rsvpId?, notificationId?, address?, action? },
      actions?: [{action, title}] }
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PushData(BaseModel):
    """Contextual data attached to a push; unknown keys are preserved."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: str | None = Field(None, description="Notification class discriminator")
    restaurant_id: str | int | None = Field(None, alias="restaurantId")
    rsvp_id: str | int | None = Field(None, alias="rsvpId")
    notification_id: str | int | None = Field(None, alias="notificationId")
    address: str | None = Field(None, description="Street address for directions")
    action: str | None = Field(None, description="Default action when the body is clicked")

    def to_dict(self) -> dict[str, Any]:
        """Return the data in its wire (camelCase) form, without empty fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class PushActionItem(BaseModel):
    """An action button offered to the user."""

    action: str = Field(..., min_length=1)
    title: str = Field("")


class PushPayload(BaseModel):
    """Decoded push message."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(None, description="Notification title")
    body: str | None = Field(None, description="Notification body text")
    icon: str | None = Field(None, description="Icon URL; a default is used when absent")
    badge: str | None = Field(None, description="Badge URL; a default is used when absent")
    require_interaction: bool | None = Field(None, alias="requireInteraction")
    data: PushData = Field(default_factory=PushData)
    actions: list[PushActionItem] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def _null_data(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("actions", mode="before")
    @classmethod
    def _null_actions(cls, value: Any) -> Any:
        return [] if value is None else value
