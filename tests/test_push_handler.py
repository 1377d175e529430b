"""Tests for push decoding, profile resolution and display."""

import json

import pytest

from notification_agent.entities import NotificationType
from notification_agent.services import PushMessageHandler, resolve_profile

from .conftest import FIXED_NOW, fixed_clock


def _push(payload: dict) -> bytes:
    return json.dumps(payload).encode()


@pytest.fixture
def handler(host):
    return PushMessageHandler(
        host=host,
        default_icon="/icon-192x192.png",
        default_badge="/badge-72x72.png",
        default_tag="default",
        default_title="Austin Food Club",
        clock=fixed_clock,
    )


@pytest.mark.asyncio
async def test_weekly_announcement(handler, host):
    notification = await handler.handle(
        _push({"title": "This week's pick", "data": {"type": "weekly_announcement"}})
    )

    assert notification is not None
    assert notification.title == "This week's pick"
    assert notification.options.vibrate == (200, 100, 200)
    assert notification.options.require_interaction is False
    assert notification.tag == "weekly_announcement"
    assert host.get_notifications() == [notification]


@pytest.mark.asyncio
async def test_rsvp_reminder_requires_interaction(handler):
    notification = await handler.handle(_push({"data": {"type": "rsvp_reminder"}}))

    assert notification.options.require_interaction is True
    assert notification.options.vibrate == (300, 100, 300, 100, 300)
    assert notification.title == "Austin Food Club"


@pytest.mark.asyncio
async def test_rsvp_reminder_overrides_payload_flag(handler):
    notification = await handler.handle(
        _push({"title": "RSVP", "requireInteraction": False, "data": {"type": "rsvp_reminder"}})
    )

    assert notification.options.require_interaction is True


@pytest.mark.asyncio
async def test_friend_activity(handler):
    notification = await handler.handle(
        _push({"title": "Sam RSVP'd", "icon": "/sam.png", "data": {"type": "friend_activity"}})
    )

    assert notification.options.vibrate == (100, 50, 100)
    assert notification.options.require_interaction is False
    assert notification.options.icon == "/icon-192x192.png"


@pytest.mark.asyncio
async def test_unknown_type_uses_base_profile_and_payload_flag(handler):
    notification = await handler.handle(
        _push({"title": "Hi", "requireInteraction": True, "data": {"type": "admin_broadcast"}})
    )

    assert notification.options.vibrate == (100, 50, 100)
    assert notification.options.require_interaction is True
    assert notification.tag == "admin_broadcast"


@pytest.mark.asyncio
async def test_missing_type_uses_default_tag(handler):
    notification = await handler.handle(_push({"title": "Hello", "body": "World"}))

    assert notification.tag == "default"
    assert notification.options.require_interaction is False
    assert notification.options.body == "World"
    assert notification.options.data == {}
    assert notification.options.actions == ()


@pytest.mark.asyncio
async def test_icon_and_badge_defaults(handler):
    notification = await handler.handle(_push({"title": "Hello"}))
    assert notification.options.icon == "/icon-192x192.png"
    assert notification.options.badge == "/badge-72x72.png"

    custom = await handler.handle(
        _push({"title": "Hello", "icon": "/custom.png", "badge": "/custom-badge.png"})
    )
    assert custom.options.icon == "/custom.png"
    assert custom.options.badge == "/custom-badge.png"


@pytest.mark.asyncio
async def test_weekly_announcement_forces_standard_badge(handler):
    notification = await handler.handle(
        _push({"title": "Pick", "badge": "/other.png", "data": {"type": "weekly_announcement"}})
    )

    assert notification.options.badge == "/badge-72x72.png"


@pytest.mark.asyncio
async def test_data_actions_and_timestamp_carried(handler):
    notification = await handler.handle(
        _push(
            {
                "title": "Dinner tonight",
                "data": {
                    "type": "rsvp_reminder",
                    "restaurantId": 42,
                    "notificationId": "n-1",
                    "extra": "kept",
                },
                "actions": [
                    {"action": "directions", "title": "Directions"},
                    {"action": "cancel", "title": "Cancel RSVP"},
                ],
            }
        )
    )

    assert notification.data == {
        "type": "rsvp_reminder",
        "restaurantId": 42,
        "notificationId": "n-1",
        "extra": "kept",
    }
    assert [a.action for a in notification.options.actions] == ["directions", "cancel"]
    assert notification.options.timestamp == int(FIXED_NOW * 1000)


@pytest.mark.asyncio
async def test_same_type_notifications_coalesce(handler, host):
    first = await handler.handle(_push({"title": "One", "data": {"type": "friend_activity"}}))
    second = await handler.handle(_push({"title": "Two", "data": {"type": "friend_activity"}}))

    assert first.tag == second.tag == "friend_activity"
    assert host.get_notifications() == [second]


@pytest.mark.asyncio
@pytest.mark.parametrize("data", [None, b""])
async def test_push_without_data_is_noop(handler, host, data):
    assert await handler.handle(data) is None
    assert host.get_notifications() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("data", [b"not json", b"[1, 2]", b'{"actions": "nope"}'])
async def test_malformed_payload_is_noop(handler, host, data):
    assert await handler.handle(data) is None
    assert host.get_notifications() == []


@pytest.mark.parametrize("kind", list(NotificationType))
def test_every_type_has_a_profile(kind):
    profile = resolve_profile(
        kind,
        tag="t",
        requested_interaction=None,
        default_icon="/i.png",
        default_badge="/b.png",
    )

    assert profile.tag == "t"
    assert profile.vibrate


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("weekly_announcement", NotificationType.WEEKLY_ANNOUNCEMENT),
        ("rsvp_reminder", NotificationType.RSVP_REMINDER),
        ("friend_activity", NotificationType.FRIEND_ACTIVITY),
        ("something_new", NotificationType.OTHER),
        (None, NotificationType.OTHER),
    ],
)
def test_classify(raw, expected):
    assert NotificationType.classify(raw) is expected


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["data", "actions"])
async def test_null_collections_still_display(handler, host, field):
    notification = await handler.handle(_push({"title": "Hi", field: None}))

    assert notification is not None
    assert notification.data == {}
    assert notification.options.actions == ()
    assert notification.tag == "default"
    assert host.get_notifications() == [notification]
