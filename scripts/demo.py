#!/usr/bin/env python3
"""
Demo script for the notification agent.

Runs the agent against an in-memory cache and a simulated origin, then walks
through install, activation, offline fetches, a push and a click.
"""

import asyncio
import json

import httpx

from notification_agent import (
    ActivateEvent,
    FetchEvent,
    HttpNetwork,
    InMemoryCacheRepository,
    InMemoryNotificationHost,
    InstallEvent,
    NotificationAgent,
    NotificationClickEvent,
    NotificationsApiClient,
    PushEvent,
    ResourceRequest,
)

ORIGIN = "http://localhost:3000"


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def simulated_origin(request: httpx.Request) -> httpx.Response:
    """Serve app shell assets and accept analytics calls."""
    if request.url.path.startswith("/api/notifications/"):
        print(f"  [api] {request.method} {request.url.path} {request.content.decode()}")
        return httpx.Response(200, json={"ok": True})
    if request.url.path == "/offline-only":
        raise httpx.ConnectError("network unreachable", request=request)
    return httpx.Response(200, content=f"<{request.url.path}>".encode())


async def main() -> None:
    transport = httpx.MockTransport(simulated_origin)
    store = InMemoryCacheRepository()
    host = InMemoryNotificationHost()
    network = HttpNetwork(base_url=ORIGIN, client=httpx.AsyncClient(transport=transport))
    api = NotificationsApiClient(
        base_url=ORIGIN,
        client=httpx.AsyncClient(base_url=ORIGIN, transport=transport),
    )

    print_section("Install and activate")
    old = NotificationAgent.create(store=store, network=network, host=host, api=api, namespace="v1")
    await old.dispatch(InstallEvent())
    await old.dispatch(ActivateEvent())
    agent = NotificationAgent.create(store=store, network=network, host=host, api=api, namespace="v2")
    print(f"Cached entries: {await agent.dispatch(InstallEvent())}")
    print(f"Deleted namespaces: {await agent.dispatch(ActivateEvent())}")
    print(f"Namespaces now: {await store.namespaces()}")

    print_section("Cache-first fetch")
    response = await agent.dispatch(FetchEvent(request=ResourceRequest(url="/static/css/main.css")))
    print(f"/static/css/main.css -> {response.status} {response.body!r}")
    try:
        await agent.dispatch(FetchEvent(request=ResourceRequest(url="/offline-only")))
    except httpx.HTTPError as e:
        print(f"/offline-only -> network error: {e}")

    print_section("Push and click")
    payload = {
        "title": "RSVP closes tonight",
        "body": "Franklin Barbecue, 7pm",
        "data": {
            "type": "rsvp_reminder",
            "restaurantId": 12,
            "notificationId": "n-1",
            "address": "900 E 11th St, Austin, TX",
        },
        "actions": [{"action": "directions", "title": "Directions"}],
    }
    notification = await agent.dispatch(PushEvent(data=json.dumps(payload).encode()))
    print(f"Displayed: {notification.title!r} options={notification.options}")
    url = await agent.dispatch(NotificationClickEvent(notification=notification, action="directions"))
    print(f"Opened: {url}")

    await agent.drain()
    await network.close()
    await api.close()


if __name__ == "__main__":
    asyncio.run(main())
