"""Shared fixtures: in-memory cache and host, mock asset origin and API."""

import json

import fakeredis
import httpx
import pytest

from notification_agent.agent import NotificationAgent
from notification_agent.repositories import (
    HttpNetwork,
    InMemoryCacheRepository,
    InMemoryNotificationHost,
    NotificationsApiClient,
    RedisCacheRepository,
)

BASE_URL = "http://club.test"
FIXED_NOW = 1_700_000_000.0

MANIFEST = (
    "/",
    "/static/js/bundle.js",
    "/static/css/main.css",
    "/icon-192x192.png",
    "/badge-72x72.png",
)


class RecordingTransport:
    """httpx MockTransport handler that records requests and serves canned routes."""

    def __init__(self, routes: dict[str, tuple[int, bytes]] | None = None) -> None:
        self.routes = dict(routes or {})
        self.offline: set[str] = set()
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path in self.offline:
            raise httpx.ConnectError("network unreachable", request=request)
        status, body = self.routes.get(request.url.path, (404, b"not found"))
        return httpx.Response(status, content=body, headers={"x-origin": "network"})

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def json_bodies(self, path: str) -> list[dict]:
        return [json.loads(r.content) for r in self.requests if r.url.path == path]


def fixed_clock() -> float:
    return FIXED_NOW


@pytest.fixture
def asset_server():
    """Origin serving every manifest asset plus one extra page."""
    routes = {path: (200, f"asset {path}".encode()) for path in MANIFEST}
    routes["/api/restaurants"] = (200, b'[{"id": 1}]')
    return RecordingTransport(routes)


@pytest.fixture
def network(asset_server):
    client = httpx.AsyncClient(transport=httpx.MockTransport(asset_server))
    return HttpNetwork(base_url=BASE_URL, client=client)


@pytest.fixture
def api_server():
    return RecordingTransport(
        {
            NotificationsApiClient.CLICK_PATH: (200, b"{}"),
            NotificationsApiClient.DISMISS_PATH: (200, b"{}"),
            NotificationsApiClient.RETRY_FAILED_PATH: (200, b"{}"),
        }
    )


@pytest.fixture
def api(api_server):
    client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(api_server))
    return NotificationsApiClient(base_url=BASE_URL, client=client)


@pytest.fixture(params=["memory", "redis"])
def store(request):
    """Every cache store test runs against both repositories."""
    if request.param == "memory":
        return InMemoryCacheRepository()
    return RedisCacheRepository(redis_client=fakeredis.FakeAsyncRedis(), key_prefix="test")


@pytest.fixture
def host():
    return InMemoryNotificationHost()


@pytest.fixture
def make_agent(store, network, host, api):
    """Build agents sharing one cache store, each with its own namespace."""

    def _make(namespace: str = "v1") -> NotificationAgent:
        return NotificationAgent.create(
            store=store,
            network=network,
            host=host,
            api=api,
            namespace=namespace,
            manifest=MANIFEST,
        )

    return _make
