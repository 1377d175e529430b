"""Tests for the cache-first request interceptor."""

import gzip

import httpx
import pytest

from notification_agent.entities import ResourceRequest, ResourceResponse
from notification_agent.repositories import HttpNetwork
from notification_agent.services import LifecycleManager, RequestInterceptor

from .conftest import BASE_URL, MANIFEST


@pytest.fixture
async def installed(store, network):
    lifecycle = LifecycleManager(store=store, network=network, namespace="v1", manifest=MANIFEST)
    await lifecycle.install()
    await lifecycle.activate()
    return lifecycle


@pytest.fixture
def interceptor(store, network):
    return RequestInterceptor(store=store, network=network)


@pytest.mark.asyncio
async def test_cached_asset_served_without_network(installed, interceptor, asset_server):
    asset_server.requests.clear()

    response = await interceptor.handle(ResourceRequest(url="/static/css/main.css"))

    assert response.body == b"asset /static/css/main.css"
    assert asset_server.requests == []


@pytest.mark.asyncio
async def test_absolute_url_matches_cached_path(installed, interceptor, asset_server):
    asset_server.requests.clear()

    response = await interceptor.handle(ResourceRequest(url=f"{BASE_URL}/icon-192x192.png"))

    assert response.ok
    assert asset_server.requests == []


@pytest.mark.asyncio
async def test_cached_entry_wins_over_network(store, interceptor, asset_server):
    await store.put(
        "v1",
        f"{BASE_URL}/api/restaurants",
        ResourceResponse(url=f"{BASE_URL}/api/restaurants", status=200, body=b"stale"),
    )

    response = await interceptor.handle(ResourceRequest(url="/api/restaurants"))

    assert response.body == b"stale"
    assert asset_server.requests == []


@pytest.mark.asyncio
async def test_miss_forwarded_and_not_cached(installed, interceptor, store, asset_server):
    asset_server.requests.clear()

    response = await interceptor.handle(ResourceRequest(url="/api/restaurants"))

    assert response.status == 200
    assert response.body == b'[{"id": 1}]'
    assert response.headers["x-origin"] == "network"
    assert asset_server.paths() == ["/api/restaurants"]
    assert await store.match(f"{BASE_URL}/api/restaurants") is None


@pytest.mark.asyncio
async def test_error_status_returned_as_is(installed, interceptor):
    response = await interceptor.handle(ResourceRequest(url="/nowhere"))

    assert response.status == 404
    assert not response.ok


@pytest.mark.asyncio
async def test_non_get_bypasses_cache(installed, interceptor, asset_server):
    asset_server.requests.clear()

    await interceptor.handle(ResourceRequest(url="/", method="POST", body=b"{}"))

    assert asset_server.paths() == ["/"]
    assert asset_server.requests[0].method == "POST"


@pytest.mark.asyncio
async def test_network_failure_propagates_on_miss(installed, interceptor, asset_server):
    asset_server.offline.add("/api/restaurants")

    with pytest.raises(httpx.ConnectError):
        await interceptor.handle(ResourceRequest(url="/api/restaurants"))


@pytest.mark.asyncio
async def test_cached_asset_survives_network_failure(installed, interceptor, asset_server):
    asset_server.offline.add("/")

    response = await interceptor.handle(ResourceRequest(url="/"))

    assert response.body == b"asset /"


@pytest.mark.asyncio
async def test_decoded_body_drops_encoding_headers():
    payload = b"body { color: red; }" * 20
    compressed = gzip.compress(payload)

    def origin(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            content=compressed,
            headers={"content-encoding": "gzip", "content-type": "text/css"},
        )

    client = httpx.AsyncClient(transport=httpx.MockTransport(origin))
    network = HttpNetwork(base_url=BASE_URL, client=client)

    response = await network.fetch(ResourceRequest(url="/static/css/main.css"))

    assert response.body == payload
    assert response.headers["content-type"] == "text/css"
    assert "content-encoding" not in response.headers
    assert "content-length" not in response.headers
