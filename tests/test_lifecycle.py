"""Tests for install/activate transitions and namespace cleanup."""

import pytest

from notification_agent.exceptions import InstallError, LifecycleError
from notification_agent.services import LifecycleManager, LifecycleState

from .conftest import BASE_URL, MANIFEST


@pytest.fixture
def lifecycle(store, network):
    return LifecycleManager(store=store, network=network, namespace="v1", manifest=MANIFEST)


@pytest.mark.asyncio
async def test_install_precaches_manifest(lifecycle, store):
    count = await lifecycle.install()

    assert count == len(MANIFEST)
    assert lifecycle.state is LifecycleState.INSTALLED
    assert await store.namespaces() == ["v1"]
    assert await store.keys("v1") == sorted(f"{BASE_URL}{path}" for path in MANIFEST)


@pytest.mark.asyncio
async def test_install_fails_when_an_asset_is_missing(lifecycle, store, asset_server):
    del asset_server.routes["/static/css/main.css"]

    with pytest.raises(InstallError) as exc_info:
        await lifecycle.install()

    assert exc_info.value.url == f"{BASE_URL}/static/css/main.css"
    assert lifecycle.state is LifecycleState.PENDING
    assert await store.namespaces() == []


@pytest.mark.asyncio
async def test_install_fails_when_network_is_down(lifecycle, store, asset_server):
    asset_server.offline.add("/static/js/bundle.js")

    with pytest.raises(InstallError):
        await lifecycle.install()

    assert await store.namespaces() == []


@pytest.mark.asyncio
async def test_failed_install_can_be_retried(lifecycle, asset_server):
    asset_server.offline.add("/")
    with pytest.raises(InstallError):
        await lifecycle.install()

    asset_server.offline.clear()
    assert await lifecycle.install() == len(MANIFEST)
    assert lifecycle.state is LifecycleState.INSTALLED


@pytest.mark.asyncio
async def test_activate_requires_install(lifecycle):
    with pytest.raises(LifecycleError):
        await lifecycle.activate()

    assert lifecycle.state is LifecycleState.PENDING


@pytest.mark.asyncio
async def test_install_rejected_once_active(lifecycle):
    await lifecycle.install()
    await lifecycle.activate()

    with pytest.raises(LifecycleError):
        await lifecycle.install()
    assert lifecycle.is_active


@pytest.mark.asyncio
async def test_activate_deletes_stale_namespaces(store, network):
    first = LifecycleManager(store=store, network=network, namespace="v1", manifest=MANIFEST)
    await first.install()
    await first.activate()

    second = LifecycleManager(store=store, network=network, namespace="v2", manifest=MANIFEST)
    await second.install()
    assert await store.namespaces() == ["v1", "v2"]

    deleted = await second.activate()

    assert deleted == ["v1"]
    assert second.is_active
    assert await store.namespaces() == ["v2"]
    assert await store.keys("v1") == []
    assert await store.match(f"{BASE_URL}/", namespace="v1") is None
    assert await store.match(f"{BASE_URL}/", namespace="v2") is not None


@pytest.mark.asyncio
async def test_reinstall_same_namespace_keeps_it_current(store, network):
    for _ in range(2):
        lifecycle = LifecycleManager(store=store, network=network, namespace="v1", manifest=MANIFEST)
        await lifecycle.install()
        assert await lifecycle.activate() == []

    assert await store.namespaces() == ["v1"]
    assert len(await store.keys("v1")) == len(MANIFEST)


def test_defaults_come_from_settings(store, network):
    from notification_agent.config import settings

    lifecycle = LifecycleManager.create(store=store, network=network)

    assert lifecycle.namespace == settings.cache_namespace
    assert lifecycle.manifest == settings.precache_manifest


class FlakyStore:
    """Store whose first namespace listing fails."""

    def __init__(self, store):
        self._store = store
        self.failures = 1

    async def namespaces(self):
        if self.failures:
            self.failures -= 1
            raise ConnectionError("store unavailable")
        return await self._store.namespaces()

    def __getattr__(self, name):
        return getattr(self._store, name)


@pytest.mark.asyncio
async def test_failed_activate_can_be_retried(store, network):
    lifecycle = LifecycleManager(
        store=FlakyStore(store), network=network, namespace="v1", manifest=MANIFEST
    )
    await lifecycle.install()

    with pytest.raises(ConnectionError):
        await lifecycle.activate()

    assert lifecycle.state is LifecycleState.INSTALLED

    await lifecycle.activate()
    assert lifecycle.is_active
