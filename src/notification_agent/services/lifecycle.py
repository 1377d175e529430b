"""Lifecycle manager: install → activate → active.

Install precaches a fixed manifest under the current namespace as one
all-or-nothing write. Activate deletes every other namespace so the store
never holds more than one generation of entries.
"""

import asyncio
import logging
from enum import Enum

import httpx

from notification_agent.config import settings
from notification_agent.entities import ResourceRequest, ResourceResponse
from notification_agent.exceptions import InstallError, LifecycleError
from notification_agent.protocols import CacheStore, Network

logger = logging.getLogger(__name__)


class LifecycleState(str, Enum):
    PENDING = "pending"
    INSTALLING = "installing"
    INSTALLED = "installed"
    ACTIVATING = "activating"
    ACTIVE = "active"


class LifecycleManager:
    """Governs when the agent is eligible to handle runtime events.

    Example:
        ```python
        lifecycle = LifecycleManager.create(store=store, network=network, namespace="v2")
        await lifecycle.install()
        stale = await lifecycle.activate()
        ```
    """

    def __init__(
        self,
        store: CacheStore,
        network: Network,
        namespace: str | None = None,
        manifest: tuple[str, ...] | list[str] | None = None,
    ) -> None:
        """Initialize the lifecycle manager.

        Args:
            store: Cache store shared with the request interceptor.
            network: Network used to fetch manifest assets.
            namespace: Current cache namespace. Defaults to settings.
            manifest: Paths to precache. Defaults to settings.
        """
        self._store = store
        self._network = network
        self._namespace = namespace or settings.cache_namespace
        self._manifest = tuple(manifest or settings.precache_manifest)
        self._state = LifecycleState.PENDING

    @classmethod
    def create(
        cls,
        store: CacheStore,
        network: Network,
        namespace: str | None = None,
        manifest: tuple[str, ...] | list[str] | None = None,
    ) -> "LifecycleManager":
        """Factory method to create LifecycleManager with defaults from settings."""
        return cls(store=store, network=network, namespace=namespace, manifest=manifest)

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def manifest(self) -> tuple[str, ...]:
        return self._manifest

    @property
    def is_active(self) -> bool:
        return self._state is LifecycleState.ACTIVE

    def _transition(self, allowed: tuple[LifecycleState, ...], target: LifecycleState) -> None:
        if self._state not in allowed:
            raise LifecycleError(
                f"Cannot enter '{target.value}' from '{self._state.value}'"
            )
        logger.info("Lifecycle %s -> %s (%s)", self._state.value, target.value, self._namespace)
        self._state = target

    async def _fetch_asset(self, path: str) -> tuple[str, ResourceResponse]:
        key = self._network.resolve(path)
        try:
            response = await self._network.fetch(ResourceRequest(url=key))
        except httpx.HTTPError as e:
            raise InstallError(key, str(e)) from e

        if not response.ok:
            raise InstallError(key, f"HTTP {response.status}")
        return key, response

    async def install(self) -> int:
        """Precache the manifest under the current namespace.

        Returns:
            Number of entries cached

        Raises:
            InstallError: If any manifest asset cannot be fetched. Nothing is
                written and the state returns to pending.
            LifecycleError: If called outside pending/installed.
        """
        self._transition((LifecycleState.PENDING, LifecycleState.INSTALLED), LifecycleState.INSTALLING)
        logger.info("Caching app shell (%d assets)", len(self._manifest))

        results = await asyncio.gather(
            *(self._fetch_asset(path) for path in self._manifest),
            return_exceptions=True,
        )
        failures = [result for result in results if isinstance(result, BaseException)]
        if failures:
            self._state = LifecycleState.PENDING
            logger.error("Install of %s failed: %s", self._namespace, failures[0])
            raise failures[0]

        try:
            count = await self._store.put_all(self._namespace, list(results))
        except BaseException:
            self._state = LifecycleState.PENDING
            raise

        self._transition((LifecycleState.INSTALLING,), LifecycleState.INSTALLED)
        return count

    async def activate(self) -> list[str]:
        """Delete every namespace except the current one and become active.

        Returns:
            The namespaces that were deleted

        Raises:
            LifecycleError: If install has not completed.
        """
        self._transition((LifecycleState.INSTALLED,), LifecycleState.ACTIVATING)

        deleted = []
        try:
            for namespace in await self._store.namespaces():
                if namespace != self._namespace:
                    logger.info("Deleting old cache: %s", namespace)
                    await self._store.delete_namespace(namespace)
                    deleted.append(namespace)
        except BaseException:
            self._state = LifecycleState.INSTALLED
            raise

        self._transition((LifecycleState.ACTIVATING,), LifecycleState.ACTIVE)
        return deleted
