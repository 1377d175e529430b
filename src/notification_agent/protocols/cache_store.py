"""Cache storage protocol.

Defines the interface for a namespaced response cache. Each namespace is a
version tag scoping one generation of cached responses; the lifecycle keeps
only the current namespace after activation.

Implementations can include:
- Redis (default)
- In-memory (tests, single-process hosts)
"""

from typing import Protocol, runtime_checkable

from notification_agent.entities import ResourceResponse


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for namespaced response caches.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        store: CacheStore = RedisCacheRepository.create()
        store: CacheStore = InMemoryCacheRepository()
        ```
    """

    async def put(self, namespace: str, key: str, response: ResourceResponse) -> None:
        """Insert or replace a single entry.

        Args:
            namespace: The cache namespace
            key: The request key (absolute URL)
            response: The response to cache
        """
        ...

    async def put_all(
        self,
        namespace: str,
        entries: list[tuple[str, ResourceResponse]],
    ) -> int:
        """Insert or replace several entries as one all-or-nothing write.

        Args:
            namespace: The cache namespace
            entries: (key, response) pairs

        Returns:
            Number of entries written
        """
        ...

    async def match(self, key: str, namespace: str | None = None) -> ResourceResponse | None:
        """Look up a cached response.

        Args:
            key: The request key (absolute URL)
            namespace: Restrict the lookup to one namespace. If None, every
                namespace is searched in creation order.

        Returns:
            The cached response, or None on a miss
        """
        ...

    async def keys(self, namespace: str) -> list[str]:
        """List request keys cached under a namespace."""
        ...

    async def namespaces(self) -> list[str]:
        """List existing namespaces in creation order."""
        ...

    async def delete_namespace(self, namespace: str) -> bool:
        """Delete a namespace and all of its entries.

        Returns:
            True if the namespace existed, False otherwise
        """
        ...

    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
