"""In-memory implementation of CacheStore."""

from notification_agent.entities import CacheEntryEntity, ResourceResponse


class InMemoryCacheRepository:
    """Dict-backed cache store.

    Satisfies the CacheStore protocol. Namespaces keep insertion order,
    which doubles as creation order for lookups across namespaces.
    """

    def __init__(self) -> None:
        self._namespaces: dict[str, dict[str, CacheEntryEntity]] = {}

    async def put(self, namespace: str, key: str, response: ResourceResponse) -> None:
        await self.put_all(namespace, [(key, response)])

    async def put_all(
        self,
        namespace: str,
        entries: list[tuple[str, ResourceResponse]],
    ) -> int:
        staged = {
            key: CacheEntryEntity(namespace=namespace, key=key, response=response)
            for key, response in entries
        }
        self._namespaces.setdefault(namespace, {}).update(staged)
        return len(staged)

    async def match(self, key: str, namespace: str | None = None) -> ResourceResponse | None:
        if namespace is not None:
            candidates = [namespace]
        else:
            candidates = list(self._namespaces)

        for candidate in candidates:
            entry = self._namespaces.get(candidate, {}).get(key)
            if entry is not None:
                return entry.response
        return None

    async def keys(self, namespace: str) -> list[str]:
        return sorted(self._namespaces.get(namespace, {}))

    async def namespaces(self) -> list[str]:
        return list(self._namespaces)

    async def delete_namespace(self, namespace: str) -> bool:
        return self._namespaces.pop(namespace, None) is not None

    async def health_check(self) -> bool:
        return True
