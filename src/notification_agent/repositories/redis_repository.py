"""Redis implementation of CacheStore.

Key layout (all keys share the configured prefix):

- ``{prefix}:namespaces``: sorted set of namespaces scored by creation sequence
- ``{prefix}:namespace_seq``: counter supplying those scores
- ``{prefix}:ns:{namespace}:keys``: set of request keys in a namespace
- ``{prefix}:ns:{namespace}:entry:{key}``: hash holding one cached response
"""

import json
import logging

import redis.asyncio as redis

from notification_agent.config import get_redis_client, settings
from notification_agent.entities import ResourceResponse

logger = logging.getLogger(__name__)


class RedisCacheRepository:
    """Redis implementation of the namespaced response cache.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Bulk writes run inside a MULTI/EXEC transaction so a namespace is
    never left half-populated.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Async Redis client instance. If None, creates default.
            key_prefix: Prefix for every key this repository owns.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.cache_key_prefix

    @classmethod
    def create(
        cls,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository with defaults.

        Args:
            redis_client: Async Redis client. If None, built from settings.
            key_prefix: Key prefix. If None, uses settings.

        Returns:
            Configured RedisCacheRepository
        """
        return cls(redis_client=redis_client, key_prefix=key_prefix)

    def _namespaces_key(self) -> str:
        return f"{self._prefix}:namespaces"

    def _sequence_key(self) -> str:
        return f"{self._prefix}:namespace_seq"

    def _keys_key(self, namespace: str) -> str:
        return f"{self._prefix}:ns:{namespace}:keys"

    def _entry_key(self, namespace: str, key: str) -> str:
        return f"{self._prefix}:ns:{namespace}:entry:{key}"

    @staticmethod
    def _encode(response: ResourceResponse) -> dict[str, bytes | str]:
        return {
            "url": response.url,
            "status": str(response.status),
            "headers": json.dumps(response.headers),
            "body": response.body,
        }

    @staticmethod
    def _decode(fields: dict[bytes, bytes]) -> ResourceResponse:
        return ResourceResponse(
            url=fields[b"url"].decode(),
            status=int(fields[b"status"]),
            headers=json.loads(fields[b"headers"]),
            body=fields.get(b"body", b""),
        )

    def _queue_write(
        self,
        pipe: redis.client.Pipeline,
        namespace: str,
        key: str,
        response: ResourceResponse,
    ) -> None:
        pipe.hset(self._entry_key(namespace, key), mapping=self._encode(response))
        pipe.sadd(self._keys_key(namespace), key)

    async def put(self, namespace: str, key: str, response: ResourceResponse) -> None:
        """Insert or replace a single entry.

        Args:
            namespace: The cache namespace
            key: The request key (absolute URL)
            response: The response to cache
        """
        await self.put_all(namespace, [(key, response)])

    async def put_all(
        self,
        namespace: str,
        entries: list[tuple[str, ResourceResponse]],
    ) -> int:
        """Write several entries in a single transaction.

        Args:
            namespace: The cache namespace
            entries: (key, response) pairs

        Returns:
            Number of entries written
        """
        sequence = await self._client.incr(self._sequence_key())
        async with self._client.pipeline(transaction=True) as pipe:
            pipe.zadd(self._namespaces_key(), {namespace: sequence}, nx=True)
            for key, response in entries:
                # Replacement must not leave stale fields behind
                pipe.delete(self._entry_key(namespace, key))
                self._queue_write(pipe, namespace, key, response)
            await pipe.execute()

        return len(entries)

    async def match(self, key: str, namespace: str | None = None) -> ResourceResponse | None:
        """Look up a cached response.

        Args:
            key: The request key (absolute URL)
            namespace: Restrict the lookup to one namespace. If None, every
                namespace is searched in creation order.

        Returns:
            The cached response, or None on a miss
        """
        candidates = [namespace] if namespace is not None else await self.namespaces()
        for candidate in candidates:
            fields = await self._client.hgetall(self._entry_key(candidate, key))
            if fields:
                return self._decode(fields)
        return None

    async def keys(self, namespace: str) -> list[str]:
        """List request keys cached under a namespace."""
        members = await self._client.smembers(self._keys_key(namespace))
        return sorted(member.decode() for member in members)

    async def namespaces(self) -> list[str]:
        """List existing namespaces in creation order."""
        members = await self._client.zrange(self._namespaces_key(), 0, -1)
        return [member.decode() for member in members]

    async def delete_namespace(self, namespace: str) -> bool:
        """Delete a namespace and all of its entries.

        Args:
            namespace: The namespace to delete

        Returns:
            True if the namespace existed, False otherwise
        """
        keys = await self.keys(namespace)
        async with self._client.pipeline(transaction=True) as pipe:
            for key in keys:
                pipe.delete(self._entry_key(namespace, key))
            pipe.delete(self._keys_key(namespace))
            pipe.zrem(self._namespaces_key(), namespace)
            results = await pipe.execute()

        return bool(results[-1])

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except redis.RedisError as e:
            logger.warning("Redis health check failed: %s", e)
            return False

    async def close(self) -> None:
        """Close the Redis connection pool."""
        await self._client.aclose()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
