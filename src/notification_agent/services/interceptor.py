"""Cache-first request interceptor."""

import logging

from notification_agent.entities import ResourceRequest, ResourceResponse
from notification_agent.protocols import CacheStore, Network

logger = logging.getLogger(__name__)


class RequestInterceptor:
    """Serves GET requests from the cache, falling back to the network.

    Cached entries are returned without a freshness check, and network
    responses are never written back; entries only change on the next
    install/activate cycle. Network errors reach the caller unmodified.
    """

    def __init__(self, store: CacheStore, network: Network) -> None:
        self._store = store
        self._network = network

    async def handle(self, request: ResourceRequest) -> ResourceResponse:
        """Return the cached response for ``request`` or forward it.

        Args:
            request: The outgoing request

        Returns:
            The cached or network response

        Raises:
            httpx.HTTPError: If the request missed the cache and the network failed
        """
        if request.is_cacheable:
            key = self._network.resolve(request.url)
            cached = await self._store.match(key)
            if cached is not None:
                logger.debug("Cache hit: %s", key)
                return cached
            logger.debug("Cache miss: %s", key)

        return await self._network.fetch(request)
