"""Network protocol.

The agent reaches the network only through this interface, so the request
interceptor and lifecycle can be exercised without a live server.
"""

from typing import Protocol, runtime_checkable

from notification_agent.entities import ResourceRequest, ResourceResponse


@runtime_checkable
class Network(Protocol):
    """Protocol for forwarding resource requests to the network."""

    def resolve(self, url: str) -> str:
        """Resolve a path or URL against the application base URL.

        The resolved URL is the cache key for the request.
        """
        ...

    async def fetch(self, request: ResourceRequest) -> ResourceResponse:
        """Send a request and return the response as-is.

        Non-2xx responses are returned, not raised.

        Raises:
            httpx.HTTPError: If the request could not be completed
        """
        ...
