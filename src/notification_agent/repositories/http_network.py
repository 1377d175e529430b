"""httpx implementation of the Network protocol."""

import httpx

from notification_agent.config import settings
from notification_agent.entities import ResourceRequest, ResourceResponse


# httpx hands back decoded content, so these no longer describe the stored body
_BODY_FRAMING_HEADERS = frozenset({"content-encoding", "content-length", "transfer-encoding"})


class HttpNetwork:
    """Forwards resource requests to the hosted application's origin.

    This class satisfies the Network protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        network = HttpNetwork.create(base_url="http://localhost:3000")
        response = await network.fetch(ResourceRequest(url="/static/css/main.css"))
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the network.

        Args:
            base_url: Origin that relative request paths resolve against.
                Defaults to settings.app_base_url.
            timeout: Request timeout in seconds. Defaults to settings.http_timeout.
            client: Preconfigured client (e.g. with a mock transport).
        """
        self._base_url = httpx.URL(base_url or settings.app_base_url)
        self._timeout = timeout or settings.http_timeout
        self._client = client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> "HttpNetwork":
        """Factory method to create HttpNetwork with defaults."""
        return cls(base_url=base_url, timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    def resolve(self, url: str) -> str:
        """Resolve a path or URL against the application base URL."""
        return str(self._base_url.join(url))

    async def fetch(self, request: ResourceRequest) -> ResourceResponse:
        """Send a request and return the response as-is.

        Args:
            request: The outgoing request

        Returns:
            The response, whatever its status

        Raises:
            httpx.HTTPError: If the request could not be completed
        """
        url = self.resolve(request.url)
        response = await self.client.request(
            request.method,
            url,
            headers=request.headers,
            content=request.body,
        )
        return ResourceResponse(
            url=url,
            status=response.status_code,
            headers={
                name: value
                for name, value in response.headers.items()
                if name.lower() not in _BODY_FRAMING_HEADERS
            },
            body=response.content,
        )

    async def close(self) -> None:
        """Close the async HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
