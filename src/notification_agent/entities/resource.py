"""Resource request/response domain entities."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ResourceRequest:
    """An outgoing resource fetch issued by the hosted application.

    Attributes:
        url: Absolute URL or path relative to the application base URL
        method: HTTP method
        headers: Request headers
        body: Optional request body
    """

    url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None

    @property
    def is_cacheable(self) -> bool:
        """Only GET requests are looked up in the cache."""
        return self.method.upper() == "GET"


@dataclass(frozen=True)
class ResourceResponse:
    """A network or cached response.

    Attributes:
        url: The absolute URL the response belongs to
        status: HTTP status code
        headers: Response headers
        body: Raw response body
    """

    url: str
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300
