"""Cache entry domain entity."""

from dataclasses import dataclass

from .resource import ResourceResponse


@dataclass(frozen=True)
class CacheEntryEntity:
    """Domain entity for a cached response.

    Attributes:
        namespace: The cache namespace (version tag) owning this entry
        key: The request key (absolute URL)
        response: The cached response
    """

    namespace: str
    key: str
    response: ResourceResponse
