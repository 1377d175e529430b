import os
from dataclasses import dataclass, field
from functools import lru_cache

import redis.asyncio as redis
from dotenv import load_dotenv

load_dotenv()

DEFAULT_MANIFEST = (
    "/",
    "/static/js/bundle.js",
    "/static/css/main.css",
    "/icon-192x192.png",
    "/badge-72x72.png",
)


def _manifest_from_env() -> tuple[str, ...]:
    raw = os.getenv("PRECACHE_MANIFEST")
    if not raw:
        return DEFAULT_MANIFEST
    return tuple(path.strip() for path in raw.split(",") if path.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Cache
    cache_key_prefix: str = os.getenv("CACHE_KEY_PREFIX", "notification_agent")
    cache_namespace: str = os.getenv("CACHE_NAMESPACE", "austin-food-club-v1")
    precache_manifest: tuple[str, ...] = field(default_factory=_manifest_from_env)

    # Hosted application and its API
    app_name: str = os.getenv("APP_NAME", "Austin Food Club")
    app_base_url: str = os.getenv("APP_BASE_URL", "http://localhost:3000")
    api_base_url: str = os.getenv("API_BASE_URL", "") or os.getenv(
        "APP_BASE_URL", "http://localhost:3000"
    )
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "10.0"))

    # Notifications
    default_icon: str = os.getenv("DEFAULT_ICON", "/icon-192x192.png")
    default_badge: str = os.getenv("DEFAULT_BADGE", "/badge-72x72.png")
    default_tag: str = os.getenv("DEFAULT_TAG", "default")
    map_search_url: str = os.getenv("MAP_SEARCH_URL", "https://maps.google.com/?q=")
    sync_tag: str = os.getenv("SYNC_TAG", "background-sync")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.cache_namespace:
            raise ValueError("CACHE_NAMESPACE must not be empty")

        if not self.precache_manifest:
            raise ValueError("PRECACHE_MANIFEST must list at least one path")

        if self.http_timeout <= 0:
            raise ValueError(f"HTTP_TIMEOUT must be positive, got {self.http_timeout}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create an asyncio Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=False,
    )
