import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis.asyncio as redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    storage_backend: str = os.getenv("STORAGE_BACKEND", "redis").lower()  # "redis" or "memory"
    storage_prefix: str = os.getenv("STORAGE_PREFIX", "country_cache")

    # Remote source
    countries_api_url: str = os.getenv("COUNTRIES_API_URL", "https://restcountries.com/v3.1")
    countries_api_timeout: float = float(os.getenv("COUNTRIES_API_TIMEOUT", "30"))

    # Cache
    cache_expiration_seconds: float = float(os.getenv("CACHE_EXPIRATION_SECONDS", "3600"))  # 1 hour

    # Selection
    max_selected_countries: int = int(os.getenv("MAX_SELECTED_COUNTRIES", "5"))
    default_country: str = os.getenv("DEFAULT_COUNTRY", "Egypt")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    @property
    def countries_key(self) -> str:
        """Storage key of the cached country collection."""
        return f"{self.storage_prefix}:stored_countries"

    @property
    def last_update_key(self) -> str:
        """Storage key of the collection's freshness timestamp."""
        return f"{self.storage_prefix}:stored_countries_last_update"

    @property
    def selected_key(self) -> str:
        """Storage key of the user's selected countries."""
        return f"{self.storage_prefix}:selected_countries"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.storage_backend not in ("redis", "memory"):
            raise ValueError(f"STORAGE_BACKEND must be 'redis' or 'memory', got {self.storage_backend}")

        if self.cache_expiration_seconds <= 0:
            raise ValueError("CACHE_EXPIRATION_SECONDS must be positive")

        if self.countries_api_timeout <= 0:
            raise ValueError("COUNTRIES_API_TIMEOUT must be positive")

        if self.max_selected_countries < 1:
            raise ValueError(
                f"MAX_SELECTED_COUNTRIES must be at least 1, got {self.max_selected_countries}"
            )

        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {self.log_level}")


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
