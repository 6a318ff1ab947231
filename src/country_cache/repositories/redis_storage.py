"""Redis implementation of PersistentStorage.

This is the default backing store for the local country source. Values
are stored as plain Redis strings.
"""

import asyncio
import logging

import redis.asyncio as redis
from redis.exceptions import RedisError

from country_cache.config import get_redis_client
from country_cache.errors import NotFound

logger = logging.getLogger(__name__)


class RedisStorage:
    """Redis key-value storage.

    This class satisfies the PersistentStorage protocol through structural
    typing - no explicit inheritance needed.

    All operations go through a single asyncio lock, so concurrent saves,
    fetches and removals issued by this process are linearized.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize the Redis storage.

        Args:
            redis_client: Async Redis client instance. If None, creates default.
        """
        self._client = redis_client or get_redis_client()
        self._lock = asyncio.Lock()

    @classmethod
    def create(cls, redis_client: redis.Redis | None = None) -> "RedisStorage":
        """Factory method to create RedisStorage with defaults.

        Args:
            redis_client: Client to use. If None, one is built from settings.

        Returns:
            Configured RedisStorage
        """
        return cls(redis_client=redis_client)

    async def save(self, key: str, value: bytes) -> None:
        """Store a value, replacing any previous one.

        Args:
            key: The storage key
            value: The serialized value
        """
        async with self._lock:
            await self._client.set(key, value)
        logger.debug("Saved %d bytes under %s", len(value), key)

    async def fetch(self, key: str) -> bytes:
        """Load a stored value.

        Args:
            key: The storage key

        Returns:
            The serialized value

        Raises:
            NotFound: If the key does not exist
        """
        async with self._lock:
            value = await self._client.get(key)
        if value is None:
            raise NotFound(f"No value stored for key: {key}")
        return value

    async def remove(self, *keys: str) -> None:
        """Delete keys with a single DEL command.

        Args:
            keys: The storage keys to delete
        """
        if not keys:
            return
        async with self._lock:
            await self._client.delete(*keys)
        logger.debug("Removed keys %s", ", ".join(keys))

    async def exists(self, key: str) -> bool:
        """Check whether a key exists.

        Args:
            key: The storage key

        Returns:
            True if present, False otherwise
        """
        async with self._lock:
            result: int = await self._client.exists(key)
        return result > 0

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except (RedisError, OSError) as e:
            logger.warning("Redis health check failed: %s", e)
            return False

    async def close(self) -> None:
        """Close the underlying Redis connection pool."""
        await self._client.aclose()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
