"""In-process implementation of PersistentStorage.

Keeps values in a dictionary for the lifetime of the process. Useful for
tests and for running the API without Redis.
"""

import asyncio

from country_cache.errors import NotFound


class InMemoryStorage:
    """Dictionary-backed storage guarded by an asyncio lock.

    This class satisfies the PersistentStorage protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self) -> None:
        self._values: dict[str, bytes] = {}
        self._lock = asyncio.Lock()

    async def save(self, key: str, value: bytes) -> None:
        async with self._lock:
            self._values[key] = value

    async def fetch(self, key: str) -> bytes:
        async with self._lock:
            if key not in self._values:
                raise NotFound(f"No value stored for key: {key}")
            return self._values[key]

    async def remove(self, *keys: str) -> None:
        async with self._lock:
            for key in keys:
                self._values.pop(key, None)

    async def exists(self, key: str) -> bool:
        async with self._lock:
            return key in self._values

    async def health_check(self) -> bool:
        return True
