"""Persistent storage protocol.

Defines the interface for the key-value store backing the local source.
Values are opaque serialized blobs.

Implementations can include:
- Redis (default)
- In-process dictionary (tests, single-process runs)
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PersistentStorage(Protocol):
    """Protocol for async key-value storage backends.

    Implementations serialize their own access so that concurrent calls
    against the same key never interleave.
    """

    async def save(self, key: str, value: bytes) -> None:
        """Store a value, replacing any previous one.

        Args:
            key: The storage key
            value: The serialized value
        """
        ...

    async def fetch(self, key: str) -> bytes:
        """Load a stored value.

        Args:
            key: The storage key

        Returns:
            The serialized value

        Raises:
            NotFound: If nothing is stored under the key
        """
        ...

    async def remove(self, *keys: str) -> None:
        """Remove one or more keys in a single operation.

        Args:
            keys: The storage keys to remove (missing keys are ignored)
        """
        ...

    async def exists(self, key: str) -> bool:
        """Check whether a value is stored under the key.

        Args:
            key: The storage key

        Returns:
            True if present, False otherwise
        """
        ...

    async def health_check(self) -> bool:
        """Check if the backend is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
