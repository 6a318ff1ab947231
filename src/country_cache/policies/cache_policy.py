"""Cache freshness policy."""

from datetime import datetime, timedelta

from country_cache.config import settings


class CachePolicy:
    """Decides whether a stored collection is still fresh.

    A timestamp is fresh while no more than the expiration window has
    elapsed since it was recorded.

    Example:
        ```python
        policy = CachePolicy(expiration_seconds=600)
        policy.is_fresh(last_update, now=datetime.now(timezone.utc))
        ```
    """

    def __init__(self, expiration_seconds: float | None = None) -> None:
        """Initialize the cache policy.

        Args:
            expiration_seconds: Freshness window in seconds. Defaults to settings.
        """
        seconds = settings.cache_expiration_seconds if expiration_seconds is None else expiration_seconds
        if seconds <= 0:
            raise ValueError("Expiration window must be positive")
        self._window = timedelta(seconds=seconds)

    @property
    def expiration_time(self) -> timedelta:
        """Get the freshness window."""
        return self._window

    def is_fresh(self, last_update: datetime, now: datetime) -> bool:
        """Check if a timestamp is within the freshness window.

        Args:
            last_update: When the stored data was last written
            now: The current instant

        Returns:
            True iff ``now - last_update <= window``
        """
        return now - last_update <= self._window
