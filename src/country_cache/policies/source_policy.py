"""Data source selection policy."""

from enum import Enum


class DataSourcePolicy(str, Enum):
    """How a single read combines the remote and local sources."""

    # Always fetch from remote and update local storage
    REMOTE_ONLY = "remote_only"
    # Only fetch from local storage
    LOCAL_ONLY = "local_only"
    # Try remote first, fall back to local if remote fails
    REMOTE_WITH_LOCAL_FALLBACK = "remote_with_local_fallback"
    # Use local while it is fresh, otherwise behave like REMOTE_WITH_LOCAL_FALLBACK
    LOCAL_WITH_REMOTE_REFRESH = "local_with_remote_refresh"

    @classmethod
    def default(cls) -> "DataSourcePolicy":
        """Policy used when the caller does not pick one."""
        return cls.LOCAL_WITH_REMOTE_REFRESH
