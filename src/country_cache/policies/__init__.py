"""Policies that steer how reads combine the remote and local sources."""

from .cache_policy import CachePolicy
from .source_policy import DataSourcePolicy

__all__ = [
    "CachePolicy",
    "DataSourcePolicy",
]
