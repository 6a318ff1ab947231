"""
Tests for the cache freshness and data source policies.
"""

from datetime import timedelta

import pytest
from fakes import NOW

from country_cache.policies import CachePolicy, DataSourcePolicy


def test_default_window_is_one_hour():
    """The default freshness window comes from settings (3600 s)."""
    assert CachePolicy().expiration_time == timedelta(seconds=3600)


def test_fresh_within_window():
    """A timestamp inside the window is fresh."""
    policy = CachePolicy(expiration_seconds=60)
    assert policy.is_fresh(NOW - timedelta(seconds=59), now=NOW)


def test_fresh_at_window_boundary():
    """Exactly the window's age is still fresh."""
    policy = CachePolicy(expiration_seconds=60)
    assert policy.is_fresh(NOW - timedelta(seconds=60), now=NOW)


def test_stale_past_window():
    """Anything older than the window is stale."""
    policy = CachePolicy(expiration_seconds=60)
    assert not policy.is_fresh(NOW - timedelta(seconds=61), now=NOW)


def test_invalid_window_rejected():
    """A negative window is a configuration error."""
    with pytest.raises(ValueError):
        CachePolicy(expiration_seconds=-1)


@pytest.mark.parametrize("seconds", [0, 0.0])
def test_zero_window_rejected(seconds):
    """An explicit zero window is rejected, not replaced by the default."""
    with pytest.raises(ValueError):
        CachePolicy(expiration_seconds=seconds)


def test_default_source_policy():
    """Local-with-remote-refresh is the default."""
    assert DataSourcePolicy.default() is DataSourcePolicy.LOCAL_WITH_REMOTE_REFRESH


def test_source_policy_from_value():
    """Policies can be parsed from their string value."""
    assert DataSourcePolicy("remote_only") is DataSourcePolicy.REMOTE_ONLY
