"""
Tests for the error taxonomy and error translation.
"""

import httpx
import pydantic
import redis

from country_cache.errors import (
    InvalidData,
    NetworkFailure,
    NotFound,
    RepositoryFailure,
    StorageFailure,
    transform_error,
)


def test_taxonomy_errors_pass_through():
    """An error already in the taxonomy is returned unchanged."""
    error = InvalidData()
    assert transform_error(error) is error


def test_timeout_is_network_failure():
    """Transport timeouts become network failures."""
    result = transform_error(httpx.ReadTimeout("slow"))
    assert isinstance(result, NetworkFailure)
    assert "timed out" in result.message


def test_status_error_is_network_failure():
    """HTTP error statuses become network failures carrying the code."""
    request = httpx.Request("GET", "https://api.test/all")
    response = httpx.Response(500, request=request)
    error = httpx.HTTPStatusError("boom", request=request, response=response)

    result = transform_error(error)

    assert result == NetworkFailure("Request failed with status code: 500")


def test_connect_error_is_network_failure():
    """Connection errors become network failures."""
    assert isinstance(transform_error(httpx.ConnectError("refused")), NetworkFailure)


def test_redis_error_is_storage_failure():
    """Store errors become storage failures and keep their cause."""
    cause = redis.ConnectionError("down")
    result = transform_error(cause)
    assert isinstance(result, StorageFailure)
    assert result.__cause__ is cause


def test_decode_errors_are_invalid_data():
    """Validation and value errors become invalid data."""
    try:
        pydantic.TypeAdapter(int).validate_python("not a number")
    except pydantic.ValidationError as e:
        assert isinstance(transform_error(e), InvalidData)
    assert isinstance(transform_error(ValueError("bad json")), InvalidData)


def test_unknown_errors_use_default_kind():
    """Unclassified causes become repository failures unless told otherwise."""
    assert transform_error(RuntimeError("odd")) == RepositoryFailure("odd")
    assert transform_error(RuntimeError("odd"), default=NetworkFailure) == NetworkFailure("odd")


def test_equality_by_kind_and_message():
    """Errors compare equal when kind and message match."""
    assert NetworkFailure("x") == NetworkFailure("x")
    assert NetworkFailure("x") != StorageFailure("x")
    assert NetworkFailure("x") != NetworkFailure("y")


def test_string_form():
    """Errors render with their kind label."""
    assert str(StorageFailure("disk full")) == "Storage Error: disk full"
    assert str(NotFound()) == "Not Found: Resource not found"


def test_with_remote_error_copies():
    """The composite keeps kind, message and cause; the original is untouched."""
    cause = OSError("disk")
    local = transform_error(cause)
    remote = NetworkFailure("offline")

    composite = local.with_remote_error(remote)

    assert type(composite) is StorageFailure
    assert composite == local
    assert composite.__cause__ is cause
    assert composite.remote_error is remote
    assert local.remote_error is None
