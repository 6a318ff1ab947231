"""Error taxonomy for the country cache.

Every failure that crosses the repository boundary is one of the classes
below. Raw transport, storage and decoding errors are translated with
``transform_error`` and never leak to callers.
"""

import copy

import httpx
import pydantic
import redis


class CountryCacheError(Exception):
    """Base class for all country cache errors.

    Attributes:
        message: Human-readable detail
        remote_error: Remote failure discarded in favour of this one when a
            local fallback also failed (None otherwise)
    """

    label = "Country Cache Error"

    def __init__(self, message: str = "") -> None:
        self.message = message
        self.remote_error: "CountryCacheError | None" = None
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CountryCacheError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __str__(self) -> str:
        if self.message:
            return f"{self.label}: {self.message}"
        return self.label

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def with_remote_error(self, remote_error: "CountryCacheError") -> "CountryCacheError":
        """Copy of this error carrying a discarded remote failure.

        The original instance is left untouched.

        Args:
            remote_error: The remote failure superseded by this one

        Returns:
            A new error of the same kind and message
        """
        composite = copy.copy(self)
        composite.__cause__ = self.__cause__
        composite.remote_error = remote_error
        return composite


class NetworkFailure(CountryCacheError):
    """The remote source could not be reached or answered with an error."""

    label = "Network Error"


class StorageFailure(CountryCacheError):
    """The persistent store failed to save, fetch or remove a value."""

    label = "Storage Error"


class InvalidData(CountryCacheError):
    """Data could not be decoded into the domain model."""

    label = "Invalid Data Error"

    def __init__(self, message: str = "The data format is incorrect") -> None:
        super().__init__(message)


class RepositoryFailure(CountryCacheError):
    """Catch-all for causes that fit no other kind."""

    label = "Repository Error"


class NotFound(CountryCacheError):
    """Nothing is stored under the requested key."""

    label = "Not Found"

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message)


def transform_error(
    error: BaseException,
    default: type[CountryCacheError] = RepositoryFailure,
) -> CountryCacheError:
    """Translate any exception into the country cache taxonomy.

    Errors that already belong to the taxonomy are returned unchanged.

    Args:
        error: The exception to classify
        default: Kind used for causes that match no known family

    Returns:
        The classified error, with ``__cause__`` set to the original
    """
    if isinstance(error, CountryCacheError):
        return error

    translated: CountryCacheError
    if isinstance(error, httpx.TimeoutException):
        translated = NetworkFailure(f"Request timed out: {error}")
    elif isinstance(error, httpx.HTTPStatusError):
        translated = NetworkFailure(
            f"Request failed with status code: {error.response.status_code}"
        )
    elif isinstance(error, (httpx.HTTPError, ConnectionError)):
        translated = NetworkFailure(str(error) or type(error).__name__)
    elif isinstance(error, (redis.RedisError, OSError)):
        translated = StorageFailure(str(error) or type(error).__name__)
    elif isinstance(error, (pydantic.ValidationError, ValueError)):
        translated = InvalidData(f"Failed to decode data: {error}")
    else:
        translated = default(str(error) or type(error).__name__)

    translated.__cause__ = error
    return translated
