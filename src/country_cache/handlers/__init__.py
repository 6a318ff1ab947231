"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic) and, for cache maintenance,
on the repository protocol.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Use case) -> (Data Access)
"""

from .country_handler import CountryHandler

__all__ = [
    "CountryHandler",
]
