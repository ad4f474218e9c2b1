"""Exception hierarchy for tradesafe.

All tradesafe exceptions inherit from :class:`TradeSafeError`, making it easy
to catch any library error with a single ``except`` clause while still allowing
callers to handle specific failure modes.
"""

from __future__ import annotations

from typing import Any


class TradeSafeError(Exception):
    """Base exception for all tradesafe errors."""


class ConfigurationError(TradeSafeError):
    """Raised when a required setup value is missing at the point it is needed."""


class EndpointNotConfiguredError(ConfigurationError):
    """Raised when a request is attempted without a GraphQL endpoint."""

    def __init__(self, message: str = "GraphQL endpoint is not configured.") -> None:
        super().__init__(message)


class AuthenticationError(TradeSafeError):
    """Raised when the client-credentials exchange does not yield a token.

    Attributes:
        status_code: HTTP status of the token endpoint response, if one was received.
    """

    def __init__(self, message: str = "Failed to authenticate with TradeSafe.", *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RequestFailedError(TradeSafeError):
    """Raised when a GraphQL request produces no usable data.

    Attributes:
        status_code: HTTP status of the GraphQL response, if one was received.
        errors: The ``errors`` list reported by the server, if any.
    """

    def __init__(
        self,
        message: str = "The request to the GraphQL API failed.",
        *,
        status_code: int | None = None,
        errors: list[Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors


class MissingFieldError(TradeSafeError):
    """Raised when a domain call is missing a required identifier."""
