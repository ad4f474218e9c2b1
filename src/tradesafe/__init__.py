"""Public API surface for tradesafe."""

from tradesafe.auth import AuthState, TokenManager
from tradesafe.client import GraphQLClient
from tradesafe.config import DEFAULT_ENDPOINT, TOKEN_URL, ClientSettings
from tradesafe.envelope import ResponseEnvelope, is_not_found_error, unwrap
from tradesafe.exceptions import (
    AuthenticationError,
    ConfigurationError,
    EndpointNotConfiguredError,
    MissingFieldError,
    RequestFailedError,
    TradeSafeError,
)
from tradesafe.models import Token, TokenInput, Transaction, TransactionInput, TransactionUpdateInput

__all__ = [
    "DEFAULT_ENDPOINT",
    "TOKEN_URL",
    "AuthState",
    "AuthenticationError",
    "ClientSettings",
    "ConfigurationError",
    "EndpointNotConfiguredError",
    "GraphQLClient",
    "MissingFieldError",
    "RequestFailedError",
    "ResponseEnvelope",
    "Token",
    "TokenInput",
    "TokenManager",
    "TradeSafeError",
    "Transaction",
    "TransactionInput",
    "TransactionUpdateInput",
    "is_not_found_error",
    "unwrap",
]
