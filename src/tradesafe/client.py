"""Async GraphQL client with OAuth2 client-credentials authentication."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx

from tradesafe.auth import AuthState, Session, TokenManager
from tradesafe.config import DEFAULT_ENDPOINT, ClientSettings
from tradesafe.envelope import ResponseEnvelope, is_not_found_error, unwrap
from tradesafe.exceptions import EndpointNotConfiguredError, RequestFailedError

_LOG = logging.getLogger(__name__)


class GraphQLClient:
    """Sends GraphQL operations to a single endpoint using a bearer token.

    Typical use::

        client = await GraphQLClient().configure(client_id, secret).authenticate()
        tokens = await client.request(query, "tokens")

    Each :meth:`request` call reads the currently held token and mutates no
    client state, so one instance can serve concurrent callers. There is no
    retry, refresh or timeout policy; a failure is reported once.
    """

    def __init__(self, endpoint: str | None = DEFAULT_ENDPOINT, *, http_client: httpx.AsyncClient | None = None) -> None:
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=None)
        self._auth = TokenManager(self._http, session=Session(endpoint=endpoint))

    @classmethod
    def from_settings(cls, settings: ClientSettings, *, http_client: httpx.AsyncClient | None = None) -> GraphQLClient:
        client = cls(settings.endpoint, http_client=http_client)
        return client.configure(settings.client_id, settings.secret.get_secret_value())

    async def __aenter__(self) -> GraphQLClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    @property
    def endpoint(self) -> str | None:
        return self._auth.session.endpoint

    @endpoint.setter
    def endpoint(self, value: str | None) -> None:
        self._auth.session.endpoint = value

    @property
    def auth_state(self) -> AuthState:
        return self._auth.state

    def configure(self, client_id: str | None, secret: str | None) -> GraphQLClient:
        """Store credentials. See :meth:`TokenManager.configure`."""
        self._auth.configure(client_id, secret)
        return self

    async def authenticate(self) -> GraphQLClient:
        """Obtain a bearer token. See :meth:`TokenManager.authenticate`."""
        await self._auth.authenticate()
        return self

    def is_authenticated(self) -> bool:
        return self._auth.is_authenticated()

    def set_access_token(self, token: str) -> None:
        """Override seam: use *token* without running the credential exchange."""
        self._auth.set_access_token(token)

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    async def request(
        self,
        query: str,
        operation_name: str,
        variables: Mapping[str, Any] | None = None,
    ) -> Any:
        """Execute *query* and return the payload under ``data[operation_name]``.

        Args:
            query: GraphQL document.
            operation_name: Top-level ``data`` key holding the wanted result.
            variables: Variable bindings for the document.

        Returns:
            The payload for *operation_name*, or None when the server found
            nothing.

        Raises:
            EndpointNotConfiguredError: If the endpoint was cleared.
            RequestFailedError: On transport failure, a non-success status, or
                errors that leave *operation_name* without data.
        """
        endpoint = self.endpoint
        if not endpoint:
            raise EndpointNotConfiguredError()

        try:
            envelope = await self._send(endpoint, query, operation_name, dict(variables or {}))
            return unwrap(envelope, operation_name)
        except RequestFailedError as exc:
            if is_not_found_error(exc):
                _LOG.debug("No results for %s", operation_name)
                return None
            _LOG.error("GraphQL request for %s failed: %s", operation_name, exc)
            raise

    async def _send(
        self,
        endpoint: str,
        query: str,
        operation_name: str,
        variables: dict[str, Any],
    ) -> ResponseEnvelope:
        headers = {"Content-Type": "application/json", **self._auth.authorization_header()}
        _LOG.debug("POST %s (%s)", endpoint, operation_name)

        try:
            response = await self._http.post(endpoint, json={"query": query, "variables": variables}, headers=headers)
        except httpx.HTTPError as exc:
            raise RequestFailedError(f"GraphQL request failed: {exc}") from exc

        if not response.is_success:
            raise RequestFailedError(
                f"GraphQL request failed: {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            return ResponseEnvelope.model_validate(response.json())
        except ValueError as exc:
            raise RequestFailedError(
                "GraphQL response is not a valid envelope",
                status_code=response.status_code,
            ) from exc
