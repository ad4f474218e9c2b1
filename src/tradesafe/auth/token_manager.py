"""OAuth2 client-credentials token manager."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import SecretStr

from tradesafe.auth.credentials import AuthState, ClientCredentials, Session
from tradesafe.config import DEFAULT_ENDPOINT, TOKEN_URL
from tradesafe.exceptions import AuthenticationError, ConfigurationError

_LOG = logging.getLogger(__name__)


class TokenManager:
    """Exchanges client credentials for a bearer token and tracks auth state.

    The manager performs exactly one POST per :meth:`authenticate` call and
    never refreshes or retries. It has no knowledge of the GraphQL layer.
    """

    def __init__(self, http_client: httpx.AsyncClient, *, session: Session | None = None) -> None:
        self._http = http_client
        self._credentials: ClientCredentials | None = None
        self.session = session or Session(endpoint=DEFAULT_ENDPOINT)

    @property
    def state(self) -> AuthState:
        if self.session.access_token is not None:
            return AuthState.AUTHENTICATED
        if self._credentials is not None:
            return AuthState.CONFIGURED
        return AuthState.UNCONFIGURED

    def configure(self, client_id: str | None, secret: str | None) -> TokenManager:
        """Store credentials for a later :meth:`authenticate` call.

        Re-configuring keeps any token already held.

        Raises:
            ConfigurationError: If either value is empty or missing.
        """
        if not client_id or not secret:
            _LOG.error("Both a client id and a secret are required to configure the client")
            raise ConfigurationError("Both client_id and secret must be set.")

        self._credentials = ClientCredentials(client_id=client_id, secret=SecretStr(secret))
        return self

    async def authenticate(self) -> TokenManager:
        """Run the client-credentials grant and hold the returned token.

        Raises:
            ConfigurationError: If :meth:`configure` was never called.
            AuthenticationError: On a non-success status, a body without
                ``access_token``, or any transport failure.
        """
        if self._credentials is None:
            raise ConfigurationError("Authentication configuration is incomplete.")

        try:
            response = await self._http.post(TOKEN_URL, data=self._credentials.form_data())
        except httpx.HTTPError as exc:
            _LOG.error("Token request to %s failed: %s", TOKEN_URL, exc)
            raise AuthenticationError(f"Authentication failed: {exc}") from exc

        if not response.is_success:
            _LOG.error("Token endpoint returned %s", response.status_code)
            raise AuthenticationError(
                f"Authentication failed: {response.reason_phrase}",
                status_code=response.status_code,
            )

        access_token = _extract_access_token(response)
        if not access_token:
            _LOG.error("Token endpoint response did not include an access token")
            raise AuthenticationError(
                "Authentication failed: No access token received.",
                status_code=response.status_code,
            )

        self.session.access_token = SecretStr(access_token)
        _LOG.debug("Authenticated against %s", TOKEN_URL)
        return self

    def is_authenticated(self) -> bool:
        return self.session.access_token is not None

    def set_access_token(self, token: str) -> None:
        """Inject a bearer token directly, skipping the credential exchange.

        This is an override seam for pre-existing sessions and tests; normal
        code paths obtain tokens through :meth:`authenticate`.
        """
        if not token:
            raise ConfigurationError("Access token must be a non-empty string.")
        self.session.access_token = SecretStr(token)

    def authorization_header(self) -> dict[str, str]:
        if self.session.access_token is None:
            return {}
        return {"Authorization": f"Bearer {self.session.access_token.get_secret_value()}"}


def _extract_access_token(response: httpx.Response) -> str | None:
    try:
        payload: Any = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    token = payload.get("access_token")
    return token if isinstance(token, str) else None
