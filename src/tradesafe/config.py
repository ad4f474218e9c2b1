"""Connection settings for the TradeSafe API.

:class:`ClientSettings` carries everything needed to build a ready-to-use
:class:`~tradesafe.client.GraphQLClient`. It is usually built from the process
environment with :meth:`ClientSettings.from_env`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, SecretStr

from tradesafe.exceptions import ConfigurationError

DEFAULT_ENDPOINT = "https://api.tradesafe.co.za/graphql"
TOKEN_URL = "https://auth.tradesafe.co.za/oauth/token"

ENV_CLIENT_ID = "TRADESAFE_CLIENT_ID"
ENV_SECRET = "TRADESAFE_SECRET"
ENV_ENDPOINT = "TRADESAFE_ENDPOINT"


class ClientSettings(BaseModel):
    """Credentials and endpoint for a TradeSafe client.

    Attributes:
        client_id: OAuth2 client identifier.
        secret: OAuth2 client secret. Never rendered in reprs or logs.
        endpoint: GraphQL endpoint URL.
    """

    client_id: str
    secret: SecretStr
    endpoint: str = DEFAULT_ENDPOINT

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientSettings:
        """Build settings from ``TRADESAFE_*`` environment variables.

        Raises:
            ConfigurationError: If the client id or secret is unset or blank.
        """
        env = os.environ if environ is None else environ
        client_id = (env.get(ENV_CLIENT_ID) or "").strip()
        secret = (env.get(ENV_SECRET) or "").strip()

        missing = [name for name, value in ((ENV_CLIENT_ID, client_id), (ENV_SECRET, secret)) if not value]
        if missing:
            raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

        endpoint = (env.get(ENV_ENDPOINT) or "").strip() or DEFAULT_ENDPOINT
        return cls(client_id=client_id, secret=SecretStr(secret), endpoint=endpoint)
