"""Credential and session state held by the token manager."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, SecretStr


class AuthState(str, Enum):
    """Authentication lifecycle of a token manager."""

    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    AUTHENTICATED = "authenticated"


class ClientCredentials(BaseModel):
    """OAuth2 client identifier and secret."""

    client_id: str
    secret: SecretStr

    model_config = {"frozen": True}

    def form_data(self) -> dict[str, str]:
        """Form body for a client-credentials grant."""
        return {
            "grant_type": "client_credentials",
            "client_id": self.client_id,
            "client_secret": self.secret.get_secret_value(),
        }


@dataclass
class Session:
    """Mutable per-client session: the held bearer token and target endpoint."""

    endpoint: str | None
    access_token: SecretStr | None = None
