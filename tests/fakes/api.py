"""In-process fake of the TradeSafe token and GraphQL endpoints."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx

from tradesafe.config import TOKEN_URL


@dataclass
class FakeTradeSafe:
    """Serves canned responses through ``httpx.MockTransport``.

    Bodies given as ``bytes`` are sent verbatim; anything else is JSON-encoded.
    """

    token_status: int = 200
    token_body: Any = field(default_factory=lambda: {"access_token": "tok_123", "token_type": "Bearer"})
    graphql_status: int = 200
    graphql_body: Any = field(default_factory=lambda: {"data": {}})
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if request.url == httpx.URL(TOKEN_URL):
            return self._respond(self.token_status, self.token_body)
        return self._respond(self.graphql_status, self.graphql_body)

    @staticmethod
    def _respond(status: int, body: Any) -> httpx.Response:
        if isinstance(body, bytes):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    @property
    def token_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url == httpx.URL(TOKEN_URL)]

    @property
    def graphql_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url != httpx.URL(TOKEN_URL)]

    def last_graphql_body(self) -> dict[str, Any]:
        return json.loads(self.graphql_requests[-1].content)
