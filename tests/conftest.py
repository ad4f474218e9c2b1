"""Shared test fixtures for tradesafe tests."""

from __future__ import annotations

import httpx
import pytest

from tests.fakes.api import FakeTradeSafe
from tradesafe.client import GraphQLClient
from tradesafe.config import DEFAULT_ENDPOINT


@pytest.fixture
def fake_api() -> FakeTradeSafe:
    return FakeTradeSafe()


@pytest.fixture
def http_client(fake_api: FakeTradeSafe) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_api))


@pytest.fixture
def client(http_client: httpx.AsyncClient) -> GraphQLClient:
    """A client pointed at the fake API with no credentials configured."""
    return GraphQLClient(DEFAULT_ENDPOINT, http_client=http_client)


@pytest.fixture
def authed_client(client: GraphQLClient) -> GraphQLClient:
    """A client holding an injected bearer token."""
    client.set_access_token("tok_123")
    return client
