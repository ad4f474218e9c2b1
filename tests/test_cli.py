from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any

import httpx
import pytest
from rich.console import Console

from tests.fakes.api import FakeTradeSafe
from tradesafe.cli import build_parser, main
from tradesafe.client import GraphQLClient
from tradesafe.config import ClientSettings

ENV_VARS = ("TRADESAFE_CLIENT_ID", "TRADESAFE_SECRET", "TRADESAFE_ENDPOINT")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # set-then-delete so anything load_dotenv writes is removed on teardown
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRADESAFE_CLIENT_ID", "id")
    monkeypatch.setenv("TRADESAFE_SECRET", "secret")


@pytest.fixture
def served(monkeypatch: pytest.MonkeyPatch, fake_api: FakeTradeSafe) -> FakeTradeSafe:
    """Route every client the CLI builds to the fake API."""
    original = GraphQLClient.from_settings.__func__

    def from_settings(
        cls: type[GraphQLClient], settings: ClientSettings, *, http_client: httpx.AsyncClient | None = None
    ) -> GraphQLClient:
        return original(cls, settings, http_client=httpx.AsyncClient(transport=httpx.MockTransport(fake_api)))

    monkeypatch.setattr(GraphQLClient, "from_settings", classmethod(from_settings))
    return fake_api


def _run_cli(argv: list[str]) -> tuple[int, Any]:
    buffer = io.StringIO()
    code = main(argv, console=Console(file=buffer, color_system=None, width=200))
    output = buffer.getvalue()
    return code, json.loads(output) if output else None


def test_build_parser_requires_command() -> None:
    parser = build_parser()

    with pytest.raises(SystemExit):
        parser.parse_args([])


def test_build_parser_parses_nested_commands() -> None:
    args = build_parser().parse_args(["--verbose", "tokens", "get", "t1"])

    assert args.command == "tokens"
    assert args.action == "get"
    assert args.id == "t1"
    assert args.verbose is True


def test_main_returns_3_when_credentials_missing(capsys: pytest.CaptureFixture[str]) -> None:
    code, _ = _run_cli(["auth"])

    assert code == 3
    assert "TRADESAFE_CLIENT_ID" in capsys.readouterr().err


@pytest.mark.usefixtures("credentials")
def test_main_auth_reports_status(served: FakeTradeSafe) -> None:
    code, output = _run_cli(["auth"])

    assert code == 0
    assert output == {"authenticated": True, "endpoint": "https://api.tradesafe.co.za/graphql"}
    assert len(served.token_requests) == 1


@pytest.mark.usefixtures("credentials")
def test_main_returns_4_on_authentication_failure(served: FakeTradeSafe, capsys: pytest.CaptureFixture[str]) -> None:
    served.token_status = 401

    code, _ = _run_cli(["auth"])

    assert code == 4
    assert "Authentication failed" in capsys.readouterr().err


@pytest.mark.usefixtures("credentials")
def test_main_returns_5_on_request_failure(served: FakeTradeSafe) -> None:
    served.graphql_status = 502

    code, _ = _run_cli(["transactions", "list"])

    assert code == 5


@pytest.mark.usefixtures("credentials")
def test_main_tokens_list_prints_camel_case_json(served: FakeTradeSafe) -> None:
    served.graphql_body = {"data": {"tokens": {"data": [{"id": "t1", "user": {"givenName": "Jane"}}]}}}

    code, output = _run_cli(["tokens", "list"])

    assert code == 0
    assert output == [{"id": "t1", "user": {"givenName": "Jane"}}]


@pytest.mark.usefixtures("credentials")
def test_main_transactions_get_prints_null_when_missing(served: FakeTradeSafe) -> None:
    served.graphql_body = {"data": {"transaction": None}}

    code, output = _run_cli(["transactions", "get", "tx404"])

    assert code == 0
    assert output is None


@pytest.mark.usefixtures("credentials")
def test_main_checkout_link(served: FakeTradeSafe) -> None:
    served.graphql_body = {"data": {"checkoutLink": "https://pay.example.com/abc"}}

    code, output = _run_cli(["checkout-link", "tx1"])

    assert code == 0
    assert output == {"checkoutLink": "https://pay.example.com/abc"}
    assert served.last_graphql_body()["variables"] == {"transactionId": "tx1"}


def test_main_reads_env_file(served: FakeTradeSafe, tmp_path: Path) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text(
        "TRADESAFE_CLIENT_ID=file-id\nTRADESAFE_SECRET=file-secret\nTRADESAFE_ENDPOINT=https://sandbox.example.com/graphql\n",
        encoding="utf-8",
    )

    code, output = _run_cli(["--env-file", str(env_file), "auth"])

    assert code == 0
    assert output["endpoint"] == "https://sandbox.example.com/graphql"
    assert b"client_id=file-id" in served.token_requests[0].content
