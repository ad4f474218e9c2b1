"""Command-line interface for tradesafe."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel
from rich.console import Console

from tradesafe.client import GraphQLClient
from tradesafe.config import ClientSettings
from tradesafe.exceptions import AuthenticationError, ConfigurationError, RequestFailedError, TradeSafeError
from tradesafe.tokens import get_token, list_tokens
from tradesafe.transactions import create_checkout_link, get_transaction, list_transactions

Command = Callable[[GraphQLClient, argparse.Namespace], Awaitable[Any]]


def _package_version() -> str:
    try:
        return version("tradesafe")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tradesafe")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--env-file", default=None, help="Load TRADESAFE_* variables from this .env file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("auth", help="Verify credentials against the token endpoint")

    tokens = subparsers.add_parser("tokens", help="Token queries")
    tokens_sub = tokens.add_subparsers(dest="action", required=True)
    tokens_sub.add_parser("list")
    tokens_get = tokens_sub.add_parser("get")
    tokens_get.add_argument("id")

    transactions = subparsers.add_parser("transactions", help="Transaction queries")
    transactions_sub = transactions.add_subparsers(dest="action", required=True)
    transactions_sub.add_parser("list")
    transactions_get = transactions_sub.add_parser("get")
    transactions_get.add_argument("id")

    checkout = subparsers.add_parser("checkout-link", help="Create a checkout link for a transaction")
    checkout.add_argument("id")

    return parser


async def _auth(client: GraphQLClient, args: argparse.Namespace) -> dict[str, Any]:
    return {"authenticated": client.is_authenticated(), "endpoint": client.endpoint}


async def _tokens(client: GraphQLClient, args: argparse.Namespace) -> Any:
    if args.action == "list":
        return await list_tokens(client)
    return await get_token(client, args.id)


async def _transactions(client: GraphQLClient, args: argparse.Namespace) -> Any:
    if args.action == "list":
        return await list_transactions(client)
    return await get_transaction(client, args.id)


async def _checkout_link(client: GraphQLClient, args: argparse.Namespace) -> Any:
    return {"checkoutLink": await create_checkout_link(client, args.id)}


COMMANDS: dict[str, Command] = {
    "auth": _auth,
    "tokens": _tokens,
    "transactions": _transactions,
    "checkout-link": _checkout_link,
}


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    return result


async def _run(args: argparse.Namespace, settings: ClientSettings) -> Any:
    async with GraphQLClient.from_settings(settings) as client:
        await client.authenticate()
        return await COMMANDS[args.command](client, args)


def main(argv: list[str] | None = None, *, console: Console | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    out = console or Console()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    env_file = args.env_file or find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file)

    try:
        settings = ClientSettings.from_env()
        result = asyncio.run(_run(args, settings))
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except AuthenticationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except RequestFailedError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except TradeSafeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    out.print_json(json.dumps(_to_jsonable(result)))
    return 0
