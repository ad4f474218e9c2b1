"""Transaction queries and mutations.

Nested allocation and party lists are sent under ``create`` or ``update`` keys,
which is how the API distinguishes new rows from edits to existing ones.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from tradesafe.client import GraphQLClient
from tradesafe.exceptions import MissingFieldError
from tradesafe.models import Transaction, TransactionInput, TransactionUpdateInput

LIST_TRANSACTIONS = """
query {
  transactions {
    data { id title description industry state createdAt }
  }
}
"""

GET_TRANSACTION = """
query ($id: ID!) {
  transaction(id: $id) {
    id
    title
    description
    industry
    state
    createdAt
    parties { id role }
    allocations { id value daysToDeliver daysToInspect createdAt updatedAt }
  }
}
"""

CREATE_TRANSACTION = """
mutation ($input: CreateTransactionInput!) {
  transactionCreate(input: $input) { id }
}
"""

UPDATE_TRANSACTION = """
mutation ($id: ID!, $input: UpdateTransactionInput!) {
  transactionUpdate(id: $id, input: $input) { id }
}
"""

CHECKOUT_LINK = """
mutation ($transactionId: ID!) {
  checkoutLink(transactionId: $transactionId)
}
"""

_TRANSACTION_LIST = TypeAdapter(list[Transaction])


def _nest(variables: dict[str, Any], action: str) -> dict[str, Any]:
    for key in ("allocations", "parties"):
        if key in variables:
            variables[key] = {action: variables[key]}
    return variables


async def list_transactions(client: GraphQLClient) -> list[Transaction]:
    payload = await client.request(LIST_TRANSACTIONS, "transactions")
    if not payload:
        return []
    return _TRANSACTION_LIST.validate_python(payload.get("data") or [])


async def get_transaction(client: GraphQLClient, transaction_id: str) -> Transaction | None:
    payload = await client.request(GET_TRANSACTION, "transaction", {"id": transaction_id})
    return Transaction.model_validate(payload) if payload is not None else None


async def create_transaction(client: GraphQLClient, transaction_input: TransactionInput) -> Transaction | None:
    variables = {"input": _nest(transaction_input.to_variables(), "create")}
    payload = await client.request(CREATE_TRANSACTION, "transactionCreate", variables)
    return Transaction.model_validate(payload) if payload is not None else None


async def update_transaction(
    client: GraphQLClient,
    transaction_id: str,
    update: TransactionUpdateInput,
) -> Transaction | None:
    if not transaction_id:
        raise MissingFieldError("The ID field is required to update a transaction.")

    variables = {"id": transaction_id, "input": _nest(update.to_variables(), "update")}
    payload = await client.request(UPDATE_TRANSACTION, "transactionUpdate", variables)
    return Transaction.model_validate(payload) if payload is not None else None


async def create_checkout_link(client: GraphQLClient, transaction_id: str) -> str | None:
    """Return a hosted checkout URL for *transaction_id*."""
    return await client.request(CHECKOUT_LINK, "checkoutLink", {"transactionId": transaction_id})
