"""Token queries and mutations."""

from __future__ import annotations

from pydantic import TypeAdapter

from tradesafe.client import GraphQLClient
from tradesafe.exceptions import MissingFieldError
from tradesafe.models import Token, TokenInput

_TOKEN_FIELDS = """
    id
    name
    reference
    user { givenName familyName email mobile }
    organization { name tradeName type registration taxNumber }
"""

LIST_TOKENS = f"query {{ tokens {{ data {{ {_TOKEN_FIELDS} }} }} }}"

GET_TOKEN = f"query ($id: ID!) {{ token(id: $id) {{ {_TOKEN_FIELDS} balance }} }}"

CREATE_TOKEN = """
mutation ($input: TokenInput!) {
  tokenCreate(input: $input) { id user { email } }
}
"""

UPDATE_TOKEN = """
mutation ($id: ID!, $update: TokenInput!) {
  tokenUpdate(id: $id, input: $update) { id }
}
"""

_TOKEN_LIST = TypeAdapter(list[Token])


async def list_tokens(client: GraphQLClient) -> list[Token] | None:
    payload = await client.request(LIST_TOKENS, "tokens")
    if payload is None:
        return None
    return _TOKEN_LIST.validate_python(payload.get("data") or [])


async def get_token(client: GraphQLClient, token_id: str) -> Token | None:
    payload = await client.request(GET_TOKEN, "token", {"id": token_id})
    return Token.model_validate(payload) if payload is not None else None


async def create_token(client: GraphQLClient, token_input: TokenInput) -> Token | None:
    payload = await client.request(CREATE_TOKEN, "tokenCreate", {"input": token_input.to_variables()})
    return Token.model_validate(payload) if payload is not None else None


async def update_token(client: GraphQLClient, token_id: str, update: TokenInput) -> Token | None:
    """Update an existing token.

    Raises:
        MissingFieldError: If *token_id* is empty.
    """
    if not token_id:
        raise MissingFieldError("The ID field is required to update a token.")

    payload = await client.request(UPDATE_TOKEN, "tokenUpdate", {"id": token_id, "update": update.to_variables()})
    return Token.model_validate(payload) if payload is not None else None
