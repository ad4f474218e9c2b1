"""Typed domain models for TradeSafe tokens and transactions.

Field names are snake_case in Python and camelCase on the wire. Models are
permissive about missing fields because each query selects only a subset.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TradeSafeModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_variables(self) -> dict[str, Any]:
        """Serialize for use as GraphQL variables."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


class TokenUser(TradeSafeModel):
    given_name: str | None = None
    family_name: str | None = None
    email: str | None = None
    mobile: str | None = None
    id_number: str | None = None


class TokenOrganization(TradeSafeModel):
    name: str | None = None
    trade_name: str | None = None
    type: str | None = None
    registration: str | None = None
    tax_number: str | None = None


class Token(TradeSafeModel):
    id: str | None = None
    name: str | None = None
    reference: str | None = None
    balance: float | None = None
    user: TokenUser | None = None
    organization: TokenOrganization | None = None


class UserInput(TradeSafeModel):
    given_name: str
    family_name: str
    email: str
    mobile: str
    id_number: str | None = None
    id_type: str | None = None
    id_country: str | None = None


class OrganizationInput(TradeSafeModel):
    name: str
    trade_name: str | None = None
    type: str
    registration_number: str
    tax_number: str | None = None


class BankAccountInput(TradeSafeModel):
    bank: str
    account_number: str
    account_type: str


class TokenInput(TradeSafeModel):
    user: UserInput | None = None
    organization: OrganizationInput | None = None
    bank_account: BankAccountInput | None = None


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------


class Party(TradeSafeModel):
    id: str | None = None
    role: str | None = None


class Allocation(TradeSafeModel):
    id: str | None = None
    value: float | None = None
    days_to_deliver: int | None = None
    days_to_inspect: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


class Transaction(TradeSafeModel):
    id: str | None = None
    title: str | None = None
    description: str | None = None
    industry: str | None = None
    state: str | None = None
    created_at: str | None = None
    parties: list[Party] | None = None
    allocations: list[Allocation] | None = None


class AllocationInput(TradeSafeModel):
    title: str
    description: str
    value: float
    days_to_deliver: int
    days_to_inspect: int


class PartyInput(TradeSafeModel):
    token: str
    role: str
    fee: float | None = None
    fee_type: str | None = None
    fee_allocation: str | None = None


class TransactionInput(TradeSafeModel):
    title: str
    description: str
    industry: str
    currency: str
    fee_allocation: str
    allocations: list[AllocationInput]
    parties: list[PartyInput]


class AllocationUpdateInput(TradeSafeModel):
    id: str
    title: str | None = None
    description: str | None = None
    value: float | None = None
    days_to_deliver: int | None = None
    days_to_inspect: int | None = None


class PartyUpdateInput(TradeSafeModel):
    id: str
    role: str | None = None
    fee: float | None = None
    fee_type: str | None = None
    fee_allocation: str | None = None


class TransactionUpdateInput(TradeSafeModel):
    title: str | None = None
    description: str | None = None
    industry: str | None = None
    fee_allocation: str | None = None
    allocations: list[AllocationUpdateInput] | None = None
    parties: list[PartyUpdateInput] | None = None
