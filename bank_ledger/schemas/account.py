"""
Pydantic schemas for account operations over HTTP.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from bank_ledger.models.account import Account
from bank_ledger.models.enums import AdmissionResult, TransactionKind
from bank_ledger.models.settings import AccountSettings
from bank_ledger.models.transaction import Transaction


# --- Request Schemas ---

class AccountOpen(BaseModel):
    """Request to open a new account."""
    nickname: str = Field(default="", max_length=100)


class AccountRename(BaseModel):
    nickname: str = Field(max_length=100)


class AccountSettingsUpdate(BaseModel):
    """Replacement fees. Omitted fields keep their current value."""
    overdraft_fee: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    management_fee: float | None = Field(default=None, ge=0, allow_inf_nan=False)


class TransactionCreate(BaseModel):
    """
    A transaction offered to an account.

    Withdrawals and management fees carry a negative amount.
    `kind` is taken as a plain string so an unrecognised name is
    reported as an unknown_kind rejection rather than a 422.
    """
    kind: str = Field(min_length=1, max_length=50)
    amount: float = Field(allow_inf_nan=False)


# --- Response Schemas ---

class AccountSettingsResponse(BaseModel):
    overdraft_fee: float
    management_fee: float

    @classmethod
    def from_domain(cls, settings: AccountSettings) -> "AccountSettingsResponse":
        return cls(
            overdraft_fee=settings.overdraft_fee,
            management_fee=settings.management_fee,
        )


class TransactionResponse(BaseModel):
    kind: TransactionKind
    amount: float
    timestamp: datetime

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            kind=transaction.kind,
            amount=transaction.amount,
            timestamp=transaction.timestamp,
        )


class AccountResponse(BaseModel):
    id: int
    nickname: str
    balance: float
    settings: AccountSettingsResponse
    transactions: list[TransactionResponse]

    @classmethod
    def from_domain(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            nickname=account.nickname,
            balance=account.balance,
            settings=AccountSettingsResponse.from_domain(account.settings),
            transactions=[
                TransactionResponse.from_domain(t) for t in account.transactions
            ],
        )


class AdmissionResponse(BaseModel):
    """Outcome of POST /accounts/{id}/transactions."""
    account_id: int
    outcome: AdmissionResult
    applied: bool
    balance: float
