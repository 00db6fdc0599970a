"""
Account entity.

An account owns an ordered list of transactions and nothing
else that could drift: the balance is always recomputed from
the list. The list is exposed read-only. The one way to append
to it is admit() (or try_add_transaction(), its boolean form),
which runs the admission rules below.

Admission rules, in order:
1. Non-finite amounts, and amounts that would make the balance
   non-finite, are rejected.
2. Unknown and system-only kinds are rejected.
3. The amount's sign must match the kind; zero deposits are rejected.
4. A withdrawal that would take the projected balance below zero
   is rejected, and an overdraft fee is recorded in its place.
5. Zero withdrawals are rejected.
6. Anything left is appended.
"""

import logging
from datetime import datetime
from typing import Iterable

from bank_ledger.models.enums import AdmissionResult, TransactionKind
from bank_ledger.models.kind_rules import (
    is_finite_amount,
    is_system_only,
    sign_allows,
)
from bank_ledger.models.settings import AccountSettings
from bank_ledger.models.transaction import Transaction

logger = logging.getLogger(__name__)


class Account:

    def __init__(
        self,
        id: int,
        settings: AccountSettings | None = None,
        nickname: str = "",
        transactions: Iterable[Transaction] = (),
    ):
        self.id = id
        self.settings = settings or AccountSettings()
        self.nickname = nickname or ""
        self._transactions: list[Transaction] = list(transactions)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    @property
    def balance(self) -> float:
        return sum(t.amount for t in self._transactions)

    def admit(
        self,
        amount: float,
        kind: TransactionKind,
        timestamp: datetime | None = None,
    ) -> AdmissionResult:
        """
        Offer a transaction to the account.

        The account is either left untouched or gains exactly
        one entry. For OVERDRAFT_FEE_CHARGED that entry is the
        fee, not the offered withdrawal.
        """
        try:
            amount = float(amount)
        except (TypeError, ValueError):
            return self._reject(AdmissionResult.INVALID_AMOUNT, amount, kind)
        if not is_finite_amount(amount):
            return self._reject(AdmissionResult.INVALID_AMOUNT, amount, kind)

        try:
            kind = TransactionKind(kind)
        except ValueError:
            return self._reject(AdmissionResult.UNKNOWN_KIND, amount, kind)
        if kind is TransactionKind.UNKNOWN:
            return self._reject(AdmissionResult.UNKNOWN_KIND, amount, kind)
        if is_system_only(kind):
            return self._reject(AdmissionResult.SYSTEM_ONLY_KIND, amount, kind)

        if not sign_allows(kind, amount):
            return self._reject(AdmissionResult.SIGN_MISMATCH, amount, kind)
        if kind is TransactionKind.DEPOSIT and amount == 0:
            return self._reject(AdmissionResult.ZERO_AMOUNT, amount, kind)

        timestamp = timestamp or datetime.now()
        projected_balance = self.balance + amount
        if not is_finite_amount(projected_balance):
            return self._reject(AdmissionResult.INVALID_AMOUNT, amount, kind)

        if kind is TransactionKind.WITHDRAWAL and projected_balance < 0:
            # Exactly one fee, even if it pushes the balance further down
            fee = Transaction(
                TransactionKind.FEE_OVERDRAFT,
                -abs(self.settings.overdraft_fee),
                timestamp,
            )
            self._transactions.append(fee)
            logger.info(
                "Overdraft fee charged",
                extra={
                    "account_id": self.id,
                    "requested_amount": amount,
                    "fee": fee.amount,
                },
            )
            return AdmissionResult.OVERDRAFT_FEE_CHARGED

        if kind is TransactionKind.WITHDRAWAL and amount == 0:
            return self._reject(AdmissionResult.ZERO_AMOUNT, amount, kind)

        self._transactions.append(Transaction(kind, amount, timestamp))
        return AdmissionResult.APPLIED

    def try_add_transaction(self, amount: float, kind: TransactionKind) -> bool:
        """Boolean form of admit(): True only if the transaction was recorded."""
        return self.admit(amount, kind).applied

    def replace_settings(self, settings: AccountSettings) -> None:
        self.settings = settings

    def rename(self, nickname: str) -> None:
        self.nickname = nickname or ""

    def _reject(self, result, amount, kind) -> AdmissionResult:
        logger.debug(
            "Transaction rejected",
            extra={
                "account_id": self.id,
                "outcome": result.value,
                "amount": repr(amount),
                "kind": str(getattr(kind, "value", kind)),
            },
        )
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return (
            self.id == other.id
            and self.settings == other.settings
            and self.nickname == other.nickname
            and self._transactions == other._transactions
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"<Account {self.id} balance={self.balance} "
            f"({len(self._transactions)} transactions)>"
        )
