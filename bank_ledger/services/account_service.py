"""
Account service — the operations the HTTP layer calls.

Each method is one read-modify-write against the repository,
done under the repository lock so two requests for the same
account cannot interleave. Business rules live on Account;
this service only fetches, delegates and persists.
"""

import logging

from bank_ledger.models.account import Account
from bank_ledger.models.enums import AdmissionResult, TransactionKind
from bank_ledger.models.transaction import Transaction
from bank_ledger.services.account_repository import AccountRepository

logger = logging.getLogger(__name__)


class AccountService:

    def __init__(self, repository: AccountRepository):
        self.repository = repository

    def open_account(self, nickname: str = "") -> Account:
        return self.repository.new_account(nickname=nickname)

    def get_account(self, account_id: int) -> Account:
        """Get an account by ID. Raises AccountNotFoundError."""
        return self.repository.require_account(account_id)

    def list_account_ids(self) -> list[int]:
        return sorted(self.repository.list_accounts())

    def close_account(self, account_id: int) -> None:
        """Remove an account. Unlike the repository, a missing id is an error."""
        with self.repository.lock:
            self.repository.require_account(account_id)
            self.repository.remove_account(account_id)

    def get_transactions(self, account_id: int) -> list[Transaction]:
        with self.repository.lock:
            self.repository.require_account(account_id)
            return self.repository.get_transactions(account_id)

    def add_transaction(
        self, account_id: int, kind: TransactionKind | str, amount: float
    ) -> tuple[AdmissionResult, Account]:
        """
        Offer a transaction to an account and persist the outcome.

        The account is saved whenever it changed, which includes
        a rejected withdrawal that left an overdraft fee behind.
        Returns the outcome and the account as now stored.
        """
        with self.repository.lock:
            account = self.repository.require_account(account_id)
            result = account.admit(amount, kind)
            if result.changed_account:
                account = self.repository.update_account(account)

        logger.info(
            "Transaction offered",
            extra={
                "account_id": account_id,
                "kind": str(getattr(kind, "value", kind)),
                "amount": amount,
                "outcome": result.value,
                "balance": account.balance,
            },
        )
        return result, account

    def rename_account(self, account_id: int, nickname: str) -> Account:
        with self.repository.lock:
            account = self.repository.require_account(account_id)
            account.rename(nickname)
            return self.repository.update_account(account)

    def update_settings(self, account_id: int, **changes) -> Account:
        """Replace some or all of an account's fees."""
        with self.repository.lock:
            account = self.repository.require_account(account_id)
            account.replace_settings(account.settings.with_changes(**changes))
            return self.repository.update_account(account)
