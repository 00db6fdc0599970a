"""
Account repository — the durable collection of accounts.

The whole store lives in memory and is mirrored to a single
JSON file. It is read once at construction and rewritten in
full after every mutation. The repository is the only place
that assigns account ids or touches the file.

Accounts handed out are copies. Changing one does nothing
until it is passed back through update_account().
"""

import logging
import os
import tempfile
import threading
from pathlib import Path

from pydantic import ValidationError

from bank_ledger.models.account import Account
from bank_ledger.models.exceptions import (
    AccountNotFoundError,
    StoreConsistencyError,
)
from bank_ledger.models.settings import AccountSettings
from bank_ledger.models.transaction import Transaction
from bank_ledger.schemas.store import dump_store, parse_store

logger = logging.getLogger(__name__)

FIRST_ID = 1


class AccountRepository:
    """
    JSON-file-backed account store.

    The file path is the only configuration the repository
    accepts. Every public method holds `lock`; callers that
    read, modify and write back an account should hold it
    across the whole sequence:

        with repository.lock:
            account = repository.require_account(account_id)
            account.admit(-50, TransactionKind.WITHDRAWAL)
            repository.update_account(account)
    """

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self.lock = threading.RLock()
        self._accounts: list[Account] = self._load()
        # Highest id ever issued, so removed ids are never reused
        self._last_id = max((a.id for a in self._accounts), default=0)

    # --- Persistence ---

    def _load(self) -> list[Account]:
        """
        Read the backing file.

        A missing file is created empty. A file that cannot be
        parsed is treated as an empty store and left on disk
        untouched until the next save overwrites it.
        """
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write([])
            logger.info("Created empty store", extra={"path": str(self.path)})
            return []

        raw = self.path.read_bytes()
        try:
            accounts = parse_store(raw)
        except (ValidationError, ValueError) as e:
            logger.warning(
                "Store file is not a valid account store, starting empty",
                extra={"path": str(self.path), "error": str(e)},
            )
            return []

        logger.info(
            "Loaded store",
            extra={"path": str(self.path), "accounts": len(accounts)},
        )
        return accounts

    def _write(self, accounts: list[Account]) -> None:
        # Write next to the target, then rename over it, so a crash
        # mid-write leaves the previous file intact
        payload = dump_store(accounts)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def _commit(self, accounts: list[Account]) -> None:
        # Memory only changes once the file write has succeeded
        self._write(accounts)
        self._accounts = accounts

    # --- Reads ---

    def _find(self, account_id: int) -> Account | None:
        for account in self._accounts:
            if account.id == account_id:
                return account
        return None

    @staticmethod
    def _copy(account: Account) -> Account:
        # Transactions and settings are immutable, sharing them is safe
        return Account(
            id=account.id,
            settings=account.settings,
            nickname=account.nickname,
            transactions=account.transactions,
        )

    def get_account(self, account_id: int) -> Account | None:
        """Return a copy of the account, or None if it does not exist."""
        with self.lock:
            account = self._find(account_id)
            return self._copy(account) if account else None

    def require_account(self, account_id: int) -> Account:
        account = self.get_account(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def list_accounts(self) -> set[int]:
        with self.lock:
            return {a.id for a in self._accounts}

    def get_transactions(self, account_id: int) -> list[Transaction]:
        """Transaction history in insertion order; empty if the account is absent."""
        with self.lock:
            account = self._find(account_id)
            return list(account.transactions) if account else []

    def get_default_settings(self) -> AccountSettings:
        return AccountSettings()

    # --- Writes ---

    def _next_id(self) -> int:
        current_max = max((a.id for a in self._accounts), default=FIRST_ID - 1)
        return max(current_max, self._last_id) + 1

    def new_account(self, nickname: str = "") -> Account:
        """Create, persist and return an account with default settings."""
        with self.lock:
            account = Account(
                id=self._next_id(),
                settings=self.get_default_settings(),
                nickname=nickname,
            )
            self._commit(self._accounts + [account])
            self._last_id = account.id
            logger.info("Account created", extra={"account_id": account.id})
            return self._copy(account)

    def remove_account(self, account_id: int) -> None:
        """Delete an account. Removing an absent id is a no-op."""
        with self.lock:
            if self._find(account_id) is None:
                return
            self._commit([a for a in self._accounts if a.id != account_id])
            logger.info("Account removed", extra={"account_id": account_id})

    def update_account(self, account: Account) -> Account:
        """
        Store `account` in place of the one with the same id.

        An id not yet in the store is inserted. Returns a fresh
        copy read back from the store.
        """
        if account.id < FIRST_ID:
            raise ValueError(f"Account id must be >= {FIRST_ID}, got {account.id}")

        with self.lock:
            stored = self._copy(account)
            accounts = list(self._accounts)
            for index, existing in enumerate(accounts):
                if existing.id == account.id:
                    accounts[index] = stored
                    break
            else:
                accounts.append(stored)
            self._commit(accounts)
            self._last_id = max(self._last_id, stored.id)

            result = self.get_account(account.id)
            if result is None:
                raise StoreConsistencyError(
                    f"Account {account.id} missing right after it was written"
                )
            return result
