"""
FastAPI dependencies.

One AccountRepository per process: it owns the lock that
serialises access to the store file, so every request must
share it.
"""

from functools import lru_cache

from bank_ledger.config import get_settings
from bank_ledger.services.account_repository import AccountRepository
from bank_ledger.services.account_service import AccountService


@lru_cache()
def get_repository() -> AccountRepository:
    """Return the process-wide repository for the configured store path."""
    return AccountRepository(get_settings().STORE_PATH)


def get_account_service() -> AccountService:
    return AccountService(get_repository())
