"""Persistence and orchestration services."""

from bank_ledger.services.account_repository import AccountRepository
from bank_ledger.services.account_service import AccountService

__all__ = ["AccountRepository", "AccountService"]
