"""
Ledger domain package.

Pure Python: nothing in here touches the filesystem. The
repository in bank_ledger.services handles persistence.
"""

from bank_ledger.models.enums import (
    TransactionKind,
    AmountSign,
    AdmissionResult,
)
from bank_ledger.models.exceptions import (
    LedgerError,
    AmountOutOfRangeError,
    AccountNotFoundError,
    StoreConsistencyError,
)
from bank_ledger.models.kind_rules import KIND_RULES, KindRule
from bank_ledger.models.transaction import Transaction
from bank_ledger.models.settings import AccountSettings
from bank_ledger.models.account import Account

__all__ = [
    "TransactionKind",
    "AmountSign",
    "AdmissionResult",
    "LedgerError",
    "AmountOutOfRangeError",
    "AccountNotFoundError",
    "StoreConsistencyError",
    "KIND_RULES",
    "KindRule",
    "Transaction",
    "AccountSettings",
    "Account",
]
