"""
Shared enumerations for the ledger domain.

TransactionKind values double as the persisted "type" tag,
so renaming a member breaks every existing store file.
"""

import enum


class TransactionKind(str, enum.Enum):
    """Purpose of a ledger entry. Determines the sign its amount must carry."""
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"
    INTEREST = "Interest"
    FEE_OVERDRAFT = "FeeOverdraft"
    FEE_MANAGEMENT = "FeeManagement"
    UNKNOWN = "Unknown"


class AmountSign(str, enum.Enum):
    """Sign an amount must have for a given kind."""
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    ANY = "ANY"


class AdmissionResult(str, enum.Enum):
    """
    Outcome of offering a transaction to an account.

    Only APPLIED means the offered transaction was recorded.
    OVERDRAFT_FEE_CHARGED is the one rejection that still
    changes the account: a fee entry was appended instead.
    """
    APPLIED = "applied"
    INVALID_AMOUNT = "invalid_amount"
    UNKNOWN_KIND = "unknown_kind"
    SYSTEM_ONLY_KIND = "system_only_kind"
    SIGN_MISMATCH = "sign_mismatch"
    ZERO_AMOUNT = "zero_amount"
    OVERDRAFT_FEE_CHARGED = "overdraft_fee_charged"

    @property
    def applied(self) -> bool:
        return self is AdmissionResult.APPLIED

    @property
    def changed_account(self) -> bool:
        return self in (
            AdmissionResult.APPLIED,
            AdmissionResult.OVERDRAFT_FEE_CHARGED,
        )
