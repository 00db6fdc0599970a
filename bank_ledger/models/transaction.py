"""
Transaction value.

One signed ledger entry. A Transaction validates itself once,
at construction, and can never change afterwards. There is
no way to end up with an amount whose sign disagrees with
its kind.
"""

from dataclasses import dataclass
from datetime import datetime

from bank_ledger.models.enums import AmountSign, TransactionKind
from bank_ledger.models.exceptions import AmountOutOfRangeError
from bank_ledger.models.kind_rules import is_finite_amount, rule_for


@dataclass(frozen=True)
class Transaction:
    kind: TransactionKind
    amount: float
    timestamp: datetime

    def __post_init__(self):
        if not isinstance(self.timestamp, datetime):
            raise TypeError(
                f"timestamp must be a datetime, got {type(self.timestamp).__name__}"
            )

        # Normalise plain strings ("Deposit") to the enum
        object.__setattr__(self, "kind", TransactionKind(self.kind))
        object.__setattr__(self, "amount", float(self.amount))

        if not is_finite_amount(self.amount):
            raise AmountOutOfRangeError(
                f"amount must be a finite number, got {self.amount}"
            )

        sign = rule_for(self.kind).sign
        if sign == AmountSign.NEGATIVE and self.amount > 0:
            raise AmountOutOfRangeError(
                f"Negative amount expected for {self.kind.value}, "
                f"got {self.amount}"
            )
        if sign == AmountSign.POSITIVE and self.amount < 0:
            raise AmountOutOfRangeError(
                f"Positive amount expected for {self.kind.value}, "
                f"got {self.amount}"
            )

    def __repr__(self) -> str:
        return (
            f"<Transaction {self.kind.value} {self.amount} "
            f"{self.timestamp.isoformat()}>"
        )
