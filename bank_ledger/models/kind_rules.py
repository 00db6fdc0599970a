"""
Classification table for transaction kinds.

Every sign and "who may create this" decision in the system
reads from KIND_RULES. Nothing else hardcodes per-kind rules.
"""

import math
from typing import NamedTuple

from bank_ledger.models.enums import AmountSign, TransactionKind


class KindRule(NamedTuple):
    sign: AmountSign
    caller_creatable: bool


KIND_RULES: dict[TransactionKind, KindRule] = {
    TransactionKind.DEPOSIT: KindRule(AmountSign.POSITIVE, True),
    TransactionKind.INTEREST: KindRule(AmountSign.POSITIVE, False),
    TransactionKind.WITHDRAWAL: KindRule(AmountSign.NEGATIVE, True),
    TransactionKind.FEE_OVERDRAFT: KindRule(AmountSign.NEGATIVE, False),
    TransactionKind.FEE_MANAGEMENT: KindRule(AmountSign.NEGATIVE, True),
    TransactionKind.UNKNOWN: KindRule(AmountSign.ANY, False),
}


def rule_for(kind: TransactionKind) -> KindRule:
    return KIND_RULES[TransactionKind(kind)]


def is_system_only(kind: TransactionKind) -> bool:
    """True for kinds only the engine itself may record (fees, interest)."""
    kind = TransactionKind(kind)
    return kind is not TransactionKind.UNKNOWN and not rule_for(kind).caller_creatable


def is_finite_amount(amount: float) -> bool:
    return not (math.isnan(amount) or math.isinf(amount))


def sign_allows(kind: TransactionKind, amount: float) -> bool:
    """
    Check an amount against the kind's required sign.

    Zero passes for every kind; the admission rules decide
    separately whether a zero entry makes sense.
    """
    sign = rule_for(kind).sign
    if sign == AmountSign.POSITIVE:
        return amount >= 0
    if sign == AmountSign.NEGATIVE:
        return amount <= 0
    return True
