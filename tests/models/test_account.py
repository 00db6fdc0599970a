"""
Comprehensive tests for Account and its admission rules.
"""

import math
from datetime import datetime

import pytest

from bank_ledger.models.account import Account
from bank_ledger.models.enums import AdmissionResult, TransactionKind
from bank_ledger.models.settings import AccountSettings
from bank_ledger.models.transaction import Transaction


def make_account(balance=0.0, overdraft_fee=35.0):
    """Helper: account with an optional opening deposit."""
    account = Account(id=1, settings=AccountSettings(overdraft_fee=overdraft_fee))
    if balance:
        assert account.try_add_transaction(balance, TransactionKind.DEPOSIT)
    return account


# --- Successful Admissions ---

class TestApplied:

    def test_deposit_then_withdrawal(self):
        account = make_account()

        assert account.try_add_transaction(200, TransactionKind.DEPOSIT) is True
        assert account.try_add_transaction(-100, TransactionKind.WITHDRAWAL) is True

        assert account.balance == 100
        assert len(account.transactions) == 2
        assert account.transactions[1].kind == TransactionKind.WITHDRAWAL
        assert account.transactions[1].amount == -100

    def test_withdrawal_down_to_exactly_zero(self):
        account = make_account(balance=50)

        assert account.admit(-50, TransactionKind.WITHDRAWAL) == AdmissionResult.APPLIED
        assert account.balance == 0

    def test_management_fee_may_overdraw(self):
        """Only withdrawals trigger overdraft fees."""
        account = make_account()

        result = account.admit(-10, TransactionKind.FEE_MANAGEMENT)

        assert result == AdmissionResult.APPLIED
        assert account.balance == -10
        assert [t.kind for t in account.transactions] == [
            TransactionKind.FEE_MANAGEMENT
        ]

    def test_timestamp_recorded(self):
        account = make_account()
        when = datetime(2026, 3, 1, 12, 0)

        account.admit(25, TransactionKind.DEPOSIT, timestamp=when)

        assert account.transactions[0].timestamp == when

    def test_balance_matches_transaction_sum(self):
        account = make_account()
        offers = [
            (500, TransactionKind.DEPOSIT),
            (-120.5, TransactionKind.WITHDRAWAL),
            (-10, TransactionKind.FEE_MANAGEMENT),
            (-1000, TransactionKind.WITHDRAWAL),
            (33.25, TransactionKind.DEPOSIT),
            (5, TransactionKind.INTEREST),
        ]
        for amount, kind in offers:
            account.admit(amount, kind)

        assert account.balance == sum(t.amount for t in account.transactions)


# --- Overdraft ---

class TestOverdraft:

    def test_withdrawal_from_empty_account_charges_fee(self):
        account = make_account(overdraft_fee=35)

        result = account.try_add_transaction(-100, TransactionKind.WITHDRAWAL)

        assert result is False
        assert len(account.transactions) == 1
        assert account.transactions[0].kind == TransactionKind.FEE_OVERDRAFT
        assert account.transactions[0].amount == -35
        assert account.balance == -35

    def test_withdrawal_is_not_recorded(self):
        account = make_account(balance=100, overdraft_fee=25)

        result = account.admit(-120, TransactionKind.WITHDRAWAL)

        assert result == AdmissionResult.OVERDRAFT_FEE_CHARGED
        assert not result.applied
        assert [t.kind for t in account.transactions] == [
            TransactionKind.DEPOSIT,
            TransactionKind.FEE_OVERDRAFT,
        ]
        assert account.balance == 75

    def test_fee_charged_even_when_it_overdraws(self):
        account = make_account(balance=10, overdraft_fee=35)

        account.admit(-20, TransactionKind.WITHDRAWAL)

        assert account.balance == -25

    def test_exactly_one_fee_per_rejected_withdrawal(self):
        account = make_account()

        account.admit(-100, TransactionKind.WITHDRAWAL)
        account.admit(-100, TransactionKind.WITHDRAWAL)

        fees = [t for t in account.transactions
                if t.kind == TransactionKind.FEE_OVERDRAFT]
        assert len(fees) == 2
        assert account.balance == -70

    def test_negative_fee_setting_is_still_charged_as_a_debit(self):
        account = Account(id=1, settings=AccountSettings(overdraft_fee=-15))

        account.admit(-1, TransactionKind.WITHDRAWAL)

        assert account.transactions[0].amount == -15

    def test_zero_withdrawal_on_overdrawn_account_charges_fee(self):
        """The overdraft check runs before the zero-amount check."""
        account = make_account()
        account.admit(-10, TransactionKind.FEE_MANAGEMENT)

        result = account.admit(0, TransactionKind.WITHDRAWAL)

        assert result == AdmissionResult.OVERDRAFT_FEE_CHARGED
        assert account.balance == -45


# --- Rejections ---

class TestRejected:

    @pytest.mark.parametrize("amount", [math.nan, math.inf, -math.inf])
    def test_non_finite_amount(self, amount):
        account = make_account(balance=100)

        assert account.admit(amount, TransactionKind.DEPOSIT) == AdmissionResult.INVALID_AMOUNT
        assert len(account.transactions) == 1

    def test_non_numeric_amount(self):
        account = make_account()
        assert account.admit("lots", TransactionKind.DEPOSIT) == AdmissionResult.INVALID_AMOUNT

    @pytest.mark.parametrize("kind", [
        TransactionKind.INTEREST,
        TransactionKind.FEE_OVERDRAFT,
    ])
    @pytest.mark.parametrize("amount", [-50.0, 0.0, 50.0])
    def test_system_only_kinds(self, kind, amount):
        account = make_account(balance=100)

        assert account.try_add_transaction(amount, kind) is False
        assert account.admit(amount, kind) == AdmissionResult.SYSTEM_ONLY_KIND
        assert len(account.transactions) == 1

    def test_unknown_kind(self):
        account = make_account()

        assert account.admit(10, TransactionKind.UNKNOWN) == AdmissionResult.UNKNOWN_KIND
        assert account.admit(10, "Withdraw") == AdmissionResult.UNKNOWN_KIND
        assert account.transactions == ()

    @pytest.mark.parametrize("amount, kind", [
        (-100, TransactionKind.DEPOSIT),
        (50, TransactionKind.WITHDRAWAL),
        (10, TransactionKind.FEE_MANAGEMENT),
    ])
    def test_sign_mismatch(self, amount, kind):
        account = make_account(balance=100)

        assert account.admit(amount, kind) == AdmissionResult.SIGN_MISMATCH
        assert account.balance == 100

    def test_zero_deposit(self):
        account = make_account()

        assert account.admit(0, TransactionKind.DEPOSIT) == AdmissionResult.ZERO_AMOUNT
        assert account.transactions == ()

    def test_zero_withdrawal(self):
        account = make_account(balance=100)

        assert account.admit(0, TransactionKind.WITHDRAWAL) == AdmissionResult.ZERO_AMOUNT
        assert len(account.transactions) == 1


# --- Encapsulation ---

class TestEncapsulation:

    def test_transactions_are_read_only(self):
        account = make_account(balance=100)

        assert isinstance(account.transactions, tuple)
        with pytest.raises(AttributeError):
            account.transactions.append(
                Transaction(TransactionKind.DEPOSIT, 1, datetime.now())
            )

    def test_balance_cannot_be_set(self):
        account = make_account()
        with pytest.raises(AttributeError):
            account.balance = 1_000_000

    def test_replace_settings_and_rename(self):
        account = make_account()

        account.replace_settings(AccountSettings(overdraft_fee=5))
        account.rename("Holiday fund")

        assert account.settings.overdraft_fee == 5
        assert account.nickname == "Holiday fund"

    def test_structural_equality(self):
        when = datetime(2026, 1, 1)
        a = Account(id=3, transactions=[Transaction("Deposit", 10, when)])
        b = Account(id=3, transactions=[Transaction("Deposit", 10, when)])

        assert a == b
        assert a != Account(id=3)


# --- Limits ---

class TestLimits:

    def test_bad_timestamp_raises_without_mutation(self):
        account = make_account(balance=100)

        with pytest.raises(TypeError):
            account.admit(5, TransactionKind.DEPOSIT, timestamp="yesterday")
        assert len(account.transactions) == 1

    def test_bad_timestamp_on_overdraft_raises_without_fee(self):
        account = make_account()

        with pytest.raises(TypeError):
            account.admit(-5, TransactionKind.WITHDRAWAL, timestamp="yesterday")
        assert account.transactions == ()

    def test_deposit_overflowing_balance_rejected(self):
        account = make_account(balance=1e308)

        result = account.admit(1e308, TransactionKind.DEPOSIT)

        assert result == AdmissionResult.INVALID_AMOUNT
        assert account.balance == 1e308
        assert len(account.transactions) == 1

    def test_large_balance_still_withdrawable(self):
        account = make_account(balance=1e308)
        account.admit(1e308, TransactionKind.DEPOSIT)

        result = account.admit(-1e308, TransactionKind.WITHDRAWAL)

        assert result == AdmissionResult.APPLIED
        assert account.balance == 0
