"""Domain-specific exceptions"""


class LedgerError(Exception):
    """Base exception for the ledger domain"""

    pass


class AmountOutOfRangeError(LedgerError, ValueError):
    """Amount is not finite or has the wrong sign for its kind"""

    pass


class AccountNotFoundError(LedgerError, LookupError):
    """No account with the requested id exists"""

    def __init__(self, account_id: int):
        super().__init__(f"Account {account_id} not found")
        self.account_id = account_id


class StoreConsistencyError(LedgerError):
    """The store lost an account it had just written"""

    pass
