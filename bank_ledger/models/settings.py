"""Per-account fee configuration."""

from dataclasses import dataclass, replace

from bank_ledger.models.kind_rules import is_finite_amount


DEFAULT_OVERDRAFT_FEE = 35.00
DEFAULT_MANAGEMENT_FEE = 10.00


@dataclass(frozen=True)
class AccountSettings:
    """Fees charged to an account. Compared and copied by value."""

    overdraft_fee: float = DEFAULT_OVERDRAFT_FEE
    management_fee: float = DEFAULT_MANAGEMENT_FEE

    def __post_init__(self):
        for name in ("overdraft_fee", "management_fee"):
            value = float(getattr(self, name))
            if not is_finite_amount(value):
                raise ValueError(f"{name} must be a finite number")
            object.__setattr__(self, name, value)

    def with_changes(self, **changes) -> "AccountSettings":
        """Return a copy with the given fees replaced."""
        return replace(self, **changes)
