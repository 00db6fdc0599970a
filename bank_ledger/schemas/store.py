"""
Pydantic schemas for the JSON store file.

These define the on-disk layout. They are separate from the
domain models because the storage shape (camelCase, "type",
"date") and the domain shape are different, and because the
domain objects should not know how they are persisted.

Writing always uses camelCase. Reading accepts any casing of
the field names: "Id", "OverdraftFee" and "TYPE" all work.
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    model_validator,
)
from pydantic.alias_generators import to_camel

from bank_ledger.models.account import Account
from bank_ledger.models.enums import TransactionKind
from bank_ledger.models.settings import (
    AccountSettings,
    DEFAULT_MANAGEMENT_FEE,
    DEFAULT_OVERDRAFT_FEE,
)
from bank_ledger.models.transaction import Transaction


class _StoreRecord(BaseModel):
    """Base for store records: camelCase out, case-insensitive in."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Older key names, lower-cased, mapped to the current field name
    legacy_keys: ClassVar[dict[str, str]] = {}

    @model_validator(mode="before")
    @classmethod
    def normalise_key_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        by_lower = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            by_lower[name.lower()] = alias
            by_lower[alias.lower()] = alias
        for old_key, name in cls.legacy_keys.items():
            field = cls.model_fields[name]
            by_lower[old_key] = field.alias or name
        normalised = {}
        for key, value in data.items():
            canonical = by_lower.get(str(key).lower(), key)
            normalised[canonical] = value
        return normalised


class TransactionRecord(_StoreRecord):
    type: TransactionKind
    amount: float
    date: datetime

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionRecord":
        return cls(
            type=transaction.kind,
            amount=transaction.amount,
            date=transaction.timestamp,
        )

    def to_domain(self) -> Transaction:
        # Re-validates sign and finiteness; a bad record raises here
        return Transaction(self.type, self.amount, self.date)


class AccountSettingsRecord(_StoreRecord):
    overdraft_fee: float = DEFAULT_OVERDRAFT_FEE
    management_fee: float = DEFAULT_MANAGEMENT_FEE

    @classmethod
    def from_domain(cls, settings: AccountSettings) -> "AccountSettingsRecord":
        return cls(
            overdraft_fee=settings.overdraft_fee,
            management_fee=settings.management_fee,
        )

    def to_domain(self) -> AccountSettings:
        return AccountSettings(
            overdraft_fee=self.overdraft_fee,
            management_fee=self.management_fee,
        )


class AccountRecord(_StoreRecord):
    legacy_keys: ClassVar[dict[str, str]] = {"txns": "transactions"}

    id: int = Field(ge=1)
    nickname: str | None = ""
    settings: AccountSettingsRecord | None = None
    transactions: list[TransactionRecord] | None = None

    @classmethod
    def from_domain(cls, account: Account) -> "AccountRecord":
        return cls(
            id=account.id,
            nickname=account.nickname,
            settings=AccountSettingsRecord.from_domain(account.settings),
            transactions=[
                TransactionRecord.from_domain(t) for t in account.transactions
            ],
        )

    def to_domain(self) -> Account:
        settings = self.settings or AccountSettingsRecord()
        return Account(
            id=self.id,
            settings=settings.to_domain(),
            nickname=self.nickname or "",
            transactions=[t.to_domain() for t in self.transactions or []],
        )


# An array is the canonical layout. Older stores kept an
# object keyed by account id; those are read and rewritten
# as an array on the next save.
StoreDocument = TypeAdapter(list[AccountRecord] | dict[str, AccountRecord])
StoreArray = TypeAdapter(list[AccountRecord])


def parse_store(raw: bytes | str) -> list[Account]:
    """
    Parse a store document into domain accounts.

    Raises pydantic.ValidationError for malformed JSON or shape,
    and AmountOutOfRangeError / ValueError for records that
    violate domain rules.
    """
    document = StoreDocument.validate_json(raw)
    records = list(document.values()) if isinstance(document, dict) else document
    accounts = [record.to_domain() for record in records]

    ids = [a.id for a in accounts]
    if len(ids) != len(set(ids)):
        raise ValueError("store contains duplicate account ids")
    return accounts


def dump_store(accounts: list[Account]) -> bytes:
    records = [AccountRecord.from_domain(a) for a in accounts]
    return StoreArray.dump_json(records, by_alias=True, indent=2)
