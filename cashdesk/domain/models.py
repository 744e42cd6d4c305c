"""Domain type definitions for cashdesk.

- Money: Amount in cents (minor units)
- Account: A typed ledger account reference (e.g. user:alice)
- TransactionRequest: An assembled, not yet submitted transaction
- Ledger: The interface the interactive flow consumes from the ledger store
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType, Protocol

# Money amounts are stored as cents (minor units) to avoid floating point errors
Money = NewType("Money", int)


class InvalidAccountError(ValueError):
    """Raised when an account name or label is structurally invalid."""


class LedgerError(Exception):
    """Raised when the ledger fails to read or persist data."""


class AccountType(str, Enum):
    """Kinds of ledger accounts."""

    USER = "user"
    SOURCE = "source"
    POINT_OF_SALE = "point_of_sale"


@dataclass(frozen=True)
class Account:
    """Immutable account reference, identified by type and name."""

    account_type: AccountType
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidAccountError("Account name may not be empty")
        if ":" in self.name:
            raise InvalidAccountError(f"Account name may not contain a colon: {self.name}")
        if any(char.isspace() for char in self.name):
            raise InvalidAccountError(f"Account name may not contain whitespace: {self.name}")

    @classmethod
    def user(cls, name: str) -> "Account":
        return cls(AccountType.USER, name)

    @classmethod
    def source(cls, label: str) -> "Account":
        return cls(AccountType.SOURCE, label)

    @classmethod
    def point_of_sale(cls, label: str) -> "Account":
        return cls(AccountType.POINT_OF_SALE, label)

    @classmethod
    def parse(cls, value: str) -> "Account":
        """Parse an account from its textual form.

        Args:
            value: Account in "type:name" form, e.g. "user:alice".

        Returns:
            Parsed account.

        Raises:
            InvalidAccountError: If the type is unknown or the name is invalid.
        """
        type_str, sep, name = value.partition(":")
        if not sep:
            raise InvalidAccountError(f"Account must have the form type:name: {value}")
        try:
            account_type = AccountType(type_str)
        except ValueError:
            raise InvalidAccountError(f"Unknown account type: {type_str}") from None
        return cls(account_type, name)

    def __str__(self) -> str:
        return f"{self.account_type.value}:{self.name}"


@dataclass(frozen=True)
class TransactionRequest:
    """Immutable description of a ledger transfer, ready to be submitted."""

    source: Account
    destination: Account
    amount: Money  # Positive moves money from source to destination
    description: str | None = None
    meta: dict[str, str] | None = None


class Ledger(Protocol):
    """Operations the interactive flow and reports need from a ledger."""

    def list_accounts(self) -> list[Account]: ...

    def list_balances(self) -> list[tuple[Account, Money]]: ...

    def create_transaction(self, request: TransactionRequest) -> int: ...

    def convert_amount(self, amount: float) -> Money: ...
