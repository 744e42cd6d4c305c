"""Domain models and types for cashdesk.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Input classification, validation and suggestions separated from the prompts
"""

from cashdesk.domain.models import (
    Account,
    AccountType,
    InvalidAccountError,
    Ledger,
    LedgerError,
    Money,
    TransactionRequest,
)

__all__ = [
    "Account",
    "AccountType",
    "InvalidAccountError",
    "Ledger",
    "LedgerError",
    "Money",
    "TransactionRequest",
]
