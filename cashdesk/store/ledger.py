"""sqlite-backed ledger used by the interactive session and reports."""

import sqlite3
from pathlib import Path

import structlog

from cashdesk.domain.models import Account, InvalidAccountError, LedgerError, Money, TransactionRequest
from cashdesk.store.queries import get_account_balances, get_all_accounts, insert_transaction

logger = structlog.get_logger(__name__)


def _parse_account(value: str) -> Account:
    try:
        return Account.parse(value)
    except InvalidAccountError as e:
        raise LedgerError(f"Corrupt account in ledger: {value} ({e})") from e


class SqliteLedger:
    """Ledger stored in a sqlite database.

    Accounts are derived from the transaction log, so submitting a
    zero-amount transaction to a new account creates that account.
    """

    def __init__(self, db_path: Path, author: str | None = None):
        self.db_path = db_path
        self.author = author

    def list_accounts(self) -> list[Account]:
        try:
            return [_parse_account(account) for account in get_all_accounts(self.db_path)]
        except sqlite3.Error as e:
            raise LedgerError(str(e)) from e

    def list_balances(self) -> list[tuple[Account, Money]]:
        try:
            return [(_parse_account(account), balance) for account, balance in get_account_balances(self.db_path)]
        except sqlite3.Error as e:
            raise LedgerError(str(e)) from e

    def create_transaction(self, request: TransactionRequest) -> int:
        """Persist a transaction.

        Args:
            request: Transaction to store.

        Returns:
            ID of the stored transaction.

        Raises:
            LedgerError: If the transaction could not be stored.
        """
        try:
            txn_id = insert_transaction(
                str(request.source),
                str(request.destination),
                request.amount,
                self.db_path,
                description=request.description,
                meta=request.meta,
                author=self.author,
            )
        except (sqlite3.Error, OverflowError) as e:
            raise LedgerError(str(e)) from e

        logger.debug(
            "transaction_stored",
            txn_id=txn_id,
            source=str(request.source),
            destination=str(request.destination),
            amount=request.amount,
        )
        return txn_id

    def convert_amount(self, amount: float) -> Money:
        """Convert an amount in major units (e.g. 2.50) to cents."""
        return Money(round(amount * 100))
