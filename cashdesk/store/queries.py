"""Database query functions."""

import json
import sqlite3
from pathlib import Path

from cashdesk.domain.models import Money
from cashdesk.store.schema import get_db_path


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Create a database connection with row factory.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection with row_factory configured.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def insert_transaction(
    from_account: str,
    to_account: str,
    amount: Money,
    db_path: Path | None = None,
    description: str | None = None,
    meta: dict[str, str] | None = None,
    author: str | None = None,
) -> int:
    """Insert a transaction into the ledger.

    Args:
        from_account: Source account in "type:name" form.
        to_account: Destination account in "type:name" form.
        amount: Amount in cents moved from source to destination.
        db_path: Path to the database file. If None, uses default location.
        description: Optional free-text description.
        meta: Optional metadata, stored as JSON.
        author: Optional name of the operator recording the transaction.

    Returns:
        ID of the inserted transaction.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    meta_json = json.dumps(meta, sort_keys=True) if meta is not None else None
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                """
                INSERT INTO transactions (from_account, to_account, amount, description, meta, author)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (from_account, to_account, amount, description, meta_json, author),
            )
            conn.commit()
            return cursor.lastrowid or 0
        except sqlite3.Error:
            conn.rollback()
            raise


def get_all_accounts(db_path: Path | None = None) -> list[str]:
    """Get every account referenced by a transaction.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Account strings ("type:name") sorted alphabetically.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute(
            """
            SELECT from_account AS account FROM transactions
            UNION
            SELECT to_account AS account FROM transactions
            ORDER BY account
            """
        )
        return [row["account"] for row in cursor.fetchall()]


def get_account_balances(db_path: Path | None = None) -> list[tuple[str, Money]]:
    """Get the balance of every account.

    A balance is everything received minus everything sent.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        List of (account, balance in cents) tuples sorted by account.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute(
            """
            SELECT account, SUM(delta) AS balance FROM (
                SELECT to_account AS account, amount AS delta FROM transactions
                UNION ALL
                SELECT from_account AS account, -amount AS delta FROM transactions
            )
            GROUP BY account
            ORDER BY account
            """
        )
        return [(row["account"], Money(row["balance"])) for row in cursor.fetchall()]
