"""Database store layer - provides the ledger for the application.

This module re-exports all public database functions for easy importing.
"""

from cashdesk.store.ledger import SqliteLedger
from cashdesk.store.queries import get_account_balances, get_all_accounts, insert_transaction
from cashdesk.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Queries
    "get_account_balances",
    "get_all_accounts",
    "insert_transaction",
    # Ledger
    "SqliteLedger",
]
