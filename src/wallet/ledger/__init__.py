"""
Ledger Package

The in-memory transaction store and its flat-file persistence.

Key Components:
- store: TransactionStore holding transactions and their categories
- datastore: LedgerFileStore reading and writing the ledger text file
"""

from .datastore import LedgerFileStore, format_ledger, parse_ledger
from .store import TransactionStore

__all__ = [
    "LedgerFileStore",
    "TransactionStore",
    "format_ledger",
    "parse_ledger",
]
