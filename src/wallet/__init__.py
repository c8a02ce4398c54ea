"""
Wallet - Personal Finance Ledger

Records income and expense transactions, groups them by category, keeps them
in a plain text ledger file and reports totals and date-ranged statistics.

Domain Packages:
- core: Data models, amount formatting, configuration and errors
- ledger: In-memory transaction store and ledger file persistence
- analysis: Totals, date-range statistics and category reports
- cli: Interactive menu shell and one-shot commands

Example Usage:
    from wallet import TransactionStore, LedgerFileStore, compute_totals

    store = TransactionStore()
    store.add_transaction("2024/01/05", "income", "salary", 2500.0)
    LedgerFileStore("transactions.txt").save_from(store)
    print(compute_totals(store).balance)

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Wallet Developers"

# Export core utilities for easy access
from .core.currency import format_amount, parse_amount
from .core.exceptions import MalformedLedgerError, OpenFailureError, OutOfRangeError, WalletError

# Export key domain functionality
from .core.models import Transaction, TransactionType
from .core.config import get_config, Environment
from .ledger import LedgerFileStore, TransactionStore
from .analysis import compute_totals, list_categories, stats_in_range

__all__ = [
    # Amount functions
    "format_amount",
    "parse_amount",

    # Errors
    "MalformedLedgerError",
    "OpenFailureError",
    "OutOfRangeError",
    "WalletError",

    # Core models
    "Transaction",
    "TransactionType",

    # Ledger
    "LedgerFileStore",
    "TransactionStore",

    # Reports
    "compute_totals",
    "list_categories",
    "stats_in_range",

    # Configuration
    "get_config",
    "Environment",
]
