"""
Core Utilities Package

Shared data models, configuration and utilities used across the wallet.

This package provides:
- The Transaction record and its field limits
- Amount formatting with two-decimal precision
- Configuration management for environment-specific settings
- The error kinds raised by the ledger and its persistence
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    get_ledger_path,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import format_amount, format_dollars, parse_amount, round_amount
from .exceptions import MalformedLedgerError, OpenFailureError, OutOfRangeError, WalletError
from .models import (
    CATEGORY_MAX_LENGTH,
    DATE_MAX_LENGTH,
    KIND_MAX_LENGTH,
    Transaction,
    TransactionType,
)

__all__ = [
    "CATEGORY_MAX_LENGTH",
    # Configuration
    "Config",
    "DATE_MAX_LENGTH",
    "Environment",
    "KIND_MAX_LENGTH",
    # Errors
    "MalformedLedgerError",
    "OpenFailureError",
    "OutOfRangeError",
    # Data models
    "Transaction",
    "TransactionType",
    "WalletError",
    # Amount utilities
    "format_amount",
    "format_dollars",
    "get_config",
    "get_data_dir",
    "get_ledger_path",
    "is_development",
    "is_production",
    "is_test",
    "parse_amount",
    "reload_config",
    "round_amount",
]
