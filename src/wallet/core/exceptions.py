#!/usr/bin/env python3
"""
Wallet Exceptions

Error kinds raised by the ledger and persistence layers. None of them are
fatal: the CLI reports the message and keeps going.
"""

from pathlib import Path


class WalletError(Exception):
    """Base class for all wallet errors."""


class OpenFailureError(WalletError, OSError):
    """Raised when the ledger file cannot be opened for reading or writing."""

    def __init__(self, path: str | Path, mode: str, reason: str | None = None):
        self.path = Path(path)
        self.mode = mode
        self.reason = reason
        action = "load" if mode == "r" else "save"
        message = f"Failed to {action} database: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class MalformedLedgerError(WalletError, ValueError):
    """Raised when a ledger file could only be partly read and must not be overwritten."""

    def __init__(self, path: str | Path, loaded: int):
        self.path = Path(path)
        self.loaded = loaded
        super().__init__(
            f"Ledger file {self.path} has a malformed record after entry {loaded}; "
            "fix the file before changing it"
        )


class OutOfRangeError(WalletError, IndexError):
    """Raised when an entry index is outside the current transaction count."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Invalid entry index: {index} (ledger has {size} entries)")
