#!/usr/bin/env python3
"""
Ledger File DataStore

Loads and saves the transaction store as a plain text file with one
transaction per line:

    <date> <kind> <category> <amount>

Fields are separated by single spaces on write and by any whitespace on read.
The amount is written with exactly two fraction digits. There is no header and
no escaping, so a category containing whitespace will not read back correctly.
"""

import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from ..core.datastore_mixin import DataStoreMixin
from ..core.exceptions import MalformedLedgerError, OpenFailureError
from ..core.models import Transaction
from .store import TransactionStore

logger = logging.getLogger(__name__)

FIELDS_PER_RECORD = 4


def parse_ledger(text: str) -> tuple[list[Transaction], bool]:
    """
    Parse ledger file contents into transactions.

    Tokens are consumed four at a time regardless of line breaks. Reading stops
    quietly at the end of input, at a trailing partial record, or at the first
    record whose amount is not a number.

    Args:
        text: Full ledger file contents

    Returns:
        Tuple of (transactions read, whether reading stopped before the end)
    """
    tokens = text.split()
    transactions: list[Transaction] = []

    for start in range(0, len(tokens), FIELDS_PER_RECORD):
        record = tokens[start : start + FIELDS_PER_RECORD]
        if len(record) < FIELDS_PER_RECORD:
            return transactions, True
        try:
            transactions.append(Transaction.from_tokens(*record))
        except ValueError:
            return transactions, True

    return transactions, False


def format_ledger(transactions: Iterable[Transaction]) -> str:
    """Render transactions in ledger file format, one line each."""
    return "".join(f"{transaction.to_record()}\n" for transaction in transactions)


class LedgerFileStore(DataStoreMixin):
    """
    DataStore for the flat-file ledger.

    load_into() and save_from() move a whole TransactionStore to and from disk;
    load() and save() work on plain transaction lists.
    """

    def __init__(self, path: str | Path):
        """
        Initialize ledger file store.

        Args:
            path: Location of the ledger file
        """
        self.path = Path(path)

    def load_into(self, store: TransactionStore, strict: bool = False) -> int:
        """
        Replace the store's contents with the transactions in the ledger file.

        The store is emptied first, so it stays empty if the file can't be
        opened. With strict, a file that stops at a malformed record is
        refused and the store is left empty, so a later save can't drop the
        unread tail.

        Returns:
            Number of transactions loaded

        Raises:
            OpenFailureError: If the file cannot be opened for reading
            MalformedLedgerError: If strict and the file is only partly readable
        """
        store.clear()
        transactions, truncated = self._read()
        if strict and truncated:
            raise MalformedLedgerError(self.path, len(transactions))
        count = store.replace_all(transactions)
        logger.info(f"Loaded {count} transactions from {self.path}")
        return count

    def save_from(self, store: TransactionStore) -> int:
        """
        Write every transaction in the store to the ledger file, truncating it.

        Returns:
            Number of transactions written

        Raises:
            OpenFailureError: If the file cannot be opened for writing
        """
        count = self._write(store.transactions)
        logger.info(f"Saved {count} transactions to {self.path}")
        return count

    def exists(self) -> bool:
        """Check if the ledger file exists."""
        return self.path.is_file()

    def load(self) -> list[Transaction]:
        """
        Load transactions from the ledger file.

        Returns:
            Transactions in file order

        Raises:
            FileNotFoundError: If the ledger file doesn't exist
            OpenFailureError: If the file exists but cannot be read
        """
        if not self.exists():
            raise FileNotFoundError(f"Ledger file not found: {self.path}")
        transactions, _ = self._read()
        return transactions

    def save(self, data: list[Transaction]) -> None:
        """
        Save transactions to the ledger file.

        Args:
            data: Transactions to persist
        """
        self._write(data)

    def last_modified(self) -> datetime | None:
        """Get timestamp of the ledger file."""
        return self._file_mtime(self.path)

    def item_count(self) -> int | None:
        """Get count of transactions in the ledger file."""
        if not self.exists():
            return None

        try:
            transactions, _ = self._read()
            return len(transactions)
        except OpenFailureError:
            return 0

    def size_bytes(self) -> int | None:
        """Get size of the ledger file."""
        return self._file_size(self.path)

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return f"No ledger file at {self.path}"
        return f"Ledger file: {count} transactions"

    def _read(self) -> tuple[list[Transaction], bool]:
        try:
            with open(self.path, "rb") as f:
                data = f.read()
        except OSError as e:
            logger.error(f"Failed to open {self.path} for reading: {e}")
            raise OpenFailureError(self.path, "r", e.strerror) from e

        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"{self.path} is not valid UTF-8 ({e.reason}); undecodable bytes replaced")
            text = data.decode("utf-8", errors="replace")

        transactions, truncated = parse_ledger(text)
        if truncated:
            logger.warning(f"Stopped reading {self.path} at malformed record after {len(transactions)} transactions")
        return transactions, truncated

    def _write(self, transactions: Iterable[Transaction]) -> int:
        transactions = list(transactions)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(format_ledger(transactions))
        except OSError as e:
            logger.error(f"Failed to open {self.path} for writing: {e}")
            raise OpenFailureError(self.path, "w", e.strerror) from e
        return len(transactions)
