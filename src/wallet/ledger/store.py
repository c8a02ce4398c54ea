#!/usr/bin/env python3
"""
In-Memory Transaction Store

Holds the ordered list of transactions plus the categories seen so far.
All ledger mutations go through TransactionStore; it performs no I/O.

Category tracking follows the ledger's long-standing behavior: categories are
registered by add and by bulk load only. Editing an entry does not register
its new category and deleting an entry never unregisters one, so the category
list may contain names no longer used by any transaction.
"""

import logging
from collections.abc import Iterable, Iterator

from ..core.exceptions import OutOfRangeError
from ..core.models import Transaction

logger = logging.getLogger(__name__)


class TransactionStore:
    """
    Ordered transaction ledger with a derived, insertion-ordered category list.

    Example:
        >>> store = TransactionStore()
        >>> store.add_transaction("2024/01/05", "income", "salary", 100.0)
        Transaction(date='2024/01/05', kind='income', category='salary', amount=100.0)
        >>> store.size()
        1
        >>> store.categories
        ('salary',)
    """

    def __init__(self):
        self._transactions: list[Transaction] = []
        self._categories: list[str] = []

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Read-only view of the transactions in ledger order."""
        return tuple(self._transactions)

    @property
    def categories(self) -> tuple[str, ...]:
        """Read-only view of the category names in first-seen order."""
        return tuple(self._categories)

    def size(self) -> int:
        """Current transaction count."""
        return len(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def get(self, index: int) -> Transaction:
        """
        Get the transaction at a 0-based position.

        Raises:
            OutOfRangeError: If index is not a valid position
        """
        self._check_index(index)
        return self._transactions[index]

    def add_category(self, name: str) -> None:
        """Register a category name if it hasn't been seen yet (exact match)."""
        if name not in self._categories:
            self._categories.append(name)
            logger.debug(f"Registered category {name!r}")

    def add_transaction(self, date: str, kind: str, category: str, amount: float) -> Transaction:
        """
        Append a transaction and register its category.

        Returns:
            The stored Transaction (fields bounded to their maximum widths)
        """
        transaction = Transaction(date=date, kind=kind, category=category, amount=amount)
        self._append(transaction)
        logger.debug(f"Added entry {len(self._transactions) - 1}: {transaction.to_record()}")
        return transaction

    def edit_transaction(self, index: int, date: str, kind: str, category: str, amount: float) -> Transaction:
        """
        Replace the transaction at a 0-based position.

        The category list is left untouched.

        Returns:
            The new Transaction

        Raises:
            OutOfRangeError: If index is not a valid position; the store is unchanged
        """
        self._check_index(index)
        transaction = Transaction(date=date, kind=kind, category=category, amount=amount)
        self._transactions[index] = transaction
        logger.debug(f"Edited entry {index}: {transaction.to_record()}")
        return transaction

    def delete_transaction(self, index: int) -> Transaction:
        """
        Remove the transaction at a 0-based position, keeping the order of the rest.

        The category list is left untouched.

        Returns:
            The removed Transaction

        Raises:
            OutOfRangeError: If index is not a valid position; the store is unchanged
        """
        self._check_index(index)
        transaction = self._transactions.pop(index)
        logger.debug(f"Deleted entry {index}: {transaction.to_record()}")
        return transaction

    def clear(self) -> None:
        """Discard all transactions and categories."""
        self._transactions.clear()
        self._categories.clear()

    def replace_all(self, transactions: Iterable[Transaction]) -> int:
        """
        Reset the store and append each transaction, registering its category.

        Returns:
            Number of transactions now in the store
        """
        self.clear()
        for transaction in transactions:
            self._append(transaction)
        return len(self._transactions)

    def _append(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)
        self.add_category(transaction.category)

    def _check_index(self, index: int) -> None:
        # Negative positions are rejected rather than counted from the end
        if index < 0 or index >= len(self._transactions):
            raise OutOfRangeError(index, len(self._transactions))

    def __repr__(self) -> str:
        return f"TransactionStore(size={self.size()}, categories={len(self._categories)})"
