#!/usr/bin/env python3
"""
Core Data Models for Wallet

The ledger record and the transaction kinds it recognises.

Text fields are bounded. Values longer than a field's bound are truncated to
the bound when a Transaction is built, so what is held in memory is exactly
what a save/load cycle would give back.
"""

from dataclasses import dataclass
from enum import Enum

from .currency import format_amount

# Maximum field widths, in characters
DATE_MAX_LENGTH = 10
KIND_MAX_LENGTH = 7
CATEGORY_MAX_LENGTH = 19

DATE_FORMAT_HINT = "YYYY/MM/DD"


class TransactionType(Enum):
    """Types of ledger transactions."""

    INCOME = "income"
    EXPENSE = "expense"


def bound(value: str, max_length: int) -> str:
    """Truncate a text field to its maximum width."""
    return str(value)[:max_length]


@dataclass
class Transaction:
    """
    One recorded monetary event.

    No validation is applied beyond the field widths: the date is expected to
    look like YYYY/MM/DD and the kind to be "income" or "expense", but any
    value is stored as given. Amounts may be negative or zero.
    """

    date: str
    kind: str
    category: str
    amount: float

    def __post_init__(self):
        self.date = bound(self.date, DATE_MAX_LENGTH)
        self.kind = bound(self.kind, KIND_MAX_LENGTH)
        self.category = bound(self.category, CATEGORY_MAX_LENGTH)
        self.amount = float(self.amount)

    @property
    def transaction_type(self) -> TransactionType | None:
        """The recognised kind, or None for anything else."""
        try:
            return TransactionType(self.kind)
        except ValueError:
            return None

    @property
    def is_income(self) -> bool:
        return self.kind == TransactionType.INCOME.value

    @property
    def is_expense(self) -> bool:
        return self.kind == TransactionType.EXPENSE.value

    def to_record(self) -> str:
        """Render as one ledger file line, without the trailing newline."""
        return f"{self.date} {self.kind} {self.category} {format_amount(self.amount)}"

    @classmethod
    def from_tokens(cls, date: str, kind: str, category: str, amount: str) -> "Transaction":
        """
        Build a Transaction from four ledger file tokens.

        Raises:
            ValueError: If the amount token is not a number
        """
        return cls(date=date, kind=kind, category=category, amount=float(amount))
