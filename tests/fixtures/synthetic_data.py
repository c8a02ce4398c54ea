#!/usr/bin/env python3
"""
Synthetic Test Data Generators

Generates synthetic ledger transactions and ledger files for tests.

Note: Uses standard random module for test data generation (not cryptographic use).
"""

import random
from datetime import date, timedelta
from pathlib import Path

from wallet.core.currency import format_amount
from wallet.core.models import Transaction

SYNTHETIC_INCOME_CATEGORIES = [
    "salary",
    "freelance",
    "refund",
    "gift",
]

SYNTHETIC_EXPENSE_CATEGORIES = [
    "groceries",
    "rent",
    "transport",
    "dining",
    "utilities",
    "healthcare",
]


def generate_synthetic_transactions(
    num_transactions: int = 50,
    start_date: date | None = None,
    days: int = 90,
    seed: int = 1234,
) -> list[Transaction]:
    """
    Generate synthetic transactions in date order.

    Roughly one in five transactions is income. Amounts already have at most
    two fraction digits, so they survive a save/load cycle unchanged.

    Args:
        num_transactions: Number of transactions to generate
        start_date: Date of the earliest transaction (default: 2024-01-01)
        days: Span of days to spread transactions over
        seed: Random seed for reproducible data

    Returns:
        List of Transaction objects
    """
    rng = random.Random(seed)
    if start_date is None:
        start_date = date(2024, 1, 1)

    offsets = sorted(rng.randrange(days) for _ in range(num_transactions))
    transactions = []

    for offset in offsets:
        tx_date = (start_date + timedelta(days=offset)).strftime("%Y/%m/%d")
        if rng.random() < 0.2:
            kind = "income"
            category = rng.choice(SYNTHETIC_INCOME_CATEGORIES)
            cents = rng.randint(50000, 500000)
        else:
            kind = "expense"
            category = rng.choice(SYNTHETIC_EXPENSE_CATEGORIES)
            cents = rng.randint(100, 150000)
        transactions.append(Transaction(date=tx_date, kind=kind, category=category, amount=cents / 100))

    return transactions


def write_ledger_file(path: Path, transactions: list[Transaction]) -> Path:
    """Write transactions to a ledger file in the on-disk format."""
    lines = [
        f"{t.date} {t.kind} {t.category} {format_amount(t.amount)}\n" for t in transactions
    ]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(lines), encoding="utf-8")
    return path
