#!/usr/bin/env python3
"""
Ledger Reports

Read-only queries over a TransactionStore: overall totals, totals within a
date window, the category list, and a per-category breakdown.

Only transactions whose kind is exactly "income" or "expense" count towards
totals; anything else is carried in the ledger but ignored here.

Date windows compare the date strings lexicographically, not as calendar
dates. This is correct for zero-padded YYYY/MM/DD values but misorders dates
with inconsistent padding, e.g. "2024/9/1" sorts after "2024/10/1".
"""

from dataclasses import dataclass

import pandas as pd

from ..core.currency import format_amount
from ..core.models import TransactionType
from ..ledger.store import TransactionStore

NO_CATEGORIES_MESSAGE = "No categories available."

FRAME_COLUMNS = ["date", "kind", "category", "amount"]


@dataclass
class Totals:
    """Aggregate figures across the whole ledger."""

    total_income: float
    total_expenses: float
    top_expense_category: str = ""
    top_expense_amount: float = 0.0

    @property
    def balance(self) -> float:
        return self.total_income - self.total_expenses

    def to_lines(self) -> list[str]:
        return [
            f"Total Income: {format_amount(self.total_income)}",
            f"Total Expenses: {format_amount(self.total_expenses)}",
            f"Balance: {format_amount(self.balance)}",
            f"Most Expensive Category: {self.top_expense_category} ({format_amount(self.top_expense_amount)})",
        ]


@dataclass
class RangeStats:
    """Income and expense totals for an inclusive date window."""

    start_date: str
    end_date: str
    total_income: float
    total_expenses: float

    @property
    def balance(self) -> float:
        return self.total_income - self.total_expenses

    def to_lines(self) -> list[str]:
        return [
            f"Statistics from {self.start_date} to {self.end_date}:",
            f"Total Income: {format_amount(self.total_income)}",
            f"Total Expenses: {format_amount(self.total_expenses)}",
        ]


def compute_totals(store: TransactionStore) -> Totals:
    """
    Sum income and expenses and find the single largest expense.

    The largest expense is the first one with the strictly greatest amount, so
    ties keep the earliest entry. With no expense above zero the top category
    is "" and its amount 0.0.
    """
    totals = Totals(total_income=0.0, total_expenses=0.0)

    for transaction in store:
        if transaction.is_income:
            totals.total_income += transaction.amount
        elif transaction.is_expense:
            totals.total_expenses += transaction.amount
            if transaction.amount > totals.top_expense_amount:
                totals.top_expense_amount = transaction.amount
                totals.top_expense_category = transaction.category

    return totals


def in_date_range(date: str, start_date: str, end_date: str) -> bool:
    """Inclusive lexicographic window check."""
    return start_date <= date <= end_date


def stats_in_range(store: TransactionStore, start_date: str, end_date: str) -> RangeStats:
    """
    Sum income and expenses for transactions dated within [start_date, end_date].

    Args:
        store: Ledger to scan
        start_date: Inclusive lower bound, e.g. "2024/01/01"
        end_date: Inclusive upper bound, e.g. "2024/01/31"

    Returns:
        RangeStats for the window
    """
    stats = RangeStats(start_date=start_date, end_date=end_date, total_income=0.0, total_expenses=0.0)

    for transaction in store:
        if not in_date_range(transaction.date, start_date, end_date):
            continue
        if transaction.is_income:
            stats.total_income += transaction.amount
        elif transaction.is_expense:
            stats.total_expenses += transaction.amount

    return stats


def list_categories(store: TransactionStore) -> list[str]:
    """Category names in the order they were first seen."""
    return list(store.categories)


def format_categories(categories: list[str]) -> list[str]:
    """Render the category list, stating explicitly when there is none."""
    if not categories:
        return [NO_CATEGORIES_MESSAGE]
    return ["Categories:"] + [f"- {name}" for name in categories]


def transactions_frame(store: TransactionStore) -> pd.DataFrame:
    """Ledger contents as a DataFrame with one row per transaction, in order."""
    rows = [
        {
            "date": transaction.date,
            "kind": transaction.kind,
            "category": transaction.category,
            "amount": transaction.amount,
        }
        for transaction in store
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def category_breakdown(store: TransactionStore) -> pd.DataFrame:
    """
    Total and count of income and expense transactions per category.

    Returns:
        DataFrame with columns kind, category, total, count; sorted by kind
        (income first) and then by descending total. Empty when the ledger
        has no income or expense entries.
    """
    df = transactions_frame(store)
    kinds = [TransactionType.INCOME.value, TransactionType.EXPENSE.value]
    df = df[df["kind"].isin(kinds)]

    if df.empty:
        return pd.DataFrame(columns=["kind", "category", "total", "count"])

    grouped = (
        df.groupby(["kind", "category"], sort=False)["amount"]
        .agg(total="sum", count="count")
        .reset_index()
    )
    grouped["kind_order"] = grouped["kind"].map({kind: i for i, kind in enumerate(kinds)})
    grouped = grouped.sort_values(["kind_order", "total"], ascending=[True, False], kind="stable")
    return grouped.drop(columns="kind_order").reset_index(drop=True)
