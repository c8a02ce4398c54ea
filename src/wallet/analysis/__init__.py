"""
Ledger Analysis Package

Reporting over the transaction store.

Key Components:
- reports: overall totals, date-window statistics, category listing and the
  per-category breakdown
"""

from .reports import (
    NO_CATEGORIES_MESSAGE,
    RangeStats,
    Totals,
    category_breakdown,
    compute_totals,
    format_categories,
    list_categories,
    stats_in_range,
    transactions_frame,
)

__all__ = [
    "NO_CATEGORIES_MESSAGE",
    "RangeStats",
    "Totals",
    "category_breakdown",
    "compute_totals",
    "format_categories",
    "list_categories",
    "stats_in_range",
    "transactions_frame",
]
