#!/usr/bin/env python3
"""
Amount Formatting and Parsing Utilities

Ledger amounts are plain floats. They are rendered with exactly two fraction
digits both on screen and in the ledger file, so a save/load cycle rounds each
amount to the cent.

Examples:
    format_amount(1250.5) -> "1250.50"
    format_dollars(-10) -> "$-10.00"
    parse_amount("$1,250.50") -> 1250.5
"""

from decimal import Decimal, InvalidOperation
from typing import Union


def format_amount(amount: float) -> str:
    """
    Render an amount with exactly two decimal places.

    This is the representation written to the ledger file.

    Args:
        amount: Amount to render

    Returns:
        String like "1250.50"
    """
    return f"{amount:.2f}"


def format_dollars(amount: float) -> str:
    """Render an amount for display, e.g. "$12.34"."""
    return f"${format_amount(amount)}"


def round_amount(amount: float) -> float:
    """Round an amount the way the ledger file stores it."""
    return float(format_amount(amount))


def parse_amount(value: Union[str, int, float]) -> float:
    """
    Parse user or file input into a float amount.

    Accepts plain numbers as well as "$" prefixes and thousands separators.

    Args:
        value: Input like "12.34", "$1,234.50" or a number

    Returns:
        Parsed float amount

    Raises:
        ValueError: If the input is not a number
    """
    if isinstance(value, (int, float)):
        return float(value)

    clean_str = str(value).replace("$", "").replace(",", "").strip()
    if not clean_str:
        raise ValueError("Amount is empty")

    try:
        return float(Decimal(clean_str))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}") from None
