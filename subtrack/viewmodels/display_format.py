"""Amount and date labeling helpers for view models.

Call context:
    The create/edit workflows and ``SubscriptionListVM`` call these helpers so
    forms and list rows render money and dates the same way.
"""

from __future__ import annotations

from datetime import date


def format_amount(amount: float, symbol: str = "$") -> str:
    """Form label: bare ``$0`` for an empty amount, fixed-point otherwise."""
    if amount == 0:
        return f"{symbol}0"
    return f"{symbol}{amount:.2f}"


def format_row_amount(amount: float, symbol: str = "$") -> str:
    """List row label, always two decimals."""
    return f"{symbol}{amount:.2f}"


def format_date(day: date) -> str:
    """Render ``day`` as ``Nov 7, 2025``."""
    return f"{day:%b} {day.day}, {day.year}"


def amount_input_text(amount: float) -> str:
    """Seed text for the amount entry when an existing value is edited."""
    return repr(float(amount))


__all__ = ["amount_input_text", "format_amount", "format_date", "format_row_amount"]
