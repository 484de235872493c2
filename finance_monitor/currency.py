"""Rupiah formatting for display."""

from __future__ import annotations

from typing import Union

Number = Union[float, int]

MASKED_AMOUNT = "Rp.••••••"


def _group_thousands(value: Number) -> str:
    """Render a number with Indonesian separators (``.`` thousands, ``,`` decimals)."""
    if float(value).is_integer():
        text = f"{int(value):,}"
    else:
        text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(amount: Number) -> str:
    """Format a full rupiah amount without decimals.

    Example:
        >>> format_currency(1500000)
        'Rp 1.500.000'
        >>> format_currency(-2500)
        '-Rp 2.500'
    """
    rounded = int(round(amount))
    sign = "-" if rounded < 0 else ""
    return f"{sign}Rp {_group_thousands(abs(rounded))}"


def format_currency_compact(amount: Number) -> str:
    """Abbreviate large amounts for chart axes and cards.

    Example:
        >>> format_currency_compact(2500000)
        'Rp 2.5Jt'
        >>> format_currency_compact(12000)
        'Rp 12rb'
    """
    if amount >= 1_000_000_000:
        return f"Rp {amount / 1_000_000_000:.1f}M"
    if amount >= 1_000_000:
        return f"Rp {amount / 1_000_000:.1f}Jt"
    if amount >= 1_000:
        return f"Rp {amount / 1_000:.0f}rb"
    return f"Rp {_group_thousands(amount)}"


def format_currency_compact_mini(amount: Number) -> str:
    """Like :func:`format_currency_compact` but without the currency prefix."""
    if amount >= 1_000_000_000:
        return f"{amount / 1_000_000_000:.1f}b"
    if amount >= 1_000_000:
        return f"{amount / 1_000_000:.1f}m"
    if amount >= 1_000:
        return f"{amount / 1_000:.0f}k"
    return _group_thousands(amount)


def format_amount(amount: Number, show_balance: bool) -> str:
    """Format ``amount`` or hide it behind a mask when balances are hidden."""
    return format_currency(amount) if show_balance else MASKED_AMOUNT
