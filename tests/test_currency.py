import pytest

from finance_monitor.currency import (
    MASKED_AMOUNT,
    format_amount,
    format_currency,
    format_currency_compact,
    format_currency_compact_mini,
)


def test_format_currency_uses_dot_thousands():
    assert format_currency(1500000) == "Rp 1.500.000"
    assert format_currency(0) == "Rp 0"
    assert format_currency(999.6) == "Rp 1.000"
    assert format_currency(-2500) == "-Rp 2.500"


@pytest.mark.parametrize(
    "amount, expected",
    [
        (2_500_000_000, "Rp 2.5M"),
        (1_300_000, "Rp 1.3Jt"),
        (12_000, "Rp 12rb"),
        (750, "Rp 750"),
        (12.5, "Rp 12,5"),
    ],
)
def test_format_currency_compact(amount, expected):
    assert format_currency_compact(amount) == expected


@pytest.mark.parametrize(
    "amount, expected",
    [(3_000_000_000, "3.0b"), (4_500_000, "4.5m"), (1_600, "2k"), (999, "999")],
)
def test_format_currency_compact_mini(amount, expected):
    assert format_currency_compact_mini(amount) == expected


def test_format_amount_masks_hidden_balances():
    assert format_amount(1000, show_balance=True) == "Rp 1.000"
    assert format_amount(1000, show_balance=False) == MASKED_AMOUNT


def test_near_integer_fractions_drop_the_decimal_separator():
    assert format_currency_compact(12.0001) == "Rp 12"
    assert format_currency_compact_mini(0.0004) == "0"
    assert format_currency_compact_mini(10.0004) == "10"
