"""Report shaping helpers used by the dashboard views.

These functions are pure: they take decoded backend records and return
filtered records, totals or DataFrames ready to be charted.
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import Dict, List, NamedTuple, Sequence, Tuple

import pandas as pd

from .models import (
    Category,
    CategoryStats,
    DailyCell,
    DailyReport,
    MonthlyTrend,
    ReportSummary,
    Transaction,
    TransactionType,
    YearMonth,
)

FILTER_ALL = "all"

TREND_COLUMNS = ["month", "month_key", "income", "expense", "balance"]


class TrendTotals(NamedTuple):
    total_income: float
    total_expense: float
    total_balance: float


# ---------------------------------------------------------------------------
# Daily report
# ---------------------------------------------------------------------------


def filter_daily_report(report: DailyReport, filter_type: str = FILTER_ALL) -> DailyReport:
    """Restrict a daily report to one transaction type.

    The summary is recomputed for the selection: filtering by income
    zeroes the expense total and reports the income as the balance, and
    vice versa for expenses.
    """
    if filter_type == FILTER_ALL:
        transactions = list(report.transactions)
        stats = list(report.category_stats)
    else:
        transactions = [t for t in report.transactions if t.type == filter_type]
        stats = [s for s in report.category_stats if s.type == filter_type]

    summary = report.summary
    if filter_type == TransactionType.INCOME:
        filtered = ReportSummary(summary.total_income, 0.0, summary.total_income, len(transactions))
    elif filter_type == TransactionType.EXPENSE:
        filtered = ReportSummary(0.0, summary.total_expense, -summary.total_expense, len(transactions))
    else:
        filtered = ReportSummary(summary.total_income, summary.total_expense, summary.balance, len(transactions))

    return DailyReport(date=report.date, transactions=transactions, category_stats=stats, summary=filtered)


def report_title(day: str, filter_type: str = FILTER_ALL) -> str:
    """Title for the daily drill-down, e.g. ``"Income Detail - 01 February 2024"``."""
    date_text = ""
    if day:
        parsed = date.fromisoformat(day[:10])
        date_text = f"{parsed.day:02d} {calendar.month_name[parsed.month]} {parsed.year}"
    if filter_type == TransactionType.INCOME:
        return f"Income Detail - {date_text}"
    if filter_type == TransactionType.EXPENSE:
        return f"Expense Detail - {date_text}"
    return f"Daily Report - {date_text}"


def count_by_type(transactions: Sequence[Transaction]) -> Tuple[int, int]:
    """Return ``(income_count, expense_count)``."""
    income = sum(1 for t in transactions if t.type == TransactionType.INCOME)
    expense = sum(1 for t in transactions if t.type == TransactionType.EXPENSE)
    return income, expense


# ---------------------------------------------------------------------------
# Monthly trends
# ---------------------------------------------------------------------------


def trend_totals(trends: Sequence[MonthlyTrend]) -> TrendTotals:
    return TrendTotals(
        total_income=sum(t.total_income for t in trends),
        total_expense=sum(t.total_expense for t in trends),
        total_balance=sum(t.balance for t in trends),
    )


def trends_to_frame(trends: Sequence[MonthlyTrend]) -> pd.DataFrame:
    """Tabulate monthly trends with a short ``"Mon yyyy"`` label per month."""
    rows = []
    for item in trends:
        month = YearMonth.parse(item.month)
        rows.append(
            {
                "month": f"{calendar.month_abbr[month.month]} {month.year}",
                "month_key": item.month,
                "income": item.total_income,
                "expense": item.total_expense,
                "balance": item.balance,
            }
        )
    return pd.DataFrame(rows, columns=TREND_COLUMNS)


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


def unique_categories(categories: Sequence[Category]) -> List[Category]:
    """Drop duplicate ``(name, type)`` pairs, keeping the first occurrence."""
    seen = set()
    unique = []
    for category in categories:
        key = (category.name, category.type)
        if key in seen:
            continue
        seen.add(key)
        unique.append(category)
    return unique


def category_stats_frame(stats: Sequence[CategoryStats], type: str) -> pd.DataFrame:
    """Stats of one type as a DataFrame, largest total first."""
    rows = [
        {"category": s.category, "total": s.total, "count": s.count}
        for s in stats
        if s.type == type
    ]
    frame = pd.DataFrame(rows, columns=["category", "total", "count"])
    if frame.empty:
        return frame
    return frame.sort_values("total", ascending=False).reset_index(drop=True)


# ---------------------------------------------------------------------------
# Reconciled month
# ---------------------------------------------------------------------------


def month_summary(cells: Sequence[DailyCell]) -> Dict[str, float]:
    """Totals across a reconciled month."""
    income = sum(c.income for c in cells)
    expense = sum(c.expense for c in cells)
    return {
        "income": income,
        "expense": expense,
        "balance": income - expense,
        "income_count": sum(c.income_count for c in cells),
        "expense_count": sum(c.expense_count for c in cells),
        "active_days": sum(1 for c in cells if c.has_activity),
    }
