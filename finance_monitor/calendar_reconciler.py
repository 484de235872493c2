"""Reconciliation of sparse daily aggregates into a full calendar month.

The daily-stats endpoint only returns rows for days that have
transactions, split by type.  The trend chart needs one point per day,
so :func:`reconcile` merges the income and expense rows of each date and
fills every missing day with a zero-valued cell.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

import pandas as pd

from .category_labels import split_category_labels
from .models import DailyAggregate, DailyCell, TransactionType, YearMonth

CELL_COLUMNS = [
    "date",
    "income",
    "expense",
    "income_count",
    "expense_count",
    "income_categories",
    "expense_categories",
]


def reconcile(month: YearMonth, aggregates: Sequence[DailyAggregate]) -> List[DailyCell]:
    """Build one :class:`DailyCell` per day of ``month``, ascending by date.

    Records dated outside ``month`` are dropped.  A record whose type is
    neither income nor expense leaves its cell untouched.
    """
    keys = [day.isoformat() for day in month.days()]

    cells: Dict[str, DailyCell] = {}
    for item in aggregates:
        cell = cells.setdefault(item.date, DailyCell.empty(item.date))
        if item.type == TransactionType.INCOME:
            cell.income = item.total
            cell.income_count = item.count
            cell.income_categories = split_category_labels(item.categories)
        elif item.type == TransactionType.EXPENSE:
            cell.expense = item.total
            cell.expense_count = item.count
            cell.expense_categories = split_category_labels(item.categories)

    return [cells.get(key) or DailyCell.empty(key) for key in keys]


def cells_to_frame(cells: Sequence[DailyCell]) -> pd.DataFrame:
    """Tabulate reconciled cells for charting (``date`` as datetime)."""
    if not cells:
        return pd.DataFrame(columns=CELL_COLUMNS)
    frame = pd.DataFrame(
        [
            {
                "date": cell.date,
                "income": cell.income,
                "expense": cell.expense,
                "income_count": cell.income_count,
                "expense_count": cell.expense_count,
                "income_categories": list(cell.income_categories),
                "expense_categories": list(cell.expense_categories),
            }
            for cell in cells
        ],
        columns=CELL_COLUMNS,
    )
    frame["date"] = pd.to_datetime(frame["date"])
    return frame
