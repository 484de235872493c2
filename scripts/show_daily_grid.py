#!/usr/bin/env python3
"""Print the reconciled day-by-day grid of one month from the backend."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from finance_monitor import reports
from finance_monitor.api_client import ApiError, FinanceApiClient
from finance_monitor.calendar_reconciler import cells_to_frame
from finance_monitor.category_labels import summarize_labels
from finance_monitor.clock import SystemClock, current_month
from finance_monitor.currency import format_currency
from finance_monitor.logging_setup import configure_logging
from finance_monitor.models import YearMonth


def main(month: Optional[str] = None, base_url: Optional[str] = None, active_only: bool = False) -> int:
    configure_logging()
    target = YearMonth.parse(month) if month else current_month(SystemClock())
    client = FinanceApiClient(base_url=base_url)
    try:
        cells = client.load_daily_cells(target)
    except ApiError as exc:
        print(f"Could not load daily stats for {target}: {exc}", file=sys.stderr)
        return 1

    frame = cells_to_frame(cells)
    if active_only:
        frame = frame[(frame['income_count'] > 0) | (frame['expense_count'] > 0)].copy()
    frame['date'] = frame['date'].dt.strftime('%Y-%m-%d')
    frame['income_categories'] = frame['income_categories'].apply(summarize_labels)
    frame['expense_categories'] = frame['expense_categories'].apply(summarize_labels)

    print(f"Daily transactions for {target} ({target.days_in_month} days)")
    print(frame.to_string(index=False))

    summary = reports.month_summary(cells)
    print(
        f"\nIncome {format_currency(summary['income'])} ({summary['income_count']} tx), "
        f"expense {format_currency(summary['expense'])} ({summary['expense_count']} tx), "
        f"balance {format_currency(summary['balance'])}, "
        f"{summary['active_days']} active days"
    )
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Show the daily income/expense grid for a month.')
    parser.add_argument('--month', help='Month as yyyy-MM (defaults to the current month)')
    parser.add_argument('--base-url', help='API root, e.g. http://localhost:3001/api')
    parser.add_argument('--active-only', action='store_true', help='Only print days with transactions')
    args = parser.parse_args()
    sys.exit(main(month=args.month, base_url=args.base_url, active_only=args.active_only))
