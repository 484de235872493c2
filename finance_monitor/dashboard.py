"""Streamlit app for the finance monitor.

Single page that mirrors the sections of the home screen: balance
toggle, today's quick stats, the transaction form, monthly recap and
trends, the daily trend with a per-day drill-down, category breakdowns
and the transaction list.

All data comes from the REST backend through
:class:`~finance_monitor.api_client.FinanceApiClient`.  Loads are cached
per refresh version; saving or deleting a transaction notifies the
:class:`~finance_monitor.refresh.RefreshChannel`, which bumps the
version and clears every cached load for all sessions.  Cached loads
also expire after ``FINMON_CACHE_TTL`` seconds so changes made by other
backend clients show up.

To run the dashboard from the command line::

    streamlit run finance_monitor/dashboard.py
"""

from __future__ import annotations

import os
import sys
from datetime import date
from typing import Any, Callable, List, Optional

import pandas as pd
import streamlit as st

# Support both ``streamlit run finance_monitor/dashboard.py`` and
# package execution.
if __package__:
    from . import config
    from . import reports
    from . import visualization as viz
    from .api_client import ApiError, FinanceApiClient
    from .calendar_reconciler import cells_to_frame
    from .clock import Clock, SystemClock, month_options
    from .currency import format_amount
    from .logging_setup import configure_logging, get_logger
    from .models import Transaction, TransactionType, YearMonth
    from .refresh import RefreshChannel
else:
    CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
    PARENT_DIR = os.path.dirname(CURRENT_DIR)
    if PARENT_DIR not in sys.path:
        sys.path.insert(0, PARENT_DIR)
    from finance_monitor import config  # type: ignore
    from finance_monitor import reports  # type: ignore
    from finance_monitor import visualization as viz  # type: ignore
    from finance_monitor.api_client import ApiError, FinanceApiClient  # type: ignore
    from finance_monitor.calendar_reconciler import cells_to_frame  # type: ignore
    from finance_monitor.clock import Clock, SystemClock, month_options  # type: ignore
    from finance_monitor.currency import format_amount  # type: ignore
    from finance_monitor.logging_setup import configure_logging, get_logger  # type: ignore
    from finance_monitor.models import Transaction, TransactionType, YearMonth  # type: ignore
    from finance_monitor.refresh import RefreshChannel  # type: ignore

logger = get_logger("finance_monitor.dashboard")

TYPE_LABELS = {TransactionType.INCOME: "Income", TransactionType.EXPENSE: "Expense"}


# ---------------------------------------------------------------------------
# Session helpers
# ---------------------------------------------------------------------------


def _get_client() -> FinanceApiClient:
    if "api_client" not in st.session_state:
        st.session_state["api_client"] = FinanceApiClient()
    return st.session_state["api_client"]


def _get_clock() -> Clock:
    if "clock" not in st.session_state:
        st.session_state["clock"] = SystemClock()
    return st.session_state["clock"]


def _safe_load(loader: Callable[[], Any], default: Any, what: str) -> Any:
    """Run ``loader``; on backend failure show an error and return ``default``."""
    try:
        return loader()
    except ApiError as exc:
        logger.error("Error loading %s: %s", what, exc)
        st.error(f"Failed to load {what}: {exc}")
        return default


def _month_picker(label: str, key: str, clock: Clock, include_all: bool = False) -> str:
    options = month_options(clock, config.MONTH_OPTIONS)
    values = [value for value, _ in options]
    labels = dict(options)
    if include_all:
        values = ["all"] + values
        labels["all"] = "All months"
    return st.selectbox(label, options=values, format_func=lambda v: labels[v], key=key)


# ---------------------------------------------------------------------------
# Cached loads (keyed by refresh version, cleared on every change)
# ---------------------------------------------------------------------------


@st.cache_data(ttl=config.CACHE_TTL, show_spinner=False)
def _load_daily_cells(month: str, version: int):
    return _get_client().load_daily_cells(YearMonth.parse(month))


@st.cache_data(ttl=config.CACHE_TTL, show_spinner=False)
def _load_monthly_recap(month: str, version: int):
    return _get_client().get_monthly_recap(month)


@st.cache_data(ttl=config.CACHE_TTL, show_spinner=False)
def _load_monthly_trends(months: Optional[int], version: int):
    return _get_client().get_monthly_trends(months)


@st.cache_data(ttl=config.CACHE_TTL, show_spinner=False)
def _load_category_stats(month: str, version: int):
    return _get_client().get_category_stats(month)


@st.cache_data(ttl=config.CACHE_TTL, show_spinner=False)
def _load_daily_report(day: str, version: int):
    return _get_client().get_daily_report(day)


@st.cache_data(ttl=config.CACHE_TTL, show_spinner=False)
def _load_transactions(category: Optional[str], type: Optional[str], month: Optional[str], version: int):
    return _get_client().get_transactions(category=category, type=type, month=month)


@st.cache_data(ttl=config.CACHE_TTL, show_spinner=False)
def _load_categories(type: Optional[str], version: int):
    return reports.unique_categories(_get_client().get_categories(type))


_CACHED_LOADS = (
    _load_daily_cells,
    _load_monthly_recap,
    _load_monthly_trends,
    _load_category_stats,
    _load_daily_report,
    _load_transactions,
    _load_categories,
)


def _clear_cached_loads(version: int) -> None:
    for loader in _CACHED_LOADS:
        loader.clear()


@st.cache_resource
def _shared_refresh_channel() -> RefreshChannel:
    # One channel per server process: the load cache is process-wide too
    channel = RefreshChannel()
    channel.subscribe(_clear_cached_loads)
    return channel


def _get_refresh_channel() -> RefreshChannel:
    return _shared_refresh_channel()


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def render_quick_stats(clock: Clock, version: int) -> None:
    st.subheader("Today's Stats")
    today = clock.today().isoformat()
    report = _safe_load(lambda: _load_daily_report(today, version), None, "today's stats")
    income_count, expense_count = reports.count_by_type(report.transactions) if report else (0, 0)
    col1, col2 = st.columns(2)
    col1.metric("Income transactions", income_count)
    col2.metric("Expense transactions", expense_count)


def render_transaction_form(clock: Clock, channel: RefreshChannel) -> None:
    st.subheader("Add Transaction")
    tx_type = st.radio(
        "Type",
        options=list(TYPE_LABELS),
        format_func=TYPE_LABELS.get,
        index=1,
        horizontal=True,
        key="form_type",
    )
    categories = _safe_load(lambda: _load_categories(tx_type, channel.version), [], "categories")
    with st.form("transaction_form", clear_on_submit=True):
        amount = st.number_input("Amount (Rp)", min_value=0.0, step=1000.0, format="%.0f")
        category = st.selectbox("Category", options=[c.name for c in categories], index=None)
        description = st.text_input("Description")
        tx_date = st.date_input("Date", value=clock.today())
        submitted = st.form_submit_button("Add Transaction")

    if not submitted:
        return
    if not amount or not category:
        st.warning("Amount and category are required.")
        return
    transaction = Transaction(
        type=tx_type,
        amount=float(amount),
        category=category,
        description=description,
        date=tx_date.isoformat() if isinstance(tx_date, date) else str(tx_date),
    )
    try:
        _get_client().create_transaction(transaction)
    except ApiError as exc:
        logger.error("Error creating transaction: %s", exc)
        st.error("Failed to add the transaction. Please try again.")
        return
    channel.notify("transaction created")
    st.success("Transaction added!")
    st.rerun()


def render_monthly_recap(clock: Clock, version: int, show_balance: bool) -> None:
    st.subheader("Monthly Recap")
    month = _month_picker("Month", "recap_month", clock)
    recap = _safe_load(lambda: _load_monthly_recap(month, version), None, "monthly recap")
    if recap is None:
        return
    col1, col2, col3 = st.columns(3)
    col1.metric("Income", format_amount(recap.total_income, show_balance), f"{recap.income_count} transactions")
    col2.metric("Expense", format_amount(recap.total_expense, show_balance), f"{recap.expense_count} transactions")
    col3.metric("Balance", format_amount(recap.balance, show_balance))


def render_monthly_trends(version: int, show_balance: bool) -> None:
    st.subheader("Monthly Trends")
    period = st.selectbox(
        "Period",
        options=config.TREND_PERIODS,
        index=config.TREND_PERIODS.index(config.DEFAULT_TREND_PERIOD),
        format_func=lambda p: "All time" if p == "all" else f"Last {p} months",
        key="trend_period",
    )
    months = None if period == "all" else int(period)
    trends = _safe_load(lambda: _load_monthly_trends(months, version), [], "monthly trends")
    totals = reports.trend_totals(trends)
    col1, col2, col3 = st.columns(3)
    col1.metric("Total income", format_amount(totals.total_income, show_balance))
    col2.metric("Total expense", format_amount(totals.total_expense, show_balance))
    col3.metric("Total balance", format_amount(totals.total_balance, show_balance))
    st.plotly_chart(viz.create_monthly_trends_chart(reports.trends_to_frame(trends)), use_container_width=True)


def render_daily_report(day: str, filter_type: str, version: int, show_balance: bool) -> None:
    report = _safe_load(lambda: _load_daily_report(day, version), None, "daily report")
    if report is None:
        return
    filtered = reports.filter_daily_report(report, filter_type)
    st.markdown(f"**{reports.report_title(day, filter_type)}**")
    if not filtered.transactions:
        st.info("No transactions on this day.")
        return
    summary = filtered.summary
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Income", format_amount(summary.total_income, show_balance))
    col2.metric("Expense", format_amount(summary.total_expense, show_balance))
    col3.metric("Balance", format_amount(summary.balance, show_balance))
    col4.metric("Transactions", summary.transaction_count)
    if filtered.category_stats:
        st.dataframe(
            pd.DataFrame(
                [
                    {"Category": s.category, "Type": TYPE_LABELS.get(s.type, s.type), "Total": format_amount(s.total, show_balance), "Count": s.count}
                    for s in filtered.category_stats
                ]
            ),
            use_container_width=True,
            hide_index=True,
        )
    st.dataframe(_transactions_frame(filtered.transactions, show_balance), use_container_width=True, hide_index=True)


def render_daily_trend(clock: Clock, version: int, show_balance: bool) -> None:
    st.subheader("Daily Transactions")
    month = _month_picker("Month", "daily_month", clock)
    cells = _safe_load(lambda: _load_daily_cells(month, version), [], "daily data")
    frame = cells_to_frame(cells)
    st.plotly_chart(viz.create_daily_trend_chart(frame), use_container_width=True)

    active_days = [cell.date for cell in cells if cell.has_activity]
    if not active_days:
        return
    col1, col2 = st.columns(2)
    with col1:
        day = st.selectbox("Day details", options=active_days, key="daily_report_day")
    with col2:
        filter_type = st.radio(
            "Show",
            options=[reports.FILTER_ALL, TransactionType.INCOME, TransactionType.EXPENSE],
            format_func=lambda t: TYPE_LABELS.get(t, "All"),
            horizontal=True,
            key="daily_report_type",
        )
    render_daily_report(day, filter_type, version, show_balance)


def render_category_charts(clock: Clock, version: int) -> None:
    col1, col2 = st.columns(2)
    for column, tx_type, title in (
        (col1, TransactionType.EXPENSE, "Expenses by Category"),
        (col2, TransactionType.INCOME, "Income by Category"),
    ):
        with column:
            st.subheader(title)
            month = _month_picker("Month", f"{tx_type}_stats_month", clock)
            stats = _safe_load(lambda: _load_category_stats(month, version), [], "category stats")
            frame = reports.category_stats_frame(stats, tx_type)
            st.plotly_chart(viz.create_category_pie_chart(frame, title), use_container_width=True)


def _transactions_frame(transactions: List[Transaction], show_balance: bool) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Date": t.date,
                "Type": TYPE_LABELS.get(t.type, t.type),
                "Category": t.category,
                "Description": t.description,
                "Amount": format_amount(t.amount, show_balance),
            }
            for t in transactions
        ],
        columns=["Date", "Type", "Category", "Description", "Amount"],
    )


def render_transactions_list(clock: Clock, channel: RefreshChannel, show_balance: bool) -> None:
    st.subheader("Transactions")
    categories = _safe_load(lambda: _load_categories(None, channel.version), [], "categories")
    col1, col2, col3 = st.columns(3)
    with col1:
        month = _month_picker("Month", "list_month", clock, include_all=True)
    with col2:
        tx_type = st.selectbox(
            "Type",
            options=["all"] + list(TYPE_LABELS),
            format_func=lambda t: TYPE_LABELS.get(t, "All types"),
            key="list_type",
        )
    with col3:
        category = st.selectbox(
            "Category",
            options=["all"] + sorted({c.name for c in categories}),
            format_func=lambda c: "All categories" if c == "all" else c,
            key="list_category",
        )

    transactions = _safe_load(
        lambda: _load_transactions(
            None if category == "all" else category,
            None if tx_type == "all" else tx_type,
            None if month == "all" else month,
            channel.version,
        ),
        [],
        "transactions",
    )
    if not transactions:
        st.info("No transactions found.")
        return

    for transaction in transactions:
        cols = st.columns([2, 2, 3, 2, 1])
        cols[0].write(transaction.date)
        cols[1].write(f"{TYPE_LABELS.get(transaction.type, transaction.type)} · {transaction.category}")
        cols[2].write(transaction.description or "-")
        cols[3].write(format_amount(transaction.amount, show_balance))
        if transaction.id is not None and cols[4].button("🗑️", key=f"delete_{transaction.id}"):
            st.session_state["pending_delete"] = transaction.id

    pending = st.session_state.get("pending_delete")
    if pending is not None:
        st.warning("Delete this transaction? This cannot be undone.")
        confirm_col, cancel_col = st.columns(2)
        if confirm_col.button("✅ Confirm", key="confirm_delete"):
            _delete_transaction(pending, channel)
        if cancel_col.button("❌ Cancel", key="cancel_delete"):
            st.session_state["pending_delete"] = None
            st.rerun()


def _delete_transaction(transaction_id: int, channel: RefreshChannel) -> None:
    try:
        _get_client().delete_transaction(transaction_id)
    except ApiError as exc:
        logger.error("Error deleting transaction: %s", exc)
        st.error("Failed to delete the transaction. Please try again.")
        return
    st.session_state["pending_delete"] = None
    channel.notify("transaction deleted")
    st.rerun()


def main() -> None:
    """Entry point for the Streamlit app."""
    configure_logging()
    st.set_page_config(page_title="Finance Monitor", layout="wide", initial_sidebar_state="expanded")
    st.title("Finance Monitor")
    st.markdown("Track your income and expenses with detailed analysis.")

    clock = _get_clock()
    channel = _get_refresh_channel()
    show_balance = st.sidebar.toggle("Show balances", value=False, key="show_balance")

    with st.sidebar:
        render_quick_stats(clock, channel.version)
        render_transaction_form(clock, channel)

    render_monthly_recap(clock, channel.version, show_balance)
    render_monthly_trends(channel.version, show_balance)
    render_daily_trend(clock, channel.version, show_balance)
    render_category_charts(clock, channel.version)
    render_transactions_list(clock, channel, show_balance)


if __name__ == "__main__":  # pragma: no cover
    main()
