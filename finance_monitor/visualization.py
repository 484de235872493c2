"""Plotly visualisation helpers for the finance monitor.

Each function accepts a DataFrame produced by
:mod:`finance_monitor.calendar_reconciler` or
:mod:`finance_monitor.reports` and returns an interactive Plotly
figure that Streamlit renders via ``st.plotly_chart``.  Empty input
yields a placeholder figure titled "No data to display".
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .category_labels import summarize_labels

INCOME_COLOR = "#10b981"
EXPENSE_COLOR = "#ef4444"
BALANCE_COLOR = "#3b82f6"


def _empty_figure(title: str = "No data to display") -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title)
    return fig


def create_daily_trend_chart(frame: pd.DataFrame, title: str | None = None) -> go.Figure:
    """Line chart of daily income and expense for a reconciled month.

    Parameters
    ----------
    frame : pandas.DataFrame
        Output of :func:`calendar_reconciler.cells_to_frame`, one row
        per calendar day.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Two-line chart.  Hovering a day shows its transaction count and
        up to three category names per type.
    """
    if frame.empty:
        return _empty_figure()

    fig = go.Figure()
    for kind, label, color in (("income", "Income", INCOME_COLOR), ("expense", "Expense", EXPENSE_COLOR)):
        counts = frame[f"{kind}_count"].to_numpy()
        summaries = frame[f"{kind}_categories"].apply(summarize_labels).to_numpy()
        fig.add_trace(
            go.Scatter(
                x=frame["date"],
                y=frame[kind],
                name=label,
                mode="lines+markers",
                line=dict(color=color, width=2),
                # Only days with transactions get a visible marker
                marker=dict(color=color, size=np.where(counts > 0, 8, 0)),
                customdata=np.column_stack([counts, summaries]),
                hovertemplate=(
                    f"{label}: %{{y:,.0f}}<br>"
                    "%{customdata[0]} transactions<br>"
                    "Categories: %{customdata[1]}<extra></extra>"
                ),
            )
        )
    fig.update_layout(
        title=title or "Daily transactions",
        xaxis_title="Date",
        yaxis_title="Amount (Rp)",
        hovermode="x unified",
    )
    return fig


def create_monthly_trends_chart(frame: pd.DataFrame, title: str | None = None) -> go.Figure:
    """Grouped income/expense bars per month with the balance as a line.

    Parameters
    ----------
    frame : pandas.DataFrame
        Output of :func:`reports.trends_to_frame`.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Combined bar and line chart.
    """
    if frame.empty:
        return _empty_figure()
    fig = go.Figure()
    fig.add_trace(go.Bar(name="Income", x=frame["month"], y=frame["income"], marker_color=INCOME_COLOR))
    fig.add_trace(go.Bar(name="Expense", x=frame["month"], y=frame["expense"], marker_color=EXPENSE_COLOR))
    fig.add_trace(
        go.Scatter(
            name="Balance",
            x=frame["month"],
            y=frame["balance"],
            mode="lines+markers",
            line=dict(color=BALANCE_COLOR),
        )
    )
    fig.update_layout(
        title=title or "Monthly trends",
        barmode="group",
        xaxis_title="Month",
        yaxis_title="Amount (Rp)",
    )
    return fig


def create_category_pie_chart(frame: pd.DataFrame, title: str | None = None) -> go.Figure:
    """Pie chart of category totals.

    ``frame`` comes from :func:`reports.category_stats_frame`.
    """
    if frame.empty:
        return _empty_figure()
    fig = px.pie(frame, names="category", values="total")
    fig.update_layout(title=title or "Category breakdown")
    return fig
