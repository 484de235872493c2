import pandas as pd

from finance_monitor import reports
from finance_monitor import visualization as viz
from finance_monitor.calendar_reconciler import cells_to_frame, reconcile
from finance_monitor.models import CategoryStats, DailyAggregate, MonthlyTrend, YearMonth


def test_daily_trend_chart_has_income_and_expense_lines():
    cells = reconcile(
        YearMonth(2024, 2),
        [DailyAggregate("2024-02-01", "income", 500000, 2, "Salary:400000,Bonus:100000")],
    )
    fig = viz.create_daily_trend_chart(cells_to_frame(cells))
    names = [trace.name for trace in fig.data]
    assert names == ["Income", "Expense"]
    assert len(fig.data[0].x) == 29
    assert fig.data[0].customdata[0][1] == "Salary, Bonus"
    assert fig.data[0].marker.size[0] == 8
    assert fig.data[0].marker.size[1] == 0


def test_empty_inputs_give_placeholder_figures():
    empty = pd.DataFrame()
    for fig in (
        viz.create_daily_trend_chart(empty),
        viz.create_monthly_trends_chart(empty),
        viz.create_category_pie_chart(empty),
    ):
        assert fig.layout.title.text == "No data to display"


def test_monthly_trends_chart_groups_bars():
    frame = reports.trends_to_frame([MonthlyTrend("2024-01", 100, 60, 40), MonthlyTrend("2024-02", 50, 80, -30)])
    fig = viz.create_monthly_trends_chart(frame)
    assert [trace.name for trace in fig.data] == ["Income", "Expense", "Balance"]
    assert fig.layout.barmode == "group"


def test_category_pie_chart():
    frame = reports.category_stats_frame([CategoryStats("Food", "expense", 10, 1)], "expense")
    fig = viz.create_category_pie_chart(frame, "Expenses by Category")
    assert fig.layout.title.text == "Expenses by Category"
