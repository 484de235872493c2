"""Typed records for the finance backend contract.

The backend speaks camelCase JSON.  Each record exposes ``from_dict``
to decode one response object at the boundary so that the rest of the
package works with plain attributes instead of raw dictionaries.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Dict, List, Optional


class TransactionType:
    INCOME = "income"
    EXPENSE = "expense"

    ALL = (INCOME, EXPENSE)


def _require(data: Dict[str, Any], key: str) -> Any:
    if key not in data or data[key] is None:
        raise ValueError(f"Missing required field '{key}'")
    return data[key]


def _checked_type(value: Any) -> str:
    if value not in TransactionType.ALL:
        raise ValueError(f"Unknown transaction type '{value}'")
    return value


def _number(data: Dict[str, Any], key: str) -> float:
    value = data.get(key)
    return float(value) if value is not None else 0.0


def _count(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    return int(value) if value is not None else 0


@dataclass(frozen=True, order=True)
class YearMonth:
    """A calendar month (year plus month number 1-12)."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {self.month}")

    @classmethod
    def parse(cls, value: str) -> "YearMonth":
        """Parse a ``yyyy-MM`` string."""
        try:
            year_text, month_text = value.strip().split("-")
            return cls(int(year_text), int(month_text))
        except (AttributeError, ValueError) as exc:
            raise ValueError(f"Invalid month '{value}', expected yyyy-MM") from exc

    @classmethod
    def from_date(cls, day: date) -> "YearMonth":
        return cls(day.year, day.month)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.days_in_month)

    def days(self) -> List[date]:
        """All calendar dates of the month in ascending order."""
        start = self.first_day
        return [start + timedelta(days=offset) for offset in range(self.days_in_month)]

    def shift(self, months: int) -> "YearMonth":
        """Return the month ``months`` away (negative moves backwards)."""
        index = self.year * 12 + (self.month - 1) + months
        return YearMonth(index // 12, index % 12 + 1)


@dataclass
class Transaction:
    type: str
    amount: float
    category: str
    description: str
    date: str
    id: Optional[int] = None
    created_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transaction":
        return cls(
            type=_checked_type(_require(data, "type")),
            amount=float(_require(data, "amount")),
            category=str(_require(data, "category")),
            description=data.get("description") or "",
            date=str(_require(data, "date")),
            id=data.get("id"),
            created_at=data.get("created_at"),
        )

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for create/update requests (the id travels in the URL)."""
        return {
            "type": self.type,
            "amount": self.amount,
            "category": self.category,
            "description": self.description,
            "date": self.date,
        }


@dataclass
class Category:
    name: str
    type: str
    color: str = ""
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        return cls(
            name=str(_require(data, "name")),
            type=_checked_type(_require(data, "type")),
            color=data.get("color") or "",
            id=data.get("id"),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type, "color": self.color}


@dataclass
class MonthlyRecap:
    month: str
    total_income: float = 0.0
    total_expense: float = 0.0
    balance: float = 0.0
    income_count: int = 0
    expense_count: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MonthlyRecap":
        return cls(
            month=str(_require(data, "month")),
            total_income=_number(data, "totalIncome"),
            total_expense=_number(data, "totalExpense"),
            balance=_number(data, "balance"),
            income_count=_count(data, "incomeCount"),
            expense_count=_count(data, "expenseCount"),
        )


# Monthly trends share the recap shape, one entry per month.
MonthlyTrend = MonthlyRecap


@dataclass
class CategoryStats:
    category: str
    type: str
    total: float = 0.0
    count: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CategoryStats":
        return cls(
            category=str(_require(data, "category")),
            type=_checked_type(_require(data, "type")),
            total=_number(data, "total"),
            count=_count(data, "count"),
        )


@dataclass(frozen=True)
class DailyAggregate:
    """Pre-summed total and count for one (date, type) pair.

    ``categories`` keeps the backend's comma-joined label string as-is;
    splitting it is the job of :mod:`finance_monitor.category_labels`.
    The type tag is not checked here: unknown tags are left for the
    reconciler to ignore.
    """

    date: str
    type: str
    total: float = 0.0
    count: int = 0
    categories: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyAggregate":
        return cls(
            date=str(_require(data, "date")),
            type=str(_require(data, "type")),
            total=_number(data, "total"),
            count=_count(data, "count"),
            categories=data.get("categories") or "",
        )


@dataclass
class ReportSummary:
    total_income: float = 0.0
    total_expense: float = 0.0
    balance: float = 0.0
    transaction_count: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReportSummary":
        return cls(
            total_income=_number(data, "totalIncome"),
            total_expense=_number(data, "totalExpense"),
            balance=_number(data, "balance"),
            transaction_count=_count(data, "transactionCount"),
        )


@dataclass
class DailyReport:
    date: str
    transactions: List[Transaction] = field(default_factory=list)
    category_stats: List[CategoryStats] = field(default_factory=list)
    summary: ReportSummary = field(default_factory=ReportSummary)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyReport":
        return cls(
            date=str(_require(data, "date")),
            transactions=[Transaction.from_dict(item) for item in data.get("transactions") or []],
            category_stats=[CategoryStats.from_dict(item) for item in data.get("categoryStats") or []],
            summary=ReportSummary.from_dict(data.get("summary") or {}),
        )


@dataclass
class DailyCell:
    """One reconciled calendar day of the daily trend."""

    date: str
    income: float = 0.0
    expense: float = 0.0
    income_count: int = 0
    expense_count: int = 0
    income_categories: List[str] = field(default_factory=list)
    expense_categories: List[str] = field(default_factory=list)

    @classmethod
    def empty(cls, day: str) -> "DailyCell":
        return cls(date=day)

    @property
    def has_activity(self) -> bool:
        return self.income_count > 0 or self.expense_count > 0
