"""HTTP client for the finance backend.

Thin wrapper around :mod:`requests` covering the transaction, category
and report routes.  Responses are decoded into the records of
:mod:`finance_monitor.models`; any non-2xx status raises
:class:`ApiError`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from . import config
from .calendar_reconciler import reconcile
from .logging_setup import get_logger
from .models import (
    Category,
    CategoryStats,
    DailyAggregate,
    DailyCell,
    DailyReport,
    MonthlyRecap,
    MonthlyTrend,
    Transaction,
    YearMonth,
)

logger = get_logger(__name__)


class ApiError(Exception):
    """Raised when the backend cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


def _drop_empty(params: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in params.items() if value not in (None, "")}


class FinanceApiClient:
    """Client for the ``/api`` routes of the finance backend."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or config.get_api_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else config.get_api_timeout()
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None, payload: Any = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%s", method, url, params)
        try:
            resp = self.session.request(method, url, params=params, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise ApiError(f"Request failed: {exc}", url=url) from exc
        if not resp.ok:
            logger.error("%s %s returned status %s", method, url, resp.status_code)
            raise ApiError(f"HTTP error! status: {resp.status_code}", status_code=resp.status_code, url=url)
        return resp.json()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("GET", path, params=_drop_empty(params or {}))

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def get_transactions(
        self,
        category: Optional[str] = None,
        type: Optional[str] = None,
        month: Optional[str] = None,
    ) -> List[Transaction]:
        data = self._get("/transactions", {"category": category, "type": type, "month": month})
        return [Transaction.from_dict(item) for item in data]

    def create_transaction(self, transaction: Transaction) -> Dict[str, Any]:
        """Create a transaction; returns ``{"id": ..., "message": ...}``."""
        return self._request("POST", "/transactions", payload=transaction.to_payload())

    def update_transaction(self, transaction_id: int, transaction: Transaction) -> Dict[str, Any]:
        return self._request("PUT", f"/transactions/{transaction_id}", payload=transaction.to_payload())

    def delete_transaction(self, transaction_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/transactions/{transaction_id}")

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------

    def get_monthly_recap(self, month: str) -> MonthlyRecap:
        return MonthlyRecap.from_dict(self._get(f"/transactions/recap/{month}"))

    def get_category_stats(self, month: Optional[str] = None) -> List[CategoryStats]:
        data = self._get("/transactions/stats", {"month": month})
        return [CategoryStats.from_dict(item) for item in data]

    def get_daily_stats(self, month: Optional[str] = None) -> List[DailyAggregate]:
        data = self._get("/transactions/daily-stats", {"month": month})
        return [DailyAggregate.from_dict(item) for item in data]

    def get_daily_report(self, day: str) -> DailyReport:
        return DailyReport.from_dict(self._get(f"/transactions/daily-report/{day}"))

    def get_monthly_trends(self, months: Optional[int] = None) -> List[MonthlyTrend]:
        data = self._get("/transactions/monthly-trends", {"months": str(months) if months else None})
        return [MonthlyTrend.from_dict(item) for item in data]

    def load_daily_cells(self, month: YearMonth) -> List[DailyCell]:
        """Fetch the daily aggregates of ``month`` and fill in the missing days."""
        return reconcile(month, self.get_daily_stats(str(month)))

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def get_categories(self, type: Optional[str] = None) -> List[Category]:
        data = self._get("/categories", {"type": type})
        return [Category.from_dict(item) for item in data]

    def create_category(self, category: Category) -> Dict[str, Any]:
        return self._request("POST", "/categories", payload=category.to_payload())
