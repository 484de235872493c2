"""Tests for finance_monitor.api_client using a stub HTTP session."""

from __future__ import annotations

import types

import pytest
import requests

from finance_monitor.api_client import ApiError, FinanceApiClient
from finance_monitor.models import Category, Transaction, YearMonth

BASE = "http://backend.test/api"


class FakeSession:
    """Records requests and replies with queued (status, payload) pairs."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, params=None, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "params": params, "json": json, "timeout": timeout})
        status, payload = self.responses.pop(0)
        return types.SimpleNamespace(ok=200 <= status < 300, status_code=status, json=lambda: payload)


def _client(*responses):
    session = FakeSession(*responses)
    return FinanceApiClient(base_url=BASE, timeout=5, session=session), session


def test_get_transactions_sends_only_set_filters():
    client, session = _client(
        (200, [{"id": 1, "type": "expense", "amount": 10, "category": "Food", "description": "", "date": "2024-02-01"}])
    )
    result = client.get_transactions(type="expense", month="2024-02")
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == f"{BASE}/transactions"
    assert call["params"] == {"type": "expense", "month": "2024-02"}
    assert call["timeout"] == 5
    assert result[0].category == "Food"


def test_create_update_delete_transaction():
    client, session = _client(
        (201, {"id": 9, "message": "created"}),
        (200, {"message": "updated"}),
        (200, {"message": "deleted"}),
    )
    tx = Transaction(type="income", amount=500000, category="Salary", description="", date="2024-02-01")
    assert client.create_transaction(tx) == {"id": 9, "message": "created"}
    client.update_transaction(9, tx)
    client.delete_transaction(9)

    methods = [(c["method"], c["url"]) for c in session.calls]
    assert methods == [
        ("POST", f"{BASE}/transactions"),
        ("PUT", f"{BASE}/transactions/9"),
        ("DELETE", f"{BASE}/transactions/9"),
    ]
    assert session.calls[0]["json"] == tx.to_payload()
    assert session.calls[2]["json"] is None


def test_report_routes():
    client, session = _client(
        (200, {"month": "2024-02", "totalIncome": 10, "totalExpense": 4, "balance": 6, "incomeCount": 1, "expenseCount": 1}),
        (200, [{"category": "Food", "type": "expense", "total": 4, "count": 1}]),
        (200, {"date": "2024-02-01", "transactions": [], "categoryStats": [], "summary": {}}),
        (200, [{"month": "2024-01", "totalIncome": 1, "totalExpense": 2, "balance": -1}]),
    )
    assert client.get_monthly_recap("2024-02").balance == 6
    assert client.get_category_stats("2024-02")[0].total == 4
    assert client.get_daily_report("2024-02-01").date == "2024-02-01"
    assert client.get_monthly_trends(6)[0].balance == -1

    urls = [c["url"] for c in session.calls]
    assert urls == [
        f"{BASE}/transactions/recap/2024-02",
        f"{BASE}/transactions/stats",
        f"{BASE}/transactions/daily-report/2024-02-01",
        f"{BASE}/transactions/monthly-trends",
    ]
    assert session.calls[1]["params"] == {"month": "2024-02"}
    assert session.calls[3]["params"] == {"months": "6"}


def test_monthly_trends_without_limit_sends_no_params():
    client, session = _client((200, []))
    assert client.get_monthly_trends() == []
    assert session.calls[0]["params"] == {}


def test_categories():
    client, session = _client(
        (200, [{"id": 1, "name": "Food", "type": "expense", "color": "#f00"}]),
        (201, {"id": 2, "message": "created"}),
    )
    assert client.get_categories("expense")[0].name == "Food"
    client.create_category(Category(name="Gift", type="income", color="#0f0"))
    assert session.calls[0]["params"] == {"type": "expense"}
    assert session.calls[1]["json"] == {"name": "Gift", "type": "income", "color": "#0f0"}


def test_load_daily_cells_reconciles_month():
    client, session = _client(
        (200, [{"date": "2024-02-01", "type": "income", "total": 500000, "count": 2, "categories": "Salary,Bonus"}])
    )
    cells = client.load_daily_cells(YearMonth(2024, 2))
    assert session.calls[0]["url"] == f"{BASE}/transactions/daily-stats"
    assert session.calls[0]["params"] == {"month": "2024-02"}
    assert len(cells) == 29
    assert cells[0].income_categories == ["Salary", "Bonus"]


def test_error_status_raises_api_error():
    client, _ = _client((500, {"error": "boom"}))
    with pytest.raises(ApiError) as excinfo:
        client.get_categories()
    assert excinfo.value.status_code == 500
    assert str(excinfo.value) == "HTTP error! status: 500"
    assert excinfo.value.url == f"{BASE}/categories"


def test_transport_failure_is_wrapped():
    class BrokenSession:
        def request(self, *args, **kwargs):
            raise requests.ConnectionError("refused")

    client = FinanceApiClient(base_url=BASE, session=BrokenSession())
    with pytest.raises(ApiError) as excinfo:
        client.get_transactions()
    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_default_base_url_comes_from_config(monkeypatch):
    from finance_monitor import config

    monkeypatch.setattr(config, "API_URL", "http://example.test")
    client = FinanceApiClient(session=FakeSession())
    assert client.base_url == "http://example.test/api"
