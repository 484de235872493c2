"""Injectable time provider.

Views default their selected period to "today".  Reading the date
through a :class:`Clock` keeps that default explicit and lets tests pin
it with :class:`FixedClock`.
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import List, Protocol, Tuple

from .models import YearMonth


class Clock(Protocol):
    def today(self) -> date:
        ...


class SystemClock:
    """Clock backed by the local system date."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Clock that always reports the same day."""

    def __init__(self, day: date):
        self._day = day

    def today(self) -> date:
        return self._day


def current_month(clock: Clock) -> YearMonth:
    return YearMonth.from_date(clock.today())


def month_label(month: YearMonth) -> str:
    """Human label such as ``"February 2024"``."""
    return f"{calendar.month_name[month.month]} {month.year}"


def month_options(clock: Clock, count: int = 12) -> List[Tuple[str, str]]:
    """Return ``(yyyy-MM, label)`` pairs for the last ``count`` months, newest first."""
    current = current_month(clock)
    options = []
    for offset in range(count):
        month = current.shift(-offset)
        options.append((str(month), month_label(month)))
    return options
