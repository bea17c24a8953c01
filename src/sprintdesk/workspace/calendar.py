# src/sprintdesk/workspace/calendar.py

"""
Calendar date bucketing.

A task belongs to the calendar day whose local YYYY-MM-DD string equals its
due_date. No timezone normalisation is applied.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from .models import Task

GRID_DAYS = 42


def _day_key(day: date | str) -> str:
    return day.isoformat() if isinstance(day, date) else str(day)


def _sunday_on_or_before(day: date) -> date:
    # date.weekday(): Monday == 0 ... Sunday == 6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def tasks_for_date(tasks: Iterable[Task], day: date | str) -> list[Task]:
    key = _day_key(day)
    return [t for t in tasks if t.due_date == key]


def bucket_by_date(tasks: Iterable[Task], days: Iterable[date]) -> dict[date, list[Task]]:
    wanted = {d.isoformat(): d for d in days}
    out: dict[date, list[Task]] = {d: [] for d in wanted.values()}
    for t in tasks:
        d = wanted.get(t.due_date)
        if d is not None:
            out[d].append(t)
    return out


def month_grid(year: int, month: int) -> list[date]:
    """Six full Sunday-based weeks covering the month."""
    start = _sunday_on_or_before(date(year, month, 1))
    return [start + timedelta(days=i) for i in range(GRID_DAYS)]


def week_days(day: date) -> list[date]:
    start = _sunday_on_or_before(day)
    return [start + timedelta(days=i) for i in range(7)]
