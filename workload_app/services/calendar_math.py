"""
Calendar helpers for the workload engine.

Work days are Monday through Friday; no holiday calendar is applied.
"""
import calendar
from datetime import date, timedelta
from typing import Iterator

ONE_DAY = timedelta(days=1)

SATURDAY = 5
SUNDAY = 6


def is_work_day(day: date) -> bool:
    """True for Monday through Friday."""
    return day.weekday() < SATURDAY


def next_work_day(day: date) -> date:
    """Return ``day`` if it is a work day, otherwise the following Monday."""
    weekday = day.weekday()
    if weekday == SATURDAY:
        return day + timedelta(days=2)
    if weekday == SUNDAY:
        return day + ONE_DAY
    return day


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day in the half-open range [start, end)."""
    for offset in range((end - start).days):
        yield start + timedelta(days=offset)


def work_days_in_closed_range(start: date, end: date) -> int:
    """Count work days in [start, end]; 0 when start is after end."""
    if start > end:
        return 0
    return sum(1 for day in iter_days(start, end + ONE_DAY) if is_work_day(day))


def first_of_month(day: date) -> date:
    return day.replace(day=1)


def first_of_next_month(day: date) -> date:
    _, days_in_month = calendar.monthrange(day.year, day.month)
    return day.replace(day=1) + timedelta(days=days_in_month)


def work_days_in_month(year: int, month: int) -> int:
    """Count the work days of a calendar month."""
    first = date(year, month, 1)
    return sum(1 for day in iter_days(first, first_of_next_month(first)) if is_work_day(day))
