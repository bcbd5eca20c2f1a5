"""
Absence counting per reporting period.
"""
from datetime import date
from typing import Iterable, Set

from .calendar_math import ONE_DAY, is_work_day, iter_days
from .workload_types import AbsenceInterval


def absent_work_days(absences: Iterable[AbsenceInterval], period_start: date, period_end: date) -> Set[date]:
    """
    Collect the distinct work days inside [period_start, period_end) covered by
    any absence.

    Days are gathered into a set so overlapping or duplicated absences are
    counted once.
    """
    last_day = period_end - ONE_DAY
    days = set()
    for absence in absences:
        overlap_start = max(absence.start_date, period_start)
        overlap_end = min(absence.end_date, last_day)
        if overlap_start > overlap_end:
            continue
        days.update(day for day in iter_days(overlap_start, overlap_end + ONE_DAY) if is_work_day(day))
    return days


def count_absence_workdays(absences: Iterable[AbsenceInterval], period_start: date, period_end: date) -> int:
    """Number of distinct absent work days inside [period_start, period_end)."""
    return len(absent_work_days(absences, period_start, period_end))
