"""
Per-period workload aggregation.
"""
from datetime import date, timedelta
from typing import Dict, Iterable, Sequence, Tuple

from .absence_index import count_absence_workdays
from .calendar_math import (
    ONE_DAY,
    first_of_month,
    first_of_next_month,
    iter_days,
    work_days_in_closed_range,
    work_days_in_month,
)
from .task_distribution import hours_for_day
from .workload_types import (
    AbsenceInterval,
    CapacityProfile,
    OpenTask,
    PeriodName,
    PeriodResult,
    ReportingPeriod,
    round_half_up,
)


def build_periods(today: date) -> Dict[PeriodName, ReportingPeriod]:
    """Day, Monday-start week and calendar month containing ``today``."""
    week_start = today - timedelta(days=today.weekday())
    return {
        PeriodName.DAY: ReportingPeriod(PeriodName.DAY, today, today + ONE_DAY),
        PeriodName.WEEK: ReportingPeriod(PeriodName.WEEK, week_start, week_start + timedelta(days=7)),
        PeriodName.MONTH: ReportingPeriod(PeriodName.MONTH, first_of_month(today), first_of_next_month(today)),
    }


def covering_window(periods: Iterable[ReportingPeriod]) -> Tuple[date, date]:
    """
    Smallest half-open window containing every period.

    A week can reach into the previous or next month, so absences must be
    fetched for this window rather than for the month alone.
    """
    periods = list(periods)
    return min(p.start for p in periods), max(p.end for p in periods)


def period_work_days(period: ReportingPeriod) -> int:
    if period.name == PeriodName.MONTH:
        return work_days_in_month(period.start.year, period.start.month)
    return work_days_in_closed_range(period.start, period.end - ONE_DAY)


def aggregate_period(
    profile: CapacityProfile,
    tasks: Sequence[OpenTask],
    absences: Sequence[AbsenceInterval],
    period: ReportingPeriod,
    today: date,
) -> PeriodResult:
    """
    Assigned hours, effective capacity and utilization for one period.

    ``tasks`` must already be deduplicated by task id; a task listed twice is
    counted twice.
    """
    hours_per_day = profile.hours_per_day
    total_work_days = period_work_days(period)
    absence_days = count_absence_workdays(absences, period.start, period.end)

    capacity = hours_per_day * total_work_days
    effective_capacity = max(0.0, capacity - absence_days * hours_per_day)

    open_tasks = [task for task in tasks if task.participates]
    assigned = sum(
        hours_for_day(task, day, today)
        for day in iter_days(period.start, period.end)
        for task in open_tasks
    )

    if total_work_days > 0 and absence_days >= total_work_days:
        # Fully absent: reported as fully utilized. Weekend days have no work
        # days and must stay at 0 %, not 100 %.
        percentage = 100
    elif effective_capacity > 0:
        percentage = int(round_half_up(assigned / effective_capacity * 100))
    else:
        percentage = 0

    return PeriodResult(
        assigned_hours=assigned,
        capacity_hours=effective_capacity,
        percentage=percentage,
        absence_days=absence_days,
    )
