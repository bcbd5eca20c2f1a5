"""
Distribution of a task's estimate over calendar days.

Every call re-derives the distribution from ``today``: work can start on the
next work day (the anchor) and the estimate is spread evenly over the work
days from the anchor up to the due date. Overdue tasks, and tasks whose due
date falls before the anchor, put their whole estimate on the anchor.
"""
from datetime import date

from .calendar_math import is_work_day, next_work_day, work_days_in_closed_range
from .workload_types import OpenTask


def hours_for_day(task: OpenTask, target_day: date, today: date) -> float:
    """
    Hours of ``task`` attributed to ``target_day`` as seen on ``today``.

    Args:
        task: Task to distribute
        target_day: Calendar day being evaluated
        today: Current local calendar day

    Returns:
        float: Hours, 0.0 when the task does not touch the day
    """
    if task.completed or not task.estimated_hours or task.due_date is None:
        return 0.0
    if not is_work_day(target_day):
        return 0.0

    anchor = next_work_day(today)

    if task.due_date < today or anchor > task.due_date:
        return float(task.estimated_hours) if target_day == anchor else 0.0

    if not anchor <= target_day <= task.due_date:
        return 0.0

    work_days = max(1, work_days_in_closed_range(anchor, task.due_date))
    return task.estimated_hours / work_days
