"""
Workload Store
Reads capacity profiles, open tasks and absences from the database and hands
them to the engine as plain value objects.
"""
import logging
from datetime import timedelta

from .workload_types import AbsenceInterval, CapacityProfile, OpenTask, DEFAULT_WORK_WEEK_DAYS

logger = logging.getLogger(__name__)


def dedupe_tasks(tasks):
    """
    Drop repeated tasks, keeping the first occurrence of each task id.

    A task assigned to a user directly and through the assignee list is
    returned by both lookups.
    """
    unique = {}
    for task in tasks:
        unique.setdefault(task.id, task)
    return list(unique.values())


class SQLAlchemyWorkloadStore:
    """Store backed by the application's SQLAlchemy session."""

    def __init__(self, db_session, models, work_week_days=DEFAULT_WORK_WEEK_DAYS):
        self.session = db_session
        self.User = models['User']
        self.SubTask = models['SubTask']
        self.Absence = models['Absence']
        self.work_week_days = work_week_days

    def get_profile(self, user_id):
        """Return the user's CapacityProfile, or None if the user is unknown."""
        user = self.session.get(self.User, user_id)
        if user is None:
            return None
        return CapacityProfile(
            user_id=user.id,
            name=user.name,
            email=user.email,
            weekly_hours=user.weekly_hours or 0.0,
            workload_percent=user.workload_percent or 0,
            work_week_days=self.work_week_days,
        )

    def _open_tasks_query(self):
        return self.session.query(self.SubTask).filter(
            self.SubTask.completed == False,  # noqa: E712
            self.SubTask.due_date.isnot(None)
        )

    def get_open_tasks(self, user_id):
        """
        Open tasks with a due date reachable from the user through either
        association path, each task once.
        """
        direct = self._open_tasks_query().filter(
            self.SubTask.assignee_id == user_id
        ).order_by(self.SubTask.id).all()

        shared = self._open_tasks_query().join(
            self.SubTask.assignees
        ).filter(
            self.User.id == user_id
        ).order_by(self.SubTask.id).all()

        tasks = dedupe_tasks(
            OpenTask(
                id=row.id,
                estimated_hours=row.estimated_hours,
                due_date=row.due_date,
                completed=row.completed,
            )
            for row in direct + shared
        )
        logger.debug(f"Loaded {len(tasks)} open tasks for user {user_id}")
        return tasks

    def get_absences(self, user_id, start, end):
        """Absences of the user overlapping the half-open window [start, end)."""
        last_day = end - timedelta(days=1)
        rows = self.session.query(self.Absence).filter(
            self.Absence.user_id == user_id,
            self.Absence.start_date <= last_day,
            self.Absence.end_date >= start
        ).order_by(self.Absence.start_date, self.Absence.id).all()
        return [AbsenceInterval(row.start_date, row.end_date) for row in rows]
