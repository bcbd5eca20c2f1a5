"""
Workload Service

Projects how utilized each requested user is today, this week and this
month. The service is handed an already authorized list of user IDs and an
explicit ``today``; it never reads the clock and never widens the list.
"""
import logging
from datetime import date
from typing import List, Sequence

from workload_app.error_handlers.exceptions import ValidationException
from .period_aggregator import aggregate_period, build_periods, covering_window
from .workload_store import dedupe_tasks
from .workload_types import WorkloadResult

logger = logging.getLogger(__name__)


def normalize_user_ids(user_ids, max_ids=None):
    """
    Validate a requested list of user IDs.

    Surrounding whitespace is stripped and repeated IDs collapse to their first
    occurrence.

    Args:
        user_ids: Sequence of user ID strings
        max_ids: Optional upper bound on the number of distinct IDs

    Returns:
        list: Distinct IDs in request order

    Raises:
        ValidationException: If the list is empty, contains a blank or
            non-string entry, or exceeds ``max_ids``
    """
    if user_ids is None or isinstance(user_ids, str) or len(user_ids) == 0:
        raise ValidationException('userIds must be a non-empty list')

    for user_id in user_ids:
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValidationException('userIds contains an empty or invalid entry')
    normalized = list(dict.fromkeys(user_id.strip() for user_id in user_ids))

    if max_ids is not None and len(normalized) > max_ids:
        raise ValidationException(
            f'Too many userIds requested ({len(normalized)}); the limit is {max_ids}',
            details={'limit': max_ids}
        )
    return normalized


class WorkloadService:
    """Orchestrates the workload projection for a batch of users."""

    def __init__(self, store, max_user_ids=None):
        """
        Args:
            store: Object providing get_profile, get_open_tasks and get_absences
            max_user_ids: Optional cap on the batch size
        """
        self.store = store
        self.max_user_ids = max_user_ids

    def calculate_for_user(self, user_id: str, today: date):
        """
        Day, week and month figures for one user.

        Returns:
            WorkloadResult, or None when the user does not exist
        """
        profile = self.store.get_profile(user_id)
        if profile is None:
            logger.debug(f"Skipping unknown user {user_id}")
            return None

        periods = build_periods(today)
        window_start, window_end = covering_window(periods.values())

        tasks = dedupe_tasks(self.store.get_open_tasks(user_id))
        absences = self.store.get_absences(user_id, window_start, window_end)

        result = WorkloadResult(profile=profile)
        for name, period in periods.items():
            result.periods[name] = aggregate_period(profile, tasks, absences, period, today)
        return result

    def calculate(self, user_ids: Sequence[str], today: date) -> List[WorkloadResult]:
        """
        Workload results for every known user in ``user_ids``, in request order.

        Raises:
            ValidationException: If ``user_ids`` is empty or malformed
        """
        user_ids = normalize_user_ids(user_ids, self.max_user_ids)

        results = []
        for user_id in user_ids:
            result = self.calculate_for_user(user_id, today)
            if result is not None:
                results.append(result)

        logger.info(
            f"Calculated workload for {len(results)} of {len(user_ids)} requested users as of {today.isoformat()}"
        )
        return results
