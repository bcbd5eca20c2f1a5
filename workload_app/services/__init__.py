"""
Services package for the workload projection engine
"""

from .workload_types import (
    CapacityProfile,
    OpenTask,
    AbsenceInterval,
    ReportingPeriod,
    PeriodName,
    PeriodResult,
    WorkloadResult,
)
from .workload_store import SQLAlchemyWorkloadStore, dedupe_tasks
from .workload_service import WorkloadService, normalize_user_ids

__all__ = [
    # Value types
    'CapacityProfile',
    'OpenTask',
    'AbsenceInterval',
    'ReportingPeriod',
    'PeriodName',
    'PeriodResult',
    'WorkloadResult',
    # Services
    'SQLAlchemyWorkloadStore',
    'WorkloadService',
    'dedupe_tasks',
    'normalize_user_ids',
]
