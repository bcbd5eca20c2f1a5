"""
Value types for the workload projection engine
"""
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Dict, Optional


DEFAULT_WORK_WEEK_DAYS = 5


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero, independent of binary float representation."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


class PeriodName(str, Enum):
    """Reporting periods, in response order"""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class CapacityProfile:
    """Contracted capacity of one user"""
    user_id: str
    weekly_hours: float
    workload_percent: int
    name: Optional[str] = None
    email: Optional[str] = None
    work_week_days: int = DEFAULT_WORK_WEEK_DAYS

    @property
    def available_hours_per_week(self) -> float:
        return self.weekly_hours * self.workload_percent / 100

    @property
    def hours_per_day(self) -> float:
        # Fixed divisor, independent of how many work days a period really has
        return self.available_hours_per_week / self.work_week_days


@dataclass(frozen=True)
class OpenTask:
    """A task as seen by the engine"""
    id: object
    estimated_hours: Optional[float]
    due_date: Optional[date]
    completed: bool = False

    @property
    def participates(self) -> bool:
        """Only open tasks with a due date are distributed"""
        return not self.completed and self.due_date is not None


@dataclass(frozen=True)
class AbsenceInterval:
    """Whole-day absence, both ends inclusive"""
    start_date: date
    end_date: date


@dataclass(frozen=True)
class ReportingPeriod:
    """Half-open calendar window [start, end)"""
    name: PeriodName
    start: date
    end: date


@dataclass(frozen=True)
class PeriodResult:
    """Unrounded figures for one user and one period"""
    assigned_hours: float
    capacity_hours: float
    percentage: int
    absence_days: int

    def to_dict(self) -> dict:
        return {
            'assigned': round_half_up(self.assigned_hours, 1),
            'capacity': round_half_up(self.capacity_hours, 1),
            'percentage': self.percentage,
            'absenceDays': self.absence_days,
        }


@dataclass
class WorkloadResult:
    """Day, week and month figures for one user"""
    profile: CapacityProfile
    periods: Dict[PeriodName, PeriodResult] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Shape the record returned by the workload endpoint"""
        return {
            'userId': self.profile.user_id,
            'userName': self.profile.name,
            'userEmail': self.profile.email,
            'weeklyHours': self.profile.weekly_hours,
            'workloadPercent': self.profile.workload_percent,
            'availableHoursPerWeek': round_half_up(self.profile.available_hours_per_week, 1),
            'periods': {
                name.value: self.periods[name].to_dict()
                for name in PeriodName
                if name in self.periods
            },
        }
