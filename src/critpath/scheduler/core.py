"""Core dataclasses for the scheduling engine."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import TYPE_CHECKING

from critpath.exceptions import DateRangeError

if TYPE_CHECKING:
    from critpath.models import Task


def _default_str_list() -> list[str]:
    return []


@dataclass(frozen=True)
class TaskDates:
    """Computed dates for one task, detached from the live graph."""

    name: str
    duration: int
    early_start: date | None
    early_finish: date | None
    late_start: date | None
    late_finish: date | None
    predecessors: tuple[str, ...]
    successors: tuple[str, ...]

    @classmethod
    def from_task(cls, task: "Task") -> "TaskDates":
        """Copy the readback fields of a task."""
        return cls(
            name=task.name,
            duration=task.duration,
            early_start=task.early_start,
            early_finish=task.early_finish,
            late_start=task.late_start,
            late_finish=task.late_finish,
            predecessors=tuple(task.predecessors),
            successors=tuple(task.successors),
        )

    @property
    def slack(self) -> int | None:
        """Total float in days."""
        if self.early_start is None or self.late_start is None:
            return None
        return (self.late_start - self.early_start).days


@dataclass
class ScheduleResult:
    """Snapshot of a completed recompute."""

    start_date: date
    project_end_date: date | None
    tasks: list[TaskDates]
    critical_path: list[str] = field(default_factory=_default_str_list)

    @property
    def project_duration(self) -> int:
        """Length of the project in days (0 for an empty project)."""
        if self.project_end_date is None:
            return 0
        return (self.project_end_date - self.start_date).days

    def get(self, name: str) -> TaskDates | None:
        """Get the dates of a task by name."""
        for task_dates in self.tasks:
            if task_dates.name == name:
                return task_dates
        return None


def add_days(day: date, days: int) -> date:
    """Shift a date by a whole number of calendar days (negative moves back).

    Raises:
        DateRangeError: If the result is outside the range of datetime.date
    """
    try:
        return day + timedelta(days=days)
    except OverflowError as e:
        raise DateRangeError(f"{day} shifted by {days} days is out of range") from e
