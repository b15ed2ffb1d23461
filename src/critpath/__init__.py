"""critpath - Critical Path Method scheduling for task dependency graphs."""

from .exceptions import (
    CritpathError,
    CyclicDependencyError,
    CyclicGraphError,
    DateRangeError,
    DuplicateEdgeError,
    DuplicateNameError,
    InvalidDurationError,
    InvalidNameError,
    NotFoundError,
    SelfDependencyError,
)
from .models import EdgeCheck, Task, TaskGraph
from .scheduler import ScheduleResult, Scheduler, SchedulingConfig

__all__ = [
    "Scheduler",
    "SchedulingConfig",
    "ScheduleResult",
    "Task",
    "TaskGraph",
    "EdgeCheck",
    "CritpathError",
    "CyclicDependencyError",
    "CyclicGraphError",
    "DateRangeError",
    "DuplicateEdgeError",
    "DuplicateNameError",
    "InvalidDurationError",
    "InvalidNameError",
    "NotFoundError",
    "SelfDependencyError",
]
