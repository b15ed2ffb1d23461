"""Scheduler package - Critical Path Method date computation.

Main entry points:
- Scheduler: validated task/dependency mutations and full recompute
- forward_pass / backward_pass: the two CPM passes over a topological order

Configuration:
- SchedulingConfig: project start date and recompute behaviour
"""

from .config import SchedulingConfig
from .core import ScheduleResult, TaskDates, add_days
from .passes import backward_pass, forward_pass
from .service import Scheduler

__all__ = [
    # Core dataclasses
    "ScheduleResult",
    "TaskDates",
    "add_days",
    # Configuration
    "SchedulingConfig",
    # Passes
    "forward_pass",
    "backward_pass",
    # High-level service
    "Scheduler",
]
