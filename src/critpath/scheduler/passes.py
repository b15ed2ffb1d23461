"""Forward and backward CPM passes over a topologically ordered task graph."""

from datetime import date
from typing import TYPE_CHECKING

from critpath.logger import checks_enabled, get_logger

from .core import add_days

if TYPE_CHECKING:
    from critpath.models import TaskGraph

logger = get_logger()


def forward_pass(graph: "TaskGraph", order: list[str], start_date: date) -> date | None:
    """Compute early start and early finish for every task.

    A task starts as soon as its last predecessor finishes; sources start on
    the project start date.

    Args:
        graph: Graph whose tasks have cleared dates
        order: Task names in topological order
        start_date: Project start date

    Returns:
        The project end date (latest early finish over sink tasks), or None
        when the graph has no tasks
    """
    for name in order:
        task = graph.get(name)

        early_start = start_date
        for pred_name in task.predecessors:
            pred_finish = graph.get(pred_name).early_finish
            assert pred_finish is not None  # predecessors come first in order
            early_start = max(early_start, pred_finish)

        task.early_start = early_start
        task.early_finish = add_days(early_start, task.duration)
        if checks_enabled():
            logger.checks(f"  {name}: early {task.early_start} -> {task.early_finish}")

    sink_finishes = [task.early_finish for task in graph.sinks() if task.early_finish is not None]
    if not sink_finishes:
        return None
    return max(sink_finishes)


def backward_pass(graph: "TaskGraph", order: list[str], project_end_date: date) -> None:
    """Compute late finish and late start for every task.

    A task must finish before the earliest late start among its successors;
    sinks must finish by the project end date.

    Args:
        graph: Graph on which forward_pass() has run
        order: Task names in topological order (walked in reverse)
        project_end_date: Date returned by forward_pass()
    """
    for name in reversed(order):
        task = graph.get(name)

        late_finish = project_end_date
        for succ_name in task.successors:
            succ_start = graph.get(succ_name).late_start
            assert succ_start is not None  # successors come later in order
            late_finish = min(late_finish, succ_start)

        task.late_finish = late_finish
        task.late_start = add_days(late_finish, -task.duration)
        if checks_enabled():
            logger.checks(f"  {name}: late {task.late_start} -> {task.late_finish}")
