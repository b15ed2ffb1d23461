"""High-level CPM scheduler: validated mutations plus full recompute."""

import threading
from datetime import date

from critpath.exceptions import (
    CyclicDependencyError,
    DateRangeError,
    DuplicateEdgeError,
    InvalidDurationError,
    InvalidNameError,
    SelfDependencyError,
)
from critpath.logger import get_logger
from critpath.models import EdgeCheck, Task, TaskGraph

from .config import SchedulingConfig
from .core import ScheduleResult, TaskDates
from .passes import backward_pass, forward_pass

logger = get_logger()


class Scheduler:
    """Owns a task graph and a project start date and computes CPM dates.

    Every mutation clears previously computed dates; call recompute() to get
    them back (or build the scheduler with auto_recompute). Rejected mutations
    leave the graph untouched. Mutation and recompute share one lock so a
    reader in another thread never sees a half-updated graph.
    """

    def __init__(
        self,
        start_date: date | None = None,
        config: SchedulingConfig | None = None,
    ):
        """Initialize the scheduler.

        Args:
            start_date: Project start date (defaults to config, then today)
            config: Optional scheduling configuration
        """
        self.config = config or SchedulingConfig()
        self._start_date = start_date or self.config.start_date or date.today()  # noqa: DTZ011
        self._graph = TaskGraph()
        self._project_end_date: date | None = None
        self._lock = threading.RLock()

    @property
    def start_date(self) -> date:
        """Project start date (fixed at construction)."""
        return self._start_date

    @property
    def project_end_date(self) -> date | None:
        """Latest early finish over sink tasks; None until recompute()."""
        return self._project_end_date

    @property
    def is_computed(self) -> bool:
        """True if dates are current with respect to the graph."""
        with self._lock:
            return all(task.is_scheduled for task in self._graph)

    def add_task(self, name: str, duration: int) -> Task:
        """Add a task.

        Raises:
            InvalidNameError: If name is not a non-blank string
            InvalidDurationError: If duration is not a non-negative integer
            DuplicateNameError: If the name is already taken
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidNameError(f"Task name must be a non-empty string, got {name!r}")
        # bool is an int subclass but never a duration
        if isinstance(duration, bool) or not isinstance(duration, int) or duration < 0:
            raise InvalidDurationError(
                f"Duration of task '{name}' must be a non-negative whole number of days, "
                f"got {duration!r}"
            )

        with self._lock:
            task = self._graph.add_task(name, duration)
            self._after_mutation()
            return task

    def remove_task(self, name: str) -> None:
        """Remove a task and every dependency touching it.

        Raises:
            NotFoundError: If no task has this name
        """
        with self._lock:
            self._graph.remove_task(name)
            self._after_mutation()

    def add_dependency(self, predecessor_name: str, successor_name: str) -> None:
        """Make successor wait for predecessor to finish.

        Raises:
            NotFoundError: If either task is missing
            SelfDependencyError: If both names are the same task
            DuplicateEdgeError: If the dependency already exists
            CyclicDependencyError: If successor already leads back to predecessor
        """
        with self._lock:
            predecessor = self._graph.get(predecessor_name)
            successor = self._graph.get(successor_name)

            check = self._graph.check_edge(predecessor, successor)
            if check is EdgeCheck.SELF_LOOP:
                raise SelfDependencyError(f"Task '{predecessor_name}' cannot depend on itself")
            if check is EdgeCheck.DUPLICATE:
                raise DuplicateEdgeError(
                    f"Dependency {predecessor_name} -> {successor_name} already exists"
                )
            if check is EdgeCheck.CYCLE:
                raise CyclicDependencyError(
                    f"Dependency {predecessor_name} -> {successor_name} would create a cycle: "
                    f"{successor_name} already leads to {predecessor_name}"
                )

            self._graph.add_edge(predecessor, successor)
            self._after_mutation()

    def remove_dependency(self, predecessor_name: str, successor_name: str) -> None:
        """Remove a dependency.

        Raises:
            NotFoundError: If either task or the dependency is missing
        """
        with self._lock:
            predecessor = self._graph.get(predecessor_name)
            successor = self._graph.get(successor_name)
            self._graph.remove_edge(predecessor, successor)
            self._after_mutation()

    def find_task(self, name: str) -> Task | None:
        """Get a task by name, or None."""
        return self._graph.find_by_name(name)

    def get_task(self, name: str) -> Task:
        """Get a task by name.

        Raises:
            NotFoundError: If no task has this name
        """
        return self._graph.get(name)

    def list_tasks(self) -> list[Task]:
        """All tasks in insertion order."""
        with self._lock:
            return self._graph.tasks

    def dependencies(self) -> list[tuple[str, str]]:
        """All dependencies as (predecessor, successor) pairs."""
        with self._lock:
            return self._graph.edges()

    def recompute(self) -> ScheduleResult:
        """Recompute every task's dates and the project end date from scratch.

        Raises:
            CyclicGraphError: If the graph contains a cycle (never expected,
                since add_dependency() rejects cycles)
            DateRangeError: If a computed date falls outside the datetime.date range
        """
        with self._lock:
            self._reset()
            order = self._graph.topological_order()

            try:
                logger.checks(f"Forward pass from {self._start_date}")
                self._project_end_date = forward_pass(self._graph, order, self._start_date)

                if self._project_end_date is not None:
                    logger.checks(f"Backward pass from {self._project_end_date}")
                    backward_pass(self._graph, order, self._project_end_date)
            except DateRangeError:
                # Leave no half-computed dates behind
                self._reset()
                raise

            logger.changes(
                f"Scheduled {len(order)} tasks: {self._start_date} -> {self._project_end_date}"
            )
            return self._snapshot(order)

    def critical_path(self) -> list[str]:
        """Names of zero-slack tasks in topological order.

        Empty until recompute() has run on the current graph.
        """
        with self._lock:
            if not self._graph.tasks or not self.is_computed:
                return []
            return [
                name for name in self._graph.topological_order() if self._graph.get(name).is_critical
            ]

    def _snapshot(self, order: list[str]) -> ScheduleResult:
        return ScheduleResult(
            start_date=self._start_date,
            project_end_date=self._project_end_date,
            tasks=[TaskDates.from_task(task) for task in self._graph],
            critical_path=[name for name in order if self._graph.get(name).is_critical],
        )

    def _reset(self) -> None:
        for task in self._graph:
            task.clear_dates()
        self._project_end_date = None

    def _after_mutation(self) -> None:
        self._reset()
        if self.config.auto_recompute:
            self.recompute()
