"""Data models for critpath: tasks and the task graph that owns them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from .exceptions import CyclicGraphError, DuplicateNameError, NotFoundError
from .logger import debug_enabled, get_logger

logger = get_logger()


def _default_list() -> list[str]:
    return []


@dataclass
class Task:
    """A schedulable activity with a whole-day duration.

    Neighbours are stored as task names, never as object references; the
    owning TaskGraph resolves them. Dates are only valid right after a
    recompute and are cleared by any structural change.
    """

    name: str
    duration: int
    predecessors: list[str] = field(default_factory=_default_list)
    successors: list[str] = field(default_factory=_default_list)
    early_start: date | None = None
    early_finish: date | None = None
    late_start: date | None = None
    late_finish: date | None = None

    @property
    def predecessor_names(self) -> list[str]:
        """Names of the tasks that must finish before this one starts."""
        return list(self.predecessors)

    @property
    def successor_names(self) -> list[str]:
        """Names of the tasks that wait for this one."""
        return list(self.successors)

    @property
    def is_scheduled(self) -> bool:
        """True when all four dates have been computed."""
        return None not in (self.early_start, self.early_finish, self.late_start, self.late_finish)

    @property
    def slack(self) -> int | None:
        """Total float in days, or None before the first recompute."""
        if self.early_start is None or self.late_start is None:
            return None
        return (self.late_start - self.early_start).days

    @property
    def is_critical(self) -> bool:
        """True when the task cannot slip without moving the project end date."""
        return self.slack == 0

    def clear_dates(self) -> None:
        """Unset all computed dates."""
        self.early_start = None
        self.early_finish = None
        self.late_start = None
        self.late_finish = None


class EdgeCheck(Enum):
    """Outcome of validating a proposed dependency edge."""

    OK = "ok"
    SELF_LOOP = "self_loop"
    DUPLICATE = "duplicate"
    CYCLE = "cycle"


class TaskGraph:
    """Arena of tasks keyed by name, in insertion order.

    The graph does not validate edges on its own: add_edge() trusts the caller
    to have run check_edge() first.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks.values())

    @property
    def tasks(self) -> list[Task]:
        """All tasks in insertion order."""
        return list(self._tasks.values())

    def add_task(self, name: str, duration: int) -> Task:
        """Add a task with no neighbours.

        Raises:
            DuplicateNameError: If a task with this name already exists
        """
        if name in self._tasks:
            raise DuplicateNameError(f"Task '{name}' already exists")

        task = Task(name=name, duration=duration)
        self._tasks[name] = task
        logger.changes(f"Added task {name} ({duration}d)")
        return task

    def remove_task(self, name: str) -> Task:
        """Detach a task from all of its neighbours, then drop it.

        Raises:
            NotFoundError: If no task has this name
        """
        task = self.get(name)

        for pred_name in task.predecessors:
            self._tasks[pred_name].successors.remove(name)
        for succ_name in task.successors:
            self._tasks[succ_name].predecessors.remove(name)
        task.predecessors.clear()
        task.successors.clear()

        del self._tasks[name]
        logger.changes(f"Removed task {name}")
        return task

    def find_by_name(self, name: str) -> Task | None:
        """Get a task by its name, or None."""
        return self._tasks.get(name)

    def get(self, name: str) -> Task:
        """Get a task by its name.

        Raises:
            NotFoundError: If no task has this name
        """
        task = self._tasks.get(name)
        if task is None:
            raise NotFoundError(f"Unknown task: {name}")
        return task

    def add_edge(self, predecessor: Task, successor: Task) -> None:
        """Record that successor cannot start before predecessor finishes."""
        predecessor.successors.append(successor.name)
        successor.predecessors.append(predecessor.name)
        logger.changes(f"Added dependency {predecessor.name} -> {successor.name}")

    def remove_edge(self, predecessor: Task, successor: Task) -> None:
        """Remove a dependency from both ends.

        Raises:
            NotFoundError: If the dependency does not exist
        """
        if not self.has_edge(predecessor, successor):
            raise NotFoundError(f"No dependency {predecessor.name} -> {successor.name}")

        predecessor.successors.remove(successor.name)
        successor.predecessors.remove(predecessor.name)
        logger.changes(f"Removed dependency {predecessor.name} -> {successor.name}")

    def has_edge(self, predecessor: Task, successor: Task) -> bool:
        """Check whether the dependency predecessor -> successor exists."""
        return successor.name in predecessor.successors

    def is_source(self, task: Task) -> bool:
        """A source task has no predecessors."""
        return not task.predecessors

    def is_sink(self, task: Task) -> bool:
        """A sink task has no successors."""
        return not task.successors

    def sources(self) -> list[Task]:
        """All source tasks in insertion order."""
        return [task for task in self._tasks.values() if self.is_source(task)]

    def sinks(self) -> list[Task]:
        """All sink tasks in insertion order."""
        return [task for task in self._tasks.values() if self.is_sink(task)]

    def edges(self) -> list[tuple[str, str]]:
        """All dependencies as (predecessor, successor) name pairs."""
        return [(task.name, succ) for task in self._tasks.values() for succ in task.successors]

    def is_reachable(self, start: str, target: str) -> bool:
        """Check whether target can be reached from start by following successors.

        Uses an explicit stack and a visited set, so it terminates even if the
        graph is already malformed.
        """
        visited: set[str] = set()
        to_visit = [start]

        while to_visit:
            current = to_visit.pop()
            if current == target:
                return True
            if current in visited:
                continue
            visited.add(current)

            task = self._tasks.get(current)
            if task:
                to_visit.extend(succ for succ in task.successors if succ not in visited)

        return False

    def check_edge(self, predecessor: Task, successor: Task) -> EdgeCheck:
        """Validate a proposed dependency before it is committed."""
        if predecessor.name == successor.name:
            result = EdgeCheck.SELF_LOOP
        elif self.has_edge(predecessor, successor):
            result = EdgeCheck.DUPLICATE
        elif self.is_reachable(successor.name, predecessor.name):
            # predecessor already waits on successor
            result = EdgeCheck.CYCLE
        else:
            result = EdgeCheck.OK

        logger.checks(f"Edge check {predecessor.name} -> {successor.name}: {result.value}")
        return result

    def can_add_edge(self, predecessor: Task, successor: Task) -> bool:
        """True if the dependency keeps the graph acyclic and free of duplicates."""
        return self.check_edge(predecessor, successor) is EdgeCheck.OK

    def topological_order(self) -> list[str]:
        """Order task names so every task comes after all of its predecessors.

        Kahn's algorithm: sources in insertion order, then successors as their
        last predecessor is emitted.

        Raises:
            CyclicGraphError: If some tasks are never released (cycle)
        """
        in_degree = {name: len(task.predecessors) for name, task in self._tasks.items()}
        queue = deque(name for name, degree in in_degree.items() if degree == 0)
        result: list[str] = []

        while queue:
            name = queue.popleft()
            result.append(name)

            for succ_name in self._tasks[name].successors:
                in_degree[succ_name] -= 1
                if in_degree[succ_name] == 0:
                    queue.append(succ_name)

        if len(result) != len(self._tasks):
            stuck = sorted(name for name, degree in in_degree.items() if degree > 0)
            raise CyclicGraphError(f"Circular dependency detected among: {', '.join(stuck)}")

        if debug_enabled():
            logger.debug(f"Topological order: {' -> '.join(result)}")
        return result
