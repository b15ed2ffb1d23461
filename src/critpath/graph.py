"""DOT graph generation for critpath schedules."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .report import format_date
from .unified_config import DEFAULT_DATE_FORMAT

if TYPE_CHECKING:
    from .models import Task
    from .scheduler import Scheduler

CRITICAL_FILL = "lightcoral"
DEFAULT_FILL = "lightblue"


class GraphView(Enum):
    """Types of graph views available."""

    ALL = "all"
    CRITICAL_PATH = "critical-path"


class GraphGenerator:
    """Generate task dependency graphs in DOT format."""

    def __init__(self, scheduler: Scheduler, date_format: str = DEFAULT_DATE_FORMAT):
        """Initialize with a scheduler.

        Args:
            scheduler: Scheduler whose tasks to draw. Dates are shown when computed.
            date_format: strftime pattern for node labels
        """
        self.scheduler = scheduler
        self.date_format = date_format

    def generate(self, view: GraphView = GraphView.ALL) -> str:
        """Generate a DOT graph based on the specified view."""
        if view == GraphView.ALL:
            return self._generate(self.scheduler.list_tasks(), "TaskGraph")
        if view == GraphView.CRITICAL_PATH:
            critical = set(self.scheduler.critical_path())
            tasks = [task for task in self.scheduler.list_tasks() if task.name in critical]
            return self._generate(tasks, "CriticalPath")
        raise ValueError(f"Unknown view: {view}")

    def _generate(self, tasks: list[Task], graph_name: str) -> str:
        included = {task.name for task in tasks}

        lines = [f"digraph {graph_name} {{"]
        lines.append("  rankdir=LR;")
        lines.append("  node [shape=box];")
        lines.append("")

        for task in tasks:
            lines.append(f"  {self._format_node(task)}")
        lines.append("")

        lines.append("  // Dependencies")
        for task in tasks:
            for succ_name in task.successors:
                if succ_name not in included:
                    continue
                successor = self.scheduler.get_task(succ_name)
                lines.append(f"  {self._format_edge(task, successor)}")

        lines.append("}")
        return "\n".join(lines)

    def _escape_label(self, label: str) -> str:
        """Escape special characters in DOT labels."""
        return label.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")

    def _node_id(self, name: str) -> str:
        return f'"{self._escape_label(name)}"'

    def _format_node(self, task: Task) -> str:
        """Format a node, highlighting critical tasks."""
        label = f"{task.name}\n{task.duration}d"
        if task.early_start is not None:
            label += (
                f"\n{format_date(task.early_start, self.date_format)}"
                f" - {format_date(task.early_finish, self.date_format)}"
            )

        fill = CRITICAL_FILL if task.is_critical else DEFAULT_FILL
        attrs = [f'label="{self._escape_label(label)}"', "style=filled", f'fillcolor="{fill}"']
        if task.is_critical:
            attrs.append("penwidth=2")

        return f"{self._node_id(task.name)} [{', '.join(attrs)}];"

    def _format_edge(self, predecessor: Task, successor: Task) -> str:
        """Format an edge; binding edges between critical tasks are drawn bold red."""
        edge = f"{self._node_id(predecessor.name)} -> {self._node_id(successor.name)}"
        binding = predecessor.early_finish is not None and (
            predecessor.early_finish == successor.early_start
        )
        if binding and predecessor.is_critical and successor.is_critical:
            return f'{edge} [color="red", penwidth=2];'
        return f"{edge};"
