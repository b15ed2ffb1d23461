"""Tests for the Task model and the TaskGraph arena."""

from datetime import date

import pytest

from critpath.exceptions import CyclicGraphError, DuplicateNameError, NotFoundError
from critpath.models import EdgeCheck, Task, TaskGraph


def build_graph(durations: dict[str, int], edges: list[tuple[str, str]]) -> TaskGraph:
    """Build a graph without going through edge validation."""
    graph = TaskGraph()
    for name, duration in durations.items():
        graph.add_task(name, duration)
    for pred, succ in edges:
        graph.add_edge(graph.get(pred), graph.get(succ))
    return graph


class TestTask:
    """Test the Task dataclass."""

    def test_new_task_has_no_dates(self) -> None:
        """A fresh task is unscheduled."""
        task = Task(name="A", duration=3)
        assert task.early_start is None
        assert task.late_finish is None
        assert not task.is_scheduled
        assert task.slack is None
        assert not task.is_critical

    def test_slack_and_critical(self) -> None:
        """Slack is late start minus early start in days."""
        task = Task(
            name="A",
            duration=2,
            early_start=date(2025, 1, 6),
            early_finish=date(2025, 1, 8),
            late_start=date(2025, 1, 10),
            late_finish=date(2025, 1, 12),
        )
        assert task.is_scheduled
        assert task.slack == 4
        assert not task.is_critical

        task.late_start = task.early_start
        assert task.slack == 0
        assert task.is_critical

    def test_name_lists_are_copies(self) -> None:
        """Readback lists can't be used to mutate the graph."""
        task = Task(name="A", duration=1, successors=["B"])
        names = task.successor_names
        names.append("C")
        assert task.successors == ["B"]

    def test_clear_dates(self) -> None:
        """clear_dates() unsets all four dates."""
        day = date(2025, 1, 6)
        task = Task("A", 0, early_start=day, early_finish=day, late_start=day, late_finish=day)
        task.clear_dates()
        assert (task.early_start, task.early_finish, task.late_start, task.late_finish) == (
            None,
            None,
            None,
            None,
        )


class TestTaskGraphNodes:
    """Test adding, finding and removing tasks."""

    def test_add_and_find(self) -> None:
        """Added tasks can be found by name and keep insertion order."""
        graph = TaskGraph()
        graph.add_task("B", 1)
        graph.add_task("A", 2)

        assert len(graph) == 2
        assert "A" in graph
        assert [task.name for task in graph.tasks] == ["B", "A"]
        found = graph.find_by_name("A")
        assert found is not None
        assert found.duration == 2
        assert graph.find_by_name("missing") is None

    def test_duplicate_name_rejected(self) -> None:
        """Names are unique and the original task is kept."""
        graph = TaskGraph()
        graph.add_task("A", 2)
        with pytest.raises(DuplicateNameError, match="'A'"):
            graph.add_task("A", 5)
        assert graph.get("A").duration == 2

    def test_get_missing_raises(self) -> None:
        """get() raises NotFoundError for unknown names."""
        with pytest.raises(NotFoundError):
            TaskGraph().get("nope")

    def test_remove_missing_raises(self) -> None:
        """remove_task() raises NotFoundError for unknown names."""
        with pytest.raises(NotFoundError):
            TaskGraph().remove_task("nope")

    def test_remove_detaches_both_directions(self) -> None:
        """No remaining task references a removed one."""
        graph = build_graph({"A": 1, "B": 1, "C": 1}, [("A", "B"), ("B", "C"), ("A", "C")])

        graph.remove_task("B")

        assert "B" not in graph
        assert graph.get("A").successors == ["C"]
        assert graph.get("C").predecessors == ["A"]
        for task in graph:
            assert "B" not in task.predecessors
            assert "B" not in task.successors


class TestTaskGraphEdges:
    """Test edge mutation and structural queries."""

    def test_add_edge_is_symmetric(self) -> None:
        """An edge appears on both ends in creation order."""
        graph = build_graph({"A": 1, "B": 1, "C": 1}, [("A", "C"), ("B", "C")])
        assert graph.get("A").successors == ["C"]
        assert graph.get("C").predecessors == ["A", "B"]
        assert graph.edges() == [("A", "C"), ("B", "C")]

    def test_remove_edge(self) -> None:
        """remove_edge() removes both ends."""
        graph = build_graph({"A": 1, "B": 1}, [("A", "B")])
        graph.remove_edge(graph.get("A"), graph.get("B"))
        assert graph.edges() == []
        assert graph.get("B").predecessors == []

    def test_remove_missing_edge_raises(self) -> None:
        """Removing an edge that doesn't exist raises NotFoundError."""
        graph = build_graph({"A": 1, "B": 1}, [])
        with pytest.raises(NotFoundError, match="A -> B"):
            graph.remove_edge(graph.get("A"), graph.get("B"))

    def test_sources_and_sinks(self) -> None:
        """Sources have no predecessors, sinks have no successors."""
        graph = build_graph({"A": 1, "B": 1, "C": 1, "X": 1}, [("A", "B"), ("B", "C")])

        assert [t.name for t in graph.sources()] == ["A", "X"]
        assert [t.name for t in graph.sinks()] == ["C", "X"]
        isolated = graph.get("X")
        assert graph.is_source(isolated)
        assert graph.is_sink(isolated)
        assert not graph.is_source(graph.get("B"))
        assert not graph.is_sink(graph.get("B"))


class TestEdgeCheck:
    """Test the edge validity check."""

    def test_ok(self) -> None:
        """An edge between unrelated tasks is fine."""
        graph = build_graph({"A": 1, "B": 1}, [])
        assert graph.check_edge(graph.get("A"), graph.get("B")) is EdgeCheck.OK
        assert graph.can_add_edge(graph.get("A"), graph.get("B"))

    def test_self_loop(self) -> None:
        """A task can't precede itself."""
        graph = build_graph({"A": 1}, [])
        assert graph.check_edge(graph.get("A"), graph.get("A")) is EdgeCheck.SELF_LOOP

    def test_duplicate(self) -> None:
        """An existing edge is reported as a duplicate."""
        graph = build_graph({"A": 1, "B": 1}, [("A", "B")])
        assert graph.check_edge(graph.get("A"), graph.get("B")) is EdgeCheck.DUPLICATE

    def test_direct_cycle(self) -> None:
        """Reversing an existing edge would close a cycle."""
        graph = build_graph({"A": 1, "B": 1}, [("A", "B")])
        assert graph.check_edge(graph.get("B"), graph.get("A")) is EdgeCheck.CYCLE

    def test_transitive_cycle(self) -> None:
        """A long path back to the predecessor is detected."""
        graph = build_graph(
            {"A": 1, "B": 1, "C": 1, "D": 1}, [("A", "B"), ("B", "C"), ("C", "D")]
        )
        assert graph.check_edge(graph.get("D"), graph.get("A")) is EdgeCheck.CYCLE
        assert not graph.can_add_edge(graph.get("D"), graph.get("A"))

    def test_shortcut_is_not_a_cycle(self) -> None:
        """A redundant forward shortcut is still acyclic."""
        graph = build_graph({"A": 1, "B": 1, "C": 1}, [("A", "B"), ("B", "C")])
        assert graph.check_edge(graph.get("A"), graph.get("C")) is EdgeCheck.OK

    def test_reachability_terminates_on_cycle(self) -> None:
        """is_reachable() terminates on a graph that already has a cycle."""
        graph = build_graph({"A": 1, "B": 1, "C": 1}, [("A", "B"), ("B", "A")])
        assert graph.is_reachable("A", "B")
        assert not graph.is_reachable("A", "C")


class TestTopologicalOrder:
    """Test Kahn ordering."""

    def test_predecessors_come_first(self) -> None:
        """Every edge goes forward in the order."""
        graph = build_graph(
            {"F": 5, "E": 3, "D": 3, "C": 6, "B": 1, "A": 2},
            [("A", "D"), ("B", "D"), ("B", "E"), ("C", "E"), ("D", "F"), ("E", "F")],
        )
        order = graph.topological_order()
        position = {name: i for i, name in enumerate(order)}

        assert sorted(order) == ["A", "B", "C", "D", "E", "F"]
        for pred, succ in graph.edges():
            assert position[pred] < position[succ]

    def test_sources_in_insertion_order(self) -> None:
        """Ties between independent tasks follow insertion order."""
        graph = build_graph({"X": 1, "Y": 1, "Z": 1}, [])
        assert graph.topological_order() == ["X", "Y", "Z"]

    def test_empty_graph(self) -> None:
        """An empty graph has an empty order."""
        assert TaskGraph().topological_order() == []

    def test_cycle_raises(self) -> None:
        """A cycle that bypassed validation is reported, not looped on."""
        graph = build_graph({"A": 1, "B": 1, "C": 1}, [("A", "B"), ("B", "C"), ("C", "B")])
        with pytest.raises(CyclicGraphError, match="B, C"):
            graph.topological_order()
