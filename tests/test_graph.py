"""Tests for DOT graph generation."""

from critpath.graph import GraphGenerator, GraphView
from critpath.scheduler import Scheduler


class TestGraphGenerator:
    """Test DOT output."""

    def test_all_view_has_every_edge(self, scenario_one: Scheduler) -> None:
        """The full view lists every task and dependency."""
        scenario_one.recompute()
        dot = GraphGenerator(scenario_one).generate(GraphView.ALL)

        assert dot.startswith("digraph TaskGraph {")
        assert "rankdir=LR;" in dot
        for name in "ABCDEF":
            assert f'"{name}" [label=' in dot
        assert '"A" -> "D";' in dot
        assert '"B" -> "D";' in dot
        assert '"B" -> "E";' in dot
        assert '"D" -> "F";' in dot
        assert dot.rstrip().endswith("}")

    def test_critical_tasks_highlighted(self, scenario_one: Scheduler) -> None:
        """Critical nodes and the binding edges between them are emphasised."""
        scenario_one.recompute()
        dot = GraphGenerator(scenario_one).generate()

        assert '"C" [label="C\\n6d\\n06/01/2025 - 12/01/2025", style=filled, ' in dot
        assert 'fillcolor="lightcoral", penwidth=2];' in dot
        assert '"A" [label="A\\n2d\\n06/01/2025 - 08/01/2025", style=filled, ' in dot
        assert '"C" -> "E" [color="red", penwidth=2];' in dot
        assert '"E" -> "F" [color="red", penwidth=2];' in dot

    def test_critical_path_view(self, scenario_one: Scheduler) -> None:
        """Only critical tasks and the edges among them are drawn."""
        scenario_one.recompute()
        dot = GraphGenerator(scenario_one).generate(GraphView.CRITICAL_PATH)

        assert dot.startswith("digraph CriticalPath {")
        assert '"C" [label=' in dot
        assert '"A" [label=' not in dot
        assert '"D" -> "F"' not in dot
        assert '"C" -> "E" [color="red", penwidth=2];' in dot

    def test_uncomputed_graph_has_no_dates(self) -> None:
        """Before recompute() nodes show only name and duration."""
        scheduler = Scheduler()
        scheduler.add_task("A", 2)
        dot = GraphGenerator(scheduler).generate()

        assert '"A" [label="A\\n2d", style=filled, fillcolor="lightblue"];' in dot

    def test_names_are_escaped(self) -> None:
        """Quotes in task names don't break the DOT syntax."""
        scheduler = Scheduler()
        scheduler.add_task('say "hi"', 1)
        dot = GraphGenerator(scheduler).generate()

        assert '"say \\"hi\\"" [label=' in dot

    def test_custom_date_format(self, scenario_one: Scheduler) -> None:
        """Node labels use the configured date format."""
        scenario_one.recompute()
        dot = GraphGenerator(scenario_one, "%Y-%m-%d").generate()
        assert "2025-01-15 - 2025-01-20" in dot
