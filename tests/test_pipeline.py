"""Tests for the end-to-end pipeline and the text report."""

from datetime import datetime

import pytest

from graph_meshify import GraphStore, Timings, generate_topology, run_meshification
from graph_meshify.report import format_report
from graph_meshify.validation import ValidationError


def _make_path(n: int) -> GraphStore:
    return GraphStore.from_edges(n, [(i, i + 1) for i in range(n - 1)])


def _make_star(leaves: int) -> GraphStore:
    return GraphStore.from_edges(leaves + 1, [(0, i) for i in range(1, leaves + 1)])


class TestRunMeshification:
    """Tests for run_meshification."""

    def test_path(self):
        """A path is closed into a cycle in one pass."""
        graph = _make_path(5)
        report = run_meshification(graph)

        assert report.initial.cut_vertices == {1, 2, 3}
        assert report.final.cut_vertices == set()
        assert report.edges_added == 1
        assert report.num_leaf_blocks == 2
        assert report.unmet_pairs == 0
        assert len(report.rounds) == 1

    def test_biconnected_graph_skips_meshification(self):
        """No cut vertices: no rounds, no edges, same analysis."""
        graph = GraphStore.from_edges(3, [(0, 1), (1, 2), (2, 0)])
        report = run_meshification(graph)

        assert report.rounds == []
        assert report.edges_added == 0
        assert report.final is report.initial
        assert graph.edge_count == 3
        assert report.timings.redundancy_addition == 0.0
        assert report.timings.final_analysis == 0.0

    def test_single_pass_star(self):
        """One pass leaves the star center in place."""
        report = run_meshification(_make_star(4))
        assert report.edges_added == 2
        assert report.final.cut_vertices == {0}
        assert report.metrics.final_cut_vertices == 1

    def test_multi_round_star(self):
        """Extra rounds finish the star."""
        report = run_meshification(_make_star(4), rounds=3)
        assert report.edges_added == 3
        assert len(report.rounds) == 2
        assert report.final.cut_vertices == set()

    def test_monotone_on_generated_topologies(self):
        """Cut vertices never increase on generated networks."""
        for seed in range(10):
            graph = generate_topology(60, seed=seed)
            report = run_meshification(graph)
            assert report.metrics.final_cut_vertices <= report.metrics.initial_cut_vertices

    def test_timings_filled(self):
        """Stage timings are recorded into the given Timings."""
        timings = Timings(topology_gen=1.5)
        report = run_meshification(_make_path(20), timings=timings)
        assert report.timings is timings
        assert timings.topology_gen == 1.5
        assert timings.initial_analysis >= 0.0
        assert timings.final_analysis >= 0.0

    def test_invalid_rounds(self):
        """rounds must be positive."""
        with pytest.raises(ValidationError):
            run_meshification(_make_path(3), rounds=0)


class TestFormatReport:
    """Tests for format_report."""

    @pytest.fixture
    def path_report(self):
        return run_meshification(_make_path(5))

    def _value(self, text: str, label: str) -> str:
        for line in text.splitlines():
            if line.strip().startswith(label + ":"):
                return line.split(label + ":", 1)[1].strip()
        raise AssertionError(f"{label} not in report")

    def test_sections(self, path_report):
        """All sections are present."""
        text = format_report(path_report)
        for title in (
            "MESHIFICATION RESULTS & STATISTICS",
            "NETWORK CONFIGURATION",
            "TOPOLOGY METRICS",
            "DEGREE DISTRIBUTION",
            "BICONNECTIVITY ANALYSIS",
            "EXECUTION TIME BREAKDOWN",
            "ALGORITHM EFFICIENCY",
        ):
            assert title in text

    def test_values(self, path_report):
        """Metric rows carry the run's numbers."""
        text = format_report(path_report, connection_prob=0.15)
        assert self._value(text, "Network Size") == "5 nodes"
        assert self._value(text, "Connection Probability") == "0.15"
        assert self._value(text, "Original Edges") == "4"
        assert self._value(text, "Redundant Edges Added") == "1"
        assert self._value(text, "Edge Overhead") == "25.00%"
        assert self._value(text, "Cut Vertices (Initial)") == "3"
        assert self._value(text, "Cut Vertices (Final)") == "0"
        assert self._value(text, "Cut Vertices Eliminated") == "3 (100.0%)"
        assert self._value(text, "Theoretical Complexity") == "O(V + E)"

    def test_timestamp_and_files(self, path_report):
        """The timestamp and output files are shown."""
        text = format_report(
            path_report,
            output_files=["dodag_old.dot", "dodag_final.dot"],
            timestamp=datetime(2024, 1, 2, 3, 4, 5),
        )
        assert "2024-01-02 03:04:05" in text
        assert "OUTPUT FILES" in text
        assert "  - dodag_final.dot" in text

    def test_no_files_section_without_files(self, path_report):
        """The output files section is omitted when nothing was written."""
        assert "OUTPUT FILES" not in format_report(path_report)
