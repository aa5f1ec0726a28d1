"""Tests for random topology generation."""

import logging

import pytest

from graph_meshify import count_components, generate_topology
from graph_meshify.validation import ValidationError


class TestGenerateTopology:
    """Tests for generate_topology."""

    def test_node_count(self):
        """The graph has the requested number of nodes."""
        graph = generate_topology(25, seed=1)
        assert graph.num_nodes == 25

    def test_reproducible_with_seed(self):
        """The same seed yields the same topology."""
        a = generate_topology(60, seed=42)
        b = generate_topology(60, seed=42)
        assert a.adjacency() == b.adjacency()

    def test_different_seeds_differ(self):
        """Different seeds give different topologies."""
        a = generate_topology(60, seed=1)
        b = generate_topology(60, seed=2)
        assert a.adjacency() != b.adjacency()

    def test_tree_backbone_without_cross_edges(self):
        """With probability 0 the result is a spanning tree."""
        graph = generate_topology(40, 0.0, seed=3)
        assert graph.edge_count == 39
        assert count_components(graph) == 1

    def test_connected_with_unbounded_degree(self):
        """The backbone keeps the topology connected."""
        for seed in range(5):
            graph = generate_topology(80, 0.2, seed=seed, max_degree=None)
            assert count_components(graph) == 1

    def test_cross_edges_bounded_by_target(self):
        """Cross edges stop at the target edge count."""
        graph = generate_topology(50, 0.15, seed=7)
        target = int(50 * 0.15 * 10)
        assert 49 <= graph.edge_count <= max(target, 49)

    def test_respects_degree_capacity(self):
        """No node exceeds max_degree."""
        graph = generate_topology(100, 0.5, seed=5, max_degree=4)
        assert max(graph.degrees()) <= 4
        assert graph.max_degree == 4

    def test_edges_are_original(self):
        """Generated edges are not tagged redundant."""
        graph = generate_topology(30, seed=9)
        assert graph.redundant_edges == []
        assert graph.original_edge_count == graph.edge_count

    def test_tiny_graphs(self):
        """Zero and one node graphs have no edges."""
        assert generate_topology(0, seed=1).edge_count == 0
        assert generate_topology(1, seed=1).edge_count == 0

    def test_invalid_probability(self):
        """Probabilities outside [0, 1] are rejected."""
        with pytest.raises(ValidationError):
            generate_topology(20, 2.0)

    def test_refused_tree_edges_are_logged(self, caplog):
        """Capacity refusals in the backbone are reported, not silent."""
        with caplog.at_level(logging.WARNING, logger="graph_meshify.generators"):
            graph = generate_topology(20, 0.0, seed=2, max_degree=1)
        assert graph.edge_count < 19
        assert "refused at capacity 1" in caplog.text

    def test_no_refusal_warning_when_unbounded(self, caplog):
        """An unbounded backbone logs no refusal."""
        with caplog.at_level(logging.WARNING, logger="graph_meshify.generators"):
            generate_topology(20, 0.0, seed=2, max_degree=None)
        assert "refused" not in caplog.text

    def test_invalid_max_degree(self):
        """A non-positive capacity is rejected."""
        with pytest.raises(ValidationError):
            generate_topology(20, max_degree=0)
