"""Tests for leaf-block pairing, meshification and verification."""

from __future__ import annotations

import math
import random

import pytest

from graph_meshify import (
    EdgeInsertion,
    GraphStore,
    analyze_biconnectivity,
    find_leaf_blocks,
    generate_topology,
    meshify,
    meshify_until_biconnected,
    pair_leaf_blocks,
    verify,
)
from graph_meshify.validation import ValidationError

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_path(n: int) -> GraphStore:
    return GraphStore.from_edges(n, [(i, i + 1) for i in range(n - 1)])


def _make_star(leaves: int) -> GraphStore:
    return GraphStore.from_edges(leaves + 1, [(0, i) for i in range(1, leaves + 1)])


def _make_saturated_leaf() -> GraphStore:
    """Leaf block whose representative 0 is at degree capacity 3.

    Block {0, 1, 5, 6} hangs off cut vertex 1; path 1-2-3-4 ends in leaf {3, 4}.
    """
    edges = [(0, 5), (0, 6), (0, 1), (1, 5), (5, 6), (1, 2), (2, 3), (3, 4)]
    return GraphStore.from_edges(7, edges, max_degree=3)


def _meshify_once(graph: GraphStore):
    return meshify(graph, find_leaf_blocks(analyze_biconnectivity(graph)))


def _random_graph(rng: random.Random, n: int, p: float) -> GraphStore:
    edges = [(i, j) for i in range(n) for j in range(i + 1, n) if rng.random() < p]
    return GraphStore.from_edges(n, edges)


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    """End-to-end behavior on reference topologies."""

    def test_star(self):
        """Star with 4 leaves: 2 edges pair the leaves, center stays a cut vertex."""
        graph = _make_star(4)
        before = analyze_biconnectivity(graph)
        assert before.cut_vertices == {0}
        assert before.num_blocks == 4

        leaves = find_leaf_blocks(before)
        assert len(leaves) == 4

        result = meshify(graph, leaves)
        assert result.added == [(1, 2), (3, 4)]
        assert result.skipped == []

        # Two triangles still share node 0
        assert verify(graph).cut_vertices == {0}

    def test_star_lower_bound_exceeds_single_pass(self):
        """A 4-block star center needs 3 edges, more than the 2 pairs proposed."""
        result = _meshify_once(_make_star(4))
        assert result.edges_needed == 2
        assert result.edges_lower_bound == 3

    def test_star_multi_round(self):
        """Further rounds remove the star center as a cut vertex."""
        graph = _make_star(4)
        rounds = meshify_until_biconnected(graph, max_rounds=5)
        assert [r.added for r in rounds] == [[(1, 2), (3, 4)], [(1, 3)]]
        assert verify(graph).cut_vertex_count == 0

    def test_path(self):
        """Path: one edge joins the end blocks into a cycle."""
        graph = _make_path(5)
        result = _meshify_once(graph)
        assert result.num_leaf_blocks == 2
        assert result.added == [(0, 4)]
        assert result.edges_lower_bound == 1

        check = verify(graph)
        assert check.cut_vertex_count == 0
        assert check.block_count == 1
        assert check.analysis.is_biconnected

    def test_triangle(self):
        """Triangle: nothing to pair, nothing added."""
        graph = GraphStore.from_edges(3, [(0, 1), (1, 2), (2, 0)])
        result = _meshify_once(graph)
        assert result.num_leaf_blocks == 0
        assert result.added == []
        assert graph.edge_count == 3

    def test_single_leaf_block_is_self_paired(self):
        """A lone leaf block pairs with itself and is skipped."""
        graph = _make_path(5)
        leaves = find_leaf_blocks(analyze_biconnectivity(graph))

        result = meshify(graph, leaves[:1])
        assert result.added == []
        assert result.num_unmet == 1
        assert result.skipped[0].reason is EdgeInsertion.SELF_LOOP
        assert verify(graph).cut_vertex_count == 3

    def test_odd_leaf_count_wraps(self):
        """With three leaves the last pairs back with the first."""
        graph = _make_star(3)
        result = _meshify_once(graph)
        assert result.added == [(1, 2), (1, 3)]
        assert verify(graph).cut_vertex_count == 0


# ---------------------------------------------------------------------------
# Pairing
# ---------------------------------------------------------------------------


class TestPairing:
    """Tests for pair_leaf_blocks."""

    def test_even_pairs(self):
        """Consecutive leaf blocks are paired."""
        leaves = find_leaf_blocks(analyze_biconnectivity(_make_star(4)))
        pairs = pair_leaf_blocks(leaves)
        assert [(a.index, b.index) for a, b in pairs] == [(0, 1), (2, 3)]

    def test_odd_pairs(self):
        """The odd block out pairs with the first."""
        leaves = find_leaf_blocks(analyze_biconnectivity(_make_star(5)))
        pairs = pair_leaf_blocks(leaves)
        assert len(pairs) == 3
        assert pairs[-1][0].index == leaves[-1].index
        assert pairs[-1][1].index == leaves[0].index

    def test_empty(self):
        """No leaf blocks, no pairs."""
        assert pair_leaf_blocks([]) == []

    def test_pairs_stay_within_components(self):
        """Leaf blocks of different components are never paired."""
        graph = GraphStore(8)
        for i in (1, 2, 3):
            graph.add_edge(0, i)
        for i in (5, 6, 7):
            graph.add_edge(4, i)

        leaves = find_leaf_blocks(analyze_biconnectivity(graph))
        pairs = pair_leaf_blocks(leaves)
        assert len(pairs) == 4
        for a, b in pairs:
            assert a.component == b.component


# ---------------------------------------------------------------------------
# Guards
# ---------------------------------------------------------------------------


class TestGuards:
    """Pairs whose edge cannot be inserted are skipped and counted."""

    def test_capacity_skips_pair(self):
        """A representative at capacity refuses the redundant edge."""
        graph = _make_saturated_leaf()
        leaves = find_leaf_blocks(analyze_biconnectivity(graph))
        assert [leaf.representative for leaf in leaves] == [4, 0]

        result = meshify(graph, leaves)
        assert result.added == []
        assert result.skipped[0].reason is EdgeInsertion.CAPACITY
        assert result.skipped[0].edge == (0, 4)
        assert graph.degree(0) == 3
        assert verify(graph).cut_vertices == {1, 2, 3}

    def test_duplicate_skips_pair(self):
        """A pair already joined by an edge is skipped as duplicate."""
        graph = _make_path(5)
        leaves = find_leaf_blocks(analyze_biconnectivity(graph))
        graph.add_edge(0, 4)
        result = meshify(graph, leaves)
        assert result.added == []
        assert result.skipped[0].reason is EdgeInsertion.DUPLICATE

    def test_added_edges_tagged_redundant(self):
        """Inserted edges are recorded as redundant on the graph."""
        graph = _make_path(5)
        _meshify_once(graph)
        assert graph.redundant_edges == [(0, 4)]
        assert graph.is_redundant(4, 0)
        assert graph.original_edge_count == 4


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestProperties:
    """Edge count and monotonicity over random graphs."""

    @pytest.mark.parametrize("seed", range(20))
    def test_adds_ceil_half_leaf_count(self, seed):
        """Connected graphs receive exactly ceil(L / 2) edges."""
        graph = generate_topology(30, 0.15, seed=seed, max_degree=None)
        leaves = find_leaf_blocks(analyze_biconnectivity(graph))
        result = meshify(graph, leaves)
        assert result.num_added == math.ceil(len(leaves) / 2)
        assert result.num_unmet == 0

    @pytest.mark.parametrize("seed", range(30))
    def test_cut_vertices_never_increase(self, seed):
        """Meshification never creates cut vertices, connected or not."""
        rng = random.Random(seed)
        graph = _random_graph(rng, rng.randint(2, 14), rng.choice([0.1, 0.2, 0.3]))
        before = analyze_biconnectivity(graph).num_cut_vertices
        _meshify_once(graph)
        assert verify(graph).cut_vertex_count <= before

    def test_two_stars_disconnected(self):
        """Two 3-leaf stars are each hardened without bridging them."""
        graph = GraphStore(8)
        for i in (1, 2, 3):
            graph.add_edge(0, i)
        for i in (5, 6, 7):
            graph.add_edge(4, i)

        result = _meshify_once(graph)
        assert result.added == [(1, 2), (1, 3), (5, 6), (5, 7)]

        check = verify(graph)
        assert check.cut_vertex_count == 0
        assert check.analysis.num_components == 2

    @pytest.mark.parametrize("seed", range(10))
    def test_trees_become_biconnected_with_rounds(self, seed):
        """Random trees end with no cut vertices given enough rounds."""
        graph = generate_topology(40, 0.0, seed=seed, max_degree=None)
        meshify_until_biconnected(graph, max_rounds=40)
        assert verify(graph).cut_vertex_count == 0


class TestMeshifyUntilBiconnected:
    """Tests for the multi-round driver."""

    def test_no_rounds_when_biconnected(self):
        """A biconnected graph needs no rounds."""
        graph = GraphStore.from_edges(3, [(0, 1), (1, 2), (2, 0)])
        assert meshify_until_biconnected(graph) == []

    def test_stops_when_nothing_added(self):
        """A round that adds nothing ends the loop."""
        graph = _make_saturated_leaf()
        rounds = meshify_until_biconnected(graph, max_rounds=5)
        assert len(rounds) == 1
        assert rounds[0].num_added == 0

    def test_invalid_rounds(self):
        """max_rounds must be positive."""
        with pytest.raises(ValidationError, match="rounds must be >= 1"):
            meshify_until_biconnected(_make_path(3), max_rounds=0)
