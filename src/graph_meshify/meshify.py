"""
Meshification: redundant edges that eliminate cut vertices.

Leaf blocks are paired two at a time and the representatives of each pair
are joined by a redundant edge. For ``L`` leaf blocks in a component this
proposes ``ceil(L / 2)`` edges, the fewest that touch every leaf block.
Pairs whose edge cannot be inserted (self-pair, duplicate, capacity) are
skipped and reported, never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .biconnectivity import (
    BiconnectivityResult,
    LeafBlock,
    analyze_biconnectivity,
    find_leaf_blocks,
)
from .graph import GraphStore
from .types import EdgeInsertion, EdgeTuple, canonical_edge
from .validation import validate_rounds

logger = logging.getLogger(__name__)


@dataclass
class SkippedPair:
    """A leaf-block pair whose redundant edge was not inserted."""

    first: LeafBlock
    second: LeafBlock
    reason: EdgeInsertion

    @property
    def edge(self) -> EdgeTuple:
        return canonical_edge(self.first.representative, self.second.representative)


@dataclass
class MeshificationResult:
    """Outcome of one meshification pass.

    Attributes:
        leaf_blocks: Leaf blocks offered to the pass, in discovery order.
        added: Redundant edges inserted, in pairing order.
        skipped: Pairs that could not be joined.
    """

    leaf_blocks: list[LeafBlock]
    added: list[EdgeTuple] = field(default_factory=list)
    skipped: list[SkippedPair] = field(default_factory=list)

    @property
    def num_leaf_blocks(self) -> int:
        return len(self.leaf_blocks)

    @property
    def edges_needed(self) -> int:
        """Number of pairs proposed, ceil(L / 2) per component."""
        return len(self.added) + len(self.skipped)

    @property
    def edges_lower_bound(self) -> int:
        """Lower bound on the edges needed to free the leaf blocks' cut vertices.

        At least one edge per leaf pair, and at least ``d - 1`` edges for a
        cut vertex joining ``d`` blocks.
        """
        if not self.leaf_blocks:
            return 0
        widest = max(leaf.cut_degree for leaf in self.leaf_blocks)
        return max(self.edges_needed, widest - 1)

    @property
    def num_added(self) -> int:
        return len(self.added)

    @property
    def num_unmet(self) -> int:
        return len(self.skipped)


@dataclass
class VerificationResult:
    """Residual structure after meshification."""

    analysis: BiconnectivityResult

    @property
    def cut_vertex_count(self) -> int:
        return self.analysis.num_cut_vertices

    @property
    def block_count(self) -> int:
        return self.analysis.num_blocks

    @property
    def cut_vertices(self) -> set[int]:
        return self.analysis.cut_vertices


def pair_leaf_blocks(leaf_blocks: list[LeafBlock]) -> list[tuple[LeafBlock, LeafBlock]]:
    """
    Pair leaf blocks for meshification.

    Within each connected component (leaf blocks kept in discovery order),
    block ``i`` is paired with block ``i + 1``. An odd block out is paired
    with the component's first leaf block, closing the cycle. A lone leaf
    block is therefore paired with itself.

    Args:
        leaf_blocks: Leaf blocks in discovery order

    Returns:
        List of (first, second) pairs
    """
    groups: dict[int, list[LeafBlock]] = {}
    for leaf in leaf_blocks:
        groups.setdefault(leaf.component, []).append(leaf)

    pairs: list[tuple[LeafBlock, LeafBlock]] = []
    for group in groups.values():
        for i in range(0, len(group), 2):
            second = group[i + 1] if i + 1 < len(group) else group[0]
            pairs.append((group[i], second))
    return pairs


def meshify(graph: GraphStore, leaf_blocks: list[LeafBlock]) -> MeshificationResult:
    """
    Add redundant edges between paired leaf blocks.

    Mutates ``graph``: each inserted edge is tagged redundant.

    Args:
        graph: Graph the leaf blocks were computed from
        leaf_blocks: Output of ``find_leaf_blocks``

    Returns:
        MeshificationResult listing added edges and skipped pairs
    """
    result = MeshificationResult(leaf_blocks=list(leaf_blocks))
    pairs = pair_leaf_blocks(result.leaf_blocks)

    logger.info("Found %d leaf blocks (need %d edges)", len(leaf_blocks), len(pairs))

    for first, second in pairs:
        a, b = first.representative, second.representative
        outcome = graph.add_edge(a, b, redundant=True)
        if outcome.ok:
            result.added.append(canonical_edge(a, b))
            logger.debug("Redundant edge %d -- %d joins blocks %d and %d", a, b, first.index, second.index)
        else:
            result.skipped.append(SkippedPair(first=first, second=second, reason=outcome))
            logger.warning(
                "Skipped pairing of blocks %d and %d (%d -- %d): %s",
                first.index,
                second.index,
                a,
                b,
                outcome.value,
            )

    logger.info("Added %d redundant edges", result.num_added)
    if result.edges_lower_bound > len(pairs):
        logger.info(
            "At least %d edges are needed in total; another round will be required",
            result.edges_lower_bound,
        )
    return result


def verify(graph: GraphStore) -> VerificationResult:
    """Re-analyze ``graph`` and report the residual cut vertices and blocks."""
    analysis = analyze_biconnectivity(graph)
    logger.info(
        "Verification: %d cut vertices, %d blocks",
        analysis.num_cut_vertices,
        analysis.num_blocks,
    )
    return VerificationResult(analysis=analysis)


def meshify_until_biconnected(graph: GraphStore, max_rounds: int = 4) -> list[MeshificationResult]:
    """
    Repeat analysis and meshification until no cut vertex remains.

    Stops early when a round adds no edge. A single pass can leave cut
    vertices behind when several leaf blocks hang off the same cut vertex
    (a star with k leaves needs k - 1 edges, not ceil(k / 2)).

    Args:
        graph: Graph to meshify in place
        max_rounds: Upper bound on meshification passes

    Returns:
        One MeshificationResult per round performed
    """
    validate_rounds(max_rounds)
    rounds: list[MeshificationResult] = []

    for i in range(max_rounds):
        analysis = analyze_biconnectivity(graph)
        if not analysis.has_cut_vertices:
            break
        logger.info("Meshification round %d: %d cut vertices", i + 1, analysis.num_cut_vertices)
        outcome = meshify(graph, find_leaf_blocks(analysis))
        rounds.append(outcome)
        if outcome.num_added == 0:
            break

    return rounds


__all__ = [
    "SkippedPair",
    "MeshificationResult",
    "VerificationResult",
    "pair_leaf_blocks",
    "meshify",
    "verify",
    "meshify_until_biconnected",
]
