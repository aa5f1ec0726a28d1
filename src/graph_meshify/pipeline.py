"""
End-to-end meshification pipeline.

analyze -> select leaf blocks -> meshify -> verify, with wall-clock timing
of each stage. The graph is mutated in place; the returned report keeps the
analysis from before and after so both topologies can be exported.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Optional

from .biconnectivity import BiconnectivityResult, analyze_biconnectivity, find_leaf_blocks
from .graph import GraphStore
from .meshify import MeshificationResult, meshify, meshify_until_biconnected, verify
from .metrics import NetworkMetrics, compute_network_metrics
from .validation import validate_rounds

logger = logging.getLogger(__name__)


@dataclass
class Timings:
    """Stage durations in milliseconds."""

    topology_gen: float = 0.0
    initial_analysis: float = 0.0
    redundancy_addition: float = 0.0
    final_analysis: float = 0.0
    dot_export: float = 0.0
    total: float = 0.0


@dataclass
class MeshificationReport:
    """Everything a meshification run produced.

    Attributes:
        initial: Analysis of the graph as given.
        final: Analysis after meshification (``initial`` if none was needed).
        rounds: One entry per meshification pass performed.
        metrics: Before/after network metrics.
        timings: Stage durations.
    """

    initial: BiconnectivityResult
    final: BiconnectivityResult
    rounds: list[MeshificationResult]
    metrics: NetworkMetrics
    timings: Timings = field(default_factory=Timings)

    @property
    def edges_added(self) -> int:
        return sum(r.num_added for r in self.rounds)

    @property
    def unmet_pairs(self) -> int:
        return sum(r.num_unmet for r in self.rounds)

    @property
    def num_leaf_blocks(self) -> int:
        return self.rounds[0].num_leaf_blocks if self.rounds else 0


def run_meshification(
    graph: GraphStore,
    *,
    rounds: int = 1,
    timings: Optional[Timings] = None,
) -> MeshificationReport:
    """
    Eliminate cut vertices from ``graph`` by adding redundant edges.

    Meshification is skipped when the graph has no cut vertex.

    Args:
        graph: Graph to harden, modified in place
        rounds: Maximum number of meshification passes. One pass pairs the
            leaf blocks of the initial analysis; further passes re-analyze
            and pair whatever leaf blocks remain.
        timings: Timings to fill in (a new one is created if omitted)

    Returns:
        MeshificationReport for the run
    """
    validate_rounds(rounds)
    timings = timings if timings is not None else Timings()

    start = time.perf_counter()
    initial = analyze_biconnectivity(graph)
    timings.initial_analysis = _elapsed_ms(start)

    logger.info(
        "Initial: %d cut vertices, %d blocks",
        initial.num_cut_vertices,
        initial.num_blocks,
    )

    outcomes: list[MeshificationResult] = []
    final = initial

    if initial.has_cut_vertices:
        start = time.perf_counter()
        outcomes.append(meshify(graph, find_leaf_blocks(initial)))
        if rounds > 1 and outcomes[0].num_added:
            outcomes.extend(meshify_until_biconnected(graph, rounds - 1))
        timings.redundancy_addition = _elapsed_ms(start)

        start = time.perf_counter()
        final = verify(graph).analysis
        timings.final_analysis = _elapsed_ms(start)
    else:
        logger.info("Graph has no cut vertices, nothing to meshify")

    metrics = compute_network_metrics(
        graph,
        initial,
        final,
        num_leaf_blocks=outcomes[0].num_leaf_blocks if outcomes else 0,
    )

    return MeshificationReport(
        initial=initial,
        final=final,
        rounds=outcomes,
        metrics=metrics,
        timings=timings,
    )


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


__all__ = ["Timings", "MeshificationReport", "run_meshification"]
