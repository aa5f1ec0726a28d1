"""
Network metrics for meshification runs.

Provides quantitative measures of a topology before and after
meshification:
- Degree statistics: mean, max, min and spread of node degree
- Component count: number of connected components
- NetworkMetrics: the summary reported after a run

Degree statistics use numpy; component counting uses scipy's sparse
graph routines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from .biconnectivity import BiconnectivityResult
from .graph import GraphStore


@dataclass
class DegreeStats:
    """Summary of the node degree distribution."""

    mean: float
    max: int
    min: int
    std: float


@dataclass
class NetworkMetrics:
    """Before/after summary of a meshification run."""

    num_nodes: int
    original_edges: int
    redundant_edges: int
    avg_degree_initial: float
    avg_degree_final: float
    max_degree_final: int
    initial_cut_vertices: int
    final_cut_vertices: int
    num_blocks: int
    num_leaf_blocks: int
    num_components: int

    @property
    def total_edges(self) -> int:
        return self.original_edges + self.redundant_edges

    @property
    def edge_overhead_pct(self) -> float:
        """Redundant edges as a percentage of original edges."""
        return 100.0 * self.redundant_edges / max(self.original_edges, 1)

    @property
    def degree_increase_pct(self) -> float:
        return percent_change(self.avg_degree_initial, self.avg_degree_final)

    @property
    def cut_vertices_eliminated(self) -> int:
        return self.initial_cut_vertices - self.final_cut_vertices

    @property
    def cut_vertices_eliminated_pct(self) -> float:
        if self.initial_cut_vertices == 0:
            return 0.0
        return 100.0 * self.cut_vertices_eliminated / self.initial_cut_vertices


def degree_statistics(graph: GraphStore) -> DegreeStats:
    """
    Compute degree statistics of a graph.

    Args:
        graph: Graph to summarize

    Returns:
        DegreeStats (all zero for an empty graph)
    """
    degrees = np.asarray(graph.degrees(), dtype=float)
    if degrees.size == 0:
        return DegreeStats(mean=0.0, max=0, min=0, std=0.0)

    return DegreeStats(
        mean=float(np.mean(degrees)),
        max=int(np.max(degrees)),
        min=int(np.min(degrees)),
        std=float(np.std(degrees)),
    )


def count_components(graph: GraphStore) -> int:
    """
    Count connected components of a graph.

    Isolated nodes count as components of their own.
    """
    n = graph.num_nodes
    if n == 0:
        return 0

    edges = np.array(list(graph.edges()), dtype=np.int64).reshape(-1, 2)
    data = np.ones(len(edges), dtype=np.int8)
    adjacency = coo_matrix((data, (edges[:, 0], edges[:, 1])), shape=(n, n)).tocsr()
    n_components, _ = connected_components(adjacency, directed=False)
    return int(n_components)


def compute_network_metrics(
    graph: GraphStore,
    initial: BiconnectivityResult,
    final: Optional[BiconnectivityResult] = None,
    *,
    num_leaf_blocks: int = 0,
) -> NetworkMetrics:
    """
    Summarize a meshification run.

    Args:
        graph: Graph after meshification
        initial: Analysis of the graph before meshification
        final: Analysis after meshification (defaults to ``initial`` when
            no meshification took place)
        num_leaf_blocks: Leaf blocks found by the initial analysis

    Returns:
        NetworkMetrics for the run
    """
    if final is None:
        final = initial

    n = graph.num_nodes
    stats = degree_statistics(graph)
    original = graph.original_edge_count

    return NetworkMetrics(
        num_nodes=n,
        original_edges=original,
        redundant_edges=len(graph.redundant_edges),
        avg_degree_initial=(2.0 * original / n) if n else 0.0,
        avg_degree_final=stats.mean,
        max_degree_final=stats.max,
        initial_cut_vertices=initial.num_cut_vertices,
        final_cut_vertices=final.num_cut_vertices,
        num_blocks=final.num_blocks,
        num_leaf_blocks=num_leaf_blocks,
        num_components=count_components(graph),
    )


def percent_change(before: float, after: float) -> float:
    """Relative change from ``before`` to ``after`` in percent."""
    return 100.0 * (after - before) / (before if before > 0 else 1.0)


__all__ = [
    "DegreeStats",
    "NetworkMetrics",
    "degree_statistics",
    "count_components",
    "compute_network_metrics",
    "percent_change",
]
