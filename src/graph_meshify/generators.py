"""
Random tree-like topology generation.

Builds the kind of network meshification targets: a random spanning tree
(every node attaches to an earlier node) plus a sprinkling of cross edges
that favor nearby node ids, so most of the topology stays tree-like and
full of cut vertices.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from .graph import GraphStore
from .types import DEFAULT_CONNECTION_PROB, MAX_NEIGHBORS, EdgeInsertion
from .validation import validate_probability

logger = logging.getLogger(__name__)


def generate_topology(
    num_nodes: int,
    connection_prob: float = DEFAULT_CONNECTION_PROB,
    *,
    seed: Optional[int] = None,
    max_degree: Optional[int] = MAX_NEIGHBORS,
) -> GraphStore:
    """
    Generate a random tree backbone with distance-biased cross edges.

    Step 1 attaches each node ``i >= 1`` to a uniformly random parent in
    ``[0, i)``. Step 2 aims for ``int(num_nodes * connection_prob * 10)``
    edges in total, drawing random node pairs for up to three times that
    many attempts and accepting an insertable pair with probability
    ``1 / (1 + |u - v| / 10)``.

    Args:
        num_nodes: Number of nodes
        connection_prob: Density knob for cross edges, in [0, 1]
        seed: Random seed for reproducible topologies
        max_degree: Adjacency capacity per node, or None for unbounded

    Returns:
        Generated GraphStore (connected unless capacity refused a tree edge)
    """
    validate_probability(connection_prob)
    rng = random.Random(seed)
    graph = GraphStore(num_nodes, max_degree=max_degree)

    logger.info("Generating random topology with %d nodes...", num_nodes)

    # Tree backbone
    refused = 0
    for i in range(1, num_nodes):
        parent = rng.randrange(i)
        if graph.add_edge(i, parent) is EdgeInsertion.CAPACITY:
            refused += 1
            logger.debug("Tree edge (%d, %d) refused: capacity reached", i, parent)
    if refused:
        logger.warning(
            "%d tree edges refused at capacity %s; topology may be disconnected",
            refused,
            max_degree,
        )

    # Cross edges
    if num_nodes >= 2:
        target_edges = int(num_nodes * connection_prob * 10)
        max_attempts = target_edges * 3
        attempts = 0
        while graph.edge_count < target_edges and attempts < max_attempts:
            attempts += 1
            u = rng.randrange(num_nodes)
            v = rng.randrange(num_nodes)
            if u == v or graph.has_edge(u, v):
                continue
            if not (graph.has_capacity(u) and graph.has_capacity(v)):
                continue
            prob = 1.0 / (1.0 + abs(u - v) / 10.0)
            if rng.random() < prob:
                graph.add_edge(u, v)

    if num_nodes:
        logger.info(
            "Generated: %d nodes, %d edges (avg degree: %.2f)",
            num_nodes,
            graph.edge_count,
            2.0 * graph.edge_count / num_nodes,
        )
    return graph


__all__ = ["generate_topology"]
