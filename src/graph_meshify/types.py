"""
Shared types and defaults for graph meshification.

This module defines the edge representation, the outcome of an edge
insertion, and the numeric defaults used across the package.
"""

from __future__ import annotations

from enum import Enum

# Edge type: undirected edge tuple, canonical form is (min, max)
EdgeTuple = tuple[int, int]

# Network size defaults
DEFAULT_NODE_COUNT = 50
MIN_NODE_COUNT = 10
MAX_NODES = 1000

# Per-node adjacency capacity
MAX_NEIGHBORS = 80

# Topology generation
DEFAULT_CONNECTION_PROB = 0.15

# Sentinel for "no DFS parent"
NO_PARENT = -1


class EdgeInsertion(Enum):
    """Outcome of a GraphStore edge insertion."""

    INSERTED = "inserted"
    SELF_LOOP = "self_loop"
    DUPLICATE = "duplicate"
    CAPACITY = "capacity"

    @property
    def ok(self) -> bool:
        return self is EdgeInsertion.INSERTED


def canonical_edge(u: int, v: int) -> EdgeTuple:
    """Return the (min, max) form of an undirected edge."""
    return (u, v) if u <= v else (v, u)


__all__ = [
    "EdgeTuple",
    "EdgeInsertion",
    "canonical_edge",
    "DEFAULT_NODE_COUNT",
    "MIN_NODE_COUNT",
    "MAX_NODES",
    "MAX_NEIGHBORS",
    "DEFAULT_CONNECTION_PROB",
    "NO_PARENT",
]
