"""
Input validation utilities for graph meshification.

Provides centralized validation for node counts, edge lists and generator
parameters. Raises descriptive exceptions on invalid input so that the
biconnectivity core can assume a simple graph with dense node ids.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .types import MAX_NODES, MIN_NODE_COUNT, canonical_edge


class ValidationError(ValueError):
    """Base exception for meshification validation errors."""

    pass


class InvalidNodeCountError(ValidationError):
    """Raised when a node count is outside the supported range."""

    pass


class InvalidEdgeError(ValidationError):
    """Raised when an edge is malformed or references invalid nodes."""

    pass


class CapacityExceededError(ValidationError):
    """Raised when an edge is refused because an endpoint is at capacity."""

    def __init__(self, u: int, v: int, capacity: int) -> None:
        super().__init__(
            f"edge insertion refused: capacity reached for ({u}, {v}) "
            f"(max degree {capacity})"
        )
        self.edge = (u, v)
        self.capacity = capacity


def validate_node_count(
    num_nodes: Any,
    *,
    minimum: int = MIN_NODE_COUNT,
    maximum: int = MAX_NODES,
) -> int:
    """
    Validate a node count against the supported range.

    Args:
        num_nodes: Requested number of nodes
        minimum: Smallest accepted value (inclusive)
        maximum: Largest accepted value (inclusive)

    Returns:
        Validated node count

    Raises:
        InvalidNodeCountError: If not an integer or outside [minimum, maximum]
    """
    if isinstance(num_nodes, bool) or not isinstance(num_nodes, int):
        raise InvalidNodeCountError(f"node count must be an integer, got {num_nodes!r}")
    if num_nodes < minimum or num_nodes > maximum:
        raise InvalidNodeCountError(
            f"node count must be in [{minimum}, {maximum}], got {num_nodes}"
        )
    return num_nodes


def validate_edge_list(
    edges: Sequence[Any],
    num_nodes: int,
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that an edge list describes a simple undirected graph.

    Each entry must be a pair of integer node ids in [0, num_nodes).
    Self-loops and repeated edges (in either orientation) are reported.

    Args:
        edges: Sequence of (u, v) pairs
        num_nodes: Number of nodes in the graph
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (edge_index, issue_description) tuples

    Raises:
        InvalidEdgeError: If strict=True and invalid edges found
    """
    issues: list[tuple[int, str]] = []
    seen: set[tuple[int, int]] = set()

    for i, edge in enumerate(edges):
        pair = _as_pair(edge)
        if pair is None:
            issues.append((i, f"Edge {i}: expected a pair of integer node ids, got {edge!r}"))
            continue

        u, v = pair
        in_range = True
        for endpoint in (u, v):
            if endpoint < 0 or endpoint >= num_nodes:
                issues.append(
                    (i, f"Edge {i}: node {endpoint} out of bounds [0, {num_nodes})")
                )
                in_range = False
        if not in_range:
            continue

        if u == v:
            issues.append((i, f"Edge {i}: self-loop on node {u}"))
            continue

        canon = canonical_edge(u, v)
        if canon in seen:
            issues.append((i, f"Edge {i}: duplicate edge {canon}"))
        seen.add(canon)

    if strict and issues:
        msg = "Invalid edge list:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidEdgeError(msg)

    return issues


def validate_probability(prob: float) -> float:
    """
    Validate a connection probability is in [0, 1].

    Raises:
        ValidationError: If prob not in [0, 1]
    """
    if not 0.0 <= prob <= 1.0:
        raise ValidationError(f"connection probability must be in [0, 1], got {prob}")
    return float(prob)


def validate_rounds(rounds: int) -> int:
    """
    Validate meshification round count is positive.

    Raises:
        ValidationError: If rounds < 1
    """
    if rounds < 1:
        raise ValidationError(f"rounds must be >= 1, got {rounds}")
    return rounds


def validate_max_degree(max_degree: Optional[int]) -> Optional[int]:
    """
    Validate a per-node adjacency capacity (None means unbounded).

    Raises:
        ValidationError: If max_degree < 1
    """
    if max_degree is not None and max_degree < 1:
        raise ValidationError(f"max_degree must be >= 1, got {max_degree}")
    return max_degree


def _as_pair(edge: Any) -> Optional[tuple[int, int]]:
    """Extract (u, v) from a 2-sequence of ints."""
    try:
        u, v = edge
    except (TypeError, ValueError):
        return None
    if isinstance(u, bool) or isinstance(v, bool):
        return None
    if not isinstance(u, int) or not isinstance(v, int):
        return None
    return u, v


__all__ = [
    "ValidationError",
    "InvalidNodeCountError",
    "InvalidEdgeError",
    "CapacityExceededError",
    "validate_node_count",
    "validate_edge_list",
    "validate_probability",
    "validate_rounds",
    "validate_max_degree",
]
