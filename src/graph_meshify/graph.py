"""
Undirected simple graph storage.

GraphStore owns the adjacency of a network with dense node ids in
``[0, num_nodes)``. It is only ever mutated through edge insertion; every
insertion reports its outcome as an :class:`EdgeInsertion` so callers can tell
an inserted edge from a self-loop, a duplicate or a refusal at capacity.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import EdgeInsertion, EdgeTuple, canonical_edge
from .validation import (
    CapacityExceededError,
    InvalidEdgeError,
    ValidationError,
    validate_edge_list,
    validate_max_degree,
)

logger = logging.getLogger(__name__)


class GraphStore:
    """
    Undirected simple graph with optional per-node degree capacity.

    Example:
        graph = GraphStore.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4)])
        graph.add_edge(0, 4, redundant=True)   # EdgeInsertion.INSERTED
        graph.add_edge(0, 4)                   # EdgeInsertion.DUPLICATE
    """

    def __init__(self, num_nodes: int, *, max_degree: Optional[int] = None) -> None:
        """
        Initialize an edgeless graph.

        Args:
            num_nodes: Number of nodes, labeled 0..num_nodes-1
            max_degree: Adjacency capacity per node, or None for unbounded
        """
        if num_nodes < 0:
            raise ValidationError(f"num_nodes must be >= 0, got {num_nodes}")
        validate_max_degree(max_degree)

        self._num_nodes = num_nodes
        self._max_degree = max_degree
        self._adj: list[list[int]] = [[] for _ in range(num_nodes)]
        self._edges: set[EdgeTuple] = set()
        self._redundant: list[EdgeTuple] = []
        self._redundant_set: set[EdgeTuple] = set()
        self._original_edges = 0

    @classmethod
    def from_edges(
        cls,
        num_nodes: int,
        edges: Sequence[tuple[int, int]],
        *,
        max_degree: Optional[int] = None,
        strict: bool = True,
    ) -> Self:
        """
        Build a graph from an edge list.

        Args:
            num_nodes: Number of nodes
            edges: Sequence of (u, v) pairs with ids in [0, num_nodes)
            max_degree: Adjacency capacity per node
            strict: If True, malformed edge lists and capacity refusals raise.
                If False, self-loops, duplicates and refused edges are skipped
                (and logged).

        Raises:
            InvalidEdgeError: If strict and the edge list is not simple
            CapacityExceededError: If strict and an edge exceeds capacity
        """
        issues = validate_edge_list(edges, num_nodes, strict=strict)
        bad = {i for i, _ in issues}

        graph = cls(num_nodes, max_degree=max_degree)
        for i, edge in enumerate(edges):
            if i in bad:
                continue
            u, v = edge
            outcome = graph.add_edge(u, v)
            if outcome is EdgeInsertion.CAPACITY:
                if strict:
                    raise CapacityExceededError(u, v, graph._max_degree or 0)
                logger.warning("Skipped edge (%d, %d): capacity reached", u, v)
        return graph

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def num_nodes(self) -> int:
        return self._num_nodes

    @property
    def max_degree(self) -> Optional[int]:
        return self._max_degree

    @property
    def edge_count(self) -> int:
        """Total number of edges, original and redundant."""
        return len(self._edges)

    @property
    def original_edge_count(self) -> int:
        return self._original_edges

    @property
    def redundant_edges(self) -> list[EdgeTuple]:
        """Edges added with ``redundant=True``, in insertion order."""
        return list(self._redundant)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def neighbors(self, u: int) -> tuple[int, ...]:
        """Adjacency of ``u`` in insertion order."""
        self._check_node(u)
        return tuple(self._adj[u])

    def degree(self, u: int) -> int:
        self._check_node(u)
        return len(self._adj[u])

    def degrees(self) -> list[int]:
        return [len(nbrs) for nbrs in self._adj]

    def has_edge(self, u: int, v: int) -> bool:
        return canonical_edge(u, v) in self._edges

    def has_capacity(self, u: int) -> bool:
        """True if ``u`` can accept another neighbor."""
        self._check_node(u)
        return self._max_degree is None or len(self._adj[u]) < self._max_degree

    def is_redundant(self, u: int, v: int) -> bool:
        return canonical_edge(u, v) in self._redundant_set

    def edges(self) -> Iterator[EdgeTuple]:
        """Iterate each edge once as (u, v) with u < v, ordered by u."""
        for u, nbrs in enumerate(self._adj):
            for v in nbrs:
                if u < v:
                    yield (u, v)

    def adjacency(self) -> list[list[int]]:
        """Copy of the adjacency lists."""
        return [list(nbrs) for nbrs in self._adj]

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_edge(self, u: int, v: int, *, redundant: bool = False) -> EdgeInsertion:
        """
        Insert the undirected edge (u, v).

        The graph is left unchanged unless the result is
        ``EdgeInsertion.INSERTED``.

        Args:
            u: First endpoint
            v: Second endpoint
            redundant: Tag the edge as added by meshification

        Returns:
            Outcome of the insertion

        Raises:
            InvalidEdgeError: If an endpoint is not a node of this graph
        """
        self._check_node(u)
        self._check_node(v)

        if u == v:
            return EdgeInsertion.SELF_LOOP
        canon = canonical_edge(u, v)
        if canon in self._edges:
            return EdgeInsertion.DUPLICATE
        if not (self.has_capacity(u) and self.has_capacity(v)):
            logger.debug("Edge (%d, %d) refused: capacity %s reached", u, v, self._max_degree)
            return EdgeInsertion.CAPACITY

        self._adj[u].append(v)
        self._adj[v].append(u)
        self._edges.add(canon)
        if redundant:
            self._redundant.append(canon)
            self._redundant_set.add(canon)
        else:
            self._original_edges += 1
        return EdgeInsertion.INSERTED

    def add_edges(self, edges: Iterable[tuple[int, int]]) -> list[EdgeInsertion]:
        """Insert several edges, returning one outcome per edge."""
        return [self.add_edge(u, v) for u, v in edges]

    def copy(self) -> Self:
        """Independent copy with the same edges, tags and capacity."""
        clone = type(self)(self._num_nodes, max_degree=self._max_degree)
        clone._adj = [list(nbrs) for nbrs in self._adj]
        clone._edges = set(self._edges)
        clone._redundant = list(self._redundant)
        clone._redundant_set = set(self._redundant_set)
        clone._original_edges = self._original_edges
        return clone

    def _check_node(self, u: int) -> None:
        if not 0 <= u < self._num_nodes:
            raise InvalidEdgeError(f"node {u} out of bounds [0, {self._num_nodes})")

    def __repr__(self) -> str:
        return (
            f"GraphStore(num_nodes={self._num_nodes}, edges={self.edge_count}, "
            f"redundant={len(self._redundant)})"
        )


__all__ = ["GraphStore"]
