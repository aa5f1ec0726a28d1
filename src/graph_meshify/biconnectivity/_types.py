"""Data structures for biconnectivity analysis."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..types import NO_PARENT, EdgeTuple

# DFS node states
UNVISITED = 0
DISCOVERED = 1
FINISHED = 2


@dataclass
class Block:
    """A biconnected component (block).

    Attributes:
        index: Position of the block in discovery order.
        vertices: Set of vertices in this block.
        edges: Edges in this block as (u, v) tuples, in pop order.
        root: DFS root of the connected component containing the block.
    """

    index: int
    vertices: set[int]
    edges: list[EdgeTuple]
    root: int

    @property
    def size(self) -> int:
        return len(self.vertices)

    @property
    def is_trivial(self) -> bool:
        """True for the edgeless block of an isolated node."""
        return not self.edges


@dataclass
class AnalysisContext:
    """Mutable DFS bookkeeping for a single analysis pass.

    A fresh context is built for every pass; nothing here outlives the
    call that created it.
    """

    state: list[int]
    disc: list[int]
    low: list[int]
    parent: list[int]
    is_cut: list[bool]
    edge_stack: list[EdgeTuple] = field(default_factory=list)
    blocks: list[Block] = field(default_factory=list)
    roots: list[int] = field(default_factory=list)
    timer: int = 0

    @classmethod
    def for_nodes(cls, num_nodes: int) -> AnalysisContext:
        return cls(
            state=[UNVISITED] * num_nodes,
            disc=[-1] * num_nodes,
            low=[-1] * num_nodes,
            parent=[NO_PARENT] * num_nodes,
            is_cut=[False] * num_nodes,
        )

    def discover(self, u: int) -> None:
        self.state[u] = DISCOVERED
        self.disc[u] = self.low[u] = self.timer
        self.timer += 1


@dataclass
class BiconnectivityResult:
    """Outcome of one analysis pass.

    Attributes:
        num_nodes: Number of nodes analyzed.
        disc: Discovery time per node.
        low: Low-link value per node.
        parent: DFS parent per node (-1 for roots).
        is_cut: Cut-vertex flag per node.
        blocks: Blocks in discovery order.
        roots: DFS root of each connected component, in traversal order.
    """

    num_nodes: int
    disc: list[int]
    low: list[int]
    parent: list[int]
    is_cut: list[bool]
    blocks: list[Block]
    roots: list[int]

    @property
    def cut_vertices(self) -> set[int]:
        return {v for v, cut in enumerate(self.is_cut) if cut}

    @property
    def num_cut_vertices(self) -> int:
        return sum(self.is_cut)

    @property
    def num_blocks(self) -> int:
        return len(self.blocks)

    @property
    def num_components(self) -> int:
        return len(self.roots)

    @property
    def has_cut_vertices(self) -> bool:
        return any(self.is_cut)

    @property
    def is_biconnected(self) -> bool:
        """Connected, at least two nodes, and no cut vertex."""
        return self.num_nodes >= 2 and self.num_components == 1 and not self.has_cut_vertices

    def block_sets(self) -> set[frozenset[int]]:
        """Blocks as a set of vertex sets, independent of block indices."""
        return {frozenset(b.vertices) for b in self.blocks}
