"""Tarjan's biconnected-component decomposition.

One depth-first traversal marks cut vertices and partitions the edge set
into blocks. The traversal uses an explicit frame stack, so graph depth is
not limited by the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Optional

from ..graph import GraphStore
from ..types import NO_PARENT, EdgeTuple
from ._types import (
    FINISHED,
    UNVISITED,
    AnalysisContext,
    BiconnectivityResult,
    Block,
)


class _Frame:
    """Traversal frame: a node, its neighbors and the next neighbor to try."""

    __slots__ = ("node", "neighbors", "pos", "children")

    def __init__(self, node: int, neighbors: tuple[int, ...]) -> None:
        self.node = node
        self.neighbors = neighbors
        self.pos = 0
        self.children = 0


def analyze_biconnectivity(graph: GraphStore) -> BiconnectivityResult:
    """Find cut vertices and blocks of an undirected simple graph.

    Runs in O(V + E). Every edge lands in exactly one block; isolated nodes
    get an edgeless block of their own so that every node belongs to at
    least one block.

    Args:
        graph: Graph to analyze. It is not modified.

    Returns:
        BiconnectivityResult with per-node DFS values, cut-vertex flags and
        the blocks in discovery order.
    """
    n = graph.num_nodes
    ctx = AnalysisContext.for_nodes(n)

    for root in range(n):
        if ctx.state[root] != UNVISITED:
            continue
        ctx.roots.append(root)
        _explore(graph, ctx, root)
        if ctx.edge_stack:
            _pop_block(ctx, root, until=None)
        if graph.degree(root) == 0:
            ctx.blocks.append(Block(index=len(ctx.blocks), vertices={root}, edges=[], root=root))

    return BiconnectivityResult(
        num_nodes=n,
        disc=ctx.disc,
        low=ctx.low,
        parent=ctx.parent,
        is_cut=ctx.is_cut,
        blocks=ctx.blocks,
        roots=ctx.roots,
    )


def _explore(graph: GraphStore, ctx: AnalysisContext, root: int) -> None:
    """Depth-first traversal of the component containing ``root``."""
    ctx.discover(root)
    frames = [_Frame(root, graph.neighbors(root))]

    while frames:
        frame = frames[-1]
        u = frame.node

        if frame.pos < len(frame.neighbors):
            v = frame.neighbors[frame.pos]
            frame.pos += 1

            if ctx.state[v] == UNVISITED:
                ctx.parent[v] = u
                frame.children += 1
                ctx.edge_stack.append((u, v))
                ctx.discover(v)
                frames.append(_Frame(v, graph.neighbors(v)))
            elif v != ctx.parent[u] and ctx.disc[v] < ctx.disc[u]:
                # Back edge, pushed once from its deeper endpoint
                ctx.edge_stack.append((u, v))
                ctx.low[u] = min(ctx.low[u], ctx.disc[v])
            continue

        frames.pop()
        ctx.state[u] = FINISHED
        if not frames:
            break

        parent_frame = frames[-1]
        p = parent_frame.node
        ctx.low[p] = min(ctx.low[p], ctx.low[u])

        if ctx.low[u] >= ctx.disc[p]:
            # Nothing below u reaches above p: the edges pushed since (p, u)
            # form one block, and p separates it unless p is a root with a
            # single child.
            if ctx.parent[p] != NO_PARENT or parent_frame.children > 1:
                ctx.is_cut[p] = True
            _pop_block(ctx, root, until=(p, u))


def _pop_block(ctx: AnalysisContext, root: int, until: Optional[EdgeTuple]) -> None:
    """Pop edges into a new block, through ``until`` or the whole stack."""
    vertices: set[int] = set()
    edges: list[EdgeTuple] = []

    while ctx.edge_stack:
        edge = ctx.edge_stack.pop()
        edges.append(edge)
        vertices.update(edge)
        if edge == until:
            break

    if edges:
        ctx.blocks.append(Block(index=len(ctx.blocks), vertices=vertices, edges=edges, root=root))
