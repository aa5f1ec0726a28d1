"""Block-cut tree and leaf-block selection.

A block-cut tree captures how blocks (biconnected components) are strung
together through cut vertices. Leaf blocks hang off the rest of their
component through exactly one cut vertex; they are the blocks that
meshification must connect to eliminate cut vertices.
"""

from __future__ import annotations

from dataclasses import dataclass

from ._types import BiconnectivityResult, Block


@dataclass
class BlockCutTree:
    """Block-cut structure of an analyzed graph.

    Attributes:
        blocks: List of blocks (biconnected components), in discovery order.
        cut_vertices: Set of articulation points.
        vertex_to_blocks: Mapping from vertex to indices of blocks containing it.
        cut_counts: Number of cut vertices in each block, by block index.
    """

    blocks: list[Block]
    cut_vertices: set[int]
    vertex_to_blocks: dict[int, list[int]]
    cut_counts: list[int]

    def is_leaf(self, index: int) -> bool:
        return self.cut_counts[index] == 1

    def cut_degree(self, v: int) -> int:
        """Number of blocks meeting at ``v`` (its degree in the block-cut tree)."""
        return len(self.vertex_to_blocks.get(v, ()))


@dataclass
class LeafBlock:
    """A block attached to the rest of the graph by a single cut vertex.

    Attributes:
        block: The underlying block.
        cut_vertex: The one cut vertex among the block's members.
        representative: Endpoint offered for meshification. A member that
            is not the cut vertex, or the cut vertex itself when the block
            has no other member.
        cut_degree: Number of blocks meeting at the cut vertex. Removing
            the cut vertex splits its component into this many parts.
    """

    block: Block
    cut_vertex: int
    representative: int
    cut_degree: int = 2

    @property
    def index(self) -> int:
        return self.block.index

    @property
    def component(self) -> int:
        return self.block.root


def build_block_cut_tree(result: BiconnectivityResult) -> BlockCutTree:
    """Build the block-cut tree from an analysis result.

    Args:
        result: Output of ``analyze_biconnectivity``.

    Returns:
        BlockCutTree with blocks, cut vertices, the vertex-to-block map and
        per-block cut counts.
    """
    is_cut = result.is_cut
    vertex_to_blocks: dict[int, list[int]] = {}
    cut_counts: list[int] = []

    for block in result.blocks:
        cut_counts.append(sum(1 for v in block.vertices if is_cut[v]))
        for v in block.vertices:
            vertex_to_blocks.setdefault(v, []).append(block.index)

    return BlockCutTree(
        blocks=list(result.blocks),
        cut_vertices=result.cut_vertices,
        vertex_to_blocks=vertex_to_blocks,
        cut_counts=cut_counts,
    )


def find_leaf_blocks(result: BiconnectivityResult) -> list[LeafBlock]:
    """Select the leaf blocks of an analysis result, in block discovery order.

    A graph without cut vertices has no leaf blocks.

    Args:
        result: Output of ``analyze_biconnectivity``.

    Returns:
        Leaf blocks with their cut vertex and representative node.
    """
    tree = build_block_cut_tree(result)
    leaves: list[LeafBlock] = []

    for block in tree.blocks:
        if not tree.is_leaf(block.index):
            continue
        cut_vertex = next(v for v in block.vertices if result.is_cut[v])
        leaves.append(
            LeafBlock(
                block=block,
                cut_vertex=cut_vertex,
                representative=representative_node(block, result.is_cut),
                cut_degree=tree.cut_degree(cut_vertex),
            )
        )

    return leaves


def representative_node(block: Block, is_cut: list[bool]) -> int:
    """Smallest non-cut member of ``block``, else its smallest member."""
    non_cut = [v for v in block.vertices if not is_cut[v]]
    if non_cut:
        return min(non_cut)
    return min(block.vertices)
