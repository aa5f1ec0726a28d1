"""Biconnectivity analysis.

Decomposes an undirected graph into blocks with Tarjan's depth-first
search, marks cut vertices, and derives the block-cut structure used to
pick leaf blocks for meshification.

Public API:
    analyze_biconnectivity(graph) -> BiconnectivityResult
    build_block_cut_tree(result) -> BlockCutTree
    find_leaf_blocks(result) -> list[LeafBlock]
"""

from __future__ import annotations

from ._block_cut_tree import (
    BlockCutTree,
    LeafBlock,
    build_block_cut_tree,
    find_leaf_blocks,
    representative_node,
)
from ._tarjan import analyze_biconnectivity
from ._types import AnalysisContext, BiconnectivityResult, Block

__all__ = [
    "analyze_biconnectivity",
    "build_block_cut_tree",
    "find_leaf_blocks",
    "representative_node",
    "AnalysisContext",
    "BiconnectivityResult",
    "Block",
    "BlockCutTree",
    "LeafBlock",
]
