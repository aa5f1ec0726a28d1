"""
graph-meshify: cut-vertex elimination for tree-like network topologies.

This package finds every cut vertex (articulation point) of an undirected
network and adds a small set of redundant edges so that no single node
failure can disconnect it.

Pipeline:
- graph: GraphStore, an undirected simple graph mutated only by edge insertion
- biconnectivity: Tarjan decomposition into blocks, cut vertices, leaf blocks
- meshify: leaf-block pairing, redundant edge insertion and verification
- pipeline: the timed end-to-end run
- generators, metrics, export, report, cli: topology synthesis and output
"""

__version__ = "0.1.0"

from .biconnectivity import (
    BiconnectivityResult,
    Block,
    BlockCutTree,
    LeafBlock,
    analyze_biconnectivity,
    build_block_cut_tree,
    find_leaf_blocks,
)
from .generators import generate_topology
from .graph import GraphStore
from .meshify import (
    MeshificationResult,
    SkippedPair,
    VerificationResult,
    meshify,
    meshify_until_biconnected,
    pair_leaf_blocks,
    verify,
)
from .metrics import (
    DegreeStats,
    NetworkMetrics,
    compute_network_metrics,
    count_components,
    degree_statistics,
)
from .pipeline import MeshificationReport, Timings, run_meshification
from .types import EdgeInsertion

# Validation
from .validation import (
    CapacityExceededError,
    InvalidEdgeError,
    InvalidNodeCountError,
    ValidationError,
)

__all__ = [
    # Graph
    "GraphStore",
    "EdgeInsertion",
    # Analysis
    "analyze_biconnectivity",
    "build_block_cut_tree",
    "find_leaf_blocks",
    "BiconnectivityResult",
    "Block",
    "BlockCutTree",
    "LeafBlock",
    # Meshification
    "meshify",
    "meshify_until_biconnected",
    "pair_leaf_blocks",
    "verify",
    "MeshificationResult",
    "SkippedPair",
    "VerificationResult",
    # Pipeline
    "run_meshification",
    "MeshificationReport",
    "Timings",
    # Generation and metrics
    "generate_topology",
    "degree_statistics",
    "count_components",
    "compute_network_metrics",
    "DegreeStats",
    "NetworkMetrics",
    # Validation
    "ValidationError",
    "InvalidNodeCountError",
    "InvalidEdgeError",
    "CapacityExceededError",
]
