"""
Plain-text report of a meshification run.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from .pipeline import MeshificationReport
from .types import MAX_NODES

_WIDTH = 62


def format_report(
    report: MeshificationReport,
    *,
    connection_prob: Optional[float] = None,
    node_capacity: int = MAX_NODES,
    output_files: Sequence[str] = (),
    timestamp: Optional[datetime] = None,
) -> str:
    """
    Format the results and statistics of a run as a multi-line string.

    Args:
        report: Result of ``run_meshification``
        connection_prob: Generator density, shown if given
        node_capacity: Largest supported network size
        output_files: Files written by the run, listed at the end
        timestamp: Time shown in the header (defaults to now)

    Returns:
        Report text, one section per topic
    """
    m = report.metrics
    t = report.timings
    when = (timestamp or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")

    lines: list[str] = []
    _section(lines, "MESHIFICATION RESULTS & STATISTICS")
    _row(lines, "Timestamp", when)

    _section(lines, "NETWORK CONFIGURATION")
    _row(lines, "Network Size", f"{m.num_nodes} nodes")
    _row(lines, "Max Supported", f"{node_capacity} nodes")
    if connection_prob is not None:
        _row(lines, "Connection Probability", f"{connection_prob:.2f}")

    _section(lines, "TOPOLOGY METRICS")
    _row(lines, "Original Edges", m.original_edges)
    _row(lines, "Redundant Edges Added", m.redundant_edges)
    _row(lines, "Total Edges (Final)", m.total_edges)
    _row(lines, "Edge Overhead", f"{m.edge_overhead_pct:.2f}%")
    _row(lines, "Connected Components", m.num_components)

    _section(lines, "DEGREE DISTRIBUTION")
    _row(lines, "Avg Degree (Initial)", f"{m.avg_degree_initial:.2f}")
    _row(lines, "Avg Degree (Final)", f"{m.avg_degree_final:.2f}")
    _row(lines, "Max Degree (Final)", m.max_degree_final)
    _row(lines, "Degree Increase", f"{m.degree_increase_pct:.2f}%")

    _section(lines, "BICONNECTIVITY ANALYSIS")
    _row(lines, "Biconnected Components", m.num_blocks)
    _row(lines, "Leaf Blocks", m.num_leaf_blocks)
    _row(lines, "Meshification Rounds", len(report.rounds))
    _row(lines, "Unmet Pairings", report.unmet_pairs)
    _row(lines, "Cut Vertices (Initial)", m.initial_cut_vertices)
    _row(lines, "Cut Vertices (Final)", m.final_cut_vertices)
    _row(
        lines,
        "Cut Vertices Eliminated",
        f"{m.cut_vertices_eliminated} ({m.cut_vertices_eliminated_pct:.1f}%)",
    )

    _section(lines, "EXECUTION TIME BREAKDOWN")
    _row(lines, "Topology Generation", f"{t.topology_gen:.2f} ms")
    _row(lines, "Initial Analysis (Tarjan)", f"{t.initial_analysis:.2f} ms")
    _row(lines, "Redundancy Addition", f"{t.redundancy_addition:.2f} ms")
    _row(lines, "Final Analysis (Tarjan)", f"{t.final_analysis:.2f} ms")
    _row(lines, "DOT Export", f"{t.dot_export:.2f} ms")
    _row(lines, "TOTAL EXECUTION TIME", f"{t.total:.2f} ms")

    _section(lines, "ALGORITHM EFFICIENCY")
    per_node = t.total / m.num_nodes if m.num_nodes else 0.0
    per_edge = t.total / m.total_edges if m.total_edges else 0.0
    _row(lines, "Time per Node", f"{per_node:.3f} ms/node")
    _row(lines, "Time per Edge", f"{per_edge:.3f} ms/edge")
    _row(lines, "Theoretical Complexity", "O(V + E)")

    if output_files:
        _section(lines, "OUTPUT FILES")
        for name in output_files:
            lines.append(f"  - {name}")

    lines.append("=" * _WIDTH)
    return "\n".join(lines) + "\n"


def _section(lines: list[str], title: str) -> None:
    lines.append("=" * _WIDTH)
    lines.append(f" {title}")
    lines.append("-" * _WIDTH)


def _row(lines: list[str], label: str, value: object) -> None:
    lines.append(f"  {label + ':':<28}{value}")


__all__ = ["format_report"]
