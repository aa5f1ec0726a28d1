"""
Export functionality for meshified topologies.

This module provides functions to export a topology for visualization:
- DOT: Graphviz format, with cut vertices and redundant edges highlighted
- Rendering: DOT to image through a Graphviz engine (sfdp by default)

Example usage:
    from graph_meshify import generate_topology, run_meshification
    from graph_meshify.export import render_image, write_dot

    graph = generate_topology(50, seed=1)
    report = run_meshification(graph)

    write_dot("dodag_final.dot", graph, cut_vertices=report.final.cut_vertices)
    render_image("dodag_final.dot", "dodag_final.png")
"""

from .dot import to_dot, write_dot
from .render import DEFAULT_ENGINE, render_image

__all__ = [
    # DOT export
    "to_dot",
    "write_dot",
    # Rendering
    "render_image",
    "DEFAULT_ENGINE",
]
