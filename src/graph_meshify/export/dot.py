"""
DOT (Graphviz) export for meshified topologies.

Generates DOT descriptions in which the root node, cut vertices and
redundant edges are styled apart from the rest of the network, ready for
Graphviz tools (sfdp, neato, dot, ...).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional, Union

if TYPE_CHECKING:
    from ..graph import GraphStore

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_ATTRS: dict[str, str] = {
    "layout": "sfdp",
    "K": "0.5",
    "overlap": "prism",
    "splines": "true",
}

DEFAULT_NODE_ATTRS: dict[str, str] = {
    "shape": "circle",
    "width": "0.3",
    "fixedsize": "true",
    "fontsize": "8",
}

ROOT_ATTRS: dict[str, str] = {"color": "blue", "style": "filled", "fillcolor": "lightblue"}
CUT_VERTEX_ATTRS: dict[str, str] = {"color": "red", "style": "filled", "fillcolor": "pink"}
REDUNDANT_EDGE_ATTRS: dict[str, str] = {"color": '"#00AA00"', "penwidth": "2.0"}
EDGE_ATTRS: dict[str, str] = {"color": "black"}


def to_dot(
    graph: GraphStore,
    *,
    cut_vertices: Iterable[int] = (),
    show_redundant: bool = True,
    root: Optional[int] = 0,
    name: str = "DODAG",
    graph_attrs: Optional[dict[str, str]] = None,
    node_attrs: Optional[dict[str, str]] = None,
) -> str:
    """
    Export a topology to DOT (Graphviz) format.

    Args:
        graph: Graph to export
        cut_vertices: Nodes to style as cut vertices
        show_redundant: Style redundant edges distinctly (default True).
            When False, every edge is drawn as an original edge.
        root: Node styled as the root, or None for no root styling
        name: Name of the graph (default "DODAG")
        graph_attrs: Additional graph-level attributes
        node_attrs: Additional default node attributes

    Returns:
        DOT format string representation of the graph
    """
    cuts = set(cut_vertices)

    lines = [f"graph {_quote_id(name)} {{"]

    all_graph_attrs = dict(DEFAULT_GRAPH_ATTRS)
    if graph_attrs:
        all_graph_attrs.update(graph_attrs)
    lines.append(_format_attrs_block("graph", all_graph_attrs))

    all_node_attrs = dict(DEFAULT_NODE_ATTRS)
    if node_attrs:
        all_node_attrs.update(node_attrs)
    lines.append(_format_attrs_block("node", all_node_attrs))

    lines.append("")

    # Styled nodes only; the rest are implied by their edges
    for u in range(graph.num_nodes):
        if u == root:
            lines.append(f"  {u}{_format_attrs(ROOT_ATTRS)};")
        elif u in cuts:
            lines.append(f"  {u}{_format_attrs(CUT_VERTEX_ATTRS)};")
        elif graph.degree(u) == 0:
            lines.append(f"  {u};")

    lines.append("")

    for u, v in graph.edges():
        if show_redundant and graph.is_redundant(u, v):
            attrs = REDUNDANT_EDGE_ATTRS
        else:
            attrs = EDGE_ATTRS
        lines.append(f"  {u} -- {v}{_format_attrs(attrs)};")

    lines.append("}")

    return "\n".join(lines) + "\n"


def write_dot(
    path: Union[str, Path],
    graph: GraphStore,
    **kwargs: object,
) -> bool:
    """
    Write the DOT description of ``graph`` to ``path``.

    Keyword arguments are passed to :func:`to_dot`. Write failures are
    logged, not raised.

    Returns:
        True if the file was written
    """
    content = to_dot(graph, **kwargs)  # type: ignore[arg-type]
    try:
        Path(path).write_text(content)
    except OSError as exc:
        logger.error("Failed to write %s: %s", path, exc)
        return False
    logger.info("Exported %s", path)
    return True


def _quote_id(s: str) -> str:
    """Quote a DOT identifier if necessary."""
    if not s:
        return '""'

    # Simple identifiers don't need quoting
    if s.isidentifier() or s.isdigit():
        return s

    escaped = s.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _format_attrs(attrs: dict[str, str]) -> str:
    """Format attributes as DOT attribute list."""
    if not attrs:
        return ""

    parts = []
    for key, value in attrs.items():
        if value.startswith('"') and value.endswith('"'):
            parts.append(f"{key}={value}")
        else:
            parts.append(f"{key}={_quote_id(value)}")

    return " [" + ",".join(parts) + "]"


def _format_attrs_block(element: str, attrs: dict[str, str]) -> str:
    """Format a default attributes block."""
    if not attrs:
        return ""

    parts = [f"{key}={_quote_id(value)}" for key, value in attrs.items()]
    return f"  {element} [{','.join(parts)}];"


__all__ = ["to_dot", "write_dot"]
