"""
DOT (Graphviz) export for graphs.

Generates undirected DOT text that can be rendered with Graphviz tools
(dot, neato, circo, ...). A cycle can be highlighted, which makes it easy to
inspect a separating cycle together with its pieces.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..graph import Graph

HIGHLIGHT_COLOR = "red"


def to_dot(
    graph: Graph,
    *,
    name: str = "G",
    highlight: Optional[Sequence[int]] = None,
    highlight_color: str = HIGHLIGHT_COLOR,
    graph_attrs: Optional[dict[str, str]] = None,
    node_attrs: Optional[dict[str, str]] = None,
    edge_attrs: Optional[dict[str, str]] = None,
) -> str:
    """
    Export a graph to DOT (Graphviz) format.

    Args:
        graph: Graph to export
        name: Name of the graph (default "G")
        highlight: Cycle whose vertices and edges are drawn in
            ``highlight_color``. Cycle edges missing from the graph are skipped.
        highlight_color: Color for the highlighted cycle
        graph_attrs: Additional graph-level attributes
        node_attrs: Additional default node attributes
        edge_attrs: Additional default edge attributes

    Returns:
        DOT format string representation of the graph
    """
    lines = [f"graph {_quote_id(name)} {{"]

    if graph_attrs:
        lines.append(_format_attrs_block("graph", graph_attrs))
    if node_attrs:
        lines.append(_format_attrs_block("node", node_attrs))
    if edge_attrs:
        lines.append(_format_attrs_block("edge", edge_attrs))

    cycle_vertices: set[int] = set()
    cycle_edges: set[frozenset[int]] = set()
    if highlight:
        cycle_vertices = set(highlight)
        for i in range(len(highlight)):
            cycle_edges.add(frozenset((highlight[i - 1], highlight[i])))

    lines.append("")

    # Nodes
    for v in graph.vertices():
        node_data: dict[str, str] = {}
        if v in cycle_vertices:
            node_data["color"] = highlight_color
        lines.append(f"  {_quote_id(str(v))}{_format_attrs(node_data)};")

    lines.append("")

    # Edges
    for u, v in graph.edges():
        edge_data: dict[str, str] = {}
        if frozenset((u, v)) in cycle_edges:
            edge_data["color"] = highlight_color
        lines.append(f"  {_quote_id(str(u))} -- {_quote_id(str(v))}{_format_attrs(edge_data)};")

    lines.append("}")

    return "\n".join(lines)


def _quote_id(s: str) -> str:
    """Quote a DOT identifier if necessary."""
    if not s:
        return '""'

    if s.isidentifier() or s.isdigit():
        return s

    escaped = s.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _format_attrs(attrs: dict[str, str]) -> str:
    """Format attributes as DOT attribute list."""
    if not attrs:
        return ""

    parts = [f"{key}={_quote_id(value)}" for key, value in attrs.items()]
    return " [" + ", ".join(parts) + "]"


def _format_attrs_block(element: str, attrs: dict[str, str]) -> str:
    """Format a default attributes block."""
    parts = [f"{key}={_quote_id(value)}" for key, value in attrs.items()]
    return f"  {element} [{', '.join(parts)}];"


__all__ = [
    "to_dot",
]
