"""
Edge-list input.

The text format holds one undirected edge per line as two
whitespace-separated integers. Blank lines and ``#`` comments are skipped.
Reading stops at the first line whose first two tokens are not integers,
so trailing free text after the edge list is tolerated.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Iterable, Optional, Union

from .graph import Graph
from .validation import InvalidEdgeError


class GraphInputWarning(UserWarning):
    """Warning issued when part of an edge list is skipped."""

    pass


def _parse_vertex(token: str) -> Optional[int]:
    try:
        return int(token)
    except ValueError:
        return None


def parse_edge_list(lines: Iterable[str]) -> Graph:
    """
    Build a graph from edge-list lines.

    Args:
        lines: Lines of text, each ``"u v"``

    Returns:
        The graph described by the lines read before the first unparsable one.

    Raises:
        InvalidEdgeError: If a line holds a single integer and nothing else
    """
    graph = Graph()

    for lineno, line in enumerate(lines, start=1):
        text = line.strip()
        if not text or text.startswith("#"):
            continue

        tokens = text.split()
        u = _parse_vertex(tokens[0])
        if u is not None and len(tokens) < 2:
            raise InvalidEdgeError(f"Line {lineno}: expected two vertices, got {text!r}")
        v = _parse_vertex(tokens[1]) if u is not None else None

        if u is None or v is None:
            warnings.warn(
                f"Line {lineno}: {text!r} is not an edge; stopped reading.",
                GraphInputWarning,
                stacklevel=2,
            )
            break

        if u == v:
            warnings.warn(
                f"Line {lineno}: self-loop on vertex {u} skipped.",
                GraphInputWarning,
                stacklevel=2,
            )
            continue

        graph.add_edge(u, v)

    return graph


def read_edge_list(path: Union[str, Path]) -> Graph:
    """Read a graph from an edge-list file."""
    with open(path) as f:
        return parse_edge_list(f)


def write_edge_list(graph: Graph, path: Union[str, Path]) -> None:
    """Write ``graph`` as an edge-list file, one edge per line."""
    with open(path, "w") as f:
        for u, v in graph.edges():
            f.write(f"{u} {v}\n")


__all__ = ["GraphInputWarning", "parse_edge_list", "read_edge_list", "write_edge_list"]
