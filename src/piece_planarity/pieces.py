"""
Decomposition of a graph into pieces relative to a cycle.

A piece is either a chord (a single non-cycle edge joining two cycle
vertices that are not consecutive on the cycle) or a maximal connected
component of the vertices off the cycle, together with every edge that
attaches it to the cycle.
"""

from __future__ import annotations

from typing import Sequence

from .graph import Graph


def find_pieces(graph: Graph, cycle: Sequence[int]) -> list[Graph]:
    """
    Split ``graph`` into its pieces with respect to ``cycle``.

    Note:
        Chord edges are removed from ``graph`` as they are extracted, so
        pass a ``copy()`` if the graph is still needed afterwards.

    Args:
        graph: Graph to decompose (consumed)
        cycle: Cycle of ``graph`` as an ordered vertex list

    Returns:
        Chord pieces in cycle index order, followed by the off-cycle pieces
        in vertex insertion order.
    """
    pieces: list[Graph] = []
    n = len(cycle)
    on_cycle = set(cycle)

    # Chords
    for i in range(n):
        for j in range(i + 1, n):
            if j - i == 1 or j - i == n - 1:
                continue
            u, v = cycle[i], cycle[j]
            if graph.contains_edge(u, v):
                chord = Graph()
                chord.add_edge(u, v)
                graph.remove_edge(u, v)
                pieces.append(chord)

    # Off-cycle components; the search stops at cycle vertices
    pending = [v for v in graph.vertices() if v not in on_cycle]
    assigned: set[int] = set()

    for vertex in pending:
        if vertex in assigned:
            continue

        piece = Graph()
        explored: set[int] = set()
        stack: list[int] = [vertex]

        while stack:
            u = stack.pop()
            if u in explored:
                continue
            explored.add(u)
            for w in graph.neighbors(u):
                piece.add_edge(u, w)
                if w not in on_cycle:
                    stack.append(w)

        pieces.append(piece)
        assigned.update(piece.vertices())

    return pieces


def attachment_vertices(piece: Graph, cycle: Sequence[int]) -> set[int]:
    """Return the cycle vertices that ``piece`` touches."""
    return {v for v in cycle if piece.contains_vertex(v)}


__all__ = ["find_pieces", "attachment_vertices"]
