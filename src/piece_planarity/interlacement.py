"""
Conflict analysis between pieces of a cycle.

Two pieces interlace when their attachment vertices alternate around the
cycle in a way that forbids drawing both on the same side of it. The
interlacement graph has one vertex per conflicting piece index and an edge
per interlacing pair; the pieces can be split between the two sides of the
cycle iff that graph is bipartite.
"""

from __future__ import annotations

from typing import AbstractSet, Optional, Sequence

from .graph import Graph
from .pieces import attachment_vertices

# Walk state: which piece attached at the last attachment vertex seen
_NONE = 0
_FIRST = 1
_SECOND = 2
_BOTH = 3

# Alternations (or shared attachments) needed to declare interlacing
INTERLACE_THRESHOLD = 3


def interlaces(
    attach1: AbstractSet[int],
    attach2: AbstractSet[int],
    cycle: Sequence[int],
) -> bool:
    """
    Decide whether two pieces with the given attachments interlace.

    Walks the cycle once, from ``cycle[0]`` to ``cycle[-1]`` without wrapping,
    counting alternations between the two pieces. A vertex both pieces attach
    to counts as an alternation whenever some attachment has already been
    seen, and flips the last-seen piece.

    Returns:
        True as soon as the alternation count or the number of shared
        attachment vertices reaches ``INTERLACE_THRESHOLD``.
    """
    alternations = 0
    shared = 0
    last = _NONE

    for vertex in cycle:
        in1 = vertex in attach1
        in2 = vertex in attach2

        if in1 and in2:
            if last == _NONE:
                last = _BOTH
            elif last == _BOTH:
                alternations += 1
            elif last == _FIRST:
                alternations += 1
                last = _SECOND
            else:
                alternations += 1
                last = _FIRST
            shared += 1
        elif in1:
            if last in (_SECOND, _BOTH):
                alternations += 1
            last = _FIRST
        elif in2:
            if last in (_FIRST, _BOTH):
                alternations += 1
            last = _SECOND

        if alternations >= INTERLACE_THRESHOLD or shared >= INTERLACE_THRESHOLD:
            return True

    return False


def make_interlacement_graph(pieces: Sequence[Graph], cycle: Sequence[int]) -> Graph:
    """
    Build the interlacement graph of ``pieces`` relative to ``cycle``.

    Args:
        pieces: Pieces of the cycle; their indices become vertex identifiers
        cycle: The separating cycle

    Returns:
        Graph with an edge (i, j) for every interlacing pair i < j. Pieces that
        interlace with nothing do not appear as vertices.
    """
    interlace = Graph()
    attachments = [attachment_vertices(piece, cycle) for piece in pieces]

    for i in range(len(pieces)):
        for j in range(i + 1, len(pieces)):
            if interlaces(attachments[i], attachments[j], cycle):
                interlace.add_edge(i, j)

    return interlace


def is_bipartite(graph: Graph, start: Optional[int] = None) -> bool:
    """
    Test whether ``graph`` is two-colorable.

    Colors each component by BFS layer parity, starting from ``start`` for the
    first component, then checks that no edge of that component joins two
    vertices of the same color. Components are processed until every vertex
    is colored or a violation is found.

    Args:
        graph: Graph to test (not modified)
        start: Vertex to start from; defaults to ``graph.get_vertex()``

    Returns:
        True if every component is bipartite. An empty graph is bipartite.
    """
    if graph.number_of_vertices() == 0:
        return True

    remaining = set(graph.vertices())
    v = graph.get_vertex() if start is None else start

    while True:
        color: dict[int, bool] = {v: True}
        layer = [v]
        depth = 0

        while layer:
            next_layer: list[int] = []
            for current in layer:
                for neighbor in graph.neighbors(current):
                    if neighbor not in color:
                        color[neighbor] = depth % 2 == 1
                        next_layer.append(neighbor)
            depth += 1
            layer = next_layer

        for current in color:
            for neighbor in graph.neighbors(current):
                if color[current] == color[neighbor]:
                    return False

        remaining.difference_update(color)
        if not remaining:
            return True
        v = next(iter(remaining))


__all__ = [
    "INTERLACE_THRESHOLD",
    "interlaces",
    "make_interlacement_graph",
    "is_bipartite",
]
