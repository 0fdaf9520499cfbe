"""
Recursive planarity test by cycle decomposition.

Given a cycle of the graph, the remaining edges split into pieces. The graph
is planar iff every piece, drawn together with the cycle, is planar and the
pieces can be distributed between the inside and the outside of the cycle
without two interlacing pieces landing on the same side. The first condition
is checked recursively on each piece that is not a path; the second is a
bipartiteness test on the interlacement graph.

Public API:
    is_planar(graph) -> bool
    check_planarity(graph) -> PlanarityResult
    planarity_testing(graph, cycle) -> bool
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Union

from .graph import Graph
from .interlacement import is_bipartite, make_interlacement_graph
from .pieces import find_pieces
from .search import find_cycle, find_path, is_forest
from .validation import (
    NotBiconnectedError,
    PlanarityError,
    RecursionDepthError,
    validate_max_depth,
)

GraphLike = Union[Graph, Iterable[tuple[int, int]]]


@dataclass
class PlanarityResult:
    """Result of a planarity test.

    Attributes:
        is_planar: Whether the graph is planar.
        cycle: The top-level cycle the graph was decomposed by, or None when
            the verdict needed no cycle (empty graph, forest).
        pieces: Pieces of the graph relative to ``cycle``.
        interlacement: Interlacement graph of ``pieces``; None when there are
            no pieces.
    """

    is_planar: bool
    cycle: Optional[list[int]] = None
    pieces: list[Graph] = field(default_factory=list)
    interlacement: Optional[Graph] = None


def exceeds_edge_bound(graph: Graph) -> bool:
    """Return True if the graph has more than 3|V| - 6 edges."""
    return graph.number_of_edges() > 3 * graph.number_of_vertices() - 6


def planarity_testing(
    graph: Graph,
    cycle: Sequence[int],
    *,
    max_depth: Optional[int] = None,
) -> bool:
    """
    Decide planarity of ``graph`` given one of its cycles.

    ``graph`` is not modified.

    Args:
        graph: Graph containing ``cycle``
        cycle: Ordered cycle vertices
        max_depth: Maximum nesting of recursive calls, or None for no limit

    Returns:
        True if the graph is planar.

    Raises:
        NotBiconnectedError: If a non-path piece touches the cycle fewer than
            two times
        RecursionDepthError: If piece nesting exceeds ``max_depth``
    """
    max_depth = validate_max_depth(max_depth)
    return _planarity_testing(graph, list(cycle), 0, max_depth)


def _planarity_testing(
    graph: Graph,
    cycle: list[int],
    depth: int,
    max_depth: Optional[int],
) -> bool:
    if max_depth is not None and depth > max_depth:
        raise RecursionDepthError(f"Piece nesting exceeded max_depth={max_depth}")

    if exceeds_edge_bound(graph):
        return False

    pieces = find_pieces(graph.copy(), cycle)

    for piece in pieces:
        if piece.is_path():
            continue

        new_cycle = _cycle_through_piece(piece, cycle)

        augmented = piece.copy()
        for u, v in zip(cycle, cycle[1:]):
            augmented.add_edge(u, v)
        augmented.add_edge(cycle[0], cycle[-1])

        if not _planarity_testing(augmented, new_cycle, depth + 1, max_depth):
            return False

    interlace = make_interlacement_graph(pieces, cycle)
    if interlace.number_of_vertices() > 0 and not is_bipartite(interlace, interlace.get_vertex()):
        return False

    return True


def _cycle_through_piece(piece: Graph, cycle: list[int]) -> list[int]:
    """
    Reroute ``cycle`` through ``piece``.

    Takes the first two attachments of the piece in cycle order, finds a path
    between them inside the piece that avoids every other attachment, and
    closes it with the arc of the cycle running from the second attachment
    around to just before the first.
    """
    attach: list[int] = []
    others: set[int] = set()
    for vertex in cycle:
        if piece.contains_vertex(vertex):
            if len(attach) < 2:
                attach.append(vertex)
            else:
                others.add(vertex)

    if len(attach) < 2:
        raise NotBiconnectedError(
            f"Piece touches the cycle at fewer than two vertices {attach}; "
            "graph is not biconnected"
        )

    first, second = attach
    path = find_path(piece, first, second, others)
    if path is None:
        raise PlanarityError(f"No path between attachments {first} and {second} inside piece")

    arc = cycle[cycle.index(second) :] + cycle[: cycle.index(first)]
    return path[:-1] + arc


def check_planarity(graph: GraphLike, *, max_depth: Optional[int] = None) -> PlanarityResult:
    """
    Test planarity and return the top-level decomposition.

    A cycle is searched from ``graph.get_vertex()`` only. If none closes
    through that vertex, a forest is reported planar and any other graph is
    rejected as not biconnected.

    Args:
        graph: A Graph, or an iterable of (u, v) edges
        max_depth: Maximum piece nesting depth, or None for no limit

    Returns:
        PlanarityResult with the verdict, the cycle, its pieces and their
        interlacement graph.

    Raises:
        NotBiconnectedError: If the single cycle search fails on a graph that
            has cycles
        RecursionDepthError: If piece nesting exceeds ``max_depth``
    """
    max_depth = validate_max_depth(max_depth)
    if not isinstance(graph, Graph):
        graph = Graph.from_edges(graph)

    if graph.number_of_vertices() == 0:
        return PlanarityResult(is_planar=True)

    cycle = find_cycle(graph, graph.get_vertex())
    if cycle is None:
        if is_forest(graph):
            return PlanarityResult(is_planar=True)
        raise NotBiconnectedError("Not biconnected.")

    pieces = find_pieces(graph.copy(), cycle)
    if not pieces:
        return PlanarityResult(is_planar=True, cycle=cycle)

    interlacement = make_interlacement_graph(pieces, cycle)

    if exceeds_edge_bound(graph):
        planar = False
    else:
        planar = _planarity_testing(graph, cycle, 0, max_depth)

    return PlanarityResult(
        is_planar=planar,
        cycle=cycle,
        pieces=pieces,
        interlacement=interlacement,
    )


def is_planar(graph: GraphLike, *, max_depth: Optional[int] = None) -> bool:
    """Test whether a graph is planar.

    This is the simple boolean API. For the cycle, pieces and interlacement
    graph, use ``check_planarity`` instead.
    """
    return check_planarity(graph, max_depth=max_depth).is_planar


__all__ = [
    "GraphLike",
    "PlanarityResult",
    "check_planarity",
    "exceeds_edge_bound",
    "is_planar",
    "planarity_testing",
]
