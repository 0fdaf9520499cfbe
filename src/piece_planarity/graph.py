"""
Undirected simple graph container.

The graph is stored as an adjacency mapping from vertex to the set of its
neighbors, plus a running edge count. Vertices are not stored separately;
a vertex exists once an edge touching it has been added. Removing an edge
never removes its endpoints.

Graphs are mutable and are consumed destructively by piece decomposition,
so callers that still need a graph after decomposing it must work on a
``copy()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, KeysView, Optional

if TYPE_CHECKING:
    from typing_extensions import Self

from .validation import EmptyGraphError, validate_edge


class Graph:
    """
    Undirected simple graph over integer vertices.

    Invariants:
        - symmetry: ``v in neighbors(u)`` iff ``u in neighbors(v)``
        - no self-loops
        - ``number_of_edges()`` equals the number of distinct connected pairs

    Example:
        >>> g = Graph.from_edges([(1, 2), (2, 3), (3, 1)])
        >>> g.number_of_vertices(), g.number_of_edges()
        (3, 3)
        >>> g.is_path()
        True
    """

    __slots__ = ("_adj", "_edge_count")

    def __init__(self, other: Optional[Graph] = None) -> None:
        """
        Create an empty graph, or an independent copy of ``other``.

        Args:
            other: Graph to copy. Neighbor sets are copied, so later mutation
                of either graph does not affect the other.
        """
        self._adj: dict[int, set[int]] = {}
        self._edge_count = 0
        if other is not None:
            self._adj = {v: set(nbrs) for v, nbrs in other._adj.items()}
            self._edge_count = other._edge_count

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[int, int]]) -> Graph:
        """Build a graph from an iterable of (u, v) pairs."""
        graph = cls()
        graph.add_edges(edges)
        return graph

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_edge(self, u: int, v: int) -> None:
        """
        Add the undirected edge u-v.

        Adding an edge that already exists leaves the graph unchanged.

        Raises:
            InvalidEdgeError: If u == v or an endpoint is not an integer
        """
        u, v = validate_edge((u, v))

        first = self._adj.setdefault(u, set())
        is_new = v not in first
        first.add(v)
        self._adj.setdefault(v, set()).add(u)

        if is_new:
            self._edge_count += 1

    def add_edges(self, edges: Iterable[tuple[int, int]]) -> Self:
        """Add every (u, v) pair in ``edges`` and return the graph."""
        for u, v in edges:
            self.add_edge(u, v)
        return self

    def remove_edge(self, u: int, v: int) -> None:
        """
        Remove the undirected edge u-v.

        The edge must exist; removing an unknown edge is a caller error.
        Both endpoints stay in the graph even if they become isolated.
        """
        self._adj[u].remove(v)
        self._adj[v].remove(u)
        self._edge_count -= 1

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def neighbors(self, v: int) -> set[int]:
        """Return the live neighbor set of ``v``. Do not mutate it."""
        return self._adj[v]

    def degree(self, v: int) -> int:
        return len(self._adj[v])

    def vertices(self) -> KeysView[int]:
        """Return a live view of the vertices, in insertion order."""
        return self._adj.keys()

    def get_vertex(self) -> int:
        """
        Return an arbitrary vertex (the first one inserted).

        Raises:
            EmptyGraphError: If the graph has no vertices
        """
        for v in self._adj:
            return v
        raise EmptyGraphError("Graph has no vertices")

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield each undirected edge once, as (u, v) in discovery order."""
        seen: set[int] = set()
        for u, nbrs in self._adj.items():
            seen.add(u)
            for v in nbrs:
                if v not in seen:
                    yield (u, v)

    def contains_vertex(self, v: int) -> bool:
        return v in self._adj

    def contains_edge(self, u: int, v: int) -> bool:
        nbrs = self._adj.get(u)
        return nbrs is not None and v in nbrs

    def number_of_vertices(self) -> int:
        return len(self._adj)

    def number_of_edges(self) -> int:
        return self._edge_count

    def is_path(self) -> bool:
        """
        Return True if every vertex has degree at most 2.

        A simple cycle is a closed path and also passes this test.
        """
        return all(len(nbrs) <= 2 for nbrs in self._adj.values())

    def copy(self) -> Graph:
        """Return an independent deep copy of this graph."""
        return Graph(self)

    # -------------------------------------------------------------------------
    # Dunder helpers
    # -------------------------------------------------------------------------

    def __copy__(self) -> Graph:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> Graph:
        return self.copy()

    def __contains__(self, v: object) -> bool:
        return v in self._adj

    def __iter__(self) -> Iterator[int]:
        return iter(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adj == other._adj

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._adj)}, edges={self._edge_count})"


__all__ = ["Graph"]
