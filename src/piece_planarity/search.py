"""
Depth-first cycle and path search.

Both searches use an explicit stack and distinguish *seen* vertices (pushed,
possibly several times) from *explored* ones (popped and expanded once).
Parent pointers are recorded at push time, so a vertex pushed again by a
later vertex takes that vertex as its parent until it is explored.

All scratch structures are local to each call.
"""

from __future__ import annotations

from collections import deque
from typing import AbstractSet, Optional

from .graph import Graph


def find_cycle(graph: Graph, start: int) -> Optional[list[int]]:
    """
    Find a simple cycle through ``start``.

    The parent of ``start`` is overwritten every time ``start`` is pushed,
    even after it has been explored; this is what lets the search close a
    cycle back onto the start vertex.

    Args:
        graph: Graph to search
        start: Vertex the cycle must pass through

    Returns:
        The first cycle found with more than two vertices, as
        ``[start, parent(start), ...]`` walked back along parent pointers,
        or None if no such cycle closes through ``start``.

    Example:
        >>> g = Graph.from_edges([(0, 1), (1, 2), (2, 0)])
        >>> sorted(find_cycle(g, 0))
        [0, 1, 2]
    """
    stack: list[int] = [start]
    explored: set[int] = set()
    parent: dict[int, int] = {}

    while stack:
        current = stack.pop()
        if current in explored:
            continue
        explored.add(current)

        for adj in graph.neighbors(current):
            stack.append(adj)

            if adj not in explored or adj == start:
                parent[adj] = current

            # Closing edge back to start; a tree edge from start is length 2
            if adj == start and parent.get(current) != start:
                cycle: list[int] = []
                vertex = start
                while True:
                    cycle.append(vertex)
                    vertex = parent[vertex]
                    if vertex == start:
                        return cycle

    return None


def find_path(
    graph: Graph,
    v1: int,
    v2: int,
    forbidden: AbstractSet[int],
) -> Optional[list[int]]:
    """
    Find a simple path from ``v1`` to ``v2`` that avoids ``forbidden``.

    Args:
        graph: Graph to search
        v1: First endpoint
        v2: Second endpoint
        forbidden: Vertices the path may not enter

    Returns:
        ``[v1, ..., v2]`` in order, or None if ``v2`` is unreachable.
    """
    if v2 in forbidden:
        return None

    stack: list[int] = [v1]
    explored: set[int] = set()
    parent: dict[int, int] = {}

    while stack:
        current = stack.pop()
        if current in explored or current in forbidden:
            continue
        explored.add(current)

        for adj in graph.neighbors(current):
            stack.append(adj)

            if adj not in explored and adj not in forbidden:
                parent[adj] = current

            if adj == v2:
                path = [v2]
                vertex = v2
                while vertex != v1:
                    vertex = parent[vertex]
                    path.append(vertex)
                path.reverse()
                return path

    return None


def connected_components(graph: Graph) -> list[list[int]]:
    """
    Find connected components via BFS.

    Returns:
        List of components in vertex insertion order of their first vertex.
    """
    visited: set[int] = set()
    components: list[list[int]] = []

    for start in graph.vertices():
        if start in visited:
            continue

        component: list[int] = []
        queue: deque[int] = deque([start])
        visited.add(start)

        while queue:
            v = queue.popleft()
            component.append(v)
            for w in graph.neighbors(v):
                if w not in visited:
                    visited.add(w)
                    queue.append(w)

        components.append(component)

    return components


def is_forest(graph: Graph) -> bool:
    """Return True if the graph has no cycles at all."""
    components = connected_components(graph)
    return graph.number_of_edges() == graph.number_of_vertices() - len(components)


__all__ = ["find_cycle", "find_path", "connected_components", "is_forest"]
