"""
Conversion between Graph and numpy adjacency matrices.
"""

from __future__ import annotations

from typing import Optional, Sequence, cast

import numpy as np

from .graph import Graph
from .validation import InvalidMatrixError


def to_adjacency_matrix(graph: Graph) -> tuple[np.ndarray, list[int]]:
    """
    Compute the 0/1 adjacency matrix of ``graph``.

    Returns:
        Tuple of (matrix, vertices) where row/column ``k`` of the matrix
        corresponds to ``vertices[k]`` (vertex insertion order).
    """
    vertices = list(graph.vertices())
    index = {v: k for k, v in enumerate(vertices)}
    n = len(vertices)
    A = np.zeros((n, n), dtype=int)

    for u, v in graph.edges():
        A[index[u], index[v]] = 1
        A[index[v], index[u]] = 1

    return cast(np.ndarray, A), vertices


def from_adjacency_matrix(
    matrix: np.ndarray | Sequence[Sequence[float]],
    vertices: Optional[Sequence[int]] = None,
) -> Graph:
    """
    Build a graph from a symmetric adjacency matrix.

    Any nonzero entry is an edge. Rows with no nonzero entry produce no
    vertex, since graphs only hold vertices that touch an edge.

    Args:
        matrix: Square symmetric matrix with a zero diagonal
        vertices: Vertex identifier for each row; defaults to 0..n-1

    Raises:
        InvalidMatrixError: If the matrix is not square, not symmetric, has a
            nonzero diagonal, or ``vertices`` has the wrong length
    """
    A = np.asarray(matrix)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise InvalidMatrixError(f"Adjacency matrix must be square, got shape {A.shape}")
    if not np.array_equal(A != 0, (A != 0).T):
        raise InvalidMatrixError("Adjacency matrix must be symmetric")
    if np.any(np.diag(A) != 0):
        raise InvalidMatrixError("Adjacency matrix must have a zero diagonal (no self-loops)")

    n = A.shape[0]
    if vertices is None:
        vertices = range(n)
    elif len(vertices) != n:
        raise InvalidMatrixError(f"Expected {n} vertex labels, got {len(vertices)}")

    graph = Graph()
    rows, cols = np.nonzero(np.triu(A, k=1))
    for r, c in zip(rows.tolist(), cols.tolist()):
        graph.add_edge(int(vertices[r]), int(vertices[c]))

    return graph


__all__ = ["to_adjacency_matrix", "from_adjacency_matrix"]
