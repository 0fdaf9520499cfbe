"""
Errors and input validation for planarity testing.

Provides the exception hierarchy used across the package and small
validation functions for edges and driver parameters. Raises descriptive
exceptions on invalid input.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class ValidationError(ValueError):
    """Base exception for invalid arguments."""

    pass


class InvalidEdgeError(ValidationError):
    """Raised when an edge is a self-loop or has non-integer endpoints."""

    pass


class InvalidMatrixError(ValidationError):
    """Raised when an adjacency matrix does not describe a simple graph."""

    pass


class PlanarityError(ValueError):
    """Base exception for faults raised by the decision procedure."""

    pass


class EmptyGraphError(PlanarityError):
    """Raised when a vertex is requested from a graph with no vertices."""

    pass


class NotBiconnectedError(PlanarityError):
    """Raised when the graph is not biconnected as seen from the cycle search."""

    pass


class RecursionDepthError(PlanarityError):
    """Raised when piece nesting exceeds the configured ``max_depth``."""

    pass


def validate_edge(edge: Sequence[Any]) -> tuple[int, int]:
    """
    Validate a single undirected edge.

    Args:
        edge: (u, v) pair of vertex identifiers

    Returns:
        Validated (u, v) tuple

    Raises:
        InvalidEdgeError: If the pair is malformed, non-integer or a self-loop
    """
    if len(edge) != 2:
        raise InvalidEdgeError(f"Edge must have 2 endpoints, got {len(edge)}")

    u, v = edge[0], edge[1]
    for endpoint in (u, v):
        if isinstance(endpoint, bool) or not isinstance(endpoint, int):
            raise InvalidEdgeError(
                f"Edge endpoints must be integers, got {type(endpoint).__name__}"
            )
    if u == v:
        raise InvalidEdgeError(f"Self-loop on vertex {u} is not allowed")

    return u, v


def validate_max_depth(max_depth: Optional[int]) -> Optional[int]:
    """
    Validate the recursion ceiling of the planarity driver.

    Args:
        max_depth: Maximum piece nesting depth, or None for no limit

    Returns:
        Validated depth

    Raises:
        ValidationError: If max_depth < 0
    """
    if max_depth is None:
        return None
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise ValidationError(f"max_depth must be an integer, got {type(max_depth).__name__}")
    if max_depth < 0:
        raise ValidationError(f"max_depth must be >= 0, got {max_depth}")
    return max_depth


__all__ = [
    "ValidationError",
    "InvalidEdgeError",
    "InvalidMatrixError",
    "PlanarityError",
    "EmptyGraphError",
    "NotBiconnectedError",
    "RecursionDepthError",
    "validate_edge",
    "validate_max_depth",
]
