"""
piece-planarity: planarity testing by cycle decomposition.

A graph is decomposed into pieces relative to one of its cycles; each piece
that is not a path is tested recursively, and the pieces' interlacement
graph must be bipartite for the graph to be planar.

Modules:
- graph: undirected simple graph container
- search: depth-first cycle and path search
- pieces: decomposition into pieces relative to a cycle
- interlacement: interlacement graph and bipartiteness test
- planarity: the recursive decision procedure
- io, convert, export: edge-list files, numpy matrices, Graphviz DOT
"""

__version__ = "0.1.0"

from .convert import from_adjacency_matrix, to_adjacency_matrix
from .graph import Graph
from .interlacement import interlaces, is_bipartite, make_interlacement_graph
from .io import GraphInputWarning, parse_edge_list, read_edge_list, write_edge_list
from .pieces import attachment_vertices, find_pieces
from .planarity import (
    PlanarityResult,
    check_planarity,
    is_planar,
    planarity_testing,
)
from .search import connected_components, find_cycle, find_path, is_forest
from .validation import (
    EmptyGraphError,
    InvalidEdgeError,
    InvalidMatrixError,
    NotBiconnectedError,
    PlanarityError,
    RecursionDepthError,
    ValidationError,
)

__all__ = [
    "__version__",
    # Graph
    "Graph",
    # Search
    "find_cycle",
    "find_path",
    "connected_components",
    "is_forest",
    # Decomposition
    "find_pieces",
    "attachment_vertices",
    # Conflict analysis
    "interlaces",
    "make_interlacement_graph",
    "is_bipartite",
    # Planarity
    "PlanarityResult",
    "check_planarity",
    "is_planar",
    "planarity_testing",
    # Input and conversion
    "GraphInputWarning",
    "parse_edge_list",
    "read_edge_list",
    "write_edge_list",
    "to_adjacency_matrix",
    "from_adjacency_matrix",
    # Errors
    "ValidationError",
    "InvalidEdgeError",
    "InvalidMatrixError",
    "PlanarityError",
    "EmptyGraphError",
    "NotBiconnectedError",
    "RecursionDepthError",
]
