"""
Export functionality for graphs and their decompositions.

Example usage:
    from piece_planarity import check_planarity
    from piece_planarity.export import to_dot

    result = check_planarity([(0, 1), (1, 2), (2, 0), (0, 3), (3, 2)])
    with open("graph.dot", "w") as f:
        f.write(to_dot(result.pieces[0], highlight=result.cycle))
"""

from .dot import to_dot

__all__ = [
    "to_dot",
]
