"""Tests for DOT export."""

from piece_planarity import Graph, check_planarity
from piece_planarity.export import to_dot


class TestDotExport:
    """Tests for to_dot."""

    def test_structure(self):
        g = Graph.from_edges([(0, 1), (1, 2), (2, 0)])
        dot = to_dot(g)
        lines = dot.splitlines()
        assert lines[0] == "graph G {"
        assert lines[-1] == "}"
        assert "  0 -- 1;" in lines
        assert "  0 -- 2;" in lines
        assert "  1 -- 2;" in lines
        assert "->" not in dot

    def test_every_vertex_listed(self):
        g = Graph.from_edges([(0, 1), (1, 2)])
        lines = to_dot(g).splitlines()
        for v in (0, 1, 2):
            assert f"  {v};" in lines

    def test_name_quoted(self):
        dot = to_dot(Graph.from_edges([(0, 1)]), name="my graph")
        assert dot.startswith('graph "my graph" {')

    def test_negative_vertex_quoted(self):
        dot = to_dot(Graph.from_edges([(-1, 2)]))
        assert '"-1" -- 2;' in dot

    def test_highlight_cycle(self):
        g = Graph.from_edges([(0, 1), (1, 2), (2, 0), (2, 3)])
        dot = to_dot(g, highlight=[0, 1, 2])
        assert "  0 -- 1 [color=red];" in dot
        assert "  1 -- 2 [color=red];" in dot
        assert "  0 -- 2 [color=red];" in dot
        assert "  2 -- 3;" in dot
        assert "  3;" in dot
        assert "  2 [color=red];" in dot

    def test_attribute_blocks(self):
        dot = to_dot(
            Graph.from_edges([(0, 1)]),
            graph_attrs={"rankdir": "LR"},
            node_attrs={"shape": "circle"},
            edge_attrs={"color": "gray"},
        )
        assert "  graph [rankdir=LR];" in dot
        assert "  node [shape=circle];" in dot
        assert "  edge [color=gray];" in dot

    def test_piece_with_cycle(self):
        result = check_planarity([(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)])
        dot = to_dot(result.pieces[0], highlight=result.cycle)
        assert dot.count(" -- ") == 3
