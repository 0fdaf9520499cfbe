"""Tests for piece decomposition."""

from piece_planarity import Graph, attachment_vertices, find_pieces


def _make_cycle(n: int) -> list[tuple[int, int]]:
    """Return edges for C_n."""
    return [(i, (i + 1) % n) for i in range(n)]


def _edge_set(graph: Graph) -> set[frozenset[int]]:
    return {frozenset(e) for e in graph.edges()}


class TestChords:
    """Tests for chord extraction."""

    def test_cycle_only_has_no_pieces(self):
        g = Graph.from_edges(_make_cycle(6))
        assert find_pieces(g, list(range(6))) == []

    def test_single_chord(self):
        g = Graph.from_edges(_make_cycle(4) + [(0, 2)])
        pieces = find_pieces(g, [0, 1, 2, 3])
        assert len(pieces) == 1
        assert _edge_set(pieces[0]) == {frozenset((0, 2))}
        assert pieces[0].number_of_edges() == 1

    def test_chord_removed_from_input(self):
        """Decomposition consumes the chords of its input graph."""
        g = Graph.from_edges(_make_cycle(4) + [(0, 2)])
        find_pieces(g, [0, 1, 2, 3])
        assert not g.contains_edge(0, 2)
        assert g.number_of_edges() == 4

    def test_cycle_edges_are_not_chords(self):
        """Consecutive cycle vertices, including last-first, never form chords."""
        g = Graph.from_edges(_make_cycle(5))
        assert find_pieces(g, [0, 1, 2, 3, 4]) == []
        assert g.number_of_edges() == 5

    def test_chords_in_cycle_order(self):
        g = Graph.from_edges(_make_cycle(6) + [(2, 5), (0, 3), (1, 4)])
        pieces = find_pieces(g, list(range(6)))
        assert [_edge_set(p) for p in pieces] == [
            {frozenset((0, 3))},
            {frozenset((1, 4))},
            {frozenset((2, 5))},
        ]


class TestOffCyclePieces:
    """Tests for pieces made of vertices off the cycle."""

    def test_single_vertex_piece(self):
        """K4 with a triangle as cycle leaves one star piece."""
        edges = [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
        g = Graph.from_edges(edges)
        pieces = find_pieces(g, [0, 2, 3])
        assert len(pieces) == 1
        piece = pieces[0]
        assert set(piece.vertices()) == {0, 1, 2, 3}
        assert piece.number_of_edges() == 3
        assert not piece.is_path()

    def test_separate_components(self):
        edges = _make_cycle(6) + [(6, 0), (6, 3), (7, 1), (7, 4)]
        g = Graph.from_edges(edges)
        pieces = find_pieces(g, list(range(6)))
        assert len(pieces) == 2
        assert set(pieces[0].vertices()) == {6, 0, 3}
        assert set(pieces[1].vertices()) == {7, 1, 4}

    def test_connected_off_cycle_vertices_form_one_piece(self):
        edges = _make_cycle(6) + [(6, 7), (6, 0), (7, 3)]
        g = Graph.from_edges(edges)
        pieces = find_pieces(g, list(range(6)))
        assert len(pieces) == 1
        assert _edge_set(pieces[0]) == {
            frozenset((6, 7)),
            frozenset((6, 0)),
            frozenset((7, 3)),
        }
        assert pieces[0].is_path()

    def test_traversal_stops_at_cycle(self):
        """Two pieces sharing an attachment vertex stay separate."""
        edges = _make_cycle(4) + [(4, 0), (4, 2), (5, 0), (5, 2)]
        g = Graph.from_edges(edges)
        pieces = find_pieces(g, [0, 1, 2, 3])
        assert len(pieces) == 2
        assert _edge_set(pieces[0]) == {frozenset((4, 0)), frozenset((4, 2))}
        assert _edge_set(pieces[1]) == {frozenset((5, 0)), frozenset((5, 2))}

    def test_chords_come_before_components(self):
        edges = _make_cycle(4) + [(1, 3), (4, 0), (4, 2)]
        g = Graph.from_edges(edges)
        pieces = find_pieces(g, [0, 1, 2, 3])
        assert len(pieces) == 2
        assert _edge_set(pieces[0]) == {frozenset((1, 3))}
        assert 4 in pieces[1]


class TestAttachments:
    """Tests for attachment vertex computation."""

    def test_attachments(self):
        piece = Graph.from_edges([(6, 0), (6, 3), (6, 7)])
        assert attachment_vertices(piece, [0, 1, 2, 3, 4, 5]) == {0, 3}

    def test_attachments_do_not_mutate_piece(self):
        piece = Graph.from_edges([(6, 0), (6, 3)])
        attachment_vertices(piece, [0, 1, 2, 3])
        assert set(piece.vertices()) == {6, 0, 3}
