"""Tests for the core Graph data structure."""

import pytest

from simplegraph import Graph, UnknownVertexError


class TestConstruction:
    """Tests for Graph construction and flags."""

    def test_defaults(self):
        """Test that a new graph is undirected, unweighted and empty."""
        G = Graph()
        assert G.directed is False
        assert G.weighted is False
        assert G.vertices() == []
        assert G.edges() == []
        assert len(G) == 0

    def test_flags(self):
        """Test that flags are stored."""
        G = Graph(directed=True, weighted=True)
        assert G.directed is True
        assert G.weighted is True

    def test_flags_read_only(self):
        """Test that flags cannot be changed after construction."""
        G = Graph()
        with pytest.raises(AttributeError):
            G.directed = True
        with pytest.raises(AttributeError):
            G.weighted = True

    def test_repr(self):
        """Test repr shows flags and sizes."""
        G = Graph(weighted=True)
        G.add_edge("A", "B", 1)
        assert repr(G) == "Graph(directed=False, weighted=True, vertices=2, edges=1)"


class TestAddEdge:
    """Tests for add_edge."""

    def test_returns_edge_identifier(self):
        """Test that add_edge returns "u,v"."""
        G = Graph()
        assert G.add_edge("Foo", "Bar") == "Foo,Bar"
        assert G.add_edge(1, 2) == "1,2"

    def test_creates_both_vertices(self):
        """Test that both endpoints become vertices."""
        G = Graph(directed=True)
        G.add_edge("A", "B")
        assert set(G.vertices()) == {"A", "B"}
        assert "B" in G
        assert G.neighbors("B") == []

    def test_undirected_is_symmetric(self, friends_graph, friends_edges):
        """Test that every undirected edge is stored both ways with its weight."""
        for u, v, w in friends_edges:
            assert friends_graph.weight(u, v) == w
            assert friends_graph.weight(v, u) == w
            assert v in friends_graph.neighbors(u)
            assert u in friends_graph.neighbors(v)

    def test_directed_not_mirrored(self):
        """Test that a directed edge does not create its reverse."""
        G = Graph(directed=True, weighted=True)
        G.add_edge("A", "B", 5)

        assert G.neighbors("A") == ["B"]
        assert G.neighbors("B") == []
        assert G.weight("A", "B") == 5
        assert G.weight("B", "A") is None

    def test_multi_edges_preserved(self):
        """Test that adding the same edge twice keeps both entries."""
        G = Graph(weighted=True)
        G.add_edge("A", "B", 1)
        G.add_edge("A", "B", 4)

        assert G.neighbors("A") == ["B", "B"]
        assert G.neighbors("B") == ["A", "A"]
        # Last weight wins
        assert G.weight("A", "B") == 4
        assert G.weight("B", "A") == 4

    def test_self_loop(self):
        """Test that self-loops are allowed."""
        G = Graph()
        G.add_edge("A", "A")
        assert G.vertices() == ["A"]
        assert G.neighbors("A") == ["A", "A"]

    def test_default_weight_zero(self):
        """Test that the default weight on a weighted graph is 0, not absent."""
        G = Graph(weighted=True)
        G.add_edge("A", "B")
        assert G.weight("A", "B") == 0
        assert G.weight("A", "B") is not None


class TestIntrospection:
    """Tests for vertices, neighbors, weight and edges."""

    def test_vertices_insertion_order(self, friends_graph):
        """Test vertices come back in first-appearance order."""
        assert friends_graph.vertices() == [
            "Joe", "Bob", "Mike", "Sam", "Kelly", "Vic", "Finn", "Jess",
        ]

    def test_neighbors_insertion_order(self, friends_graph):
        """Test neighbours keep insertion order."""
        assert friends_graph.neighbors("Vic") == ["Kelly", "Finn", "Jess", "Mike"]
        assert friends_graph.neighbors("Mike") == ["Joe", "Bob", "Vic"]

    def test_neighbors_returns_copy(self):
        """Test that mutating the returned list does not touch the graph."""
        G = Graph()
        G.add_edge("A", "B")
        G.neighbors("A").append("Z")
        assert G.neighbors("A") == ["B"]

    def test_neighbors_unknown_vertex(self):
        """Test that neighbors raises UnknownVertexError for unknown vertices."""
        G = Graph()
        G.add_edge("A", "B")

        with pytest.raises(UnknownVertexError) as excinfo:
            G.neighbors("Z")
        assert excinfo.value.vertex == "Z"
        assert "Z" in str(excinfo.value)

    def test_unknown_vertex_is_key_error(self):
        """Test that UnknownVertexError can be caught as KeyError."""
        with pytest.raises(KeyError):
            Graph().neighbors("A")

    def test_weight_unweighted_graph(self):
        """Test that weight returns None on an unweighted graph."""
        G = Graph()
        G.add_edge("A", "B", 7)
        assert G.weight("A", "B") is None

    def test_weight_unknown_vertices(self):
        """Test that weight does not validate its arguments."""
        G = Graph(weighted=True)
        assert G.weight("X", "Y") is None

    def test_has_vertex(self):
        """Test membership helpers."""
        G = Graph()
        G.add_edge("A", "B")
        assert G.has_vertex("A")
        assert not G.has_vertex("C")
        assert "B" in G
        assert "C" not in G
        assert len(G) == 2

    def test_membership_agrees_with_has_vertex(self):
        """Test that the in operator and has_vertex give the same answer."""
        G = Graph(directed=True)
        G.add_edge("A", "B")
        for vertex in ("A", "B", "C", None):
            assert (vertex in G) == G.has_vertex(vertex)

    def test_edges(self):
        """Test that edges lists each add_edge call once."""
        G = Graph(weighted=True)
        G.add_edge("A", "B", 1)
        G.add_edge("B", "C", 2)
        G.add_edge("A", "B", 3)

        assert G.edges() == [("A", "B", 3), ("B", "C", 2), ("A", "B", 3)]

    def test_edges_unweighted(self):
        """Test that unweighted edges carry None."""
        G = Graph(directed=True)
        G.add_edge("A", "B")
        assert G.edges() == [("A", "B", None)]

    def test_cost(self):
        """Test cost falls back to 1 on unweighted graphs."""
        weighted = Graph(weighted=True)
        weighted.add_edge("A", "B", 0)
        assert weighted.cost("A", "B") == 0

        unweighted = Graph()
        unweighted.add_edge("A", "B")
        assert unweighted.cost("A", "B") == 1
