import pytest

from netpath.domain.entities.network import Edge, Node
from netpath.domain.errors import UnknownNodeError
from netpath.domain.graph import Graph, build_adjacency, build_graph

A, B, C, D = Node("A", 0, 0), Node("B", 1, 0), Node("C", 1, 1), Node("D", 2, 1)


def test_node_identity_is_name_only():
    assert Node("A", 1, 2) == Node("A", 9, 9)
    assert hash(Node("A", 1, 2)) == hash(Node("A", 9, 9))
    assert Node("a") != Node("A")  # case-sensitive
    with pytest.raises(AttributeError):
        A.name = "Z"


def test_edge_equality_ignores_weight_but_not_direction():
    assert Edge(A, B, 5) == Edge(A, B, 9)
    assert Edge(A, B, 5) != Edge(B, A, 5)
    assert Edge(A, A, 1).is_loop


def test_adjacency_is_symmetric():
    adj = build_adjacency([Edge(A, B, 1), Edge(B, C, 2)])
    assert dict(adj[A]) == {B: 1}
    assert dict(adj[B]) == {A: 1, C: 2}
    assert dict(adj[C]) == {B: 2}


def test_adjacency_last_write_wins_for_repeated_pairs():
    adj = build_adjacency([Edge(A, B, 5), Edge(B, A, 3), Edge(A, B, 9)])
    assert adj[A][B] == 9
    assert adj[B][A] == 9


def test_self_loop_is_kept():
    adj = build_adjacency([Edge(A, A, 4)])
    assert dict(adj[A]) == {A: 4}


def test_isolated_nodes_get_empty_entries():
    adj = build_adjacency([Edge(A, B, 1)], nodes=[A, B, C])
    assert dict(adj[C]) == {}
    assert set(adj) == {A, B, C}


def test_adjacency_is_read_only():
    g = build_graph([A, B], [Edge(A, B, 1)])
    with pytest.raises(TypeError):
        g.adjacency[A][B] = 100
    with pytest.raises(TypeError):
        g.adjacency[C] = {}


def test_graph_rebuilds_on_edge_replacement():
    g = build_graph([A, B, C], [Edge(A, B, 1)])
    g2 = g.with_edges([Edge(B, C, 7)])
    assert g.weight(A, B) == 1
    assert dict(g2.neighbours(A)) == {}
    assert g2.weight(C, B) == 7
    assert g2.nodes == g.nodes


def test_unknown_node_lookup():
    g = build_graph([A], [])
    with pytest.raises(UnknownNodeError) as exc:
        g.neighbours(Node("Z"))
    assert exc.value.name == "Z"
    assert isinstance(exc.value, KeyError)


def test_graph_equality_uses_adjacency():
    g1 = Graph([A, B], [Edge(A, B, 1)])
    g2 = Graph([B, A], [Edge(B, A, 1)])
    g3 = Graph([A, B], [Edge(A, B, 2)])
    assert g1 == g2
    assert g1 != g3


def test_str_renders_adjacency_list():
    g = build_graph([A, B, C], [Edge(A, B, 1), Edge(A, C, 10)])
    assert str(g) == "Adjacency List:\nA --> B (1), C (10)\nB --> A (1)\nC --> A (10)\n"


def test_to_dict():
    g = build_graph([A, B], [Edge(A, B, 3)])
    assert g.to_dict() == {
        "nodes": [{"name": "A", "x": 0, "y": 0}, {"name": "B", "x": 1, "y": 0}],
        "edges": [{"source": "A", "target": "B", "distance": 3}],
    }


def test_isolated_node_renders_without_separator():
    E = Node("E", 5, 5)
    g = build_graph([A, B, E], [Edge(A, B, 2)])
    assert str(g) == "Adjacency List:\nA --> B (2)\nB --> A (2)\nE -->\n"


def test_graph_hash_follows_equality():
    g1 = Graph([A, B], [Edge(A, B, 1)])
    g2 = Graph([B, A], [Edge(B, A, 1)])
    assert hash(g1) == hash(g2)
    assert len({g1, g2, Graph([A, B], [Edge(A, B, 2)])}) == 2
    assert hash(build_graph([Node("A")], [])) == hash(build_graph([Node("A", 3, 3)], []))
