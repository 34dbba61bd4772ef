from __future__ import annotations

import pytest

from algotrace.engine import RunHandle
from algotrace.errors import NotFoundError, RunInProgressError
from algotrace.model import ArrayModel, Edge, GraphModel, UnionFind


# ---------------------------------------------------------------------------
# ArrayModel
# ---------------------------------------------------------------------------
def test_array_model_copies_its_input() -> None:
    source = [3, 1, 2]
    array = ArrayModel(source)
    array.swap(0, 1)

    assert array.values() == [1, 3, 2]
    assert source == [3, 1, 2]


def test_array_model_compares_through_key() -> None:
    array = ArrayModel([(2, "a"), (1, "b"), (2, "c")], key=lambda item: item[0])

    assert array.greater(0, 1)
    assert not array.greater(0, 2)
    assert array.less_or_equal(0, 2)


def test_array_model_reset_refused_while_busy() -> None:
    array = ArrayModel([1, 2])
    handle = RunHandle()
    array.claim(handle)

    with pytest.raises(RunInProgressError):
        array.reset([3])

    array.release(handle)
    array.reset([3])
    assert array.values() == [3]


def test_generate_random_array_is_seeded() -> None:
    first = ArrayModel.generate_random(size=12, seed=42).values()
    second = ArrayModel.generate_random(size=12, seed=42).values()

    assert first == second
    assert len(first) == 12
    assert all(1 <= v <= 100 for v in first)


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
def test_edge_is_undirected_for_equality() -> None:
    forward = Edge("A", "B", 3)
    backward = forward.oriented("B")

    assert backward.source == "B" and backward.target == "A"
    assert forward == backward
    assert hash(forward) == hash(backward)
    assert forward.other_end("A") == "B"
    assert forward.other_end("Z") is None


def test_edge_is_immutable() -> None:
    edge = Edge("A", "B", 3)
    with pytest.raises(AttributeError):
        edge.weight = 5


def test_edge_dict_shape() -> None:
    edge = Edge("A", "B", 3)

    assert edge.to_dict() == {"from": "A", "to": "B", "weight": 3}
    assert Edge.from_dict({"from": "A", "to": "B"}).weight == 1


# ---------------------------------------------------------------------------
# GraphModel
# ---------------------------------------------------------------------------
def test_adjacency_follows_insertion_order(diamond_graph: GraphModel) -> None:
    assert [n for n, _ in diamond_graph.neighbours("C")] == ["B", "A", "D"]
    assert diamond_graph.node_ids() == ["A", "B", "C", "D"]
    assert diamond_graph.degree("C") == 3


def test_add_edge_rejects_unknown_endpoint() -> None:
    graph = GraphModel()
    graph.add_node("A")

    with pytest.raises(NotFoundError) as excinfo:
        graph.add_edge("A", "Q", 2)
    assert excinfo.value.node_id == "Q"
    assert str(excinfo.value) == "Node 'Q' is not in the graph"


def test_add_edge_rejects_self_loops_and_duplicates(diamond_graph: GraphModel) -> None:
    with pytest.raises(ValueError):
        diamond_graph.add_edge("A", "A", 1)
    with pytest.raises(ValueError):
        diamond_graph.add_edge("B", "A", 7)


def test_add_node_is_idempotent(diamond_graph: GraphModel) -> None:
    diamond_graph.add_node("A")
    assert diamond_graph.node_count() == 4


def test_graph_topology_locked_during_run(diamond_graph: GraphModel) -> None:
    handle = RunHandle()
    diamond_graph.claim(handle)

    with pytest.raises(RunInProgressError):
        diamond_graph.add_edge("A", "D", 9)
    with pytest.raises(RunInProgressError):
        diamond_graph.claim(RunHandle())

    diamond_graph.release(handle)
    diamond_graph.add_edge("A", "D", 9)
    assert diamond_graph.edge_count() == 5


def test_graph_dict_round_trip_keeps_isolated_nodes(split_graph: GraphModel) -> None:
    rebuilt = GraphModel.from_dict(split_graph.to_dict())

    assert rebuilt.node_ids() == ["A", "B", "C", "D", "E"]
    assert rebuilt.edges() == split_graph.edges()


def test_generate_random_graph_is_connected_and_seeded() -> None:
    first = GraphModel.generate_random(num_nodes=8, edge_probability=0.2, seed=3)
    second = GraphModel.generate_random(num_nodes=8, edge_probability=0.2, seed=3)

    assert first.to_dict() == second.to_dict()
    assert first.node_ids() == list("ABCDEFGH")
    assert first.edge_count() >= 7


# ---------------------------------------------------------------------------
# UnionFind
# ---------------------------------------------------------------------------
def test_union_find_merges_and_detects_cycles() -> None:
    uf = UnionFind("ABCD")

    assert uf.union("A", "B")
    assert uf.union("C", "D")
    assert not uf.union("B", "A")
    assert uf.union("B", "D")
    assert uf.connected("A", "C")
    assert uf.merges == 3
    assert list(uf.groups().values()) == [["A", "B", "C", "D"]]


def test_union_find_first_argument_wins_on_equal_rank() -> None:
    uf = UnionFind(["x", "y"])
    uf.union("y", "x")

    assert uf.find("x") == "y"


def test_union_find_unknown_element() -> None:
    with pytest.raises(KeyError):
        UnionFind().find("nope")
