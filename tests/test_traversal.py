from __future__ import annotations

import math
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from algotrace.algorithms.step import EventKind, StepEvent
from algotrace.engine import RunStatus, run_traversal
from algotrace.errors import NotFoundError
from algotrace.model import GraphModel

from tests.helpers import brute_force_distances

_graph_params = st.tuples(
    st.integers(min_value=1, max_value=9),
    st.floats(min_value=0.0, max_value=1.0),
    st.integers(min_value=0, max_value=10_000),
)


def _random_graph(params) -> GraphModel:
    num_nodes, prob, seed = params
    return GraphModel.generate_random(num_nodes=num_nodes, edge_probability=prob, seed=seed)


def _kinds(events: List[StepEvent]) -> List[str]:
    return [e.kind.value for e in events]


# ---------------------------------------------------------------------------
# Worked example
# ---------------------------------------------------------------------------
def test_dijkstra_worked_example(diamond_graph: GraphModel) -> None:
    received: List[StepEvent] = []
    outcome = run_traversal("dijkstra", diamond_graph, "A", on_event=received.append, delay=0)

    assert outcome.status == RunStatus.COMPLETED
    assert outcome.distances == {"A": 0, "B": 1, "C": 3, "D": 4}
    assert outcome.visit_order == ["A", "B", "C", "D"]
    assert outcome.path_to("D") == ["A", "B", "C", "D"]

    updates = [(e.node, e.value) for e in received if e.kind == EventKind.DISTANCE_UPDATE]
    assert updates == [("B", 1), ("C", 4), ("C", 3), ("D", 4)]
    visits = [(e.node, e.value) for e in received if e.kind == EventKind.VISIT]
    assert visits == [("A", 0), ("B", 1), ("C", 3), ("D", 4)]


def test_dijkstra_breaks_distance_ties_in_discovery_order() -> None:
    graph = GraphModel.from_edges([("S", "Z", 1), ("S", "Y", 1)])

    outcome = run_traversal("dijkstra", graph, "S", delay=0)

    assert outcome.visit_order == ["S", "Z", "Y"]
    assert outcome.distances == {"S": 0, "Z": 1, "Y": 1}


def test_bfs_worked_example(diamond_graph: GraphModel) -> None:
    received: List[StepEvent] = []
    outcome = run_traversal("bfs", diamond_graph, "A", on_event=received.append, delay=0)

    assert outcome.visit_order == ["A", "B", "C", "D"]
    assert outcome.parents == {"A": None, "B": "A", "C": "A", "D": "C"}
    assert outcome.distances is None
    assert _kinds(received) == [
        "visit", "edge-explore", "edge-explore",
        "visit", "edge-commit", "edge-explore",
        "visit", "edge-commit", "edge-explore",
        "visit", "edge-commit",
        "done",
    ]
    explored = [(e.edge.source, e.edge.target) for e in received if e.kind == EventKind.EDGE_EXPLORE]
    assert explored == [("A", "B"), ("A", "C"), ("B", "C"), ("C", "D")]


def test_dfs_worked_example(diamond_graph: GraphModel) -> None:
    received: List[StepEvent] = []
    outcome = run_traversal("dfs", diamond_graph, "A", on_event=received.append, delay=0)

    assert outcome.visit_order == ["A", "B", "C", "D"]
    assert outcome.parents == {"A": None, "B": "A", "C": "B", "D": "C"}
    paths = [e.overlay["path"] for e in received if e.kind == EventKind.VISIT]
    assert paths == [("A",), ("A", "B"), ("A", "B", "C"), ("A", "B", "C", "D")]


def test_bfs_and_dfs_orders_differ_on_branching_graph() -> None:
    graph = GraphModel.from_edges([("A", "B", 1), ("A", "C", 1), ("B", "D", 1)])

    bfs = run_traversal("bfs", graph, "A", delay=0)
    dfs = run_traversal("dfs", graph, "A", delay=0)

    assert bfs.visit_order == ["A", "B", "C", "D"]
    assert dfs.visit_order == ["A", "B", "D", "C"]


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------
@settings(max_examples=40, deadline=None)
@given(params=_graph_params)
def test_bfs_and_dfs_visit_same_nodes_once(params) -> None:
    graph = _random_graph(params)
    start = graph.node_ids()[0]

    bfs = run_traversal("bfs", graph, start, delay=0)
    dfs = run_traversal("dfs", graph, start, delay=0)

    assert set(bfs.visit_order) == set(dfs.visit_order) == set(graph.node_ids())
    assert len(bfs.visit_order) == len(set(bfs.visit_order))
    assert len(dfs.visit_order) == len(set(dfs.visit_order))
    assert bfs.visit_order[0] == dfs.visit_order[0] == start


@settings(max_examples=40, deadline=None)
@given(params=_graph_params)
def test_dijkstra_matches_brute_force(params) -> None:
    graph = _random_graph(params)
    start = graph.node_ids()[-1]

    outcome = run_traversal("dijkstra", graph, start, delay=0)

    assert outcome.distances == brute_force_distances(graph, start)


@settings(max_examples=30, deadline=None)
@given(params=_graph_params, kind=st.sampled_from(["bfs", "dfs", "dijkstra"]))
def test_traversal_streams_are_deterministic(params, kind: str) -> None:
    graph = _random_graph(params)
    start = graph.node_ids()[0]
    first: List[StepEvent] = []
    second: List[StepEvent] = []

    run_traversal(kind, graph, start, on_event=first.append, delay=0)
    run_traversal(kind, graph, start, on_event=second.append, delay=0)

    assert first == second


@settings(max_examples=30, deadline=None)
@given(params=_graph_params, kind=st.sampled_from(["bfs", "dfs", "dijkstra"]))
def test_every_visited_node_but_start_gets_one_commit(params, kind: str) -> None:
    graph = _random_graph(params)
    start = graph.node_ids()[0]
    received: List[StepEvent] = []

    outcome = run_traversal(kind, graph, start, on_event=received.append, delay=0)

    committed = [e.edge.target for e in received if e.kind == EventKind.EDGE_COMMIT]
    assert committed == outcome.visit_order[1:]


# ---------------------------------------------------------------------------
# Edge cases
# ---------------------------------------------------------------------------
def test_unreachable_nodes_keep_infinite_distance(split_graph: GraphModel) -> None:
    outcome = run_traversal("dijkstra", split_graph, "A", delay=0)

    assert outcome.distances["B"] == 1
    assert math.isinf(outcome.distances["C"])
    assert math.isinf(outcome.distances["E"])
    assert outcome.visit_order == ["A", "B"]
    assert outcome.path_to("C") == []
    assert outcome.to_dict()["distances"]["E"] is None


@pytest.mark.parametrize("kind", ["bfs", "dfs", "dijkstra"])
def test_missing_start_raises_before_any_event(diamond_graph: GraphModel, kind: str) -> None:
    received: List[StepEvent] = []

    with pytest.raises(NotFoundError):
        run_traversal(kind, diamond_graph, "Z", on_event=received.append, delay=0)

    assert received == []
    assert not diamond_graph.is_busy


@pytest.mark.parametrize("kind", ["bfs", "dfs", "dijkstra"])
def test_empty_graph_completes_without_events(kind: str) -> None:
    received: List[StepEvent] = []

    outcome = run_traversal(kind, GraphModel(), "A", on_event=received.append, delay=0)

    assert outcome.status == RunStatus.COMPLETED
    assert outcome.visit_order == []
    assert received == []


@pytest.mark.parametrize("kind", ["bfs", "dfs", "dijkstra"])
def test_single_node_graph(kind: str) -> None:
    graph = GraphModel()
    graph.add_node("solo")
    received: List[StepEvent] = []

    outcome = run_traversal(kind, graph, "solo", on_event=received.append, delay=0)

    assert outcome.visit_order == ["solo"]
    assert _kinds(received) == ["visit", "done"]


def test_unknown_traversal_kind(diamond_graph: GraphModel) -> None:
    with pytest.raises(ValueError):
        run_traversal("astar", diamond_graph, "A", delay=0)
