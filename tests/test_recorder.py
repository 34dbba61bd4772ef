from __future__ import annotations

from typing import List

import pytest

from algotrace.algorithms import algorithms_by_family, algorithms_by_tag, get_algorithm, list_algorithms
from algotrace.algorithms.step import StepEvent
from algotrace.engine import Recorder, RunStatus, compare, run_traversal
from algotrace.model import GraphModel


def test_registry_covers_every_family() -> None:
    keys = {info.key for info in list_algorithms()}

    assert keys == {"bubble", "selection", "insertion", "merge", "heap", "bfs", "dfs", "dijkstra", "prim", "kruskal"}
    assert [i.key for i in algorithms_by_family("mst")] == ["prim", "kruskal"]
    assert get_algorithm("merge").stable
    assert not get_algorithm("heap").stable
    assert get_algorithm("nope") is None
    assert all(info.pseudocode for info in list_algorithms())
    assert [i.key for i in algorithms_by_tag("spanning-tree")] == ["prim", "kruskal"]


def test_recorder_counts_sort_operations() -> None:
    rec = Recorder()
    outcome = rec.run("bubble", [5, 3, 8, 1], delay=0)

    assert outcome.status == RunStatus.COMPLETED
    metrics = rec.metrics
    assert metrics.algo_label == "Bubble Sort"
    assert metrics.status == "completed"
    assert metrics.total_events == 15
    assert metrics.comparisons == 6
    assert metrics.swaps == 4
    assert metrics.writes == 4


def test_recorder_counts_traversal_operations(diamond_graph: GraphModel) -> None:
    rec = Recorder()
    rec.run("dijkstra", diamond_graph, "A", delay=0)

    assert rec.metrics.nodes_visited == 4
    assert rec.metrics.relaxations == 4
    assert rec.metrics.edges_committed == 3


def test_recorder_forwards_events(diamond_graph: GraphModel) -> None:
    forwarded: List[StepEvent] = []
    rec = Recorder(forward=forwarded.append)

    run_traversal("bfs", diamond_graph, "A", on_event=rec, delay=0)

    assert forwarded == rec.events
    assert rec.compute_metrics().nodes_visited == 4


def test_recorder_export_is_json_shaped(diamond_graph: GraphModel) -> None:
    rec = Recorder()
    rec.run("kruskal", diamond_graph, delay=0)

    snapshot = rec.export()

    assert snapshot["result"]["total_cost"] == 4
    assert snapshot["metrics"]["edges_committed"] == 3
    assert snapshot["events"][0] == {
        "kind": "edge-explore",
        "edge": {"from": "A", "to": "B", "weight": 1},
        "message": "Checking edge A-B (weight: 1)",
    }
    assert snapshot["events"][-1]["kind"] == "done"


def test_recorder_rejects_unknown_algorithm() -> None:
    with pytest.raises(ValueError):
        Recorder().run("bogo", [1, 2])


def test_compare_picks_fewer_steps() -> None:
    values = [1, 2, 3, 4, 5, 6]
    left, right = Recorder(), Recorder()
    left.run("insertion", values, delay=0)
    right.run("selection", values, delay=0)

    result = compare(left, right)

    # already sorted: insertion makes n-1 comparisons, selection n(n-1)/2
    assert result.left.comparisons == 5
    assert result.right.comparisons == 15
    assert result.winner_comparisons == "Insertion Sort"
    assert result.winner_swaps == "tie"
    assert result.to_dict()["left"]["algo_key"] == "insertion"
