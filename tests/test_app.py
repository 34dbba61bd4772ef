from __future__ import annotations

import pytest

from algotrace.main import app

DIAMOND = {
    "nodes": ["A", "B", "C", "D"],
    "edges": [
        {"from": "A", "to": "B", "weight": 1},
        {"from": "B", "to": "C", "weight": 2},
        {"from": "A", "to": "C", "weight": 4},
        {"from": "C", "to": "D", "weight": 1},
    ],
}


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_list_algorithms(client) -> None:
    response = client.get("/api/algorithms")

    assert response.status_code == 200
    cards = response.get_json()
    assert len(cards) == 10
    assert {c["family"] for c in cards} == {"sort", "traversal", "mst"}
    assert "fn" not in cards[0]


def test_sort_endpoint(client) -> None:
    response = client.post("/api/sort", json={"algorithm": "bubble", "values": [5, 3, 8, 1]})

    body = response.get_json()
    assert response.status_code == 200
    assert body["status"] == "completed"
    assert body["result"] == [1, 3, 5, 8]
    assert body["events"][0] == {
        "kind": "compare",
        "indices": [0, 1],
        "message": "Comparing elements at positions 0 and 1: 5 and 3",
    }
    assert body["metrics"]["swaps"] == 4


def test_traversal_endpoint_reports_unreachable_as_null(client) -> None:
    graph = {"nodes": DIAMOND["nodes"] + ["E"], "edges": DIAMOND["edges"]}

    response = client.post("/api/traversal", json={"algorithm": "dijkstra", "graph": graph, "start": "A"})

    body = response.get_json()
    assert response.status_code == 200
    assert body["distances"] == {"A": 0, "B": 1, "C": 3, "D": 4, "E": None}
    assert body["visit_order"] == ["A", "B", "C", "D"]


def test_traversal_endpoint_unknown_start(client) -> None:
    response = client.post("/api/traversal", json={"algorithm": "bfs", "graph": DIAMOND, "start": "Z"})

    assert response.status_code == 404
    assert response.get_json() == {"error": "Node 'Z' is not in the graph"}


def test_mst_endpoint(client) -> None:
    response = client.post("/api/mst", json={"algorithm": "prim", "graph": DIAMOND})

    body = response.get_json()
    assert response.status_code == 200
    assert body["total_cost"] == 4
    assert len(body["committed_edges"]) == 3


def test_compare_endpoint(client) -> None:
    response = client.post(
        "/api/compare",
        json={"family": "mst", "left": "prim", "right": "kruskal", "graph": DIAMOND},
    )

    body = response.get_json()
    assert response.status_code == 200
    assert body["left"]["algo_key"] == "prim"
    assert body["right"]["algo_key"] == "kruskal"
    assert body["winner_events"] == "Kruskal's Algorithm"


@pytest.mark.parametrize(
    "path, payload",
    [
        ("/api/sort", {"algorithm": "bogo", "values": [1]}),
        ("/api/sort", {"algorithm": ["bubble"], "values": [1]}),
        ("/api/sort", {"algorithm": "bubble"}),
        ("/api/sort", {"algorithm": "bubble", "values": "nope"}),
        ("/api/sort", {"algorithm": "bubble", "values": [1, "two"]}),
        ("/api/traversal", {"algorithm": "prim", "graph": DIAMOND, "start": "A"}),
        ("/api/traversal", {"algorithm": "bfs", "graph": DIAMOND, "start": [1]}),
        ("/api/mst", {"algorithm": "kruskal", "graph": {"edges": [{"from": "A"}]}}),
        ("/api/mst", {"algorithm": "kruskal", "graph": {"nodes": ["A"], "edges": [{"from": "A", "to": "A"}]}}),
        ("/api/compare", {"family": "sorting", "left": "bubble", "right": "heap"}),
        ("/api/compare", {"family": "traversal", "left": "bfs", "right": "dfs", "graph": DIAMOND, "start": [1]}),
    ],
)
def test_bad_requests(client, path: str, payload: dict) -> None:
    response = client.post(path, json=payload)

    assert response.status_code == 400
    assert "error" in response.get_json()


def test_non_object_body_is_rejected(client) -> None:
    response = client.post("/api/sort", json=[1, 2, 3])

    assert response.status_code == 400


def test_generators_are_seeded(client) -> None:
    first = client.post("/api/graph/generate", json={"nodes": 5, "seed": 11}).get_json()
    second = client.post("/api/graph/generate", json={"nodes": 5, "seed": 11}).get_json()
    values = client.post("/api/array/generate", json={"size": 8, "seed": 2}).get_json()

    assert first == second
    assert first["nodes"] == ["A", "B", "C", "D", "E"]
    assert len(values["values"]) == 8
