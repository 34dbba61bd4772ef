"""
main.py — Algorithm Engine JSON API (Flask)
============================================
The HTTP surface a front-end talks to.  It renders nothing: every
route runs an engine to completion and returns the result together
with the full event stream for the client to animate at its own pace.

Routes:
  GET  /api/algorithms         – registry cards (label, pseudocode, complexity)
  POST /api/sort               – {algorithm, values}
  POST /api/traversal          – {algorithm, graph, start}
  POST /api/mst                – {algorithm, graph}
  POST /api/compare            – {family, left, right, values | graph [, start]}
  POST /api/graph/generate     – {nodes, prob, seed}
  POST /api/array/generate     – {size, seed}

`graph` is the GraphModel.to_dict() shape:
    {"nodes": ["A", "B"], "edges": [{"from": "A", "to": "B", "weight": 3}]}

Errors come back as {"error": message} with 400 (bad request / unknown
algorithm), 404 (unknown start node) or 409 (model busy).
"""

from flask import Flask, jsonify, request

from algotrace.algorithms import get_algorithm, list_algorithms
from algotrace.config import runtime_config
from algotrace.engine import Recorder, compare
from algotrace.errors import NotFoundError, RunInProgressError
from algotrace.logging import get_logger
from algotrace.model import ArrayModel, GraphModel

logger = get_logger("main")

app = Flask(__name__)


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
class InvalidRequest(ValueError):
    pass


def _body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidRequest("Request body must be a JSON object")
    return data


def _require(data: dict, name: str):
    if name not in data:
        raise InvalidRequest(f"Missing field '{name}'")
    return data[name]


def _graph_from(data: dict) -> GraphModel:
    raw = _require(data, "graph")
    if not isinstance(raw, dict):
        raise InvalidRequest("'graph' must be an object with 'nodes' and 'edges'")
    try:
        return GraphModel.from_dict(raw)
    except (KeyError, TypeError) as exc:
        raise InvalidRequest(f"Malformed graph: {exc}") from exc


def _algorithm_from(data: dict, family: str, field: str = "algorithm") -> str:
    key = _require(data, field)
    if not isinstance(key, str):
        raise InvalidRequest(f"'{field}' must be an algorithm key string")
    info = get_algorithm(key)
    if info is None or info.family != family:
        raise InvalidRequest(f"Unknown {family} algorithm: {key}")
    return key


def _start_from(data: dict):
    start = _require(data, "start")
    # node ids arrive as JSON strings or integers
    if not isinstance(start, (str, int)) or isinstance(start, bool):
        raise InvalidRequest("'start' must be a node id (string or integer)")
    return start


def _values_from(data: dict) -> list:
    values = _require(data, "values")
    if not isinstance(values, list) or not all(
        isinstance(v, (int, float)) and not isinstance(v, bool) for v in values
    ):
        raise InvalidRequest("'values' must be a list of numbers")
    return values


def _recorded(rec: Recorder, result) -> dict:
    out = result.to_dict()
    out["events"] = [e.to_dict() for e in rec.events]
    out["metrics"] = rec.metrics.to_dict()
    return out


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.errorhandler(ValueError)
def handle_bad_request(exc):
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(NotFoundError)
def handle_not_found(exc):
    return jsonify({"error": str(exc)}), 404


@app.errorhandler(RunInProgressError)
def handle_busy(exc):
    return jsonify({"error": str(exc)}), 409


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@app.route("/api/algorithms", methods=["GET"])
def api_algorithms():
    return jsonify([a.to_dict() for a in list_algorithms()])


# ---------------------------------------------------------------------------
# API: Runs
# ---------------------------------------------------------------------------
@app.route("/api/sort", methods=["POST"])
def api_sort():
    data = _body()
    rec = Recorder()
    result = rec.run(_algorithm_from(data, "sort"), _values_from(data), delay=0)
    return jsonify(_recorded(rec, result))


@app.route("/api/traversal", methods=["POST"])
def api_traversal():
    data = _body()
    graph = _graph_from(data)
    rec = Recorder()
    result = rec.run(_algorithm_from(data, "traversal"), graph, _start_from(data), delay=0)
    return jsonify(_recorded(rec, result))


@app.route("/api/mst", methods=["POST"])
def api_mst():
    data = _body()
    graph = _graph_from(data)
    rec = Recorder()
    result = rec.run(_algorithm_from(data, "mst"), graph, delay=0)
    return jsonify(_recorded(rec, result))


@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = _body()
    family = _require(data, "family")
    if family == "sort":
        values = _values_from(data)
        args = (values,)
    elif family == "traversal":
        graph = _graph_from(data)
        start = _start_from(data)
        args = (graph, start)
    elif family == "mst":
        graph = _graph_from(data)
        args = (graph,)
    else:
        raise InvalidRequest(f"Unknown family: {family}")

    left, right = Recorder(), Recorder()
    left.run(_algorithm_from(data, family, "left"), *args, delay=0)
    right.run(_algorithm_from(data, family, "right"), *args, delay=0)
    return jsonify(compare(left, right).to_dict())


# ---------------------------------------------------------------------------
# API: Input generation
# ---------------------------------------------------------------------------
@app.route("/api/graph/generate", methods=["POST"])
def api_graph_generate():
    data = request.get_json(silent=True) or {}
    g = GraphModel.generate_random(
        num_nodes=int(data.get("nodes", 6)),
        edge_probability=float(data.get("prob", 0.3)),
        seed=data.get("seed", runtime_config().seed),
    )
    return jsonify(g.to_dict())


@app.route("/api/array/generate", methods=["POST"])
def api_array_generate():
    data = request.get_json(silent=True) or {}
    arr = ArrayModel.generate_random(
        size=int(data.get("size", 20)),
        seed=data.get("seed", runtime_config().seed),
    )
    return jsonify({"values": arr.values()})


if __name__ == "__main__":
    logger.info("Algorithm engine API listening on http://localhost:5000")
    app.run(debug=True, port=5000)
