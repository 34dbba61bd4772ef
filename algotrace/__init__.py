"""
algotrace
=========
Instrumented algorithm engines that stream step events for animation.

    from algotrace import GraphModel, run_traversal

    g = GraphModel.from_edges([("A", "B", 1), ("B", "C", 2)])
    result = run_traversal("dijkstra", g, "A", on_event=print)
"""

from algotrace.errors import AlgotraceError, NotFoundError, RunInProgressError
from algotrace.model import ArrayModel, Edge, GraphModel, UnionFind
from algotrace.algorithms import EventKind, StepEvent, get_algorithm, list_algorithms
from algotrace.engine import (
    RunHandle, RunStatus, StepTrace,
    SortResult, TraversalResult, MSTResult,
    run_sort, run_traversal, run_mst,
    Recorder, compare,
)

__version__ = "1.0.0"

__all__ = [
    "AlgotraceError", "NotFoundError", "RunInProgressError",
    "ArrayModel", "Edge", "GraphModel", "UnionFind",
    "EventKind", "StepEvent", "get_algorithm", "list_algorithms",
    "RunHandle", "RunStatus", "StepTrace",
    "SortResult", "TraversalResult", "MSTResult",
    "run_sort", "run_traversal", "run_mst",
    "Recorder", "compare",
]
