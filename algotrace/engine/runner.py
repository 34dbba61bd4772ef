"""
runner.py — Engine Entry Points
===============================
    run_sort(kind, values, on_event, handle, delay, key)   -> SortResult
    run_traversal(kind, graph, start, on_event, handle, delay) -> TraversalResult
    run_mst(kind, graph, on_event, handle, delay)          -> MSTResult

Each entry point:
  1. Looks the algorithm up in the registry (ValueError if the key is
     unknown or belongs to another family).
  2. Validates what must be validated before ANY event (start node).
  3. Claims the model for the handle (RunInProgressError if busy).
  4. Lets a StepTrace drive the generator.
  5. Packs the per-run state into a result carrying `status`.

`delay=None` means "use the configured default" (ALGOTRACE_SPEED).
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from algotrace.algorithms import AlgoInfo, get_algorithm
from algotrace.algorithms.state import MSTState, TraversalState
from algotrace.algorithms.step import StepEvent
from algotrace.config import runtime_config
from algotrace.engine.trace import RunHandle, RunStatus, StepTrace, exclusive_run
from algotrace.errors import NotFoundError, RunInProgressError
from algotrace.logging import get_logger
from algotrace.model.array import ArrayModel
from algotrace.model.edge import Edge, NodeId
from algotrace.model.graph import GraphModel

logger = get_logger("engine.runner")

EventCallback = Callable[[StepEvent], None]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
@dataclass
class SortResult:
    status: RunStatus
    result: List[Any] = field(default_factory=list)

    @property
    def completed(self) -> bool:
        return self.status == RunStatus.COMPLETED

    def to_dict(self) -> dict:
        return {"status": self.status.value, "result": list(self.result)}


@dataclass
class TraversalResult:
    status:      RunStatus
    visit_order: List[NodeId]                   = field(default_factory=list)
    distances:   Optional[Dict[NodeId, float]]  = None
    parents:     Dict[NodeId, Optional[NodeId]] = field(default_factory=dict)

    @property
    def completed(self) -> bool:
        return self.status == RunStatus.COMPLETED

    def path_to(self, target: NodeId) -> List[NodeId]:
        """Start → target along the traversal tree; [] if target was not reached."""
        if target not in self.parents:
            return []
        path: List[NodeId] = []
        cur: Optional[NodeId] = target
        while cur is not None:
            path.append(cur)
            cur = self.parents.get(cur)
        path.reverse()
        return path

    def to_dict(self) -> dict:
        out = {
            "status":      self.status.value,
            "visit_order": list(self.visit_order),
            "parents":     dict(self.parents),
        }
        if self.distances is not None:
            # JSON has no infinity
            out["distances"] = {
                n: (None if d == float("inf") else d) for n, d in self.distances.items()
            }
        return out


@dataclass
class MSTResult:
    status:          RunStatus
    committed_edges: List[Edge] = field(default_factory=list)
    total_cost:      float      = 0

    @property
    def completed(self) -> bool:
        return self.status == RunStatus.COMPLETED

    def to_dict(self) -> dict:
        return {
            "status":          self.status.value,
            "committed_edges": [e.to_dict() for e in self.committed_edges],
            "total_cost":      self.total_cost,
        }


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------
def run_sort(
    kind: str,
    values: Union[Sequence[Any], ArrayModel],
    on_event: Optional[EventCallback] = None,
    handle: Optional[RunHandle] = None,
    delay: Any = None,
    key: Optional[Callable[[Any], Any]] = None,
) -> SortResult:
    """
    Sort `values` ascending with algorithm `kind`, streaming StepEvents.

    A plain sequence is copied into a fresh ArrayModel (the caller's list
    is never mutated) compared through `key`.  An ArrayModel is sorted in
    place with its own key and claimed for the duration of the run.
    """
    info = _lookup(kind, "sort")
    array = values if isinstance(values, ArrayModel) else ArrayModel(values, key=key)

    status = _drive(info, array, info.fn(array), on_event, handle, delay, size=len(array))
    return SortResult(status=status, result=array.values())


def run_traversal(
    kind: str,
    graph: GraphModel,
    start: NodeId,
    on_event: Optional[EventCallback] = None,
    handle: Optional[RunHandle] = None,
    delay: Any = None,
) -> TraversalResult:
    """
    Traverse `graph` from `start` with bfs / dfs / dijkstra.

    Raises NotFoundError (before any event) if the graph has nodes but
    `start` is not one of them.
    """
    info = _lookup(kind, "traversal")
    if graph.node_count() and not graph.has_node(start):
        raise NotFoundError(start)
    if kind == "dijkstra" and graph.has_negative_edges():
        logger.warning("Graph has negative edge weights; Dijkstra distances are undefined")

    state = TraversalState()
    status = _drive(info, graph, info.fn(graph, start, state), on_event, handle, delay, size=graph.node_count())
    return TraversalResult(
        status=status,
        visit_order=list(state.visit_order),
        distances=dict(state.distances) if kind == "dijkstra" else None,
        parents=dict(state.parents),
    )


def run_mst(
    kind: str,
    graph: GraphModel,
    on_event: Optional[EventCallback] = None,
    handle: Optional[RunHandle] = None,
    delay: Any = None,
) -> MSTResult:
    """Build a minimum spanning tree (forest, if disconnected) with prim / kruskal."""
    info = _lookup(kind, "mst")

    state = MSTState()
    status = _drive(info, graph, info.fn(graph, state), on_event, handle, delay, size=graph.node_count())
    return MSTResult(
        status=status,
        committed_edges=list(state.committed_edges),
        total_cost=state.total_cost,
    )


# ---------------------------------------------------------------------------
# Internal
# ---------------------------------------------------------------------------
def _lookup(kind: str, family: str) -> AlgoInfo:
    info = get_algorithm(kind)
    if info is None or info.family != family:
        raise ValueError(f"Unknown {family} algorithm: {kind}")
    return info


def _drive(
    info: AlgoInfo,
    model: Any,
    generator,
    on_event: Optional[EventCallback],
    handle: Optional[RunHandle],
    delay: Any,
    size: int,
) -> RunStatus:
    handle = handle if handle is not None else RunHandle()
    if delay is None:
        delay = runtime_config().default_delay
    trace = StepTrace(on_event=on_event, handle=handle, delay=delay)

    try:
        with exclusive_run(model, handle):
            logger.debug("Starting %s on %d items (delay=%.3fs)", info.key, size, trace.delay)
            status, _ = trace.drive(generator)
            handle.finish(status)
    except RunInProgressError:
        generator.close()
        if trace.emitted:
            # raised by the subscriber, not by the claim
            logger.warning(
                "%s aborted after %d events: the subscriber raised RunInProgressError",
                info.label, trace.emitted,
            )
        else:
            logger.warning("Rejected %s: a run is already active", info.key)
        raise

    if status == RunStatus.ABORTED:
        logger.info("%s aborted after %d events", info.label, trace.emitted)
    else:
        logger.info("%s completed with %d events", info.label, trace.emitted)
    return status
