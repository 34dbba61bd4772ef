"""
recorder.py — Run Recorder & Analytics
========================================
The engines never keep their events; a Recorder is a subscriber that
does.  It collects every StepEvent of one run and computes the counts
the Analytics panel and Comparison Mode show.

Usage:
    rec = Recorder()
    result = rec.run("merge", [5, 3, 8, 1])     # any registered algorithm
    rec.metrics.comparisons                      # analytics card
    rec.export()                                 # serialisable snapshot

    # or plug it in yourself
    run_traversal("bfs", graph, "A", on_event=rec)

Comparison Mode:
    Two Recorders run two algorithms on the SAME input, then
    compare(rec1, rec2) → ComparisonResult.
"""

import time
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Optional

from algotrace.algorithms import get_algorithm
from algotrace.algorithms.step import EventKind, StepEvent
from algotrace.engine.runner import run_mst, run_sort, run_traversal


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:         str   = ""
    algo_label:       str   = ""
    status:           str   = ""
    total_events:     int   = 0
    comparisons:      int   = 0
    swaps:            int   = 0
    writes:           int   = 0          # set-final events
    nodes_visited:    int   = 0
    edges_explored:   int   = 0
    relaxations:      int   = 0          # distance-update events
    edges_committed:  int   = 0          # edge-commit + mst-add
    edges_rejected:   int   = 0
    wall_time_ms:     float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_events:      str = ""   # which algo needed fewer steps overall
    winner_comparisons: str = ""
    winner_swaps:       str = ""

    def to_dict(self) -> dict:
        return asdict(self)


_RUNNERS: Dict[str, Callable[..., Any]] = {
    "sort":      run_sort,
    "traversal": run_traversal,
    "mst":       run_mst,
}


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        events   : Every StepEvent received, in order.
        metrics  : RunMetrics (available after run()).
        forward  : Optional second subscriber that sees each event too.
    """

    def __init__(self, forward: Optional[Callable[[StepEvent], None]] = None):
        self.events:  List[StepEvent]      = []
        self.metrics: Optional[RunMetrics] = None
        self.forward = forward
        self._result: Any = None

    # ------------------------------------------------------------------
    # Subscriber protocol
    # ------------------------------------------------------------------
    def __call__(self, event: StepEvent) -> None:
        self.events.append(event)
        if self.forward is not None:
            self.forward(event)

    # ------------------------------------------------------------------
    # Run & record
    # ------------------------------------------------------------------
    def run(self, algo_key: str, *args, **kwargs) -> Any:
        """
        Run a registered algorithm with this recorder as the subscriber.
        Positional / keyword args are those of the family's runner
        (values for sorts; graph, start for traversals; graph for MST).
        """
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self.events = []
        self.metrics = None
        kwargs["on_event"] = self

        started = time.monotonic()
        result = _RUNNERS[info.family](algo_key, *args, **kwargs)
        wall_ms = (time.monotonic() - started) * 1000

        self._result = result
        self.metrics = self.compute_metrics(
            algo_key=info.key, algo_label=info.label, status=result.status.value, wall_ms=wall_ms,
        )
        return result

    def compute_metrics(self, algo_key: str = "", algo_label: str = "", status: str = "", wall_ms: float = 0.0) -> RunMetrics:
        counts = Counter(e.kind for e in self.events)
        return RunMetrics(
            algo_key=algo_key,
            algo_label=algo_label,
            status=status,
            total_events=len(self.events),
            comparisons=counts[EventKind.COMPARE],
            swaps=counts[EventKind.SWAP],
            writes=counts[EventKind.SET_FINAL],
            nodes_visited=counts[EventKind.VISIT],
            edges_explored=counts[EventKind.EDGE_EXPLORE],
            relaxations=counts[EventKind.DISTANCE_UPDATE],
            edges_committed=counts[EventKind.EDGE_COMMIT] + counts[EventKind.MST_ADD],
            edges_rejected=counts[EventKind.MST_REJECT],
            wall_time_ms=round(wall_ms, 2),
        )

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "result":  self._result.to_dict() if self._result is not None else {},
            "metrics": self.metrics.to_dict() if self.metrics else {},
            "events":  [e.to_dict() for e in self.events],
        }


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_events=winner(l.total_events, r.total_events, l.algo_label, r.algo_label),
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algo_label, r.algo_label),
        winner_swaps=winner(l.swaps, r.swaps, l.algo_label, r.algo_label),
    )
