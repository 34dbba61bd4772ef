"""
engine/
-------
Run control, entry points & recording.

    from algotrace.engine import run_sort, run_traversal, run_mst
    from algotrace.engine import RunHandle, StepTrace, Recorder, compare
"""

from algotrace.engine.trace    import RunHandle, RunStatus, StepTrace, exclusive_run
from algotrace.engine.runner   import (
    SortResult, TraversalResult, MSTResult,
    run_sort, run_traversal, run_mst,
)
from algotrace.engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "RunHandle",
    "RunStatus",
    "StepTrace",
    "exclusive_run",
    "SortResult",
    "TraversalResult",
    "MSTResult",
    "run_sort",
    "run_traversal",
    "run_mst",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
