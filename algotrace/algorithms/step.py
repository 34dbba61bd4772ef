"""
step.py — Step Events
=====================
Every algorithm is a generator that yields StepEvent objects, one per
elementary operation (a comparison, a swap, a node visit, …).

A StepEvent is NOT a frame snapshot: it names the operation and the
operands it touched, nothing more.  The UI keeps its own picture of
the array / graph and applies events to it in order.

    StepEvent.compare(0, 1)                      → {"kind": "compare", "indices": [0, 1]}
    StepEvent.visit("B", distance=1)             → {"kind": "visit", "node": "B", "value": 1}
    StepEvent.mst_add(edge, cost=4)              → {"kind": "mst-add", "edge": {...}, "value": 4}

Design decisions:
  - Frozen dataclass.  Produced once by the generator, consumed by the
    trace, never mutated or retained by the engine.
  - `message` carries the plain-English narration the explanation panel
    shows ("Comparing elements at positions 0 and 1: 5 and 3").
  - `overlay` is a free-form dict for algorithm-specific extras
    (BFS frontier, DFS active path).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from algotrace.model.edge import Edge, NodeId


class EventKind(Enum):
    COMPARE         = "compare"
    SWAP            = "swap"
    SET_FINAL       = "set-final"
    VISIT           = "visit"
    EDGE_EXPLORE    = "edge-explore"
    EDGE_COMMIT     = "edge-commit"
    DISTANCE_UPDATE = "distance-update"
    MST_ADD         = "mst-add"
    MST_REJECT      = "mst-reject"
    DONE            = "done"


@dataclass(frozen=True)
class StepEvent:
    """
    Attributes:
        kind     : Which elementary operation happened.
        indices  : Array positions touched (sort engines).
        node     : Node touched (visit / distance-update).
        edge     : Edge touched, oriented from the node being expanded.
        value    : Updated scalar – written value, new distance, running cost.
        message  : Human-readable "what just happened".
        overlay  : Algorithm-specific extras (frontier, active path, …).
    """

    kind:    EventKind
    indices: Tuple[int, ...]          = ()
    node:    Optional[NodeId]         = None
    edge:    Optional[Edge]           = None
    value:   Optional[float]          = None
    message: str                      = ""
    overlay: Dict[str, Any]           = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Constructors – one per event kind
    # ------------------------------------------------------------------
    @classmethod
    def compare(cls, i: int, j: int, message: str = "") -> "StepEvent":
        return cls(EventKind.COMPARE, indices=(i, j), message=message)

    @classmethod
    def swap(cls, i: int, j: int, message: str = "") -> "StepEvent":
        return cls(EventKind.SWAP, indices=(i, j), message=message)

    @classmethod
    def set_final(cls, i: int, value: Any = None, message: str = "") -> "StepEvent":
        return cls(EventKind.SET_FINAL, indices=(i,), value=value, message=message)

    @classmethod
    def visit(cls, node: NodeId, distance: Optional[float] = None, message: str = "", **overlay) -> "StepEvent":
        return cls(EventKind.VISIT, node=node, value=distance, message=message, overlay=overlay)

    @classmethod
    def edge_explore(cls, edge: Edge, message: str = "", **overlay) -> "StepEvent":
        return cls(EventKind.EDGE_EXPLORE, edge=edge, message=message, overlay=overlay)

    @classmethod
    def edge_commit(cls, edge: Edge, message: str = "", **overlay) -> "StepEvent":
        return cls(EventKind.EDGE_COMMIT, edge=edge, node=edge.target, message=message, overlay=overlay)

    @classmethod
    def distance_update(cls, node: NodeId, distance: float, edge: Edge, message: str = "") -> "StepEvent":
        return cls(EventKind.DISTANCE_UPDATE, node=node, edge=edge, value=distance, message=message)

    @classmethod
    def mst_add(cls, edge: Edge, cost: float, message: str = "") -> "StepEvent":
        return cls(EventKind.MST_ADD, edge=edge, value=cost, message=message)

    @classmethod
    def mst_reject(cls, edge: Edge, message: str = "") -> "StepEvent":
        return cls(EventKind.MST_REJECT, edge=edge, message=message)

    @classmethod
    def done(cls, value: Optional[float] = None, message: str = "") -> "StepEvent":
        return cls(EventKind.DONE, value=value, message=message)

    # ------------------------------------------------------------------
    # Serialisation – {kind, ...operands}, unset operands omitted
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"kind": self.kind.value}
        if self.indices:
            out["indices"] = list(self.indices)
        if self.node is not None:
            out["node"] = self.node
        if self.edge is not None:
            out["edge"] = self.edge.to_dict()
        if self.value is not None:
            out["value"] = self.value
        if self.message:
            out["message"] = self.message
        if self.overlay:
            out["overlay"] = {k: list(v) if isinstance(v, tuple) else v for k, v in self.overlay.items()}
        return out

    def __repr__(self) -> str:
        ops = []
        if self.indices:
            ops.append(",".join(str(i) for i in self.indices))
        if self.edge is not None:
            ops.append(f"{self.edge.source}-{self.edge.target}")
        elif self.node is not None:
            ops.append(str(self.node))
        if self.value is not None:
            ops.append(f"={self.value}")
        return f"{self.kind.value}({' '.join(ops)})"
