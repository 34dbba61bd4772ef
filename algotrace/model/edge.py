"""
edge.py — Undirected Weighted Edge
==================================
Connects two distinct nodes with a positive integer weight.

Design decisions:
  - `source` and `target` are node ids, NOT node objects.  This keeps
    edges serialisable and hashable without circular references.
  - The pair is unordered: A–B and B–A are the same edge.  `source` /
    `target` only remember the orientation the caller used so events and
    results read back the way the graph was built.
  - Edges are immutable.  Anything an algorithm wants to remember about
    an edge (in-tree, rejected, …) lives in that run's local state.
"""

from typing import Hashable, Optional, FrozenSet

NodeId = Hashable


class Edge:
    """
    Attributes:
        source : ID of the first endpoint (as inserted).
        target : ID of the second endpoint (as inserted).
        weight : Positive integer cost.
    """

    __slots__ = ("source", "target", "weight")

    def __init__(self, source: NodeId, target: NodeId, weight: int = 1):
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "target", target)
        object.__setattr__(self, "weight", weight)

    def __setattr__(self, name, value):
        raise AttributeError("Edge is immutable")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def id(self) -> str:
        return f"{self.source}-{self.target}"

    @property
    def key(self) -> FrozenSet[NodeId]:
        """Unordered endpoint pair — identity of the edge inside a graph."""
        return frozenset((self.source, self.target))

    def connects(self, node_a: NodeId, node_b: NodeId) -> bool:
        """True if this edge links node_a ↔ node_b."""
        return self.key == frozenset((node_a, node_b))

    def other_end(self, node_id: NodeId) -> Optional[NodeId]:
        """Given one endpoint, return the other. None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    def oriented(self, tail: NodeId) -> "Edge":
        """Same edge, read from `tail` outwards (for traversal events)."""
        if tail == self.source:
            return self
        return Edge(self.target, self.source, self.weight)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "from":   self.source,
            "to":     self.target,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=data["from"],
            target=data["to"],
            weight=data.get("weight", 1),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} ↔ {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.key == other.key and self.weight == other.weight

    def __hash__(self) -> int:
        return hash((self.key, self.weight))
