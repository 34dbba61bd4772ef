"""
state.py — Per-Run Scratch State
================================
The transient flags of a run (visited, in-tree, distances, committed
edges) live here, never on the graph.  The runner creates one state
object per invocation and hands it to the generator; whatever the
generator managed to record is still readable if the run is cancelled
half way.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from algotrace.model.edge import Edge, NodeId


INF = float("inf")


@dataclass
class TraversalState:
    """
    Attributes:
        visit_order : Nodes in the order they were visited / finalised.
        visited     : Same nodes as a set, for O(1) membership.
        parents     : {node: predecessor}; the start maps to None.
        distances   : {node: shortest known distance} – Dijkstra only.
    """

    visit_order: List[NodeId]                 = field(default_factory=list)
    visited:     Set[NodeId]                  = field(default_factory=set)
    parents:     Dict[NodeId, Optional[NodeId]] = field(default_factory=dict)
    distances:   Dict[NodeId, float]          = field(default_factory=dict)

    def mark_visited(self, node: NodeId, parent: Optional[NodeId]) -> None:
        self.visited.add(node)
        self.visit_order.append(node)
        self.parents[node] = parent


@dataclass
class MSTState:
    """
    Attributes:
        committed_edges : Edges accepted into the spanning forest, in order.
        total_cost      : Sum of their weights.
        in_tree         : Nodes already connected to some tree (Prim).
    """

    committed_edges: List[Edge]  = field(default_factory=list)
    total_cost:      float       = 0
    in_tree:         Set[NodeId] = field(default_factory=set)

    def commit(self, edge: Edge) -> None:
        self.committed_edges.append(edge)
        self.total_cost += edge.weight
