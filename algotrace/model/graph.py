"""
graph.py — Graph Model
======================
Single source of truth for the graph topology.  Traversal and MST
engines read it; nothing writes to it while a run is active.

Responsibilities:
  1. Building the graph                     (add_node / add_edge / from_edges)
  2. Adjacency queries                      (neighbours, edges, get_edge_between)
  3. Random generation                      (generate_random)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Undirected only.  Every edge shows up in the adjacency list of both
    endpoints, in the order the edges were inserted; that order is what
    makes BFS / DFS / Dijkstra event streams reproducible.
  - Node and edge containers are insertion-ordered dicts, so
    `node_ids()` and `edges()` are stable across runs.
  - No visited / in-tree / active flags here.  Those are per-run state
    owned by the algorithm generator.
"""

import random
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from algotrace.errors import NotFoundError
from algotrace.model.base import RunGuardedModel
from algotrace.model.edge import Edge, NodeId


class GraphModel(RunGuardedModel):
    """
    Attributes:
        _nodes : {node_id: None}   – ordered node-id set
        _edges : {frozenset(pair): Edge}
        _adj   : {node_id: [(neighbour_id, Edge), …]}
    """

    def __init__(self):
        super().__init__()
        self._nodes: Dict[NodeId, None]                    = {}
        self._edges: Dict[FrozenSet[NodeId], Edge]         = {}
        self._adj:   Dict[NodeId, List[Tuple[NodeId, Edge]]] = {}

    # ==================================================================
    # BUILDING
    # ==================================================================
    def add_node(self, node_id: NodeId) -> NodeId:
        self._ensure_idle()
        if node_id not in self._nodes:
            self._nodes[node_id] = None
            self._adj[node_id] = []
        return node_id

    def add_edge(self, source: NodeId, target: NodeId, weight: int = 1) -> Edge:
        self._ensure_idle()
        for end in (source, target):
            if end not in self._nodes:
                raise NotFoundError(end)
        if source == target:
            raise ValueError(f"Self-loop on '{source}' is not allowed")
        edge = Edge(source, target, weight)
        if edge.key in self._edges:
            raise ValueError(f"Graph already has an edge between '{source}' and '{target}'")

        self._edges[edge.key] = edge
        self._adj[source].append((target, edge))
        self._adj[target].append((source, edge))
        return edge

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[NodeId, NodeId, int]],
        nodes: Iterable[NodeId] = (),
    ) -> "GraphModel":
        """
        Convenience builder.  Explicit `nodes` come first (keeps isolated
        nodes and fixes ordering); edge endpoints are added on first sight.

            GraphModel.from_edges([("A", "B", 1), ("B", "C", 2)])
        """
        g = cls()
        for n in nodes:
            g.add_node(n)
        for source, target, weight in edges:
            g.add_node(source)
            g.add_node(target)
            g.add_edge(source, target, weight)
        return g

    # ==================================================================
    # QUERIES
    # ==================================================================
    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._nodes

    def node_ids(self) -> List[NodeId]:
        return list(self._nodes)

    def edges(self) -> List[Edge]:
        """All edges in insertion order."""
        return list(self._edges.values())

    def neighbours(self, node_id: NodeId) -> List[Tuple[NodeId, Edge]]:
        """Return [(neighbour_id, edge)] in edge-insertion order."""
        if node_id not in self._adj:
            raise NotFoundError(node_id)
        return list(self._adj[node_id])

    def get_edge_between(self, a: NodeId, b: NodeId) -> Optional[Edge]:
        return self._edges.get(frozenset((a, b)))

    def degree(self, node_id: NodeId) -> int:
        return len(self._adj.get(node_id, []))

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self._edges.values())

    def __contains__(self, node_id: NodeId) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": self.node_ids(),
            "edges": [e.to_dict() for e in self._edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GraphModel":
        g = cls()
        for nid in data.get("nodes", []):
            g.add_node(nid)
        for ed in data.get("edges", []):
            e = Edge.from_dict(ed)
            g.add_edge(e.source, e.target, e.weight)
        return g

    # ==================================================================
    # GENERATOR
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 6,
        edge_probability: float = 0.3,
        weight_range: Tuple[int, int] = (1, 9),
        seed: Optional[int] = None,
    ) -> "GraphModel":
        """
        Erdős–Rényi style random graph with letter ids A, B, C, …
        Each possible edge is included with probability `edge_probability`,
        then a spanning backbone guarantees the result is connected.
        """
        rng = random.Random(seed)
        g = cls()

        ids = [_letter_id(i) for i in range(num_nodes)]
        for nid in ids:
            g.add_node(nid)

        for i in range(num_nodes):
            for j in range(i + 1, num_nodes):
                if rng.random() < edge_probability:
                    g.add_edge(ids[i], ids[j], rng.randint(*weight_range))

        # guarantee connectivity: add a spanning-tree backbone
        shuffled = list(ids)
        rng.shuffle(shuffled)
        for k in range(1, len(shuffled)):
            if not g.get_edge_between(shuffled[k - 1], shuffled[k]):
                g.add_edge(shuffled[k - 1], shuffled[k], rng.randint(*weight_range))

        return g

    def __repr__(self) -> str:
        return f"GraphModel(nodes={self.node_count()}, edges={self.edge_count()})"


def _letter_id(i: int) -> str:
    """0 → 'A', 25 → 'Z', 26 → 'AA', …"""
    label = ""
    i += 1
    while i:
        i, rem = divmod(i - 1, 26)
        label = chr(65 + rem) + label
    return label
