"""
kruskal.py — Kruskal's Minimum Spanning Tree
============================================
Edges are processed lightest first (a stable sort, so equal weights keep
their insertion order).  A fresh UnionFind over the node ids decides
whether an edge joins two components or would close a cycle.

Yields a StepEvent at:
  1. Each edge taken from the sorted list   →  edge-explore(edge)
  2. Endpoints in different components      →  mst-add(edge, running cost)
  3. Endpoints already connected            →  mst-reject(edge)
  4. Finish                                 →  done(total cost)

Stops as soon as |V| - 1 edges are committed; the remaining edges are
never examined.
"""

from typing import Generator, List, Optional

from algotrace.model.graph import GraphModel
from algotrace.model.union_find import UnionFind
from algotrace.algorithms.state import MSTState
from algotrace.algorithms.step import StepEvent


PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",                              # 0
    "    sort E by weight",                             # 1
    "    uf ← UnionFind(V)",                            # 2
    "    for edge (u, v) in E:",                        # 3
    "        if |mst| = |V| - 1: break",                # 4
    "        if find(u) ≠ find(v):",                    # 5
    "            union(u, v);  mst.add(edge)",          # 6
    "        else: reject (cycle)",                     # 7
]


def kruskal(graph: GraphModel, state: Optional[MSTState] = None) -> Generator[StepEvent, None, MSTState]:
    state = state if state is not None else MSTState()
    nodes = graph.node_ids()
    if not nodes:
        return state

    target = len(nodes) - 1
    uf = UnionFind(nodes)
    ordered = sorted(graph.edges(), key=lambda e: e.weight)

    for edge in ordered:
        if len(state.committed_edges) >= target:
            break

        yield StepEvent.edge_explore(edge, f"Checking edge {edge.source}-{edge.target} (weight: {edge.weight})")

        if uf.find(edge.source) != uf.find(edge.target):
            uf.union(edge.source, edge.target)
            state.commit(edge)
            yield StepEvent.mst_add(
                edge, state.total_cost,
                f"Adding edge {edge.source}-{edge.target} to MST (no cycle formed)",
            )
        else:
            yield StepEvent.mst_reject(edge, f"Rejecting edge {edge.source}-{edge.target} (would create cycle)")

    yield StepEvent.done(state.total_cost, f"Kruskal's algorithm complete! MST cost: {state.total_cost}")
    return state
