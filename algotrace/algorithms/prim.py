"""
prim.py — Prim's Minimum Spanning Tree
======================================
The naive O(V·E) variant: every round rescans ALL edges in insertion
order instead of keeping a priority queue.  It is slower, but each round
shows every crossing edge and the tie-breaking is easy to follow (the
first lightest crossing edge in scan order wins).

Yields a StepEvent at:
  1. Seeding a tree root               →  visit(root)
  2. Each edge crossing the cut        →  edge-explore(edge)
  3. End of a scan with a winner       →  mst-add(edge, running cost)
  4. Finish                            →  done(total cost)

Disconnected graphs: when the cut is empty but some nodes are still
outside every tree, the next such node (in node order) is seeded as a
new root.  The result is a minimum spanning FOREST, matching Kruskal.
"""

from typing import Generator, List, Optional

from algotrace.model.edge import Edge
from algotrace.model.graph import GraphModel
from algotrace.algorithms.state import MSTState
from algotrace.algorithms.step import StepEvent


PSEUDOCODE: List[str] = [
    "def Prim(graph):",                                 # 0
    "    tree ← {first node}",                          # 1
    "    while |mst| < |V| - 1:",                       # 2
    "        best ← none",                              # 3
    "        for edge (u, v) in E:",                    # 4
    "            if exactly one of u, v in tree:",      # 5
    "                if w < best.w: best ← edge",       # 6
    "        if best is none: break",                   # 7
    "        mst.add(best);  tree.add(outside end)",    # 8
]


def prim(graph: GraphModel, state: Optional[MSTState] = None) -> Generator[StepEvent, None, MSTState]:
    state = state if state is not None else MSTState()
    nodes = graph.node_ids()
    if not nodes:
        return state

    edges = graph.edges()
    target = len(nodes) - 1
    in_tree = state.in_tree

    root = nodes[0]
    in_tree.add(root)
    yield StepEvent.visit(root, message=f"Starting Prim's algorithm from node {root}")

    while len(state.committed_edges) < target:
        best: Optional[Edge] = None
        for edge in edges:
            if (edge.source in in_tree) == (edge.target in in_tree):
                continue
            yield StepEvent.edge_explore(edge, f"Checking crossing edge {edge.source}-{edge.target} (weight: {edge.weight})")
            if best is None or edge.weight < best.weight:
                best = edge

        if best is None:
            root = next((n for n in nodes if n not in in_tree), None)
            if root is None:
                break
            in_tree.add(root)
            yield StepEvent.visit(root, message=f"No edge leaves the current tree; starting a new tree at {root}")
            continue

        new_node = best.target if best.source in in_tree else best.source
        in_tree.add(new_node)
        state.commit(best)
        yield StepEvent.mst_add(
            best, state.total_cost,
            f"Adding edge {best.source}-{best.target} (weight: {best.weight}) to MST",
        )

    yield StepEvent.done(state.total_cost, f"Prim's algorithm complete! MST cost: {state.total_cost}")
    return state
