"""
dfs.py — Depth-First Search
=============================
Recursive, pre-order DFS (each recursion level is a nested generator
joined with `yield from`).

Yields a StepEvent at:
  1. Entering an unvisited node        →  visit(node)
  2. Its tree edge from the caller     →  edge-commit(parent→node)
  3. Each unvisited neighbour          →  edge-explore(node→nbr), then recurse

The "active path" overlay mirrors the recursion stack exactly: the
start is on it from the beginning, a neighbour is pushed right before
the recursive call, and popped again when that call returns.
"""

from typing import Generator, List, Optional

from algotrace.model.edge import NodeId
from algotrace.model.graph import GraphModel
from algotrace.algorithms.state import TraversalState
from algotrace.algorithms.step import StepEvent


PSEUDOCODE: List[str] = [
    "def DFS(graph, node):",                            # 0
    "    if node in visited: return",                   # 1
    "    visited.add(node)",                            # 2
    "    for neighbour in adj(node):",                  # 3
    "        if neighbour not visited:",                # 4
    "            DFS(graph, neighbour)",                # 5
]


def dfs(
    graph: GraphModel,
    start: NodeId,
    state: Optional[TraversalState] = None,
) -> Generator[StepEvent, None, TraversalState]:
    state = state if state is not None else TraversalState()
    if graph.node_count() == 0:
        return state

    active_path: List[NodeId] = [start]
    yield from _visit(graph, start, None, state, active_path)

    yield StepEvent.done(message=f"DFS traversal complete! Visited {len(state.visit_order)} nodes.")
    return state


def _visit(
    graph: GraphModel,
    node: NodeId,
    parent: Optional[NodeId],
    state: TraversalState,
    active_path: List[NodeId],
) -> Generator[StepEvent, None, None]:
    if node in state.visited:
        # no-op backtrack
        active_path.pop()
        return

    state.mark_visited(node, parent)
    yield StepEvent.visit(node, message=f"Visiting '{node}'", path=tuple(active_path))
    if parent is not None:
        edge = graph.get_edge_between(parent, node).oriented(parent)
        yield StepEvent.edge_commit(edge, f"Edge {parent}→{node} joins the DFS tree", path=tuple(active_path))

    for nbr, edge in graph.neighbours(node):
        if nbr in state.visited:
            continue
        active_path.append(nbr)
        yield StepEvent.edge_explore(
            edge.oriented(node),
            f"Exploring edge from {node} to {nbr}",
            path=tuple(active_path),
        )
        yield from _visit(graph, nbr, node, state, active_path)

    active_path.pop()
