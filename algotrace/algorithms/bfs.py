"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over the whole component of `start` (no target).
Yields a StepEvent at every meaningful event:
  1. Dequeue an unvisited node         →  visit(node)
  2. Its tree edge from the parent     →  edge-commit(parent→node)
  3. Each unvisited neighbour          →  edge-explore(node→nbr), enqueue

Nodes are marked visited when DEQUEUED, not when enqueued, so the same
node can sit in the queue more than once.  Duplicate entries are
skipped silently when they reach the head.

Nodes unreachable from `start` are simply never visited.
"""

from collections import deque
from typing import Deque, Generator, List, Optional, Tuple

from algotrace.model.edge import NodeId
from algotrace.model.graph import GraphModel
from algotrace.algorithms.state import TraversalState
from algotrace.algorithms.step import StepEvent


PSEUDOCODE: List[str] = [
    "def BFS(graph, start):",                           # 0
    "    queue ← [start]",                              # 1
    "    while queue is not empty:",                    # 2
    "        node ← queue.dequeue()",                   # 3
    "        if node in visited: continue",             # 4
    "        visited.add(node)",                        # 5
    "        for neighbour in adj(node):",              # 6
    "            if neighbour not visited:",            # 7
    "                queue.enqueue(neighbour)",         # 8
]


def bfs(
    graph: GraphModel,
    start: NodeId,
    state: Optional[TraversalState] = None,
) -> Generator[StepEvent, None, TraversalState]:
    state = state if state is not None else TraversalState()
    if graph.node_count() == 0:
        return state

    # entries are (node, parent-that-enqueued-it)
    queue: Deque[Tuple[NodeId, Optional[NodeId]]] = deque([(start, None)])

    while queue:
        node, parent = queue.popleft()
        if node in state.visited:
            continue

        state.mark_visited(node, parent)
        yield StepEvent.visit(
            node,
            message=f"Dequeued '{node}' and marked it visited",
            frontier=_frontier(queue),
        )
        if parent is not None:
            edge = graph.get_edge_between(parent, node).oriented(parent)
            yield StepEvent.edge_commit(edge, f"Edge {parent}→{node} joins the BFS tree")

        for nbr, edge in graph.neighbours(node):
            if nbr in state.visited:
                continue
            queue.append((nbr, node))
            yield StepEvent.edge_explore(
                edge.oriented(node),
                f"Exploring edge from {node} to {nbr}; '{nbr}' enqueued",
                frontier=_frontier(queue),
            )

    yield StepEvent.done(message=f"BFS traversal complete! Visited {len(state.visit_order)} nodes.")
    return state


def _frontier(queue) -> Tuple[NodeId, ...]:
    return tuple(n for n, _ in queue)
