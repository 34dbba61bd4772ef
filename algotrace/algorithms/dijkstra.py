"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Single-source shortest paths using a min-heap (heapq) with LAZY
deletion.

Yields a StepEvent at:
  1. Pop of a not-yet-finalised node   →  visit(node, distance)
  2. Its shortest-path tree edge       →  edge-commit(pred→node)
  3. Every neighbour of that node      →  edge-explore(node→nbr)
  4. Successful relaxation             →  distance-update(nbr, new_dist)
  5. Heap empty                        →  done

Frontier entries are (distance, admission_seq, node).  The sequence
number makes ties pop in FIFO admission order.  A relaxation never
touches an existing entry; it pushes a new one, and the outdated entry
is dropped when it surfaces (node already finalised).

Correctness note: Dijkstra requires non-negative weights.  With negative
weights the distances it reports are undefined.
"""

import heapq
import itertools
from typing import Generator, List, Optional, Tuple

from algotrace.model.edge import NodeId
from algotrace.model.graph import GraphModel
from algotrace.algorithms.state import INF, TraversalState
from algotrace.algorithms.step import StepEvent


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, start):",                      # 0
    "    dist ← {v: ∞ for v in V};  dist[start] ← 0",  # 1
    "    pq ← [(0, start)]",                            # 2
    "    while pq is not empty:",                       # 3
    "        (d, node) ← pq.pop_min()",                 # 4
    "        if node finalised: continue",              # 5
    "        finalise(node)",                           # 6
    "        for (neighbour, w) in adj(node):",         # 7
    "            if dist[node] + w < dist[neighbour]:", # 8
    "                dist[neighbour] ← dist[node] + w", # 9
    "                pq.push((dist[neighbour], nbr))",  # 10
]


def dijkstra(
    graph: GraphModel,
    start: NodeId,
    state: Optional[TraversalState] = None,
) -> Generator[StepEvent, None, TraversalState]:
    state = state if state is not None else TraversalState()
    if graph.node_count() == 0:
        return state

    dist = state.distances
    for nid in graph.node_ids():
        dist[nid] = INF
    dist[start] = 0

    seq = itertools.count()
    pq: List[Tuple[float, int, NodeId]] = [(0, next(seq), start)]
    predecessor = {start: None}

    while pq:
        d, _, node = heapq.heappop(pq)
        if node in state.visited:
            # stale entry
            continue

        state.mark_visited(node, predecessor[node])
        yield StepEvent.visit(
            node, d,
            message=f"Popped '{node}' with distance {d}; this distance is now final",
        )
        pred = predecessor[node]
        if pred is not None:
            edge = graph.get_edge_between(pred, node).oriented(pred)
            yield StepEvent.edge_commit(edge, f"Edge {pred}→{node} joins the shortest-path tree")

        for nbr, edge in graph.neighbours(node):
            yield StepEvent.edge_explore(edge.oriented(node), f"Exploring edge from {node} to {nbr}")

            new_dist = dist[node] + edge.weight
            if new_dist < dist[nbr]:
                dist[nbr] = new_dist
                predecessor[nbr] = node
                heapq.heappush(pq, (new_dist, next(seq), nbr))
                yield StepEvent.distance_update(
                    nbr, new_dist, edge.oriented(node),
                    f"Found shorter path to {nbr} through {node}. Distance: {new_dist}",
                )

    yield StepEvent.done(
        message=f"Dijkstra's algorithm complete! Found shortest paths from {start} to all reachable nodes.",
    )
    return state
