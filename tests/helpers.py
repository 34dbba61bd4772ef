from __future__ import annotations

from typing import Dict, List

from algotrace.algorithms.step import StepEvent
from algotrace.model import GraphModel


def brute_force_distances(graph: GraphModel, source) -> Dict[object, float]:
    """Floyd–Warshall reference distances from `source`."""
    nodes = graph.node_ids()
    inf = float("inf")
    dist = {u: {v: (0 if u == v else inf) for v in nodes} for u in nodes}
    for e in graph.edges():
        dist[e.source][e.target] = min(dist[e.source][e.target], e.weight)
        dist[e.target][e.source] = min(dist[e.target][e.source], e.weight)
    for k in nodes:
        for i in nodes:
            for j in nodes:
                if dist[i][k] + dist[k][j] < dist[i][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]
    return dist[source]


def kinds_and_operands(events: List[StepEvent]):
    """Compact view of a sort stream: [("compare", (0, 1)), …]."""
    return [(e.kind.value, e.indices) for e in events]
