"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the engines know about.

    from algotrace.algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, family, fn, pseudocode, …),
        …
    }

`family` decides which entry point may run it and what the generator
expects:
    "sort"       fn(array)                  -> Generator[StepEvent, None, None]
    "traversal"  fn(graph, start, state)    -> Generator[StepEvent, None, TraversalState]
    "mst"        fn(graph, state)           -> Generator[StepEvent, None, MSTState]
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from algotrace.algorithms.bubble_sort    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algotrace.algorithms.selection_sort import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algotrace.algorithms.insertion_sort import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algotrace.algorithms.merge_sort     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algotrace.algorithms.heap_sort      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc
from algotrace.algorithms.bfs            import bfs            as _bfs,       PSEUDOCODE as _bfs_pc
from algotrace.algorithms.dfs            import dfs            as _dfs,       PSEUDOCODE as _dfs_pc
from algotrace.algorithms.dijkstra       import dijkstra       as _dijkstra,  PSEUDOCODE as _dij_pc
from algotrace.algorithms.prim           import prim           as _prim,      PSEUDOCODE as _prim_pc
from algotrace.algorithms.kruskal        import kruskal        as _kruskal,   PSEUDOCODE as _kruskal_pc
from algotrace.algorithms.step           import EventKind, StepEvent


FAMILIES = ("sort", "traversal", "mst")


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bfs"
    label:            str                    # human label, e.g. "Breadth-First Search"
    family:           str                    # "sort" / "traversal" / "mst"
    fn:               Callable               # the generator function
    pseudocode:       List[str]              # lines for the side-panel
    tags:             List[str] = field(default_factory=list)
    stable:           bool      = False      # sorts only
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "family":           self.family,
            "pseudocode":       list(self.pseudocode),
            "tags":             list(self.tags),
            "stable":           self.stable,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", family="sort", fn=_bubble, pseudocode=_bubble_pc,
        tags=["comparison", "in-place"], stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent out-of-order pairs; the largest value bubbles to the end.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", family="sort", fn=_selection, pseudocode=_selection_pc,
        tags=["comparison", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted tail and swaps it into place. At most n-1 swaps.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", family="sort", fn=_insertion, pseudocode=_insertion_pc,
        tags=["comparison", "in-place", "adaptive"], stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Grows a sorted prefix by shifting each new key left into place. Fast on nearly sorted input.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", family="sort", fn=_merge, pseudocode=_merge_pc,
        tags=["comparison", "divide-and-conquer"], stable=True,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Splits in half, sorts both halves, merges them. Stable: ties keep their order.",
    ),

    "heap": AlgoInfo(
        key="heap", label="Heap Sort", family="sort", fn=_heap, pseudocode=_heap_pc,
        tags=["comparison", "in-place"],
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then repeatedly moves the root behind the shrinking heap.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", family="traversal", fn=_bfs, pseudocode=_bfs_pc,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer from the start node.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", family="traversal", fn=_dfs, pseudocode=_dfs_pc,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking; the active path mirrors the recursion stack.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", family="traversal", fn=_dijkstra, pseudocode=_dij_pc,
        tags=["weighted", "shortest-path"],
        complexity_time="O((V + E) log V)", complexity_space="O(V + E)",
        description="Greedily finalises the closest node. Optimal for non-negative weights.",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's Algorithm", family="mst", fn=_prim, pseudocode=_prim_pc,
        tags=["weighted", "spanning-tree", "greedy"],
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Grows one tree by repeatedly adding the lightest edge leaving it.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's Algorithm", family="mst", fn=_kruskal, pseudocode=_kruskal_pc,
        tags=["weighted", "spanning-tree", "greedy", "union-find"],
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Takes edges lightest first, skipping any that would close a cycle.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_family(family: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.family == family]


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "EventKind",
    "FAMILIES",
    "REGISTRY",
    "StepEvent",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_family",
    "algorithms_by_tag",
]
