"""
union_find.py — Disjoint-Set Union
==================================
Used by Kruskal's engine to answer "would this edge close a cycle?".

    uf = UnionFind(["A", "B", "C"])
    uf.union("A", "B")      # True  – merged
    uf.union("B", "A")      # False – already one set
    uf.connected("A", "C")  # False

Path compression on find, union by rank.  On equal ranks the root of
the FIRST argument becomes the parent, so results are deterministic for
a given call order.
"""

from typing import Dict, Hashable, Iterable, List


class UnionFind:
    """
    Attributes:
        parent : {element: parent element}; roots point at themselves.
        rank   : {element: upper bound on tree height}.
        merges : Number of successful unions so far.
    """

    def __init__(self, elements: Iterable[Hashable] = ()):
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank:   Dict[Hashable, int]      = {}
        self.merges: int                      = 0
        for e in elements:
            self.add(e)

    def add(self, element: Hashable) -> None:
        if element not in self.parent:
            self.parent[element] = element
            self.rank[element]   = 0

    def find(self, element: Hashable) -> Hashable:
        """Representative of the set containing element (compresses the path)."""
        if element not in self.parent:
            raise KeyError(element)

        root = element
        while self.parent[root] != root:
            root = self.parent[root]

        # point everything on the walk straight at the root
        cur = element
        while self.parent[cur] != root:
            nxt = self.parent[cur]
            self.parent[cur] = root
            cur = nxt
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of a and b.  Returns False if they were already one set."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False

        if self.rank[ra] < self.rank[rb]:
            self.parent[ra] = rb
        elif self.rank[ra] > self.rank[rb]:
            self.parent[rb] = ra
        else:
            self.parent[rb] = ra
            self.rank[ra] += 1
        self.merges += 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

    def groups(self) -> Dict[Hashable, List[Hashable]]:
        """{root: [members in insertion order]}"""
        out: Dict[Hashable, List[Hashable]] = {}
        for e in self.parent:
            out.setdefault(self.find(e), []).append(e)
        return out

    def __len__(self) -> int:
        return len(self.parent)

    def __repr__(self) -> str:
        return f"UnionFind(elements={len(self.parent)}, sets={len(self.parent) - self.merges})"
