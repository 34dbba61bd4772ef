"""
model/
------
Core data layer.  Public API:

    from algotrace.model import ArrayModel, GraphModel, Edge, UnionFind
"""

from algotrace.model.array      import ArrayModel
from algotrace.model.edge       import Edge, NodeId
from algotrace.model.graph      import GraphModel
from algotrace.model.union_find import UnionFind

__all__ = [
    "ArrayModel",
    "Edge",       "NodeId",
    "GraphModel",
    "UnionFind",
]
