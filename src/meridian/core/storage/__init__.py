"""
Graph storage back-ends.

- Storage: the abstract contract every representation implements
- AdjacencyList: per-vertex incidence mappings
- AdjacencyMatrix: dense matrix of edge-id lists
"""

from .adjacency_list import AdjacencyList
from .adjacency_matrix import AdjacencyMatrix
from .base import Storage

__all__ = [
    "AdjacencyList",
    "AdjacencyMatrix",
    "Storage",
]
