"""
Structural graph algorithms.

Every algorithm reads its input through the capability protocols and never
mutates it.
"""

from .components import ComponentAnalysis
from .topological_sort import TopologicalSort
from .vertex_edge_cut import CutResult, VertexEdgeCut

__all__ = ["ComponentAnalysis", "CutResult", "TopologicalSort", "VertexEdgeCut"]
