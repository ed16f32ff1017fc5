"""
Meridian - Graph Storage and Structural Analysis

This package provides graph storage back-ends and structural algorithms that
depend only on narrow capability interfaces. It includes:

- Adjacency list and adjacency matrix storage
- A graph wrapper enforcing simple, multi or pseudo graph invariants
- Topological sort, articulation points and bridges, connected components
- Filtered and reversed read-only views
- Classic graph generators and a configuration-driven graph factory
"""

__version__ = "0.1.0"
__author__ = "Meridian Team"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("Meridian requires Python 3.9 or higher")

# Import commonly used components for easier access
from .config import GraphConfig, create_graph
from .core.algorithms import ComponentAnalysis, CutResult, TopologicalSort, VertexEdgeCut
from .core.enums import Direction, GraphFlavor
from .core.graph import Graph
from .core.models import EdgePayload, FlowPayload

__all__ = [
    "ComponentAnalysis",
    "CutResult",
    "Direction",
    "EdgePayload",
    "FlowPayload",
    "Graph",
    "GraphConfig",
    "GraphFlavor",
    "TopologicalSort",
    "VertexEdgeCut",
    "create_graph",
]
