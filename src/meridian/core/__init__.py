"""Core graph functionality."""

from .algorithms import ComponentAnalysis, CutResult, TopologicalSort, VertexEdgeCut
from .capabilities import (
    CutAnalyzable,
    DegreeQuery,
    DirectionAware,
    EdgeEnumeration,
    NeighborLookup,
    Traversable,
    VertexEnumeration,
)
from .enums import Color, Direction, GraphFlavor
from .exceptions import (
    ConfigurationError,
    CycleDetectedError,
    EdgeNotFoundError,
    GraphOperationError,
    InvariantViolationError,
    LoopNotAllowedError,
    MultiEdgeNotAllowedError,
    PayloadValidationError,
    ResourceNotFoundError,
    ValidationError,
    VertexNotFoundError,
)
from .graph import Graph
from .models import EdgePayload, FlowPayload
from .storage import AdjacencyList, AdjacencyMatrix, Storage
from .traversal import BFSIterator, DepthFirstSearch, DfsListener, DFSIterator
from .types import EdgeId, EdgeRecord, VertexId
from .views import ReverseView, SubgraphView

__all__ = [
    "AdjacencyList",
    "AdjacencyMatrix",
    "BFSIterator",
    "Color",
    "ComponentAnalysis",
    "ConfigurationError",
    "CutAnalyzable",
    "CutResult",
    "CycleDetectedError",
    "DegreeQuery",
    "DepthFirstSearch",
    "DfsListener",
    "DFSIterator",
    "Direction",
    "DirectionAware",
    "EdgeEnumeration",
    "EdgeId",
    "EdgeNotFoundError",
    "EdgePayload",
    "EdgeRecord",
    "FlowPayload",
    "Graph",
    "GraphFlavor",
    "GraphOperationError",
    "InvariantViolationError",
    "LoopNotAllowedError",
    "MultiEdgeNotAllowedError",
    "NeighborLookup",
    "PayloadValidationError",
    "ResourceNotFoundError",
    "ReverseView",
    "Storage",
    "SubgraphView",
    "TopologicalSort",
    "Traversable",
    "ValidationError",
    "VertexEdgeCut",
    "VertexEnumeration",
    "VertexId",
    "VertexNotFoundError",
]
