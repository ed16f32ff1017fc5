"""
Capability protocols.

This module decouples what an algorithm needs from what a structure is. Each
protocol describes one query ability; a structure may implement any subset of
them. Algorithms annotate their inputs with the narrowest protocol (or
composite protocol) they use, so a Graph, a bare Storage, a SubgraphView or a
ReverseView are all valid inputs as long as they provide the methods.

The protocols are runtime checkable, so ``isinstance(obj, NeighborLookup)``
reports whether the methods are present.
"""

from typing import List, Protocol, Tuple, runtime_checkable

from .enums import Direction
from .types import EdgeId, EdgeRecord, VertexId


@runtime_checkable
class VertexEnumeration(Protocol):
    """Enumerate vertices and report how many there are."""

    def vertex_ids(self) -> List[VertexId]:
        """All vertex identifiers in a stable order."""
        ...

    def vertex_count(self) -> int:
        """Number of vertices."""
        ...

    def has_vertex(self, vertex_id: VertexId) -> bool:
        """Whether ``vertex_id`` is present."""
        ...


@runtime_checkable
class EdgeEnumeration(Protocol):
    """Enumerate edges with their endpoints, identifiers and payloads."""

    def edges(self) -> List[EdgeRecord]:
        """All edges in a stable order."""
        ...

    def edge_count(self) -> int:
        """Number of edges."""
        ...


@runtime_checkable
class NeighborLookup(Protocol):
    """Look up the vertices and edges adjacent to a vertex."""

    def neighbors(self, vertex_id: VertexId) -> List[VertexId]:
        """Vertices reachable through one edge (successors when directed)."""
        ...

    def incident_edges(self, vertex_id: VertexId) -> List[Tuple[VertexId, EdgeId]]:
        """``(neighbor, edge_id)`` pairs, one per edge leaving ``vertex_id``."""
        ...


@runtime_checkable
class DegreeQuery(Protocol):
    """Report the degree of a vertex."""

    def degree(self, vertex_id: VertexId) -> int:
        """Number of edges leaving ``vertex_id``."""
        ...


@runtime_checkable
class DirectionAware(Protocol):
    """Report whether edges are directed."""

    @property
    def direction(self) -> Direction:
        ...


@runtime_checkable
class Traversable(VertexEnumeration, NeighborLookup, Protocol):
    """Vertex enumeration plus neighbor lookup: enough for DFS and BFS."""


@runtime_checkable
class CutAnalyzable(VertexEnumeration, EdgeEnumeration, NeighborLookup, Protocol):
    """Everything articulation point and bridge detection reads."""


def direction_of(graph: object, default: Direction = Direction.DIRECTED) -> Direction:
    """Return the direction of ``graph`` or ``default`` when it does not report one."""
    if isinstance(graph, DirectionAware):
        return graph.direction
    return default
