"""
Storage capability contract.

This module defines the Storage abstract base class: the minimal set of
operations any graph representation must provide, together with generic
default implementations of derived queries so that a minimal back-end is
usable immediately. Back-ends override the defaults where their layout
allows a faster answer.

Every mutating or vertex-addressed operation exists in two variants:
- The plain name (``insert_edge``, ``neighbors``, ...) is unchecked. It
  assumes its precondition holds. A violated precondition is a contract
  violation and surfaces as a LookupError raised before any state is
  touched; it is not a recoverable error path.
- The ``*_checked`` name validates the precondition first and raises a typed
  GraphOperationError subclass without touching state.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..enums import Direction
from ..exceptions import EdgeNotFoundError, VertexNotFoundError
from ..models import EdgePayload
from ..types import EdgeId, EdgeRecord, VertexId

logger = logging.getLogger(__name__)


class Storage(ABC):
    """
    Abstract graph storage.

    Identifiers are issued monotonically from zero and never reused, even
    after the element they named is removed.

    Attributes:
        _direction (Direction): Directedness shared by every edge
        _next_vertex_id (int): Identifier the next inserted vertex receives
        _next_edge_id (int): Identifier the next inserted edge receives
    """

    def __init__(self, direction: Direction = Direction.UNDIRECTED):
        self._direction = direction
        self._next_vertex_id = 0
        self._next_edge_id = 0

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def is_directed(self) -> bool:
        return self._direction.is_directed

    def _issue_vertex_id(self) -> VertexId:
        vertex_id = VertexId(self._next_vertex_id)
        self._next_vertex_id += 1
        return vertex_id

    def _issue_edge_id(self) -> EdgeId:
        edge_id = EdgeId(self._next_edge_id)
        self._next_edge_id += 1
        return edge_id

    # Primitive operations

    @abstractmethod
    def insert_vertex(self) -> VertexId:
        """Insert an isolated vertex and return its identifier."""

    @abstractmethod
    def remove_vertex(self, vertex_id: VertexId) -> None:
        """Remove a vertex together with every edge incident to it."""

    @abstractmethod
    def insert_edge(
        self, src: VertexId, dst: VertexId, payload: Optional[EdgePayload] = None
    ) -> EdgeId:
        """Insert an edge between two existing vertices and return its identifier."""

    @abstractmethod
    def remove_edge(self, edge_id: EdgeId) -> EdgePayload:
        """Remove an edge and return its payload."""

    @abstractmethod
    def vertex_ids(self) -> List[VertexId]:
        """All vertex identifiers in insertion order."""

    @abstractmethod
    def has_vertex(self, vertex_id: VertexId) -> bool:
        """Whether ``vertex_id`` names a vertex currently in the storage."""

    @abstractmethod
    def has_edge(self, edge_id: EdgeId) -> bool:
        """Whether ``edge_id`` names an edge currently in the storage."""

    @abstractmethod
    def edge(self, edge_id: EdgeId) -> EdgeRecord:
        """The record of a single edge."""

    @abstractmethod
    def edges(self) -> List[EdgeRecord]:
        """All edge records in insertion order."""

    @abstractmethod
    def vertex_count(self) -> int:
        """Number of vertices."""

    @abstractmethod
    def edge_count(self) -> int:
        """Number of edges."""

    # Derived operations with generic defaults

    def incident_edges(self, vertex_id: VertexId) -> List[Tuple[VertexId, EdgeId]]:
        """
        Edges leaving a vertex as ``(neighbor, edge_id)`` pairs.

        Outgoing edges when directed; every incident edge when undirected. A
        self loop is reported once. The default scans every edge.

        Args:
            vertex_id (VertexId): Vertex whose edges are listed

        Returns:
            List[Tuple[VertexId, EdgeId]]: One pair per edge, in edge order
        """
        if not self.has_vertex(vertex_id):
            raise KeyError(vertex_id)
        return [
            (record.other(vertex_id), record.edge_id)
            for record in self.edges()
            if record.src == vertex_id or (record.dst == vertex_id and not self.is_directed)
        ]

    def neighbors(self, vertex_id: VertexId) -> List[VertexId]:
        """
        Vertices adjacent to ``vertex_id`` (successors when directed).

        A vertex joined by several parallel edges is listed once per edge.
        """
        return [neighbor for neighbor, _ in self.incident_edges(vertex_id)]

    def predecessors(self, vertex_id: VertexId) -> List[VertexId]:
        """Vertices with an edge into ``vertex_id``; equal to neighbors when undirected."""
        if not self.is_directed:
            return self.neighbors(vertex_id)
        if not self.has_vertex(vertex_id):
            raise KeyError(vertex_id)
        return [src for src, dst, _, _ in self.edges() if dst == vertex_id]

    def edges_between(self, src: VertexId, dst: VertexId) -> List[EdgeId]:
        """Identifiers of edges from ``src`` to ``dst`` (either way when undirected)."""
        return [edge_id for neighbor, edge_id in self.incident_edges(src) if neighbor == dst]

    def degree(self, vertex_id: VertexId) -> int:
        """Number of edges leaving ``vertex_id``."""
        return len(self.incident_edges(vertex_id))

    # Checked variants

    def require_vertex(self, vertex_id: VertexId) -> None:
        if not self.has_vertex(vertex_id):
            logger.debug("Rejected operation on missing vertex %s", vertex_id)
            raise VertexNotFoundError(vertex_id)

    def require_edge(self, edge_id: EdgeId) -> None:
        if not self.has_edge(edge_id):
            logger.debug("Rejected operation on missing edge %s", edge_id)
            raise EdgeNotFoundError(edge_id)

    def insert_vertex_checked(self) -> VertexId:
        """Insert a vertex; has no precondition and never fails."""
        return self.insert_vertex()

    def remove_vertex_checked(self, vertex_id: VertexId) -> None:
        """
        Remove a vertex and its incident edges.

        Raises:
            VertexNotFoundError: If the vertex does not exist
        """
        self.require_vertex(vertex_id)
        self.remove_vertex(vertex_id)

    def insert_edge_checked(
        self, src: VertexId, dst: VertexId, payload: Optional[EdgePayload] = None
    ) -> EdgeId:
        """
        Insert an edge after checking that both endpoints exist.

        Raises:
            VertexNotFoundError: If either endpoint does not exist
        """
        self.require_vertex(src)
        self.require_vertex(dst)
        return self.insert_edge(src, dst, payload)

    def remove_edge_checked(self, edge_id: EdgeId) -> EdgePayload:
        """
        Remove an edge and return its payload.

        Raises:
            EdgeNotFoundError: If the edge does not exist
        """
        self.require_edge(edge_id)
        return self.remove_edge(edge_id)

    def edge_checked(self, edge_id: EdgeId) -> EdgeRecord:
        """Raises EdgeNotFoundError if the edge does not exist."""
        self.require_edge(edge_id)
        return self.edge(edge_id)

    def neighbors_checked(self, vertex_id: VertexId) -> List[VertexId]:
        """
        Neighbors of a vertex; empty for an isolated vertex.

        Raises:
            VertexNotFoundError: If the vertex does not exist
        """
        self.require_vertex(vertex_id)
        return self.neighbors(vertex_id)

    def incident_edges_checked(self, vertex_id: VertexId) -> List[Tuple[VertexId, EdgeId]]:
        """Raises VertexNotFoundError if the vertex does not exist."""
        self.require_vertex(vertex_id)
        return self.incident_edges(vertex_id)

    def predecessors_checked(self, vertex_id: VertexId) -> List[VertexId]:
        """Raises VertexNotFoundError if the vertex does not exist."""
        self.require_vertex(vertex_id)
        return self.predecessors(vertex_id)

    def edges_between_checked(self, src: VertexId, dst: VertexId) -> List[EdgeId]:
        """Raises VertexNotFoundError if either vertex does not exist."""
        self.require_vertex(src)
        self.require_vertex(dst)
        return self.edges_between(src, dst)

    def degree_checked(self, vertex_id: VertexId) -> int:
        """Raises VertexNotFoundError if the vertex does not exist."""
        self.require_vertex(vertex_id)
        return self.degree(vertex_id)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(direction={self._direction.value}, "
            f"vertices={self.vertex_count()}, edges={self.edge_count()})"
        )
