"""
Invariant-enforcing graph wrapper.

This module provides the Graph class, which owns exactly one Storage and
rejects edge insertions that would violate its declared GraphFlavor. All
read queries are forwarded to the storage, so a Graph satisfies every
capability protocol its storage does.

Checked insertion (``add_edge_checked``) validates endpoints, the flavor and,
when configured, the payload schema before delegating. Unchecked insertion
(``add_edge``) validates nothing: inserting a loop or parallel edge into a
SIMPLE graph through it is a contract violation, after which the behavior of
algorithms that rely on the flavor is undefined.
"""

import logging
from typing import Iterable, List, Optional, Tuple, Type

from ..utils.validation import PayloadSchemaValidator
from .enums import Direction, GraphFlavor
from .exceptions import LoopNotAllowedError, MultiEdgeNotAllowedError, PayloadValidationError
from .models import EdgePayload
from .storage import AdjacencyList, Storage
from .types import EdgeId, EdgeRecord, VertexId

logger = logging.getLogger(__name__)


class Graph:
    """
    Graph wrapping a storage and enforcing a flavor on checked insertion.

    Attributes:
        _storage (Storage): The storage this graph owns
        _flavor (GraphFlavor): Invariants enforced on checked insertion
        _payload_validator (Optional[PayloadSchemaValidator]): Validator for
            payload attributes, None when no schema is configured
    """

    def __init__(
        self,
        storage: Optional[Storage] = None,
        flavor: GraphFlavor = GraphFlavor.SIMPLE,
        payload_validator: Optional[PayloadSchemaValidator] = None,
    ):
        """
        Initialize a graph.

        Args:
            storage (Optional[Storage]): Storage to own; an undirected
                AdjacencyList when omitted
            flavor (GraphFlavor): Invariants enforced by add_edge_checked
            payload_validator (Optional[PayloadSchemaValidator]): Validator run
                on payload attributes by add_edge_checked
        """
        self._storage = storage if storage is not None else AdjacencyList()
        self._flavor = flavor
        self._payload_validator = payload_validator

    @property
    def storage(self) -> Storage:
        return self._storage

    @property
    def flavor(self) -> GraphFlavor:
        return self._flavor

    @property
    def direction(self) -> Direction:
        return self._storage.direction

    @property
    def is_directed(self) -> bool:
        return self._storage.is_directed

    # Mutation

    def add_vertex(self) -> VertexId:
        """Add an isolated vertex; there is no invariant to check."""
        return self._storage.insert_vertex()

    def add_vertices(self, count: int) -> List[VertexId]:
        """Add ``count`` isolated vertices and return their identifiers in order."""
        return [self._storage.insert_vertex() for _ in range(count)]

    def add_edge(
        self, src: VertexId, dst: VertexId, payload: Optional[EdgePayload] = None
    ) -> EdgeId:
        """
        Add an edge without any validation.

        The caller asserts that both endpoints exist and that the edge
        respects the graph's flavor. A missing endpoint raises LookupError
        before any mutation; a violated flavor is not detected at all.
        """
        return self._storage.insert_edge(src, dst, payload)

    def add_edge_checked(
        self, src: VertexId, dst: VertexId, payload: Optional[EdgePayload] = None
    ) -> EdgeId:
        """
        Add an edge after validating endpoints, flavor and payload.

        Args:
            src (VertexId): Source endpoint
            dst (VertexId): Destination endpoint
            payload (Optional[EdgePayload]): Edge payload, weight 1.0 if omitted

        Returns:
            EdgeId: Identifier of the new edge

        Raises:
            VertexNotFoundError: If either endpoint does not exist
            LoopNotAllowedError: If ``src == dst`` and the flavor forbids loops
            MultiEdgeNotAllowedError: If an edge already joins the endpoints
                and the flavor forbids parallel edges
            PayloadValidationError: If the payload attributes fail the
                configured schema
        """
        self._storage.require_vertex(src)
        self._storage.require_vertex(dst)

        if src == dst and not self._flavor.allows_loops:
            logger.debug("Rejected loop on vertex %s in %s graph", src, self._flavor.value)
            raise LoopNotAllowedError(src)

        if not self._flavor.allows_parallel_edges and self._storage.edges_between(src, dst):
            logger.debug("Rejected parallel edge %s -> %s in %s graph", src, dst, self._flavor.value)
            raise MultiEdgeNotAllowedError(src, dst)

        if payload is None:
            payload = EdgePayload()
        if self._payload_validator is not None:
            result = self._payload_validator.validate_payload(payload)
            if not result.is_valid:
                raise PayloadValidationError(result.errors)

        return self._storage.insert_edge(src, dst, payload)

    def remove_vertex(self, vertex_id: VertexId) -> None:
        self._storage.remove_vertex(vertex_id)

    def remove_vertex_checked(self, vertex_id: VertexId) -> None:
        self._storage.remove_vertex_checked(vertex_id)

    def remove_edge(self, edge_id: EdgeId) -> EdgePayload:
        return self._storage.remove_edge(edge_id)

    def remove_edge_checked(self, edge_id: EdgeId) -> EdgePayload:
        return self._storage.remove_edge_checked(edge_id)

    # Capabilities, forwarded to the storage

    def vertex_ids(self) -> List[VertexId]:
        return self._storage.vertex_ids()

    def vertex_count(self) -> int:
        return self._storage.vertex_count()

    def has_vertex(self, vertex_id: VertexId) -> bool:
        return self._storage.has_vertex(vertex_id)

    def edges(self) -> List[EdgeRecord]:
        return self._storage.edges()

    def edge_count(self) -> int:
        return self._storage.edge_count()

    def has_edge(self, edge_id: EdgeId) -> bool:
        return self._storage.has_edge(edge_id)

    def edge(self, edge_id: EdgeId) -> EdgeRecord:
        return self._storage.edge(edge_id)

    def edge_checked(self, edge_id: EdgeId) -> EdgeRecord:
        return self._storage.edge_checked(edge_id)

    def neighbors(self, vertex_id: VertexId) -> List[VertexId]:
        return self._storage.neighbors(vertex_id)

    def neighbors_checked(self, vertex_id: VertexId) -> List[VertexId]:
        return self._storage.neighbors_checked(vertex_id)

    def incident_edges(self, vertex_id: VertexId) -> List[Tuple[VertexId, EdgeId]]:
        return self._storage.incident_edges(vertex_id)

    def incident_edges_checked(self, vertex_id: VertexId) -> List[Tuple[VertexId, EdgeId]]:
        return self._storage.incident_edges_checked(vertex_id)

    def predecessors(self, vertex_id: VertexId) -> List[VertexId]:
        return self._storage.predecessors(vertex_id)

    def edges_between(self, src: VertexId, dst: VertexId) -> List[EdgeId]:
        return self._storage.edges_between(src, dst)

    def edges_between_checked(self, src: VertexId, dst: VertexId) -> List[EdgeId]:
        return self._storage.edges_between_checked(src, dst)

    def degree(self, vertex_id: VertexId) -> int:
        return self._storage.degree(vertex_id)

    def degree_checked(self, vertex_id: VertexId) -> int:
        return self._storage.degree_checked(vertex_id)

    @classmethod
    def from_edges(
        cls,
        pairs: Iterable[Tuple[int, int]],
        vertex_count: Optional[int] = None,
        direction: Direction = Direction.UNDIRECTED,
        flavor: GraphFlavor = GraphFlavor.SIMPLE,
        storage_cls: Type[Storage] = AdjacencyList,
    ) -> "Graph":
        """
        Create a graph from index pairs.

        Vertices are inserted first, so on a fresh storage vertex ``i`` gets
        identifier ``i``. Edges go through checked insertion.

        Args:
            pairs: ``(src, dst)`` vertex index pairs
            vertex_count: Number of vertices; one more than the largest index
                when omitted
            direction: Directedness of the new storage
            flavor: Flavor of the new graph
            storage_cls: Storage back-end to instantiate

        Returns:
            Graph: The populated graph
        """
        pairs = list(pairs)
        if vertex_count is None:
            vertex_count = max((max(pair) for pair in pairs), default=-1) + 1

        graph = cls(storage_cls(direction), flavor)
        vertices = graph.add_vertices(vertex_count)
        for src, dst in pairs:
            graph.add_edge_checked(vertices[src], vertices[dst])
        return graph

    def __repr__(self) -> str:
        return (
            f"Graph(flavor={self._flavor.value}, direction={self.direction.value}, "
            f"vertices={self.vertex_count()}, edges={self.edge_count()})"
        )
