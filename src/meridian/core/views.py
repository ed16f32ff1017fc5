"""
Read-only graph views.

Views wrap any structure providing the capability protocols and present a
modified picture of it without copying or mutating it. Because they provide
the same capabilities, every algorithm runs over a view exactly as it runs
over a Graph.

- SubgraphView: hides vertices and edges that fail a filter
- ReverseView: reverses every edge of a directed graph
"""

from typing import Any, Callable, List, Optional, Tuple

from .capabilities import direction_of
from .enums import Direction
from .exceptions import GraphOperationError
from .types import EdgeId, EdgeRecord, VertexId

VertexFilter = Callable[[VertexId], bool]
EdgeFilter = Callable[[EdgeRecord], bool]


class SubgraphView:
    """
    Filtered view over a graph.

    A vertex is visible when ``vertex_filter`` accepts it. An edge is visible
    when ``edge_filter`` accepts it and both of its endpoints are visible.

    Attributes:
        _graph: Underlying structure; must provide vertex enumeration, edge
            enumeration, single edge lookup and neighbor lookup. Filters are
            applied on every query, so the view follows later changes to it
        _vertex_filter (Optional[VertexFilter]): Vertex predicate
        _edge_filter (Optional[EdgeFilter]): Edge predicate
    """

    def __init__(
        self,
        graph: Any,
        vertex_filter: Optional[VertexFilter] = None,
        edge_filter: Optional[EdgeFilter] = None,
    ):
        self._graph = graph
        self._vertex_filter = vertex_filter
        self._edge_filter = edge_filter
        self._direction = direction_of(graph, Direction.UNDIRECTED)

    @classmethod
    def without_vertex(cls, graph: Any, vertex_id: VertexId) -> "SubgraphView":
        """View of ``graph`` with one vertex and its incident edges hidden."""
        return cls(graph, vertex_filter=lambda v: v != vertex_id)

    @classmethod
    def without_edge(cls, graph: Any, edge_id: EdgeId) -> "SubgraphView":
        """View of ``graph`` with one edge hidden."""
        return cls(graph, edge_filter=lambda record: record.edge_id != edge_id)

    @property
    def direction(self) -> Direction:
        return self._direction

    def _vertex_visible(self, vertex_id: VertexId) -> bool:
        return self._vertex_filter is None or self._vertex_filter(vertex_id)

    def _edge_visible(self, record: EdgeRecord) -> bool:
        if not (self._vertex_visible(record.src) and self._vertex_visible(record.dst)):
            return False
        return self._edge_filter is None or self._edge_filter(record)

    def vertex_ids(self) -> List[VertexId]:
        return [v for v in self._graph.vertex_ids() if self._vertex_visible(v)]

    def vertex_count(self) -> int:
        return len(self.vertex_ids())

    def has_vertex(self, vertex_id: VertexId) -> bool:
        return self._graph.has_vertex(vertex_id) and self._vertex_visible(vertex_id)

    def edge(self, edge_id: EdgeId) -> EdgeRecord:
        record = self._graph.edge(edge_id)
        if not self._edge_visible(record):
            raise KeyError(edge_id)
        return record

    def edges(self) -> List[EdgeRecord]:
        return [record for record in self._graph.edges() if self._edge_visible(record)]

    def edge_count(self) -> int:
        return len(self.edges())

    def incident_edges(self, vertex_id: VertexId) -> List[Tuple[VertexId, EdgeId]]:
        if not self._vertex_visible(vertex_id):
            raise KeyError(vertex_id)
        return [
            (neighbor, edge_id)
            for neighbor, edge_id in self._graph.incident_edges(vertex_id)
            if self._edge_visible(self._graph.edge(edge_id))
        ]

    def neighbors(self, vertex_id: VertexId) -> List[VertexId]:
        return [neighbor for neighbor, _ in self.incident_edges(vertex_id)]

    def predecessors(self, vertex_id: VertexId) -> List[VertexId]:
        if self._direction is not Direction.DIRECTED:
            return self.neighbors(vertex_id)
        if not self.has_vertex(vertex_id):
            raise KeyError(vertex_id)
        return [record.src for record in self.edges() if record.dst == vertex_id]

    def degree(self, vertex_id: VertexId) -> int:
        return len(self.incident_edges(vertex_id))

    def __repr__(self) -> str:
        return f"SubgraphView(vertices={self.vertex_count()}, edges={self.edge_count()})"


class ReverseView:
    """
    View of a directed graph with every edge pointing the other way.

    Incident edges on the view are the edges entering the vertex in the
    underlying graph, found by scanning its edge enumeration.
    """

    def __init__(self, graph: Any):
        if direction_of(graph) is not Direction.DIRECTED:
            raise GraphOperationError("ReverseView requires a directed graph")
        self._graph = graph

    @property
    def direction(self) -> Direction:
        return Direction.DIRECTED

    def vertex_ids(self) -> List[VertexId]:
        return self._graph.vertex_ids()

    def vertex_count(self) -> int:
        return self._graph.vertex_count()

    def has_vertex(self, vertex_id: VertexId) -> bool:
        return self._graph.has_vertex(vertex_id)

    def edge(self, edge_id: EdgeId) -> EdgeRecord:
        record = self._graph.edge(edge_id)
        return EdgeRecord(record.dst, record.src, record.edge_id, record.payload)

    def edges(self) -> List[EdgeRecord]:
        return [
            EdgeRecord(record.dst, record.src, record.edge_id, record.payload)
            for record in self._graph.edges()
        ]

    def edge_count(self) -> int:
        return self._graph.edge_count()

    def incident_edges(self, vertex_id: VertexId) -> List[Tuple[VertexId, EdgeId]]:
        if not self._graph.has_vertex(vertex_id):
            raise KeyError(vertex_id)
        return [
            (record.src, record.edge_id)
            for record in self._graph.edges()
            if record.dst == vertex_id
        ]

    def neighbors(self, vertex_id: VertexId) -> List[VertexId]:
        return [neighbor for neighbor, _ in self.incident_edges(vertex_id)]

    def predecessors(self, vertex_id: VertexId) -> List[VertexId]:
        return self._graph.neighbors(vertex_id)

    def degree(self, vertex_id: VertexId) -> int:
        return len(self.incident_edges(vertex_id))
