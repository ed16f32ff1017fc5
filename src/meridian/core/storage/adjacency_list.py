"""
Adjacency list storage.

Each vertex keeps an insertion-ordered mapping from incident edge id to the
vertex at the other end. Directed storages keep a second, reverse mapping so
that predecessor lookup and vertex removal do not need a full edge scan.

Space: |V| + |E| entries when directed plus the reverse index, |V| + 2|E|
when undirected (each non-loop edge is recorded at both endpoints).
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..enums import Direction
from ..models import EdgePayload
from ..types import EdgeId, EdgeRecord, VertexId
from .base import Storage

logger = logging.getLogger(__name__)


class AdjacencyList(Storage):
    """
    Storage backed by per-vertex incidence mappings.

    Attributes:
        _outgoing (Dict[VertexId, Dict[EdgeId, VertexId]]): Edges leaving each
            vertex (every incident edge when undirected)
        _incoming (Dict[VertexId, Dict[EdgeId, VertexId]]): Edges entering each
            vertex; only maintained for directed storages
        _edges (Dict[EdgeId, EdgeRecord]): Edge table in insertion order
    """

    def __init__(self, direction: Direction = Direction.UNDIRECTED):
        super().__init__(direction)
        self._outgoing: Dict[VertexId, Dict[EdgeId, VertexId]] = {}
        self._incoming: Dict[VertexId, Dict[EdgeId, VertexId]] = {}
        self._edges: Dict[EdgeId, EdgeRecord] = {}

    def insert_vertex(self) -> VertexId:
        vertex_id = self._issue_vertex_id()
        self._outgoing[vertex_id] = {}
        if self.is_directed:
            self._incoming[vertex_id] = {}
        logger.debug("Inserted vertex %s", vertex_id)
        return vertex_id

    def remove_vertex(self, vertex_id: VertexId) -> None:
        incident = list(self._outgoing[vertex_id])
        if self.is_directed:
            incident.extend(self._incoming[vertex_id])

        for edge_id in dict.fromkeys(incident):
            self.remove_edge(edge_id)

        del self._outgoing[vertex_id]
        self._incoming.pop(vertex_id, None)
        logger.debug("Removed vertex %s with %d incident edges", vertex_id, len(incident))

    def insert_edge(
        self, src: VertexId, dst: VertexId, payload: Optional[EdgePayload] = None
    ) -> EdgeId:
        src_edges = self._outgoing[src]
        dst_edges = self._incoming[dst] if self.is_directed else self._outgoing[dst]

        edge_id = self._issue_edge_id()
        record = EdgeRecord(src, dst, edge_id, payload if payload is not None else EdgePayload())
        self._edges[edge_id] = record

        src_edges[edge_id] = dst
        if self.is_directed or src != dst:
            dst_edges[edge_id] = src

        logger.debug("Inserted edge %s: %s -> %s", edge_id, src, dst)
        return edge_id

    def remove_edge(self, edge_id: EdgeId) -> EdgePayload:
        record = self._edges.pop(edge_id)
        src, dst, _, payload = record

        del self._outgoing[src][edge_id]
        if self.is_directed:
            del self._incoming[dst][edge_id]
        elif not record.is_loop:
            del self._outgoing[dst][edge_id]

        logger.debug("Removed edge %s: %s -> %s", edge_id, src, dst)
        return payload

    def vertex_ids(self) -> List[VertexId]:
        return list(self._outgoing)

    def has_vertex(self, vertex_id: VertexId) -> bool:
        return vertex_id in self._outgoing

    def has_edge(self, edge_id: EdgeId) -> bool:
        return edge_id in self._edges

    def edge(self, edge_id: EdgeId) -> EdgeRecord:
        return self._edges[edge_id]

    def edges(self) -> List[EdgeRecord]:
        return list(self._edges.values())

    def vertex_count(self) -> int:
        return len(self._outgoing)

    def edge_count(self) -> int:
        return len(self._edges)

    def incident_edges(self, vertex_id: VertexId) -> List[Tuple[VertexId, EdgeId]]:
        return [(neighbor, edge_id) for edge_id, neighbor in self._outgoing[vertex_id].items()]

    def predecessors(self, vertex_id: VertexId) -> List[VertexId]:
        if not self.is_directed:
            return self.neighbors(vertex_id)
        return list(self._incoming[vertex_id].values())

    def degree(self, vertex_id: VertexId) -> int:
        return len(self._outgoing[vertex_id])
