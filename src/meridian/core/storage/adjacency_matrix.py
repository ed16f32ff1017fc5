"""
Adjacency matrix storage.

Every vertex owns a dense slot; cell ``[i][j]`` holds the identifiers of the
edges from slot ``i`` to slot ``j`` (a list, so parallel edges are
representable). Undirected edges are recorded in both ``[i][j]`` and
``[j][i]``. Removing a vertex tombstones its slot; slots are never reused, in
line with identifiers.

Space: O(|V|^2) cells. Edge lookup between two vertices is O(1); neighbor
lookup scans one row.
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..enums import Direction
from ..models import EdgePayload
from ..types import EdgeId, EdgeRecord, VertexId
from .base import Storage

logger = logging.getLogger(__name__)


class AdjacencyMatrix(Storage):
    """
    Storage backed by a square matrix of edge-id lists.

    Attributes:
        _slot_of (Dict[VertexId, int]): Matrix slot of each live vertex
        _vertex_at (List[Optional[VertexId]]): Vertex occupying each slot, None
            once removed
        _matrix (List[List[List[EdgeId]]]): Edge ids per (row, column) cell
        _edges (Dict[EdgeId, EdgeRecord]): Edge table in insertion order
    """

    def __init__(self, direction: Direction = Direction.UNDIRECTED):
        super().__init__(direction)
        self._slot_of: Dict[VertexId, int] = {}
        self._vertex_at: List[Optional[VertexId]] = []
        self._matrix: List[List[List[EdgeId]]] = []
        self._edges: Dict[EdgeId, EdgeRecord] = {}

    @property
    def total_slot_count(self) -> int:
        """Number of allocated slots, including tombstoned ones."""
        return len(self._vertex_at)

    def insert_vertex(self) -> VertexId:
        vertex_id = self._issue_vertex_id()
        for row in self._matrix:
            row.append([])
        self._matrix.append([[] for _ in range(len(self._vertex_at) + 1)])
        self._slot_of[vertex_id] = len(self._vertex_at)
        self._vertex_at.append(vertex_id)
        logger.debug("Inserted vertex %s at slot %d", vertex_id, self._slot_of[vertex_id])
        return vertex_id

    def remove_vertex(self, vertex_id: VertexId) -> None:
        slot = self._slot_of[vertex_id]

        incident = [edge_id for cell in self._matrix[slot] for edge_id in cell]
        if self.is_directed:
            incident.extend(edge_id for row in self._matrix for edge_id in row[slot])

        for edge_id in dict.fromkeys(incident):
            self.remove_edge(edge_id)

        del self._slot_of[vertex_id]
        self._vertex_at[slot] = None
        logger.debug("Removed vertex %s and tombstoned slot %d", vertex_id, slot)

    def insert_edge(
        self, src: VertexId, dst: VertexId, payload: Optional[EdgePayload] = None
    ) -> EdgeId:
        src_slot = self._slot_of[src]
        dst_slot = self._slot_of[dst]

        edge_id = self._issue_edge_id()
        record = EdgeRecord(src, dst, edge_id, payload if payload is not None else EdgePayload())
        self._edges[edge_id] = record

        self._matrix[src_slot][dst_slot].append(edge_id)
        if not self.is_directed and src_slot != dst_slot:
            self._matrix[dst_slot][src_slot].append(edge_id)

        logger.debug("Inserted edge %s: %s -> %s", edge_id, src, dst)
        return edge_id

    def remove_edge(self, edge_id: EdgeId) -> EdgePayload:
        src, dst, _, payload = self._edges.pop(edge_id)
        src_slot = self._slot_of[src]
        dst_slot = self._slot_of[dst]

        self._matrix[src_slot][dst_slot].remove(edge_id)
        if not self.is_directed and src_slot != dst_slot:
            self._matrix[dst_slot][src_slot].remove(edge_id)

        logger.debug("Removed edge %s: %s -> %s", edge_id, src, dst)
        return payload

    def vertex_ids(self) -> List[VertexId]:
        return [vertex_id for vertex_id in self._vertex_at if vertex_id is not None]

    def has_vertex(self, vertex_id: VertexId) -> bool:
        return vertex_id in self._slot_of

    def has_edge(self, edge_id: EdgeId) -> bool:
        return edge_id in self._edges

    def edge(self, edge_id: EdgeId) -> EdgeRecord:
        return self._edges[edge_id]

    def edges(self) -> List[EdgeRecord]:
        return list(self._edges.values())

    def vertex_count(self) -> int:
        return len(self._slot_of)

    def edge_count(self) -> int:
        return len(self._edges)

    def incident_edges(self, vertex_id: VertexId) -> List[Tuple[VertexId, EdgeId]]:
        row = self._matrix[self._slot_of[vertex_id]]
        incident = []
        for column, cell in enumerate(row):
            neighbor = self._vertex_at[column]
            for edge_id in cell:
                incident.append((neighbor, edge_id))
        return incident

    def predecessors(self, vertex_id: VertexId) -> List[VertexId]:
        if not self.is_directed:
            return self.neighbors(vertex_id)
        column = self._slot_of[vertex_id]
        return [
            self._vertex_at[row_index]
            for row_index, row in enumerate(self._matrix)
            for _ in row[column]
        ]

    def edges_between(self, src: VertexId, dst: VertexId) -> List[EdgeId]:
        return list(self._matrix[self._slot_of[src]][self._slot_of[dst]])

    def degree(self, vertex_id: VertexId) -> int:
        return sum(len(cell) for cell in self._matrix[self._slot_of[vertex_id]])
