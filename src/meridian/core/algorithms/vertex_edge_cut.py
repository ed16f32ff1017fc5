"""
Articulation points and bridges.

Finds the cut vertices (articulation points) and cut edges (bridges) of an
undirected graph with a single depth-first search per connected component,
tracking for every vertex its discovery time ``disc`` and its low-link
``low``: the smallest discovery time reachable from its DFS subtree through
at most one back edge.

For a tree edge ``parent -> child``:
- ``low[child] > disc[parent]``: nothing in the child's subtree reaches above
  the edge, so the edge is a bridge.
- ``low[child] >= disc[parent]``: nothing reaches above the parent, so the
  parent is an articulation point, unless it is a DFS root. A root is an
  articulation point only when it has two or more DFS children.

The edge used to enter a vertex is skipped by edge id rather than by parent
vertex, so a second, parallel edge to the parent counts as a back edge and
correctly stops both parallel edges from being reported as bridges.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple

from ..capabilities import CutAnalyzable, direction_of
from ..enums import Direction
from ..exceptions import GraphOperationError
from ..types import EdgeId, EdgeRecord, VertexId

logger = logging.getLogger(__name__)


@dataclass
class CutResult:
    """
    Articulation points and bridges of a graph.

    Unpacks into ``(cut_vertices, bridge_ids)``.

    Attributes:
        cut_vertices (Set[VertexId]): Articulation points
        cut_edges (Dict[EdgeId, EdgeRecord]): Bridges keyed by edge id, with
            endpoints and payload
    """

    cut_vertices: Set[VertexId] = field(default_factory=set)
    cut_edges: Dict[EdgeId, EdgeRecord] = field(default_factory=dict)

    @property
    def bridge_ids(self) -> Set[EdgeId]:
        return set(self.cut_edges)

    def __iter__(self):
        yield self.cut_vertices
        yield self.bridge_ids


class VertexEdgeCut:
    """
    Articulation point and bridge detection.

    Each call to execute() builds fresh traversal state, so one instance can
    be reused across graphs.

    Example:
        >>> graph = Graph.from_edges([(0, 1), (1, 2), (2, 3), (1, 3), (3, 4)])
        >>> cut_vertices, bridges = VertexEdgeCut().execute(graph)
        >>> sorted(cut_vertices)
        [1, 3]
    """

    def execute(self, graph: CutAnalyzable) -> CutResult:
        """
        Compute the articulation points and bridges of ``graph``.

        Disconnected graphs are handled by starting a new search from every
        vertex not reached so far. The graph is only read.

        Args:
            graph (CutAnalyzable): Undirected graph providing vertex
                enumeration, edge enumeration and neighbor lookup

        Returns:
            CutResult: Articulation points and bridges; both empty for an
                empty graph

        Raises:
            GraphOperationError: If the graph reports itself as directed
        """
        if direction_of(graph, Direction.UNDIRECTED) is Direction.DIRECTED:
            raise GraphOperationError("Vertex/edge cut detection requires an undirected graph")

        records = {record.edge_id: record for record in graph.edges()}
        disc: Dict[VertexId, int] = {}
        low: Dict[VertexId, int] = {}
        result = CutResult()

        for root in graph.vertex_ids():
            if root not in disc:
                self._search_component(graph, root, disc, low, records, result)

        logger.debug(
            "Found %d cut vertices and %d bridges among %d vertices",
            len(result.cut_vertices),
            len(result.cut_edges),
            len(disc),
        )
        return result

    @staticmethod
    def _search_component(
        graph: CutAnalyzable,
        root: VertexId,
        disc: Dict[VertexId, int],
        low: Dict[VertexId, int],
        records: Dict[EdgeId, EdgeRecord],
        result: CutResult,
    ) -> None:
        """Run the low-link DFS over the component containing ``root``."""
        time = len(disc)
        disc[root] = low[root] = time
        root_children = 0

        # Frames hold the vertex, the edge used to enter it and its pending edges
        stack: List[Tuple[VertexId, Optional[EdgeId], Iterator[Tuple[VertexId, EdgeId]]]] = [
            (root, None, iter(graph.incident_edges(root)))
        ]

        while stack:
            vertex, parent_edge, pending = stack[-1]
            for neighbor, edge_id in pending:
                if edge_id == parent_edge:
                    continue
                if neighbor not in disc:
                    time += 1
                    disc[neighbor] = low[neighbor] = time
                    stack.append((neighbor, edge_id, iter(graph.incident_edges(neighbor))))
                    break
                low[vertex] = min(low[vertex], disc[neighbor])
            else:
                stack.pop()
                if not stack:
                    continue

                parent = stack[-1][0]
                low[parent] = min(low[parent], low[vertex])

                if low[vertex] > disc[parent]:
                    result.cut_edges[parent_edge] = records[parent_edge]

                if parent == root:
                    root_children += 1
                elif low[vertex] >= disc[parent]:
                    result.cut_vertices.add(parent)

        if root_children > 1:
            result.cut_vertices.add(root)
