"""
Topological sort.

Orders the vertices of a directed graph so that every edge points forward in
the order. The sort is a DepthFirstSearch listener: a vertex is recorded
when it turns black, i.e. after all of its descendants, so the reversed
finish order is topological. Reaching a gray vertex means the current DFS
path loops back on itself, which is reported as a CycleDetectedError. The
operation is all-or-nothing: no partial order is returned.
"""

import logging
from typing import List

from ..capabilities import Traversable, direction_of
from ..enums import Direction
from ..exceptions import CycleDetectedError, GraphOperationError
from ..traversal import DepthFirstSearch, DfsListener
from ..types import VertexId

logger = logging.getLogger(__name__)


class TopologicalSort(DfsListener):
    """
    DFS-based topological sort.

    Example:
        >>> graph = Graph.from_edges([(0, 1), (0, 2), (1, 2)], direction=Direction.DIRECTED)
        >>> TopologicalSort().execute(graph)
        [0, 1, 2]
    """

    def __init__(self):
        self._finished: List[VertexId] = []

    def on_black(self, dfs: DepthFirstSearch, vertex_id: VertexId) -> None:
        self._finished.append(vertex_id)

    def on_gray(self, dfs: DepthFirstSearch, vertex_id: VertexId, gray: VertexId) -> None:
        cycle = dfs.tree_path(gray, vertex_id)
        logger.debug("Cycle found while sorting: %s", cycle)
        raise CycleDetectedError(gray, cycle)

    def execute(self, graph: Traversable) -> List[VertexId]:
        """
        Sort the vertices of ``graph`` topologically.

        Args:
            graph (Traversable): Directed graph providing vertex enumeration
                and neighbor lookup

        Returns:
            List[VertexId]: Every vertex, each before all of its successors

        Raises:
            CycleDetectedError: If the graph contains a cycle (self loops
                included)
            GraphOperationError: If the graph reports itself as undirected
        """
        if direction_of(graph) is Direction.UNDIRECTED:
            raise GraphOperationError("Topological sort requires a directed graph")

        self._finished = []
        DepthFirstSearch(graph, self).execute()

        order = list(reversed(self._finished))
        self._finished = []
        logger.debug("Sorted %d vertices topologically", len(order))
        return order

    @classmethod
    def is_acyclic(cls, graph: Traversable) -> bool:
        """Whether the directed ``graph`` has no cycle."""
        try:
            cls().execute(graph)
        except CycleDetectedError:
            return False
        return True
