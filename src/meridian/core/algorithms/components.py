"""Connected component analysis.

This module provides functionality for analyzing the structural components of
a graph. It includes methods for:
- Finding connected components (weakly connected for directed graphs, where
  vertices are reachable ignoring edge direction)
- Finding strongly connected components (vertices mutually reachable following
  edge direction)
- Counting components and testing whether two vertices share one

All methods accept any Traversable structure, including views, and never
mutate it.
"""

import logging
from collections import deque
from typing import Dict, Iterator, List, Set, Tuple

from ..capabilities import Traversable, direction_of
from ..enums import Direction
from ..exceptions import VertexNotFoundError
from ..types import VertexId

logger = logging.getLogger(__name__)


class ComponentAnalysis:
    """Connected component analysis for graphs.

    The analysis methods are static methods so they can be used with any
    Traversable instance without maintaining state.
    """

    @staticmethod
    def _undirected_neighbors(graph: Traversable, vertex_id: VertexId) -> List[VertexId]:
        """Neighbors of ``vertex_id`` with edge direction ignored.

        For directed inputs the predecessors are added when the input can
        report them.

        Args:
            graph (Traversable): The graph instance.
            vertex_id (VertexId): Vertex to look around.

        Returns:
            List[VertexId]: Adjacent vertices, possibly with repeats.
        """
        neighbors = list(graph.neighbors(vertex_id))
        if direction_of(graph) is Direction.DIRECTED and hasattr(graph, "predecessors"):
            neighbors.extend(graph.predecessors(vertex_id))
        return neighbors

    @staticmethod
    def _find_component_bfs(
        graph: Traversable, start: VertexId, visited: Set[VertexId]
    ) -> Set[VertexId]:
        """Find all vertices in a component using breadth-first search.

        Args:
            graph (Traversable): The graph instance.
            start (VertexId): Starting vertex.
            visited (Set[VertexId]): Set of visited vertices, updated in place.

        Returns:
            Set[VertexId]: Set of vertices in the component.
        """
        component = {start}
        queue = deque([start])
        visited.add(start)

        while queue:
            current = queue.popleft()
            for neighbor in ComponentAnalysis._undirected_neighbors(graph, current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    component.add(neighbor)
                    queue.append(neighbor)

        return component

    @staticmethod
    def find_components(graph: Traversable) -> List[Set[VertexId]]:
        """Find all connected components in the graph.

        Edge directions are ignored, so for directed graphs these are the
        weakly connected components. Weak connectivity needs the input to
        provide ``predecessors``; without it only successors are followed.

        Args:
            graph (Traversable): The graph instance to analyze.

        Returns:
            List[Set[VertexId]]: One set of vertex ids per component, in the
                order their first vertex is enumerated.

        Example:
            >>> graph = Graph.from_edges([(0, 1), (2, 3)], vertex_count=5)
            >>> ComponentAnalysis.find_components(graph)
            [{0, 1}, {2, 3}, {4}]

        Note:
            - Each vertex appears in exactly one component
            - Isolated vertices form their own single-vertex components
        """
        components = []
        visited: Set[VertexId] = set()

        for vertex_id in graph.vertex_ids():
            if vertex_id not in visited:
                components.append(ComponentAnalysis._find_component_bfs(graph, vertex_id, visited))

        logger.debug("Found %d components among %d vertices", len(components), len(visited))
        return components

    @staticmethod
    def count_components(graph: Traversable) -> int:
        """Number of connected components; 0 for an empty graph."""
        return len(ComponentAnalysis.find_components(graph))

    @staticmethod
    def are_connected(graph: Traversable, first: VertexId, second: VertexId) -> bool:
        """Whether ``first`` and ``second`` lie in the same component.

        Raises:
            VertexNotFoundError: If either vertex is missing.
        """
        for vertex_id in (first, second):
            if not graph.has_vertex(vertex_id):
                raise VertexNotFoundError(vertex_id)

        visited: Set[VertexId] = set()
        return second in ComponentAnalysis._find_component_bfs(graph, first, visited)

    @staticmethod
    def find_strongly_connected_components(graph: Traversable) -> List[Set[VertexId]]:
        """Find all strongly connected components using Tarjan's algorithm.

        A strongly connected component (SCC) is a set of vertices where every
        vertex is reachable from every other one following edge direction.
        For undirected graphs the result equals find_components().

        Args:
            graph (Traversable): The graph instance to analyze.

        Returns:
            List[Set[VertexId]]: A list of sets, one per SCC.

        Note:
            - Components are returned in reverse topological order
            - Each vertex appears in exactly one component
            - Isolated vertices form their own single-vertex components
        """
        index = 0
        indices: Dict[VertexId, int] = {}
        lowlinks: Dict[VertexId, int] = {}
        stack: List[VertexId] = []
        on_stack: Set[VertexId] = set()
        components: List[Set[VertexId]] = []

        for root in graph.vertex_ids():
            if root in indices:
                continue

            indices[root] = lowlinks[root] = index
            index += 1
            stack.append(root)
            on_stack.add(root)
            frames: List[Tuple[VertexId, Iterator[VertexId]]] = [
                (root, iter(graph.neighbors(root)))
            ]

            while frames:
                vertex_id, successors = frames[-1]
                for successor in successors:
                    if successor not in indices:
                        indices[successor] = lowlinks[successor] = index
                        index += 1
                        stack.append(successor)
                        on_stack.add(successor)
                        frames.append((successor, iter(graph.neighbors(successor))))
                        break
                    if successor in on_stack:
                        lowlinks[vertex_id] = min(lowlinks[vertex_id], indices[successor])
                else:
                    frames.pop()
                    if frames:
                        caller = frames[-1][0]
                        lowlinks[caller] = min(lowlinks[caller], lowlinks[vertex_id])

                    # Vertex is the root of an SCC; collect it
                    if lowlinks[vertex_id] == indices[vertex_id]:
                        component = set()
                        while True:
                            member = stack.pop()
                            on_stack.remove(member)
                            component.add(member)
                            if member == vertex_id:
                                break
                        components.append(component)

        return components
