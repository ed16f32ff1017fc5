"""
Graph traversal.

This module provides two traversal styles over any Traversable structure:
- DepthFirstSearch: a full-graph DFS with white/gray/black colouring,
  discovery and finish times, and listener hooks. Algorithms such as
  topological sort are written as listeners.
- BFSIterator and DFSIterator: iterator-pattern traversals from a single
  start vertex, yielding ``(vertex_id, depth)`` tuples.

Both are iterative, so traversal depth is not bounded by the interpreter's
recursion limit. Neighbors are visited in the order the graph enumerates them.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from .capabilities import Traversable
from .enums import Color
from .types import VertexId

logger = logging.getLogger(__name__)


class DfsListener:
    """
    Hooks invoked by DepthFirstSearch.

    Every hook is a no-op by default; subclasses override what they need.
    """

    def on_start(self, dfs: "DepthFirstSearch", root: VertexId) -> None:
        """Called before a new DFS tree is grown from ``root``."""

    def on_white(self, dfs: "DepthFirstSearch", vertex_id: VertexId) -> None:
        """Called when ``vertex_id`` is discovered and turns gray."""

    def on_gray(self, dfs: "DepthFirstSearch", vertex_id: VertexId, gray: VertexId) -> None:
        """Called when ``vertex_id`` reaches a vertex that is still gray."""

    def on_black(self, dfs: "DepthFirstSearch", vertex_id: VertexId) -> None:
        """Called when every descendant of ``vertex_id`` is explored."""

    def on_finish(self, dfs: "DepthFirstSearch") -> None:
        """Called once the whole search is over."""


class DepthFirstSearch:
    """
    Depth-first search over every vertex of a graph.

    Trees are grown from each still-white vertex in enumeration order, or
    only from ``start_ids`` when given. The search state is created per
    instance and describes a single run.

    Attributes:
        colors (Dict[VertexId, Color]): Visit state of every vertex
        discovered (Dict[VertexId, int]): Time each vertex turned gray
        finished (Dict[VertexId, int]): Time each vertex turned black
        parent (Dict[VertexId, Optional[VertexId]]): DFS tree parent, None
            for roots
    """

    def __init__(
        self,
        graph: Traversable,
        listener: Optional[DfsListener] = None,
        start_ids: Optional[Iterable[VertexId]] = None,
    ):
        self.graph = graph
        self.listener = listener if listener is not None else DfsListener()
        self.start_ids = list(start_ids) if start_ids is not None else None
        self.colors: Dict[VertexId, Color] = {v: Color.WHITE for v in graph.vertex_ids()}
        self.discovered: Dict[VertexId, int] = {}
        self.finished: Dict[VertexId, int] = {}
        self.parent: Dict[VertexId, Optional[VertexId]] = {}
        self._time = 0

    def execute(self) -> "DepthFirstSearch":
        """Run the search and return self for chained access to the state."""
        roots = self.start_ids if self.start_ids is not None else list(self.colors)
        for root in roots:
            if self.colors[root] is Color.WHITE:
                self._grow_tree(root)
        self.listener.on_finish(self)
        logger.debug("DFS finished after visiting %d vertices", len(self.finished))
        return self

    def tree_path(self, ancestor: VertexId, descendant: VertexId) -> List[VertexId]:
        """
        Vertices on the tree path from ``ancestor`` down to ``descendant``.

        Only meaningful while ``ancestor`` is an ancestor of ``descendant`` in
        the current DFS tree.
        """
        path = [descendant]
        while path[-1] != ancestor:
            parent = self.parent[path[-1]]
            if parent is None:
                raise ValueError(f"{ancestor} is not an ancestor of {descendant}")
            path.append(parent)
        path.reverse()
        return path

    def _discover(self, vertex_id: VertexId, parent: Optional[VertexId]) -> None:
        self.colors[vertex_id] = Color.GRAY
        self.parent[vertex_id] = parent
        self.discovered[vertex_id] = self._time
        self._time += 1
        self.listener.on_white(self, vertex_id)

    def _grow_tree(self, root: VertexId) -> None:
        self.listener.on_start(self, root)
        self._discover(root, None)
        stack: List[Tuple[VertexId, Iterator[VertexId]]] = [
            (root, iter(self.graph.neighbors(root)))
        ]

        while stack:
            vertex_id, neighbors = stack[-1]
            for neighbor in neighbors:
                color = self.colors[neighbor]
                if color is Color.WHITE:
                    self._discover(neighbor, vertex_id)
                    stack.append((neighbor, iter(self.graph.neighbors(neighbor))))
                    break
                if color is Color.GRAY:
                    self.listener.on_gray(self, vertex_id, neighbor)
            else:
                stack.pop()
                self.colors[vertex_id] = Color.BLACK
                self.finished[vertex_id] = self._time
                self._time += 1
                self.listener.on_black(self, vertex_id)


class GraphIterator(ABC):
    """Base class for single-source traversal iterators."""

    def __init__(self, graph: Traversable, start_node: VertexId):
        """
        Initialize iterator.

        Args:
            graph: The graph to traverse
            start_node: Starting vertex for traversal
        """
        self.graph = graph
        self.start = start_node
        self.visited: Set[VertexId] = set()

    @abstractmethod
    def __iter__(self) -> Iterator[Tuple[VertexId, int]]:
        """
        Get iterator for traversal.

        Returns:
            Iterator yielding tuples of (vertex_id, depth)
        """


class BFSIterator(GraphIterator):
    """Breadth-first traversal iterator."""

    def __iter__(self) -> Iterator[Tuple[VertexId, int]]:
        if not self.graph.has_vertex(self.start):
            return

        queue = deque([(self.start, 0)])
        self.visited.add(self.start)

        while queue:
            node, depth = queue.popleft()
            yield node, depth

            for neighbor in self.graph.neighbors(node):
                if neighbor not in self.visited:
                    self.visited.add(neighbor)
                    queue.append((neighbor, depth + 1))


class DFSIterator(GraphIterator):
    """Depth-first traversal iterator (preorder)."""

    def __iter__(self) -> Iterator[Tuple[VertexId, int]]:
        if not self.graph.has_vertex(self.start):
            return

        stack = [(self.start, 0, iter(self.graph.neighbors(self.start)))]
        self.visited.add(self.start)
        yield self.start, 0

        while stack:
            node, depth, neighbors = stack[-1]
            try:
                neighbor = next(neighbors)
                if neighbor not in self.visited:
                    self.visited.add(neighbor)
                    yield neighbor, depth + 1
                    stack.append((neighbor, depth + 1, iter(self.graph.neighbors(neighbor))))
            except StopIteration:
                stack.pop()
