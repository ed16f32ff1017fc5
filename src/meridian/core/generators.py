"""
Classic graph generators.

Each generator builds a fresh SIMPLE Graph whose vertices are inserted first,
so vertex ``i`` of the pattern gets identifier ``i``. Edges are inserted in a
fixed order, which makes the generated graphs deterministic.
"""

import logging
from typing import List, Tuple, Type

from .enums import Direction
from .graph import Graph
from .storage import AdjacencyList, Storage
from .types import VertexId

logger = logging.getLogger(__name__)


def _require_count(name: str, vertex_count: int, minimum: int) -> None:
    if vertex_count < minimum:
        raise ValueError(
            f"Can not form {name} with less than {minimum} vertices: {vertex_count} < {minimum}"
        )


def _new_graph(
    vertex_count: int, direction: Direction, storage_cls: Type[Storage]
) -> Tuple[Graph, List[VertexId]]:
    graph = Graph(storage_cls(direction))
    return graph, graph.add_vertices(vertex_count)


def empty_graph(
    vertex_count: int,
    direction: Direction = Direction.UNDIRECTED,
    storage_cls: Type[Storage] = AdjacencyList,
) -> Graph:
    """Graph with ``vertex_count`` isolated vertices."""
    _require_count("an empty graph", vertex_count, 0)
    graph, _ = _new_graph(vertex_count, direction, storage_cls)
    return graph


def path_graph(
    vertex_count: int,
    direction: Direction = Direction.UNDIRECTED,
    storage_cls: Type[Storage] = AdjacencyList,
) -> Graph:
    """Graph with edges ``0 - 1 - ... - (n - 1)``."""
    _require_count("a path graph", vertex_count, 1)
    graph, vertices = _new_graph(vertex_count, direction, storage_cls)
    for src, dst in zip(vertices, vertices[1:]):
        graph.add_edge_checked(src, dst)
    return graph


def cycle_graph(
    vertex_count: int,
    direction: Direction = Direction.UNDIRECTED,
    storage_cls: Type[Storage] = AdjacencyList,
) -> Graph:
    """
    Path graph closed by an edge from the last vertex back to the first.

    Raises:
        ValueError: If ``vertex_count`` is smaller than 3
    """
    _require_count("a cycle graph", vertex_count, 3)
    graph = path_graph(vertex_count, direction, storage_cls)
    vertices = graph.vertex_ids()
    graph.add_edge_checked(vertices[-1], vertices[0])
    return graph


def complete_graph(
    vertex_count: int,
    direction: Direction = Direction.UNDIRECTED,
    storage_cls: Type[Storage] = AdjacencyList,
) -> Graph:
    """
    Graph with an edge between every pair of distinct vertices.

    Directed graphs get both ``i -> j`` and ``j -> i``.
    """
    _require_count("a complete graph", vertex_count, 0)
    graph, vertices = _new_graph(vertex_count, direction, storage_cls)
    for src in vertices:
        for dst in vertices:
            if src < dst or (src != dst and direction.is_directed):
                graph.add_edge_checked(src, dst)
    logger.debug("Generated complete graph with %d edges", graph.edge_count())
    return graph


def star_graph(
    vertex_count: int,
    direction: Direction = Direction.UNDIRECTED,
    storage_cls: Type[Storage] = AdjacencyList,
) -> Graph:
    """Graph with vertex 0 as the center joined to every other vertex."""
    _require_count("a star graph", vertex_count, 1)
    graph, vertices = _new_graph(vertex_count, direction, storage_cls)
    center = vertices[0]
    for leaf in vertices[1:]:
        graph.add_edge_checked(center, leaf)
    return graph


def wheel_graph(
    vertex_count: int,
    direction: Direction = Direction.UNDIRECTED,
    storage_cls: Type[Storage] = AdjacencyList,
) -> Graph:
    """
    Cycle over the first ``n - 1`` vertices plus a hub joined to all of them.

    The hub is the last vertex.

    Raises:
        ValueError: If ``vertex_count`` is smaller than 4
    """
    _require_count("a wheel graph", vertex_count, 4)
    graph = cycle_graph(vertex_count - 1, direction, storage_cls)
    rim = graph.vertex_ids()
    hub = graph.add_vertex()
    for vertex_id in rim:
        graph.add_edge_checked(hub, vertex_id)
    return graph


def ladder_graph(
    side_vertex_count: int,
    direction: Direction = Direction.UNDIRECTED,
    storage_cls: Type[Storage] = AdjacencyList,
) -> Graph:
    """
    Two parallel paths of ``side_vertex_count`` vertices joined rung by rung.

    Vertices ``0 .. k - 1`` form the first side and ``k .. 2k - 1`` the
    second; rung ``i`` joins ``i`` and ``k + i``.
    """
    _require_count("a ladder graph", side_vertex_count, 1)
    graph, vertices = _new_graph(2 * side_vertex_count, direction, storage_cls)
    first, second = vertices[:side_vertex_count], vertices[side_vertex_count:]
    for side in (first, second):
        for src, dst in zip(side, side[1:]):
            graph.add_edge_checked(src, dst)
    for src, dst in zip(first, second):
        graph.add_edge_checked(src, dst)
    return graph
