"""Shared test fixtures for core graph tests."""

import random

import pytest

from meridian.core.enums import Direction, GraphFlavor
from meridian.core.graph import Graph

# a --- b --- c
#       |     |
#       +---- d --- e
REFERENCE_EDGES = [(0, 1), (1, 2), (2, 3), (1, 3), (3, 4)]

# Two biconnected blocks joined by a chain, with a pendant on each side:
#
#                                  j
#                                /   \
#      a --- b                 i      k ---
#      |     |                 |           |
#      c --- d --- e --- f --- h --- m --- l
#                              |     |
#                              g     n
COMPLEX_EDGES = [
    (0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (4, 5), (5, 7), (7, 8),
    (7, 6), (7, 12), (8, 9), (9, 10), (10, 11), (11, 12), (12, 13),
]

DAG_EDGES = [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)]


@pytest.fixture
def reference_graph(storage_cls) -> Graph:
    """Fixture providing the undirected five vertex graph a..e."""
    return Graph.from_edges(REFERENCE_EDGES, storage_cls=storage_cls)


@pytest.fixture
def complex_graph(storage_cls) -> Graph:
    """Fixture providing the undirected fourteen vertex graph a..n."""
    return Graph.from_edges(COMPLEX_EDGES, storage_cls=storage_cls)


@pytest.fixture
def dag(storage_cls) -> Graph:
    """Fixture providing a small directed acyclic graph."""
    return Graph.from_edges(DAG_EDGES, direction=Direction.DIRECTED, storage_cls=storage_cls)


@pytest.fixture
def random_graph_factory(storage_cls):
    """Fixture providing a builder for seeded random undirected pseudo graphs.

    The builder adds parallel edges and self loops with small probability so
    that every edge case of the structure shows up across seeds.
    """

    def build(seed: int, vertex_count: int = 12, edge_count: int = 16) -> Graph:
        rng = random.Random(seed)
        graph = Graph(storage_cls(), GraphFlavor.PSEUDO)
        vertices = graph.add_vertices(vertex_count)
        for _ in range(edge_count):
            src = rng.choice(vertices)
            dst = src if rng.random() < 0.05 else rng.choice(vertices)
            graph.add_edge_checked(src, dst)
        return graph

    return build
