"""Tests for topological sorting."""

import random

import pytest

from meridian.core.algorithms import TopologicalSort
from meridian.core.enums import Direction, GraphFlavor
from meridian.core.exceptions import CycleDetectedError, GraphOperationError
from meridian.core.graph import Graph


def assert_topological(graph, order):
    position = {vertex_id: index for index, vertex_id in enumerate(order)}
    assert sorted(order) == sorted(graph.vertex_ids())
    for record in graph.edges():
        assert position[record.src] < position[record.dst]


class NeighborTable:
    """Bare structure providing only vertex enumeration and neighbor lookup."""

    def __init__(self, table):
        self.table = table

    def vertex_ids(self):
        return list(self.table)

    def vertex_count(self):
        return len(self.table)

    def has_vertex(self, vertex_id):
        return vertex_id in self.table

    def neighbors(self, vertex_id):
        return list(self.table[vertex_id])

    def incident_edges(self, vertex_id):
        return [(neighbor, index) for index, neighbor in enumerate(self.table[vertex_id])]


def test_sort_dag(dag):
    """Test every edge points forward in the order."""
    order = TopologicalSort().execute(dag)
    assert_topological(dag, order)
    assert order[0] == 0
    assert order[-1] == 4


def test_sort_is_deterministic(storage_cls):
    """Test the order follows vertex and neighbor enumeration."""
    graph = Graph.from_edges([(0, 1), (0, 2), (1, 2)], direction=Direction.DIRECTED, storage_cls=storage_cls)
    assert TopologicalSort().execute(graph) == [0, 1, 2]


def test_sort_includes_isolated_vertices(storage_cls):
    """Test vertices without edges are part of the order."""
    graph = Graph.from_edges([(2, 1)], vertex_count=4, direction=Direction.DIRECTED, storage_cls=storage_cls)
    order = TopologicalSort().execute(graph)
    assert_topological(graph, order)
    assert len(order) == 4


def test_sort_empty_graph(storage_cls):
    """Test the empty graph has an empty order."""
    assert TopologicalSort().execute(Graph(storage_cls(Direction.DIRECTED))) == []


def test_sort_single_vertex(storage_cls):
    """Test a lone vertex is the whole order."""
    graph = Graph(storage_cls(Direction.DIRECTED))
    vertex_id = graph.add_vertex()
    assert TopologicalSort().execute(graph) == [vertex_id]


def test_sort_detects_cycle(storage_cls):
    """Test a cycle aborts the sort and is reported."""
    graph = Graph.from_edges(
        [(0, 1), (1, 2), (2, 0), (2, 3)], direction=Direction.DIRECTED, storage_cls=storage_cls
    )

    with pytest.raises(CycleDetectedError) as exc_info:
        TopologicalSort().execute(graph)

    assert exc_info.value.vertex == 0
    assert exc_info.value.cycle == [0, 1, 2]
    assert "0 -> 1 -> 2 -> 0" in str(exc_info.value)


def test_sort_detects_self_loop(storage_cls):
    """Test a self loop is a cycle."""
    graph = Graph(storage_cls(Direction.DIRECTED), GraphFlavor.PSEUDO)
    a, b = graph.add_vertices(2)
    graph.add_edge_checked(a, b)
    graph.add_edge_checked(b, b)

    with pytest.raises(CycleDetectedError) as exc_info:
        TopologicalSort().execute(graph)

    assert exc_info.value.cycle == [b]


def test_sort_rejects_undirected_graph(reference_graph):
    """Test undirected graphs have no topological order."""
    with pytest.raises(GraphOperationError, match="requires a directed graph"):
        TopologicalSort().execute(reference_graph)


def test_sort_accepts_bare_storage(dag):
    """Test the sort only needs the capabilities, not a Graph."""
    order = TopologicalSort().execute(dag.storage)
    assert_topological(dag, order)


def test_sort_structure_without_direction_is_directed():
    """Test a structure that does not report a direction is treated as directed."""
    table = NeighborTable({"shirt": ["tie", "belt"], "tie": ["jacket"], "belt": ["jacket"], "jacket": []})
    order = TopologicalSort().execute(table)
    assert order[0] == "shirt"
    assert order[-1] == "jacket"


def test_sort_instance_is_reusable(dag):
    """Test a failed run does not leak state into the next one."""
    cyclic = Graph.from_edges([(0, 1), (1, 0)], direction=Direction.DIRECTED)
    sorter = TopologicalSort()

    with pytest.raises(CycleDetectedError):
        sorter.execute(cyclic)

    order = sorter.execute(dag)
    assert_topological(dag, order)
    assert sorter.execute(dag) == order


def test_is_acyclic(dag):
    """Test the acyclicity shortcut."""
    assert TopologicalSort.is_acyclic(dag)
    assert not TopologicalSort.is_acyclic(
        Graph.from_edges([(0, 1), (1, 2), (2, 1)], direction=Direction.DIRECTED)
    )


@pytest.mark.parametrize("seed", range(10))
def test_sort_random_dags(storage_cls, seed):
    """Test random DAGs, with edges only from lower to higher index, are sorted."""
    rng = random.Random(seed)
    vertex_count = 15
    pairs = [
        (src, dst)
        for src in range(vertex_count)
        for dst in range(src + 1, vertex_count)
        if rng.random() < 0.2
    ]
    rng.shuffle(pairs)
    graph = Graph.from_edges(pairs, vertex_count=vertex_count, direction=Direction.DIRECTED, storage_cls=storage_cls)

    assert_topological(graph, TopologicalSort().execute(graph))


@pytest.mark.parametrize("seed", range(5))
def test_sort_random_cycles_detected(seed):
    """Test a back edge added to a random DAG is always detected."""
    rng = random.Random(seed)
    graph = Graph.from_edges(
        [(index, index + 1) for index in range(10)], direction=Direction.DIRECTED
    )
    high = rng.randrange(1, 11)
    low = rng.randrange(0, high)
    graph.add_edge_checked(high, low)

    with pytest.raises(CycleDetectedError) as exc_info:
        TopologicalSort().execute(graph)

    assert exc_info.value.cycle == list(range(low, high + 1))
