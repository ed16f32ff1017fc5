"""Tests for the storage contract and both storage back-ends."""

import random
from typing import Dict, List, Optional

import pytest

from meridian.core.capabilities import CutAnalyzable, DirectionAware, Traversable
from meridian.core.enums import Direction
from meridian.core.exceptions import EdgeNotFoundError, VertexNotFoundError
from meridian.core.models import EdgePayload
from meridian.core.storage import AdjacencyList, AdjacencyMatrix, Storage
from meridian.core.types import EdgeId, EdgeRecord, VertexId


class EdgeTableStorage(Storage):
    """Minimal back-end implementing only the primitive operations."""

    def __init__(self, direction: Direction = Direction.UNDIRECTED):
        super().__init__(direction)
        self._vertices: List[VertexId] = []
        self._edges: Dict[EdgeId, EdgeRecord] = {}

    def insert_vertex(self) -> VertexId:
        vertex_id = self._issue_vertex_id()
        self._vertices.append(vertex_id)
        return vertex_id

    def remove_vertex(self, vertex_id: VertexId) -> None:
        self._vertices.remove(vertex_id)
        for record in self.edges():
            if vertex_id in (record.src, record.dst):
                del self._edges[record.edge_id]

    def insert_edge(
        self, src: VertexId, dst: VertexId, payload: Optional[EdgePayload] = None
    ) -> EdgeId:
        if not (self.has_vertex(src) and self.has_vertex(dst)):
            raise KeyError((src, dst))
        edge_id = self._issue_edge_id()
        self._edges[edge_id] = EdgeRecord(src, dst, edge_id, payload or EdgePayload())
        return edge_id

    def remove_edge(self, edge_id: EdgeId) -> EdgePayload:
        return self._edges.pop(edge_id).payload

    def vertex_ids(self) -> List[VertexId]:
        return list(self._vertices)

    def has_vertex(self, vertex_id: VertexId) -> bool:
        return vertex_id in self._vertices

    def has_edge(self, edge_id: EdgeId) -> bool:
        return edge_id in self._edges

    def edge(self, edge_id: EdgeId) -> EdgeRecord:
        return self._edges[edge_id]

    def edges(self) -> List[EdgeRecord]:
        return list(self._edges.values())

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return len(self._edges)


@pytest.fixture(params=[AdjacencyList, AdjacencyMatrix, EdgeTableStorage])
def any_storage_cls(request):
    """Fixture running a test against every storage, including the minimal one."""
    return request.param


def test_storage_is_abstract():
    """Test the contract can not be instantiated directly."""
    with pytest.raises(TypeError):
        Storage()


def test_storage_satisfies_capabilities(any_storage_cls):
    """Test every storage provides the capability protocols."""
    storage = any_storage_cls()
    assert isinstance(storage, Traversable)
    assert isinstance(storage, CutAnalyzable)
    assert isinstance(storage, DirectionAware)


def test_vertex_ids_are_sequential(storage_cls):
    """Test vertex identifiers are issued in insertion order."""
    storage = storage_cls()
    assert [storage.insert_vertex() for _ in range(3)] == [0, 1, 2]
    assert storage.vertex_ids() == [0, 1, 2]
    assert storage.vertex_count() == 3


def test_ids_are_never_reused(any_storage_cls):
    """Test removed identifiers are not issued again."""
    storage = any_storage_cls()
    a = storage.insert_vertex()
    b = storage.insert_vertex()
    edge = storage.insert_edge(a, b)

    storage.remove_edge(edge)
    storage.remove_vertex(b)

    assert storage.insert_vertex() == 2
    assert storage.insert_edge(a, a) == 1
    assert storage.vertex_ids() == [0, 2]


def test_insert_edge_records_payload(any_storage_cls):
    """Test edge records carry endpoints and payload."""
    storage = any_storage_cls()
    a, b = storage.insert_vertex(), storage.insert_vertex()
    payload = EdgePayload(weight=2.5, attributes={"label": "ab"})

    edge_id = storage.insert_edge(a, b, payload)

    assert storage.has_edge(edge_id)
    assert storage.edge(edge_id) == EdgeRecord(a, b, edge_id, payload)
    assert storage.edges() == [EdgeRecord(a, b, edge_id, payload)]
    assert storage.edge_count() == 1


def test_insert_edge_default_payload(storage_cls):
    """Test an omitted payload defaults to unit weight."""
    storage = storage_cls()
    a, b = storage.insert_vertex(), storage.insert_vertex()
    edge_id = storage.insert_edge(a, b)
    assert storage.edge(edge_id).payload == EdgePayload()


def test_undirected_neighbors(any_storage_cls):
    """Test undirected edges are visible from both endpoints."""
    storage = any_storage_cls()
    a, b, c = (storage.insert_vertex() for _ in range(3))
    ab = storage.insert_edge(a, b)
    bc = storage.insert_edge(b, c)

    assert storage.neighbors(a) == [b]
    assert sorted(storage.neighbors(b)) == [a, c]
    assert sorted(storage.incident_edges(b)) == sorted([(a, ab), (c, bc)])
    assert storage.degree(b) == 2
    assert storage.edges_between(b, a) == [ab]
    assert storage.edges_between(a, c) == []
    assert sorted(storage.predecessors(b)) == [a, c]


def test_directed_neighbors(any_storage_cls):
    """Test directed edges are only followed from their source."""
    storage = any_storage_cls(Direction.DIRECTED)
    a, b, c = (storage.insert_vertex() for _ in range(3))
    ab = storage.insert_edge(a, b)
    storage.insert_edge(c, b)

    assert storage.is_directed
    assert storage.neighbors(a) == [b]
    assert storage.neighbors(b) == []
    assert sorted(storage.predecessors(b)) == [a, c]
    assert storage.edges_between(a, b) == [ab]
    assert storage.edges_between(b, a) == []
    assert storage.degree(b) == 0


def test_parallel_edges_are_listed_per_edge(any_storage_cls):
    """Test a neighbor joined by two edges is listed twice."""
    storage = any_storage_cls()
    a, b = storage.insert_vertex(), storage.insert_vertex()
    first = storage.insert_edge(a, b)
    second = storage.insert_edge(b, a)

    assert storage.neighbors(a) == [b, b]
    assert storage.degree(a) == 2
    assert sorted(storage.edges_between(a, b)) == [first, second]


def test_undirected_self_loop_reported_once(any_storage_cls):
    """Test a loop appears once among a vertex's incident edges."""
    storage = any_storage_cls()
    a = storage.insert_vertex()
    loop = storage.insert_edge(a, a)

    assert storage.incident_edges(a) == [(a, loop)]
    assert storage.degree(a) == 1

    storage.remove_edge(loop)
    assert storage.incident_edges(a) == []


def test_remove_edge_returns_payload(any_storage_cls):
    """Test edge removal hands back the payload."""
    storage = any_storage_cls()
    a, b = storage.insert_vertex(), storage.insert_vertex()
    payload = EdgePayload(weight=4.0)
    edge_id = storage.insert_edge(a, b, payload)

    assert storage.remove_edge(edge_id) is payload
    assert not storage.has_edge(edge_id)
    assert storage.neighbors(a) == []
    assert storage.neighbors(b) == []


@pytest.mark.parametrize("direction", list(Direction))
def test_remove_vertex_removes_incident_edges(any_storage_cls, direction):
    """Test removing a vertex drops every edge touching it."""
    storage = any_storage_cls(direction)
    a, b, c, d = (storage.insert_vertex() for _ in range(4))
    storage.insert_edge(a, c)
    storage.insert_edge(b, c)
    storage.insert_edge(c, d)
    storage.insert_edge(c, c)
    kept = storage.insert_edge(a, d)

    storage.remove_vertex(c)

    assert not storage.has_vertex(c)
    assert storage.vertex_ids() == [a, b, d]
    assert [record.edge_id for record in storage.edges()] == [kept]
    assert storage.neighbors(a) == [d]
    assert storage.neighbors(b) == []


def test_unchecked_operations_raise_lookup_error(storage_cls):
    """Test violated preconditions raise LookupError before any mutation."""
    storage = storage_cls()
    a = storage.insert_vertex()

    with pytest.raises(LookupError):
        storage.insert_edge(a, 99)
    with pytest.raises(LookupError):
        storage.insert_edge(99, a)
    with pytest.raises(LookupError):
        storage.remove_edge(5)
    with pytest.raises(LookupError):
        storage.remove_vertex(99)
    with pytest.raises(LookupError):
        storage.neighbors(99)

    assert storage.vertex_count() == 1
    assert storage.edge_count() == 0
    # The failed insertions did not consume an identifier
    assert storage.insert_edge(a, a) == 0


def test_checked_operations_raise_typed_errors(any_storage_cls):
    """Test checked variants report missing elements without mutating."""
    storage = any_storage_cls()
    a = storage.insert_vertex()

    with pytest.raises(VertexNotFoundError, match="Vertex with id 99 does not exist"):
        storage.insert_edge_checked(a, 99)
    with pytest.raises(VertexNotFoundError):
        storage.remove_vertex_checked(99)
    with pytest.raises(VertexNotFoundError):
        storage.neighbors_checked(99)
    with pytest.raises(VertexNotFoundError):
        storage.incident_edges_checked(99)
    with pytest.raises(VertexNotFoundError):
        storage.predecessors_checked(99)
    with pytest.raises(VertexNotFoundError):
        storage.edges_between_checked(a, 99)
    with pytest.raises(VertexNotFoundError):
        storage.degree_checked(99)
    with pytest.raises(EdgeNotFoundError, match="Edge with id 3 does not exist"):
        storage.remove_edge_checked(3)
    with pytest.raises(EdgeNotFoundError):
        storage.edge_checked(3)

    assert storage.vertex_count() == 1
    assert storage.edge_count() == 0


def test_checked_operations_succeed(any_storage_cls):
    """Test checked variants behave like the unchecked ones on valid input."""
    storage = any_storage_cls()
    a = storage.insert_vertex_checked()
    b = storage.insert_vertex_checked()

    assert storage.neighbors_checked(a) == []

    edge_id = storage.insert_edge_checked(a, b)
    assert storage.neighbors_checked(a) == [b]
    assert storage.degree_checked(b) == 1
    assert storage.edge_checked(edge_id).dst == b

    storage.remove_edge_checked(edge_id)
    storage.remove_vertex_checked(b)
    assert storage.vertex_ids() == [a]


def test_removed_vertex_is_missing(storage_cls):
    """Test lookups on a removed vertex fail in both variants."""
    storage = storage_cls()
    a = storage.insert_vertex()
    storage.remove_vertex(a)

    with pytest.raises(LookupError):
        storage.neighbors(a)
    with pytest.raises(VertexNotFoundError):
        storage.neighbors_checked(a)


def test_matrix_slots_are_tombstoned():
    """Test matrix slots are kept after vertex removal."""
    storage = AdjacencyMatrix()
    a, b, c = (storage.insert_vertex() for _ in range(3))
    storage.insert_edge(a, c)

    storage.remove_vertex(b)

    assert storage.total_slot_count == 3
    assert storage.vertex_count() == 2
    assert storage.neighbors(a) == [c]
    assert storage.edges_between(c, a) == storage.edges_between(a, c)


def test_storage_repr():
    """Test storage representation."""
    storage = AdjacencyList(Direction.DIRECTED)
    storage.insert_vertex()
    assert repr(storage) == "AdjacencyList(direction=directed, vertices=1, edges=0)"


@pytest.mark.parametrize("direction", list(Direction))
@pytest.mark.parametrize("seed", range(5))
def test_back_ends_agree(direction, seed):
    """Test all back-ends answer every query identically for the same operations."""
    rng = random.Random(seed)
    storages = [AdjacencyList(direction), AdjacencyMatrix(direction), EdgeTableStorage(direction)]

    for _ in range(60):
        vertices = storages[0].vertex_ids()
        edges = [record.edge_id for record in storages[0].edges()]
        roll = rng.random()

        if roll < 0.3 or len(vertices) < 2:
            for storage in storages:
                storage.insert_vertex()
        elif roll < 0.8:
            src, dst = rng.choice(vertices), rng.choice(vertices)
            for storage in storages:
                storage.insert_edge(src, dst)
        elif roll < 0.9 and edges:
            edge_id = rng.choice(edges)
            for storage in storages:
                storage.remove_edge(edge_id)
        else:
            vertex_id = rng.choice(vertices)
            for storage in storages:
                storage.remove_vertex(vertex_id)

    reference = storages[0]
    for storage in storages[1:]:
        assert storage.vertex_ids() == reference.vertex_ids()
        assert storage.edges() == reference.edges()
        for vertex_id in reference.vertex_ids():
            assert sorted(storage.incident_edges(vertex_id)) == sorted(
                reference.incident_edges(vertex_id)
            )
            assert sorted(storage.predecessors(vertex_id)) == sorted(
                reference.predecessors(vertex_id)
            )
            assert storage.degree(vertex_id) == reference.degree(vertex_id)


def test_edge_record_helpers():
    """Test loop detection and opposite endpoint lookup."""
    record = EdgeRecord(VertexId(1), VertexId(2), EdgeId(0), EdgePayload())
    loop = EdgeRecord(VertexId(3), VertexId(3), EdgeId(1), EdgePayload())

    assert not record.is_loop
    assert loop.is_loop
    assert record.other(1) == 2
    assert record.other(2) == 1
    assert loop.other(3) == 3
