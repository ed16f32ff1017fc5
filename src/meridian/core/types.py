"""
Core type definitions.

This module provides the identifier types shared by storages, graphs, views and
algorithms. Identifiers are plain integers wrapped in ``NewType`` so that
vertex and edge handles cannot be confused by a type checker, while staying
as cheap as an index at runtime.
"""

from typing import TYPE_CHECKING, NamedTuple, NewType

if TYPE_CHECKING:
    from .models import EdgePayload

VertexId = NewType("VertexId", int)
EdgeId = NewType("EdgeId", int)


class EdgeRecord(NamedTuple):
    """
    A single edge as reported by edge enumeration.

    For undirected storages ``src`` and ``dst`` are the endpoints in the order
    they were passed on insertion.

    Attributes:
        src (VertexId): Source endpoint
        dst (VertexId): Destination endpoint
        edge_id (EdgeId): Identifier of the edge
        payload (EdgePayload): Weight and attributes carried by the edge
    """

    src: VertexId
    dst: VertexId
    edge_id: EdgeId
    payload: "EdgePayload"

    @property
    def is_loop(self) -> bool:
        """Whether both endpoints are the same vertex."""
        return self.src == self.dst

    def other(self, vertex_id: VertexId) -> VertexId:
        """Return the endpoint opposite to ``vertex_id``."""
        return self.dst if vertex_id == self.src else self.src
