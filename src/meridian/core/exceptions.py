"""
Custom exceptions for the graph system.

This module defines the hierarchy of exceptions raised by checked graph and
storage operations and by the algorithms. Each exception type corresponds to a
specific category of failure so callers can decide whether to retry, surface,
or fall back.

Unchecked operations do not raise these: they assume their preconditions and
let a LookupError escape when a precondition is violated.
"""

from typing import Any, List, Optional


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This is the base class for every failure reported by a checked operation
    or an algorithm.

    Examples:
        * Invalid vertex/edge operations
        * Graph invariant violations
        * Algorithm preconditions not met
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ResourceNotFoundError(GraphOperationError):
    """
    Raised when a requested vertex or edge does not exist.

    Examples:
        * Lookup by an identifier that was never issued
        * Lookup by an identifier whose element was removed
    """


class VertexNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested vertex is not found.

    Examples:
        * Neighbor lookup on a removed vertex
        * Edge insertion with a missing endpoint
        * Vertex removal for a non-existent vertex

    Attributes:
        vertex_id: Identifier that could not be resolved
    """

    def __init__(self, vertex_id: Any):
        self.vertex_id = vertex_id
        super().__init__(f"Vertex with id {vertex_id} does not exist")


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested edge is not found.

    Examples:
        * Edge lookup by non-existent ID
        * Edge removal for a removed edge

    Attributes:
        edge_id: Identifier that could not be resolved
    """

    def __init__(self, edge_id: Any):
        self.edge_id = edge_id
        super().__init__(f"Edge with id {edge_id} does not exist")


class InvariantViolationError(GraphOperationError):
    """
    Raised when an edge insertion would violate the graph's flavor.

    Examples:
        * Self loop in a simple graph
        * Parallel edge in a simple graph
    """


class LoopNotAllowedError(InvariantViolationError):
    """
    Raised when an edge from a vertex to itself is rejected.

    Attributes:
        vertex_id: Vertex the loop was requested on
    """

    def __init__(self, vertex_id: Any):
        self.vertex_id = vertex_id
        super().__init__(f"Can not add edge from vertex {vertex_id} to itself")


class MultiEdgeNotAllowedError(InvariantViolationError):
    """
    Raised when a second edge between the same endpoints is rejected.

    Attributes:
        src: Source endpoint of the rejected edge
        dst: Destination endpoint of the rejected edge
    """

    def __init__(self, src: Any, dst: Any):
        self.src = src
        self.dst = dst
        super().__init__(f"There is already an edge from {src} to {dst}")


class CycleDetectedError(GraphOperationError):
    """
    Raised when an ordering requires an acyclic graph but a cycle exists.

    Attributes:
        vertex: A vertex lying on the offending cycle
        cycle: The cycle's vertices in path order, without repeating the first
    """

    def __init__(self, vertex: Any, cycle: Optional[List[Any]] = None):
        self.vertex = vertex
        self.cycle = list(cycle) if cycle else [vertex]
        path = " -> ".join(str(v) for v in self.cycle + [self.cycle[0]])
        super().__init__(f"Cycle detected through vertex {vertex}: {path}")


class ValidationError(Exception):
    """
    Raised when data validation fails.

    Examples:
        * Payload attributes rejected by a schema
        * Malformed configuration values
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class PayloadValidationError(ValidationError):
    """
    Raised when an edge payload fails schema validation.

    Attributes:
        errors: Individual validation failure messages
    """

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown storage back-end name
        * Payload schema that is not a valid JSON schema
    """
