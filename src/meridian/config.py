"""
Graph configuration.

This module provides the GraphConfig dataclass describing how a graph is
built, and the create_graph factory that turns a configuration into a Graph:
- Directedness of the storage
- Flavor enforced on checked edge insertion
- Storage back-end, by name
- Optional JSON schema for edge payload attributes
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Type

from .core.enums import Direction, GraphFlavor
from .core.exceptions import ConfigurationError
from .core.graph import Graph
from .core.storage import AdjacencyList, AdjacencyMatrix, Storage
from .utils.validation import PayloadSchemaValidator, validate_dataclass

logger = logging.getLogger(__name__)

STORAGE_BACKENDS: Dict[str, Type[Storage]] = {
    "adjacency_list": AdjacencyList,
    "adjacency_matrix": AdjacencyMatrix,
}


@validate_dataclass
@dataclass
class GraphConfig:
    """
    Configuration for building a graph.

    Attributes:
        direction: Directedness of every edge
        flavor: Invariants enforced by checked edge insertion
        storage: Name of the storage back-end, one of STORAGE_BACKENDS
        payload_schema: JSON schema edge payload attributes must satisfy,
            or None to skip payload validation

    Raises:
        ConfigurationError: If the storage name is unknown or the payload
            schema is not a valid JSON schema
        TypeError: If a field has the wrong type
    """

    direction: Direction = Direction.UNDIRECTED
    flavor: GraphFlavor = GraphFlavor.SIMPLE
    storage: str = "adjacency_list"
    payload_schema: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        if self.storage not in STORAGE_BACKENDS:
            raise ConfigurationError(
                f"Unknown storage '{self.storage}', expected one of: "
                f"{', '.join(sorted(STORAGE_BACKENDS))}"
            )
        if isinstance(self.payload_schema, dict) and not PayloadSchemaValidator.is_valid_schema(
            self.payload_schema
        ):
            raise ConfigurationError("payload_schema is not a valid JSON schema")

    @property
    def storage_cls(self) -> Type[Storage]:
        return STORAGE_BACKENDS[self.storage]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphConfig":
        """
        Create a configuration from a plain mapping.

        Enum fields accept either the enum member or its string value, so
        ``{"direction": "directed", "flavor": "multi"}`` is valid.

        Raises:
            ConfigurationError: If a key is unknown or an enum value is invalid
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        values = dict(data)
        for key, enum_cls in (("direction", Direction), ("flavor", GraphFlavor)):
            if isinstance(values.get(key), str):
                try:
                    values[key] = enum_cls(values[key])
                except ValueError:
                    raise ConfigurationError(f"Invalid {key}: {values[key]}") from None
        return cls(**values)


def create_graph(config: Optional[GraphConfig] = None, **overrides: Any) -> Graph:
    """
    Build an empty graph from a configuration.

    Args:
        config: Base configuration; the defaults when omitted
        **overrides: Field values replacing those of ``config``

    Returns:
        Graph: A new, empty graph owning a fresh storage

    Example:
        >>> graph = create_graph(direction=Direction.DIRECTED, storage="adjacency_matrix")
        >>> graph.is_directed
        True
    """
    if config is None:
        config = GraphConfig(**overrides)
    elif overrides:
        config = replace(config, **overrides)

    validator = None
    if config.payload_schema is not None:
        validator = PayloadSchemaValidator(config.payload_schema)

    logger.debug(
        "Creating %s %s graph on %s", config.direction.value, config.flavor.value, config.storage
    )
    return Graph(config.storage_cls(config.direction), config.flavor, validator)
