"""
Enumerations shared across the graph system.

- Direction: Whether the edges of a storage are directed or undirected
- GraphFlavor: Which structural invariants a Graph enforces on its edge set
- Color: Visit state of a vertex during depth-first search
"""

from enum import Enum, auto


class Direction(Enum):
    """Directedness of every edge in a storage, fixed at construction."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"

    @property
    def is_directed(self) -> bool:
        return self is Direction.DIRECTED


class GraphFlavor(Enum):
    """
    Edge-set invariants enforced by a Graph on checked insertion.

    - SIMPLE: No self loops and at most one edge per endpoint pair
    - MULTI: Parallel edges allowed, self loops rejected
    - PSEUDO: No restriction
    """

    SIMPLE = "simple"
    MULTI = "multi"
    PSEUDO = "pseudo"

    @property
    def allows_loops(self) -> bool:
        return self is GraphFlavor.PSEUDO

    @property
    def allows_parallel_edges(self) -> bool:
        return self is not GraphFlavor.SIMPLE


class Color(Enum):
    """Visit state of a vertex during depth-first search."""

    WHITE = auto()  # Not discovered yet
    GRAY = auto()  # Discovered, descendants still being explored
    BLACK = auto()  # Finished
