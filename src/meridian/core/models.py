"""
Edge payload models.

Payloads are what an edge carries besides its endpoints: at minimum a weight,
plus a free-form attribute mapping. Richer payloads extend EdgePayload
without touching the identifier layer; FlowPayload adds capacity and flow for
network-flow style graphs.

The models are dataclasses decorated with validate_dataclass, so field types
are checked at construction time.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from ..utils.validation import RangeRule, validate_dataclass

_NON_NEGATIVE = RangeRule(min_value=0, error_message="capacity must be non-negative")


@validate_dataclass
@dataclass
class EdgePayload:
    """
    Weight and attributes carried by an edge.

    Attributes:
        weight (float): Edge weight, 1.0 unless specified
        attributes (Dict[str, Any]): Additional custom attributes
    """

    weight: float = 1.0
    attributes: Dict[str, Any] = field(default_factory=dict)


@validate_dataclass
@dataclass
class FlowPayload(EdgePayload):
    """
    Payload for edges that carry flow.

    Attributes:
        capacity (float): Maximum flow the edge admits
        flow (float): Current flow, never greater than capacity
    """

    capacity: float = 0.0
    flow: float = 0.0

    def __post_init__(self):
        _NON_NEGATIVE.check(self.capacity)
        if self.flow > self.capacity:
            raise ValueError(
                f"flow of the edge can not be greater than the capacity: "
                f"{self.flow} > {self.capacity}"
            )

    @property
    def residual_capacity(self) -> float:
        return self.capacity - self.flow

    def set_flow(self, flow: float) -> None:
        if flow > self.capacity:
            raise ValueError(
                f"flow of the edge can not be greater than the capacity: "
                f"{flow} > {self.capacity}"
            )
        self.flow = flow

    def set_capacity(self, capacity: float) -> None:
        _NON_NEGATIVE.check(capacity)
        if capacity < self.flow:
            raise ValueError(
                f"capacity of the edge can not be smaller than the flow: "
                f"{capacity} < {self.flow}"
            )
        self.capacity = capacity
