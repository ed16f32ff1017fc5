"""Tests for edge payload models."""

import pytest

from meridian.core.models import EdgePayload, FlowPayload


def test_edge_payload_defaults():
    """Test default weight and attributes."""
    payload = EdgePayload()
    assert payload.weight == 1.0
    assert payload.attributes == {}


def test_edge_payload_attributes_are_independent():
    """Test each payload gets its own attribute mapping."""
    first = EdgePayload()
    second = EdgePayload()
    first.attributes["label"] = "x"
    assert second.attributes == {}


def test_edge_payload_accepts_integer_weight():
    """Test integers are accepted where a float is annotated."""
    assert EdgePayload(weight=3).weight == 3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"weight": "heavy"},
        {"weight": None},
        {"attributes": ["not", "a", "dict"]},
        {"attributes": {1: "non-string key"}},
    ],
)
def test_edge_payload_rejects_invalid_types(kwargs):
    """Test runtime type checking of payload fields."""
    with pytest.raises(TypeError, match="Invalid field types in EdgePayload"):
        EdgePayload(**kwargs)


def test_flow_payload():
    """Test flow payload fields and residual capacity."""
    payload = FlowPayload(weight=2.0, capacity=10.0, flow=4.0)
    assert payload.weight == 2.0
    assert payload.residual_capacity == 6.0
    assert isinstance(payload, EdgePayload)


def test_flow_payload_rejects_flow_above_capacity():
    """Test construction fails when flow exceeds capacity."""
    with pytest.raises(ValueError, match="can not be greater than the capacity"):
        FlowPayload(capacity=1.0, flow=2.0)


def test_flow_payload_rejects_negative_capacity():
    """Test construction fails on a negative capacity."""
    with pytest.raises(ValueError, match="capacity must be non-negative"):
        FlowPayload(capacity=-1.0)


def test_flow_payload_setters():
    """Test flow and capacity updates keep flow within capacity."""
    payload = FlowPayload(capacity=5.0)

    payload.set_flow(5.0)
    assert payload.flow == 5.0

    with pytest.raises(ValueError, match="can not be greater than the capacity"):
        payload.set_flow(6.0)

    with pytest.raises(ValueError, match="can not be smaller than the flow"):
        payload.set_capacity(4.0)

    payload.set_capacity(8.0)
    assert payload.residual_capacity == 3.0
