"""Shared test fixtures."""

import pytest

from meridian.core.storage import AdjacencyList, AdjacencyMatrix


@pytest.fixture(params=[AdjacencyList, AdjacencyMatrix], ids=["adjacency_list", "adjacency_matrix"])
def storage_cls(request):
    """Fixture running a test once per storage back-end."""
    return request.param
