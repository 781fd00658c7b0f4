from __future__ import annotations

from typing import List, Tuple

import pytest

from graph import AdjacencyListGraph
from matrix_graph import MatrixGraph


EXAMPLE_EDGES: List[Tuple[int, int, float]] = [
    (0, 1, 7), (0, 2, 9), (0, 5, 14),
    (1, 0, 7), (1, 2, 10), (1, 3, 15),
    (2, 0, 9), (2, 1, 10), (2, 3, 11), (2, 5, 2),
    (3, 1, 15), (3, 2, 11), (3, 4, 6),
    (4, 3, 6), (4, 5, 9),
    (5, 0, 14), (5, 2, 2), (5, 4, 9),
]


@pytest.fixture(params=[AdjacencyListGraph, MatrixGraph], ids=["list", "matrix"])
def backend(request):
    return request.param


@pytest.fixture
def example_graph(backend):
    graph = backend(6)
    for x, y, weight in EXAMPLE_EDGES:
        graph.add_edge(x, y, weight)
    return graph


@pytest.fixture
def example_edges():
    return list(EXAMPLE_EDGES)
