import logging
import math
import random

import networkx as nx
import pytest

from graph import AdjacencyListGraph
from matrix_graph import MatrixGraph
from shortest_path import NO_PATH, PathResult, ShortestPath
from simulation import populate_random_graph
from visualize import to_networkx


def test_example_graph_path(example_graph) -> None:
    engine = ShortestPath(example_graph)
    assert engine.path(0, 4) == [0, 2, 5, 4]
    assert engine.path_size(0, 4) == 20


def test_example_graph_distances(example_graph) -> None:
    engine = ShortestPath(example_graph)
    assert engine.distances(0) == [0, 7, 9, 20, 20, 11]


def test_query_reports_cost_and_path(example_graph) -> None:
    result = ShortestPath(example_graph).query(0, 4)
    assert result == PathResult(source=0, target=4, path=[0, 2, 5, 4], cost=20)
    assert result.reachable


def test_path_is_idempotent(example_graph) -> None:
    engine = ShortestPath(example_graph)
    first = engine.path(3, 0)
    second = engine.path(3, 0)
    assert first == second
    assert engine.path_size(3, 0) == engine.path_size(3, 0)


def test_engine_does_not_mutate_graph(example_graph, example_edges) -> None:
    engine = ShortestPath(example_graph)
    engine.path(0, 4)
    engine.path_size(4, 1)
    assert sorted(example_graph.edges()) == sorted(example_edges)


def test_recomputes_after_mutation(example_graph) -> None:
    engine = ShortestPath(example_graph)
    example_graph.delete_edge(2, 5)
    assert engine.path(0, 4) == [0, 5, 4]
    assert engine.path_size(0, 4) == 23


def test_unreachable_target(backend) -> None:
    graph = backend(4)
    graph.add_edge(0, 1, 1)
    graph.add_edge(1, 2, 1)
    engine = ShortestPath(graph)

    assert engine.path(0, 3) == [3]
    assert engine.path_size(0, 3) == NO_PATH
    assert math.isinf(engine.distances(0)[3])

    result = engine.query(0, 3)
    assert not result.reachable
    assert result.path == []


def test_directed_edges_are_one_way(backend) -> None:
    graph = backend(2)
    graph.add_edge(0, 1, 3)
    engine = ShortestPath(graph)
    assert engine.path_size(0, 1) == 3
    assert engine.path_size(1, 0) == NO_PATH


def test_unreachable_target_is_logged(backend, caplog) -> None:
    graph = backend(2)
    with caplog.at_level(logging.DEBUG, logger="shortest_path"):
        ShortestPath(graph).path(0, 1)
    assert "no path from 0 to 1" in caplog.text


def test_source_equals_target(example_graph) -> None:
    engine = ShortestPath(example_graph)
    assert engine.path(2, 2) == [2]
    # A zero total is indistinguishable from "no path" for path_size.
    assert engine.path_size(2, 2) == NO_PATH

    result = engine.query(2, 2)
    assert result.reachable
    assert result.cost == 0
    assert result.path == [2]


def test_zero_cost_path_only_visible_through_query() -> None:
    graph = AdjacencyListGraph(3)
    graph.add_edge(0, 1, 0)
    graph.add_edge(1, 2, 0)
    engine = ShortestPath(graph)

    assert engine.path(0, 2) == [0, 1, 2]
    assert engine.path_size(0, 2) == NO_PATH
    result = engine.query(0, 2)
    assert result.reachable
    assert result.cost == 0


def test_equal_cost_paths_prefer_lower_vertex() -> None:
    graph = AdjacencyListGraph(4)
    graph.add_edge(0, 2, 1)
    graph.add_edge(0, 1, 1)
    graph.add_edge(2, 3, 1)
    graph.add_edge(1, 3, 1)
    assert ShortestPath(graph).path(0, 3) == [0, 1, 3]


def test_stale_queue_entries_are_skipped() -> None:
    graph = AdjacencyListGraph(4)
    graph.add_edge(0, 1, 10)
    graph.add_edge(0, 2, 1)
    graph.add_edge(2, 1, 1)
    graph.add_edge(1, 3, 1)
    engine = ShortestPath(graph)
    assert engine.path(0, 3) == [0, 2, 1, 3]
    assert engine.path_size(0, 3) == 3


def test_out_of_range_query_is_rejected(example_graph) -> None:
    engine = ShortestPath(example_graph)
    with pytest.raises(IndexError):
        engine.path(0, 6)
    with pytest.raises(IndexError):
        engine.path_size(-1, 2)
    with pytest.raises(IndexError):
        engine.query(7, 0)


def test_engines_can_share_a_graph(example_graph) -> None:
    first = ShortestPath(example_graph)
    second = ShortestPath(example_graph)
    assert first.path(0, 4) == second.path(0, 4)
    assert first.path(4, 1) == second.path(4, 1)


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_backends_agree_on_random_graphs(seed) -> None:
    size = 25
    list_graph = AdjacencyListGraph(size)
    matrix_graph = MatrixGraph(size)
    populate_random_graph(list_graph, 0.15, 1.0, 10.0, random.Random(seed))
    populate_random_graph(matrix_graph, 0.15, 1.0, 10.0, random.Random(seed))

    list_engine = ShortestPath(list_graph)
    matrix_engine = ShortestPath(matrix_graph)
    reference = to_networkx(list_graph)
    for source in range(size):
        list_distances = list_engine.distances(source)
        matrix_distances = matrix_engine.distances(source)
        expected = nx.single_source_dijkstra_path_length(reference, source)
        for target in range(size):
            assert list_distances[target] == pytest.approx(matrix_distances[target])
            if target in expected:
                assert list_distances[target] == pytest.approx(expected[target])
            else:
                assert math.isinf(list_distances[target])
            assert list_engine.path_size(source, target) == pytest.approx(
                matrix_engine.path_size(source, target)
            )
