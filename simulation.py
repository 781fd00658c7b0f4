"""Monte Carlo estimate of average shortest-path length on random graphs.

Graphs are undirected in spirit: every edge is stored as a pair of directed
edges with the same weight. Randomness always comes from an explicitly passed
``random.Random`` so runs are reproducible from a seed.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from graph import AdjacencyListGraph, Graph
from shortest_path import NO_PATH, ShortestPath


logger = logging.getLogger(__name__)

GraphFactory = Callable[[int], Graph]


@dataclass(frozen=True)
class SimulationResult:
    graph_size: int
    edge_density: float
    edge_count: int
    reachable: int
    average_path_length: Optional[float]


def validate_parameters(
    graph_size: int,
    edge_density: float,
    min_distance: float,
    max_distance: float,
) -> None:
    if graph_size < 1:
        raise ValueError(f"Graph size must be at least 1, got {graph_size}.")
    if not 0.0 <= edge_density <= 1.0:
        raise ValueError(f"Edge density must lie in [0, 1], got {edge_density}.")
    if min_distance <= 0:
        # Zero-weight edges would vanish from a matrix backend.
        raise ValueError(f"Minimum distance must be positive, got {min_distance}.")
    if min_distance > max_distance:
        raise ValueError(
            f"Minimum distance {min_distance} exceeds maximum distance {max_distance}."
        )


def populate_random_graph(
    graph: Graph,
    edge_density: float,
    min_distance: float,
    max_distance: float,
    rng: random.Random,
) -> int:
    """Add symmetric edge pairs to ``graph`` and return how many were added.

    Expects a graph with no edges between distinct vertices. A pair already
    present in one direction only is rewritten symmetrically and counted, so
    ``edge_count() // 2`` matches the return value only for a fresh graph.
    """
    added = 0
    size = graph.vertex_count()
    for i in range(size):
        for j in range(i + 1, size):
            if rng.random() >= edge_density:
                continue
            if graph.adjacent(i, j) and graph.adjacent(j, i):
                continue
            distance = rng.uniform(min_distance, max_distance)
            graph.add_edge(i, j, distance)
            graph.add_edge(j, i, distance)
            added += 1
    return added


def average_path_length(graph: Graph, source: int = 0) -> Tuple[int, Optional[float]]:
    """Average the finite shortest-path costs from ``source`` to every other vertex."""
    engine = ShortestPath(graph)
    total = 0.0
    count = 0
    for target in graph.vertices():
        if target == source:
            continue
        cost = engine.path_size(source, target)
        if cost != NO_PATH:
            total += cost
            count += 1
    if count == 0:
        return 0, None
    return count, total / count


def random_graph(
    graph_size: int,
    edge_density: float,
    min_distance: float,
    max_distance: float,
    rng: random.Random,
    backend: GraphFactory = AdjacencyListGraph,
) -> SimulationResult:
    validate_parameters(graph_size, edge_density, min_distance, max_distance)
    graph = backend(graph_size)
    added = populate_random_graph(graph, edge_density, min_distance, max_distance, rng)
    logger.debug(
        "Generated %s with %d undirected edges (density %.2f).",
        type(graph).__name__,
        added,
        edge_density,
    )

    reachable, average = average_path_length(graph)
    return SimulationResult(
        graph_size=graph_size,
        edge_density=edge_density,
        edge_count=graph.edge_count() // 2,
        reachable=reachable,
        average_path_length=average,
    )


class MonteCarloSimulation:
    """Run ``random_graph`` for a series of parameter sets with one random source."""

    def __init__(
        self,
        rng: random.Random,
        backend: GraphFactory = AdjacencyListGraph,
    ) -> None:
        self.rng = rng
        self.backend = backend

    def run(self, runs: Iterable[Dict]) -> List[SimulationResult]:
        results: List[SimulationResult] = []
        for params in runs:
            results.append(
                random_graph(
                    graph_size=int(params["graph_size"]),
                    edge_density=float(params["edge_density"]),
                    min_distance=float(params["min_distance"]),
                    max_distance=float(params["max_distance"]),
                    rng=self.rng,
                    backend=self.backend,
                )
            )
        return results
