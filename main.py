from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path
from typing import Dict, List

import yaml

from graph import AdjacencyListGraph, Graph
from matrix_graph import MatrixGraph
from shortest_path import NO_PATH, ShortestPath
from simulation import GraphFactory, MonteCarloSimulation, SimulationResult
from visualize import format_graph


BACKENDS: Dict[str, GraphFactory] = {
    "list": AdjacencyListGraph,
    "matrix": MatrixGraph,
}


def load_config(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def resolve_backend(name: str) -> GraphFactory:
    try:
        return BACKENDS[name]
    except KeyError:
        choices = ", ".join(sorted(BACKENDS))
        raise ValueError(f"Unknown graph backend '{name}' (expected one of {choices}).") from None


def build_graph(backend: GraphFactory, vertex_count: int, edges: List) -> Graph:
    graph = backend(vertex_count)
    for origin, target, weight in edges:
        graph.add_edge(int(origin), int(target), weight)
    return graph


def print_path(engine: ShortestPath, source: int, target: int) -> None:
    path = engine.path(source, target)
    cost = engine.path_size(source, target)
    if cost == NO_PATH:
        print(f"There's no path from {source} to {target}.")
        return
    print(f"Path: {' '.join(str(vertex) for vertex in path)}")
    print(f"Path cost: {float(cost):g}")


def print_results(results: List[SimulationResult]) -> None:
    for result in results:
        print(
            f"Graph size {result.graph_size}, edge density {result.edge_density:.2f}"
        )
        print(f"  Number of edges: {result.edge_count}")
        if result.average_path_length is None:
            print("  Average path length: n/a (no vertex reachable from 0)")
        else:
            print(
                f"  Average path length: {result.average_path_length:.4f} "
                f"over {result.reachable} reachable vertices"
            )


def run_example(
    config: Dict,
    backends: List[str],
    print_graph: bool,
    plot: Path | None,
) -> None:
    source = int(config["source"])
    target = int(config["target"])
    for name in backends:
        graph = build_graph(resolve_backend(name), int(config["vertices"]), config["edges"])
        if print_graph:
            print(format_graph(graph))
        engine = ShortestPath(graph)
        print_path(engine, source, target)
        print()

        if plot is not None:
            from visualize import draw_graph

            output = plot.with_name(f"{plot.stem}_{name}{plot.suffix or '.png'}")
            draw_graph(graph, path=engine.path(source, target), output=output)


def run_simulations(config: Dict, backend_name: str, seed: int | None) -> None:
    if seed is None:
        seed = config.get("seed")
    rng = random.Random(seed)
    simulation = MonteCarloSimulation(rng, backend=resolve_backend(backend_name))
    print_results(simulation.run(config["runs"]))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Dijkstra shortest paths over list and matrix graph backends."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("simulation.yaml"),
        help="Path to the YAML scenario configuration.",
    )
    parser.add_argument(
        "--scenario",
        choices=["example", "simulate", "all"],
        default="all",
        help="Which scenario to run.",
    )
    parser.add_argument(
        "--backend",
        choices=sorted(BACKENDS),
        default=None,
        help="Graph backend override (the example runs both backends by default).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed override for the simulations.",
    )
    parser.add_argument(
        "--print-graph",
        action="store_true",
        help="Print the adjacency of the example graph.",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="Save a drawing of the example graph with its shortest path.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.scenario in ("example", "all"):
        print("=== Example graph ===")
        backends = [args.backend] if args.backend else list(BACKENDS)
        run_example(config["example"], backends, args.print_graph, args.plot)

    if args.scenario in ("simulate", "all"):
        print("=== Monte Carlo simulation ===")
        simulations = config["simulations"]
        backend_name = args.backend or simulations.get("backend", "list")
        run_simulations(simulations, backend_name, args.seed)


if __name__ == "__main__":
    main()
