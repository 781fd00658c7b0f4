from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from graph import Graph


def format_graph(graph: Graph, title: str | None = None) -> str:
    """Render vertex/edge counts and the outgoing edges of every vertex."""
    if title is None:
        title = getattr(graph, "title", type(graph).__name__)
    lines = [
        title,
        f"Number of vertices: {graph.vertex_count()}",
        f"Number of edges: {graph.edge_count()}",
    ]
    for x in graph.vertices():
        cells = " ".join(
            f"[{neighbor.vertex}, w{float(neighbor.weight):g}]" for neighbor in graph.neighbors(x)
        )
        lines.append(f"V{x}: {cells}".rstrip())
    return "\n".join(lines)


def to_networkx(graph: Graph) -> nx.DiGraph:
    g = nx.DiGraph()
    for x in graph.vertices():
        label = graph.get_node_value(x)
        if label is None:
            g.add_node(x)
        else:
            g.add_node(x, label=label)
    for x, y, weight in graph.edges():
        g.add_edge(x, y, weight=weight)
    return g


def path_edges(path: Sequence[int]) -> List[Tuple[int, int]]:
    return list(zip(path[:-1], path[1:]))


def compute_layout(graph_nx: nx.DiGraph) -> Dict[int, Tuple[float, float]]:
    return nx.spring_layout(graph_nx, seed=42)


def draw_graph(
    graph: Graph,
    path: Sequence[int] | None = None,
    output: Path | None = None,
    show: bool = False,
    title: str | None = None,
) -> None:
    graph_nx = to_networkx(graph)
    layout = compute_layout(graph_nx)

    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(
        graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0, arrows=True
    )

    highlighted = path_edges(path) if path else []
    if highlighted:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=highlighted,
            edge_color="#d62728",
            width=2.5,
            arrows=True,
            ax=ax,
        )

    on_path = set(path or [])
    node_colors = [
        "#ff9896" if node in on_path else "#aec7e8" for node in graph_nx.nodes
    ]
    nx.draw_networkx_nodes(graph_nx, layout, node_color=node_colors, node_size=500, ax=ax)

    labels = {
        node: str(data.get("label", node)) for node, data in graph_nx.nodes(data=True)
    }
    nx.draw_networkx_labels(graph_nx, layout, labels=labels, font_size=9, ax=ax)

    edge_labels = {
        (u, v): f"{float(data['weight']):g}" for u, v, data in graph_nx.edges(data=True)
    }
    nx.draw_networkx_edge_labels(
        graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax
    )

    if title is None:
        title = getattr(graph, "title", type(graph).__name__)
    if path and len(path) > 1:
        title += " | path " + " -> ".join(str(node) for node in path)
    ax.set_title(title)
    ax.set_axis_off()
    fig.tight_layout()

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output, dpi=150)
        print(f"Saved figure to {output}")
    if show:
        plt.show()
    plt.close(fig)
