from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple


Weight = float


@dataclass(frozen=True)
class Neighbor:
    """End of an outgoing edge together with the edge weight."""

    vertex: int
    weight: Weight = 0


class Graph(ABC):
    """Directed, weighted graph over the vertices ``0 .. V-1``.

    The vertex count is fixed at construction; edges are added, removed and
    re-weighted freely. Every vertex may carry an arbitrary label which is
    stored independently of the edges.

    A weight of zero is returned for edges that do not exist, so a zero-weight
    edge cannot be told apart from a missing one through ``get_edge_value``.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"Vertex count must be non-negative, got {vertex_count}.")
        self._vertex_count = vertex_count
        self._edge_count = 0
        self._labels: List[Any] = [None] * vertex_count

    # Graphs own their storage and are passed around by reference only.
    def __copy__(self):
        raise TypeError(f"{type(self).__name__} objects cannot be copied.")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} objects cannot be copied.")

    def __len__(self) -> int:
        return self._vertex_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self._vertex_count}, "
            f"edges={self._edge_count})"
        )

    def vertex_count(self) -> int:
        return self._vertex_count

    def edge_count(self) -> int:
        return self._edge_count

    def vertices(self) -> range:
        return range(self._vertex_count)

    def edges(self) -> Iterator[Tuple[int, int, Weight]]:
        for x in self.vertices():
            for neighbor in self.neighbors(x):
                yield x, neighbor.vertex, neighbor.weight

    def get_node_value(self, x: int) -> Any:
        self.check_vertex(x)
        return self._labels[x]

    def set_node_value(self, x: int, value: Any) -> None:
        self.check_vertex(x)
        self._labels[x] = value

    def check_vertex(self, x: int) -> None:
        if not 0 <= x < self._vertex_count:
            raise IndexError(
                f"Vertex {x} out of range for graph with {self._vertex_count} vertices."
            )

    def _check_edge(self, x: int, y: int) -> None:
        self.check_vertex(x)
        self.check_vertex(y)

    @staticmethod
    def _check_weight(weight: Weight) -> None:
        # Dijkstra relies on every edge weight being non-negative.
        # NaN compares unequal to itself whatever its numeric type.
        if weight != weight or weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}.")

    @abstractmethod
    def adjacent(self, x: int, y: int) -> bool:
        """Return True if there is an edge from ``x`` to ``y``."""

    @abstractmethod
    def neighbors(self, x: int) -> List[Neighbor]:
        """Return every outgoing edge of ``x``."""

    @abstractmethod
    def add_edge(self, x: int, y: int, weight: Weight = 0) -> None:
        """Add the edge ``x -> y`` or overwrite its weight if it exists."""

    @abstractmethod
    def delete_edge(self, x: int, y: int) -> None:
        """Remove the edge ``x -> y`` if it exists."""

    @abstractmethod
    def get_edge_value(self, x: int, y: int) -> Weight:
        """Return the weight of ``x -> y``, or zero when there is no such edge."""

    @abstractmethod
    def set_edge_value(self, x: int, y: int, weight: Weight) -> None:
        """Overwrite the weight of an existing edge ``x -> y``."""


class AdjacencyListGraph(Graph):
    """Sparse graph keeping an ordered list of neighbours per vertex."""

    title = "Adjacency list graph"

    def __init__(self, vertex_count: int) -> None:
        super().__init__(vertex_count)
        self._adjacency: List[List[Neighbor]] = [[] for _ in range(vertex_count)]

    def _find(self, x: int, y: int) -> int:
        for index, neighbor in enumerate(self._adjacency[x]):
            if neighbor.vertex == y:
                return index
        return -1

    def adjacent(self, x: int, y: int) -> bool:
        self._check_edge(x, y)
        return self._find(x, y) != -1

    def neighbors(self, x: int) -> List[Neighbor]:
        self.check_vertex(x)
        return list(self._adjacency[x])

    def add_edge(self, x: int, y: int, weight: Weight = 0) -> None:
        self._check_edge(x, y)
        self._check_weight(weight)
        index = self._find(x, y)
        if index != -1:
            self._adjacency[x][index] = Neighbor(y, weight)
            return
        self._adjacency[x].append(Neighbor(y, weight))
        self._edge_count += 1

    def delete_edge(self, x: int, y: int) -> None:
        self._check_edge(x, y)
        index = self._find(x, y)
        if index != -1:
            del self._adjacency[x][index]
            self._edge_count -= 1

    def get_edge_value(self, x: int, y: int) -> Weight:
        self._check_edge(x, y)
        index = self._find(x, y)
        if index == -1:
            return 0
        return self._adjacency[x][index].weight

    def set_edge_value(self, x: int, y: int, weight: Weight) -> None:
        self._check_edge(x, y)
        self._check_weight(weight)
        index = self._find(x, y)
        if index != -1:
            self._adjacency[x][index] = Neighbor(y, weight)
