"""Dense graph backend storing edge weights in a V x V numpy matrix."""

from __future__ import annotations

from typing import List

import numpy as np

from graph import Graph, Neighbor, Weight


class MatrixGraph(Graph):
    """Adjacency-matrix graph where a zero cell means "no edge".

    Lookups are O(1) while ``neighbors`` scans a full row, so this backend
    suits dense graphs or small vertex counts. Because zero doubles as the
    empty marker, adding an edge with weight zero does not create an edge.
    """

    title = "Matrix-based graph"

    def __init__(self, vertex_count: int, dtype=np.float64) -> None:
        # Integer storage would truncate fractional weights, or drop them to zero.
        if not np.issubdtype(dtype, np.floating):
            raise ValueError(f"Matrix dtype must be a floating type, got {np.dtype(dtype)}.")
        super().__init__(vertex_count)
        self._matrix = np.zeros((vertex_count, vertex_count), dtype=dtype)

    def adjacent(self, x: int, y: int) -> bool:
        self._check_edge(x, y)
        return bool(self._matrix[x, y] != 0)

    def neighbors(self, x: int) -> List[Neighbor]:
        self.check_vertex(x)
        row = self._matrix[x]
        return [Neighbor(int(y), row[y].item()) for y in np.nonzero(row)[0]]

    def add_edge(self, x: int, y: int, weight: Weight = 0) -> None:
        self._check_edge(x, y)
        self._check_weight(weight)
        was_edge = self._matrix[x, y] != 0
        self._matrix[x, y] = weight
        is_edge = self._matrix[x, y] != 0
        if is_edge and not was_edge:
            self._edge_count += 1
        elif was_edge and not is_edge:
            self._edge_count -= 1

    def delete_edge(self, x: int, y: int) -> None:
        self._check_edge(x, y)
        if self._matrix[x, y] != 0:
            self._matrix[x, y] = 0
            self._edge_count -= 1

    def get_edge_value(self, x: int, y: int) -> Weight:
        self._check_edge(x, y)
        return self._matrix[x, y].item()

    def set_edge_value(self, x: int, y: int, weight: Weight) -> None:
        self._check_edge(x, y)
        self._check_weight(weight)
        if self._matrix[x, y] == 0:
            return
        self._matrix[x, y] = weight
        if weight == 0:
            self._edge_count -= 1

    def to_array(self) -> np.ndarray:
        """Return a copy of the weight matrix."""
        return self._matrix.copy()
