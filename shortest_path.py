from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from heapq import heappop, heappush
from typing import List, Optional, Tuple

from graph import Graph, Weight


logger = logging.getLogger(__name__)

# Returned by ``path_size`` when the target cannot be reached. A path whose
# total cost is exactly zero is reported the same way.
NO_PATH = -1


@dataclass(frozen=True)
class PathResult:
    source: int
    target: int
    path: List[int]
    cost: float

    @property
    def reachable(self) -> bool:
        return math.isfinite(self.cost)


class ShortestPath:
    """Dijkstra's algorithm over any ``Graph`` backend.

    The engine only reads the graph. Each query recomputes the shortest-path
    tree from scratch, so results always reflect the current edge set.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def _search(self, source: int) -> Tuple[List[float], List[Optional[int]]]:
        """Compute single-source shortest paths from ``source``.

        min_distance[v] stores the best-known distance from source to v, and
        previous[v] remembers the vertex before v on that path.
        """
        self.graph.check_vertex(source)
        n = self.graph.vertex_count()
        min_distance: List[float] = [math.inf] * n
        previous: List[Optional[int]] = [None] * n
        min_distance[source] = 0

        # Entries are (distance, vertex) so equal distances pop in vertex order.
        queue: List[Tuple[float, int]] = [(0, source)]

        while queue:
            dist, u = heappop(queue)
            if dist > min_distance[u]:
                # A shorter route to u was already processed.
                continue

            for neighbor in self.graph.neighbors(u):
                v = neighbor.vertex
                candidate = dist + neighbor.weight
                if candidate < min_distance[v]:
                    min_distance[v] = candidate
                    previous[v] = u
                    heappush(queue, (candidate, v))

        return min_distance, previous

    def distances(self, source: int) -> List[float]:
        """Return the shortest distance from ``source`` to every vertex."""
        min_distance, _previous = self._search(source)
        return min_distance

    def path(self, source: int, target: int) -> List[int]:
        """Return the vertices of the shortest path from source to target.

        When target is unreachable the result degenerates to ``[target]``.
        """
        self.graph.check_vertex(target)
        _min_distance, previous = self._search(source)

        route: List[int] = []
        vertex: Optional[int] = target
        while vertex is not None:
            route.append(vertex)
            vertex = previous[vertex]
        route.reverse()

        if len(route) < 2:
            logger.debug("There's no path from %d to %d.", source, target)
        return route

    def path_size(self, source: int, target: int) -> Weight:
        """Return the total weight of the shortest path, or ``NO_PATH``."""
        route = self.path(source, target)
        total: Weight = 0
        for u, v in zip(route[:-1], route[1:]):
            total += self.graph.get_edge_value(u, v)
        if total == 0:
            return NO_PATH
        return total

    def query(self, source: int, target: int) -> PathResult:
        """Shortest path and cost with an explicit reachability flag.

        Unlike ``path_size`` this distinguishes a zero-cost path from an
        unreachable target: unreachable results carry an empty path and an
        infinite cost.
        """
        self.graph.check_vertex(target)
        min_distance, previous = self._search(source)
        cost = min_distance[target]
        if not math.isfinite(cost):
            return PathResult(source=source, target=target, path=[], cost=math.inf)

        route: List[int] = [target]
        while route[-1] != source:
            route.append(previous[route[-1]])
        route.reverse()
        return PathResult(source=source, target=target, path=route, cost=cost)
