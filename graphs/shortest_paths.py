"""
Bellman-Ford Shortest Paths
===========================
Single-source shortest paths over a directed, weighted edge list.
Negative weights are allowed; a negative cycle reachable from the
source raises NegativeCycleError.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from common.errors import NegativeCycleError
from graphs.edges import Edge, validate_graph, validate_vertex

logger = logging.getLogger(__name__)


@dataclass
class ShortestPaths:
    """distances[v] is None when v is unreachable from source."""
    source: int
    distances: List[Optional[int]]

    def distance_to(self, vertex: int) -> Optional[int]:
        return self.distances[vertex]

    def as_dict(self) -> Dict[int, Optional[int]]:
        return dict(enumerate(self.distances))


def bellman_ford(num_vertices: int, edges: Sequence[Edge], source: int) -> ShortestPaths:
    """
    Relax every edge V-1 times, then check once more: any edge that can
    still be relaxed lies on (or behind) a negative cycle.
    """
    validate_graph(num_vertices, edges)
    validate_vertex("source", source, num_vertices)

    dist: List[Optional[int]] = [None] * num_vertices
    dist[source] = 0

    for pass_no in range(num_vertices - 1):
        changed = False
        for e in edges:
            if dist[e.src] is not None and (
                    dist[e.dest] is None or dist[e.src] + e.weight < dist[e.dest]):
                dist[e.dest] = dist[e.src] + e.weight
                changed = True
        if not changed:
            logger.debug("Converged after %d of %d passes", pass_no + 1, num_vertices - 1)
            break

    for e in edges:
        if dist[e.src] is not None and (
                dist[e.dest] is None or dist[e.src] + e.weight < dist[e.dest]):
            logger.debug("Edge %d->%d still relaxable, negative cycle", e.src, e.dest)
            raise NegativeCycleError(source)

    return ShortestPaths(source=source, distances=dist)
