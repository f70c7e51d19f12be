"""
Kruskal Minimum Spanning Tree
=============================
Greedy MST over an undirected, weighted edge list. Edges are taken in
ascending weight order and kept when they join two different components.
A disconnected graph yields a minimum spanning forest.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from graphs.disjoint_set import DisjointSet
from graphs.edges import Edge, validate_graph

logger = logging.getLogger(__name__)


@dataclass
class SpanningTree:
    edges: List[Edge]
    total_weight: int

    def is_spanning(self, num_vertices: int) -> bool:
        return len(self.edges) == num_vertices - 1


def kruskal_mst(num_vertices: int, edges: Sequence[Edge]) -> SpanningTree:
    validate_graph(num_vertices, edges)

    dsu = DisjointSet(num_vertices)
    chosen: List[Edge] = []
    total = 0

    for edge in sorted(edges):
        if dsu.union(edge.src, edge.dest):
            chosen.append(edge)
            total += edge.weight
            if len(chosen) == num_vertices - 1:
                break

    if dsu.count > 1:
        logger.debug("Graph is disconnected: %d components", dsu.count)
    return SpanningTree(edges=chosen, total_weight=total)
