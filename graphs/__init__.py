"""
AlgoLab Graphs Module
=====================
Weighted-graph algorithms over edge lists.

Components:
  - edges: Edge type, validation, text input parsing
  - shortest_paths: Bellman-Ford single-source shortest paths
  - disjoint_set: union-find with path compression
  - spanning_tree: Kruskal minimum spanning tree
"""

from graphs.edges import Edge, make_edges, read_graph
from graphs.shortest_paths import ShortestPaths, bellman_ford
from graphs.disjoint_set import DisjointSet
from graphs.spanning_tree import SpanningTree, kruskal_mst

__all__ = [
    "Edge", "make_edges", "read_graph",
    "ShortestPaths", "bellman_ford",
    "DisjointSet",
    "SpanningTree", "kruskal_mst",
]
