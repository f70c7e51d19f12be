"""
AlgoLab Demo Runners
====================
One runner per algorithm. Each builds its sample input from a DemoConfig,
runs the algorithm, and returns a DemoResult for the Renderer.

Runners never print; errors from the algorithms propagate to the caller.
"""

import random
import sys
from typing import Any, Callable, Dict, List, NamedTuple, Optional, TextIO

from common import config as defaults
from common.config import DemoConfig
from graphs import bellman_ford, kruskal_mst, make_edges, read_graph
from sorting import randomized_quicksort, randomized_select
from trees import BTreeNode, OrderedTree


class DemoResult(NamedTuple):
    title: str
    rows: Optional[List[Dict[str, Any]]]
    message: str
    column_names: Optional[List[str]] = None


def _rng(config: DemoConfig) -> random.Random:
    return random.Random(config.seed)


def tree_levels(tree: OrderedTree) -> List[List[BTreeNode]]:
    """Breadth-first list of nodes per level, root first."""
    levels: List[List[BTreeNode]] = []
    level = [tree.root] if tree.root is not None else []
    while level:
        levels.append(level)
        level = [child for node in level for child in node.children]
    return levels


# ─── Runners ────────────────────────────────────────────────────────────────

def run_btree(config: DemoConfig, stdin: TextIO = None) -> DemoResult:
    keys = config.keys if config.keys is not None else defaults.DEFAULT_TREE_KEYS
    tree = OrderedTree(config.degree)
    for k in keys:
        tree.insert(k)

    rows = [
        {"level": depth, "nodes": " ".join(str(node.keys) for node in nodes)}
        for depth, nodes in enumerate(tree_levels(tree))
    ]
    traversal = " ".join(str(k) for k in tree.traverse())
    message = f"B-Tree traversal: {traversal}\nHeight: {tree.tree_height}"
    return DemoResult(f"B-Tree (t={tree.degree})", rows, message, ["level", "nodes"])


def run_bellman_ford(config: DemoConfig, stdin: TextIO = None) -> DemoResult:
    if config.read_stdin:
        num_vertices, edges, source = read_graph(stdin or sys.stdin)
    else:
        num_vertices = defaults.DEFAULT_SP_VERTICES
        edges = make_edges(defaults.DEFAULT_SP_EDGES)
        source = defaults.DEFAULT_SP_SOURCE

    paths = bellman_ford(num_vertices, edges, source)
    rows = [{"vertex": v, "distance": d} for v, d in enumerate(paths.distances)]
    return DemoResult("Bellman-Ford", rows,
                      f"Distance from source {source}", ["vertex", "distance"])


def run_kruskal(config: DemoConfig, stdin: TextIO = None) -> DemoResult:
    edges = make_edges(defaults.DEFAULT_MST_EDGES)
    mst = kruskal_mst(defaults.DEFAULT_MST_VERTICES, edges)
    rows = [{"edge": f"{e.src}-{e.dest}", "weight": e.weight} for e in mst.edges]
    return DemoResult("Kruskal MST", rows,
                      f"MST weight: {mst.total_weight}", ["edge", "weight"])


def run_quicksort(config: DemoConfig, stdin: TextIO = None) -> DemoResult:
    values = list(config.keys if config.keys is not None else defaults.DEFAULT_SORT_VALUES)
    report = randomized_quicksort(values, _rng(config))
    sorted_text = " ".join(str(v) for v in values)
    return DemoResult("Randomized Quicksort", None,
                      f"Sorted: {sorted_text}\nComparisons: {report.comparisons}")


def run_select(config: DemoConfig, stdin: TextIO = None) -> DemoResult:
    values = list(config.keys if config.keys is not None else defaults.DEFAULT_SELECT_VALUES)
    value = randomized_select(values, config.k, _rng(config))
    return DemoResult("Randomized Select", None,
                      f"k-th smallest (k={config.k}): {value}")


DemoRunner = Callable[[DemoConfig, Optional[TextIO]], DemoResult]

DEMOS: Dict[str, DemoRunner] = {
    "btree": run_btree,
    "bellman-ford": run_bellman_ford,
    "kruskal": run_kruskal,
    "quicksort": run_quicksort,
    "select": run_select,
}


def run_demo(name: str, config: DemoConfig, stdin: TextIO = None) -> DemoResult:
    if name not in DEMOS:
        raise KeyError(f"Unknown demo '{name}'. Choose from: {', '.join(DEMOS)}")
    return DEMOS[name](config, stdin)
