"""
AlgoLab CLI Tests
=================
Tests for the demo runners, Renderer and the main.py entry point.
"""

import io
import unittest

from cli.demos import DEMOS, run_demo, tree_levels
from cli.renderer import Renderer
from common.config import DemoConfig
from common.errors import InvalidParameterError, NegativeCycleError
from trees.btree import OrderedTree
import main


# ═══════════════════════════════════════════════════════════════════════════
# Demo Runners
# ═══════════════════════════════════════════════════════════════════════════

class TestDemoRunners(unittest.TestCase):

    def test_btree_default_sample(self):
        result = run_demo("btree", DemoConfig())
        self.assertIn("5 6 7 10 12 17 20 30", result.message)
        self.assertEqual(result.column_names, ["level", "nodes"])
        self.assertEqual(result.rows[0], {"level": 0, "nodes": "[10]"})
        self.assertEqual(result.rows[1]["nodes"], "[5, 6, 7] [12, 17, 20, 30]")

    def test_btree_custom_keys_and_degree(self):
        config = DemoConfig(degree=2, keys=[4, 3, 2, 1])
        result = run_demo("btree", config)
        self.assertIn("B-Tree traversal: 1 2 3 4", result.message)
        self.assertIn("Height: 2", result.message)

    def test_btree_bad_degree(self):
        with self.assertRaises(InvalidParameterError):
            run_demo("btree", DemoConfig(degree=1))

    def test_bellman_ford_default(self):
        result = run_demo("bellman-ford", DemoConfig())
        distances = [row["distance"] for row in result.rows]
        self.assertEqual(distances, [0, -1, 2, -2, 1])

    def test_bellman_ford_stdin(self):
        stdin = io.StringIO("3 2\n0 1 4\n1 2 -2\n0\n")
        result = run_demo("bellman-ford", DemoConfig(read_stdin=True), stdin)
        self.assertEqual([r["distance"] for r in result.rows], [0, 4, 2])

    def test_bellman_ford_negative_cycle(self):
        stdin = io.StringIO("2 2\n0 1 1\n1 0 -3\n0\n")
        with self.assertRaises(NegativeCycleError):
            run_demo("bellman-ford", DemoConfig(read_stdin=True), stdin)

    def test_kruskal_default(self):
        result = run_demo("kruskal", DemoConfig())
        self.assertEqual([r["edge"] for r in result.rows], ["0-3", "0-2", "1-2"])
        self.assertEqual(result.message, "MST weight: 14")

    def test_quicksort_default(self):
        result = run_demo("quicksort", DemoConfig(seed=1))
        self.assertIn("Sorted: 0 1 2 3 4 5 6 7 8 9", result.message)
        self.assertIn("Comparisons:", result.message)
        self.assertIsNone(result.rows)

    def test_select_default(self):
        result = run_demo("select", DemoConfig(seed=1))
        self.assertEqual(result.message, "k-th smallest (k=4): 4")

    def test_select_out_of_range(self):
        with self.assertRaises(InvalidParameterError):
            run_demo("select", DemoConfig(k=10))

    def test_unknown_demo(self):
        with self.assertRaises(KeyError):
            run_demo("dijkstra", DemoConfig())

    def test_tree_levels(self):
        tree = OrderedTree(2)
        self.assertEqual(tree_levels(tree), [])
        for k in range(1, 5):
            tree.insert(k)
        self.assertEqual([len(level) for level in tree_levels(tree)], [1, 2])


# ═══════════════════════════════════════════════════════════════════════════
# Renderer
# ═══════════════════════════════════════════════════════════════════════════

class TestRenderer(unittest.TestCase):

    def setUp(self):
        self.out = io.StringIO()
        self.renderer = Renderer(self.out)

    def test_table_mode(self):
        rows = [{"vertex": 0, "distance": 0}, {"vertex": 1, "distance": None}]
        count = self.renderer.render_rows(rows, ["vertex", "distance"])
        self.assertEqual(count, 2)
        text = self.out.getvalue()
        self.assertIn("| vertex | distance |", text)
        self.assertIn("INF", text)
        self.assertIn("2 row(s)", text)

    def test_raw_mode(self):
        self.renderer.mode = "raw"
        self.renderer.show_count = False
        self.renderer.render_rows([{"edge": "0-3", "weight": 3}])
        self.assertEqual(self.out.getvalue(), "edge\tweight\n0-3\t3\n")

    def test_empty_rows(self):
        self.assertEqual(self.renderer.render_rows([]), 0)

    def test_error_classification(self):
        self.renderer.render_error(NegativeCycleError(0))
        self.assertTrue(self.out.getvalue().startswith("NegativeCycle: "))

    def test_unknown_error_type(self):
        self.renderer.render_error(KeyError("x"))
        self.assertTrue(self.out.getvalue().startswith("Error[KeyError]: "))


# ═══════════════════════════════════════════════════════════════════════════
# Entry Point
# ═══════════════════════════════════════════════════════════════════════════

class TestMain(unittest.TestCase):

    def _run(self, args, stdin=None):
        out = io.StringIO()
        status = main.main(args, stdout=out, stdin=stdin)
        return status, out.getvalue()

    def test_help(self):
        status, text = self._run(["--help"])
        self.assertEqual(status, 0)
        self.assertIn("Usage:", text)

    def test_btree_demo(self):
        status, text = self._run(["btree"])
        self.assertEqual(status, 0)
        self.assertIn("B-Tree traversal: 5 6 7 10 12 17 20 30", text)

    def test_all_demos_by_default(self):
        status, text = self._run(["--seed", "3"])
        self.assertEqual(status, 0)
        for title in ("B-Tree", "Bellman-Ford", "Kruskal MST",
                      "Randomized Quicksort", "Randomized Select"):
            self.assertIn(f"== {title}", text)

    def test_keys_option(self):
        status, text = self._run(["quicksort", "--keys", "3,1,2", "--seed", "0"])
        self.assertEqual(status, 0)
        self.assertIn("Sorted: 1 2 3", text)

    def test_negative_cycle_exit_status(self):
        stdin = io.StringIO("2 2\n0 1 1\n1 0 -3\n0\n")
        status, text = self._run(["bellman-ford", "--stdin"], stdin)
        self.assertEqual(status, 1)
        self.assertIn("NegativeCycle: Graph contains negative weight cycle", text)

    def test_unknown_option(self):
        status, _ = self._run(["--bogus"])
        self.assertEqual(status, 1)

    def test_parse_args(self):
        demos, config, raw = main.parse_args(
            ["select", "--k", "2", "--degree", "4", "--raw", "--verbose"])
        self.assertEqual(demos, ["select"])
        self.assertEqual(config.k, 2)
        self.assertEqual(config.degree, 4)
        self.assertTrue(raw)
        self.assertTrue(config.verbose)

    def test_parse_args_all(self):
        demos, _, _ = main.parse_args(["all"])
        self.assertEqual(demos, list(DEMOS))


if __name__ == "__main__":
    unittest.main()
