"""
AlgoLab: Classical Algorithms Demo Runner
=========================================
Entry point for the demo programs.

Usage:
    python main.py DEMO [options]

Default:
    Runs every demo on its built-in sample input.
"""

import logging
import sys
from typing import List, Optional, TextIO

from common.config import DemoConfig
from common.errors import AlgorithmError


def print_help(output: TextIO = None):
    print("""
AlgoLab: Classical Algorithms Demo Runner

Usage:
    python main.py [DEMO] [options]

Demos:
    btree           B-Tree insert + ordered traversal
    bellman-ford    Single-source shortest paths
    kruskal         Minimum spanning tree
    quicksort       Randomized quicksort with comparison count
    select          Randomized k-th order statistic
    all             Run every demo (default)

Options:
    --help          Show this help
    --degree N      B-Tree minimum degree (default: 3)
    --keys a,b,c    Input values for btree, quicksort and select
    --seed N        Seed the random pivot generator
    --k N           Order statistic for select, 0-based (default: 4)
    --stdin         bellman-ford: read "V E", E edges, source from stdin
    --raw           Tab-separated output instead of tables
    --verbose       Debug logging on stderr
""", file=output or sys.stdout)


def _parse_int(option: str, text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"{option} expects an integer, got '{text}'")


def _parse_keys(text: str) -> List[int]:
    parts = [p for p in text.replace(" ", ",").split(",") if p]
    return [_parse_int("--keys", p) for p in parts]


def parse_args(args: List[str]):
    """Parse CLI arguments into (demo names, DemoConfig, raw_mode)."""
    from cli.demos import DEMOS

    config = DemoConfig()
    demos: List[str] = []
    raw = False

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--degree", "--keys", "--seed", "--k"):
            if i + 1 >= len(args):
                raise ValueError(f"{arg} requires a value")
            value = args[i + 1]
            if arg == "--degree":
                config.degree = _parse_int(arg, value)
            elif arg == "--keys":
                config.keys = _parse_keys(value)
            elif arg == "--seed":
                config.seed = _parse_int(arg, value)
            else:
                config.k = _parse_int(arg, value)
            i += 2
        elif arg == "--stdin":
            config.read_stdin = True
            i += 1
        elif arg == "--verbose":
            config.verbose = True
            i += 1
        elif arg == "--raw":
            raw = True
            i += 1
        elif arg.startswith("-"):
            raise ValueError(f"Unknown option: {arg}")
        elif arg == "all":
            demos.extend(DEMOS)
            i += 1
        elif arg in DEMOS:
            demos.append(arg)
            i += 1
        else:
            raise ValueError(f"Unknown demo: {arg}")

    return demos or list(DEMOS), config, raw


def main(argv: Optional[List[str]] = None, stdout: TextIO = None,
         stdin: TextIO = None) -> int:
    """Parse CLI arguments and dispatch. Returns the process exit status."""
    from cli.demos import run_demo
    from cli.renderer import Renderer

    args = sys.argv[1:] if argv is None else argv
    out = stdout or sys.stdout

    if "--help" in args or "-h" in args:
        print_help(out)
        return 0

    renderer = Renderer(out)
    try:
        demos, config, raw = parse_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        print_help(sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if raw:
        renderer.mode = "raw"

    for name in demos:
        try:
            result = run_demo(name, config, stdin)
        except AlgorithmError as e:
            renderer.render_error(e)
            return 1

        renderer.render_title(result.title)
        renderer.render_message(result.message)
        if result.rows is not None:
            renderer.render_rows(result.rows, result.column_names)

    return 0


if __name__ == "__main__":
    sys.exit(main())
