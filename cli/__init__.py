"""
AlgoLab CLI
===========
Demo runners and text rendering for the command-line entry point.
"""

from cli.renderer import Renderer
from cli.demos import DEMOS, DemoResult, run_demo

__all__ = ["Renderer", "DEMOS", "DemoResult", "run_demo"]
