"""
AlgoLab Demo Configuration
==========================
Default sample inputs for each demo and the DemoConfig passed to runners.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

# ─── Defaults ───────────────────────────────────────────────────────────────

DEFAULT_DEGREE = 3
DEFAULT_TREE_KEYS = [10, 20, 5, 6, 12, 30, 7, 17]

# (src, dest, weight)
DEFAULT_MST_VERTICES = 4
DEFAULT_MST_EDGES: List[Tuple[int, int, int]] = [
    (0, 1, 10),
    (0, 2, 5),
    (2, 3, 9),
    (0, 3, 3),
    (1, 2, 6),
]

DEFAULT_SP_VERTICES = 5
DEFAULT_SP_SOURCE = 0
DEFAULT_SP_EDGES: List[Tuple[int, int, int]] = [
    (0, 1, -1),
    (0, 2, 4),
    (1, 2, 3),
    (1, 3, 2),
    (1, 4, 2),
    (3, 2, 5),
    (3, 1, 1),
    (4, 3, -3),
]

DEFAULT_SORT_VALUES = [9, 3, 7, 1, 8, 2, 5, 4, 6, 0]
DEFAULT_SELECT_VALUES = [7, 1, 5, 3, 9, 2, 8, 6, 4, 0]
DEFAULT_SELECT_K = 4


@dataclass
class DemoConfig:
    """Options shared by all demo runners. None means "use the demo default"."""
    degree: int = DEFAULT_DEGREE
    keys: Optional[List[int]] = None
    seed: Optional[int] = None
    k: int = DEFAULT_SELECT_K
    read_stdin: bool = False
    verbose: bool = False
