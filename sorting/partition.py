"""
Randomized Lomuto Partition
===========================
Shared by randomized quicksort and randomized select.
"""

import random
from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass
class QuickSortReport:
    comparisons: int = 0    # element-to-pivot comparisons


def lomuto_partition(a: List[Any], lo: int, hi: int, rng: random.Random,
                     report: Optional[QuickSortReport] = None) -> int:
    """
    Partition a[lo..hi] around a uniformly random pivot.
    Returns the pivot's final index p: a[lo..p-1] <= a[p] < a[p+1..hi].
    """
    p = rng.randint(lo, hi)
    a[p], a[hi] = a[hi], a[p]
    pivot = a[hi]

    i = lo - 1
    for j in range(lo, hi):
        if report is not None:
            report.comparisons += 1
        if a[j] <= pivot:
            i += 1
            if i != j:
                a[i], a[j] = a[j], a[i]
    a[i + 1], a[hi] = a[hi], a[i + 1]
    return i + 1
