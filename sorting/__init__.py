"""
AlgoLab Sorting Module
======================
Randomized comparison sorting and selection.

Components:
  - partition: random-pivot Lomuto partition, comparison report
  - quicksort: in-place randomized quicksort
  - select: randomized k-th order statistic
"""

from sorting.partition import QuickSortReport, lomuto_partition
from sorting.quicksort import randomized_quicksort
from sorting.select import randomized_select

__all__ = [
    "QuickSortReport", "lomuto_partition",
    "randomized_quicksort", "randomized_select",
]
