"""
Randomized Quicksort
====================
In-place quicksort with a random Lomuto pivot. Returns a report of the
number of element-to-pivot comparisons made.
"""

import logging
import random
from typing import Any, List, Optional

from sorting.partition import QuickSortReport, lomuto_partition

logger = logging.getLogger(__name__)


def randomized_quicksort(a: List[Any], rng: Optional[random.Random] = None) -> QuickSortReport:
    """Sort a in place. Expected O(n log n) comparisons for any input order."""
    rng = rng or random.Random()
    report = QuickSortReport()
    if a:
        _quicksort(a, 0, len(a) - 1, rng, report)
    logger.debug("Sorted %d elements with %d comparisons", len(a), report.comparisons)
    return report


def _quicksort(a: List[Any], lo: int, hi: int, rng: random.Random,
               report: QuickSortReport) -> None:
    # Recurse on the smaller side, loop on the larger: stack depth O(log n)
    while lo < hi:
        mid = lomuto_partition(a, lo, hi, rng, report)
        if mid - lo < hi - mid:
            _quicksort(a, lo, mid - 1, rng, report)
            lo = mid + 1
        else:
            _quicksort(a, mid + 1, hi, rng, report)
            hi = mid - 1
