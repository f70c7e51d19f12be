"""
Randomized Select
=================
k-th order statistic (0-based) in expected linear time.
The input list is partially reordered in place.
"""

import random
from typing import Any, List, Optional

from common.errors import InvalidParameterError
from sorting.partition import lomuto_partition


def randomized_select(a: List[Any], k: int, rng: Optional[random.Random] = None) -> Any:
    """Return the k-th smallest element of a (k=0 is the minimum)."""
    if not a:
        raise InvalidParameterError("a", a, "cannot select from an empty sequence")
    if isinstance(k, bool) or not isinstance(k, int) or not 0 <= k < len(a):
        raise InvalidParameterError("k", k, f"must be in [0, {len(a)})")

    rng = rng or random.Random()
    lo, hi = 0, len(a) - 1
    while lo < hi:
        mid = lomuto_partition(a, lo, hi, rng)
        if k == mid:
            return a[mid]
        if k < mid:
            hi = mid - 1
        else:
            lo = mid + 1
    return a[lo]
