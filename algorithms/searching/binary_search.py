"""
binary_search.py — Binary Search
=================================
Binary search needs sorted input, so a sorted copy is swapped into view
with one `replace` step first.  The target is then sampled from that
sorted copy and each probe at mid = ⌊(lo + hi) / 2⌋ is a `compare`.
"""

import random
from typing import Dict, Generator, List, Optional, Sequence

from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure binarySearch(A, x)",                 # 0
    "  lo ← 0; hi ← n − 1",                         # 1
    "  while lo ≤ hi:",                             # 2
    "    mid ← ⌊(lo + hi) / 2⌋",                    # 3
    "    if A[mid] = x: return mid",                # 4
    "    if A[mid] < x: lo ← mid + 1",              # 5
    "    else: hi ← mid − 1",                       # 6
    "  return NOT FOUND",                           # 7
]

LINE_MAP: Dict[StepType, int] = {
    StepType.REPLACE: 0,
    StepType.TARGET:  1,
    StepType.COMPARE: 3,
    StepType.FOUND:   4,
}


def binary_search(
    array: Sequence[int],
    target_index: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Generator[AnimationStep, None, None]:
    a = sorted(array)
    if not a:
        return
    yield AnimationStep.replace(a)

    if target_index is None:
        target_index = (rng or random.Random()).randrange(len(a))
    wanted = a[target_index]
    yield AnimationStep.target(target_index)

    lo, hi = 0, len(a) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        yield AnimationStep.compare(mid)
        if a[mid] == wanted:
            yield AnimationStep.found(mid)
            return
        if a[mid] < wanted:
            lo = mid + 1
        else:
            hi = mid - 1
