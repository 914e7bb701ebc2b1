"""
linear_search.py — Linear Search
=================================
The target value is sampled from the array (index chosen by the caller
or drawn from `rng`), revealed with a single `target` step, then probed
left to right.  The run ends at the first index holding that value.
"""

import random
from typing import Dict, Generator, List, Optional, Sequence

from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure linearSearch(A, x)",                 # 0
    "  for i ← 0 to n − 1:",                        # 1
    "    if A[i] = x:",                             # 2
    "      return i",                               # 3
    "  return NOT FOUND",                           # 4
]

LINE_MAP: Dict[StepType, int] = {
    StepType.TARGET:  0,
    StepType.COMPARE: 2,
    StepType.FOUND:   3,
}


def linear_search(
    array: Sequence[int],
    target_index: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Generator[AnimationStep, None, None]:
    a = list(array)
    if not a:
        return
    if target_index is None:
        target_index = (rng or random.Random()).randrange(len(a))
    wanted = a[target_index]

    yield AnimationStep.target(target_index)
    for i, x in enumerate(a):
        yield AnimationStep.compare(i)
        if x == wanted:
            yield AnimationStep.found(i)
            return
