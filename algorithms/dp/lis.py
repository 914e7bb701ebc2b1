"""
lis.py — Longest Increasing Subsequence
========================================
The O(n²) recurrence: lis[i] = 1 + max(lis[j]) over j < i with
A[j] < A[i].  The lis array is the aux array; a predecessor array lets
the traceback mark one optimal strictly increasing subsequence.
"""

from typing import Dict, Generator, List, Optional, Sequence

from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure LIS(A)",                             # 0
    "  lis[i] ← 1 for all i",                       # 1
    "  for i ← 1 to n − 1:",                        # 2
    "    for j ← 0 to i − 1:",                      # 3
    "      if A[j] < A[i] and lis[j] + 1 > lis[i]:",  # 4
    "        lis[i] ← lis[j] + 1; prev[i] ← j",     # 5
    "  trace back from argmax(lis)",                # 6
]

LINE_MAP: Dict[StepType, int] = {
    StepType.UPDATE_AUX: 5,
    StepType.COMPARE:    4,
    StepType.FOUND:      6,
}


def lis(array: Sequence[int]) -> Generator[AnimationStep, None, None]:
    a = list(array)
    n = len(a)
    if n == 0:
        return
    best = [1] * n
    prev: List[Optional[int]] = [None] * n
    for i in range(n):
        yield AnimationStep.update_aux(i, 1)

    for i in range(1, n):
        for j in range(i):
            yield AnimationStep.compare(j, i)
            if a[j] < a[i] and best[j] + 1 > best[i]:
                best[i] = best[j] + 1
                prev[i] = j
                yield AnimationStep.update_aux(i, best[i])

    end = max(range(n), key=lambda k: best[k])
    chain: List[int] = []
    cur: Optional[int] = end
    while cur is not None:
        chain.append(cur)
        cur = prev[cur]
    yield AnimationStep.found(*reversed(chain))
