"""
quick_sort.py — Quick Sort (Lomuto)
====================================
Last element is the pivot.  The pivot is `highlight`ed once per
partition; every `A[j] ≤ pivot` test is a real comparison and is logged
as `compare(j, hi)`.
"""

from typing import Dict, Generator, List, Sequence

from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure quickSort(A, lo, hi)",               # 0
    "  if lo < hi:",                                # 1
    "    pivot ← A[hi]; i ← lo − 1",                # 2
    "    for j ← lo to hi − 1:",                    # 3
    "      if A[j] ≤ pivot:",                       # 4
    "        i ← i + 1; swap(A[i], A[j])",          # 5
    "    swap(A[i + 1], A[hi])",                    # 6
    "    quickSort(A, lo, i)",                      # 7
    "    quickSort(A, i + 2, hi)",                  # 8
]

LINE_MAP: Dict[StepType, int] = {
    StepType.HIGHLIGHT: 2,
    StepType.COMPARE:   4,
    StepType.SWAP:      5,
}


def quick_sort(array: Sequence[int]) -> Generator[AnimationStep, None, None]:
    a = list(array)
    yield from _quick(a, 0, len(a) - 1)


def _quick(a: List[int], lo: int, hi: int) -> Generator[AnimationStep, None, None]:
    # left half recurses, right half loops
    while lo < hi:
        p = yield from _partition(a, lo, hi)
        yield from _quick(a, lo, p - 1)
        lo = p + 1


def _partition(a: List[int], lo: int, hi: int) -> Generator[AnimationStep, None, int]:
    pivot = a[hi]
    yield AnimationStep.highlight(hi)
    i = lo - 1
    for j in range(lo, hi):
        yield AnimationStep.compare(j, hi)
        if a[j] <= pivot:
            i += 1
            a[i], a[j] = a[j], a[i]
            yield AnimationStep.swap(i, j)
    a[i + 1], a[hi] = a[hi], a[i + 1]
    yield AnimationStep.swap(i + 1, hi)
    return i + 1
