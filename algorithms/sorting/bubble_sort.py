"""
bubble_sort.py — Bubble Sort
=============================
Adjacent compare-and-swap passes.  The swapped flag is honoured: the
first pass that performs no swap ends the run, so an already-sorted
input costs exactly n − 1 comparisons.
"""

from typing import Dict, Generator, List, Sequence

from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure bubbleSort(A)",                      # 0
    "  repeat",                                     # 1
    "    swapped ← false",                          # 2
    "    for i ← 0 to n − 2 − pass:",               # 3
    "      if A[i] > A[i + 1]:",                    # 4
    "        swap(A[i], A[i + 1])",                 # 5
    "        swapped ← true",                       # 6
    "  until not swapped",                          # 7
]

LINE_MAP: Dict[StepType, int] = {
    StepType.COMPARE: 4,
    StepType.SWAP:    5,
}


def bubble_sort(array: Sequence[int]) -> Generator[AnimationStep, None, None]:
    a = list(array)
    n = len(a)
    for end in range(n - 1, 0, -1):
        swapped = False
        for i in range(end):
            yield AnimationStep.compare(i, i + 1)
            if a[i] > a[i + 1]:
                a[i], a[i + 1] = a[i + 1], a[i]
                yield AnimationStep.swap(i, i + 1)
                swapped = True
        if not swapped:
            break
