"""
selection_sort.py — Selection Sort
===================================
Scan the unsorted suffix for its minimum, then swap it into place.
Exactly n(n − 1)/2 comparisons on every input; at most n − 1 swaps.
"""

from typing import Dict, Generator, List, Sequence

from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure selectionSort(A)",                   # 0
    "  for i ← 0 to n − 2:",                        # 1
    "    min ← i",                                  # 2
    "    for j ← i + 1 to n − 1:",                  # 3
    "      if A[j] < A[min]:",                      # 4
    "        min ← j",                              # 5
    "    if min ≠ i: swap(A[i], A[min])",           # 6
]

LINE_MAP: Dict[StepType, int] = {
    StepType.COMPARE: 4,
    StepType.SWAP:    6,
}


def selection_sort(array: Sequence[int]) -> Generator[AnimationStep, None, None]:
    a = list(array)
    n = len(a)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            yield AnimationStep.compare(smallest, j)
            if a[j] < a[smallest]:
                smallest = j
        if smallest != i:
            a[i], a[smallest] = a[smallest], a[i]
            yield AnimationStep.swap(i, smallest)
