"""
insertion_sort.py — Insertion Sort
===================================
Each new element sinks leftwards by adjacent swaps until the element
before it is not larger.
"""

from typing import Dict, Generator, List, Sequence

from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure insertionSort(A)",                   # 0
    "  for i ← 1 to n − 1:",                        # 1
    "    j ← i",                                    # 2
    "    while j > 0 and A[j − 1] > A[j]:",         # 3
    "      swap(A[j − 1], A[j])",                   # 4
    "      j ← j − 1",                              # 5
]

LINE_MAP: Dict[StepType, int] = {
    StepType.COMPARE: 3,
    StepType.SWAP:    4,
}


def insertion_sort(array: Sequence[int]) -> Generator[AnimationStep, None, None]:
    a = list(array)
    for i in range(1, len(a)):
        j = i
        while j > 0:
            yield AnimationStep.compare(j - 1, j)
            if a[j - 1] <= a[j]:
                break
            a[j - 1], a[j] = a[j], a[j - 1]
            yield AnimationStep.swap(j - 1, j)
            j -= 1
