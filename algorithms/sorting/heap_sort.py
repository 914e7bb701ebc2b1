"""
heap_sort.py — Heap Sort
=========================
Build a max-heap bottom-up, then repeatedly swap the root to the end of
the shrinking heap and sift the new root down.  Each child comparison
inside sift-down is logged as `compare(child, largest)`.
"""

from typing import Dict, Generator, List, Sequence

from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure heapSort(A)",                        # 0
    "  for i ← ⌊n/2⌋ − 1 downto 0: siftDown(A, i, n)",  # 1
    "  for end ← n − 1 downto 1:",                  # 2
    "    swap(A[0], A[end])",                       # 3
    "    siftDown(A, 0, end)",                      # 4
    "procedure siftDown(A, i, size)",               # 5
    "  largest ← max of i and its children",        # 6
    "  if largest ≠ i: swap(A[i], A[largest]); siftDown(A, largest, size)",  # 7
]

LINE_MAP: Dict[StepType, int] = {
    StepType.COMPARE: 6,
    StepType.SWAP:    7,
}


def heap_sort(array: Sequence[int]) -> Generator[AnimationStep, None, None]:
    a = list(array)
    n = len(a)
    for i in range(n // 2 - 1, -1, -1):
        yield from _sift_down(a, i, n)
    for end in range(n - 1, 0, -1):
        a[0], a[end] = a[end], a[0]
        yield AnimationStep.swap(0, end)
        yield from _sift_down(a, 0, end)


def _sift_down(a: List[int], i: int, size: int) -> Generator[AnimationStep, None, None]:
    while True:
        largest = i
        for child in (2 * i + 1, 2 * i + 2):
            if child < size:
                yield AnimationStep.compare(child, largest)
                if a[child] > a[largest]:
                    largest = child
        if largest == i:
            return
        a[i], a[largest] = a[largest], a[i]
        yield AnimationStep.swap(i, largest)
        i = largest
