"""
merge_sort.py — Merge Sort
===========================
Top-down merge sort.  Each merge copies the two sorted runs aside and
writes the merged sequence back with one `overwrite` per position.

Compare indices point at where the two candidates sat before the merge
began (left run position, right run position), which is what the
viewer needs to see which halves are being merged.
"""

from typing import Dict, Generator, List, Sequence

from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure mergeSort(A, lo, hi)",               # 0
    "  if lo ≥ hi: return",                         # 1
    "  mid ← ⌊(lo + hi) / 2⌋",                      # 2
    "  mergeSort(A, lo, mid)",                      # 3
    "  mergeSort(A, mid + 1, hi)",                  # 4
    "  while both runs non-empty:",                 # 5
    "    if L[i] ≤ R[j]: A[k] ← L[i++]",            # 6
    "    else:          A[k] ← R[j++]",             # 7
    "  copy the leftovers into A[k…]",              # 8
]

LINE_MAP: Dict[StepType, int] = {
    StepType.COMPARE:   5,
    StepType.OVERWRITE: 6,
}


def merge_sort(array: Sequence[int]) -> Generator[AnimationStep, None, None]:
    a = list(array)
    yield from _sort(a, 0, len(a) - 1)


def _sort(a: List[int], lo: int, hi: int) -> Generator[AnimationStep, None, None]:
    if lo >= hi:
        return
    mid = (lo + hi) // 2
    yield from _sort(a, lo, mid)
    yield from _sort(a, mid + 1, hi)
    yield from _merge(a, lo, mid, hi)


def _merge(a: List[int], lo: int, mid: int, hi: int) -> Generator[AnimationStep, None, None]:
    left, right = a[lo:mid + 1], a[mid + 1:hi + 1]
    i = j = 0
    k = lo
    while i < len(left) and j < len(right):
        yield AnimationStep.compare(lo + i, mid + 1 + j)
        if left[i] <= right[j]:
            a[k] = left[i]
            i += 1
        else:
            a[k] = right[j]
            j += 1
        yield AnimationStep.overwrite(k, a[k])
        k += 1
    for value in left[i:] + right[j:]:
        a[k] = value
        yield AnimationStep.overwrite(k, value)
        k += 1
