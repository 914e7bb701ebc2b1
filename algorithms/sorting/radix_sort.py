"""
radix_sort.py — LSD Radix Sort (base 10)
=========================================
One scatter/gather round per decimal digit of (x − min).  Scatter moves
each element into bucket = digit with `moveToBucket`; gather walks the
buckets in order and writes elements back with `restore`.  Buckets are
FIFO, which is what makes each round stable.
"""

from typing import Dict, Generator, List, Sequence

from algorithms.step import AnimationStep, StepType

BASE = 10


PSEUDOCODE: List[str] = [
    "procedure radixSort(A)",                       # 0
    "  for exp ← 1, 10, 100, … while max / exp > 0:",  # 1
    "    for each x in A:",                         # 2
    "      buckets[(x / exp) mod 10].append(x)",    # 3
    "    k ← 0",                                    # 4
    "    for b ← 0 to 9:",                          # 5
    "      for each x in buckets[b]: A[k++] ← x",   # 6
]

LINE_MAP: Dict[StepType, int] = {
    StepType.HIGHLIGHT:      2,
    StepType.MOVE_TO_BUCKET: 3,
    StepType.RESTORE:        6,
}


def radix_sort(array: Sequence[int]) -> Generator[AnimationStep, None, None]:
    a = list(array)
    if not a:
        return
    lo = min(a)
    max_key = max(a) - lo
    exp = 1
    while max_key // exp > 0:
        buckets: List[List[int]] = [[] for _ in range(BASE)]
        for i, x in enumerate(a):
            yield AnimationStep.highlight(i)
            digit = ((x - lo) // exp) % BASE
            buckets[digit].append(x)
            yield AnimationStep.move_to_bucket(i, x, digit)
        k = 0
        for b, bucket in enumerate(buckets):
            for x in bucket:
                a[k] = x
                yield AnimationStep.restore(k, x, b)
                k += 1
        exp *= BASE
