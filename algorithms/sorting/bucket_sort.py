"""
bucket_sort.py — Bucket Sort
=============================
Ten range buckets over [min, max].  Elements are scattered by range and
gathered back bucket by bucket WITHOUT sorting inside the buckets; an
insertion-sort cleanup over the whole reassembled array then finishes
the job.  On skewed inputs most of the work lands in that final pass,
which is the point the visualisation makes.
"""

from typing import Dict, Generator, List, Sequence

from algorithms.step import AnimationStep, StepType

BUCKETS = 10


PSEUDOCODE: List[str] = [
    "procedure bucketSort(A)",                      # 0
    "  for each x in A:",                           # 1
    "    b ← ⌊(x − min) · k / (max − min + 1)⌋",    # 2
    "    buckets[b].append(x)",                     # 3
    "  concatenate buckets back into A",            # 4
    "  for i ← 1 to n − 1:",                        # 5
    "    key ← A[i]; j ← i − 1",                    # 6
    "    while j ≥ 0 and A[j] > key: A[j + 1] ← A[j]; j −= 1",  # 7
    "    A[j + 1] ← key",                           # 8
]

LINE_MAP: Dict[StepType, int] = {
    StepType.MOVE_TO_BUCKET: 3,
    StepType.RESTORE:        4,
    StepType.HIGHLIGHT:      6,
    StepType.COMPARE:        7,
    StepType.OVERWRITE:      7,
}


def bucket_sort(array: Sequence[int]) -> Generator[AnimationStep, None, None]:
    a = list(array)
    n = len(a)
    if n <= 1:
        return
    lo, hi = min(a), max(a)
    span = hi - lo + 1

    buckets: List[List[int]] = [[] for _ in range(BUCKETS)]
    for i, x in enumerate(a):
        b = (x - lo) * BUCKETS // span
        buckets[b].append(x)
        yield AnimationStep.move_to_bucket(i, x, b)

    k = 0
    for b, bucket in enumerate(buckets):
        for x in bucket:
            a[k] = x
            yield AnimationStep.restore(k, x, b)
            k += 1

    for i in range(1, n):
        key = a[i]
        yield AnimationStep.highlight(i)
        j = i - 1
        while j >= 0:
            yield AnimationStep.compare(j, j + 1)
            if a[j] <= key:
                break
            a[j + 1] = a[j]
            yield AnimationStep.overwrite(j + 1, a[j])
            j -= 1
        a[j + 1] = key
        yield AnimationStep.overwrite(j + 1, key)
