"""
counting_sort.py — Counting Sort
=================================
The count array is the auxiliary array the viewer shows under the bars.
Slot k counts occurrences of value (min + k), so negative inputs work
too.  Every count mutation is an `updateAux` step.
"""

from typing import Dict, Generator, List, Sequence

from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure countingSort(A)",                    # 0
    "  count ← zeros(max − min + 1)",               # 1
    "  for each x in A: count[x − min] += 1",       # 2
    "  k ← 0",                                      # 3
    "  for v ← min to max:",                        # 4
    "    while count[v − min] > 0:",                # 5
    "      A[k] ← v; k ← k + 1",                    # 6
    "      count[v − min] −= 1",                    # 7
]

LINE_MAP: Dict[StepType, int] = {
    StepType.HIGHLIGHT:  2,
    StepType.UPDATE_AUX: 2,
    StepType.OVERWRITE:  6,
}


def counting_sort(array: Sequence[int]) -> Generator[AnimationStep, None, None]:
    a = list(array)
    if not a:
        return
    lo, hi = min(a), max(a)
    counts = [0] * (hi - lo + 1)
    for k in range(len(counts)):
        yield AnimationStep.update_aux(k, 0)

    for i, x in enumerate(a):
        yield AnimationStep.highlight(i)
        counts[x - lo] += 1
        yield AnimationStep.update_aux(x - lo, counts[x - lo])

    out = 0
    for k in range(len(counts)):
        while counts[k] > 0:
            a[out] = lo + k
            yield AnimationStep.overwrite(out, lo + k)
            counts[k] -= 1
            yield AnimationStep.update_aux(k, counts[k])
            out += 1
