"""
shell_sort.py — Shell Sort
===========================
Gapped insertion sort with Shell's original sequence n/2, n/4, …, 1.
The lifted element is highlighted; larger elements shift right by
`overwrite`, and the lifted value is written into its slot at the end.
"""

from typing import Dict, Generator, List, Sequence

from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure shellSort(A)",                       # 0
    "  gap ← ⌊n / 2⌋",                              # 1
    "  while gap > 0:",                             # 2
    "    for i ← gap to n − 1:",                    # 3
    "      temp ← A[i]; j ← i",                     # 4
    "      while j ≥ gap and A[j − gap] > temp:",   # 5
    "        A[j] ← A[j − gap]; j ← j − gap",       # 6
    "      A[j] ← temp",                            # 7
    "    gap ← ⌊gap / 2⌋",                          # 8
]

LINE_MAP: Dict[StepType, int] = {
    StepType.HIGHLIGHT: 4,
    StepType.COMPARE:   5,
    StepType.OVERWRITE: 6,
}


def shell_sort(array: Sequence[int]) -> Generator[AnimationStep, None, None]:
    a = list(array)
    n = len(a)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            temp = a[i]
            yield AnimationStep.highlight(i)
            j = i
            while j >= gap:
                yield AnimationStep.compare(j - gap, j)
                if a[j - gap] <= temp:
                    break
                a[j] = a[j - gap]
                yield AnimationStep.overwrite(j, a[j])
                j -= gap
            a[j] = temp
            yield AnimationStep.overwrite(j, temp)
        gap //= 2
