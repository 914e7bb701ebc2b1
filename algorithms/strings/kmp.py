"""
kmp.py — Knuth-Morris-Pratt
============================
Phase 1 builds the LPS table (longest proper prefix of pattern[:i+1]
that is also a suffix of it) with the usual two pointers, falling back
through the table on a mismatch.  LPS values are shown in the aux
array; pattern-vs-pattern comparisons carry value = PATTERN_SCAN.

Phase 2 scans the text once.  On a mismatch after j matched characters
the pattern pointer falls back to lps[j − 1]; the text pointer never
moves backwards.  Overlapping occurrences are reported.
"""

from typing import Dict, Generator, List

from algorithms.step import AnimationStep, StepType, MATCH, MISMATCH

PATTERN_SCAN = -1


PSEUDOCODE: List[str] = [
    "procedure KMP(T, P)",                          # 0
    "  lps ← buildLPS(P)",                          # 1
    "  i ← 0; j ← 0",                               # 2
    "  while i < n:",                               # 3
    "    if T[i] = P[j]: i += 1; j += 1",           # 4
    "      if j = m: report i − m; j ← lps[j − 1]", # 5
    "    else if j > 0: j ← lps[j − 1]",            # 6
    "    else: i += 1",                             # 7
]

LINE_MAP: Dict[StepType, int] = {
    StepType.UPDATE_AUX: 1,
    StepType.COMPARE:    4,
    StepType.HIGHLIGHT:  4,
    StepType.FOUND:      5,
}


def build_lps(pattern: str) -> Generator[AnimationStep, None, List[int]]:
    m   = len(pattern)
    lps = [0] * m
    if m:
        yield AnimationStep.update_aux(0, 0)
    length, i = 0, 1
    while i < m:
        yield AnimationStep.compare(i, length, value=PATTERN_SCAN)
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            yield AnimationStep.update_aux(i, length)
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            yield AnimationStep.update_aux(i, 0)
            i += 1
    return lps


def kmp(text: str, pattern: str) -> Generator[AnimationStep, None, None]:
    n, m = len(text), len(pattern)
    if n == 0 or m == 0:
        return
    lps = yield from build_lps(pattern)

    i = j = 0
    while i < n:
        yield AnimationStep.compare(i, j)
        if text[i] == pattern[j]:
            yield AnimationStep.highlight(i, value=MATCH)
            i += 1
            j += 1
            if j == m:
                yield AnimationStep.found(*range(i - m, i))
                j = lps[j - 1]
        else:
            yield AnimationStep.highlight(i, value=MISMATCH)
            if j:
                j = lps[j - 1]
            else:
                i += 1
