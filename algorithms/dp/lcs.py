"""
lcs.py — Longest Common Subsequence
====================================
dp[i][j] = LCS length of first[:i] and second[:j].

    dp[i][j] = dp[i−1][j−1] + 1                if first[i−1] = second[j−1]
             = max(dp[i−1][j], dp[i][j−1])     otherwise

Traceback from (n, m): diagonal on a match (that cell is part of the
answer), otherwise toward the larger neighbour (up on ties).  Each
`found` step carries every matched cell so far as flattened (i, j)
pairs.
"""

from typing import Dict, Generator, List, Sequence, Tuple

from algorithms.step import AnimationStep, StepType, flatten, pairs
from model.presets import LCS_DEFAULT


PSEUDOCODE: List[str] = [
    "procedure LCS(X, Y)",                          # 0
    "  dp[i][0] ← dp[0][j] ← 0",                    # 1
    "  for i ← 1 to n:",                            # 2
    "    for j ← 1 to m:",                          # 3
    "      if X[i] = Y[j]: dp[i][j] ← dp[i−1][j−1] + 1",  # 4
    "      else: dp[i][j] ← max(dp[i−1][j], dp[i][j−1])", # 5
    "  trace back from dp[n][m]",                   # 6
]

LINE_MAP: Dict[StepType, int] = {
    StepType.COMPARE:      3,
    StepType.UPDATE_TABLE: 4,
    StepType.FOUND:        6,
}


def lcs(first: str = LCS_DEFAULT[0], second: str = LCS_DEFAULT[1]) -> Generator[AnimationStep, None, None]:
    n, m = len(first), len(second)
    dp = [[0] * (m + 1) for _ in range(n + 1)]

    for i in range(n + 1):
        yield AnimationStep.update_table(i, 0, 0)
    for j in range(1, m + 1):
        yield AnimationStep.update_table(0, j, 0)

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            yield AnimationStep.compare(i, j)
            if first[i - 1] == second[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
            yield AnimationStep.update_table(i, j, dp[i][j])

    matched: List[Tuple[int, int]] = []
    i, j = n, m
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            matched.append((i, j))
            yield AnimationStep.found(*flatten(matched))
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1


def subsequence(first: str, found_indices: Sequence[int]) -> str:
    """Spell the subsequence described by a traceback `found` payload."""
    return "".join(first[i - 1] for i, _ in sorted(pairs(found_indices)))
