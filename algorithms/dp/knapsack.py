"""
knapsack.py — 0/1 Knapsack
===========================
dp[i][w] = best value using the first i items with capacity w.

    dp[0][w] = 0
    dp[i][w] = dp[i−1][w]                              if wᵢ > w
             = max(dp[i−1][w], dp[i−1][w−wᵢ] + vᵢ)     otherwise

Table steps use (row, col) = (i, w).  Traceback walks i = n … 1 and
declares item i taken exactly when dp[i][w] ≠ dp[i−1][w]; each `found`
step carries every chosen cell so far as flattened (i, w) pairs.
"""

from typing import Dict, Generator, List, Sequence, Tuple

from algorithms.step import AnimationStep, StepType, flatten
from model.presets import KNAPSACK_ITEMS, KNAPSACK_CAPACITY


PSEUDOCODE: List[str] = [
    "procedure knapsack(items, W)",                 # 0
    "  dp[0][w] ← 0 for all w",                     # 1
    "  for i ← 1 to n:",                            # 2
    "    for w ← 0 to W:",                          # 3
    "      dp[i][w] ← dp[i−1][w]",                  # 4
    "      if wᵢ ≤ w: dp[i][w] ← max(dp[i][w], dp[i−1][w−wᵢ] + vᵢ)",  # 5
    "  w ← W",                                      # 6
    "  for i ← n downto 1:",                        # 7
    "    if dp[i][w] ≠ dp[i−1][w]: take i; w ← w − wᵢ",  # 8
]

LINE_MAP: Dict[StepType, int] = {
    StepType.COMPARE:      3,
    StepType.TARGET:       5,
    StepType.UPDATE_TABLE: 5,
    StepType.FOUND:        8,
}


def knapsack(
    items: Sequence[Tuple[int, int]] = KNAPSACK_ITEMS,
    capacity: int = KNAPSACK_CAPACITY,
) -> Generator[AnimationStep, None, None]:
    n  = len(items)
    dp = [[0] * (capacity + 1) for _ in range(n + 1)]

    for w in range(capacity + 1):
        yield AnimationStep.update_table(0, w, 0)

    for i in range(1, n + 1):
        weight, value = items[i - 1]
        for w in range(capacity + 1):
            yield AnimationStep.compare(i, w)
            depends = [(i - 1, w)]
            best = dp[i - 1][w]
            if weight <= w:
                depends.append((i - 1, w - weight))
                best = max(best, dp[i - 1][w - weight] + value)
            yield AnimationStep.target(*flatten(depends))
            dp[i][w] = best
            yield AnimationStep.update_table(i, w, best)

    chosen: List[Tuple[int, int]] = []
    w = capacity
    for i in range(n, 0, -1):
        yield AnimationStep.compare(i, w)
        if dp[i][w] != dp[i - 1][w]:
            chosen.append((i, w))
            yield AnimationStep.found(*flatten(chosen))
            w -= items[i - 1][0]


def chosen_items(found_indices: Sequence[int]) -> List[int]:
    """Item positions (0-based) from a traceback `found` payload."""
    return sorted(row - 1 for row in found_indices[0::2])
