"""
n_queens.py — N-Queens
=======================
Row-by-row backtracking.  The board array holds, per row, the column of
that row's queen (−1 = empty).  Square (row, col) is addressed as
row · n + col in compare/found/target steps; `overwrite` edits the
board array itself.

Per candidate square:
    compare(square)
    safe   → overwrite(row, col), found(square), recurse
    undo   → overwrite(row, −1),  target(square)
"""

from typing import Dict, Generator, List

from algorithms.step import AnimationStep, StepType
from model.presets import NQUEENS_SIZE

EMPTY = -1


PSEUDOCODE: List[str] = [
    "procedure solve(row)",                         # 0
    "  if row = n: return true",                    # 1
    "  for col ← 0 to n − 1:",                      # 2
    "    if safe(row, col):",                       # 3
    "      place queen at (row, col)",              # 4
    "      if solve(row + 1): return true",         # 5
    "      remove queen from (row, col)",           # 6
    "  return false",                               # 7
]

LINE_MAP: Dict[StepType, int] = {
    StepType.COMPARE:   3,
    StepType.OVERWRITE: 4,
    StepType.FOUND:     4,
    StepType.TARGET:    6,
}


def n_queens(n: int = NQUEENS_SIZE) -> Generator[AnimationStep, None, None]:
    board = [EMPTY] * n
    yield from _place(board, 0, n)


def is_safe(board: List[int], row: int, col: int) -> bool:
    for r in range(row):
        c = board[r]
        if c == col or abs(c - col) == row - r:
            return False
    return True


def _place(board: List[int], row: int, n: int) -> Generator[AnimationStep, None, bool]:
    if row == n:
        return True
    for col in range(n):
        square = row * n + col
        yield AnimationStep.compare(square)
        if not is_safe(board, row, col):
            continue
        board[row] = col
        yield AnimationStep.overwrite(row, col)
        yield AnimationStep.found(square)
        solved = yield from _place(board, row + 1, n)
        if solved:
            return True
        board[row] = EMPTY
        yield AnimationStep.overwrite(row, EMPTY)
        yield AnimationStep.target(square)
    return False
