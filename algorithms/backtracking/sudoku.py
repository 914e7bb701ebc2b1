"""
sudoku.py — Sudoku Backtracking
================================
First-fit backtracking over an 81-cell board (0 = empty): take the
first empty cell in row-major order, try 1..9, recurse on each digit
that passes the row / column / 3×3-box check, undo on failure.
"""

from typing import Dict, Generator, List, Optional, Sequence

from algorithms.step import AnimationStep, StepType

SIZE = 9
BOX  = 3


PSEUDOCODE: List[str] = [
    "procedure solve(board)",                       # 0
    "  cell ← first empty cell",                    # 1
    "  if none: return true",                       # 2
    "  for d ← 1 to 9:",                            # 3
    "    if d fits row, column and box:",           # 4
    "      board[cell] ← d",                        # 5
    "      if solve(board): return true",           # 6
    "      board[cell] ← 0",                        # 7
    "  return false",                               # 8
]

LINE_MAP: Dict[StepType, int] = {
    StepType.COMPARE:   4,
    StepType.OVERWRITE: 5,
    StepType.FOUND:     5,
    StepType.TARGET:    7,
}


def sudoku(board: Sequence[int]) -> Generator[AnimationStep, None, None]:
    cells = list(board)
    if len(cells) != SIZE * SIZE:
        return
    yield from _solve(cells)


def fits(cells: List[int], index: int, digit: int) -> bool:
    row, col = divmod(index, SIZE)
    for k in range(SIZE):
        if cells[row * SIZE + k] == digit or cells[k * SIZE + col] == digit:
            return False
    br, bc = row - row % BOX, col - col % BOX
    for r in range(br, br + BOX):
        for c in range(bc, bc + BOX):
            if cells[r * SIZE + c] == digit:
                return False
    return True


def _first_empty(cells: List[int]) -> Optional[int]:
    for i, v in enumerate(cells):
        if v == 0:
            return i
    return None


def _solve(cells: List[int]) -> Generator[AnimationStep, None, bool]:
    index = _first_empty(cells)
    if index is None:
        return True
    for digit in range(1, SIZE + 1):
        yield AnimationStep.compare(index, value=digit)
        if not fits(cells, index, digit):
            continue
        cells[index] = digit
        yield AnimationStep.overwrite(index, digit)
        yield AnimationStep.found(index)
        solved = yield from _solve(cells)
        if solved:
            return True
        cells[index] = 0
        yield AnimationStep.overwrite(index, 0)
        yield AnimationStep.target(index)
    return False
