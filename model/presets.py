"""
presets.py — Fixed Dimensions & Sample Problems
================================================
Every constant the visualizer treats as configuration rather than user
input lives here: grid size and endpoints, default array shape, the
canned Knapsack / Sudoku / string inputs, tree-canvas metrics.

Changing a value here changes it everywhere; nothing else hard-codes
these numbers.
"""

from typing import List, Tuple


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------
GRID_ROWS:    int             = 20
GRID_COLS:    int             = 50
START_CELL:   Tuple[int, int] = (10, 10)
FINISH_CELL:  Tuple[int, int] = (10, 40)


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------
ARRAY_LENGTH:               int             = 50
DISTRIBUTION_ARRAY_LENGTH:  int             = 30
ARRAY_VALUE_RANGE:          Tuple[int, int] = (5, 104)     # inclusive


# ---------------------------------------------------------------------------
# Backtracking
# ---------------------------------------------------------------------------
NQUEENS_SIZE: int = 8

# 0 = empty cell.  The classic single-solution puzzle, row by row.
SUDOKU_PUZZLE: List[int] = [
    5, 3, 0, 0, 7, 0, 0, 0, 0,
    6, 0, 0, 1, 9, 5, 0, 0, 0,
    0, 9, 8, 0, 0, 0, 0, 6, 0,
    8, 0, 0, 0, 6, 0, 0, 0, 3,
    4, 0, 0, 8, 0, 3, 0, 0, 1,
    7, 0, 0, 0, 2, 0, 0, 0, 6,
    0, 6, 0, 0, 0, 0, 2, 8, 0,
    0, 0, 0, 4, 1, 9, 0, 0, 5,
    0, 0, 0, 0, 8, 0, 0, 7, 9,
]


# ---------------------------------------------------------------------------
# Dynamic programming
# ---------------------------------------------------------------------------
# (weight, value)
KNAPSACK_ITEMS:     List[Tuple[int, int]] = [(1, 4), (3, 9), (4, 10)]
KNAPSACK_CAPACITY:  int                   = 6

LCS_DEFAULT: Tuple[str, str] = ("AGGTAB", "GXTXAYB")


# ---------------------------------------------------------------------------
# String search
# ---------------------------------------------------------------------------
DEFAULT_TEXT:     str = "ABABDABACDABABCABAB"
DEFAULT_PATTERN:  str = "ABABCABAB"


# ---------------------------------------------------------------------------
# Trees & graphs
# ---------------------------------------------------------------------------
TREE_CANVAS_WIDTH:  int = 1000
TREE_INITIAL_Y:     int = 50
TREE_LEVEL_HEIGHT:  int = 80
TRAVERSAL_DELAY_MS: int = 600

GRAPH_NODE_RANGE:   Tuple[int, int]   = (8, 12)
GRAPH_WEIGHT_RANGE: Tuple[int, int]   = (1, 10)
GRAPH_CANVAS:       Tuple[int, int]   = (800, 500)
