"""
common.py — Shared Pathfinding Helpers
=======================================
Working-copy setup, heuristics and path reconstruction used by every
grid search.
"""

from typing import Callable, Dict, Generator, List, Optional

from model.grid import Grid, Cell
from algorithms.step import AnimationStep


# ---------------------------------------------------------------------------
# Heuristics  (both take two cells, return a lower bound on moves)
# ---------------------------------------------------------------------------
def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def zero(a: Cell, b: Cell) -> int:
    """h = 0 turns A* into Dijkstra."""
    return 0


HEURISTICS: Dict[str, Callable[[Cell, Cell], int]] = {
    "manhattan": manhattan,
    "zero":      zero,
}


# ---------------------------------------------------------------------------
# Setup / teardown
# ---------------------------------------------------------------------------
def working_copy(grid: Grid) -> Grid:
    """Private copy with every scratch field neutral."""
    work = grid.copy()
    work.reset_algo_state()
    return work


def trace_back(work: Grid, finish: Cell) -> List[Cell]:
    """Follow `previous` markers from finish; returns cells start → finish."""
    cells: List[Cell] = []
    cur: Optional[Cell] = finish
    while cur is not None:
        cells.append(cur)
        cur = work[cur].previous
    cells.reverse()
    return cells


def walk_parents(parent: Dict[Cell, Optional[Cell]], end: Cell) -> List[Cell]:
    """Same as trace_back but over an explicit parent map; end → root order."""
    cells: List[Cell] = []
    cur: Optional[Cell] = end
    while cur is not None:
        cells.append(cur)
        cur = parent.get(cur)
    return cells


def path_steps(cells: List[Cell]) -> Generator[AnimationStep, None, None]:
    for r, c in cells:
        yield AnimationStep.path(r, c)
