"""
recursive_division.py — Recursive Division Maze
================================================
Split the open chamber with one straight wall that has a single gap,
then recurse into both halves.

Walls only go on odd rows / odd columns and gaps only on even ones, so
a later wall can never block an earlier gap: the cells on either side
of a gap are even/even-parity cells that no wall ever covers.  Each
split joins two connected halves through its gap, so the finished maze
is connected by construction.

Wall lines that would run through start or finish are not candidates,
so both endpoints always end up inside a chamber.
"""

import random
from typing import Dict, Generator, List, Optional

from model.grid import Grid, Cell
from algorithms.step import AnimationStep, StepType
from algorithms.maze.carving import wall_steps


PSEUDOCODE: List[str] = [
    "procedure divide(chamber)",                    # 0
    "  if chamber cannot be split: return",         # 1
    "  choose orientation (split the longer side)", # 2
    "  draw a wall across it at an odd offset",     # 3
    "  leave one gap at an even offset",            # 4
    "  divide(first half); divide(second half)",    # 5
]

LINE_MAP: Dict[StepType, int] = {
    StepType.WALL: 3,
}


def recursive_division(
    grid: Grid,
    start: Cell,
    finish: Cell,
    rng: Optional[random.Random] = None,
) -> Generator[AnimationStep, None, None]:
    rng = rng or random.Random()
    yield from _divide(grid, 0, grid.rows - 1, 0, grid.cols - 1, [start, finish], rng)


def _divide(
    grid: Grid,
    r0: int, r1: int, c0: int, c1: int,
    endpoints: List[Cell],
    rng: random.Random,
) -> Generator[AnimationStep, None, None]:
    rows = [y for y in range(r0 + 1, r1) if y % 2 == 1
            and not any(er == y and c0 <= ec <= c1 for er, ec in endpoints)]
    cols = [x for x in range(c0 + 1, c1) if x % 2 == 1
            and not any(ec == x and r0 <= er <= r1 for er, ec in endpoints)]
    if not rows and not cols:
        return

    height, width = r1 - r0 + 1, c1 - c0 + 1
    if not cols:
        horizontal = True
    elif not rows:
        horizontal = False
    elif height != width:
        horizontal = height > width
    else:
        horizontal = rng.random() < 0.5

    if horizontal:
        y   = rng.choice(rows)
        gap = rng.choice(range(c0, c1 + 1, 2))
        yield from wall_steps(grid, ((y, x) for x in range(c0, c1 + 1) if x != gap))
        yield from _divide(grid, r0, y - 1, c0, c1, endpoints, rng)
        yield from _divide(grid, y + 1, r1, c0, c1, endpoints, rng)
    else:
        x   = rng.choice(cols)
        gap = rng.choice(range(r0, r1 + 1, 2))
        yield from wall_steps(grid, ((y, x) for y in range(r0, r1 + 1) if y != gap))
        yield from _divide(grid, r0, r1, c0, x - 1, endpoints, rng)
        yield from _divide(grid, r0, r1, x + 1, c1, endpoints, rng)
