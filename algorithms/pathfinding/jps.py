"""
jps.py — Jump Point Search (4-connected)
=========================================
A* over jump points instead of over every cell.

Moves are orthogonal, matching every other grid search here, so the
jump rules are the orthogonal variant:

  • Horizontal jump (dc ≠ 0) keeps stepping until it hits the goal, a
    wall, or a cell with a FORCED NEIGHBOUR: an open cell above/below
    whose entry from behind is walled off:
        (open(r−1, c) and not open(r−1, c−dc)) or
        (open(r+1, c) and not open(r+1, c−dc))
  • Vertical jump (dr ≠ 0) applies the same test rotated, and at every
    cell also launches horizontal sub-scans left and right; if either
    sub-scan finds a jump point, the current cell is a jump point.

Successors are pruned by the direction of arrival: from a horizontal
move only up, down and forward are explored; from a vertical move only
left, right and forward; the start cell explores all four.

Jump points are connected by straight runs, so the g-cost between two
of them is their Manhattan distance and the final path is recovered by
interpolating between consecutive jump points.

Yields:
    compare – every cell a jump scan steps onto
    visit   – every jump point popped from the open set
    path    – interpolated path cells, start → finish
"""

import heapq
import itertools
from typing import Dict, Generator, List, Optional

from model.grid import Grid, Cell, DIRECTIONS
from algorithms.step import AnimationStep, StepType
from algorithms.pathfinding.common import manhattan, working_copy, path_steps


PSEUDOCODE: List[str] = [
    "procedure JPS(grid, start, finish)",           # 0
    "  open ← [(h(start), start)]",                 # 1
    "  while open not empty:",                      # 2
    "    u ← open.popMin(); close u",               # 3
    "    if u = finish: return interpolate(path(u))",  # 4
    "    for d in prunedDirections(u, parent(u)):", # 5
    "      j ← jump(u, d)",                         # 6
    "      if j exists and not closed:",            # 7
    "        relax j with g[u] + |u − j|",          # 8
]

LINE_MAP: Dict[StepType, int] = {
    StepType.VISIT:   3,
    StepType.PATH:    4,
    StepType.COMPARE: 6,
}


def jps(grid: Grid, start: Cell, finish: Cell) -> Generator[AnimationStep, None, None]:
    work    = working_copy(grid)
    counter = itertools.count()
    g:      Dict[Cell, int]            = {start: 0}
    parent: Dict[Cell, Optional[Cell]] = {start: None}
    closed = set()
    open_set = [(manhattan(start, finish), next(counter), start)]

    while open_set:
        _, _, cell = heapq.heappop(open_set)
        if cell in closed:
            continue
        closed.add(cell)
        work[cell].is_visited = True
        yield AnimationStep.visit(*cell)

        if cell == finish:
            yield from path_steps(_interpolate(parent, finish))
            return

        for dr, dc in _pruned_directions(work, cell, parent[cell]):
            jump_point = yield from _jump(work, cell, dr, dc, finish)
            if jump_point is None or jump_point in closed:
                continue
            cost = g[cell] + manhattan(cell, jump_point)
            if cost < g.get(jump_point, float("inf")):
                g[jump_point]      = cost
                parent[jump_point] = cell
                heapq.heappush(open_set, (cost + manhattan(jump_point, finish), next(counter), jump_point))


# ---------------------------------------------------------------------------
# Pruning & jumping
# ---------------------------------------------------------------------------
def _pruned_directions(work: Grid, cell: Cell, came_from: Optional[Cell]) -> List[Cell]:
    r, c = cell
    if came_from is None:
        candidates = list(DIRECTIONS)
    else:
        dr = (r > came_from[0]) - (r < came_from[0])
        dc = (c > came_from[1]) - (c < came_from[1])
        if dc != 0:
            candidates = [(-1, 0), (1, 0), (0, dc)]
        else:
            candidates = [(0, -1), (0, 1), (dr, 0)]
    return [(dr, dc) for dr, dc in candidates if work.is_open(r + dr, c + dc)]


def _jump(work: Grid, cell: Cell, dr: int, dc: int, finish: Cell) -> Generator[AnimationStep, None, Optional[Cell]]:
    r, c = cell
    is_open = work.is_open
    while True:
        r, c = r + dr, c + dc
        if not is_open(r, c):
            return None
        yield AnimationStep.compare(r, c)
        if (r, c) == finish:
            return (r, c)

        if dc != 0:
            if (is_open(r - 1, c) and not is_open(r - 1, c - dc)) or \
               (is_open(r + 1, c) and not is_open(r + 1, c - dc)):
                return (r, c)
        else:
            if (is_open(r, c - 1) and not is_open(r - dr, c - 1)) or \
               (is_open(r, c + 1) and not is_open(r - dr, c + 1)):
                return (r, c)
            for side in (-1, 1):
                hit = yield from _jump(work, (r, c), 0, side, finish)
                if hit is not None:
                    return (r, c)


def _interpolate(parent: Dict[Cell, Optional[Cell]], finish: Cell) -> List[Cell]:
    jump_points: List[Cell] = []
    cur: Optional[Cell] = finish
    while cur is not None:
        jump_points.append(cur)
        cur = parent[cur]
    jump_points.reverse()

    cells = [jump_points[0]]
    for (r0, c0), (r1, c1) in zip(jump_points, jump_points[1:]):
        dr = (r1 > r0) - (r1 < r0)
        dc = (c1 > c0) - (c1 < c0)
        r, c = r0, c0
        while (r, c) != (r1, c1):
            r, c = r + dr, c + dc
            cells.append((r, c))
    return cells
