"""
greedy_bfs.py — Greedy Best-First Search
=========================================
Orders the frontier purely by Manhattan distance to the goal.  Fast and
goal-directed, but it ignores the cost already paid, so the path it
returns is valid and frequently NOT the shortest.
"""

import heapq
import itertools
from typing import Dict, Generator, List

from model.grid import Grid, Cell
from algorithms.step import AnimationStep, StepType
from algorithms.pathfinding.common import manhattan, working_copy, trace_back, path_steps


PSEUDOCODE: List[str] = [
    "procedure greedyBFS(grid, start, finish)",     # 0
    "  open ← [(h(start), start)]; seen ← {start}", # 1
    "  while open not empty:",                      # 2
    "    u ← open.popMin()   # by h only",          # 3
    "    if u = finish: return path(u)",            # 4
    "    for v in neighbours(u) not in seen:",      # 5
    "      seen.add(v); prev[v] ← u",               # 6
    "      open.push((h(v), v))",                   # 7
]

LINE_MAP: Dict[StepType, int] = {
    StepType.VISIT: 3,
    StepType.PATH:  4,
}


def greedy_bfs(grid: Grid, start: Cell, finish: Cell) -> Generator[AnimationStep, None, None]:
    work    = working_copy(grid)
    counter = itertools.count()
    seen    = {start}
    open_set = [(manhattan(start, finish), next(counter), start)]

    while open_set:
        _, _, cell = heapq.heappop(open_set)
        work[cell].is_visited = True
        yield AnimationStep.visit(*cell)

        if cell == finish:
            yield from path_steps(trace_back(work, finish))
            return

        for nbr in work.open_neighbours(*cell):
            if nbr.cell in seen:
                continue
            seen.add(nbr.cell)
            nbr.previous = cell
            heapq.heappush(open_set, (manhattan(nbr.cell, finish), next(counter), nbr.cell))
