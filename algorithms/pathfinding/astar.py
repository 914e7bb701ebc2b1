"""
astar.py — A* Search
=====================
Dijkstra plus a heuristic: the open set is ordered by f = g + h, ties
broken by smaller h (prefer cells closer to the goal), then insertion
order.

Manhattan distance is admissible and consistent on a unit-cost
4-connected grid, so the first time finish is popped its g is optimal.
Pass heuristic="zero" to watch A* degrade to Dijkstra.
"""

import heapq
import itertools
from typing import Dict, Generator, List

from model.grid import Grid, Cell
from algorithms.step import AnimationStep, StepType
from algorithms.pathfinding.common import HEURISTICS, manhattan, working_copy, trace_back, path_steps


PSEUDOCODE: List[str] = [
    "procedure aStar(grid, start, finish, h)",      # 0
    "  g[start] ← 0; open ← [(h(start), start)]",   # 1
    "  while open not empty:",                      # 2
    "    u ← open.popMin()   # by g + h",           # 3
    "    if u closed: continue",                    # 4
    "    close u",                                  # 5
    "    if u = finish: return path(u)",            # 6
    "    for v in neighbours(u):",                  # 7
    "      if g[u] + 1 < g[v]:",                    # 8
    "        g[v] ← g[u] + 1; prev[v] ← u",         # 9
    "        open.push((g[v] + h(v), v))",          # 10
]

LINE_MAP: Dict[StepType, int] = {
    StepType.VISIT: 5,
    StepType.PATH:  6,
}


def astar(
    grid: Grid,
    start: Cell,
    finish: Cell,
    heuristic: str = "manhattan",
) -> Generator[AnimationStep, None, None]:
    h_fn    = HEURISTICS.get(heuristic, manhattan)
    work    = working_copy(grid)
    counter = itertools.count()

    work[start].distance = 0
    h0 = h_fn(start, finish)
    open_set = [(h0, h0, next(counter), start)]

    while open_set:
        _, _, _, cell = heapq.heappop(open_set)
        node = work[cell]
        if node.is_visited:
            continue
        node.is_visited = True
        yield AnimationStep.visit(*cell)

        if cell == finish:
            yield from path_steps(trace_back(work, finish))
            return

        for nbr in work.open_neighbours(*cell):
            if nbr.is_visited:
                continue
            g = node.distance + 1
            if g < nbr.distance:
                nbr.distance = g
                nbr.previous = cell
                h = h_fn(nbr.cell, finish)
                heapq.heappush(open_set, (g + h, h, next(counter), nbr.cell))
