"""
bfs.py — Breadth-First Search
==============================
Layer-by-layer flood from start.  On a unit-cost grid the first time
finish is dequeued, the `previous` chain is a shortest path.

Cells are marked seen when enqueued (so nothing is queued twice) and
logged as `visit` when dequeued.
"""

from collections import deque
from typing import Dict, Generator, List

from model.grid import Grid, Cell
from algorithms.step import AnimationStep, StepType
from algorithms.pathfinding.common import working_copy, trace_back, path_steps


PSEUDOCODE: List[str] = [
    "procedure BFS(grid, start, finish)",           # 0
    "  queue ← [start]; seen ← {start}",            # 1
    "  while queue not empty:",                     # 2
    "    u ← queue.dequeue()",                      # 3
    "    if u = finish: return path(u)",            # 4
    "    for v in neighbours(u) not in seen:",      # 5
    "      seen.add(v); prev[v] ← u",               # 6
    "      queue.enqueue(v)",                       # 7
    "  return NOT FOUND",                           # 8
]

LINE_MAP: Dict[StepType, int] = {
    StepType.VISIT: 3,
    StepType.PATH:  4,
}


def bfs(grid: Grid, start: Cell, finish: Cell) -> Generator[AnimationStep, None, None]:
    work  = working_copy(grid)
    queue = deque([start])
    seen  = {start}

    while queue:
        cell = queue.popleft()
        work[cell].is_visited = True
        yield AnimationStep.visit(*cell)

        if cell == finish:
            yield from path_steps(trace_back(work, finish))
            return

        for nbr in work.open_neighbours(*cell):
            if nbr.cell not in seen:
                seen.add(nbr.cell)
                nbr.previous = cell
                queue.append(nbr.cell)
