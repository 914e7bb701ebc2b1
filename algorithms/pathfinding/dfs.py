"""
dfs.py — Depth-First Search
============================
Iterative DFS with an explicit stack of (cell, came_from) pairs, so a
cell's predecessor is fixed at the moment it is actually visited.
Neighbours are pushed up, down, left, right; the last pushed (right)
is explored first.  Finds *a* path, usually a long winding one.
"""

from typing import Dict, Generator, List, Optional, Tuple

from model.grid import Grid, Cell
from algorithms.step import AnimationStep, StepType
from algorithms.pathfinding.common import working_copy, trace_back, path_steps


PSEUDOCODE: List[str] = [
    "procedure DFS(grid, start, finish)",           # 0
    "  stack ← [start]",                            # 1
    "  while stack not empty:",                     # 2
    "    u ← stack.pop()",                          # 3
    "    if u visited: continue",                   # 4
    "    mark u visited",                           # 5
    "    if u = finish: return path(u)",            # 6
    "    for v in neighbours(u) not visited:",      # 7
    "      stack.push(v)",                          # 8
]

LINE_MAP: Dict[StepType, int] = {
    StepType.VISIT: 5,
    StepType.PATH:  6,
}


def dfs(grid: Grid, start: Cell, finish: Cell) -> Generator[AnimationStep, None, None]:
    work = working_copy(grid)
    stack: List[Tuple[Cell, Optional[Cell]]] = [(start, None)]

    while stack:
        cell, came_from = stack.pop()
        node = work[cell]
        if node.is_visited:
            continue
        node.is_visited = True
        node.previous   = came_from
        yield AnimationStep.visit(*cell)

        if cell == finish:
            yield from path_steps(trace_back(work, finish))
            return

        for nbr in work.open_neighbours(*cell):
            if not nbr.is_visited:
                stack.append((nbr.cell, cell))
