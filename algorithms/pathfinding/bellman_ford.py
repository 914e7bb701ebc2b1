"""
bellman_ford.py — Bellman-Ford on the grid
===========================================
Repeated relaxation of every edge (each open cell to each open
neighbour, weight 1) in row-major order, for at most |V| − 1 passes.
A pass that relaxes nothing ends the run early.

Grid edges are non-negative, so there is no negative-cycle phase; the
interest here is watching distance information creep outwards pass by
pass, fast along the sweep direction and one cell per pass against it.

Yields:
    visit   – a cell the first time its distance becomes finite
    compare – (r, c, nr, nc) for every relaxation attempt
    path    – predecessor chain, start → finish, if finish was reached
"""

from typing import Dict, Generator, List, Optional

from model.grid import Grid, Cell
from algorithms.step import AnimationStep, StepType
from algorithms.pathfinding.common import working_copy, trace_back, path_steps


PSEUDOCODE: List[str] = [
    "procedure bellmanFord(grid, start, finish)",   # 0
    "  dist[start] ← 0",                            # 1
    "  repeat |V| − 1 times:",                      # 2
    "    changed ← false",                          # 3
    "    for each edge (u, v):",                    # 4
    "      if dist[u] + 1 < dist[v]:",              # 5
    "        dist[v] ← dist[u] + 1; prev[v] ← u",   # 6
    "        changed ← true",                       # 7
    "    if not changed: break",                    # 8
    "  return path(finish)",                        # 9
]

LINE_MAP: Dict[StepType, int] = {
    StepType.COMPARE: 5,
    StepType.VISIT:   6,
    StepType.PATH:    9,
}


def bellman_ford(grid: Grid, start: Cell, finish: Cell) -> Generator[AnimationStep, None, None]:
    work  = working_copy(grid)
    cells = [n.cell for n in work if not n.is_wall]

    work[start].distance   = 0
    work[start].is_visited = True
    yield AnimationStep.visit(*start)

    for _ in range(max(len(cells) - 1, 0)):
        changed = False
        for cell in cells:
            node = work[cell]
            if node.distance == float("inf"):
                continue
            for nbr in work.open_neighbours(*cell):
                yield AnimationStep.compare(cell[0], cell[1], nbr.row, nbr.col)
                if node.distance + 1 < nbr.distance:
                    if not nbr.is_visited:
                        nbr.is_visited = True
                        yield AnimationStep.visit(nbr.row, nbr.col)
                    nbr.distance = node.distance + 1
                    nbr.previous = cell
                    changed = True
        if not changed:
            break

    if work[finish].is_visited:
        yield from path_steps(trace_back(work, finish))
