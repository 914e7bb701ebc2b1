"""
floyd_warshall.py — Floyd-Warshall on the grid
===============================================
All-pairs shortest paths over the open cells, with a next-hop matrix
for path recovery.

The V × V matrices are numpy arrays and each pivot k updates them in
one vectorised pass; a 20 × 50 grid has up to a thousand open cells and
V³ scalar Python updates would take minutes.

Only part of the matrix work is logged, since V² events per pivot would
be unwatchable:
    visit   – the pivot cell k, once per pivot
    compare – (k_r, k_c, j_r, j_c) whenever routing via k improves
              dist[start][j]
    path    – next-hop walk start → finish, if finish is reachable
"""

from typing import Dict, Generator, List

import numpy as np

from model.grid import Grid, Cell
from algorithms.step import AnimationStep, StepType
from algorithms.pathfinding.common import working_copy, path_steps


PSEUDOCODE: List[str] = [
    "procedure floydWarshall(grid)",                # 0
    "  dist[i][j] ← 1 for adjacent, 0 on diagonal, ∞ otherwise",  # 1
    "  for k in V:",                                # 2
    "    for i in V:",                              # 3
    "      for j in V:",                            # 4
    "        if dist[i][k] + dist[k][j] < dist[i][j]:",  # 5
    "          dist[i][j] ← dist[i][k] + dist[k][j]",    # 6
    "          next[i][j] ← next[i][k]",            # 7
    "  return path via next[start][·]",             # 8
]

LINE_MAP: Dict[StepType, int] = {
    StepType.VISIT:   2,
    StepType.COMPARE: 6,
    StepType.PATH:    8,
}


def floyd_warshall(grid: Grid, start: Cell, finish: Cell) -> Generator[AnimationStep, None, None]:
    work  = working_copy(grid)
    cells = [n.cell for n in work if not n.is_wall]
    index = {cell: i for i, cell in enumerate(cells)}
    size  = len(cells)

    dist = np.full((size, size), np.inf)
    nxt  = np.full((size, size), -1, dtype=np.int64)
    np.fill_diagonal(dist, 0.0)
    nxt[np.arange(size), np.arange(size)] = np.arange(size)
    for cell, i in index.items():
        for nbr in work.open_neighbours(*cell):
            j = index[nbr.cell]
            dist[i, j] = 1.0
            nxt[i, j]  = j

    s = index[start]
    for k in range(size):
        yield AnimationStep.visit(*cells[k])
        candidate = dist[:, k, None] + dist[None, k, :]
        improved  = candidate < dist
        for j in np.flatnonzero(improved[s]):
            yield AnimationStep.compare(cells[k][0], cells[k][1], cells[j][0], cells[j][1])
        via_k = np.broadcast_to(nxt[:, k, None].copy(), nxt.shape)
        np.copyto(dist, candidate, where=improved)
        np.copyto(nxt, via_k, where=improved)

    f = index[finish]
    if not np.isfinite(dist[s, f]):
        return
    route = [s]
    while route[-1] != f:
        route.append(int(nxt[route[-1], f]))
    yield from path_steps([cells[i] for i in route])
