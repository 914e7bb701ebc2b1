"""
dijkstra.py — Dijkstra's Algorithm
===================================
Uniform-cost search on the 4-connected grid (every move costs 1).

A binary heap keyed by (distance, insertion counter) gives a
deterministic settle order; stale heap entries are skipped on pop
instead of being decreased in place.

Yields:
    visit  – once per cell, when it is settled (popped with its final distance)
    path   – one per cell on the shortest path, start → finish
"""

import heapq
import itertools
from typing import Dict, Generator, List

from model.grid import Grid, Cell
from algorithms.step import AnimationStep, StepType
from algorithms.pathfinding.common import working_copy, trace_back, path_steps


PSEUDOCODE: List[str] = [
    "procedure dijkstra(grid, start, finish)",      # 0
    "  dist[start] ← 0; pq ← [(0, start)]",         # 1
    "  while pq not empty:",                        # 2
    "    (d, u) ← pq.popMin()",                     # 3
    "    if u visited: continue",                   # 4
    "    mark u visited",                           # 5
    "    if u = finish: return path(u)",            # 6
    "    for v in neighbours(u):",                  # 7
    "      if d + 1 < dist[v]:",                    # 8
    "        dist[v] ← d + 1; prev[v] ← u",         # 9
    "        pq.push((dist[v], v))",                # 10
]

LINE_MAP: Dict[StepType, int] = {
    StepType.VISIT: 5,
    StepType.PATH:  6,
}


def dijkstra(grid: Grid, start: Cell, finish: Cell) -> Generator[AnimationStep, None, None]:
    work    = working_copy(grid)
    counter = itertools.count()
    work[start].distance = 0
    pq = [(0, next(counter), start)]

    while pq:
        dist, _, cell = heapq.heappop(pq)
        node = work[cell]
        if node.is_visited or dist > node.distance:
            continue
        node.is_visited = True
        yield AnimationStep.visit(*cell)

        if cell == finish:
            yield from path_steps(trace_back(work, finish))
            return

        for nbr in work.open_neighbours(*cell):
            if nbr.is_visited:
                continue
            alt = dist + 1
            if alt < nbr.distance:
                nbr.distance = alt
                nbr.previous = cell
                heapq.heappush(pq, (alt, next(counter), nbr.cell))
