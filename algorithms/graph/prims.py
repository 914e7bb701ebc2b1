"""
prims.py — Prim's MST on the grid
==================================
Each grid edge gets a random weight for this run; the tree grows from
the start cell (or the first open cell) by always taking the lightest
edge that leaves the tree.
"""

import heapq
import itertools
import random
from typing import Dict, Generator, List, Optional, Set

from model.grid import Grid, Cell
from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure prim(G, root)",                      # 0
    "  tree ← {root}; pq ← edges leaving root",     # 1
    "  while pq not empty:",                        # 2
    "    (w, u, v) ← pq.popMin()",                  # 3
    "    if v in tree: continue",                   # 4
    "    tree.add(v)",                              # 5
    "    push edges leaving v",                     # 6
]

LINE_MAP: Dict[StepType, int] = {
    StepType.COMPARE: 3,
    StepType.VISIT:   5,
    StepType.PATH:    5,
}


def prims(grid: Grid, rng: Optional[random.Random] = None) -> Generator[AnimationStep, None, None]:
    rng = rng or random.Random()
    open_cells = [n.cell for n in grid if not n.is_wall]
    if not open_cells:
        return
    starts = grid.starts()
    root   = starts[0] if starts else open_cells[0]

    weights: Dict[frozenset, float] = {}
    counter = itertools.count()
    tree: Set[Cell] = set()
    pq: list = []

    def weight(a: Cell, b: Cell) -> float:
        key = frozenset((a, b))
        if key not in weights:
            weights[key] = rng.random()
        return weights[key]

    def grow(cell: Cell) -> Generator[AnimationStep, None, None]:
        tree.add(cell)
        yield AnimationStep.visit(*cell)
        yield AnimationStep.path(*cell)
        for nbr in grid.open_neighbours(*cell):
            if nbr.cell not in tree:
                heapq.heappush(pq, (weight(cell, nbr.cell), next(counter), nbr.cell))

    yield from grow(root)
    while pq:
        _, _, cell = heapq.heappop(pq)
        yield AnimationStep.compare(*cell)
        if cell in tree:
            continue
        yield from grow(cell)
