"""
kruskals.py — Kruskal's MST on the grid
========================================
Grid-as-graph: open cells are vertices, each pair of orthogonally
adjacent open cells is an edge.  There are no user weights, so a random
shuffle of the edge list stands in for sorting by random weights.
A union-find with path halving and union by size rejects cycle edges.
"""

import random
from typing import Dict, Generator, List, Optional, Tuple

from model.grid import Grid, Cell
from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure kruskal(G)",                         # 0
    "  sort edges by weight",                       # 1
    "  for (u, v) in edges:",                       # 2
    "    if find(u) ≠ find(v):",                    # 3
    "      union(u, v)",                            # 4
    "      add (u, v) to the tree",                 # 5
]

LINE_MAP: Dict[StepType, int] = {
    StepType.COMPARE: 3,
    StepType.VISIT:   4,
    StepType.PATH:    5,
}


class _DisjointSet:
    def __init__(self):
        self.parent: Dict[Cell, Cell] = {}
        self.size:   Dict[Cell, int]  = {}

    def find(self, x: Cell) -> Cell:
        self.parent.setdefault(x, x)
        self.size.setdefault(x, 1)
        while self.parent[x] != x:
            self.parent[x] = self.parent[self.parent[x]]
            x = self.parent[x]
        return x

    def union(self, a: Cell, b: Cell) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.size[ra] < self.size[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.size[ra] += self.size[rb]
        return True


def grid_edges(grid: Grid) -> List[Tuple[Cell, Cell]]:
    """Every open-open adjacency once (right and down neighbours)."""
    edges = []
    for node in grid:
        if node.is_wall:
            continue
        r, c = node.cell
        for nr, nc in ((r, c + 1), (r + 1, c)):
            if grid.is_open(nr, nc):
                edges.append(((r, c), (nr, nc)))
    return edges


def kruskals(grid: Grid, rng: Optional[random.Random] = None) -> Generator[AnimationStep, None, None]:
    rng   = rng or random.Random()
    edges = grid_edges(grid)
    rng.shuffle(edges)
    dsu = _DisjointSet()

    for u, v in edges:
        yield AnimationStep.compare(*u)
        yield AnimationStep.compare(*v)
        if dsu.union(u, v):
            yield AnimationStep.visit(*u)
            yield AnimationStep.visit(*v)
            yield AnimationStep.path(*u)
            yield AnimationStep.path(*v)
