"""
binary_tree_maze.py — Binary-Tree Maze
=======================================
Every room links to its north or east neighbour, chosen at random
where both exist.  Each room then has a unique route to the north-east
corner room, so the result is a spanning tree.  Typical artefacts: an
open top corridor and an open right-hand column.
"""

import random
from typing import Dict, Generator, List, Optional, Set

from model.grid import Grid, Cell
from algorithms.step import AnimationStep, StepType
from algorithms.maze.carving import rooms, between, attach_endpoints, walls_outside


PSEUDOCODE: List[str] = [
    "procedure binaryTreeMaze(grid)",               # 0
    "  for each room:",                             # 1
    "    options ← {north, east} inside the grid",  # 2
    "    open the wall toward a random option",     # 3
    "  wall every cell not opened",                 # 4
]

LINE_MAP: Dict[StepType, int] = {
    StepType.WALL: 4,
}


def binary_tree_maze(
    grid: Grid,
    start: Cell,
    finish: Cell,
    rng: Optional[random.Random] = None,
) -> Generator[AnimationStep, None, None]:
    rng = rng or random.Random()
    passages: Set[Cell] = set()
    for room in rooms(grid):
        passages.add(room)
        r, c = room
        options = []
        if r - 2 >= 0:
            options.append((r - 2, c))
        if c + 2 < grid.cols:
            options.append((r, c + 2))
        if options:
            passages.add(between(room, rng.choice(options)))

    attach_endpoints(grid, passages)
    yield from walls_outside(grid, passages)
