"""
prims_maze.py — Randomised Prim's Maze
=======================================
Grow a spanning tree over the room lattice from a random room: keep a
frontier of (wall-between, room) links and repeatedly open a random one
whose room is not yet in the tree.
"""

import random
from typing import Dict, Generator, List, Optional, Set, Tuple

from model.grid import Grid, Cell
from algorithms.step import AnimationStep, StepType
from algorithms.maze.carving import rooms, room_neighbours, between, attach_endpoints, walls_outside


PSEUDOCODE: List[str] = [
    "procedure primsMaze(grid)",                    # 0
    "  pick a random room; add it to the maze",     # 1
    "  frontier ← links from that room",            # 2
    "  while frontier not empty:",                  # 3
    "    remove a random link (wall, room)",        # 4
    "    if room not in maze: open wall and room",  # 5
    "      add room's links to frontier",           # 6
    "  wall every cell not opened",                 # 7
]

LINE_MAP: Dict[StepType, int] = {
    StepType.WALL: 7,
}


def prims_maze(
    grid: Grid,
    start: Cell,
    finish: Cell,
    rng: Optional[random.Random] = None,
) -> Generator[AnimationStep, None, None]:
    rng  = rng or random.Random()
    seed = rng.choice(rooms(grid))
    passages: Set[Cell] = {seed}
    frontier: List[Tuple[Cell, Cell]] = [(between(seed, n), n) for n in room_neighbours(grid, seed)]

    while frontier:
        k = rng.randrange(len(frontier))
        frontier[k], frontier[-1] = frontier[-1], frontier[k]
        wall, room = frontier.pop()
        if room in passages:
            continue
        passages.add(wall)
        passages.add(room)
        for nxt in room_neighbours(grid, room):
            if nxt not in passages:
                frontier.append((between(room, nxt), nxt))

    attach_endpoints(grid, passages)
    yield from walls_outside(grid, passages)
