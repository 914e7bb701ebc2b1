"""
carving.py — Room-Lattice Helpers
==================================
Prim's and binary-tree mazes carve on a lattice: cells with even row AND
even column are rooms, everything else starts as wall.  A spanning tree
over the rooms, plus the wall cells between linked rooms, is the set of
passages; every other cell becomes a wall.
"""

from typing import Generator, Iterable, List, Set

from model.grid import Grid, Cell
from algorithms.step import AnimationStep


def rooms(grid: Grid) -> List[Cell]:
    return [(r, c) for r in range(0, grid.rows, 2) for c in range(0, grid.cols, 2)]


def room_neighbours(grid: Grid, room: Cell) -> List[Cell]:
    r, c = room
    out = []
    for dr, dc in ((-2, 0), (2, 0), (0, -2), (0, 2)):
        if grid.in_bounds(r + dr, c + dc):
            out.append((r + dr, c + dc))
    return out


def between(a: Cell, b: Cell) -> Cell:
    return ((a[0] + b[0]) // 2, (a[1] + b[1]) // 2)


def attach_endpoints(grid: Grid, passages: Set[Cell]) -> None:
    """
    Start / finish never become walls, so make sure that when one sits off
    the room lattice it is still joined to the maze.  A cell on an odd
    row or odd column already borders a room; an odd/odd cell gets the
    cell above it opened too, which borders room (r − 1, c − 1).
    """
    for node in grid:
        if not (node.is_start or node.is_finish):
            continue
        r, c = node.cell
        passages.add((r, c))
        if r % 2 == 1 and c % 2 == 1:
            passages.add((r - 1, c))


def wall_steps(grid: Grid, cells: Iterable[Cell]) -> Generator[AnimationStep, None, None]:
    """One `wall` per cell, skipping endpoints and cells that already are walls."""
    for cell in cells:
        node = grid[cell]
        if node.is_start or node.is_finish or node.is_wall:
            continue
        yield AnimationStep.wall(*cell)


def walls_outside(grid: Grid, passages: Set[Cell]) -> Generator[AnimationStep, None, None]:
    yield from wall_steps(grid, (n.cell for n in grid if n.cell not in passages))
