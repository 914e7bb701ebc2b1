"""
bidirectional.py — Bidirectional BFS
=====================================
Two BFS frontiers, one from start and one from finish, expanded one
dequeue at a time in alternation.  The search stops the moment a
dequeued cell has already been seen by the OTHER direction.

Each direction keeps its own parent map, so the meeting cell can be
stitched into one full start → finish path:

    start … meeting   (forward parents, reversed)
    meeting … finish  (backward parents, in order)

Yields:
    visit  – each dequeued cell, forward and backward interleaved
    path   – full reconstructed path, start → finish
    found  – the meeting cell
"""

from collections import deque
from typing import Deque, Dict, Generator, List, Optional

from model.grid import Grid, Cell
from algorithms.step import AnimationStep, StepType
from algorithms.pathfinding.common import working_copy, walk_parents, path_steps


PSEUDOCODE: List[str] = [
    "procedure bidirectionalBFS(grid, start, finish)",  # 0
    "  qF ← [start];  parentF ← {start: ∅}",        # 1
    "  qB ← [finish]; parentB ← {finish: ∅}",       # 2
    "  while qF and qB not empty:",                 # 3
    "    u ← qF.dequeue()",                         # 4
    "    if u in parentB: return join(u)",          # 5
    "    expand u into qF / parentF",               # 6
    "    w ← qB.dequeue()",                         # 7
    "    if w in parentF: return join(w)",          # 8
    "    expand w into qB / parentB",               # 9
    "  return NOT FOUND",                           # 10
]

LINE_MAP: Dict[StepType, int] = {
    StepType.VISIT: 4,
    StepType.PATH:  5,
    StepType.FOUND: 5,
}


def bidirectional(grid: Grid, start: Cell, finish: Cell) -> Generator[AnimationStep, None, None]:
    work = working_copy(grid)
    forward:  Deque[Cell] = deque([start])
    backward: Deque[Cell] = deque([finish])
    parent_f: Dict[Cell, Optional[Cell]] = {start: None}
    parent_b: Dict[Cell, Optional[Cell]] = {finish: None}
    meeting:  Optional[Cell] = None

    while forward and backward:
        meeting = yield from _expand(work, forward, parent_f, parent_b)
        if meeting is not None:
            break
        meeting = yield from _expand(work, backward, parent_b, parent_f)
        if meeting is not None:
            break

    if meeting is None:
        return

    cells = list(reversed(walk_parents(parent_f, meeting)))
    cells += walk_parents(parent_b, meeting)[1:]
    yield from path_steps(cells)
    yield AnimationStep.found(*meeting)


def _expand(
    work: Grid,
    queue: Deque[Cell],
    own: Dict[Cell, Optional[Cell]],
    other: Dict[Cell, Optional[Cell]],
) -> Generator[AnimationStep, None, Optional[Cell]]:
    """Dequeue one cell; return it if the other side has reached it."""
    cell = queue.popleft()
    work[cell].is_visited = True
    yield AnimationStep.visit(*cell)
    if cell in other:
        return cell
    for nbr in work.open_neighbours(*cell):
        if nbr.cell not in own:
            own[nbr.cell] = cell
            queue.append(nbr.cell)
    return None
