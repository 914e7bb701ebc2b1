"""
connected_components.py — Connected Components on the grid
===========================================================
BFS flood from every open cell not yet labelled.  Component k's size is
written to aux[k] when its flood finishes.
"""

from collections import deque
from typing import Dict, Generator, List

from model.grid import Grid
from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure components(G)",                      # 0
    "  k ← 0",                                      # 1
    "  for each unlabelled open cell s:",           # 2
    "    flood from s, labelling cells k",          # 3
    "    size[k] ← cells labelled; k ← k + 1",      # 4
]

LINE_MAP: Dict[StepType, int] = {
    StepType.VISIT:      3,
    StepType.UPDATE_AUX: 4,
}


def connected_components(grid: Grid) -> Generator[AnimationStep, None, None]:
    seen = set()
    component = 0
    for node in grid:
        if node.is_wall or node.cell in seen:
            continue
        seen.add(node.cell)
        queue = deque([node.cell])
        size = 0
        while queue:
            cell = queue.popleft()
            size += 1
            yield AnimationStep.visit(*cell)
            for nbr in grid.open_neighbours(*cell):
                if nbr.cell not in seen:
                    seen.add(nbr.cell)
                    queue.append(nbr.cell)
        yield AnimationStep.update_aux(component, size)
        component += 1
