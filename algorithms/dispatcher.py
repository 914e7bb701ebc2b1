"""
dispatcher.py — Step-Generation Dispatcher
============================================
One entry point from "which algorithm, on what input" to a finished step
log:

    steps = generate_steps(AlgorithmType.BFS, array, grid=grid)

The registry card decides what the algorithm needs.  Missing or
malformed input never raises: it is logged and produces an empty list,
which the caller renders as "nothing to animate".  UI-driven structures
(stack, queue, trees, heaps, SCC, topological sort) also get an empty
list; they are driven through their `operations` instead.

Generation always completes before the first step is replayed.
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from algorithms import AlgorithmType, Interaction, Requirement, get_algorithm, parse_algorithm
from algorithms.step import AnimationStep
from model.grid import Grid

logger = logging.getLogger(__name__)


def generate_steps(
    algorithm,
    array: Sequence[int],
    grid: Optional[Grid] = None,
    strings: Optional[Tuple[str, str]] = None,
    rng: Optional[random.Random] = None,
) -> List[AnimationStep]:
    """
    Args:
        algorithm : AlgorithmType or its string key.
        array     : Current bar array (or Sudoku board).
        grid      : Current grid, for grid families.
        strings   : (text, pattern) for KMP / Rabin-Karp, (first, second) for LCS.
        rng       : Random source for randomized algorithms.
    """
    algo = parse_algorithm(algorithm)
    if algo is None:
        logger.warning("Unknown algorithm %r; nothing to generate", algorithm)
        return []

    info = get_algorithm(algo)
    if info.interaction is Interaction.UI_DRIVEN or info.fn is None:
        logger.info("%s is UI-driven; no step log is generated", algo.value)
        return []

    kwargs = {"rng": rng} if info.randomized else {}
    req = info.requirement

    if req is Requirement.ARRAY:
        gen = info.fn(list(array), **kwargs)

    elif req in (Requirement.GRID_ENDPOINTS, Requirement.GRID):
        if grid is None:
            logger.warning("%s needs a grid; none supplied", algo.value)
            return []
        if req is Requirement.GRID:
            gen = info.fn(grid, **kwargs)
        else:
            ends = grid.endpoints()
            if ends is None:
                logger.warning("%s needs exactly one start and one finish", algo.value)
                return []
            start, finish = ends
            gen = info.fn(grid, start, finish, **kwargs)

    elif req is Requirement.STRINGS:
        if not strings or len(strings) != 2 or not strings[0] or not strings[1]:
            logger.warning("%s needs two non-empty strings, got %r", algo.value, strings)
            return []
        gen = info.fn(strings[0], strings[1])

    elif req is Requirement.PRESET:
        gen = info.fn()

    else:
        logger.warning("%s has no generator for requirement %s", algo.value, req.value)
        return []

    steps = list(gen)
    logger.debug("%s generated %d steps", algo.value, len(steps))
    return steps


def needs_grid(algorithm) -> bool:
    info = get_algorithm(algorithm)
    return info is not None and info.requirement in (Requirement.GRID_ENDPOINTS, Requirement.GRID)


def is_ui_driven(algorithm) -> bool:
    info = get_algorithm(algorithm)
    return info is not None and info.interaction is Interaction.UI_DRIVEN


__all__ = ["generate_steps", "needs_grid", "is_ui_driven", "AlgorithmType"]
