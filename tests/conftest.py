import logging
import random
from collections import deque

import pytest

from algorithms import AlgorithmType
from engine.effects import apply_step
from engine.state import VisualizerState
from model.grid import Grid


def pytest_configure(config):
    """Quiet logging for the engine while tests run."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def state(rng):
    return VisualizerState(AlgorithmType.BUBBLE_SORT, rng=rng)


@pytest.fixture
def replay_onto():
    """Apply a whole step log to a state, in order."""

    def _replay(state, steps):
        for step in steps:
            apply_step(state, step)
        return state

    return _replay


@pytest.fixture
def bar_state():
    """A state holding the given array, ready to have sort steps applied."""

    def _make(values):
        st = VisualizerState(AlgorithmType.BUBBLE_SORT, rng=random.Random(0))
        st.array = list(values)
        return st

    return _make


@pytest.fixture
def open_grid():
    return Grid.from_strings([
        "........",
        ".S......",
        "........",
        "......F.",
        "........",
    ])


@pytest.fixture
def walled_grid():
    return Grid.from_strings([
        "...#...",
        ".S.#.F.",
        "...#...",
        ".......",
    ])


@pytest.fixture
def sealed_grid():
    return Grid.from_strings([
        "...#...",
        ".S.#.F.",
        "...#...",
        "...#...",
    ])


@pytest.fixture
def bfs_distance():
    """Shortest 4-connected distance between two cells, or None."""

    def _distance(grid, start, finish):
        seen = {start: 0}
        queue = deque([start])
        while queue:
            cell = queue.popleft()
            if cell == finish:
                return seen[cell]
            for nbr in grid.open_neighbours(*cell):
                if nbr.cell not in seen:
                    seen[nbr.cell] = seen[cell] + 1
                    queue.append(nbr.cell)
        return None

    return _distance
