import random
from collections import deque

import pytest

from algorithms import Family, algorithms_by_family
from algorithms.dispatcher import generate_steps
from algorithms.step import StepType
from model.grid import Grid


MAZES = [info.key for info in algorithms_by_family(Family.MAZE)]


def open_cells_connected(grid):
    cells = [n.cell for n in grid if not n.is_wall]
    seen = {cells[0]}
    queue = deque([cells[0]])
    while queue:
        cell = queue.popleft()
        for nbr in grid.open_neighbours(*cell):
            if nbr.cell not in seen:
                seen.add(nbr.cell)
                queue.append(nbr.cell)
    return len(seen) == len(cells)


@pytest.mark.parametrize("algorithm", MAZES, ids=lambda a: a.value)
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_maze_only_emits_walls(algorithm, seed):
    steps = generate_steps(algorithm, [], grid=Grid(), rng=random.Random(seed))
    assert steps
    assert {s.type for s in steps} == {StepType.WALL}


@pytest.mark.parametrize("algorithm", MAZES, ids=lambda a: a.value)
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_maze_never_walls_endpoints(algorithm, seed):
    grid = Grid()
    start, finish = grid.endpoints()
    steps = generate_steps(algorithm, [], grid=grid, rng=random.Random(seed))
    walled = {(s.indices[0], s.indices[1]) for s in steps}
    assert start not in walled
    assert finish not in walled


@pytest.mark.parametrize("algorithm", MAZES, ids=lambda a: a.value)
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_maze_keeps_open_cells_connected(algorithm, seed, replay_onto, state):
    """Every open cell, the endpoints included, is reachable from every other."""
    state.grid = Grid()
    replay_onto(state, generate_steps(algorithm, [], grid=state.grid, rng=random.Random(seed)))

    assert open_cells_connected(state.grid)
    start, finish = state.grid.endpoints()
    assert not state.grid[start].is_wall
    assert not state.grid[finish].is_wall


@pytest.mark.parametrize("algorithm", MAZES, ids=lambda a: a.value)
def test_same_seed_same_maze(algorithm):
    first = generate_steps(algorithm, [], grid=Grid(), rng=random.Random(42))
    second = generate_steps(algorithm, [], grid=Grid(), rng=random.Random(42))
    assert first == second


@pytest.mark.parametrize("algorithm", MAZES, ids=lambda a: a.value)
def test_maze_does_not_mutate_input_grid(algorithm):
    grid = Grid()
    before = grid.to_dict()
    generate_steps(algorithm, [], grid=grid, rng=random.Random(5))
    assert grid.to_dict() == before
