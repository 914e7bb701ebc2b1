import random

import pytest

from algorithms import AlgorithmType
from engine.state import VisualizerState
from engine.recorder import Recorder, RunMetrics, compare
from engine.traversal import TraversalPlayer
from model.grid import Grid


# ---------------------------------------------------------------------------
# Traversal player
# ---------------------------------------------------------------------------
@pytest.fixture
def bst_state(state):
    state.set_algorithm(AlgorithmType.BST)
    for v in [50, 30, 70, 20, 40]:
        state.tree_insert(v)
    return state


@pytest.mark.parametrize("kind,expected", [
    ("inorder", "20 -> 30 -> 40 -> 50 -> 70"),
    ("preorder", "50 -> 30 -> 20 -> 40 -> 70"),
    ("postorder", "20 -> 40 -> 30 -> 70 -> 50"),
])
def test_traversal_builds_result_string(bst_state, kind, expected):
    player = TraversalPlayer(bst_state)
    assert player.start(kind)
    assert bst_state.is_playing
    while player.advance():
        pass

    assert bst_state.traversal_result == expected
    assert bst_state.active_node_id is None
    assert len(bst_state.visited_node_ids) == 5
    assert not bst_state.is_playing


def test_traversal_first_node_active_immediately(bst_state):
    player = TraversalPlayer(bst_state)
    player.start("preorder")
    assert bst_state.active_node_id == bst_state.tree_root.id
    assert bst_state.traversal_result == "50"
    assert bst_state.visited_node_ids == []


def test_traversal_tick_honours_delay(bst_state):
    now = [0.0]
    player = TraversalPlayer(bst_state, clock=lambda: now[0], delay_ms=600)
    player.start("inorder")

    now[0] = 0.5
    assert not player.tick()
    now[0] = 0.7
    assert player.tick()
    assert len(bst_state.visited_node_ids) == 1


def test_traversal_run_uses_injected_sleep(bst_state):
    sleeps = []
    player = TraversalPlayer(bst_state)
    player.start("postorder")
    player.run(sleep=sleeps.append)
    assert len(sleeps) == 5
    assert not player.is_active


def test_traversal_stop_releases_state(bst_state):
    player = TraversalPlayer(bst_state)
    player.start("inorder")
    player.advance()

    assert player.stop()
    assert not player.is_active
    assert not bst_state.is_playing
    assert bst_state.active_node_id is None
    assert bst_state.visited_node_ids == []
    assert not player.advance()
    assert not player.stop()

    assert player.start("preorder")


def test_traversal_refuses_bad_requests(bst_state):
    assert not TraversalPlayer(bst_state).start("levelorder")

    empty = VisualizerState(AlgorithmType.AVL, rng=random.Random(0))
    assert not TraversalPlayer(empty).start("inorder")

    bst_state.is_playing = True
    assert not TraversalPlayer(bst_state).start("inorder")


# ---------------------------------------------------------------------------
# Recorder & comparison
# ---------------------------------------------------------------------------
def test_recorder_counts_step_types():
    rec = Recorder()
    metrics = rec.record(AlgorithmType.BUBBLE_SORT, [5, 1, 4, 2])

    assert metrics.algo_key == "BUBBLE_SORT"
    assert metrics.total_steps == 10
    assert metrics.compares == 6
    assert metrics.swaps == 4
    assert metrics.overwrites == 0
    assert not metrics.path_found
    assert metrics.memory_bytes > 0


def test_recorder_path_metrics(walled_grid, bfs_distance):
    rec = Recorder()
    metrics = rec.record(AlgorithmType.BFS, grid=walled_grid)
    start, finish = walled_grid.endpoints()

    assert metrics.path_found
    assert metrics.path_length == bfs_distance(walled_grid, start, finish) + 1
    assert metrics.visits > 0


def test_recorder_unknown_algorithm():
    with pytest.raises(ValueError):
        Recorder().record("NOT_REAL")


def test_recorder_export():
    rec = Recorder()
    rec.record(AlgorithmType.INSERTION_SORT, [2, 1])
    data = rec.export()

    assert data["algo_key"] == "INSERTION_SORT"
    assert data["metrics"]["total_steps"] == len(data["steps"])
    assert data["steps"][0] == {"type": "compare", "indices": [0, 1]}


def test_compare_picks_lower_counts():
    data = list(range(20, 0, -1))
    left, right = Recorder(), Recorder()
    left.record(AlgorithmType.BUBBLE_SORT, data)
    right.record(AlgorithmType.MERGE_SORT, data)
    result = compare(left, right)

    assert result.winner_compares == "Merge Sort"
    assert result.winner_visits == "tie"
    assert result.to_dict()["left"]["algo_label"] == "Bubble Sort"


def test_compare_path_beats_no_path():
    found = RunMetrics(algo_label="A", path_found=True, path_length=12)
    missing = RunMetrics(algo_label="B", path_found=False, path_length=0)
    left, right = Recorder(), Recorder()
    left.metrics, right.metrics = found, missing

    assert compare(left, right).winner_path == "A"
    assert compare(right, left).winner_path == "A"


def test_compare_same_seed_same_input():
    """Randomized algorithms see identical inputs when given equal seeds."""
    grid = Grid()
    left, right = Recorder(), Recorder()
    left.record(AlgorithmType.PRIMS_MAZE, grid=grid, rng=random.Random(8))
    right.record(AlgorithmType.PRIMS_MAZE, grid=grid, rng=random.Random(8))
    assert left.steps == right.steps
    assert compare(left, right).winner_steps == "tie"
