import pytest

from algorithms import (AlgorithmType, Family, Interaction, REGISTRY, Requirement, algorithms_by_family,
                        get_algorithm, list_algorithms, parse_algorithm)
from algorithms.describe import describe
from algorithms.dispatcher import generate_steps, is_ui_driven, needs_grid
from algorithms.pseudocode import DEFAULT_LINE, line_for, lines_for
from algorithms.step import MATCH, MISMATCH, AnimationStep, StepType
from model.grid import Grid


UI_DRIVEN = [
    AlgorithmType.SCC, AlgorithmType.TOPOLOGICAL_SORT, AlgorithmType.STACK, AlgorithmType.QUEUE,
    AlgorithmType.LINKED_LIST, AlgorithmType.BST, AlgorithmType.AVL, AlgorithmType.MIN_HEAP,
    AlgorithmType.MAX_HEAP,
]


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------
def test_every_algorithm_has_a_card():
    assert set(REGISTRY) == set(AlgorithmType)
    assert len(list_algorithms()) == len(AlgorithmType)


@pytest.mark.parametrize("algorithm", list(AlgorithmType), ids=lambda a: a.value)
def test_card_is_complete(algorithm):
    info = REGISTRY[algorithm]
    assert info.key is algorithm
    assert info.label
    assert info.pseudocode
    for line in info.line_map.values():
        assert 0 <= line < len(info.pseudocode)
    if info.interaction is Interaction.STEP_LOG:
        assert callable(info.fn)
    else:
        assert info.operations


def test_ui_driven_set():
    assert {a for a in AlgorithmType if is_ui_driven(a)} == set(UI_DRIVEN)


def test_parse_algorithm_accepts_strings():
    assert parse_algorithm("bfs") is AlgorithmType.BFS
    assert parse_algorithm(AlgorithmType.LCS) is AlgorithmType.LCS
    assert parse_algorithm("NOT_AN_ALGORITHM") is None
    assert get_algorithm("nope") is None


def test_families_partition_registry():
    total = sum(len(algorithms_by_family(f)) for f in Family)
    assert total == len(REGISTRY)


def test_card_to_dict_is_camel_case():
    data = get_algorithm(AlgorithmType.BFS).to_dict()
    assert data["key"] == "BFS"
    assert data["family"] == "pathfinding"
    assert "complexityTime" in data
    assert data["pseudocode"]


def test_needs_grid():
    assert needs_grid(AlgorithmType.DIJKSTRA)
    assert needs_grid(AlgorithmType.KRUSKALS)
    assert not needs_grid(AlgorithmType.BUBBLE_SORT)
    assert get_algorithm(AlgorithmType.KRUSKALS).requirement is Requirement.GRID


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("algorithm", UI_DRIVEN, ids=lambda a: a.value)
def test_ui_driven_algorithms_generate_nothing(algorithm):
    assert generate_steps(algorithm, [3, 1, 2], grid=Grid()) == []


def test_unknown_algorithm_generates_nothing():
    assert generate_steps("DOES_NOT_EXIST", [1, 2]) == []


def test_grid_algorithm_without_grid_generates_nothing():
    assert generate_steps(AlgorithmType.BFS, []) == []


def test_grid_without_endpoints_generates_nothing():
    grid = Grid(5, 5, start=None, finish=None)
    assert generate_steps(AlgorithmType.ASTAR, [], grid=grid) == []


def test_string_key_dispatch():
    assert generate_steps("bubble_sort", [2, 1]) == [AnimationStep.compare(0, 1), AnimationStep.swap(0, 1)]


def test_dispatch_copies_the_array():
    data = [3, 2, 1]
    generate_steps(AlgorithmType.SELECTION_SORT, data)
    assert data == [3, 2, 1]


# ---------------------------------------------------------------------------
# Pseudocode & log text
# ---------------------------------------------------------------------------
def test_line_for_known_step():
    assert line_for(AlgorithmType.BUBBLE_SORT, AnimationStep.swap(0, 1)) == 5
    assert lines_for(AlgorithmType.BUBBLE_SORT)[5].strip().startswith("swap")


def test_line_for_is_total():
    assert line_for(AlgorithmType.BUBBLE_SORT, AnimationStep.wall(0, 0)) == DEFAULT_LINE
    assert line_for("nope", AnimationStep.swap(0, 1)) == DEFAULT_LINE
    assert line_for(AlgorithmType.BFS, None) == DEFAULT_LINE
    assert lines_for("nope") == []


@pytest.mark.parametrize("step,text", [
    (AnimationStep.compare(0, 1), "Comparing elements at indices [0, 1]"),
    (AnimationStep.swap(2, 3), "Swapping elements at indices [2, 3]"),
    (AnimationStep.overwrite(4, 17), "Overwriting index 4 with value 17"),
    (AnimationStep.overwrite(4), "Overwriting index 4"),
    (AnimationStep.visit(3, 5), "Visiting node at [3, 5]"),
    (AnimationStep.path(3, 6), "Marking path at [3, 6]"),
    (AnimationStep.wall(1, 1), "Placing wall at [1, 1]"),
    (AnimationStep.found(7), "Found target at [7]"),
    (AnimationStep.target(7), "Target set at [7]"),
    (AnimationStep.replace([1, 2, 3]), "Replacing array with 3 values"),
    (AnimationStep.move_to_bucket(0, 42, 4), "Moving value 42 to bucket 4"),
    (AnimationStep.restore(1, 42, 4), "Restoring value 42 from bucket to index 1"),
    (AnimationStep.update_table(2, 3, 9), "Updating DP table at [2, 3] with 9"),
    (AnimationStep.update_aux(5, 2), "Updating auxiliary array index 5 with 2"),
    (AnimationStep.highlight(), "Clearing highlight"),
    (AnimationStep.highlight(1, 2), "Highlighting indices [1, 2]"),
    (AnimationStep.highlight(3, value=MATCH), "Character at 3 matches"),
    (AnimationStep.highlight(3, value=MISMATCH), "Character at 3 does not match"),
])
def test_describe(step, text):
    assert describe(step) == text


def test_describe_uses_family_wording():
    assert describe(AnimationStep.compare(4, 1), AlgorithmType.KMP) == "Comparing text[4] with pattern[1]"
    assert describe(AnimationStep.compare(2, 3), AlgorithmType.KNAPSACK) == "Evaluating DP cell [2, 3]"


def test_step_wire_format_roundtrip():
    step = AnimationStep.move_to_bucket(3, 40, 2)
    data = step.to_dict()
    assert data == {"type": "moveToBucket", "indices": [3], "value": 40, "bucketIndex": 2}
    assert AnimationStep.from_dict(data) == step
    assert StepType("updateTable") is StepType.UPDATE_TABLE
