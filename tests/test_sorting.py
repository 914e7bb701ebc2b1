import random

import pytest

from algorithms import AlgorithmType, algorithms_by_family, Family
from algorithms.dispatcher import generate_steps
from algorithms.sorting.bubble_sort import bubble_sort
from algorithms.step import AnimationStep, StepType


SORTS = [info.key for info in algorithms_by_family(Family.SORTING)]

INPUTS = {
    "empty":     [],
    "single":    [7],
    "all_equal": [4, 4, 4, 4, 4],
    "reversed":  [9, 8, 7, 6, 5, 4, 3, 2, 1],
    "sorted":    [1, 2, 3, 4, 5, 6],
    "dupes":     [5, 1, 5, 3, 1, 9, 3],
    "random":    random.Random(7).sample(range(5, 105), 30),
}


def test_every_sort_is_registered():
    """All ten sorts are in the sorting family."""
    assert len(SORTS) == 10
    assert AlgorithmType.RADIX_SORT in SORTS
    assert AlgorithmType.BUCKET_SORT in SORTS


@pytest.mark.parametrize("algorithm", SORTS, ids=lambda a: a.value)
@pytest.mark.parametrize("name", list(INPUTS))
def test_replayed_log_leaves_array_sorted(algorithm, name, bar_state, replay_onto):
    """Replaying a sort log onto the input yields the sorted permutation."""
    data = INPUTS[name]
    st = bar_state(data)
    steps = generate_steps(algorithm, data)
    replay_onto(st, steps)

    assert st.array == sorted(data)


@pytest.mark.parametrize("algorithm", SORTS, ids=lambda a: a.value)
def test_generation_does_not_touch_input(algorithm):
    data = [3, 1, 2, 5, 4]
    generate_steps(algorithm, data)
    assert data == [3, 1, 2, 5, 4]


@pytest.mark.parametrize("algorithm", SORTS, ids=lambda a: a.value)
def test_generation_is_deterministic(algorithm):
    data = INPUTS["random"]
    assert generate_steps(algorithm, data) == generate_steps(algorithm, data)


def test_bubble_sort_small_scenario():
    """[5, 1, 4, 2]: three swaps on the first pass, one on the second, a clean third pass."""
    steps = list(bubble_sort([5, 1, 4, 2]))

    assert steps == [
        AnimationStep.compare(0, 1), AnimationStep.swap(0, 1),
        AnimationStep.compare(1, 2), AnimationStep.swap(1, 2),
        AnimationStep.compare(2, 3), AnimationStep.swap(2, 3),
        AnimationStep.compare(0, 1),
        AnimationStep.compare(1, 2), AnimationStep.swap(1, 2),
        AnimationStep.compare(0, 1),
    ]


def test_bubble_sort_reversed_compare_count():
    n = 12
    steps = list(bubble_sort(list(range(n, 0, -1))))
    compares = [s for s in steps if s.type is StepType.COMPARE]
    assert len(compares) == n * (n - 1) // 2


def test_bubble_sort_stops_after_clean_pass():
    """An already-sorted input costs n - 1 comparisons and no swaps."""
    steps = list(bubble_sort([1, 2, 3, 4, 5]))
    assert [s.type for s in steps] == [StepType.COMPARE] * 4


@pytest.mark.parametrize("algorithm", [AlgorithmType.RADIX_SORT, AlgorithmType.BUCKET_SORT],
                         ids=lambda a: a.value)
def test_distribution_sort_empties_buckets(algorithm, bar_state, replay_onto):
    """Every element lifted into a bucket comes back; no slot stays hidden."""
    data = INPUTS["random"]
    st = bar_state(data)
    replay_onto(st, generate_steps(algorithm, data))

    assert all(bucket == [] for bucket in st.buckets)
    assert st.hidden_indices == set()
    assert st.array == sorted(data)


def test_radix_sort_buckets_fill_during_scatter(bar_state):
    """Mid-round, buckets hold exactly the elements lifted out of the array."""
    from engine.effects import apply_step

    data = [21, 13, 5, 40]
    st = bar_state(data)
    steps = generate_steps(AlgorithmType.RADIX_SORT, data)
    moves = [s for s in steps if s.type is StepType.MOVE_TO_BUCKET][:len(data)]
    upto = steps.index(moves[-1]) + 1
    for step in steps[:upto]:
        apply_step(st, step)

    lifted = sorted(v for bucket in st.buckets for v in bucket)
    assert lifted == sorted(data)
    assert st.hidden_indices == set(range(len(data)))


def test_counting_sort_fills_aux_with_counts():
    steps = generate_steps(AlgorithmType.COUNTING_SORT, [3, 1, 3, 2])
    aux = [s for s in steps if s.type is StepType.UPDATE_AUX]
    # counts for 1..3 are initialised first
    assert [s.indices[0] for s in aux[:3]] == [0, 1, 2]
    assert all(s.value == 0 for s in aux[:3])
