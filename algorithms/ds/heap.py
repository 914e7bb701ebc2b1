"""
heap.py — Binary Heap (min or max)
===================================
Array-backed heap: children of i live at 2i + 1 and 2i + 2.  `kind`
selects the ordering; every parent/child test is a real `compare` and
every exchange a `swap`, so the sift paths are watchable.

Structural size changes (append on insert, drop-last on extract) go
through `replace`, like the other linear structures.
"""

from typing import Callable, Dict, List, Sequence, Tuple

from algorithms.step import AnimationStep, StepType
from model.presets import TREE_CANVAS_WIDTH, TREE_INITIAL_Y, TREE_LEVEL_HEIGHT

Result = Tuple[List[int], List[AnimationStep]]


PSEUDOCODE: List[str] = [
    "insert(x): A.append(x); siftUp(n − 1)",        # 0
    "extract(): swap(A[0], A[n−1]); A.pop(); siftDown(0)",  # 1
    "build(A):  for i ← ⌊n/2⌋ − 1 downto 0: siftDown(i)",  # 2
    "siftUp(i): while i > 0 and A[i] beats A[parent]: swap; i ← parent",  # 3
    "siftDown(i): swap with the better child while it beats A[i]",       # 4
]

LINE_MAP: Dict[StepType, int] = {
    StepType.REPLACE:   0,
    StepType.HIGHLIGHT: 1,
    StepType.COMPARE:   3,
    StepType.SWAP:      3,
}


def _beats(kind: str) -> Callable[[int, int], bool]:
    if kind == "max":
        return lambda a, b: a > b
    return lambda a, b: a < b


def _sift_up(a: List[int], i: int, beats, steps: List[AnimationStep]) -> None:
    while i > 0:
        parent = (i - 1) // 2
        steps.append(AnimationStep.compare(i, parent))
        if not beats(a[i], a[parent]):
            return
        a[i], a[parent] = a[parent], a[i]
        steps.append(AnimationStep.swap(i, parent))
        i = parent


def _sift_down(a: List[int], i: int, beats, steps: List[AnimationStep]) -> None:
    n = len(a)
    while True:
        best = i
        for child in (2 * i + 1, 2 * i + 2):
            if child < n:
                steps.append(AnimationStep.compare(child, best))
                if beats(a[child], a[best]):
                    best = child
        if best == i:
            return
        a[i], a[best] = a[best], a[i]
        steps.append(AnimationStep.swap(i, best))
        i = best


def insert(values: Sequence[int], value: int, kind: str = "min") -> Result:
    a = list(values) + [value]
    steps = [AnimationStep.replace(a)]
    _sift_up(a, len(a) - 1, _beats(kind), steps)
    return a, steps


def extract_root(values: Sequence[int], kind: str = "min") -> Result:
    a = list(values)
    if not a:
        return a, []
    steps = [AnimationStep.highlight(0)]
    last = len(a) - 1
    if last:
        a[0], a[last] = a[last], a[0]
        steps.append(AnimationStep.swap(0, last))
    a.pop()
    steps.append(AnimationStep.replace(a))
    _sift_down(a, 0, _beats(kind), steps)
    steps.append(AnimationStep.highlight())
    return a, steps


def build(values: Sequence[int], kind: str = "min") -> Result:
    a = list(values)
    steps: List[AnimationStep] = []
    beats = _beats(kind)
    for i in range(len(a) // 2 - 1, -1, -1):
        _sift_down(a, i, beats, steps)
    return a, steps


def is_heap(values: Sequence[int], kind: str = "min") -> bool:
    beats = _beats(kind)
    return all(not beats(values[i], values[(i - 1) // 2]) for i in range(1, len(values)))


def heap_layout(count: int) -> List[Tuple[float, float]]:
    """(x, y) per array index, drawn as the implicit complete binary tree."""
    positions: List[Tuple[float, float]] = []
    for i in range(count):
        level = (i + 1).bit_length() - 1
        slot  = i + 1 - (1 << level)
        width = TREE_CANVAS_WIDTH / (1 << level)
        positions.append((width * slot + width / 2, TREE_INITIAL_Y + level * TREE_LEVEL_HEIGHT))
    return positions
