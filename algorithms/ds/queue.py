"""queue.py — FIFO queue; enqueue at the tail, dequeue from the head (index 0)."""

from typing import Dict, List, Sequence

from algorithms.step import StepType
from algorithms.ds.scripts import Result, insert_at, remove_at


PSEUDOCODE: List[str] = [
    "enqueue(x): Q[tail] ← x; tail ← tail + 1",     # 0
    "dequeue():  x ← Q[head]; head ← head + 1",     # 1
]

LINE_MAP: Dict[StepType, int] = {
    StepType.REPLACE: 0,
}


def enqueue(values: Sequence[int], value: int) -> Result:
    tail = len(values) - 1 if values else None
    return insert_at(values, len(values), value, tail)


def dequeue(values: Sequence[int]) -> Result:
    return remove_at(values, 0)
