"""stack.py — LIFO stack; the top is the END of the array."""

from typing import Dict, List, Sequence

from algorithms.step import StepType
from algorithms.ds.scripts import Result, insert_at, remove_at


PSEUDOCODE: List[str] = [
    "push(x): top ← top + 1; S[top] ← x",           # 0
    "pop():   x ← S[top]; top ← top − 1; return x", # 1
]

LINE_MAP: Dict[StepType, int] = {
    StepType.REPLACE: 0,
}


def push(values: Sequence[int], value: int) -> Result:
    top = len(values) - 1 if values else None
    return insert_at(values, len(values), value, top)


def pop(values: Sequence[int]) -> Result:
    return remove_at(values, len(values) - 1)
