"""linked_list.py — Singly linked list drawn as an array of node values."""

from typing import Dict, List, Sequence

from algorithms.step import StepType
from algorithms.ds.scripts import Result, insert_at, remove_at


PSEUDOCODE: List[str] = [
    "insertHead(x): n ← Node(x); n.next ← head; head ← n",     # 0
    "insertTail(x): walk to last; last.next ← Node(x)",        # 1
    "deleteHead():  head ← head.next",                         # 2
    "deleteTail():  walk to second-last; its next ← null",     # 3
]

LINE_MAP: Dict[StepType, int] = {
    StepType.REPLACE: 0,
}


def insert_head(values: Sequence[int], value: int) -> Result:
    return insert_at(values, 0, value, 0 if values else None)


def insert_tail(values: Sequence[int], value: int) -> Result:
    return insert_at(values, len(values), value, len(values) - 1 if values else None)


def delete_head(values: Sequence[int]) -> Result:
    return remove_at(values, 0)


def delete_tail(values: Sequence[int]) -> Result:
    return remove_at(values, len(values) - 1)
