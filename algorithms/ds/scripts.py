"""
scripts.py — Insert / Remove Step Scripts
==========================================
Stack, queue and linked list all animate structural changes the same
way, differing only in WHERE the change happens:

    insert:  highlight(old boundary) → replace(new) → overwrite(new slot) → highlight()
    remove:  highlight(slot) → overwrite(slot) → replace(new) → highlight()

`overwrite` without a value only tags the slot; the array itself changes
through `replace`, since inserting or removing shifts every index after it.
"""

from typing import List, Optional, Sequence, Tuple

from algorithms.step import AnimationStep

Result = Tuple[List[int], List[AnimationStep]]


def insert_at(values: Sequence[int], position: int, value: int, boundary: Optional[int]) -> Result:
    new = list(values)
    new.insert(position, value)
    steps = []
    steps.append(AnimationStep.highlight(boundary) if boundary is not None else AnimationStep.highlight())
    steps.append(AnimationStep.replace(new))
    steps.append(AnimationStep.overwrite(position))
    steps.append(AnimationStep.highlight())
    return new, steps


def remove_at(values: Sequence[int], position: int) -> Result:
    if not values:
        return list(values), []
    new = list(values)
    del new[position]
    steps = [
        AnimationStep.highlight(position),
        AnimationStep.overwrite(position),
        AnimationStep.replace(new),
        AnimationStep.highlight(),
    ]
    return new, steps
