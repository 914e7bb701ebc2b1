"""
describe.py — Human-readable step log
=======================================
One sentence per step for the log panel.  Wording is generic per step
type; string matchers and DP fillers get a more specific phrasing for
comparisons since their indices are not array positions.
"""

from typing import Optional

from algorithms import Family, get_algorithm
from algorithms.step import MATCH, MISMATCH, AnimationStep, StepType


def _join(indices) -> str:
    return ", ".join(str(i) for i in indices)


def describe(step: AnimationStep, algorithm=None) -> str:
    info = get_algorithm(algorithm) if algorithm is not None else None
    family: Optional[Family] = info.family if info else None
    t, idx = step.type, step.indices

    if t is StepType.COMPARE:
        if family is Family.STRING and len(idx) == 2:
            return f"Comparing text[{idx[0]}] with pattern[{idx[1]}]"
        if family is Family.DP and len(idx) == 2:
            return f"Evaluating DP cell [{_join(idx)}]"
        return f"Comparing elements at indices [{_join(idx)}]"
    if t is StepType.SWAP:
        return f"Swapping elements at indices [{_join(idx)}]"
    if t is StepType.OVERWRITE:
        if step.value is not None:
            return f"Overwriting index {idx[0]} with value {step.value}"
        return f"Overwriting index {idx[0]}"
    if t is StepType.HIGHLIGHT:
        if step.value == MATCH:
            return f"Character at {idx[0]} matches"
        if step.value == MISMATCH:
            return f"Character at {idx[0]} does not match"
        if not idx:
            return "Clearing highlight"
        return f"Highlighting indices [{_join(idx)}]"
    if t is StepType.VISIT:
        return f"Visiting node at [{_join(idx)}]"
    if t is StepType.PATH:
        return f"Marking path at [{_join(idx)}]"
    if t is StepType.WALL:
        return f"Placing wall at [{_join(idx)}]"
    if t is StepType.FOUND:
        return f"Found target at [{_join(idx)}]"
    if t is StepType.TARGET:
        return f"Target set at [{_join(idx)}]"
    if t is StepType.REPLACE:
        return f"Replacing array with {len(step.new_array or ())} values"
    if t is StepType.MOVE_TO_BUCKET:
        return f"Moving value {step.value} to bucket {step.bucket_index}"
    if t is StepType.RESTORE:
        return f"Restoring value {step.value} from bucket to index {idx[0]}"
    if t is StepType.UPDATE_TABLE:
        return f"Updating DP table at [{step.row}, {step.col}] with {step.val}"
    if t is StepType.UPDATE_AUX:
        return f"Updating auxiliary array index {idx[0]} with {step.value}"
    return f"Step: {t.value}"
