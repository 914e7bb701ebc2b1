"""
step.py — Animation Step
=========================
Every algorithm is a generator that yields AnimationStep objects.
A step is ONE observable micro-operation: a comparison, a swap, a cell
settled by a search, a DP cell written.  The replay engine applies them
one at a time, in order, to the live state.

Design decisions:
  - AnimationStep is frozen.  Once yielded it is never edited; compound
    operations are expressed as several consecutive steps.
  - `indices` is a tuple whose meaning depends on the family:
        arrays   → one or two positions
        grids    → (row, col)
        DP       → (row, col) of a table cell, or several such pairs
        strings  → (text_index, pattern_index)
  - Construction goes through the classmethods below so algorithm code
    reads like the textbook (`yield AnimationStep.swap(i, j)`).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, Union


# ---------------------------------------------------------------------------
# Step kinds — a closed set
# ---------------------------------------------------------------------------
class StepType(str, Enum):
    COMPARE        = "compare"
    SWAP           = "swap"
    OVERWRITE      = "overwrite"
    HIGHLIGHT      = "highlight"
    VISIT          = "visit"
    PATH           = "path"
    WALL           = "wall"
    FOUND          = "found"
    TARGET         = "target"
    REPLACE        = "replace"
    UPDATE_AUX     = "updateAux"
    MOVE_TO_BUCKET = "moveToBucket"
    RESTORE        = "restore"
    UPDATE_TABLE   = "updateTable"


# highlight payloads used by the string matchers
MATCH    = 1
MISMATCH = 2


@dataclass(frozen=True)
class AnimationStep:
    """
    Attributes:
        type         : StepType of this event.
        indices      : Positions the event refers to (see module docstring).
        value        : Scalar payload (overwrite value, bucket move value, aux value).
        new_array    : Full replacement array for `replace`.
        bucket_index : Bucket addressed by `moveToBucket` / `restore`.
        row, col     : DP cell written by `updateTable`.
        val          : Value written by `updateTable`.
    """

    type:         StepType
    indices:      Tuple[int, ...]                 = ()
    value:        Optional[int]                   = None
    new_array:    Optional[Tuple[int, ...]]       = None
    bucket_index: Optional[int]                   = None
    row:          Optional[int]                   = None
    col:          Optional[int]                   = None
    val:          Optional[Union[int, str]]       = None

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def compare(cls, *indices: int, value: Optional[int] = None) -> "AnimationStep":
        return cls(StepType.COMPARE, tuple(indices), value=value)

    @classmethod
    def swap(cls, i: int, j: int) -> "AnimationStep":
        return cls(StepType.SWAP, (i, j))

    @classmethod
    def overwrite(cls, index: int, value: Optional[int] = None) -> "AnimationStep":
        return cls(StepType.OVERWRITE, (index,), value=value)

    @classmethod
    def highlight(cls, *indices: int, value: Optional[int] = None) -> "AnimationStep":
        return cls(StepType.HIGHLIGHT, tuple(indices), value=value)

    @classmethod
    def visit(cls, row: int, col: int) -> "AnimationStep":
        return cls(StepType.VISIT, (row, col))

    @classmethod
    def path(cls, row: int, col: int) -> "AnimationStep":
        return cls(StepType.PATH, (row, col))

    @classmethod
    def wall(cls, row: int, col: int) -> "AnimationStep":
        return cls(StepType.WALL, (row, col))

    @classmethod
    def found(cls, *indices: int) -> "AnimationStep":
        return cls(StepType.FOUND, tuple(indices))

    @classmethod
    def target(cls, *indices: int) -> "AnimationStep":
        return cls(StepType.TARGET, tuple(indices))

    @classmethod
    def replace(cls, new_array: Iterable[int]) -> "AnimationStep":
        return cls(StepType.REPLACE, (), new_array=tuple(new_array))

    @classmethod
    def update_aux(cls, index: int, value: int) -> "AnimationStep":
        return cls(StepType.UPDATE_AUX, (index,), value=value)

    @classmethod
    def move_to_bucket(cls, index: int, value: int, bucket: int) -> "AnimationStep":
        return cls(StepType.MOVE_TO_BUCKET, (index,), value=value, bucket_index=bucket)

    @classmethod
    def restore(cls, index: int, value: int, bucket: int) -> "AnimationStep":
        return cls(StepType.RESTORE, (index,), value=value, bucket_index=bucket)

    @classmethod
    def update_table(cls, row: int, col: int, val: Union[int, str]) -> "AnimationStep":
        return cls(StepType.UPDATE_TABLE, (row, col), row=row, col=col, val=val)

    # ------------------------------------------------------------------
    # Wire format
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data: dict = {"type": self.type.value, "indices": list(self.indices)}
        if self.value is not None:
            data["value"] = self.value
        if self.new_array is not None:
            data["newArray"] = list(self.new_array)
        if self.bucket_index is not None:
            data["bucketIndex"] = self.bucket_index
        if self.row is not None:
            data["row"] = self.row
        if self.col is not None:
            data["col"] = self.col
        if self.val is not None:
            data["val"] = self.val
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AnimationStep":
        new_array = data.get("newArray")
        return cls(
            type=StepType(data["type"]),
            indices=tuple(data.get("indices", ())),
            value=data.get("value"),
            new_array=tuple(new_array) if new_array is not None else None,
            bucket_index=data.get("bucketIndex"),
            row=data.get("row"),
            col=data.get("col"),
            val=data.get("val"),
        )


# ---------------------------------------------------------------------------
# Helpers shared by several families
# ---------------------------------------------------------------------------
def pairs(indices: Sequence[int]) -> List[Tuple[int, int]]:
    """Split a flat (r0, c0, r1, c1, …) index tuple into coordinate pairs."""
    return [(indices[k], indices[k + 1]) for k in range(0, len(indices) - 1, 2)]


def flatten(cells: Iterable[Tuple[int, int]]) -> Tuple[int, ...]:
    out: List[int] = []
    for r, c in cells:
        out.extend((r, c))
    return tuple(out)
