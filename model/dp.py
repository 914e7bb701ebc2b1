"""
dp.py — Dynamic-Programming Table
==================================
A 2-D grid of cells plus parallel row / column captions.

`None` in a cell means "not computed yet".  It is deliberately distinct
from 0, which is a real computed value (empty prefix, zero capacity).
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from model.presets import KNAPSACK_ITEMS, KNAPSACK_CAPACITY, LCS_DEFAULT

CellValue = Optional[Union[int, str]]


@dataclass
class DPTable:
    cells:      List[List[CellValue]] = field(default_factory=list)
    row_labels: List[str]             = field(default_factory=list)
    col_labels: List[str]             = field(default_factory=list)
    title:      str                   = ""

    @classmethod
    def blank(cls, rows: int, cols: int, row_labels: Sequence[str], col_labels: Sequence[str], title: str = "") -> "DPTable":
        return cls(
            cells=[[None] * cols for _ in range(rows)],
            row_labels=list(row_labels),
            col_labels=list(col_labels),
            title=title,
        )

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.cells), len(self.cells[0]) if self.cells else 0

    def set(self, row: int, col: int, value: CellValue) -> None:
        self.cells[row][col] = value

    def get(self, row: int, col: int) -> CellValue:
        return self.cells[row][col]

    def to_dict(self) -> dict:
        return {
            "cells":     [list(r) for r in self.cells],
            "rowLabels": list(self.row_labels),
            "colLabels": list(self.col_labels),
            "title":     self.title,
        }


# ---------------------------------------------------------------------------
# Problem-specific layouts
# ---------------------------------------------------------------------------
def knapsack_table(
    items: Sequence[Tuple[int, int]] = KNAPSACK_ITEMS,
    capacity: int = KNAPSACK_CAPACITY,
) -> DPTable:
    """Rows: "no items" then one per item.  Columns: capacity 0..W."""
    row_labels = ["∅"] + [f"w={w}, v={v}" for w, v in items]
    col_labels = [str(w) for w in range(capacity + 1)]
    return DPTable.blank(len(items) + 1, capacity + 1, row_labels, col_labels,
                         title=f"0/1 Knapsack, capacity {capacity}")


def lcs_table(first: str = LCS_DEFAULT[0], second: str = LCS_DEFAULT[1]) -> DPTable:
    """Rows follow `first`, columns follow `second`; index 0 is the empty prefix."""
    return DPTable.blank(len(first) + 1, len(second) + 1, ["ε"] + list(first), ["ε"] + list(second),
                         title=f"LCS of {first!r} and {second!r}")
