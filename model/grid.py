"""
grid.py — Pathfinding Grid
===========================
The 2-D cell matrix every pathfinder, maze generator and MST builder
works on.

Design decisions:
  - A cell's `status` is the ONLY thing the renderer reads.  The boolean
    flags (`is_start`, `is_finish`, `is_wall`) describe what the cell *is*;
    `status` describes how it is currently painted.
  - `previous` is a (row, col) tuple, not a GridNode reference.  It is a
    "came-from" marker for path reconstruction and nothing else, which
    keeps copies cheap and serialisation trivial.
  - Algorithms never touch the caller's grid: they call `copy()` and
    `reset_algo_state()` on the copy first.
"""

from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

from model.presets import GRID_ROWS, GRID_COLS, START_CELL, FINISH_CELL

Cell = Tuple[int, int]

# up, down, left, right
DIRECTIONS: List[Cell] = [(-1, 0), (1, 0), (0, -1), (0, 1)]


# ---------------------------------------------------------------------------
# Node Status Enum: one value per rendered colour
# ---------------------------------------------------------------------------
class NodeStatus(Enum):
    UNVISITED = "unvisited"
    VISITED   = "visited"
    WALL      = "wall"
    PATH      = "path"
    START     = "start"
    FINISH    = "finish"


# ---------------------------------------------------------------------------
# GridNode
# ---------------------------------------------------------------------------
class GridNode:
    """
    Attributes:
        row, col    : Position in the grid.
        is_start    : True for the single start cell.
        is_finish   : True for the single finish cell.
        is_wall     : Obstacle flag.
        distance    : Scratch cost used by weighted searches (inf = unseen).
        is_visited  : Scratch flag set when the search settles the cell.
        previous    : (row, col) of the cell this one was reached from.
        status      : NodeStatus shown by the renderer.
    """

    __slots__ = ("row", "col", "is_start", "is_finish", "is_wall",
                 "distance", "is_visited", "previous", "status")

    def __init__(self, row: int, col: int, is_start: bool = False, is_finish: bool = False):
        self.row:        int            = row
        self.col:        int            = col
        self.is_start:   bool           = is_start
        self.is_finish:  bool           = is_finish
        self.is_wall:    bool           = False
        self.distance:   float          = float("inf")
        self.is_visited: bool           = False
        self.previous:   Optional[Cell] = None
        self.status:     NodeStatus     = self._base_status()

    def _base_status(self) -> NodeStatus:
        if self.is_start:
            return NodeStatus.START
        if self.is_finish:
            return NodeStatus.FINISH
        if self.is_wall:
            return NodeStatus.WALL
        return NodeStatus.UNVISITED

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)

    def reset_algo_state(self) -> None:
        """Neutralise scratch fields; walls and endpoints are kept."""
        self.distance   = float("inf")
        self.is_visited = False
        self.previous   = None

    def reset_status(self) -> None:
        self.status = self._base_status()

    def set_wall(self, flag: bool) -> None:
        self.is_wall = flag
        self.status  = self._base_status()

    def copy(self) -> "GridNode":
        clone = GridNode(self.row, self.col, self.is_start, self.is_finish)
        clone.is_wall    = self.is_wall
        clone.distance   = self.distance
        clone.is_visited = self.is_visited
        clone.previous   = self.previous
        clone.status     = self.status
        return clone

    def to_dict(self) -> dict:
        return {
            "row":       self.row,
            "col":       self.col,
            "isStart":   self.is_start,
            "isFinish":  self.is_finish,
            "isWall":    self.is_wall,
            "isVisited": self.is_visited,
            "status":    self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GridNode":
        node = cls(data["row"], data["col"], data.get("isStart", False), data.get("isFinish", False))
        node.is_wall    = data.get("isWall", False)
        node.is_visited = data.get("isVisited", False)
        node.status     = NodeStatus(data.get("status", node._base_status().value))
        return node

    def __repr__(self) -> str:
        return f"GridNode({self.row}, {self.col}, {self.status.value})"


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------
class Grid:
    """
    Attributes:
        rows, cols : Fixed dimensions.
        nodes      : nodes[row][col] → GridNode
    """

    def __init__(
        self,
        rows: int = GRID_ROWS,
        cols: int = GRID_COLS,
        start: Optional[Cell] = START_CELL,
        finish: Optional[Cell] = FINISH_CELL,
    ):
        self.rows: int = rows
        self.cols: int = cols
        self.nodes: List[List[GridNode]] = [
            [GridNode(r, c, is_start=(r, c) == start, is_finish=(r, c) == finish) for c in range(cols)]
            for r in range(rows)
        ]

    # ==================================================================
    # ACCESS
    # ==================================================================
    def node(self, row: int, col: int) -> GridNode:
        return self.nodes[row][col]

    def __getitem__(self, cell: Cell) -> GridNode:
        return self.nodes[cell[0]][cell[1]]

    def __iter__(self) -> Iterator[GridNode]:
        for line in self.nodes:
            yield from line

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_open(self, row: int, col: int) -> bool:
        """In bounds and not a wall."""
        return self.in_bounds(row, col) and not self.nodes[row][col].is_wall

    def neighbours(self, row: int, col: int) -> List[GridNode]:
        """4-connected neighbours in up, down, left, right order (walls included)."""
        result = []
        for dr, dc in DIRECTIONS:
            r, c = row + dr, col + dc
            if self.in_bounds(r, c):
                result.append(self.nodes[r][c])
        return result

    def open_neighbours(self, row: int, col: int) -> List[GridNode]:
        return [n for n in self.neighbours(row, col) if not n.is_wall]

    # ==================================================================
    # ENDPOINTS
    # ==================================================================
    def starts(self) -> List[Cell]:
        return [n.cell for n in self if n.is_start]

    def finishes(self) -> List[Cell]:
        return [n.cell for n in self if n.is_finish]

    def endpoints(self) -> Optional[Tuple[Cell, Cell]]:
        """(start, finish) when exactly one of each exists, else None."""
        starts, finishes = self.starts(), self.finishes()
        if len(starts) != 1 or len(finishes) != 1:
            return None
        return starts[0], finishes[0]

    # ==================================================================
    # MUTATION
    # ==================================================================
    def toggle_wall(self, row: int, col: int) -> bool:
        """Flip a wall.  Start/finish cells refuse.  Returns True if changed."""
        node = self.nodes[row][col]
        if node.is_start or node.is_finish:
            return False
        node.set_wall(not node.is_wall)
        return True

    def reset_algo_state(self) -> None:
        for node in self:
            node.reset_algo_state()

    def clear_path(self) -> None:
        """Wipe scratch fields and visited/path paint, keep walls."""
        for node in self:
            node.reset_algo_state()
            node.reset_status()

    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone.rows  = self.rows
        clone.cols  = self.cols
        clone.nodes = [[n.copy() for n in line] for line in self.nodes]
        return clone

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "nodes": [[n.to_dict() for n in line] for line in self.nodes],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Grid":
        grid = cls.__new__(cls)
        grid.rows  = data["rows"]
        grid.cols  = data["cols"]
        grid.nodes = [[GridNode.from_dict(nd) for nd in line] for line in data["nodes"]]
        return grid

    @classmethod
    def from_strings(cls, lines: Sequence[str]) -> "Grid":
        """
        Build a grid from text rows:  '#' wall, 'S' start, 'F' finish,
        anything else open.
        """
        grid = cls(len(lines), len(lines[0]) if lines else 0, start=None, finish=None)
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                node = grid.nodes[r][c]
                node.is_start  = ch == "S"
                node.is_finish = ch == "F"
                node.set_wall(ch == "#")
        return grid

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols})"
