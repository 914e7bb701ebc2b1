"""
state.py — Visualizer State Store
===================================
Everything a renderer needs to draw one frame, owned by one object and
passed explicitly to whoever reads or writes it (replay engine, traversal
player, HTTP host).  No module-level globals.

Responsibilities:
  - algorithm selection & speed
  - the per-family data: bar array, grid, tree, graph, DP table
  - transient overlays written by the replay engine (highlight / swap /
    found / target marks, aux array, buckets, per-char match states)
  - user gestures: wall painting, resets, tree and data-structure edits
  - `prepare_run()` → the step log for the current selection
  - `snapshot()` → JSON-safe dict, `subscribe` / `notify` for re-renders

Design decisions:
  - Methods that change data are ignored while a replay is playing, the
    same way the grid ignores paint gestures mid-run.
  - Tree edits work on a deep copy of the current root, so a snapshot
    handed out earlier never changes underneath its holder.
"""

import copy
import logging
import random
from typing import Callable, Dict, List, Optional, Set, Tuple

from algorithms import AlgorithmType, Family, Interaction, get_algorithm
from algorithms.dispatcher import generate_steps
from algorithms.ds.heap import heap_layout
from algorithms.step import AnimationStep
from algorithms.tree import avl, bst
from algorithms.tree.layout import layout
from model.dp import DPTable, knapsack_table, lcs_table
from model.graph import DirectedGraph
from model.grid import Grid
from model.presets import (
    ARRAY_LENGTH, DISTRIBUTION_ARRAY_LENGTH, ARRAY_VALUE_RANGE,
    NQUEENS_SIZE, SUDOKU_PUZZLE, LCS_DEFAULT, DEFAULT_TEXT, DEFAULT_PATTERN,
)
from engine.replay import DEFAULT_SPEED, clamp_speed

logger = logging.getLogger(__name__)

BUCKET_COUNT    = 10
HEAP_BUILD_SIZE = 10
VALUE_ACTIONS   = {"push", "enqueue", "insert_head", "insert_tail", "insert"}

_DISTRIBUTION = {AlgorithmType.RADIX_SORT, AlgorithmType.BUCKET_SORT}
_LINEAR_DS    = {AlgorithmType.STACK, AlgorithmType.QUEUE, AlgorithmType.LINKED_LIST,
                 AlgorithmType.MIN_HEAP, AlgorithmType.MAX_HEAP}
_TREES        = {AlgorithmType.BST, AlgorithmType.AVL}
_HEAPS        = {AlgorithmType.MIN_HEAP, AlgorithmType.MAX_HEAP}
_DIGRAPHS     = {AlgorithmType.SCC, AlgorithmType.TOPOLOGICAL_SORT}


class VisualizerState:
    """
    Attributes:
        algorithm         : Selected AlgorithmType.
        speed             : Playback speed 1..100.
        array             : Bar values, board cells, or linear-structure contents.
        grid              : Pathfinding / maze grid.
        tree_root         : BST / AVL root.
        graph             : Directed graph for SCC and topological sort.
        dp_table          : Knapsack / LCS table (None for other algorithms).
        aux_array         : Counting array, LPS table, LIS lengths, SCC ids, topological ranks…
        buckets           : Bucket contents for radix / bucket sort.
        hidden_indices    : Array slots currently lifted into a bucket.
        highlight_indices, swap_indices, found_indices, target_indices
                          : Overlay marks written by the replay engine.
        char_states       : text index → MATCH / MISMATCH for string matchers.
        current_step      : Index of the last applied step (-1 before the first).
        is_playing        : A replay is in flight.
        is_sorted         : Last replay ran to completion.
        text, pattern     : KMP / Rabin-Karp inputs.
        lcs_strings       : LCS inputs.
        last_rotations    : AVL rotations performed by the last tree edit.
        active_node_id, visited_node_ids, traversal_result
                          : Written by the traversal player.
    """

    def __init__(self, algorithm: AlgorithmType = AlgorithmType.BUBBLE_SORT,
                 rng: Optional[random.Random] = None):
        self.rng:               random.Random         = rng or random.Random()
        self.algorithm:         AlgorithmType         = algorithm
        self.speed:             int                   = DEFAULT_SPEED

        self.array:             List[int]             = []
        self.grid:              Grid                  = Grid()
        self.tree_root                                = None
        self.graph:             DirectedGraph         = DirectedGraph()
        self.dp_table:          Optional[DPTable]     = None

        self.aux_array:         List[int]             = []
        self.buckets:           List[List[int]]       = [[] for _ in range(BUCKET_COUNT)]
        self.hidden_indices:    Set[int]              = set()
        self.highlight_indices: List[int]             = []
        self.swap_indices:      List[int]             = []
        self.found_indices:     List[int]             = []
        self.target_indices:    List[int]             = []
        self.char_states:       Dict[int, int]        = {}

        self.current_step:      int                   = -1
        self.is_playing:        bool                  = False
        self.is_sorted:         bool                  = False
        self.mouse_pressed:     bool                  = False

        self.text:              str                   = DEFAULT_TEXT
        self.pattern:           str                   = DEFAULT_PATTERN
        self.lcs_strings:       Tuple[str, str]       = LCS_DEFAULT
        self.last_rotations:    List[str]             = []

        self.active_node_id:    Optional[str]         = None
        self.visited_node_ids:  List[str]             = []
        self.traversal_result:  str                   = ""

        self._subscribers: List[Callable[["VisualizerState"], None]] = []

        self.reset_array()

    # ==================================================================
    # SUBSCRIPTIONS
    # ==================================================================
    def subscribe(self, callback: Callable[["VisualizerState"], None]) -> Callable[[], None]:
        """Register a re-render hook.  Returns an unsubscribe function."""
        self._subscribers.append(callback)
        return lambda: self._subscribers.remove(callback)

    def notify(self) -> None:
        for cb in list(self._subscribers):
            cb(self)

    # ==================================================================
    # CONFIGURATION
    # ==================================================================
    def set_algorithm(self, algorithm: AlgorithmType) -> None:
        if self.is_playing:
            return
        self.algorithm = algorithm
        self.reset_array()
        if get_algorithm(algorithm).family is Family.PATHFINDING:
            self.grid.clear_path()

    def set_speed(self, speed: int) -> None:
        self.speed = clamp_speed(speed)
        self.notify()

    def set_strings(self, first: str, second: str) -> None:
        """Text/pattern for the string matchers, the string pair for LCS."""
        if self.is_playing:
            return
        if self.algorithm is AlgorithmType.LCS:
            self.lcs_strings = (first, second)
            self.dp_table = lcs_table(first, second)
        else:
            self.text, self.pattern = first, second
        self.char_states = {}
        self.aux_array = []
        self.found_indices = []
        self.notify()

    @property
    def strings(self) -> Tuple[str, str]:
        if self.algorithm is AlgorithmType.LCS:
            return self.lcs_strings
        return self.text, self.pattern

    # ==================================================================
    # RESETS
    # ==================================================================
    def random_array(self, length: int) -> List[int]:
        lo, hi = ARRAY_VALUE_RANGE
        return [self.rng.randint(lo, hi) for _ in range(length)]

    def reset_array(self) -> None:
        """Fresh initial data for the selected algorithm; drops every overlay."""
        if self.is_playing:
            return
        algo = self.algorithm
        self.dp_table = None
        self.active_node_id = None
        self.visited_node_ids = []
        self.traversal_result = ""
        self.last_rotations = []

        if algo is AlgorithmType.SUDOKU:
            self.array = list(SUDOKU_PUZZLE)
        elif algo is AlgorithmType.NQUEENS:
            self.array = [-1] * NQUEENS_SIZE
        elif algo in _DISTRIBUTION:
            self.array = self.random_array(DISTRIBUTION_ARRAY_LENGTH)
        elif algo is AlgorithmType.KNAPSACK:
            self.array = []
            self.dp_table = knapsack_table()
        elif algo is AlgorithmType.LCS:
            self.array = []
            self.dp_table = lcs_table(*self.lcs_strings)
        elif algo in (AlgorithmType.KMP, AlgorithmType.RABIN_KARP):
            self.array = []
        elif algo in _LINEAR_DS:
            self.array = []
        elif algo in _TREES:
            self.array = []
            self.tree_root = None
        elif algo in _DIGRAPHS:
            self.graph = DirectedGraph()
        else:
            self.tree_root = None
            self.array = self.random_array(ARRAY_LENGTH)

        self.clear_overlays()
        self.is_sorted = False
        self.current_step = -1
        self.notify()

    def clear_overlays(self) -> None:
        self.highlight_indices = []
        self.swap_indices = []
        self.found_indices = []
        self.target_indices = []
        self.aux_array = []
        self.buckets = [[] for _ in range(BUCKET_COUNT)]
        self.hidden_indices = set()
        self.char_states = {}

    # ==================================================================
    # GRID GESTURES
    # ==================================================================
    def mouse_down(self, row: int, col: int) -> None:
        if self.is_playing or not self.grid.in_bounds(row, col):
            return
        self.grid.toggle_wall(row, col)
        self.mouse_pressed = True
        self.notify()

    def mouse_enter(self, row: int, col: int) -> None:
        if not self.mouse_pressed or self.is_playing or not self.grid.in_bounds(row, col):
            return
        self.grid.toggle_wall(row, col)
        self.notify()

    def mouse_up(self) -> None:
        self.mouse_pressed = False

    def clear_board(self) -> None:
        if self.is_playing:
            return
        self.grid = Grid()
        self.notify()

    def clear_path(self) -> None:
        if self.is_playing:
            return
        self.grid.clear_path()
        self.notify()

    # ==================================================================
    # GRAPH / TREE / DATA STRUCTURES
    # ==================================================================
    def generate_graph(self, num_nodes: Optional[int] = None) -> None:
        if self.is_playing:
            return
        acyclic = self.algorithm is AlgorithmType.TOPOLOGICAL_SORT
        self.graph = DirectedGraph.generate_random(num_nodes, rng=self.rng, acyclic=acyclic)
        self.clear_overlays()
        self.notify()

    def _tree_module(self):
        return avl if self.algorithm is AlgorithmType.AVL else bst

    def tree_insert(self, value: int) -> None:
        if self.is_playing:
            return
        root = copy.deepcopy(self.tree_root)
        self.last_rotations = []
        if self.algorithm is AlgorithmType.AVL:
            root = avl.insert(root, value, self.last_rotations)
        else:
            root = bst.insert(root, value)
        self.tree_root = layout(root)
        self.notify()

    def tree_delete(self, value: int) -> None:
        if self.is_playing or self.tree_root is None:
            return
        root = copy.deepcopy(self.tree_root)
        self.last_rotations = []
        if self.algorithm is AlgorithmType.AVL:
            root = avl.delete(root, value, self.last_rotations)
        else:
            root = bst.delete(root, value)
        self.tree_root = layout(root)
        self.notify()

    def ds_action(self, action: str, value: Optional[int] = None) -> List[AnimationStep]:
        """
        Run one UI-driven operation and return its steps for replay.
        Linear structures and heaps edit the array through those steps;
        The digraph algorithms' "run" returns their log over the current graph.
        """
        info = get_algorithm(self.algorithm)
        op = info.operations.get(action) if info else None
        if op is None:
            logger.warning("%s has no action %r", self.algorithm.value, action)
            return []
        if self.algorithm in _DIGRAPHS:
            self.clear_overlays()
            return list(op(self.graph))
        if self.algorithm in _TREES:
            logger.warning("Tree edits go through tree_insert / tree_delete")
            return []
        if action in VALUE_ACTIONS:
            if value is None:
                logger.warning("%s %r needs a value", self.algorithm.value, action)
                return []
            _, steps = op(self.array, value)
            return steps
        if action == "build" and not self.array:
            self.array = self.random_array(HEAP_BUILD_SIZE)
        _, steps = op(self.array)
        return steps

    # ==================================================================
    # RUN
    # ==================================================================
    def prepare_run(self) -> List[AnimationStep]:
        """Reset scratch data for the selected algorithm and generate its log."""
        info = get_algorithm(self.algorithm)
        if info.interaction is Interaction.UI_DRIVEN:
            return generate_steps(self.algorithm, self.array)

        self.clear_overlays()
        self.is_sorted = False
        self.current_step = -1

        if info.family is Family.MAZE:
            self.grid = Grid()
        elif info.family in (Family.PATHFINDING, Family.GRAPH):
            self.grid.clear_path()

        if self.algorithm is AlgorithmType.NQUEENS:
            self.array = [-1] * NQUEENS_SIZE
        elif self.algorithm is AlgorithmType.SUDOKU:
            self.array = list(SUDOKU_PUZZLE)
        elif self.algorithm is AlgorithmType.KNAPSACK:
            self.dp_table = knapsack_table()
        elif self.algorithm is AlgorithmType.LCS:
            self.dp_table = lcs_table(*self.lcs_strings)

        return generate_steps(self.algorithm, self.array, grid=self.grid,
                              strings=self.strings, rng=self.rng)

    # ==================================================================
    # CHECKPOINTS  (used by the replay engine for scrubbing)
    # ==================================================================
    def capture(self) -> dict:
        """Deep copy of every field a step can touch."""
        return {
            "array":     list(self.array),
            "grid":      self.grid.copy(),
            "dp_table":  copy.deepcopy(self.dp_table),
            "aux":       list(self.aux_array),
            "buckets":   [list(b) for b in self.buckets],
            "hidden":    set(self.hidden_indices),
            "highlight": list(self.highlight_indices),
            "swap":      list(self.swap_indices),
            "found":     list(self.found_indices),
            "target":    list(self.target_indices),
            "chars":     dict(self.char_states),
        }

    def restore(self, checkpoint: dict) -> None:
        self.array             = list(checkpoint["array"])
        self.grid              = checkpoint["grid"].copy()
        self.dp_table          = copy.deepcopy(checkpoint["dp_table"])
        self.aux_array         = list(checkpoint["aux"])
        self.buckets           = [list(b) for b in checkpoint["buckets"]]
        self.hidden_indices    = set(checkpoint["hidden"])
        self.highlight_indices = list(checkpoint["highlight"])
        self.swap_indices      = list(checkpoint["swap"])
        self.found_indices     = list(checkpoint["found"])
        self.target_indices    = list(checkpoint["target"])
        self.char_states       = dict(checkpoint["chars"])

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def snapshot(self) -> dict:
        info = get_algorithm(self.algorithm)
        return {
            "algorithm":        self.algorithm.value,
            "family":           info.family.value,
            "speed":            self.speed,
            "array":            list(self.array),
            "grid":             self.grid.to_dict() if info.family in (Family.PATHFINDING, Family.MAZE, Family.GRAPH) else None,
            "treeRoot":         self.tree_root.to_dict() if self.tree_root else None,
            "graph":            self.graph.to_dict(),
            "dpTable":          self.dp_table.to_dict() if self.dp_table else None,
            "auxiliaryArray":   list(self.aux_array),
            "buckets":          [list(b) for b in self.buckets],
            "hiddenIndices":    sorted(self.hidden_indices),
            "highlightIndices": list(self.highlight_indices),
            "swapIndices":      list(self.swap_indices),
            "foundIndices":     list(self.found_indices),
            "targetIndices":    list(self.target_indices),
            "charStates":       {str(k): v for k, v in sorted(self.char_states.items())},
            "currentStep":      self.current_step,
            "isPlaying":        self.is_playing,
            "isSorted":         self.is_sorted,
            "text":             self.text,
            "pattern":          self.pattern,
            "lcsStrings":       list(self.lcs_strings),
            "lastRotations":    list(self.last_rotations),
            "heapLayout":       self._heap_layout(),
            "activeNodeId":     self.active_node_id,
            "visitedNodeIds":   list(self.visited_node_ids),
            "traversalResult":  self.traversal_result,
        }

    def _heap_layout(self) -> Optional[List[Dict[str, float]]]:
        if self.algorithm not in _HEAPS:
            return None
        return [{"x": x, "y": y} for x, y in heap_layout(len(self.array))]
