"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import AlgorithmType, REGISTRY, get_algorithm

AlgorithmType is a closed enum; REGISTRY maps every member to an
AlgoInfo card:
    {
        AlgorithmType.BFS: AlgoInfo(key, label, family, fn, requirement, …),
        …
    }

The card says what the algorithm NEEDS (`requirement`) and how it is
driven (`interaction`): step-log algorithms go through the dispatcher,
UI-driven structures expose their per-action mutators in `operations`.
A missing card is an import-time error, so the enum and the registry
cannot drift apart.
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Callable, Dict, List, Optional

from algorithms.step import StepType

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.sorting     import bubble_sort, selection_sort, insertion_sort, merge_sort, quick_sort, \
                                   heap_sort, shell_sort, counting_sort, radix_sort, bucket_sort
from algorithms.searching   import linear_search, binary_search
from algorithms.pathfinding import dijkstra, astar, greedy_bfs, bfs, dfs, bidirectional, jps, \
                                   bellman_ford, floyd_warshall
from algorithms.maze        import recursive_division, prims_maze, binary_tree_maze
from algorithms.graph       import prims, kruskals, connected_components, scc, topological_sort
from algorithms.backtracking import n_queens, sudoku
from algorithms.dp          import knapsack, lcs, lis
from algorithms.strings     import kmp, rabin_karp
from algorithms.ds          import stack, queue, linked_list, heap
from algorithms.tree        import bst, avl


# ---------------------------------------------------------------------------
# Closed sets
# ---------------------------------------------------------------------------
class AlgorithmType(Enum):
    BUBBLE_SORT          = "BUBBLE_SORT"
    SELECTION_SORT       = "SELECTION_SORT"
    INSERTION_SORT       = "INSERTION_SORT"
    MERGE_SORT           = "MERGE_SORT"
    QUICK_SORT           = "QUICK_SORT"
    HEAP_SORT            = "HEAP_SORT"
    SHELL_SORT           = "SHELL_SORT"
    COUNTING_SORT        = "COUNTING_SORT"
    RADIX_SORT           = "RADIX_SORT"
    BUCKET_SORT          = "BUCKET_SORT"
    LINEAR_SEARCH        = "LINEAR_SEARCH"
    BINARY_SEARCH        = "BINARY_SEARCH"
    DIJKSTRA             = "DIJKSTRA"
    ASTAR                = "ASTAR"
    GREEDY_BFS           = "GREEDY_BFS"
    BFS                  = "BFS"
    DFS                  = "DFS"
    BIDIRECTIONAL        = "BIDIRECTIONAL"
    JPS                  = "JPS"
    BELLMAN_FORD         = "BELLMAN_FORD"
    FLOYD_WARSHALL       = "FLOYD_WARSHALL"
    RECURSIVE_DIVISION   = "RECURSIVE_DIVISION"
    PRIMS_MAZE           = "PRIMS_MAZE"
    BINARY_TREE_MAZE     = "BINARY_TREE_MAZE"
    PRIMS                = "PRIMS"
    KRUSKALS             = "KRUSKALS"
    CONNECTED_COMPONENTS = "CONNECTED_COMPONENTS"
    SCC                  = "SCC"
    TOPOLOGICAL_SORT     = "TOPOLOGICAL_SORT"
    NQUEENS              = "NQUEENS"
    SUDOKU               = "SUDOKU"
    KNAPSACK             = "KNAPSACK"
    LCS                  = "LCS"
    LIS                  = "LIS"
    KMP                  = "KMP"
    RABIN_KARP           = "RABIN_KARP"
    STACK                = "STACK"
    QUEUE                = "QUEUE"
    LINKED_LIST          = "LINKED_LIST"
    BST                  = "BST"
    AVL                  = "AVL"
    MIN_HEAP             = "MIN_HEAP"
    MAX_HEAP             = "MAX_HEAP"


class Family(Enum):
    SORTING        = "sorting"
    SEARCHING      = "searching"
    PATHFINDING    = "pathfinding"
    MAZE           = "maze"
    GRAPH          = "graph"
    BACKTRACKING   = "backtracking"
    DP             = "dp"
    STRING         = "string"
    DATA_STRUCTURE = "data-structure"
    TREE           = "tree"


class Requirement(Enum):
    ARRAY          = "array"            # the current bar array / board
    GRID_ENDPOINTS = "grid-endpoints"   # grid with exactly one start and one finish
    GRID           = "grid"             # any grid
    STRINGS        = "strings"          # two non-empty strings
    PRESET         = "preset"           # fixed sample problem
    NONE           = "none"             # UI-driven, nothing to validate


class Interaction(Enum):
    STEP_LOG   = "step-log"
    UI_DRIVEN  = "ui-driven"


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              AlgorithmType
    label:            str                                   # e.g. "Breadth-First Search"
    family:           Family
    fn:               Optional[Callable]                    # generator, or None for pure UI structures
    requirement:      Requirement
    pseudocode:       List[str]                             # lines for the side-panel
    line_map:         Dict[StepType, int] = field(default_factory=dict)
    interaction:      Interaction = Interaction.STEP_LOG
    operations:       Dict[str, Callable] = field(default_factory=dict)   # UI-driven actions
    randomized:       bool = False                          # takes an rng
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str = ""
    complexity_space: str = ""
    description:      str = ""

    def to_dict(self) -> dict:
        return {
            "key":             self.key.value,
            "label":           self.label,
            "family":          self.family.value,
            "requirement":     self.requirement.value,
            "interaction":     self.interaction.value,
            "operations":      sorted(self.operations),
            "randomized":      self.randomized,
            "tags":            list(self.tags),
            "complexityTime":  self.complexity_time,
            "complexitySpace": self.complexity_space,
            "description":     self.description,
            "pseudocode":      list(self.pseudocode),
        }


def _card(key: AlgorithmType, label: str, family: Family, module, fn_name: Optional[str],
          requirement: Requirement, **kwargs) -> AlgoInfo:
    return AlgoInfo(
        key=key, label=label, family=family,
        fn=getattr(module, fn_name) if fn_name else None,
        requirement=requirement,
        pseudocode=module.PSEUDOCODE,
        line_map=getattr(module, "LINE_MAP", {}),
        **kwargs,
    )


A, F, R = AlgorithmType, Family, Requirement
_UI = Interaction.UI_DRIVEN


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[AlgorithmType, AlgoInfo] = {info.key: info for info in [

    # --- comparison sorts ---
    _card(A.BUBBLE_SORT, "Bubble Sort", F.SORTING, bubble_sort, "bubble_sort", R.ARRAY,
          tags=["comparison", "stable", "in-place"],
          complexity_time="O(n²)", complexity_space="O(1)",
          description="Swaps adjacent out-of-order pairs; stops after a pass with no swaps."),
    _card(A.SELECTION_SORT, "Selection Sort", F.SORTING, selection_sort, "selection_sort", R.ARRAY,
          tags=["comparison", "in-place"],
          complexity_time="O(n²)", complexity_space="O(1)",
          description="Selects the minimum of the unsorted suffix and swaps it into place."),
    _card(A.INSERTION_SORT, "Insertion Sort", F.SORTING, insertion_sort, "insertion_sort", R.ARRAY,
          tags=["comparison", "stable", "in-place", "adaptive"],
          complexity_time="O(n²)", complexity_space="O(1)",
          description="Sinks each new element left until it meets a smaller one."),
    _card(A.MERGE_SORT, "Merge Sort", F.SORTING, merge_sort, "merge_sort", R.ARRAY,
          tags=["comparison", "stable", "divide-and-conquer"],
          complexity_time="O(n log n)", complexity_space="O(n)",
          description="Sorts both halves recursively, then merges the sorted runs."),
    _card(A.QUICK_SORT, "Quick Sort", F.SORTING, quick_sort, "quick_sort", R.ARRAY,
          tags=["comparison", "in-place", "divide-and-conquer"],
          complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
          description="Lomuto partition around the last element, then recurse on both sides."),
    _card(A.HEAP_SORT, "Heap Sort", F.SORTING, heap_sort, "heap_sort", R.ARRAY,
          tags=["comparison", "in-place"],
          complexity_time="O(n log n)", complexity_space="O(1)",
          description="Builds a max-heap and repeatedly moves the root behind the heap."),
    _card(A.SHELL_SORT, "Shell Sort", F.SORTING, shell_sort, "shell_sort", R.ARRAY,
          tags=["comparison", "in-place"],
          complexity_time="O(n²) worst with n/2ᵏ gaps", complexity_space="O(1)",
          description="Insertion sort over shrinking gaps: n/2, n/4, …, 1."),

    # --- distribution sorts ---
    _card(A.COUNTING_SORT, "Counting Sort", F.SORTING, counting_sort, "counting_sort", R.ARRAY,
          tags=["distribution", "non-comparison"],
          complexity_time="O(n + k)", complexity_space="O(k)",
          description="Counts each value, then rewrites the array from the counts."),
    _card(A.RADIX_SORT, "Radix Sort", F.SORTING, radix_sort, "radix_sort", R.ARRAY,
          tags=["distribution", "non-comparison", "stable"],
          complexity_time="O(d · (n + b))", complexity_space="O(n + b)",
          description="Stable bucket pass per decimal digit, least significant first."),
    _card(A.BUCKET_SORT, "Bucket Sort", F.SORTING, bucket_sort, "bucket_sort", R.ARRAY,
          tags=["distribution"],
          complexity_time="O(n + k) avg, O(n²) worst", complexity_space="O(n + k)",
          description="Scatter into value-range buckets, gather, finish with insertion sort."),

    # --- searching ---
    _card(A.LINEAR_SEARCH, "Linear Search", F.SEARCHING, linear_search, "linear_search", R.ARRAY,
          randomized=True, tags=["search"],
          complexity_time="O(n)", complexity_space="O(1)",
          description="Probes every element from the left until the target turns up."),
    _card(A.BINARY_SEARCH, "Binary Search", F.SEARCHING, binary_search, "binary_search", R.ARRAY,
          randomized=True, tags=["search", "divide-and-conquer"],
          complexity_time="O(log n)", complexity_space="O(1)",
          description="Halves a sorted range around its midpoint each probe."),

    # --- pathfinding ---
    _card(A.DIJKSTRA, "Dijkstra's Algorithm", F.PATHFINDING, dijkstra, "dijkstra", R.GRID_ENDPOINTS,
          tags=["weighted", "shortest-path"],
          complexity_time="O((V + E) log V)", complexity_space="O(V)",
          description="Settles cells in order of distance. Optimal for non-negative weights."),
    _card(A.ASTAR, "A* Search", F.PATHFINDING, astar, "astar", R.GRID_ENDPOINTS,
          tags=["weighted", "shortest-path", "heuristic"],
          complexity_time="O((V + E) log V)", complexity_space="O(V)",
          description="Dijkstra guided by Manhattan distance. Optimal with an admissible heuristic."),
    _card(A.GREEDY_BFS, "Greedy Best-First", F.PATHFINDING, greedy_bfs, "greedy_bfs", R.GRID_ENDPOINTS,
          tags=["heuristic", "suboptimal"],
          complexity_time="O((V + E) log V)", complexity_space="O(V)",
          description="Chases the heuristic alone: fast, but the path is not guaranteed shortest."),
    _card(A.BFS, "Breadth-First Search", F.PATHFINDING, bfs, "bfs", R.GRID_ENDPOINTS,
          tags=["unweighted", "shortest-path", "traversal"],
          complexity_time="O(V + E)", complexity_space="O(V)",
          description="Explores layer by layer. Shortest path by move count."),
    _card(A.DFS, "Depth-First Search", F.PATHFINDING, dfs, "dfs", R.GRID_ENDPOINTS,
          tags=["unweighted", "traversal"],
          complexity_time="O(V + E)", complexity_space="O(V)",
          description="Dives deep before backtracking. Does NOT guarantee the shortest path."),
    _card(A.BIDIRECTIONAL, "Bidirectional BFS", F.PATHFINDING, bidirectional, "bidirectional", R.GRID_ENDPOINTS,
          tags=["unweighted", "bidirectional"],
          complexity_time="O(b^(d/2))", complexity_space="O(b^(d/2))",
          description="Two frontiers from start and finish meet in the middle."),
    _card(A.JPS, "Jump Point Search", F.PATHFINDING, jps, "jps", R.GRID_ENDPOINTS,
          tags=["shortest-path", "heuristic", "pruning"],
          complexity_time="O((V + E) log V) worst", complexity_space="O(V)",
          description="A* over jump points: straight runs are skipped unless a forced neighbour appears."),
    _card(A.BELLMAN_FORD, "Bellman-Ford", F.PATHFINDING, bellman_ford, "bellman_ford", R.GRID_ENDPOINTS,
          tags=["weighted", "shortest-path"],
          complexity_time="O(V · E)", complexity_space="O(V)",
          description="Relaxes every edge pass after pass until nothing improves."),
    _card(A.FLOYD_WARSHALL, "Floyd-Warshall", F.PATHFINDING, floyd_warshall, "floyd_warshall", R.GRID_ENDPOINTS,
          tags=["all-pairs", "shortest-path"],
          complexity_time="O(V³)", complexity_space="O(V²)",
          description="All-pairs shortest paths, one pivot cell at a time."),

    # --- mazes ---
    _card(A.RECURSIVE_DIVISION, "Recursive Division", F.MAZE, recursive_division, "recursive_division",
          R.GRID_ENDPOINTS, randomized=True, tags=["maze"],
          complexity_time="O(V log V)", complexity_space="O(log V)",
          description="Splits chambers with gapped walls until they are one cell thin."),
    _card(A.PRIMS_MAZE, "Prim's Maze", F.MAZE, prims_maze, "prims_maze", R.GRID_ENDPOINTS,
          randomized=True, tags=["maze", "spanning-tree"],
          complexity_time="O(V)", complexity_space="O(V)",
          description="Randomised Prim over the room lattice."),
    _card(A.BINARY_TREE_MAZE, "Binary Tree Maze", F.MAZE, binary_tree_maze, "binary_tree_maze",
          R.GRID_ENDPOINTS, randomized=True, tags=["maze", "spanning-tree"],
          complexity_time="O(V)", complexity_space="O(1)",
          description="Each room opens north or east at random."),

    # --- graph ---
    _card(A.PRIMS, "Prim's MST", F.GRAPH, prims, "prims", R.GRID,
          randomized=True, tags=["mst", "greedy"],
          complexity_time="O(E log V)", complexity_space="O(V)",
          description="Grows one tree from the start cell along the lightest leaving edge."),
    _card(A.KRUSKALS, "Kruskal's MST", F.GRAPH, kruskals, "kruskals", R.GRID,
          randomized=True, tags=["mst", "greedy", "union-find"],
          complexity_time="O(E log E)", complexity_space="O(V)",
          description="Takes edges lightest first, skipping any that would close a cycle."),
    _card(A.CONNECTED_COMPONENTS, "Connected Components", F.GRAPH, connected_components,
          "connected_components", R.GRID, tags=["traversal"],
          complexity_time="O(V + E)", complexity_space="O(V)",
          description="Floods each unlabelled region of open cells."),
    _card(A.SCC, "Strongly Connected Components", F.GRAPH, scc, None, R.NONE,
          interaction=_UI, operations={"run": scc.scc}, tags=["directed", "dfs"],
          complexity_time="O(V + E)", complexity_space="O(V)",
          description="Kosaraju: finish order on G, then DFS on the transpose."),
    _card(A.TOPOLOGICAL_SORT, "Topological Sort", F.GRAPH, topological_sort, None, R.NONE,
          interaction=_UI, operations={"run": topological_sort.topological_sort},
          tags=["directed", "dfs", "dag"],
          complexity_time="O(V + E)", complexity_space="O(V)",
          description="Reverse DFS finish order of a directed acyclic graph."),

    # --- backtracking ---
    _card(A.NQUEENS, "N-Queens", F.BACKTRACKING, n_queens, "n_queens", R.PRESET,
          tags=["backtracking"],
          complexity_time="O(n!)", complexity_space="O(n)",
          description="Places one queen per row, backtracking on attacks."),
    _card(A.SUDOKU, "Sudoku Solver", F.BACKTRACKING, sudoku, "sudoku", R.ARRAY,
          tags=["backtracking"],
          complexity_time="O(9^m)", complexity_space="O(m)",
          description="First empty cell, first digit that fits, undo on dead ends."),

    # --- dynamic programming ---
    _card(A.KNAPSACK, "0/1 Knapsack", F.DP, knapsack, "knapsack", R.PRESET,
          tags=["dp", "optimisation"],
          complexity_time="O(n · W)", complexity_space="O(n · W)",
          description="Best value per item prefix and capacity, then trace the chosen items."),
    _card(A.LCS, "Longest Common Subsequence", F.DP, lcs, "lcs", R.STRINGS,
          tags=["dp", "strings"],
          complexity_time="O(n · m)", complexity_space="O(n · m)",
          description="Prefix-pair table, then a traceback along the matches."),
    _card(A.LIS, "Longest Increasing Subsequence", F.DP, lis, "lis", R.ARRAY,
          tags=["dp"],
          complexity_time="O(n²)", complexity_space="O(n)",
          description="Best chain length ending at each element."),

    # --- strings ---
    _card(A.KMP, "Knuth-Morris-Pratt", F.STRING, kmp, "kmp", R.STRINGS,
          tags=["string-matching"],
          complexity_time="O(n + m)", complexity_space="O(m)",
          description="Failure table lets the text pointer only ever move forward."),
    _card(A.RABIN_KARP, "Rabin-Karp", F.STRING, rabin_karp, "rabin_karp", R.STRINGS,
          tags=["string-matching", "hashing"],
          complexity_time="O(n + m) avg, O(n · m) worst", complexity_space="O(1)",
          description="Rolling hash filters windows; hits are confirmed character by character."),

    # --- data structures ---
    _card(A.STACK, "Stack", F.DATA_STRUCTURE, stack, None, R.NONE, interaction=_UI,
          operations={"push": stack.push, "pop": stack.pop},
          tags=["linear", "lifo"], complexity_time="O(1)", complexity_space="O(n)",
          description="Last in, first out."),
    _card(A.QUEUE, "Queue", F.DATA_STRUCTURE, queue, None, R.NONE, interaction=_UI,
          operations={"enqueue": queue.enqueue, "dequeue": queue.dequeue},
          tags=["linear", "fifo"], complexity_time="O(1)", complexity_space="O(n)",
          description="First in, first out."),
    _card(A.LINKED_LIST, "Linked List", F.DATA_STRUCTURE, linked_list, None, R.NONE, interaction=_UI,
          operations={"insert_head": linked_list.insert_head, "insert_tail": linked_list.insert_tail,
                      "delete_head": linked_list.delete_head, "delete_tail": linked_list.delete_tail},
          tags=["linear"], complexity_time="O(1) head, O(n) tail", complexity_space="O(n)",
          description="Nodes chained by next pointers."),
    _card(A.MIN_HEAP, "Min Heap", F.DATA_STRUCTURE, heap, None, R.NONE, interaction=_UI,
          operations={"insert": partial(heap.insert, kind="min"),
                      "extract": partial(heap.extract_root, kind="min"),
                      "build": partial(heap.build, kind="min")},
          tags=["heap", "priority-queue"], complexity_time="O(log n)", complexity_space="O(n)",
          description="Every parent is no larger than its children."),
    _card(A.MAX_HEAP, "Max Heap", F.DATA_STRUCTURE, heap, None, R.NONE, interaction=_UI,
          operations={"insert": partial(heap.insert, kind="max"),
                      "extract": partial(heap.extract_root, kind="max"),
                      "build": partial(heap.build, kind="max")},
          tags=["heap", "priority-queue"], complexity_time="O(log n)", complexity_space="O(n)",
          description="Every parent is no smaller than its children."),

    # --- trees ---
    _card(A.BST, "Binary Search Tree", F.TREE, bst, None, R.NONE, interaction=_UI,
          operations={"insert": bst.insert, "delete": bst.delete},
          tags=["tree"], complexity_time="O(h)", complexity_space="O(n)",
          description="Smaller keys left, larger keys right; no rebalancing."),
    _card(A.AVL, "AVL Tree", F.TREE, avl, None, R.NONE, interaction=_UI,
          operations={"insert": avl.insert, "delete": avl.delete},
          tags=["tree", "self-balancing"], complexity_time="O(log n)", complexity_space="O(n)",
          description="BST that rotates whenever a subtree's heights differ by more than one."),
]}

_missing = [a.value for a in AlgorithmType if a not in REGISTRY]
if _missing:
    raise RuntimeError(f"Algorithms without a registry card: {_missing}")


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def parse_algorithm(key) -> Optional[AlgorithmType]:
    """AlgorithmType from an enum member or its string value; None if unknown."""
    if isinstance(key, AlgorithmType):
        return key
    try:
        return AlgorithmType(str(key).upper())
    except ValueError:
        return None


def get_algorithm(key) -> Optional[AlgoInfo]:
    """Return AlgoInfo by enum member or string key, or None."""
    algo = parse_algorithm(key)
    return REGISTRY.get(algo) if algo else None


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in declaration order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


def algorithms_by_family(family: Family) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.family is family]


__all__ = [
    "AlgorithmType",
    "Family",
    "Requirement",
    "Interaction",
    "AlgoInfo",
    "REGISTRY",
    "parse_algorithm",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "algorithms_by_family",
]
