"""
model/
------
Domain vocabulary shared by the algorithms, the replay engine and the
HTTP host.

    from model import Grid, GridNode, NodeStatus
    from model import TreeNode, DirectedGraph, DPTable
"""

from model.grid  import Grid, GridNode, NodeStatus, Cell, DIRECTIONS
from model.tree  import TreeNode
from model.graph import DirectedGraph, GraphNode, GraphEdge
from model.dp    import DPTable, knapsack_table, lcs_table

__all__ = [
    "Grid",          "GridNode",   "NodeStatus", "Cell", "DIRECTIONS",
    "TreeNode",
    "DirectedGraph", "GraphNode",  "GraphEdge",
    "DPTable",       "knapsack_table", "lcs_table",
]
