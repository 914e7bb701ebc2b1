"""
layout.py — Tree Layout Pass
=============================
Root centred at the top; each level drops by a fixed height and halves
the horizontal offset between parent and child.  Deterministic: the
same shape always gets the same coordinates.
"""

from typing import Optional

from model.tree import TreeNode
from model.presets import TREE_CANVAS_WIDTH, TREE_INITIAL_Y, TREE_LEVEL_HEIGHT


def layout(root: Optional[TreeNode], width: float = TREE_CANVAS_WIDTH) -> Optional[TreeNode]:
    if root is not None:
        _place(root, width / 2, TREE_INITIAL_Y, width / 4)
    return root


def _place(node: TreeNode, x: float, y: float, offset: float) -> None:
    node.x = x
    node.y = y
    if node.left:
        _place(node.left, x - offset, y + TREE_LEVEL_HEIGHT, offset / 2)
    if node.right:
        _place(node.right, x + offset, y + TREE_LEVEL_HEIGHT, offset / 2)
