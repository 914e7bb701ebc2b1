"""
traversal.py — Depth-First Tree Traversals
===========================================
Each returns the node ids in visiting order; the traversal player
animates them one at a time.
"""

from typing import Callable, Dict, List, Optional

from model.tree import TreeNode


def inorder(node: Optional[TreeNode]) -> List[str]:
    if node is None:
        return []
    return inorder(node.left) + [node.id] + inorder(node.right)


def preorder(node: Optional[TreeNode]) -> List[str]:
    if node is None:
        return []
    return [node.id] + preorder(node.left) + preorder(node.right)


def postorder(node: Optional[TreeNode]) -> List[str]:
    if node is None:
        return []
    return postorder(node.left) + postorder(node.right) + [node.id]


TRAVERSALS: Dict[str, Callable[[Optional[TreeNode]], List[str]]] = {
    "inorder":   inorder,
    "preorder":  preorder,
    "postorder": postorder,
}
