"""
bst.py — Unbalanced Binary Search Tree
=======================================
Textbook recursive insert and delete.  Duplicate keys are ignored.

Two-child delete copies the in-order successor's value into the doomed
node and deletes the successor from the right subtree instead.
Heights are kept up to date here too, so the renderer can show them
and the AVL code can share the helpers.
"""

from typing import List, Optional

from model.tree import TreeNode, height


PSEUDOCODE: List[str] = [
    "insert(node, x):",                             # 0
    "  if node = null: return Node(x)",             # 1
    "  if x < node.value: node.left ← insert(node.left, x)",    # 2
    "  else if x > node.value: node.right ← insert(node.right, x)",  # 3
    "delete(node, x):",                             # 4
    "  find x; if ≤ 1 child: splice it out",        # 5
    "  else: node.value ← min(node.right); delete that from node.right",  # 6
]


def update_height(node: TreeNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def min_node(node: TreeNode) -> TreeNode:
    while node.left:
        node = node.left
    return node


def insert(root: Optional[TreeNode], value: int) -> TreeNode:
    if root is None:
        return TreeNode(value)
    if value < root.value:
        root.left = insert(root.left, value)
    elif value > root.value:
        root.right = insert(root.right, value)
    update_height(root)
    return root


def delete(root: Optional[TreeNode], value: int) -> Optional[TreeNode]:
    if root is None:
        return None
    if value < root.value:
        root.left = delete(root.left, value)
    elif value > root.value:
        root.right = delete(root.right, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor  = min_node(root.right)
        root.value = successor.value
        root.right = delete(root.right, successor.value)
    update_height(root)
    return root


def find(root: Optional[TreeNode], value: int) -> Optional[TreeNode]:
    while root is not None and root.value != value:
        root = root.left if value < root.value else root.right
    return root
