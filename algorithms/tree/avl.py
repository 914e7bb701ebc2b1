"""
avl.py — AVL Tree
==================
BST insert/delete followed by a bottom-up rebalance on the way out of
the recursion.  Balance factor = height(left) − height(right); when it
leaves [−1, 1] one of four cases applies:

    LL  bf > 1,  left child bf ≥ 0   → rotate right
    LR  bf > 1,  left child bf < 0   → rotate left(child), rotate right
    RR  bf < −1, right child bf ≤ 0  → rotate left
    RL  bf < −1, right child bf > 0  → rotate right(child), rotate left

Rotations re-parent existing nodes (ids travel with them) and re-derive
the two affected heights, lower node first.

Pass a list as `rotations` to collect the case names applied.
"""

from typing import List, Optional

from model.tree import TreeNode, height
from algorithms.tree.bst import update_height, min_node


PSEUDOCODE: List[str] = [
    "insert(node, x):",                             # 0
    "  BST insert into the proper subtree",         # 1
    "  update height(node)",                        # 2
    "  bf ← height(left) − height(right)",          # 3
    "  if bf > 1 and bf(left) ≥ 0: rotateRight",    # 4
    "  if bf > 1 and bf(left) < 0: rotateLeft(left); rotateRight",   # 5
    "  if bf < −1 and bf(right) ≤ 0: rotateLeft",   # 6
    "  if bf < −1 and bf(right) > 0: rotateRight(right); rotateLeft",  # 7
]


def balance(node: Optional[TreeNode]) -> int:
    return height(node.left) - height(node.right) if node else 0


def rotate_right(y: TreeNode) -> TreeNode:
    x = y.left
    y.left  = x.right
    x.right = y
    update_height(y)
    update_height(x)
    return x


def rotate_left(x: TreeNode) -> TreeNode:
    y = x.right
    x.right = y.left
    y.left  = x
    update_height(x)
    update_height(y)
    return y


def rebalance(node: TreeNode, rotations: Optional[List[str]] = None) -> TreeNode:
    update_height(node)
    bf = balance(node)
    case = None
    if bf > 1:
        if balance(node.left) < 0:
            node.left = rotate_left(node.left)
            case = "LR"
        else:
            case = "LL"
        node = rotate_right(node)
    elif bf < -1:
        if balance(node.right) > 0:
            node.right = rotate_right(node.right)
            case = "RL"
        else:
            case = "RR"
        node = rotate_left(node)
    if case and rotations is not None:
        rotations.append(case)
    return node


def insert(root: Optional[TreeNode], value: int, rotations: Optional[List[str]] = None) -> TreeNode:
    if root is None:
        return TreeNode(value)
    if value < root.value:
        root.left = insert(root.left, value, rotations)
    elif value > root.value:
        root.right = insert(root.right, value, rotations)
    else:
        return root
    return rebalance(root, rotations)


def delete(root: Optional[TreeNode], value: int, rotations: Optional[List[str]] = None) -> Optional[TreeNode]:
    if root is None:
        return None
    if value < root.value:
        root.left = delete(root.left, value, rotations)
    elif value > root.value:
        root.right = delete(root.right, value, rotations)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor  = min_node(root.right)
        root.value = successor.value
        root.right = delete(root.right, successor.value, rotations)
    return rebalance(root, rotations)


def is_balanced(node: Optional[TreeNode]) -> bool:
    if node is None:
        return True
    if abs(height(node.left) - height(node.right)) > 1:
        return False
    return is_balanced(node.left) and is_balanced(node.right)
