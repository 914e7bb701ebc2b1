"""
tree.py — Binary Tree Node
===========================
Shared by the BST and AVL operations and by the traversal player.

`id` is independent of `value`: values can repeat across a session and
rotations move values between positions, but a node keeps its id for
its whole life so the renderer can animate it smoothly.
"""

from typing import Iterator, List, Optional
import uuid


class TreeNode:
    """
    Attributes:
        id      : Stable identity.
        value   : Key stored at this node.
        left    : Owned left subtree (or None).
        right   : Owned right subtree (or None).
        height  : Height of the subtree rooted here (leaf = 1).
        x, y    : Layout coordinates, recomputed after each structural change.
    """

    __slots__ = ("id", "value", "left", "right", "height", "x", "y")

    def __init__(self, value: int, node_id: Optional[str] = None):
        self.id:     str                  = node_id or str(uuid.uuid4())[:8]
        self.value:  int                  = value
        self.left:   Optional["TreeNode"] = None
        self.right:  Optional["TreeNode"] = None
        self.height: int                  = 1
        self.x:      float                = 0.0
        self.y:      float                = 0.0

    def __iter__(self) -> Iterator["TreeNode"]:
        """Pre-order walk over this subtree."""
        yield self
        if self.left:
            yield from self.left
        if self.right:
            yield from self.right

    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "value":  self.value,
            "height": self.height,
            "x":      self.x,
            "y":      self.y,
            "left":   self.left.to_dict() if self.left else None,
            "right":  self.right.to_dict() if self.right else None,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["TreeNode"]:
        if data is None:
            return None
        node = cls(data["value"], node_id=data["id"])
        node.height = data.get("height", 1)
        node.x      = data.get("x", 0.0)
        node.y      = data.get("y", 0.0)
        node.left   = cls.from_dict(data.get("left"))
        node.right  = cls.from_dict(data.get("right"))
        return node

    def __repr__(self) -> str:
        return f"TreeNode(id={self.id!r}, value={self.value})"


def height(node: Optional[TreeNode]) -> int:
    return node.height if node else 0


def size(node: Optional[TreeNode]) -> int:
    return sum(1 for _ in node) if node else 0


def inorder_values(node: Optional[TreeNode]) -> List[int]:
    if node is None:
        return []
    return inorder_values(node.left) + [node.value] + inorder_values(node.right)
