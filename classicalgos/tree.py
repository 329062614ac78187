"""Binary tree nodes and maximum depth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def max_depth(root: TreeNode | None) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return depth