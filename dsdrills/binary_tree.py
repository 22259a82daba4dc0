"""Binary trees of integers: construction, measures and traversals."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Node:
    """A tree node with an optional left and right subtree."""

    left: Optional["Node"]
    item: int
    right: Optional["Node"]


Tree = Optional[Node]


def render(tree: Tree) -> str:
    """Draw the tree sideways: right subtree above, three spaces per level."""
    lines: List[str] = []

    def walk(node: Tree, depth: int) -> None:
        if node is None:
            return
        walk(node.right, depth + 1)
        lines.append(" " * (3 * depth) + str(node.item))
        walk(node.left, depth + 1)

    walk(tree, 0)
    return "".join(line + "\n" for line in lines)


def _value(rng: random.Random) -> int:
    return rng.randrange(100)


def complete(height: int, rng: random.Random) -> Tree:
    """Build a perfect tree of the given height with random items 0..99."""
    if height <= 0:
        return None
    left = complete(height - 1, rng)
    item = _value(rng)
    right = complete(height - 1, rng)
    return Node(left, item, right)


def balanced(size: int, rng: random.Random) -> Tree:
    """Build a tree of ``size`` nodes split as evenly as possible."""
    if size <= 0:
        return None
    item = _value(rng)
    left_size = size // 2
    right_size = size - left_size - 1
    return Node(balanced(left_size, rng), item, balanced(right_size, rng))


def random_tree(size: int, rng: random.Random) -> Tree:
    """Build a root whose two subtrees are balanced trees of ``size - 1`` nodes."""
    if size <= 0:
        return None
    item = _value(rng)
    return Node(balanced(size - 1, rng), item, balanced(size - 1, rng))


def random_split(size: int, rng: random.Random) -> Tree:
    """Build a tree of ``size`` nodes, sharing them randomly between the sides."""
    if size <= 0:
        return None
    item = _value(rng)
    remaining = size - 1
    left_size = rng.randrange(remaining + 1) if remaining > 0 else 0
    return Node(
        random_split(left_size, rng), item, random_split(remaining - left_size, rng)
    )


def count_nodes(tree: Tree) -> int:
    if tree is None:
        return 0
    return 1 + count_nodes(tree.left) + count_nodes(tree.right)


def total(tree: Tree) -> int:
    """Sum of all items in the tree."""
    if tree is None:
        return 0
    return tree.item + total(tree.left) + total(tree.right)


def leaves(tree: Tree) -> int:
    """Number of nodes with no children."""
    if tree is None:
        return 0
    if tree.left is None and tree.right is None:
        return 1
    return leaves(tree.left) + leaves(tree.right)


def height(tree: Tree) -> int:
    """Number of nodes on the longest path from the root down."""
    if tree is None:
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def clone(tree: Tree) -> Tree:
    """Return a structural copy of the tree."""
    if tree is None:
        return None
    return Node(clone(tree.left), tree.item, clone(tree.right))


def contains(item: int, tree: Tree) -> bool:
    if tree is None:
        return False
    return tree.item == item or contains(item, tree.left) or contains(item, tree.right)


def preorder(tree: Tree) -> List[int]:
    if tree is None:
        return []
    return [tree.item] + preorder(tree.left) + preorder(tree.right)


def inorder(tree: Tree) -> List[int]:
    if tree is None:
        return []
    return inorder(tree.left) + [tree.item] + inorder(tree.right)


def postorder(tree: Tree) -> List[int]:
    if tree is None:
        return []
    return postorder(tree.left) + postorder(tree.right) + [tree.item]