"""Self-balancing AVL tree of integers."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_INSERT_COUNT = 1000
RANDOM_LOW = -5000
RANDOM_HIGH = 5000


@dataclass
class AvlNode:
    """A tree node holding a value and the height of the subtree it roots."""

    value: int
    height: int = 1
    left: AvlNode | None = None
    right: AvlNode | None = None


def _height(node: AvlNode | None) -> int:
    return node.height if node is not None else 0


def _balance(node: AvlNode) -> int:
    return _height(node.right) - _height(node.left)


def _update_height(node: AvlNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_left(root: AvlNode) -> AvlNode:
    axis = root.right
    assert axis is not None
    logger.debug("[ROTATING LEFT] root: %d - axis: %d", root.value, axis.value)
    root.right = axis.left
    axis.left = root
    _update_height(root)
    _update_height(axis)
    return axis


def _rotate_right(root: AvlNode) -> AvlNode:
    axis = root.left
    assert axis is not None
    logger.debug("[ROTATING RIGHT] root: %d - axis: %d", root.value, axis.value)
    root.left = axis.right
    axis.right = root
    _update_height(root)
    _update_height(axis)
    return axis


def _rebalance(node: AvlNode) -> AvlNode:
    balance = _balance(node)
    if balance > 1:
        assert node.right is not None
        if _balance(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if balance < -1:
        assert node.left is not None
        if _balance(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _insert(node: AvlNode | None, value: int) -> AvlNode:
    if node is None:
        return AvlNode(value)
    # Equal values go to the right subtree.
    if value >= node.value:
        node.right = _insert(node.right, value)
    else:
        node.left = _insert(node.left, value)
    _update_height(node)
    return _rebalance(node)


class AvlTree:
    """An AVL tree that keeps duplicates and stays height-balanced."""

    def __init__(self) -> None:
        self.root: AvlNode | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return self.in_order()

    def insert(self, value: int) -> None:
        """Insert a value, rebalancing on the way back up."""
        self.root = _insert(self.root, value)
        self._size += 1

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self.root)

    def _nodes_in_order(self) -> Iterator[AvlNode]:
        stack: list[AvlNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _nodes_pre_order(self) -> Iterator[AvlNode]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def in_order(self) -> Iterator[int]:
        """Values in left-parent-right order, i.e. sorted."""
        return (node.value for node in self._nodes_in_order())

    def pre_order(self) -> Iterator[int]:
        """Values in parent-left-right order."""
        return (node.value for node in self._nodes_pre_order())

    def _format(self, title: str, nodes: Iterator[AvlNode]) -> str:
        lines = [
            "",
            f"[PRINT {title}]",
            f"[Quantity of tree nodes]: {self._size}",
            f"[Height of tree]: {self.height()}",
        ]
        lines.extend(
            f"> {node.value} [height: {node.height}] [{number}]"
            for number, node in enumerate(nodes, start=1)
        )
        return "\n".join(lines) + "\n"

    def format_in_order(self) -> str:
        """Report listing the nodes in order with their heights."""
        if self.root is None:
            return "[PRINT IN ORDER - TREE IS NULL]\n"
        return self._format("IN ORDER", self._nodes_in_order())

    def format_pre_order(self) -> str:
        """Report listing the nodes in pre-order with their heights."""
        if self.root is None:
            return "[PRINT PRE ORDER - TREE IS NULL]\n"
        return self._format("PRE ORDER", self._nodes_pre_order())

    def format_graphically(self) -> str:
        """Sketch of the root and its direct children."""
        root = self.root
        if root is None:
            return "[PRINT GRAPHICALLY - TREE IS NULL]\n"
        spaces = " " * self._size
        lines = [f"[Quantity of tree nodes]: {self._size}", f"  {spaces}{root.value}"]
        if root.left is not None and root.right is not None:
            lines.append(f" {spaces}/ \\ ")
            lines.append(f"{spaces}{root.left.value}   {root.right.value}")
        elif root.right is not None:
            lines.append(f" {spaces}  \\ ")
            lines.append(f"{spaces} {spaces}{root.right.value} ")
        elif root.left is not None:
            lines.append(f" {spaces}/ ")
            lines.append(f"{spaces}{root.left.value} ")
        return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Insert random integers into a tree and print it."""
    parser = argparse.ArgumentParser(description="Fill an AVL tree with random integers.")
    parser.add_argument("--count", type=int, default=DEFAULT_INSERT_COUNT)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    tree = AvlTree()
    for _ in range(args.count):
        value = rng.randint(RANDOM_LOW, RANDOM_HIGH)
        print(f"[ATTEMPTING INSERT] {value}")
        tree.insert(value)
        print(f"[OK INSERTED] {value} - # of current nodes: {len(tree)}")
    print(tree.format_in_order(), end="")
    print(tree.format_graphically(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())