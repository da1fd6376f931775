"""Unbalanced binary search tree of strings."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterator
from dataclasses import dataclass

DEFAULT_INSERT_COUNT = 200
DEFAULT_REMOVE_COUNT = 150
KEY_PREFIX = "Content "
FIRST_PRINTABLE = 33
LAST_PRINTABLE = 126


class DuplicateKeyError(KeyError):
    """Raised when inserting a key that is already in the tree."""


@dataclass
class _Node:
    key: str
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A binary search tree holding distinct string keys."""

    def __init__(self) -> None:
        self.root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def __iter__(self) -> Iterator[str]:
        return self.in_order()

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def insert(self, key: str) -> None:
        """Insert a key; raise DuplicateKeyError if it is already present."""
        if self.root is None:
            self.root = _Node(key)
            self._size += 1
            return
        node = self.root
        while True:
            if key == node.key:
                raise DuplicateKeyError(key)
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(key)
                    break
                node = node.right
        self._size += 1

    def remove(self, key: str) -> None:
        """Remove a key; raise KeyError if it is absent.

        A node with two children is replaced by the left-most node of its
        right subtree.
        """
        parent: _Node | None = None
        node = self.root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            raise KeyError(key)

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            if successor_parent is not node:
                successor_parent.left = successor.right
                successor.right = node.right
            successor.left = node.left
            replacement = successor

        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1

    def in_order(self) -> Iterator[str]:
        """Keys in left-parent-right order, i.e. sorted."""
        stack: list[_Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def pre_order(self) -> Iterator[str]:
        """Keys in parent-left-right order."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.key
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[str]:
        """Keys in left-right-parent order."""
        if self.root is None:
            return
        stack = [self.root]
        reversed_keys: list[str] = []
        while stack:
            node = stack.pop()
            reversed_keys.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_keys)

    def _format(self, empty_title: str, keys: Iterator[str]) -> str:
        if self.root is None:
            return f"[PRINT {empty_title} - TREE IS NULL]\n"
        lines = [f"[Quantity of tree nodes]: {self._size}"]
        lines.extend(f"> {key}" for key in keys)
        return "\n".join(lines) + "\n"

    def format_in_order(self) -> str:
        """Listing of the keys in order."""
        return self._format("IN ORDER", self.in_order())

    def format_pre_order(self) -> str:
        """Listing of the keys in pre-order."""
        return self._format("PRE ORDER", self.pre_order())

    def format_post_order(self) -> str:
        """Listing of the keys in post-order."""
        return self._format("POST ORDER", self.post_order())


def _random_key(rng: random.Random) -> str:
    return KEY_PREFIX + chr(rng.randint(FIRST_PRINTABLE, LAST_PRINTABLE))


def _insert_and_report(tree: BinarySearchTree, key: str) -> None:
    print(f"[ATTEMPTING INSERT] {key}")
    was_empty = not tree
    try:
        tree.insert(key)
    except DuplicateKeyError:
        print(f"[ERROR INSERTING - REPEATED CONTENT] {key}")
        return
    if was_empty:
        print(f"[OK INSERTED NEW ROOT] {key}")
    else:
        print(f"[OK INSERTED] {key} - current nodes: {len(tree)}")


def _remove_and_report(tree: BinarySearchTree, key: str) -> None:
    print(f"[ATTEMPTING REMOVE] {key}")
    if not tree:
        print(f"[ERROR REMOVING - EMPTY TREE] {key}")
        return
    try:
        tree.remove(key)
    except KeyError:
        print(f"[ERROR REMOVING - ELEMENT NOT FOUND] {key}")
    else:
        print(f"[OK REMOVED] {key} - current nodes: {len(tree)}")


def main(argv: list[str] | None = None) -> int:
    """Insert and remove random keys, then print the tree in three orders."""
    parser = argparse.ArgumentParser(description="Exercise a binary search tree.")
    parser.add_argument("--insert-count", type=int, default=DEFAULT_INSERT_COUNT)
    parser.add_argument("--remove-count", type=int, default=DEFAULT_REMOVE_COUNT)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    tree = BinarySearchTree()
    for key in [_random_key(rng) for _ in range(args.insert_count)]:
        _insert_and_report(tree, key)
    for _ in range(args.remove_count):
        _remove_and_report(tree, _random_key(rng))

    print("\n[IN ORDER]")
    print(tree.format_in_order(), end="")
    print("\n[PRE ORDER]")
    print(tree.format_pre_order(), end="")
    print("\n[POST ORDER]")
    print(tree.format_post_order(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())