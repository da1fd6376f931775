"""Last-in, first-out stack."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_DOCUMENT_COUNT = 20


class StackEmptyError(IndexError):
    """Raised when taking from an empty stack."""


class Stack(Generic[T]):
    """A stack; iteration runs from top to bottom."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def push(self, item: T) -> None:
        """Put an item on top."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def format(self) -> str:
        """Listing of the stack from top to bottom."""
        if not self._items:
            return "[STACK IS EMPTY]\n"
        lines = [f"[STACK SIZE: {len(self)}]", ">>>[STACK TOP]"]
        lines.extend(f">{item}" for item in self)
        lines.append(">>>[STACK BOTTOM]")
        return "\n".join(lines) + "\n"


def _pop_and_report(stack: Stack[str]) -> None:
    try:
        stack.pop()
    except StackEmptyError:
        print("[ERROR POPPING - STACK IS EMPTY]")
    else:
        print("[POPPED FROM STACK]")


def main(argv: list[str] | None = None) -> int:
    """Push a batch of documents, pop them all and show the stack along the way."""
    parser = argparse.ArgumentParser(description="Exercise a stack of documents.")
    parser.add_argument("--count", type=int, default=DEFAULT_DOCUMENT_COUNT)
    args = parser.parse_args(argv)

    documents = [f"Document {number}" for number in range(1, args.count + 1)]
    stack: Stack[str] = Stack()
    print(stack.format(), end="")
    for document in documents:
        stack.push(document)
        print("[INSERTED TO STACK]")
    print(stack.format(), end="")
    for _ in range(5):
        _pop_and_report(stack)
    print(stack.format(), end="")
    for _ in documents:
        _pop_and_report(stack)
    print(stack.format(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())