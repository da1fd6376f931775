"""Unbounded FIFO queue."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PEOPLE_COUNT = 17


class LinkedQueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


class LinkedQueue(Generic[T]):
    """A queue with no size limit."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def enqueue(self, item: T) -> None:
        """Add an item at the end."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if not self._items:
            raise LinkedQueueEmptyError("queue is empty")
        return self._items.popleft()

    def format(self) -> str:
        """Listing of the queue from front to back."""
        if not self._items:
            return "[QUEUE IS EMPTY]\n"
        body = "".join(f"'{item}' -> " for item in self._items)
        return f"[QUEUE SIZE: {len(self)}]\n>>>[QUEUE START]\n{body}\n>>>[QUEUE END]\n"


def _enqueue_and_report(queue: LinkedQueue[str], item: str) -> None:
    queue.enqueue(item)
    print(f"[INSERTED TO QUEUE] {item}")


def _dequeue_and_report(queue: LinkedQueue[str]) -> None:
    try:
        item = queue.dequeue()
    except LinkedQueueEmptyError:
        print("[ERROR DEQUEUING - QUEUE IS EMPTY]")
    else:
        print(f"[DEQUEUED] {item}")


def main(argv: list[str] | None = None) -> int:
    """Run a fixed sequence of queue operations over numbered waiters."""
    parser = argparse.ArgumentParser(description="Exercise an unbounded queue.")
    parser.add_argument("--count", type=int, default=DEFAULT_PEOPLE_COUNT)
    args = parser.parse_args(argv)
    if args.count < 2:
        parser.error("--count must be at least 2")

    people = [f"WAITER {number}" for number in range(1, args.count + 1)]
    queue: LinkedQueue[str] = LinkedQueue()

    print(queue.format(), end="")
    _enqueue_and_report(queue, people[0])
    _dequeue_and_report(queue)
    print(queue.format(), end="")

    _enqueue_and_report(queue, people[0])
    _enqueue_and_report(queue, people[1])
    _dequeue_and_report(queue)
    _dequeue_and_report(queue)
    print(queue.format(), end="")

    for person in people:
        _enqueue_and_report(queue, person)
    print(queue.format(), end="")

    for _ in range(5):
        _dequeue_and_report(queue)
    print(queue.format(), end="")

    for _ in people:
        _dequeue_and_report(queue)
    print(queue.format(), end="")

    _enqueue_and_report(queue, people[0])
    _enqueue_and_report(queue, people[1])
    print(queue.format(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())