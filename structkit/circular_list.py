"""Doubly linked circular list of unique names driven by text commands."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator

DEFAULT_INPUT = "InputExample.txt"
DEFAULT_OUTPUT = "output.txt"


class CircularList:
    """A ring of distinct names; the head is the first name added that remains."""

    def __init__(self) -> None:
        self._names: list[str] = []

    def __len__(self) -> int:
        return len(self._names)

    def __bool__(self) -> bool:
        return bool(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def add(self, name: str) -> None:
        """Append a name before the head; raise ValueError if it is present."""
        if name in self._names:
            raise ValueError(f"name already in list: {name!r}")
        self._names.append(name)

    def remove(self, name: str) -> None:
        """Remove a name; raise KeyError if it is absent."""
        try:
            self._names.remove(name)
        except ValueError:
            raise KeyError(name) from None

    def neighbours(self, name: str) -> tuple[str, str]:
        """The names before and after the given one; raise KeyError if absent."""
        try:
            index = self._names.index(name)
        except ValueError:
            raise KeyError(name) from None
        count = len(self._names)
        return self._names[index - 1], self._names[(index + 1) % count]

    def format(self) -> str:
        """One-line picture of the ring, starting at the head."""
        if not self._names:
            return "[EMPTY LIST]\n"
        body = "".join(f"{name}, " for name in self._names)
        return f"{self._names[-1]} <- [{body}] -> {self._names[0]}\n"


def _parse(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    for line in lines:
        parts = line.strip().split(maxsplit=1)
        if not parts:
            continue
        command = parts[0]
        name = parts[1].strip() if len(parts) > 1 else ""
        yield command, name


def _apply(ring: CircularList, command: str, name: str) -> str | None:
    if command == "ADD":
        was_empty = not ring
        try:
            ring.add(name)
        except ValueError:
            return f"[ERROR ADDING - ALREADY EXIST] ADD {name}"
        if was_empty:
            return f"[OK ADDED - CREATED NEW HEAD] ADD {name}"
        return f"[OK ADDED] ADD {name}"
    if command == "SHOW":
        if not ring:
            return f"[ERROR SHOW - EMPTY LIST] ? <- {name} -> ?"
        try:
            before, after = ring.neighbours(name)
        except KeyError:
            return f"[ERROR SHOW - NOT FOUND] ? <- {name} -> ?"
        return f"[OK SHOWING] {before} <- {name} -> {after}"
    if command == "REMOVE":
        try:
            ring.remove(name)
        except KeyError:
            return f"[ERROR REMOVING - NOT FOUND] REMOVE {name}"
        if not ring:
            return f"[OK REMOVING - REMOVED HEAD] REMOVE {name}"
        return f"[OK REMOVING] REMOVE {name}"
    return None


def run_commands(lines: Iterable[str]) -> str:
    """Apply ADD, SHOW and REMOVE commands and return the report text.

    The ring is written out before every command, followed by the
    command's result.
    """
    ring = CircularList()
    out: list[str] = []
    for command, name in _parse(lines):
        out.append(ring.format())
        result = _apply(ring, command, name)
        if result is not None:
            out.append(result + "\n")
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    """Read commands from a file and write the report to another."""
    parser = argparse.ArgumentParser(description="Run list commands from a file.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    with open(args.input, encoding="utf-8") as source:
        lines = source.readlines()
    for command, name in _parse(lines):
        if command in ("ADD", "SHOW", "REMOVE"):
            print(f"[{command}] {name} ")
    report = run_commands(lines)
    with open(args.output, "w", encoding="utf-8") as target:
        target.write(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())