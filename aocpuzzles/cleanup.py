"""Camp cleanup: section assignments that contain or overlap each other."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from pathlib import Path

Assignment = tuple[int, int]

DEFAULT_INPUT = "04_12.txt"


def parse_assignment(text: str) -> Assignment:
    """Parse a section range such as ``"2-4"`` into ``(2, 4)``."""
    parts = text.split("-")
    if len(parts) < 2:
        raise ValueError(f"invalid assignment: {text!r}")
    start, end = (int(part) for part in parts[:2])
    if start < 0 or end < 0:
        raise ValueError(f"negative section in assignment: {text!r}")
    return start, end


def parse_pair(line: str) -> tuple[Assignment, Assignment]:
    """Parse a line such as ``"2-4,6-8"`` into the two elves' assignments."""
    parts = line.split(",")
    if len(parts) < 2:
        raise ValueError(f"invalid pair: {line!r}")
    return parse_assignment(parts[0]), parse_assignment(parts[1])


def ordered(first: Assignment, second: Assignment) -> tuple[Assignment, Assignment]:
    """Return the assignments with the earliest start first.

    When both start on the same section, the longer one comes first.
    """
    if first[0] > second[0] or (first[0] == second[0] and first[1] < second[1]):
        return second, first
    return first, second


def fully_contains(early: Assignment, late: Assignment) -> bool:
    """Tell whether the ordered ``early`` assignment contains ``late``."""
    return late[0] <= early[1] and early[1] >= late[1]


def overlaps(early: Assignment, late: Assignment) -> bool:
    """Tell whether the ordered assignments share at least one section."""
    return late[0] <= early[1]


def _count(lines: Iterable[str], predicate) -> int:
    return sum(1 for line in lines if predicate(*ordered(*parse_pair(line))))


def count_fully_contained(lines: Iterable[str]) -> int:
    """Count the pairs in which one assignment contains the other."""
    return _count(lines, fully_contains)


def count_overlapping(lines: Iterable[str]) -> int:
    """Count the pairs whose assignments overlap."""
    return _count(lines, overlaps)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Camp cleanup puzzle")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    lines = Path(args.input).read_text(encoding="utf-8").splitlines()

    print("Puzzle du 04/12 Partie 1")
    print(f"Total d'assignement se superposant : {count_fully_contained(lines)}")
    print("Puzzle du 04/12 Partie 2")
    print(f"Total d'assignement se superposant : {count_overlapping(lines)}")


if __name__ == "__main__":
    main()