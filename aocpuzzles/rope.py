"""Rope bridge: knots of a rope following its head across a grid."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT = "09_12.txt"


@dataclass(frozen=True)
class Point:
    """A position on the grid; y grows upwards."""

    x: int = 0
    y: int = 0

    def add(self, other: Point) -> Point:
        """Return this point moved by ``other``."""
        return Point(self.x + other.x, self.y + other.y)

    def is_adjacent_to(self, other: Point) -> bool:
        """Tell whether the points touch, diagonally or overlapping included."""
        return abs(self.x - other.x) <= 1 and abs(self.y - other.y) <= 1


DIRECTIONS = {
    "L": Point(-1, 0),
    "R": Point(1, 0),
    "U": Point(0, 1),
    "D": Point(0, -1),
}


def parse_move(line: str) -> tuple[Point, int]:
    """Parse a line such as ``"R 4"`` into a unit direction and a step count."""
    parts = line.split()
    if len(parts) < 2:
        raise ValueError(f"invalid move: {line!r}")
    direction = DIRECTIONS.get(parts[0])
    if direction is None:
        raise ValueError(f"Direction non reconnue : {parts[0]}")
    steps = int(parts[1])
    if steps < 0:
        raise ValueError(f"negative step count: {line!r}")
    return direction, steps


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _follow(knot: Point, leader: Point) -> Point:
    if knot.is_adjacent_to(leader):
        return knot
    return knot.add(Point(_sign(leader.x - knot.x), _sign(leader.y - knot.y)))


def tail_positions(lines: Iterable[str], knots: int = 2) -> set[Point]:
    """Every position visited by the last knot of a rope with ``knots`` knots."""
    if knots < 2:
        raise ValueError("a rope needs at least two knots")
    rope = [Point()] * knots
    visited = {rope[-1]}
    for line in lines:
        direction, steps = parse_move(line)
        for _ in range(steps):
            moved = [rope[0].add(direction)]
            for knot in rope[1:]:
                moved.append(_follow(knot, moved[-1]))
            rope = moved
            visited.add(rope[-1])
    return visited


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Rope bridge puzzle")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    lines = Path(args.input).read_text(encoding="utf-8").splitlines()

    print("Puzzle du 09/12 Partie 1")
    print(
        "Nombre de positions visitées au moins une fois : "
        f"{len(tail_positions(lines, 2))}"
    )
    print("Puzzle du 09/12 Partie 2")
    print(
        "Nombre de positions visitées au moins une fois : "
        f"{len(tail_positions(lines, 10))}"
    )


if __name__ == "__main__":
    main()